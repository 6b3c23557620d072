#!/usr/bin/env python3
# -*- coding: utf-8 -*-
""" tests for the thin lens element

.. codeauthor: Michael J. Hayford
"""

import math
import pytest
import numpy as np
import numpy.testing as npt
from pytest import approx

from paraxlab.elem.lens import Lens
from paraxlab.optical.modelerror import DegenerateLensError, ModelError
import paraxlab.optical.model_constants as mc


def test_lens_defaults():
    lens = Lens(100, 25)
    assert lens.focal_length == 100.
    assert isinstance(lens.focal_length, float)
    assert lens.z == 25.
    assert lens.semi_diameter == mc.DEFAULT_SEMI_DIAMETER
    assert lens.id is None
    assert lens.optical_power == approx(0.01)


def test_refraction_matrix():
    lens = Lens(-50., 0.)
    npt.assert_allclose(lens.refraction_matrix(),
                        np.array([[1., 0.], [0.02, 1.]]))


def test_zero_focal_length_rejected():
    with pytest.raises(DegenerateLensError):
        Lens(0., 10.)

    lens = Lens(100., 10.)
    with pytest.raises(DegenerateLensError) as exc_info:
        lens.focal_length = 0.
    assert exc_info.value.lens is lens
    # the lens is unchanged by the rejected edit
    assert lens.focal_length == 100.

    # usable as a plain ValueError by callers
    with pytest.raises(ValueError):
        lens.focal_length = math.nan
    with pytest.raises(ModelError):
        lens.focal_length = 'abc'


def test_semi_diameter_must_be_positive():
    with pytest.raises(ValueError):
        Lens(100., 0., semi_diameter=0.)
    with pytest.raises(ValueError):
        Lens(100., 0., semi_diameter=-5.)


def test_clears_aperture():
    lens = Lens(100., 0., semi_diameter=10.)
    assert lens.clears_aperture(10.)
    assert lens.clears_aperture(-10.)
    assert not lens.clears_aperture(10.0001)
    assert not lens.clears_aperture(-12.)


def test_repr_and_listing():
    lens = Lens(100., 5., label='L1')
    assert repr(lens) == "Lens(lbl='L1', focal_length=100.0, z=5.0, sd=50.0)"
    assert "focal_length=100.0" in lens.listobj_str()
    assert repr(Lens(20., 1.)) == "Lens(focal_length=20.0, z=1.0, sd=50.0)"


def test_position_is_a_finite_float():
    lens = Lens(100., "50")
    assert lens.z == 50.
    assert isinstance(lens.z, float)

    lens.z = 12
    assert lens.z == 12.
    with pytest.raises(ValueError):
        lens.z = math.nan
    with pytest.raises(ValueError):
        lens.z = -math.inf
    with pytest.raises(ValueError):
        lens.z = 'abc'
    assert lens.z == 12.


def test_infinite_focal_length_is_a_plate():
    lens = Lens(math.inf, 0.)
    assert lens.optical_power == 0.
    npt.assert_array_equal(lens.refraction_matrix(), np.identity(2))
