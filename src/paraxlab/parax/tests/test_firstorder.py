#!/usr/bin/env python3
# -*- coding: utf-8 -*-
""" tests for system matrix, cardinal points and image calculations

.. codeauthor: Michael J. Hayford
"""

import math
import unittest
import pytest
import numpy as np
import numpy.testing as npt
from pytest import approx

from paraxlab.elem.lens import Lens
from paraxlab.parax.firstorder import (translation_matrix, refraction_matrix,
                                       system_matrix, compute_cardinal_points,
                                       compute_image, list_cardinal_points,
                                       list_image)


def test_element_matrices():
    npt.assert_array_equal(translation_matrix(25.), [[1., 25.], [0., 1.]])
    npt.assert_allclose(refraction_matrix(50.), [[1., 0.], [-0.02, 1.]])


def test_empty_system():
    assert system_matrix([]) is None
    assert compute_cardinal_points([]) is None
    assert compute_image([], -100.) is None


def test_single_lens_matrix():
    m = system_matrix([Lens(100., 40.)])
    npt.assert_allclose(m, [[1., 0.], [-0.01, 1.]])


def test_matrix_composition_order():
    f1, f2, d = 80., -40., 30.
    lenses = [Lens(f2, d), Lens(f1, 0.)]
    m = system_matrix(lenses)
    truth = refraction_matrix(f2) @ translation_matrix(d) @ refraction_matrix(f1)
    npt.assert_allclose(m, truth)
    assert np.linalg.det(m) == approx(1.)


@pytest.mark.parametrize("f, z0", [(100., 0.), (-75., 30.), (12.5, -40.)])
def test_single_lens_cardinal_points(f, z0):
    cp = compute_cardinal_points([Lens(f, z0)])
    assert cp.efl == approx(f)
    assert cp.h == approx(z0)
    assert cp.h_prime == approx(z0)
    assert cp.bfl == approx(f)
    assert cp.ffl == approx(-f)
    assert cp.f_prime == approx(z0 + f)
    assert cp.f == approx(z0 - f)


class TwoLensTestCase(unittest.TestCase):
    def setUp(self):
        self.f1 = 100.
        self.f2 = 100.
        self.d = 50.
        self.lenses = [Lens(self.f1, 0.), Lens(self.f2, self.d)]

    def test_system_matrix(self):
        m = system_matrix(self.lenses)
        npt.assert_allclose(m, [[0.5, 50.], [-0.015, 0.5]])

    def test_two_lens_power(self):
        cp = compute_cardinal_points(self.lenses)
        power = 1/self.f1 + 1/self.f2 - self.d/(self.f1*self.f2)
        self.assertAlmostEqual(cp.power, power)
        self.assertAlmostEqual(cp.power, 0.015)
        self.assertAlmostEqual(cp.efl, 1/power)
        self.assertAlmostEqual(cp.efl, 66.6666666667, places=8)

    def test_principal_planes(self):
        cp = compute_cardinal_points(self.lenses)
        self.assertAlmostEqual(cp.h, 100/3)
        self.assertAlmostEqual(cp.h_prime, 50/3)
        self.assertAlmostEqual(cp.f_prime, 50/3 + 200/3)

    def test_back_focal_length(self):
        cp = compute_cardinal_points(self.lenses)
        bfl = self.f2*(self.d - self.f1)/(self.d - (self.f1 + self.f2))
        self.assertAlmostEqual(cp.bfl, bfl)
        self.assertAlmostEqual(cp.ffl, -bfl)


def test_afocal_cardinal_points():
    cp = compute_cardinal_points([Lens(100., 0.), Lens(100., 200.)])
    assert cp.power == approx(0., abs=1e-15)
    assert cp.efl == math.inf
    assert cp.h == 0.
    assert cp.h_prime == 200.
    assert cp.bfl == math.inf
    assert cp.ffl == -math.inf


class ImageTestCase(unittest.TestCase):
    def setUp(self):
        self.lenses = [Lens(100., 0.), Lens(100., 150.)]

    def test_real_image(self):
        img = compute_image(self.lenses, -200.)
        self.assertAlmostEqual(img.obj_dist, 200.)
        self.assertAlmostEqual(img.img_dist, 100/3)
        self.assertAlmostEqual(img.z, 150. + 100/3)
        self.assertAlmostEqual(img.mag, -2/3)
        self.assertFalse(img.is_virtual)

    def test_magnification_forms_agree(self):
        m = system_matrix(self.lenses)
        for obj_z in (-500., -260., -120., -30.):
            img = compute_image(self.lenses, obj_z)
            d_o = self.lenses[0].z - obj_z
            self.assertAlmostEqual(img.mag, 1/(m[1, 0]*d_o + m[1, 1]))

    def test_object_at_first_lens(self):
        m = system_matrix(self.lenses)
        img = compute_image(self.lenses, 0.)
        self.assertEqual(img.obj_dist, 0.)
        self.assertAlmostEqual(img.z, 150. - m[0, 1]/m[1, 1])
        self.assertAlmostEqual(img.z, 450.)
        self.assertAlmostEqual(img.mag, -2.)


def test_image_at_infinity():
    img = compute_image([Lens(100., 0.)], -100.)
    assert img.z == math.inf
    assert img.mag == math.inf
    assert img.is_virtual is False


def test_virtual_image():
    img = compute_image([Lens(100., 0.)], -50.)
    assert img.is_virtual
    assert img.z == approx(-100.)
    assert img.mag == approx(2.)


def test_diverging_lens_image():
    img = compute_image([Lens(-100., 0.)], -100.)
    assert img.is_virtual
    assert img.z == approx(-50.)
    assert img.mag == approx(0.5)


def test_listings():
    cp = compute_cardinal_points([Lens(100., 0.), Lens(100., 200.)])
    cp_str = list_cardinal_points(cp)
    assert "efl" in cp_str
    assert "inf" in cp_str
    assert list_cardinal_points(None) == "cardinal points: --"

    img_str = list_image(compute_image([Lens(100., 0.)], -100.))
    assert "inf" in img_str
    assert list_image(None) == "image: --"
