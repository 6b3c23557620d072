#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2018 Michael J. Hayford
""" Module for the thin lens element

    A :class:`Lens` is an idealized zero thickness element located at a
    single axial position. It is characterized by its focal length and the
    semi-diameter of its clear aperture.

.. Created on Wed May 16 14:05:38 2018

.. codeauthor: Michael J. Hayford
"""

import math

from paraxlab.optical import model_constants as mc
from paraxlab.optical.modelerror import DegenerateLensError
from paraxlab.parax.firstorder import refraction_matrix
from paraxlab.util.misc_math import isanumber


class Lens:
    """ A thin lens at axial position `z`

    Attributes:
        id: integer handle, assigned by the owning OpticalSystem
        label: optional name for listings
        focal_length: signed focal length, positive for a converging lens
        z: axial position of the lens plane
        semi_diameter: clear aperture half height
    """

    def __init__(self, focal_length, z, semi_diameter=mc.DEFAULT_SEMI_DIAMETER,
                 lens_id=None, label=''):
        self.id = lens_id
        self.label = label
        self.focal_length = focal_length
        self.z = z
        self.semi_diameter = semi_diameter

    def __repr__(self):
        if len(self.label) > 0:
            return "{!s}(lbl={!r}, focal_length={!r}, z={!r}, sd={!r})" \
                   .format(type(self).__name__, self.label,
                           self.focal_length, self.z, self.semi_diameter)
        else:
            return "{!s}(focal_length={!r}, z={!r}, sd={!r})" \
                   .format(type(self).__name__,
                           self.focal_length, self.z, self.semi_diameter)

    def listobj_str(self):
        o_str = f"{self.label}: " if self.label != "" else ""
        o_str += f"thinlens {self.id}\n"
        o_str += f"focal_length={self.focal_length}, power={self.optical_power}\n"
        o_str += f"z={self.z}, semi_diameter={self.semi_diameter}\n"
        return o_str

    @property
    def focal_length(self):
        return self._focal_length

    @focal_length.setter
    def focal_length(self, f):
        if not isanumber(f) or math.isnan(float(f)):
            raise DegenerateLensError(f, lens=self)
        f = float(f)
        if abs(f) < mc.ZERO_FOCAL_TOL:
            raise DegenerateLensError(f, lens=self)
        self._focal_length = f

    @property
    def z(self):
        """ axial position of the lens plane """
        return self._z

    @z.setter
    def z(self, z):
        z = float(z)
        if not math.isfinite(z):
            raise ValueError(f"lens position must be finite: {z!r}")
        self._z = z

    @property
    def optical_power(self):
        """ the lens power, 1/focal_length """
        return 1./self._focal_length

    @property
    def semi_diameter(self):
        return self._semi_diameter

    @semi_diameter.setter
    def semi_diameter(self, sd):
        sd = float(sd)
        if not sd > 0.:
            raise ValueError(f"semi_diameter must be positive: {sd!r}")
        self._semi_diameter = sd

    def refraction_matrix(self):
        """ return the ABCD matrix of the lens, [[1, 0], [-1/f, 1]] """
        return refraction_matrix(self._focal_length)

    def clears_aperture(self, y):
        """ True if a ray at height `y` passes inside the clear aperture """
        return abs(y) <= self._semi_diameter
