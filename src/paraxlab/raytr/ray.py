#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2018 Michael J. Hayford
""" A paraxial ray in the meridional plane

.. codeauthor: Michael J. Hayford
"""

import numpy as np

from paraxlab.typing import RayPath


class Ray:
    """ A paraxial ray and the path it has traced

    The ray state is its axial position `z`, height `y` and slope `u`.
    The operations :meth:`propagate`, :meth:`refract` and :meth:`stop`
    update the state in place and do nothing once the ray is inactive.

    Attributes:
        z: current axial position
        y: current height above the axis
        u: current slope (paraxial angle tangent)
        active: False once the ray has been blocked
        path: list of (z, y) points, starting at the initial point
    """

    def __init__(self, z, y, u):
        self.z = float(z)
        self.y = float(y)
        self.u = float(u)
        self.active = True
        self.path: RayPath = [(self.z, self.y)]

    def __repr__(self):
        return "{!s}(z={!r}, y={!r}, u={!r}, active={!r})" \
               .format(type(self).__name__, self.z, self.y, self.u,
                       self.active)

    def propagate(self, target_z):
        """ transfer the ray in a straight line to axial position `target_z` """
        if not self.active:
            return
        self.y += self.u * (target_z - self.z)
        self.z = float(target_z)
        self.path.append((self.z, self.y))

    def refract(self, focal_length):
        """ apply thin lens refraction at the current position """
        if not self.active:
            return
        self.u -= self.y / focal_length

    def stop(self):
        self.active = False

    def copy(self):
        """ return a new, active ray starting from this ray's current state """
        return type(self)(self.z, self.y, self.u)

    def path_array(self):
        """ return the path as an (n, 2) array of z, y """
        return np.array(self.path)
