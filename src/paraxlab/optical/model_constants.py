#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2018 Michael J. Hayford
""" optical model constants

.. Created on Wed May 23 16:00:55 2018

.. codeauthor: Michael J. Hayford
"""

# path point data: axial position, height
z, y = range(2)

# system matrix elements, row major: A, B / C, D
A, B, C, D = (0, 0), (0, 1), (1, 0), (1, 1)

# numeric tolerances
TRACE_Z_TOL = 1e-9      # ray on a lens plane still interacts with the lens
POWER_TOL = 1e-10       # |C| below this is a zero power (afocal) system
IMAGE_TOL = 1e-10       # |C*d_o + D| below this puts the image at infinity
ZERO_FOCAL_TOL = 1e-12  # smallest acceptable |focal length|
FAN_Z_TOL = 1e-6        # point source closer than this to the 1st lens

# model defaults
DEFAULT_SEMI_DIAMETER = 50.
MAX_LENSES = 5
TRACE_EXTENSION = 1000.

# ray fan generation
DEFAULT_NUM_RAYS = 10
FAN_FILL_FRACTION = 0.95
DISTANT_START_OFFSET = 200.

# listings print values larger than this as infinite
DISPLAY_BIG = 1e4
