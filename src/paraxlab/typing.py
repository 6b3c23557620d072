#!/usr/bin/env python3
# -*- coding: utf-8 -*-
""" type hints for paraxlab

.. codeauthor: Michael J. Hayford
"""
import numpy.typing as npt

# 2x2 ABCD matrix
Mat2d = npt.NDArray

# (z, y) points along a ray path
RayPath = list[tuple[float, float]]
