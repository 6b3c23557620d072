#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2018 Michael J. Hayford
""" Functions to support first order analysis of a thin lens system

    The system is reduced to a 2x2 ABCD matrix that maps a paraxial ray
    (height, slope) at the first lens plane to the ray at the last lens plane.
    The cardinal points and the image of an axial object point follow from
    the matrix elements.

.. Created on Tue Feb 13 10:48:19 2018

.. codeauthor: Michael J. Hayford
"""
import math
from collections import namedtuple
from operator import attrgetter

import numpy as np

import paraxlab.optical.model_constants as mc
from paraxlab.typing import Mat2d
from paraxlab.util.misc_math import fmt_value

cardinal_point_keys = ['power', 'efl', 'bfl', 'ffl',
                       'h', 'h_prime', 'f', 'f_prime']
CardinalPoints = namedtuple('CardinalPoints', cardinal_point_keys)
CardinalPoints.power.__doc__ = "optical power of the system, -C"
CardinalPoints.efl.__doc__ = "effective focal length, inf for an afocal system"
CardinalPoints.bfl.__doc__ = "back focal length, last lens to rear focal point"
CardinalPoints.ffl.__doc__ = "front focal length, first lens to front focal point"
CardinalPoints.h.__doc__ = "axial position of the front principal plane"
CardinalPoints.h_prime.__doc__ = "axial position of the rear principal plane"
CardinalPoints.f.__doc__ = "axial position of the front focal point"
CardinalPoints.f_prime.__doc__ = "axial position of the rear focal point"

""" tuple grouping together the cardinal points of a system

    Attributes:
        power: optical power of the system, -C
        efl: effective focal length, inf for an afocal system
        bfl: back focal length, last lens to rear focal point
        ffl: front focal length, first lens to front focal point
        h: axial position of the front principal plane
        h_prime: axial position of the rear principal plane
        f: axial position of the front focal point
        f_prime: axial position of the rear focal point
"""

image_keys = ['z', 'mag', 'is_virtual', 'obj_dist', 'img_dist']
ImageData = namedtuple('ImageData', image_keys)
ImageData.z.__doc__ = "axial position of the image, inf if at infinity"
ImageData.mag.__doc__ = "transverse magnification"
ImageData.is_virtual.__doc__ = "True if the image lies before the last lens"
ImageData.obj_dist.__doc__ = "distance from the object to the first lens"
ImageData.img_dist.__doc__ = "distance from the last lens to the image"


def translation_matrix(d: float) -> Mat2d:
    """ ABCD matrix for a transfer of axial distance `d` """
    return np.array([[1., d], [0., 1.]])


def refraction_matrix(f: float) -> Mat2d:
    """ ABCD matrix for a thin lens of focal length `f` """
    return np.array([[1., 0.], [-1./f, 1.]])


def _in_z_order(lenses):
    return sorted(lenses, key=attrgetter('z'))


def system_matrix(lenses) -> Mat2d | None:
    """ compose the ABCD matrix from the first lens to the last lens

    Each element matrix is left multiplied onto the running product as it is
    encountered, so the first lens ends up at the right of the product. There
    is no transfer before the first lens or after the last one.

    Args:
        lenses: sequence of :class:`~.lens.Lens`

    Returns:
        2x2 numpy array, or None if there are no lenses
    """
    lenses = _in_z_order(lenses)
    if len(lenses) == 0:
        return None

    m = np.identity(2)
    prev_z = None
    for lens in lenses:
        if prev_z is not None:
            m = translation_matrix(lens.z - prev_z) @ m
        m = lens.refraction_matrix() @ m
        prev_z = lens.z
    return m


def compute_cardinal_points(lenses) -> CardinalPoints | None:
    """ calculate the principal planes, focal points and focal lengths

    A system whose power is below :data:`~.model_constants.POWER_TOL` is
    afocal: the efl and focal point positions are infinite and the principal
    planes are placed at the first and last lenses.

    Returns:
        :class:`CardinalPoints` namedtuple, or None if there are no lenses
    """
    lenses = _in_z_order(lenses)
    m = system_matrix(lenses)
    if m is None:
        return None

    A, B, C, D = m[mc.A], m[mc.B], m[mc.C], m[mc.D]
    first_z = lenses[0].z
    last_z = lenses[-1].z

    power = -C
    afocal = abs(C) < mc.POWER_TOL
    efl = math.inf if afocal else 1/power

    pp1 = 0. if afocal else (D - 1)/C
    ppk = 0. if afocal else (1 - A)/C
    h = first_z + pp1
    h_prime = last_z + ppk

    f_prime = h_prime + efl
    f = h - efl
    bfl = f_prime - last_z
    ffl = f - first_z

    return CardinalPoints(power, efl, bfl, ffl, h, h_prime, f, f_prime)


def compute_image(lenses, obj_z: float) -> ImageData | None:
    """ calculate the image position and magnification of an axial object

    Args:
        lenses: sequence of :class:`~.lens.Lens`
        obj_z: axial position of the object

    Returns:
        :class:`ImageData` namedtuple, or None if there are no lenses
    """
    lenses = _in_z_order(lenses)
    m = system_matrix(lenses)
    if m is None:
        return None

    A, B, C, D = m[mc.A], m[mc.B], m[mc.C], m[mc.D]
    first_z = lenses[0].z
    last_z = lenses[-1].z

    obj_dist = first_z - obj_z
    denom = C*obj_dist + D
    if abs(denom) < mc.IMAGE_TOL:
        return ImageData(math.inf, math.inf, False, obj_dist, math.inf)

    img_dist = -(A*obj_dist + B)/denom
    img_z = last_z + img_dist
    # equal to 1/denom, computed from the matrix elements
    mag = A + img_dist*C
    return ImageData(img_z, mag, img_dist < 0, obj_dist, img_dist)


def list_cardinal_points(cp: CardinalPoints | None) -> str:
    """ return a listing of the cardinal points, or '--' if undefined """
    if cp is None:
        return "cardinal points: --"
    o_str = f"efl        {fmt_value(cp.efl)}\n"
    o_str += f"bfl        {fmt_value(cp.bfl)}\n"
    o_str += f"ffl        {fmt_value(cp.ffl)}\n"
    o_str += f"power      {fmt_value(cp.power)}\n"
    o_str += f"H          {fmt_value(cp.h)}\n"
    o_str += f"H'         {fmt_value(cp.h_prime)}\n"
    o_str += f"F          {fmt_value(cp.f)}\n"
    o_str += f"F'         {fmt_value(cp.f_prime)}"
    return o_str


def list_image(img: ImageData | None) -> str:
    """ return a listing of the image data, or '--' if undefined """
    if img is None:
        return "image: --"
    o_str = f"img_z      {fmt_value(img.z)}\n"
    o_str += f"m          {fmt_value(img.mag)}\n"
    o_str += f"obj_dist   {fmt_value(img.obj_dist)}\n"
    o_str += f"img_dist   {fmt_value(img.img_dist)}\n"
    o_str += f"virtual    {img.is_virtual!s:>12}"
    return o_str
