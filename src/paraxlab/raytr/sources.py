#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2019 Michael J. Hayford
""" Object descriptions and generation of ray fans

    An object is either a point source at a finite position,
    :class:`PointSource`, or a source at infinity described by its angle of
    incidence, :class:`DistantSource`. :func:`gen_ray_fan` produces a fan of
    rays from either one that fills the aperture of the first lens.

.. codeauthor: Michael J. Hayford
"""

import logging
import math
from collections import namedtuple
from operator import attrgetter

import numpy as np

from paraxlab.optical import model_constants as mc
from .ray import Ray

logger = logging.getLogger(__name__)


PointSource = namedtuple('PointSource', ['z', 'y'], defaults=[0.])
PointSource.__doc__ = "an object point at a finite axial position"
PointSource.z.__doc__ = "axial position of the object point"
PointSource.y.__doc__ = "height of the object point"

DistantSource = namedtuple('DistantSource', ['angle_deg', 'start_offset'],
                           defaults=[0., mc.DISTANT_START_OFFSET])
DistantSource.__doc__ = "an object at infinity"
DistantSource.angle_deg.__doc__ = "angle of incidence in degrees"
DistantSource.start_offset.__doc__ = "ray start distance ahead of the 1st lens"


def _fan_parameters(num_rays):
    """ fractional positions across the fan, 0.5 for a single ray """
    if num_rays == 1:
        return np.array([0.5])
    return np.linspace(0., 1., num_rays)


def gen_ray_fan(lenses, source, num_rays=mc.DEFAULT_NUM_RAYS,
                fill=mc.FAN_FILL_FRACTION):
    """ generate a fan of rays that fills the first lens aperture

    The fan is sampled uniformly across `fill` times the semi-diameter of the
    first lens, measured at the first lens plane.

    Args:
        lenses: sequence of :class:`~.lens.Lens`
        source: :class:`PointSource` or :class:`DistantSource`
        num_rays: number of rays in the fan
        fill: fraction of the first lens semi-diameter to fill

    Returns:
        list of :class:`~.ray.Ray`, empty if there are no lenses, no rays are
        requested or a point source lies on the first lens plane
    """
    if len(lenses) == 0 or num_rays < 1:
        return []

    first_lens = min(lenses, key=attrgetter('z'))
    h = fill * first_lens.semi_diameter
    t = _fan_parameters(num_rays)

    if isinstance(source, PointSource):
        z_dist = first_lens.z - source.z
        if abs(z_dist) < mc.FAN_Z_TOL:
            logger.info("point source on the first lens plane, no rays")
            return []
        u_min = (-h - source.y)/z_dist
        u_max = (h - source.y)/z_dist
        slopes = u_min + (u_max - u_min)*t
        return [Ray(source.z, source.y, u) for u in slopes]

    elif isinstance(source, DistantSource):
        u = math.tan(math.radians(source.angle_deg))
        start_z = first_lens.z - source.start_offset
        # heights are uniform at the first lens plane
        target_y = -h + 2*h*t
        start_y = target_y - u*(first_lens.z - start_z)
        return [Ray(start_z, y, u) for y in start_y]

    else:
        raise TypeError(f"unknown source type: {type(source).__name__}")
