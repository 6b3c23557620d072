#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2018 Michael J. Hayford
""" Supports paraxial ray tracing through a sequence of thin lenses.

.. Created on Mon Sep 17 23:10:59 2018

.. codeauthor: Michael J. Hayford
"""

import logging
from operator import attrgetter

import pandas as pd

from . import TraceResult
from .traceerror import TraceRayBlockedError
from paraxlab.optical import model_constants as mc

logger = logging.getLogger(__name__)


def ray_df(ray):
    """ return a |DataFrame| containing the ray path """
    r = pd.DataFrame(ray.path, columns=['z', 'y'])
    r.index.names = ['pt']
    return r


def list_ray(ray_obj):
    """ pretty print the path of a ray

    The input ray_obj can be either the return from trace_ray(), i.e.
    a (ray, blocked_by) tuple, or a `ray` alone.
    """
    blocked_by = None
    if isinstance(ray_obj, tuple):
        ray, blocked_by = ray_obj
    else:
        ray = ray_obj

    print("            Z            Y")
    for i, pt in enumerate(ray.path):
        print(f"{i:3d}: {pt[mc.z]:12.5f} {pt[mc.y]:12.5f}")
    print(f"slope: {ray.u:12.6f}")
    if blocked_by is not None:
        print(f"ray blocked by lens {blocked_by.id} at z={blocked_by.z}")


def _trace_lenses(lenses, ray):
    """ transfer and refract `ray` through the lenses ahead of it

    Raises:
        TraceRayBlockedError: if the ray falls outside a lens aperture
    """
    for lens in lenses:
        # lenses behind the ray don't participate
        if ray.z > lens.z + mc.TRACE_Z_TOL:
            continue

        ray.propagate(lens.z)

        if not lens.clears_aperture(ray.y):
            raise TraceRayBlockedError(lens, (ray.z, ray.y))

        ray.refract(lens.focal_length)


def trace_ray(lenses, ray, extension=mc.TRACE_EXTENSION):
    """ trace `ray` through `lenses`, updating the ray in place.

    Lenses are visited in ascending axial position. A ray blocked by a lens
    aperture is stopped at the plane of that lens. A ray that passes all the
    lenses is extended to `extension` past the last lens; this final segment
    is for display only.

    Args:
        lenses: iterable of :class:`~.lens.Lens`
        ray: :class:`~.ray.Ray` to be traced
        extension: display distance beyond the last lens

    Returns:
        :class:`~.TraceResult` namedtuple of the ray and the blocking lens,
        or None if the ray wasn't blocked
    """
    lenses = sorted(lenses, key=attrgetter('z'))
    if not ray.active:
        return TraceResult(ray, None)

    try:
        _trace_lenses(lenses, ray)
    except TraceRayBlockedError as ray_error:
        logger.debug("ray blocked by lens %s at z=%s, y=%s",
                     ray_error.lens.id, *ray_error.int_pt)
        ray.stop()
        return TraceResult(ray, ray_error.lens)

    # never extend backwards, for rays starting past the last lens
    last_z = max(lenses[-1].z, ray.z) if len(lenses) > 0 else ray.z
    ray.propagate(last_z + extension)
    return TraceResult(ray, None)


def trace_fan(lenses, rays, extension=mc.TRACE_EXTENSION):
    """ trace a list of rays, returning a list of :class:`~.TraceResult` """
    return [trace_ray(lenses, ray, extension=extension) for ray in rays]
