#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2018 Michael J. Hayford
""" Top level model classes

.. Created on Wed Mar 14 11:08:28 2018

.. codeauthor: Michael J. Hayford
"""
import itertools
import logging
from operator import attrgetter

import pandas as pd

import paraxlab.optical.model_constants as mc
from paraxlab.optical.modelerror import LensLimitError
from paraxlab.elem.lens import Lens
from paraxlab.parax import firstorder as fo
from paraxlab.raytr import trace as trace
from paraxlab.raytr.sources import gen_ray_fan

logger = logging.getLogger(__name__)


class SystemSpec:
    """ Container for units and other system level settings

    Attributes:
        title (str): a short description of the model
        dimensions (str): the model linear units
        max_lenses (int): the most lenses the system accepts, None if unlimited
        trace_extension (float): display distance of traced rays past the
                                 last lens
    """

    def __init__(self, opt_sys, **kwargs):
        self.opt_sys = opt_sys
        self.title = kwargs.get('title', '')
        self.dimensions = kwargs.get('dimensions', 'mm')
        self.max_lenses = kwargs.get('max_lenses', mc.MAX_LENSES)
        self.trace_extension = kwargs.get('trace_extension',
                                          mc.TRACE_EXTENSION)
        unknown = set(kwargs) - set(vars(self))
        if unknown:
            logger.warning("SystemSpec: ignoring unknown settings %s",
                           sorted(unknown))

    def listobj_str(self):
        vs = dict(vars(self))
        del vs['opt_sys']
        o_str = f"{type(self).__name__}:\n"
        for k, v in vs.items():
            o_str += f"{k}: {v}\n"
        return o_str


class OpticalSystem:
    """ Top level container for a thin lens optical system.

    The OpticalSystem owns an ordered list of :class:`~.lens.Lens`, sorted by
    ascending axial position. Lenses sharing a position keep their relative
    order, so a lens added at an occupied position follows the lenses
    already there.

    All queries, e.g. :meth:`calculate_cardinal_points`, are recomputed from
    the current lens list on every call.

    Attributes:
        system_spec: :class:`.SystemSpec`
        lenses: list of :class:`~.lens.Lens`
    """

    def __init__(self, **kwargs):
        self.system_spec = SystemSpec(self, **kwargs)
        self.lenses = []
        self._next_id = itertools.count()

    def __getitem__(self, key):
        """ Provide lookup of the lens with id `key`. """
        lens = self.lens(key)
        if lens is None:
            raise KeyError(key)
        return lens

    def __len__(self):
        return len(self.lenses)

    @classmethod
    def create_default(cls, **kwargs):
        """ a system with two f=100 lenses at z=0 and z=150 """
        opt_sys = cls(**kwargs)
        opt_sys.add_lens(100., 0., 50.)
        opt_sys.add_lens(100., 150., 50.)
        return opt_sys

    @property
    def first_z(self):
        return self.lenses[0].z if len(self.lenses) > 0 else None

    @property
    def last_z(self):
        return self.lenses[-1].z if len(self.lenses) > 0 else None

    def lens(self, lens_id):
        """ return the lens with id `lens_id`, or None """
        for lens in self.lenses:
            if lens.id == lens_id:
                return lens
        return None

    def add_lens(self, focal_length, z, semi_diameter=mc.DEFAULT_SEMI_DIAMETER,
                 label=''):
        """ create a lens, add it to the system and return it

        Raises:
            DegenerateLensError: if `focal_length` is zero
            LensLimitError: if the system already has `max_lenses` lenses
        """
        max_lenses = self.system_spec.max_lenses
        if max_lenses is not None and len(self.lenses) >= max_lenses:
            logger.info("add_lens rejected, system has %d lenses",
                        len(self.lenses))
            raise LensLimitError(max_lenses)

        lens = Lens(focal_length, z, semi_diameter, label=label)
        lens.id = next(self._next_id)
        self.lenses.append(lens)
        self.sort_lenses()
        logger.debug("added %r, id=%d", lens, lens.id)
        return lens

    def remove_lens(self, lens_id):
        """ remove the lens with id `lens_id`, returning it or None """
        lens = self.lens(lens_id)
        if lens is None:
            logger.debug("remove_lens: no lens with id %r", lens_id)
            return None
        self.lenses.remove(lens)
        logger.debug("removed %r, id=%d", lens, lens.id)
        return lens

    def sort_lenses(self):
        """ restore ascending axial order; call after editing a lens z """
        self.lenses.sort(key=attrgetter('z'))

    def update_lens(self, lens_id, focal_length=None, z=None,
                    semi_diameter=None):
        """ edit the lens with id `lens_id` and restore the lens order

        Raises:
            KeyError: if there is no lens with id `lens_id`
            DegenerateLensError: if `focal_length` is zero
            ValueError: if `z` or `semi_diameter` is invalid

        A rejected edit leaves the lens unchanged.
        """
        lens = self[lens_id]
        # validate all the new values before changing the lens
        edit = Lens(lens.focal_length if focal_length is None else focal_length,
                    lens.z if z is None else z,
                    lens.semi_diameter if semi_diameter is None
                    else semi_diameter)
        lens.focal_length = edit.focal_length
        lens.semi_diameter = edit.semi_diameter
        if z is not None:
            lens.z = edit.z
            self.sort_lenses()
        return lens

    def trace_ray(self, ray):
        """ trace `ray` through the system, updating it in place

        Returns:
            :class:`~.TraceResult` of the ray and its blocking lens, if any
        """
        return trace.trace_ray(self.lenses, ray,
                               extension=self.system_spec.trace_extension)

    def trace_source(self, source, num_rays=mc.DEFAULT_NUM_RAYS):
        """ generate and trace a fan of rays from `source` """
        rays = gen_ray_fan(self.lenses, source, num_rays=num_rays)
        return trace.trace_fan(self.lenses, rays,
                               extension=self.system_spec.trace_extension)

    def calculate_system_matrix(self):
        """ the ABCD matrix from the first to the last lens, or None """
        return fo.system_matrix(self.lenses)

    def calculate_cardinal_points(self):
        """ :class:`~.CardinalPoints` of the system, or None if empty """
        return fo.compute_cardinal_points(self.lenses)

    def calculate_image(self, obj_z):
        """ :class:`~.ImageData` for an object at `obj_z`, or None if empty """
        return fo.compute_image(self.lenses, obj_z)

    def lens_df(self):
        """ return a |DataFrame| of the lens data """
        df = pd.DataFrame([[lens.label, lens.focal_length, lens.z,
                            lens.semi_diameter] for lens in self.lenses],
                          columns=['label', 'f', 'z', 'sd'],
                          index=[lens.id for lens in self.lenses])
        df.index.names = ['id']
        return df

    def list_model(self):
        print(self.listobj_str())

    def listobj_str(self):
        o_str = f"{self.system_spec.title}\n" \
                if self.system_spec.title else ""
        o_str += "  id            f            z           sd\n"
        for lens in self.lenses:
            o_str += (f"{lens.id:4d} {lens.focal_length:12.6g} "
                      f"{lens.z:12.6g} {lens.semi_diameter:12.6g}\n")
        o_str += fo.list_cardinal_points(self.calculate_cardinal_points())
        return o_str
