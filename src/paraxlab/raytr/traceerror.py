#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2018 Michael J. Hayford
""" Support for ray trace exception handling

    These exceptions are used inside the tracer. :func:`~.trace.trace_ray`
    catches them and records the outcome on the ray instead.

.. Created on Wed Oct 24 15:22:40 2018

.. codeauthor: Michael J. Hayford
"""


class TraceError(Exception):
    """ Exception raised when ray tracing a model """


class TraceRayBlockedError(TraceError):
    """ Exception raised when ray is blocked by the aperture of a lens """
    def __init__(self, lens, int_pt):
        self.lens = lens
        self.int_pt = int_pt
