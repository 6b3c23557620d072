#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2018 Michael J. Hayford
""" miscellaneous functions for working with floats and infinite values

.. Created on Wed May 23 15:27:06 2018

.. codeauthor: Michael J. Hayford
"""
import math
import numpy as np

from paraxlab.optical import model_constants as mc


def is_kinda_big(x: float, kinda_big: float = 1e8) -> bool:
    """ Test for IEEE inf as well as any \\|x| > kinda_big  """
    if np.isinf(x):
        return True
    elif np.abs(x) > kinda_big:
        return True
    else:
        return False


def isanumber(a):
    """ returns true if input a can be converted to floating point number """
    try:
        float(a)
        bool_a = True
    except ValueError:
        bool_a = False
    except TypeError:
        bool_a = False

    return bool_a


def fmt_value(x, width=12, prec=4, big=mc.DISPLAY_BIG):
    """ format a float for listings, printing huge and infinite values as inf

    Args:
        x: value to format; None prints as '--'
        width: field width
        prec: significant digits
        big: magnitudes above this are considered infinite

    Returns:
        the formatted string
    """
    if x is None:
        return f"{'--':>{width}s}"
    if math.isnan(x):
        return f"{'nan':>{width}s}"
    if is_kinda_big(x, kinda_big=big):
        inf_str = '-inf' if x < 0 else 'inf'
        return f"{inf_str:>{width}s}"
    return f"{x:{width}.{prec}g}"
