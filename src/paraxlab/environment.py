#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2019 Michael J. Hayford
""" script file providing an environment for using paraxlab

.. Created on Sun Feb 10 22:42:36 2019

.. codeauthor: Michael J. Hayford
"""

# initialization
import math
import numpy as np
import pandas as pd

# paraxlab
import paraxlab
from paraxlab import listobj

# optical model
from paraxlab.optical.opticalsystem import OpticalSystem, SystemSpec
from paraxlab.optical.modelerror import (ModelError, DegenerateLensError,
                                         LensLimitError)
import paraxlab.optical.model_constants as mc

from paraxlab.elem.lens import Lens

# first order
import paraxlab.parax.firstorder as fo
from paraxlab.parax.firstorder import (CardinalPoints, ImageData,
                                       system_matrix, compute_cardinal_points,
                                       compute_image)

# ray tracing
from paraxlab.raytr import TraceResult
from paraxlab.raytr.ray import Ray
from paraxlab.raytr.trace import trace_ray, trace_fan, list_ray, ray_df
from paraxlab.raytr.sources import PointSource, DistantSource, gen_ray_fan
