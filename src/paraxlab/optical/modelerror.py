#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2018 Michael J. Hayford
""" Support for optical model exception handling

.. codeauthor: Michael J. Hayford
"""


class ModelError(Exception):
    """ Exception raised when an invalid change is made to a model """


class DegenerateLensError(ModelError, ValueError):
    """ Exception raised when a lens is given a zero focal length """
    def __init__(self, focal_length, lens=None):
        self.focal_length = focal_length
        self.lens = lens
        super().__init__(f"invalid focal length: {focal_length!r}")


class LensLimitError(ModelError):
    """ Exception raised when adding a lens to a full system """
    def __init__(self, max_lenses):
        self.max_lenses = max_lenses
        super().__init__(f"system is limited to {max_lenses} lenses")
