""" package supplying utility functions for math support

    The :mod:`~paraxlab.util` subpackage provides miscellaneous functions
    that don't have an obvious home. These include:

        - handling and formatting of infinite values, :mod:`~.misc_math`
"""
