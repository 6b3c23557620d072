# -*- coding: utf-8 -*-
""" The **paraxlab** thin lens, first order optical modeling package

    The optical system model is contained in the :mod:`~.optical`
    subpackage. It is supported by the following subpackages:

        - :mod:`~.optical`: OpticalSystem, SystemSpec and model constants
        - :mod:`~.elem`: the thin :class:`~.lens.Lens` element
        - :mod:`~.raytr`: paraxial rays, ray sources and ray tracing
        - :mod:`~.parax`: ABCD matrices, cardinal points and image formation

    The :mod:`~.util` subpackage provides a few math and formatting helpers.
"""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version(__name__)
except PackageNotFoundError:
    __version__ = 'unknown'


def listobj(obj):
    """ Print wrapper function for listobj_str() method of `obj`.

    listobj() is designed to be used in scripting environments where detailed,
    textual output is supported. It is a wrapper to a call of `listobj_str` on
    `obj`.

    Classes may implement the `listobj_str` method that returns a string
    containing a formatted description of the object. Examples include
    :meth:`.OpticalSystem.listobj_str` and :meth:`.Lens.listobj_str`.
    """
    try:
        print(obj.listobj_str())
    except AttributeError:
        print(repr(obj))
