""" Package encompassing the optical system model

    The :mod:`~.optical` subpackage provides the top level
    :class:`~.opticalsystem.OpticalSystem` class, its configuration
    container :class:`~.opticalsystem.SystemSpec`, the model constants in
    :mod:`~.model_constants` and the model exception classes in
    :mod:`~.modelerror`.
"""
