""" Package providing the optical elements of a paraxial model

    The :mod:`~.elem` subpackage provides the idealized thin lens,
    :class:`~.lens.Lens`, the only element type of the model.
"""
