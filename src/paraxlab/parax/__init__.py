""" Package for paraxial optical analysis

    The :mod:`~.parax` subpackage provides core functions for first order
    analysis of a thin lens system. These include:

        - translation and refraction ABCD matrices and their composition
          into a system matrix, :mod:`~.firstorder`
        - cardinal points (principal planes, focal points, efl, bfl) and
          image position and magnification, :mod:`~.firstorder`
"""
