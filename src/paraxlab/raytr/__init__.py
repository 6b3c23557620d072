""" Package for paraxial ray tracing

    The :mod:`~.raytr` subpackage provides core classes and functions
    for paraxial ray tracing. These include:

        - The paraxial ray and its path, :mod:`~.ray`
        - Tracing rays through the lenses of a system, :mod:`~.trace`
        - Object descriptions and ray fan generation, :mod:`~.sources`
        - Exception classes used by the tracer, :mod:`~.traceerror`

    The overall optical model is managed by the :class:`~.OpticalSystem` class
"""

from collections import namedtuple

TraceResult = namedtuple('TraceResult', ['ray', 'blocked_by'])
TraceResult.__doc__ = "A traced Ray and the Lens that blocked it, if any"
TraceResult.ray.__doc__ = "the traced Ray"
TraceResult.blocked_by.__doc__ = "the blocking Lens or None, if unblocked"
