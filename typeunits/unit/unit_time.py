"""Time unit definitions.

Time is stored in seconds. The sub-units cover the range from microsecond
timer ticks to hours of runtime.

Classes:
    Time: Duration, canonical sub-unit seconds.

Constants:
    us, ms, s, min, h: One of each sub-unit, usable as multipliers.

Example:
    >>> timeout = 2.5 * min
    >>> timeout.s()
    np.float32(150.0)
    >>> str(timeout)
    '150.0 s'
"""

from __future__ import annotations

from .unit_base import Unit


class Time(Unit):
    """Time unit: duration stored in seconds.

    Attributes:
        SUBUNITS: us (1e-6 s), ms (1e-3 s), s, min (60 s), h (3600 s).

    Example:
        >>> (90 * Time.s).min()
        np.float32(1.5)
    """

    __slots__ = ()
    SUBUNITS = {"us": 1e-6, "ms": 1e-3, "s": 1.0, "min": 60.0, "h": 3600.0}


us = Time.us
ms = Time.ms
s = Time.s
min = Time.min  # noqa: A001
h = Time.h
