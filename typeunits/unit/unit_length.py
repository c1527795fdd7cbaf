"""Length unit definitions.

Length is stored in meters.

Classes:
    Length: Distance, canonical sub-unit meters.

Constants:
    mm, cm, m, km: One of each sub-unit, usable as multipliers.
"""

from __future__ import annotations

from .unit_base import Unit


class Length(Unit):
    """Length unit: distance stored in meters.

    Attributes:
        SUBUNITS: mm (1e-3 m), cm (1e-2 m), m, km (1000 m).

    Example:
        >>> (1.5 * Length.km).m()
        np.float32(1500.0)
    """

    __slots__ = ()
    SUBUNITS = {"mm": 1e-3, "cm": 1e-2, "m": 1.0, "km": 1_000.0}


mm = Length.mm
cm = Length.cm
m = Length.m
km = Length.km
