"""Angle unit definitions.

Angles are stored in radians.

Classes:
    Angle: Plane angle, canonical sub-unit rad.

Constants:
    rad, deg, rev: One radian, one degree and one full revolution.

Example:
    >>> (180.0 * deg).rad()
    np.float32(3.1415927)
"""

from __future__ import annotations

from math import pi

from .unit_base import Unit


class Angle(Unit):
    """Angle unit stored in radians.

    Attributes:
        SUBUNITS: rad, deg (pi/180 rad), rev (2*pi rad).
    """

    __slots__ = ()
    SUBUNITS = {"rad": 1.0, "deg": pi / 180.0, "rev": 2.0 * pi}


rad = Angle.rad
deg = Angle.deg
rev = Angle.rev
