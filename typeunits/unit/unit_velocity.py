"""Velocity and acceleration unit definitions.

Velocity is stored in meters per second and acceleration in meters per
second squared. Both are also reachable by dividing: Length / Time gives
Velocity and Velocity / Time gives Acceleration (see
``typeunits.unit.conversions``).

Classes:
    Velocity: Canonical sub-unit mps (m/s).
    Acceleration: Canonical sub-unit mps2 (m/s^2).

Type Aliases:
    Speed: Velocity.

Constants:
    mps, kmph: Velocity sub-units.
    mps2: Acceleration sub-unit.

Example:
    >>> (36.0 * kmph).mps()
    np.float32(10.0)
"""

from __future__ import annotations

from .unit_base import Unit


class Velocity(Unit):
    """Velocity unit stored in meters per second.

    Attributes:
        SUBUNITS: mps, kmph (1000/3600 m/s).
    """

    __slots__ = ()
    SYMBOL = "m/s"
    SUBUNITS = {"mps": 1.0, "kmph": 1_000.0 / 3_600.0}


class Acceleration(Unit):
    """Acceleration unit stored in meters per second squared."""

    __slots__ = ()
    SYMBOL = "m/s^2"
    SUBUNITS = {"mps2": 1.0}


Speed = Velocity

mps = Velocity.mps
kmph = Velocity.kmph
mps2 = Acceleration.mps2
