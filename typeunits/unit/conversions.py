"""Relations between the catalog unit types.

Quotients:
    Length / Time -> Velocity
    Velocity / Time -> Acceleration
    Angle / Time -> AngularFrequency

Conversions:
    Frequency -> AngularFrequency, factor 2*pi
    Bytes -> Bits, factor 8

Importing ``typeunits.unit`` runs these declarations, so they are in place
before any catalog type can be used.
"""

from __future__ import annotations

from math import pi

from .declare import declare_conversion, declare_quotient
from .unit_angle import Angle
from .unit_digital import Bits, Bytes
from .unit_frequency import AngularFrequency, Frequency
from .unit_length import Length
from .unit_time import Time
from .unit_velocity import Acceleration, Velocity

declare_quotient(Length, Time, Velocity)
declare_quotient(Velocity, Time, Acceleration)
declare_quotient(Angle, Time, AngularFrequency)

declare_conversion(Frequency, AngularFrequency, 2.0 * pi)
declare_conversion(Bytes, Bits, 8.0)
