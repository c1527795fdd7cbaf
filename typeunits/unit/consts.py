"""Physical constants expressed as unit values.

Constants:
    c: Speed of light in vacuum.
    g: Standard acceleration of gravity.
"""

from __future__ import annotations

from .unit_velocity import Acceleration, Velocity

c = Velocity(299_792_458.0)
g = Acceleration(9.80665)
