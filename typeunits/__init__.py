"""typeunits: distinct numeric types for physical quantities.

Each unit type wraps a single NumPy scalar and refuses to mix with other unit
types, so seconds cannot be added to meters by accident. See
``typeunits.unit`` for the unit system and ``typeunits.config`` for the
precision switch.
"""

import logging

from .config import Base, DOUBLE_PRECISION
from .unit import (
    LSB,
    Acceleration,
    Angle,
    AngularFrequency,
    AngularSpeed,
    Bits,
    Bytes,
    DeclarationError,
    Frequency,
    Length,
    SamplingFrequency,
    Speed,
    Time,
    Unit,
    Velocity,
    declare_conversion,
    declare_quotient,
    declare_unit,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "Base",
    "DOUBLE_PRECISION",
    "Unit",
    "DeclarationError",
    "declare_unit",
    "declare_quotient",
    "declare_conversion",
    "Time",
    "Length",
    "Frequency",
    "SamplingFrequency",
    "AngularFrequency",
    "AngularSpeed",
    "Velocity",
    "Speed",
    "Acceleration",
    "Angle",
    "LSB",
    "Bits",
    "Bytes",
]
