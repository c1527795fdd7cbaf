"""Type-safe unit system for scalar physical quantities.

This package provides the generic unit wrapper, the declaration interface
used to build unit types and relations from it, and a small catalog of
concrete units.

Architecture:
    - unit_base: Unit wrapper, SubUnit descriptor and DeclarationError
    - declare: declare_unit, declare_quotient and declare_conversion
    - unit_time, unit_length, unit_frequency, unit_velocity, unit_angle,
      unit_digital: the concrete unit catalog
    - conversions: relations between catalog types
    - consts: physical constants as unit values

Key Features:
    - Type Safety: values of different unit types never mix; mismatched
      operators raise TypeError
    - Zero metadata: a value holds one NumPy scalar and nothing else
    - Sub-units: every unit type exposes one constant and one accessor per
      declared sub-unit (``5 * Time.min``, ``t.min()``)
    - Relations: declared quotients (Length / Time -> Velocity) and
      conversions (Frequency -> AngularFrequency)

Example:
    >>> from typeunits.unit import Length, Time, Velocity
    >>> v = 1.0 * Length.km / (1.0 * Time.min)
    >>> type(v) is Velocity
    True
    >>> v == 60.0 * Length.km / (1.0 * Time.h)
    True
"""

from . import consts, conversions
from .declare import declare_conversion, declare_quotient, declare_unit
from .unit_angle import Angle
from .unit_base import DeclarationError, Number, SubUnit, Unit
from .unit_digital import LSB, Bits, Bytes
from .unit_frequency import AngularFrequency, AngularSpeed, Frequency, SamplingFrequency
from .unit_length import Length
from .unit_time import Time
from .unit_velocity import Acceleration, Speed, Velocity

__all__ = [
    # Base classes
    "Unit",
    "SubUnit",
    "Number",
    "DeclarationError",
    # Declarations
    "declare_unit",
    "declare_quotient",
    "declare_conversion",
    "conversions",
    "consts",
    # Catalog
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
