"""Base unit system foundation for type-safe physical quantities.

This module provides the Unit class, the generic wrapper every unit type in
the library is built from. A unit type wraps exactly one NumPy scalar, the
magnitude expressed in the unit's canonical sub-unit, and carries no other
runtime metadata: the Python class of a value *is* its unit.

Declaring a unit means subclassing Unit with a table of sub-units. At class
creation time ``__init_subclass__`` validates the table and attaches, for
every sub-unit, a constant (on the class) and an accessor (on instances)
through a single SubUnit descriptor.

Key Concepts:
- Canonical sub-unit: the sub-unit declared with factor 1.0; values are
  always stored in it.
- Factor: number of canonical units in one sub-unit (one minute is 60 s).
- Final types: a declared unit cannot be subclassed, so two unit types are
  either identical or unrelated.
- Operator protocol: operations between unrelated unit types return
  NotImplemented, which makes Python raise TypeError.

Classes:
    DeclarationError: Raised when a unit or relation is declared inconsistently.
    SubUnit: Descriptor exposing one sub-unit as a constant and an accessor.
    Unit: Abstract base class for all unit types.

Example:
    >>> class Time(Unit):
    ...     __slots__ = ()
    ...     SUBUNITS = {"s": 1.0, "min": 60.0}
    >>> Time.min                  # constant: one minute, stored as seconds
    Time(60.0)
    >>> (2.5 * Time.min).s()      # accessor: read back in seconds
    np.float32(150.0)
    >>> Time.s / Time.min         # same-unit division is dimensionless
    np.float32(0.016666668)
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from math import isfinite
from types import MappingProxyType, MethodType
from typing import Any, ClassVar

import numpy as np

from typeunits.config import Base

logger = logging.getLogger(__name__)

Number = int | float | np.number


class DeclarationError(TypeError):
    """Raised when a unit type or a relation between unit types is invalid."""


class SubUnit:
    """One named scale of a unit type.

    Read from the class, the descriptor yields the constant equal to one of
    this sub-unit (``Time.min == Time(60.0)``), so ``5 * Time.min`` builds
    five minutes. Read from an instance, it yields a zero-argument accessor
    returning the instance's magnitude in this sub-unit
    (``(5 * Time.min).min() == 5.0``).

    Attributes:
        name (str): Sub-unit name, also the attribute name on the unit type.
        factor (float): Canonical units per one sub-unit.
        constant (Unit): Unit value equal to one sub-unit.
    """

    __slots__ = ("name", "factor", "constant")

    def __init__(self, name: str, factor: float, constant: Unit):
        self.name = name
        self.factor = factor
        self.constant = constant

    def __get__(self, instance: Unit | None, owner: type[Unit]) -> Any:
        if instance is None:
            return self.constant
        return MethodType(self._read, instance)

    def _read(self, instance: Unit) -> np.number:
        return instance._rescale(self.factor)

    def __repr__(self) -> str:
        return f"SubUnit({self.name!r}, {self.factor!r})"


class Unit:
    """Base class for all unit types.

    Subclasses declare ``SUBUNITS`` (sub-unit name to factor) and may
    override ``REPRESENTATION`` (a NumPy scalar type, ``Base`` by default)
    and ``SYMBOL`` (defaults to the canonical sub-unit name). Subclasses
    should also declare ``__slots__ = ()`` so instances stay dict-free.

    Arithmetic follows the unit rules:

    - ``U + U``, ``U - U`` and ``-U`` give ``U``.
    - ``U * k``, ``k * U`` and ``U / k`` give ``U`` for a scalar ``k``.
    - ``U / U`` gives a bare scalar of the representation.
    - ``D / V`` gives ``O`` where a quotient ``D / V -> O`` was declared.

    Everything else returns NotImplemented and ends in TypeError. Equality
    and ordering compare canonical magnitudes exactly, with no tolerance.

    Attributes:
        SUBUNITS (ClassVar[Mapping[str, float]]): Read-only sub-unit table.
        SYMBOL (ClassVar[str]): Symbol of the canonical sub-unit for display.
        REPRESENTATION (ClassVar[type[np.number]]): Scalar type of the magnitude.
    """

    __slots__ = ("_value",)
    __array_priority__ = 1000
    # NumPy scalars and arrays defer binary operators to the Unit operand.
    __array_ufunc__ = None

    SUBUNITS: ClassVar[Mapping[str, float]] = MappingProxyType({})
    SYMBOL: ClassVar[str] = ""
    REPRESENTATION: ClassVar[type[np.number]] = Base

    _quotients: ClassVar[dict[type[Unit], type[Unit]]]
    _conversions: ClassVar[dict[type[Unit], Callable[[Unit], Unit]]]

    def __init_subclass__(cls, **kwargs):
        """Validate the sub-unit table and attach constants and accessors.

        Args:
            **kwargs: Additional keyword arguments passed to super().__init_subclass__.

        Raises:
            DeclarationError: If the class subclasses another unit type, has an
                invalid representation, or declares an invalid sub-unit table.
        """
        super().__init_subclass__(**kwargs)
        for base in cls.__mro__[1:]:
            if base is not Unit and issubclass(base, Unit):
                msg = f"{base.__name__} is final; declare {cls.__name__} as a new unit instead"
                raise DeclarationError(msg)

        rep = cls.REPRESENTATION
        if not (isinstance(rep, type) and issubclass(rep, np.number)):
            msg = f"{cls.__name__}: REPRESENTATION must be a NumPy scalar type, got {rep!r}"
            raise DeclarationError(msg)

        factors = _validate_subunits(cls.__name__, cls.__dict__.get("SUBUNITS"))
        if issubclass(rep, np.integer):
            limit = np.iinfo(rep).max
            for name, factor in factors.items():
                if not factor.is_integer() or factor > limit:
                    msg = (
                        f"{cls.__name__}.{name}: factor {factor!r} is not an integer "
                        f"that {rep.__name__} can hold"
                    )
                    raise DeclarationError(msg)
        cls.SUBUNITS = MappingProxyType(factors)
        if not cls.__dict__.get("SYMBOL"):
            cls.SYMBOL = next(name for name, factor in factors.items() if factor == 1.0)

        cls._quotients = {}
        cls._conversions = {}
        for name, factor in factors.items():
            setattr(cls, name, SubUnit(name, factor, cls(factor)))

        logger.debug(
            "Declared unit %s over %s with sub-units %s",
            cls.__name__,
            rep.__name__,
            ", ".join(factors),
        )

    def __init__(self, value: Number = 0):
        """Create a unit value from a magnitude in the canonical sub-unit.

        Args:
            value: Canonical magnitude; coerced to the unit's representation.

        Raises:
            TypeError: If value is itself a unit value.
        """
        if isinstance(value, Unit):
            msg = (
                f"cannot build {type(self).__name__} from {type(value).__name__}; "
                f"use {type(self).__name__}.from_unit()"
            )
            raise TypeError(msg)
        object.__setattr__(self, "_value", self.REPRESENTATION(value))

    @classmethod
    def new(cls, value: Number) -> Unit:
        """Create a unit value from a canonical magnitude."""
        return cls(value)

    def canonical(self) -> np.number:
        """Return the magnitude in the canonical sub-unit, without the unit."""
        return self._value

    def to(self, name: str) -> np.number:
        """Return the magnitude expressed in the sub-unit called ``name``.

        Args:
            name: Declared sub-unit name, e.g. ``"min"`` for Time.

        Returns:
            np.number: Magnitude in that sub-unit.

        Raises:
            ValueError: If the unit has no such sub-unit.
        """
        try:
            factor = self.SUBUNITS[name]
        except KeyError:
            msg = f"{type(self).__name__} has no sub-unit {name!r}"
            raise ValueError(msg) from None
        return self._rescale(factor)

    # ---------------------------------- Conversions ----------------------------------
    @classmethod
    def from_unit(cls, value: Unit) -> Unit:
        """Convert a value of another unit type through a declared conversion.

        Args:
            value: Unit value to convert.

        Returns:
            Unit: Equivalent value of this unit type.

        Raises:
            TypeError: If no conversion between the two types was declared.
        """
        if type(value) is cls:
            return cls(value._value)
        convert = cls._conversions.get(type(value))
        if convert is None:
            msg = f"no conversion declared between {type(value).__name__} and {cls.__name__}"
            raise TypeError(msg)
        return convert(value)

    def into(self, unit_type: type[Unit]) -> Unit:
        """Convert this value to ``unit_type``; see from_unit."""
        return unit_type.from_unit(self)

    # ---------------------------------- Helpers ----------------------------------
    @classmethod
    def _scalar(cls, k: Any) -> np.number | None:
        if isinstance(k, Unit) or not isinstance(k, Number):
            return None
        if issubclass(cls.REPRESENTATION, np.integer):
            if not isinstance(k, int | np.integer):
                return None
            bounds = np.iinfo(cls.REPRESENTATION)
            if not bounds.min <= int(k) <= bounds.max:
                return None
        return cls.REPRESENTATION(k)

    @classmethod
    def _divide(cls, a: np.number, b: np.number) -> np.number:
        if issubclass(cls.REPRESENTATION, np.integer):
            return cls.REPRESENTATION(a // b)
        return cls.REPRESENTATION(a / b)

    def _rescale(self, factor: float) -> np.number:
        return self._divide(self._value, self.REPRESENTATION(factor))

    # ---------------------------------- Arithmetic Operations ----------------------------------
    def __add__(self, other: Unit) -> Unit:
        """Add two values of the same unit type.

        Args:
            other: Value of the same unit type.

        Returns:
            Unit: Sum of the canonical magnitudes.
        """
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(self._value + other._value)

    def __sub__(self, other: Unit) -> Unit:
        """Subtract a value of the same unit type.

        Args:
            other: Value of the same unit type.

        Returns:
            Unit: Difference of the canonical magnitudes.
        """
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(self._value - other._value)

    def __neg__(self) -> Unit:
        """Return the value with its sign flipped."""
        return type(self)(-self._value)

    def __mul__(self, k: Number) -> Unit:
        """Scale the value by a dimensionless scalar, from either side.

        Args:
            k: Numeric scalar. Integer representations accept only integers
                within the representation's range.

        Returns:
            Unit: Value of the same unit type, scaled by k.
        """
        scalar = self._scalar(k)
        if scalar is None:
            return NotImplemented
        return type(self)(self._value * scalar)

    __rmul__ = __mul__

    def __truediv__(self, other: Unit | Number) -> Unit | np.number:
        """Divide by a scalar, by the same unit, or by a declared divisor unit.

        Args:
            other: Scalar, value of the same unit type, or value of a unit type
                with a declared quotient relation.

        Returns:
            Unit | np.number: Rescaled value, dimensionless ratio, or a value
            of the declared quotient's result type.
        """
        if isinstance(other, Unit):
            if type(other) is type(self):
                return self._divide(self._value, other._value)
            result = self._quotients.get(type(other))
            if result is None:
                return NotImplemented
            return result(result._divide(self._value, other._value))
        scalar = self._scalar(other)
        if scalar is None:
            return NotImplemented
        return type(self)(self._divide(self._value, scalar))

    # ---------------------------------- Comparisons ----------------------------------
    def __eq__(self, other: object) -> bool:
        """Exact equality of canonical magnitudes; False for other unit types.

        Args:
            other: Object to compare against.

        Returns:
            bool: True if other is the same unit type with the same magnitude.
        """
        if type(other) is not type(self):
            return NotImplemented
        return bool(self._value == other._value)

    def __lt__(self, other: Unit) -> bool:
        """Less-than comparison between two values of the same unit type.

        Args:
            other: Value of the same unit type.

        Returns:
            bool: True if this magnitude is smaller.
        """
        if type(other) is not type(self):
            return NotImplemented
        return bool(self._value < other._value)

    def __le__(self, other: Unit) -> bool:
        """Less-than-or-equal comparison between two values of the same unit type.

        Args:
            other: Value of the same unit type.

        Returns:
            bool: True if this magnitude is smaller or equal.
        """
        if type(other) is not type(self):
            return NotImplemented
        return bool(self._value <= other._value)

    def __gt__(self, other: Unit) -> bool:
        """Greater-than comparison between two values of the same unit type.

        Args:
            other: Value of the same unit type.

        Returns:
            bool: True if this magnitude is larger.
        """
        if type(other) is not type(self):
            return NotImplemented
        return bool(self._value > other._value)

    def __ge__(self, other: Unit) -> bool:
        """Greater-than-or-equal comparison between two values of the same unit type.

        Args:
            other: Value of the same unit type.

        Returns:
            bool: True if this magnitude is larger or equal.
        """
        if type(other) is not type(self):
            return NotImplemented
        return bool(self._value >= other._value)

    def __hash__(self) -> int:
        """Hash the unit type together with the canonical magnitude.

        Returns:
            int: Equal for values that compare equal.
        """
        return hash((type(self), self._value.item()))

    # ---------------------------------- Value semantics ----------------------------------
    def __setattr__(self, name: str, value: Any) -> None:
        msg = f"{type(self).__name__} values are immutable"
        raise AttributeError(msg)

    def __delattr__(self, name: str) -> None:
        msg = f"{type(self).__name__} values are immutable"
        raise AttributeError(msg)

    def __reduce__(self):
        """Rebuild the value from its canonical magnitude on copy and unpickle.

        Returns:
            tuple: The unit type and its constructor arguments.
        """
        return (type(self), (self._value,))

    def __str__(self) -> str:
        """Return the canonical magnitude followed by the unit symbol (e.g. "60.0 s")."""
        return f"{self._value} {self.SYMBOL}".strip()

    def __repr__(self) -> str:
        """Return the constructor form of the value (e.g. "Time(60.0)")."""
        return f"{type(self).__name__}({self._value})"


def _validate_subunits(unit_name: str, subunits: Mapping[str, float] | None) -> dict[str, float]:
    """Check a sub-unit table and normalise its factors to floats.

    Raises:
        DeclarationError: On an empty table, a name that is not a public
            identifier or shadows the Unit API, a non-finite or non-positive
            factor, or a table with no canonical (factor 1.0) sub-unit.
    """
    if not subunits:
        msg = f"{unit_name} declares no SUBUNITS"
        raise DeclarationError(msg)

    factors: dict[str, float] = {}
    for name, factor in subunits.items():
        if not isinstance(name, str) or not name.isidentifier() or name.startswith("_"):
            msg = f"{unit_name}: sub-unit name {name!r} is not a public identifier"
            raise DeclarationError(msg)
        if hasattr(Unit, name):
            msg = f"{unit_name}: sub-unit name {name!r} shadows the Unit API"
            raise DeclarationError(msg)
        try:
            value = float(factor)
        except (TypeError, ValueError):
            msg = f"{unit_name}.{name}: factor {factor!r} is not a number"
            raise DeclarationError(msg) from None
        if not isfinite(value) or value <= 0.0:
            msg = f"{unit_name}.{name}: factor must be finite and positive, got {factor!r}"
            raise DeclarationError(msg)
        factors[name] = value

    if 1.0 not in factors.values():
        msg = f"{unit_name} has no canonical sub-unit (a sub-unit with factor 1.0)"
        raise DeclarationError(msg)
    return factors
