"""Declaration interface for unit types and the relations between them.

The three functions here are the whole generative surface of the library:

- declare_unit builds a new unit type from a sub-unit table.
- declare_quotient states that dividing one unit type by another yields a
  third one.
- declare_conversion states a fixed, invertible scale between two unit types.

Relations are stored on the participating classes and are consulted by the
Unit operators and by Unit.from_unit. They are meant to be declared once, at
import time, and never changed.

Example:
    >>> Distance = declare_unit("Distance", {"m": 1.0, "km": 1000.0})
    >>> Duration = declare_unit("Duration", {"s": 1.0, "h": 3600.0})
    >>> Pace = declare_unit("Pace", {"mps": 1.0})
    >>> declare_quotient(Distance, Duration, Pace)
    >>> 3.6 * Distance.km / Duration.h
    Pace(1.0)
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Mapping
from math import isfinite

import numpy as np

from .unit_base import DeclarationError, Number, Unit

logger = logging.getLogger(__name__)


def declare_unit(
    name: str,
    subunits: Mapping[str, float],
    representation: type[np.number] | None = None,
    symbol: str | None = None,
    module: str | None = None,
) -> type[Unit]:
    """Create a new unit type.

    Equivalent to writing ``class <name>(Unit)`` with the given ``SUBUNITS``,
    ``REPRESENTATION`` and ``SYMBOL``.

    Args:
        name: Class name of the new unit type.
        subunits: Sub-unit name to factor (canonical units per sub-unit). At
            least one factor must be 1.0.
        representation: NumPy scalar type of the magnitude; ``Base`` if omitted.
        symbol: Display symbol; the canonical sub-unit name if omitted.
        module: ``__module__`` of the new type; defaults to the caller's module
            so that values can be pickled.

    Returns:
        type[Unit]: The new unit type.

    Raises:
        DeclarationError: If the name or the sub-unit table is invalid.
    """
    if not isinstance(name, str) or not name.isidentifier():
        msg = f"unit name {name!r} is not an identifier"
        raise DeclarationError(msg)

    if module is None:
        module = sys._getframe(1).f_globals.get("__name__", __name__)

    namespace = {"__slots__": (), "__module__": module, "SUBUNITS": dict(subunits)}
    if representation is not None:
        namespace["REPRESENTATION"] = representation
    if symbol:
        namespace["SYMBOL"] = symbol
    return type(name, (Unit,), namespace)


def declare_quotient(dividend: type[Unit], divisor: type[Unit], result: type[Unit]) -> None:
    """Declare that ``dividend / divisor`` yields a ``result`` value.

    The result magnitude is ``dividend.canonical() / divisor.canonical()``.
    No reciprocal or product rule is derived from the declaration.

    Raises:
        DeclarationError: If an argument is not a unit type, dividend and divisor
            are the same type, the representations differ, or the pair already
            has a declared quotient.
    """
    for unit_type in (dividend, divisor, result):
        _require_unit(unit_type)
    if dividend is divisor:
        msg = f"{dividend.__name__} / {divisor.__name__} is always dimensionless"
        raise DeclarationError(msg)
    representations = {dividend.REPRESENTATION, divisor.REPRESENTATION, result.REPRESENTATION}
    if len(representations) > 1:
        msg = (
            f"quotient {dividend.__name__} / {divisor.__name__} -> {result.__name__} "
            "mixes representations"
        )
        raise DeclarationError(msg)
    existing = dividend._quotients.get(divisor)
    if existing is not None:
        msg = f"{dividend.__name__} / {divisor.__name__} already yields {existing.__name__}"
        raise DeclarationError(msg)

    dividend._quotients[divisor] = result
    logger.debug(
        "Declared quotient %s / %s -> %s", dividend.__name__, divisor.__name__, result.__name__
    )


def declare_conversion(source: type[Unit], target: type[Unit], factor: Number) -> None:
    """Declare a lossless conversion ``source -> target`` by a fixed factor.

    ``target.from_unit(a)`` computes ``a.canonical() * factor`` and the inverse,
    registered from the same factor, computes ``b.canonical() / factor``.
    Only one direction may ever be declared for a pair.

    Raises:
        DeclarationError: If an argument is not a unit type, source and target
            are the same type, the factor is not finite and non-zero, or the
            pair (in either direction) is already related.
    """
    _require_unit(source)
    _require_unit(target)
    if source is target:
        msg = f"cannot declare a conversion from {source.__name__} to itself"
        raise DeclarationError(msg)
    try:
        k = float(factor)
    except (TypeError, ValueError):
        msg = f"conversion factor {factor!r} is not a number"
        raise DeclarationError(msg) from None
    if not isfinite(k) or k == 0.0:
        msg = f"conversion factor must be finite and non-zero, got {factor!r}"
        raise DeclarationError(msg)
    if source in target._conversions:
        msg = f"a conversion between {source.__name__} and {target.__name__} is already declared"
        raise DeclarationError(msg)

    forward = _operand(source, k)
    inverse = _operand(target, k)

    def to_target(value: Unit) -> Unit:
        return target(value.canonical() * forward)

    def to_source(value: Unit) -> Unit:
        return source(value.canonical() / inverse)

    target._conversions[source] = to_target
    source._conversions[target] = to_source
    logger.debug(
        "Declared conversion %s -> %s with factor %r", source.__name__, target.__name__, k
    )


def _operand(unit_type: type[Unit], k: float) -> np.number:
    # Integer magnitudes are scaled in double precision, then truncated by the target.
    if issubclass(unit_type.REPRESENTATION, np.integer):
        return np.float64(k)
    return unit_type.REPRESENTATION(k)


def _require_unit(unit_type: object) -> None:
    if not (isinstance(unit_type, type) and issubclass(unit_type, Unit) and unit_type is not Unit):
        msg = f"{unit_type!r} is not a declared unit type"
        raise DeclarationError(msg)
