"""Frequency unit definitions.

Frequency is stored in hertz and angular frequency in radians per second.
The two are related by a fixed factor of 2*pi, declared in
``typeunits.unit.conversions``.

Classes:
    Frequency: Cycles (or samples) per second, canonical sub-unit Hz.
    AngularFrequency: Radians per second, canonical sub-unit rad_per_s.

Type Aliases:
    SamplingFrequency: Frequency, used for sample rates.
    AngularSpeed: AngularFrequency, used for rotation rates.

Constants:
    Hz, kHz, MHz, sps, ksps: Frequency sub-units.
    rad_per_s, rpm: AngularFrequency sub-units.

Example:
    >>> (10.0 * kHz).Hz()
    np.float32(10000.0)
    >>> AngularFrequency.from_unit(50.0 * Hz)
    AngularFrequency(314.15927)
"""

from __future__ import annotations

from math import pi

from .unit_base import Unit


class Frequency(Unit):
    """Frequency unit stored in hertz.

    ``sps`` and ``ksps`` are aliases of ``Hz`` and ``kHz`` for sampling rates.
    """

    __slots__ = ()
    SUBUNITS = {"Hz": 1.0, "kHz": 1_000.0, "MHz": 1_000_000.0, "sps": 1.0, "ksps": 1_000.0}


class AngularFrequency(Unit):
    """Angular frequency unit stored in radians per second."""

    __slots__ = ()
    SYMBOL = "rad/s"
    SUBUNITS = {"rad_per_s": 1.0, "rpm": 2.0 * pi / 60.0}


SamplingFrequency = Frequency
AngularSpeed = AngularFrequency

Hz = Frequency.Hz
kHz = Frequency.kHz
MHz = Frequency.MHz
sps = Frequency.sps
ksps = Frequency.ksps

rad_per_s = AngularFrequency.rad_per_s
rpm = AngularFrequency.rpm
