"""Digital quantity unit definitions.

LSB counts raw converter steps (least significant bits) and is the one unit
stored as an unsigned integer rather than the configured float type. Bits
and Bytes measure data sizes and are related by a factor of 8.

Classes:
    LSB: Unsigned integer count of converter steps.
    Bits: Data size in bits.
    Bytes: Data size in bytes.

Constants:
    lsb: One LSB.
    bit, kbit: Bits sub-units.
    B, kB, KiB: Bytes sub-units.

Example:
    >>> reading = 3 * lsb
    >>> reading / 2
    LSB(1)
    >>> Bits.from_unit(2.0 * kB)
    Bits(16000.0)
"""

from __future__ import annotations

import numpy as np

from .declare import declare_unit
from .unit_base import Unit


class LSB(Unit):
    """Count of least significant bits, stored as ``numpy.uint64``.

    Only integral scalars within the uint64 range may scale an LSB count;
    others (fractions, negative integers) raise TypeError. Division truncates.
    """

    __slots__ = ()
    REPRESENTATION = np.uint64
    SUBUNITS = {"lsb": 1.0}


Bits = declare_unit("Bits", {"bit": 1.0, "kbit": 1_000.0})
Bytes = declare_unit("Bytes", {"B": 1.0, "kB": 1_000.0, "KiB": 1_024.0})

lsb = LSB.lsb
bit = Bits.bit
kbit = Bits.kbit
B = Bytes.B
kB = Bytes.kB
KiB = Bytes.KiB
