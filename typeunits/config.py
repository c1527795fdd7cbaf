"""Global configuration and type definitions for the unit library.

This module holds the single precision switch shared by every unit type.
The switch is resolved once, when the module is first imported, and never
changes afterwards; unit types capture the selected scalar type at
declaration time.

Type Definitions:
    Base: NumPy scalar type used as the canonical representation of every
          unit that does not request its own. ``numpy.float32`` by default,
          ``numpy.float64`` when double precision is enabled.

Environment:
    TYPEUNITS_DOUBLE_PRECISION: Boolean flag ("1", "true", "yes", ...)
        selecting double precision. Defaults to single precision.

Example:
    >>> from typeunits.config import Base
    >>> Base(1.5)
    np.float32(1.5)
"""

import logging

import numpy as np
from environs import Env

logger = logging.getLogger(__name__)

env = Env()

DOUBLE_PRECISION: bool = env.bool("TYPEUNITS_DOUBLE_PRECISION", default=False)

Base: type[np.floating] = np.float64 if DOUBLE_PRECISION else np.float32

logger.debug("Canonical scalar representation: %s", Base.__name__)
