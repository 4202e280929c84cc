"""bytefmt.

Human-readable byte-size formatting: 1337 -> '1.34kB'.
"""

__version__ = "1.0.0"

from .byte_size import format_byte_size, select_units, Options, InvalidInputError
from .config import (
    BYTE_UNITS,
    BIBYTE_UNITS,
    BIT_UNITS,
    BIBIT_UNITS,
)

__all__ = [
    # Core
    'format_byte_size',
    'select_units',
    'Options',
    'InvalidInputError',
    # Unit tables
    'BYTE_UNITS',
    'BIBYTE_UNITS',
    'BIT_UNITS',
    'BIBIT_UNITS',
]
