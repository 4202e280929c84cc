"""Human-readable byte-size formatting."""

import math
import numbers
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Tuple

try:
    from .config import (
        BYTE_UNITS,
        BIBYTE_UNITS,
        BIT_UNITS,
        BIBIT_UNITS,
        DECIMAL_BASE,
        BINARY_BASE,
        DEFAULT_PRECISION,
    )
    from .utils import is_finite, round_to_significant, format_number
except ImportError:
    from config import (
        BYTE_UNITS,
        BIBYTE_UNITS,
        BIT_UNITS,
        BIBIT_UNITS,
        DECIMAL_BASE,
        BINARY_BASE,
        DEFAULT_PRECISION,
    )
    from utils import is_finite, round_to_significant, format_number


class InvalidInputError(ValueError):
    """Raised when the value to format is not a finite real number."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"expected a finite number, got {type(value).__name__}: {value}")


@dataclass(frozen=True)
class Options:
    """Options for formatting a byte size.

    Attributes:
        bits: Use bit units (b, kbit, ...) instead of byte units
        binary: Scale by powers of 1024 (KiB, MiB, ...) instead of 1000
        space: Put a space between the number and the unit
        signed: Prefix positive values with '+'; zero stays unsigned
        locale: Accepted for compatibility, does not affect output
        minimum_fraction_digits: Pad the fraction to at least this many digits
        maximum_fraction_digits: Round the fraction to at most this many digits
    """
    bits: bool = False
    binary: bool = False
    space: bool = False
    signed: bool = False
    locale: str = ""
    minimum_fraction_digits: int = 0
    maximum_fraction_digits: int = 0

    @property
    def has_fraction_bounds(self) -> bool:
        return bool(self.minimum_fraction_digits or self.maximum_fraction_digits)


def select_units(options: Options) -> Tuple[str, ...]:
    """Pick the unit table matching the bits/binary options."""
    if options.bits:
        return BIBIT_UNITS if options.binary else BIT_UNITS
    return BIBYTE_UNITS if options.binary else BYTE_UNITS


def format_byte_size(byte_size, options: Optional[Options] = None) -> str:
    """Format a byte size as a human-readable string.

    Examples: 1337 -> '1.34kB', 1337 binary -> '1.31KiB',
    -1337 -> '-1.34kB', 1337 signed -> '+1.34kB'.

    Args:
        byte_size: Any finite real number (negative and fractional allowed)
        options: Formatting options, defaults used when None

    Returns:
        Formatted string

    Raises:
        InvalidInputError: If byte_size is infinite, NaN or not a real number
    """
    if options is None:
        options = Options()

    value = _to_float(byte_size)

    units = select_units(options)
    separator = " " if options.space else ""

    if options.signed and value == 0:
        return "0" + separator + units[0]

    if value < 0:
        prefix = "-"
        value = -value
    elif options.signed:
        prefix = "+"
    else:
        prefix = ""

    if value < 1:
        number_string = _format(value, options)
        return prefix + number_string + separator + units[0]

    if options.binary:
        exponent = min(math.floor(math.log(value) / math.log(BINARY_BASE)), len(units) - 1)
        value /= BINARY_BASE ** exponent
    else:
        exponent = min(math.floor(math.log10(value) / 3), len(units) - 1)
        value /= DECIMAL_BASE ** exponent

    if not options.has_fraction_bounds:
        value = round_to_significant(value, DEFAULT_PRECISION)

    return prefix + _format(value, options) + separator + units[exponent]


def _to_float(byte_size) -> float:
    """Convert the input to a finite float or raise InvalidInputError."""
    if not isinstance(byte_size, (numbers.Real, Decimal)):
        raise InvalidInputError(byte_size)

    try:
        value = float(byte_size)
    except (OverflowError, ValueError):
        raise InvalidInputError(byte_size)

    if not is_finite(value):
        raise InvalidInputError(byte_size)
    return value


def _format(value: float, options: Options) -> str:
    return format_number(
        value,
        options.locale,
        options.minimum_fraction_digits,
        options.maximum_fraction_digits,
    )
