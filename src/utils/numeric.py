"""Numeric helpers for byte-size formatting."""

import math
from decimal import Context, Decimal, ROUND_HALF_UP

try:
    from ..config import DEFAULT_MAXIMUM_FRACTION_DIGITS
except ImportError:
    from config import DEFAULT_MAXIMUM_FRACTION_DIGITS


def is_finite(number: float) -> bool:
    """Check that a number is neither infinite nor NaN."""
    return not math.isinf(number) and not math.isnan(number)


def round_to_significant(number: float, digits: int) -> float:
    """Round a number to a given count of significant digits.

    Rounds half away from zero on the shortest decimal representation of
    the float, so 1.335 becomes 1.34 instead of 1.33.

    Args:
        number: Finite number to round
        digits: Significant digits to keep (at least 1)

    Returns:
        Rounded number
    """
    if number == 0:
        return 0.0

    value = Decimal(repr(number))
    quantum = Decimal(1).scaleb(value.adjusted() - max(digits, 1) + 1)
    return float(value.quantize(quantum, rounding=ROUND_HALF_UP))


def format_number(
    number: float,
    locale: str = "",
    minimum_fraction_digits: int = 0,
    maximum_fraction_digits: int = 0
) -> str:
    """Format a number as a plain positional decimal string.

    Without fraction-digit bounds the shortest exact representation is
    used: '1', '1.34', '0.0000001'. With bounds the fractional part is
    rounded to at most maximum_fraction_digits and zero-padded to at least
    minimum_fraction_digits.

    The locale is accepted but does not change the output.

    Args:
        number: Finite number to format
        locale: Locale name (ignored)
        minimum_fraction_digits: Lower bound on fraction digits, 0 for none
        maximum_fraction_digits: Upper bound on fraction digits, 0 for none

    Returns:
        Formatted number string
    """
    if number == 0:
        # Drops the sign of -0.0
        number = 0.0

    value = Decimal(repr(number))

    if not minimum_fraction_digits and not maximum_fraction_digits:
        return _strip_fraction(format(value, 'f'), 0)

    minimum = max(minimum_fraction_digits, 0)
    maximum = max(maximum_fraction_digits, 0)
    if not maximum_fraction_digits:
        maximum = max(minimum, DEFAULT_MAXIMUM_FRACTION_DIGITS)
    maximum = max(maximum, minimum)

    # Enough precision for every integral digit plus the fraction
    context = Context(prec=max(value.adjusted(), 0) + maximum + 2)
    rounded = value.quantize(Decimal(1).scaleb(-maximum), rounding=ROUND_HALF_UP, context=context)
    return _strip_fraction(format(rounded, 'f'), minimum)


def _strip_fraction(text: str, keep: int) -> str:
    """Drop trailing fractional zeros, keeping at least `keep` digits."""
    if '.' not in text:
        return text + ('.' + '0' * keep if keep else '')

    whole, fraction = text.split('.', 1)
    fraction = fraction.rstrip('0')
    if len(fraction) < keep:
        fraction = fraction + '0' * (keep - len(fraction))
    return f"{whole}.{fraction}" if fraction else whole
