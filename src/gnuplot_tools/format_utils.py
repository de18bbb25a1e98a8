"""Number formatting for script text (shortest form, like C/Go `%g`)."""

from __future__ import annotations

import math
from decimal import Decimal

# Exponent form is used below 1e-4 and from 1e6 on.
_MIN_EXPONENT = -4
_MAX_EXPONENT = 6


def format_number(value: float, signed: bool = False) -> str:
    """Format a float with the fewest digits that round-trip.

    Examples: 3.9 -> '3.9', 3.0 -> '3', 1e6 -> '1e+06', 1e-5 -> '1e-05',
    sys.float_info.max -> '1.7976931348623157e+308'.

    Parameters:
        value: Number to format.
        signed: Always prefix a sign ('+0.5'), as `%+g` does.

    Returns:
        Formatted number.
    """
    value = float(value)
    sign = '-' if math.copysign(1.0, value) < 0 else ('+' if signed else '')
    value = abs(value)
    if math.isnan(value):
        return ('+' if signed else '') + 'NaN'
    if math.isinf(value):
        return (sign or '+') + 'Inf'
    if value == 0.0:
        return sign + '0'
    exact = Decimal(repr(value)).normalize()
    exponent = exact.adjusted()
    if exponent < _MIN_EXPONENT or exponent >= _MAX_EXPONENT:
        digits = ''.join(str(d) for d in exact.as_tuple().digits)
        mantissa = digits[0] + ('.' + digits[1:] if len(digits) > 1 else '')
        return f'{sign}{mantissa}e{exponent:+03d}'
    return f'{sign}{exact:f}'


def format_row(*values: float) -> str:
    """Join numbers into one whitespace-separated data row."""
    return ' '.join(format_number(v) for v in values)
