"""Numeric literal parsing into sign, integer digits and decimal digits.

Handles:
- Python ints of any size: 12, -7, 10**40
- Floats via their shortest repr: 0.1, 1e+21, 5e-07
- Decimals in fixed-point form: Decimal("1.50"), Decimal("1E+3")
- Strings: " 42 ", "+3.5", "-.5", "5.", "1.2e3"

Rejects booleans, NaN and infinities, empty or whitespace-only strings, and
strings with anything other than the number itself ("12kg", "1,000", "1 000").
"""
from __future__ import annotations
import math
import re
from decimal import Decimal

from ..errors import InvalidNumberError
from ..models.value import NumericValue

_NUMBER_RE = re.compile(r'^([+-])?(\d*)(?:\.(\d*))?(?:[eE]([+-]?\d+))?$', re.ASCII)

# Longest digit string accepted on either side of the point; stays under the
# interpreter's int/str conversion limit.
MAX_DIGITS = 4000


def parse(value) -> NumericValue:
    """Parse *value* into a ``NumericValue``.

    Raises ``InvalidNumberError`` for anything that is not a finite number.
    """
    # bool is an int subclass; True must not become "one"
    if isinstance(value, bool):
        raise InvalidNumberError(f"Booleans are not numbers: {value!r}")

    if isinstance(value, int):
        try:
            digits = str(abs(value))
        except ValueError:
            raise InvalidNumberError(f"Integer exceeds {MAX_DIGITS} digits") from None
        _check_length(digits, "integer")
        return NumericValue(is_negative=value < 0, integer_digits=digits)

    if isinstance(value, float):
        if not math.isfinite(value):
            raise InvalidNumberError(f"Number must be finite, got {value!r}")
        text = repr(value)
        # 5.0 reads as the integer 5, the same as any whole float
        if text.endswith(".0"):
            text = text[:-2]
        return _parse_string(text, original=value)

    if isinstance(value, Decimal):
        if not value.is_finite():
            raise InvalidNumberError(f"Number must be finite, got {value!r}")
        # format() would expand the exponent in full
        if value.adjusted() >= MAX_DIGITS or value.as_tuple().exponent < -MAX_DIGITS:
            raise InvalidNumberError(f"Number exceeds {MAX_DIGITS} digits: {value!r}")
        return _parse_string(format(value, "f"), original=value)

    if isinstance(value, str):
        if not value.strip():
            raise InvalidNumberError("Empty number string")
        return _parse_string(value.strip(), original=value)

    raise InvalidNumberError(
        f"Invalid value type: expected int, float, Decimal or str, got {type(value).__name__}"
    )


def _parse_string(text: str, original) -> NumericValue:
    match = _NUMBER_RE.match(text)
    if not match:
        raise InvalidNumberError(f"Invalid number format: {original!r}")

    sign, integer_part, fraction, exponent = match.groups()
    integer_part = integer_part or ""
    fraction = fraction or ""
    if not integer_part and not fraction:
        raise InvalidNumberError(f"Invalid number format: {original!r}")

    if exponent is not None:
        # an exponent this long cannot fit, and int() on it may hit the conversion limit
        if len(exponent.lstrip("+-").lstrip("0")) > 9:
            raise InvalidNumberError(f"Number exceeds {MAX_DIGITS} digits: {original!r}")
        shift = int(exponent)
        if len(integer_part) + shift > MAX_DIGITS or len(fraction) - shift > MAX_DIGITS:
            raise InvalidNumberError(f"Number exceeds {MAX_DIGITS} digits: {original!r}")
        integer_part, fraction = _shift_point(integer_part, fraction, shift)

    integer_part = integer_part.lstrip("0") or "0"
    _check_length(integer_part, "integer")
    _check_length(fraction, "decimal")
    return NumericValue(
        is_negative=sign == "-",
        integer_digits=integer_part,
        decimal_digits=fraction,
    )


def _check_length(digits: str, part: str) -> None:
    if len(digits) > MAX_DIGITS:
        raise InvalidNumberError(f"Number has {len(digits)} {part} digits; at most {MAX_DIGITS} are supported")


def _shift_point(integer_part: str, fraction: str, exponent: int) -> tuple[str, str]:
    """Move the decimal point *exponent* places to the right (left if negative)."""
    digits = integer_part + fraction
    point = len(integer_part) + exponent

    if point >= len(digits):
        return digits + "0" * (point - len(digits)), ""
    if point <= 0:
        return "0", "0" * (-point) + digits
    return digits[:point], digits[point:]
