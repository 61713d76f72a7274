"""
Normalize heterogeneous numeric input into a ``CanonicalNumber``.

Accepted: int (any size), float, ``decimal.Decimal``, numeric str, and an
already-built ``CanonicalNumber``.  Everything else — bool, None, lists,
dicts — is rejected without coercion.

Floats go through ``repr()``, the shortest text that round-trips, so 1.1
becomes exactly "1.1" and never "1.100000000000000088817841970012523".

Digit counts are checked before any exponent is expanded: "1e999999999"
fails in constant time instead of building a billion-digit string.
"""

from __future__ import annotations

import math
import re
from decimal import Decimal, InvalidOperation

from .decomposer import MAX_DIGITS
from .exceptions import InvalidInput, MagnitudeExceeded, NonFiniteInput
from .models import CanonicalNumber, Sign

# Optional sign, digits with optional fraction (or a bare fraction), optional exponent
_NUMERAL_RE = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?$")

# Longest fraction (trailing zeros excluded) that will be read out
MAX_FRACTION_DIGITS = 64


def normalize(value: object) -> CanonicalNumber:
    """Convert ``value`` to a CanonicalNumber.

    Raises:
        NonFiniteInput: NaN or ±infinity (float or Decimal).
        MagnitudeExceeded: More than MAX_DIGITS integer digits or
            MAX_FRACTION_DIGITS significant fraction digits.
        InvalidInput: Unsupported type or malformed numeral string.
    """
    if isinstance(value, CanonicalNumber):
        return value
    # bool is a subclass of int — reject it before the int branch
    if isinstance(value, bool) or value is None:
        raise InvalidInput(
            f"Unsupported input type: {type(value).__name__}",
            details={"type": type(value).__name__},
        )
    if isinstance(value, int):
        return _from_int(value)
    if isinstance(value, float):
        return _from_float(value)
    if isinstance(value, Decimal):
        return _from_decimal(value)
    if isinstance(value, str):
        return _from_string(value)
    raise InvalidInput(
        f"Unsupported input type: {type(value).__name__}",
        details={"type": type(value).__name__},
    )


# ─── Per-Type Converters ────────────────────────────────────────────


def _from_int(value: int) -> CanonicalNumber:
    # Decimal(int) is exact and, unlike str(), has no digit limit
    return _from_decimal(Decimal(value))


def _from_float(value: float) -> CanonicalNumber:
    if math.isnan(value):
        raise NonFiniteInput("NaN cannot be spelled as a number", details={"nan": True, "negative": False})
    if math.isinf(value):
        raise NonFiniteInput(
            "Infinity cannot be spelled as a number",
            details={"nan": False, "negative": value < 0},
        )
    return _from_decimal(Decimal(repr(value)))


def _from_string(value: str) -> CanonicalNumber:
    text = value.strip()
    if not _NUMERAL_RE.match(text):
        raise InvalidInput(f"Not a valid decimal numeral: {value!r}", details={"input": value})
    try:
        parsed = Decimal(text)
    except InvalidOperation as exc:
        raise InvalidInput(f"Not a valid decimal numeral: {value!r}", details={"input": value}) from exc
    return _from_decimal(parsed)


def _from_decimal(value: Decimal) -> CanonicalNumber:
    if value.is_nan():
        raise NonFiniteInput("NaN cannot be spelled as a number", details={"nan": True, "negative": False})
    if value.is_infinite():
        raise NonFiniteInput(
            "Infinity cannot be spelled as a number",
            details={"nan": False, "negative": value.is_signed()},
        )

    if value.is_zero():
        return CanonicalNumber()

    integer_count = value.adjusted() + 1
    if integer_count > MAX_DIGITS:
        raise MagnitudeExceeded(
            f"Integer part has {integer_count} digits; at most {MAX_DIGITS} are supported",
            details={"digits": integer_count, "limit": MAX_DIGITS},
        )

    sign_bit, digits, exponent = value.as_tuple()
    digit_text = "".join(str(d) for d in digits)

    trailing_zeros = len(digit_text) - len(digit_text.rstrip("0"))
    fraction_count = -(exponent + trailing_zeros)
    if fraction_count > MAX_FRACTION_DIGITS:
        raise MagnitudeExceeded(
            f"Fraction has {fraction_count} significant digits; at most {MAX_FRACTION_DIGITS} are supported",
            details={"fraction_digits": fraction_count, "limit": MAX_FRACTION_DIGITS},
        )

    # Expand the exponent exactly: no float, no context precision involved
    if exponent >= 0:
        integer_text, fraction_text = digit_text + "0" * exponent, ""
    else:
        shift = -exponent
        if shift >= len(digit_text):
            integer_text = "0"
            fraction_text = "0" * (shift - len(digit_text)) + digit_text
        else:
            integer_text = digit_text[:-shift]
            fraction_text = digit_text[-shift:]

    integer_text = integer_text.lstrip("0") or "0"
    sign = Sign.NEGATIVE if sign_bit else Sign.POSITIVE

    return CanonicalNumber(sign=sign, integer_digits=integer_text, fraction_digits=fraction_text)
