"""
Split the integer part of a number into 3-digit groups on the scale ladder.

    "1234567"  →  [{1, 2}, {234, 1}, {567, 0}]
                   million  thousand  units

Zero groups are KEPT — the assembler needs them to decide where padding and
linking words go.  Only the assembler drops them.
"""

from __future__ import annotations

from .exceptions import MagnitudeExceeded
from .models import DigitGroup

# Largest supported integer part: 999 sextillion… (8 groups of 3)
MAX_DIGITS = 24
GROUP_SIZE = 3


def decompose(integer_digits: str) -> list[DigitGroup]:
    """Partition ``integer_digits`` into groups, most-significant first.

    Raises:
        MagnitudeExceeded: More than ``MAX_DIGITS`` digits.
    """
    digits = integer_digits.lstrip("0") or "0"
    if len(digits) > MAX_DIGITS:
        raise MagnitudeExceeded(
            f"Integer part has {len(digits)} digits; at most {MAX_DIGITS} are supported",
            details={"digits": len(digits), "limit": MAX_DIGITS},
        )

    groups: list[DigitGroup] = []
    end = len(digits)
    scale_index = 0
    while end > 0:
        start = max(0, end - GROUP_SIZE)
        groups.append(DigitGroup(value=int(digits[start:end]), scale_index=scale_index))
        end = start
        scale_index += 1

    groups.reverse()
    return groups


def join_groups(groups: list[DigitGroup]) -> str:
    """Inverse of ``decompose``: the leading group unpadded, the rest zero-padded."""
    if not groups:
        return ""
    head, *tail = groups
    return str(head.value) + "".join(f"{g.value:03d}" for g in tail)
