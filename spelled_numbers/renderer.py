"""
Render a single 0–999 group into words.

    123 (en)  →  ["one hundred", "twenty-three"]
    105 (vi)  →  ["một trăm", "linh", "năm"]
    221 (ru, feminine) → ["двести", "двадцать одна"]

Padding between *adjacent* groups is not decided here: it depends on the pair
of groups, so it lives in the assembler.
"""

from __future__ import annotations

from typing import Optional

from .models import Gender
from .rules import LocaleRuleSet


def render_group(
    value: int,
    locale: LocaleRuleSet,
    *,
    gender: Optional[Gender] = None,
    include_and: bool = False,
    alternate_link: bool = False,
    year: bool = False,
) -> list[str]:
    """Convert ``value`` (0–999) to a token list; 0 renders to nothing.

    Args:
        include_and: Emit an "always"-mode hundred link (the caller passes
            this only for the final group).
        alternate_link: Use the locale's alternate link word ("lẻ").
        year: Allow year-only unit variants.
    """
    if not 0 <= value <= 999:
        raise ValueError(f"Group value must be 0–999, got {value}")
    if value == 0:
        return []

    hundreds, remainder = divmod(value, 100)
    words: list[str] = []

    if hundreds:
        words.append(locale.hundreds_word(hundreds))

    if remainder:
        link = locale.hundred_link
        if hundreds and link is not None:
            if link.mode == "always" and include_and:
                words.append(link.pick(alternate_link))
            elif link.mode == "no_tens" and remainder < 10:
                words.append(link.pick(alternate_link))
        words.append(_render_below_hundred(remainder, locale, gender, year))

    return words


def _render_below_hundred(
    value: int, locale: LocaleRuleSet, gender: Optional[Gender], year: bool
) -> str:
    if value in locale.teens:
        return locale.teens[value]

    tens, units = divmod(value, 10)
    if tens == 0:
        return locale.digit_word(units, gender)

    tens_word = locale.tens[tens]
    if units == 0:
        return tens_word
    return f"{tens_word}{locale.tens_joiner}{_unit_after_tens(units, tens, locale, gender, year)}"


def _unit_after_tens(
    units: int, tens: int, locale: LocaleRuleSet, gender: Optional[Gender], year: bool
) -> str:
    variant = locale.unit_after_tens.get(units)
    if variant is not None and tens >= variant.min_tens and (year or not variant.year_only):
        return variant.word
    return locale.digit_word(units, gender)
