"""
Plural / agreement selection — which word form goes with a count.

One generic rule, parameterized per locale:

    n = 1, 21, 101     → "рубль"    (singular)
    n = 2–4, 22–24     → "рубля"    (plural 2-to-4)
    n = 0, 5–20, 25–30 → "рублей"   (plural genitive)

Locales with fewer forms (English: dollar/dollars) declare fewer ranges, and
the missing categories collapse onto the standard plural.
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, model_validator

from .models import PluralCategory


class PluralRule(BaseModel):
    """Locale-supplied descriptor driving ``select``.

    singular:
        "last_digit" — last digit 1 (outside the teen exception) is singular.
        "exact"      — only the count 1 itself is singular.
        "never"      — no singular form.
    teen_exception:
        Inclusive range of n % 100 that always takes the genitive (11–14).
    few:
        Inclusive range of n % 10 taking the 2-to-4 form.
    genitive:
        Whether the locale distinguishes a genitive plural at all.
    """

    model_config = {"frozen": True}

    singular: Literal["last_digit", "exact", "never"] = "exact"
    teen_exception: Optional[tuple[int, int]] = None
    few: Optional[tuple[int, int]] = None
    genitive: bool = False


class PluralForms(BaseModel):
    """Up to four word forms for one noun (a currency unit or a scale word)."""

    model_config = {"frozen": True}

    singular: str
    plural: Optional[str] = None
    plural_2_to_4: Optional[str] = None
    plural_genitive: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def _accept_bare_string(cls, data: object) -> object:
        # "thousand" in a JSON table means the word never inflects
        if isinstance(data, str):
            return {"singular": data}
        return data

    def pick(self, category: PluralCategory) -> str:
        """Resolve the form for ``category``, falling back to the nearest declared one."""
        if category == PluralCategory.SINGULAR:
            return self.singular
        if category == PluralCategory.PLURAL_2_TO_4:
            chain = (self.plural_2_to_4, self.plural, self.plural_genitive)
        elif category == PluralCategory.PLURAL_GENITIVE:
            chain = (self.plural_genitive, self.plural)
        else:
            chain = (self.plural, self.plural_genitive)
        for form in chain:
            if form:
                return form
        return self.singular


def _in_range(value: int, bounds: Optional[tuple[int, int]]) -> bool:
    return bounds is not None and bounds[0] <= value <= bounds[1]


def select(count: int, rule: PluralRule) -> PluralCategory:
    """Pick the plural category for a non-negative ``count``.

    Pure and total: every non-negative integer maps to exactly one category.
    """
    if count < 0:
        raise ValueError(f"Plural selection needs a non-negative count, got {count}")

    last = count % 10
    last2 = count % 100
    many = PluralCategory.PLURAL_GENITIVE if rule.genitive else PluralCategory.PLURAL

    if _in_range(last2, rule.teen_exception):
        return many
    if rule.singular == "exact" and count == 1:
        return PluralCategory.SINGULAR
    if rule.singular == "last_digit" and last == 1:
        return PluralCategory.SINGULAR
    if _in_range(last, rule.few):
        return PluralCategory.PLURAL_2_TO_4
    return many


def form_for(count: int, forms: PluralForms, rule: PluralRule) -> str:
    """Shortcut: ``forms.pick(select(count, rule))``."""
    return forms.pick(select(count, rule))
