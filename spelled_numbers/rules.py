"""
Locale rule sets and currency word sets — the data the pipeline consumes.

A ``LocaleRuleSet`` holds every word table and policy flag one language needs.
There is no per-language code path: Vietnamese padding, Russian gendered
thousands and English "and"-linking are all switched on by fields here.

Both models are frozen.  A rule set is loaded once (see ``locales``) and then
shared by reference across every conversion that uses it.
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from .decomposer import GROUP_SIZE, MAX_DIGITS
from .models import DecimalSeparator, Gender, GrammaticalCase
from .plurals import PluralForms, PluralRule

# Highest scale index reachable within MAX_DIGITS (7 → sextillion)
MAX_SCALE_INDEX = MAX_DIGITS // GROUP_SIZE - 1


# ─── Currency ───────────────────────────────────────────────────────


class CurrencyInfo(BaseModel):
    """Unit names and joining rules for one currency in one language."""

    model_config = {"frozen": True}

    code: str
    main: PluralForms
    sub: Optional[PluralForms] = None
    separator: Optional[str] = None  # "and", "i", … — None joins with a space
    main_gender: Gender = Gender.MASCULINE
    sub_gender: Gender = Gender.MASCULINE
    subunit_digits: int = Field(default=2, ge=0, le=4)

    # Zero-rendering policy, declared per currency rather than inferred:
    zero_main_with_subunit: bool = True  # "zero dollars and fifty cents"
    always_render_subunit: bool = False  # "… and zero cents"

    @property
    def has_subunit(self) -> bool:
        return self.sub is not None and self.subunit_digits > 0


# ─── Locale Sub-Structures ──────────────────────────────────────────


class ScaleWord(BaseModel):
    """Word for one rung of the scale ladder (thousand, million, …)."""

    model_config = {"frozen": True}

    forms: PluralForms
    gender: Gender = Gender.MASCULINE  # Agreement of the count in front of it
    cases: dict[GrammaticalCase, PluralForms] = Field(default_factory=dict)


class UnitVariant(BaseModel):
    """Replacement unit word after a tens word (Vietnamese "mốt", "lăm")."""

    model_config = {"frozen": True}

    word: str
    min_tens: int = Field(default=1, ge=1, le=9)
    year_only: bool = False


class HundredLink(BaseModel):
    """Word placed between the hundreds and the rest of a group.

    mode="always":  English "one hundred AND twenty-three" — opt-in, final group only.
    mode="no_tens": Vietnamese "một trăm LINH năm" — whenever the tens digit is 0.
    """

    model_config = {"frozen": True}

    word: str
    alt_word: Optional[str] = None
    mode: Literal["always", "no_tens"] = "always"
    enabled_by_default: bool = False

    def pick(self, alternate: bool) -> str:
        return self.alt_word if alternate and self.alt_word else self.word


class PaddingPolicy(BaseModel):
    """Cross-group filler: "một nghìn KHÔNG TRĂM LINH một" (1001)."""

    model_config = {"frozen": True}

    word: str  # Stands in for the missing hundreds ("không trăm")
    link_word: str  # Bridges a gap to a small remainder ("linh")
    alt_link_word: Optional[str] = None  # ("lẻ")

    def link(self, alternate: bool) -> str:
        return self.alt_link_word if alternate and self.alt_link_word else self.link_word


class EraWords(BaseModel):
    model_config = {"frozen": True}

    positive: str  # "AD"
    negative: str  # "BC"
    negative_position: Literal["prefix", "suffix"] = "suffix"
    include_by_default: bool = False


# ─── Locale Rule Set ────────────────────────────────────────────────


class LocaleRuleSet(BaseModel):
    """Everything the pipeline needs to spell numbers in one language."""

    model_config = {"frozen": True}

    code: str
    name: str

    # Cardinal vocabulary
    zero: str
    digits: list[str] = Field(min_length=10, max_length=10)  # 0–9
    teens: dict[int, str] = Field(default_factory=dict)  # Irregular 10–19
    tens: list[str] = Field(min_length=10, max_length=10)
    tens_joiner: str = " "
    hundreds: Optional[list[str]] = None  # Full forms ("двести"); else composed
    hundred_word: Optional[str] = None
    gendered_digits: dict[Gender, dict[int, str]] = Field(default_factory=dict)
    unit_after_tens: dict[int, UnitVariant] = Field(default_factory=dict)
    case_words: dict[GrammaticalCase, dict[str, str]] = Field(default_factory=dict)
    scales: dict[int, ScaleWord]

    # Policies
    plural_rule: PluralRule
    hundred_link: Optional[HundredLink] = None
    padding: Optional[PaddingPolicy] = None
    year_style: Literal["cardinal", "pairs"] = "cardinal"
    fraction_as_cardinal: bool = False

    # Context words
    negative_word: str
    era: EraWords
    decimal_words: dict[DecimalSeparator, str]
    default_separator: DecimalSeparator = DecimalSeparator.PERIOD
    default_currency: str
    infinity: str = "Infinity"
    negative_infinity: str = "Negative Infinity"
    not_a_number: str = "Not a Number"

    @field_validator("teens")
    @classmethod
    def _teens_in_range(cls, value: dict[int, str]) -> dict[int, str]:
        stray = [k for k in value if not 10 <= k <= 19]
        if stray:
            raise ValueError(f"teens keys must be 10–19, got {sorted(stray)}")
        return value

    @field_validator("hundreds")
    @classmethod
    def _hundreds_complete(cls, value: Optional[list[str]]) -> Optional[list[str]]:
        if value is not None and len(value) != 10:
            raise ValueError("hundreds table must have 10 entries (index 0 unused)")
        return value

    @model_validator(mode="after")
    def _check_coverage(self) -> LocaleRuleSet:
        missing = [i for i in range(1, MAX_SCALE_INDEX + 1) if i not in self.scales]
        if missing:
            raise ValueError(f"scales missing for indexes {missing}")
        if self.hundreds is None and not self.hundred_word:
            raise ValueError("either a hundreds table or a hundred_word is required")
        if DecimalSeparator.COMMA not in self.decimal_words or DecimalSeparator.PERIOD not in self.decimal_words:
            raise ValueError("decimal_words needs both 'comma' and 'period'")
        return self

    # ─── Lookups ────────────────────────────────────────────────────

    def digit_word(self, digit: int, gender: Optional[Gender] = None) -> str:
        if gender is not None:
            gendered = self.gendered_digits.get(gender, {})
            if digit in gendered:
                return gendered[digit]
        return self.digits[digit]

    def hundreds_word(self, digit: int) -> str:
        if self.hundreds is not None:
            return self.hundreds[digit]
        return f"{self.digits[digit]} {self.hundred_word}"

    def separator_word(self, style: Optional[DecimalSeparator]) -> str:
        style = style or self.default_separator
        if style == DecimalSeparator.POINT:
            style = DecimalSeparator.PERIOD
        return self.decimal_words.get(style) or self.decimal_words[DecimalSeparator.PERIOD]

    def scale_forms(self, scale_index: int, case: Optional[GrammaticalCase] = None) -> PluralForms:
        scale = self.scales[scale_index]
        if case is not None and case in scale.cases:
            return scale.cases[case]
        return scale.forms
