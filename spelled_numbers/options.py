"""
Per-call conversion options.

Every field is optional in spirit: ``None`` means "use the locale's default".
The model is frozen, so one options object can be reused across threads.
"""

from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel

from .models import DecimalSeparator, Format, Gender, GrammaticalCase
from .rules import CurrencyInfo, LocaleRuleSet


class ConversionOptions(BaseModel):
    """How to shape the output of one conversion."""

    model_config = {"frozen": True}

    format: Format = Format.PLAIN
    decimal_separator: Optional[DecimalSeparator] = None
    round: bool = False  # Currency only: round (instead of truncate) to the subunit
    gender: Optional[Gender] = None
    case: Optional[GrammaticalCase] = None
    currency: Optional[Union[CurrencyInfo, str]] = None  # Instance or registry code
    include_and: Optional[bool] = None
    include_era: Optional[bool] = None
    alternate_link: bool = False  # Vietnamese "lẻ" instead of "linh"
    negative_prefix: Optional[str] = None

    def wants_and(self, locale: LocaleRuleSet) -> bool:
        if self.include_and is not None:
            return self.include_and
        return bool(locale.hundred_link and locale.hundred_link.enabled_by_default)

    def wants_era(self, locale: LocaleRuleSet) -> bool:
        if self.include_era is not None:
            return self.include_era
        return locale.era.include_by_default

    def sign_word(self, locale: LocaleRuleSet) -> str:
        return self.negative_prefix or locale.negative_word


DEFAULT_OPTIONS = ConversionOptions()
