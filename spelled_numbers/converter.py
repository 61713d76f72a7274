"""
Conversion entry points — orchestrate the full pipeline.

Flow:
  ┌───────────┐
  │ Raw input │   int / float / Decimal / str
  └─────┬─────┘
  ┌─────▼─────┐
  │ Normalize │   ← CanonicalNumber (exact digits, sign)
  └─────┬─────┘
  ┌─────▼─────┐
  │ Decompose │   ← 3-digit groups, magnitude check
  └─────┬─────┘
  ┌─────▼─────┐
  │ Assemble  │   ← plain / decimal / year / currency
  └─────┬─────┘
      text

Three surfaces over the same pipeline:
  - ``convert``        raises the typed ``ConversionError`` subclasses.
  - ``try_convert``    returns a ``ConversionResult`` instead of raising.
  - ``SpelledNumbers`` keeps a current locale and maps failures to display
    strings (infinity words, a fallback), for UI code that must always print.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from .assembler import assemble
from .decomposer import decompose
from .exceptions import ConversionError, NonFiniteInput, UnsupportedLocale
from .locales import load_currency, load_locale
from .models import ConversionResult, Format
from .normalizer import normalize
from .options import DEFAULT_OPTIONS, ConversionOptions
from .rules import CurrencyInfo, LocaleRuleSet

logger = logging.getLogger(__name__)

LocaleLike = Union[str, LocaleRuleSet]


def resolve_locale(locale: LocaleLike) -> LocaleRuleSet:
    if isinstance(locale, LocaleRuleSet):
        return locale
    return load_locale(locale)


def resolve_currency(options: ConversionOptions, locale: LocaleRuleSet) -> CurrencyInfo:
    """Currency from the options (instance or code), else the locale's default."""
    if isinstance(options.currency, CurrencyInfo):
        return options.currency
    return load_currency(options.currency or locale.default_currency)


def convert(number: object, options: Optional[ConversionOptions] = None, locale: LocaleLike = "en") -> str:
    """Spell ``number`` in words.

    Args:
        number: int, float, Decimal, numeric string or CanonicalNumber.
        options: Output shaping; defaults to a plain cardinal.
        locale: Locale code or an already-loaded rule set.

    Raises:
        InvalidInput, NonFiniteInput, MagnitudeExceeded,
        UnsupportedLocale, UnsupportedCurrency, LocaleDataError.
    """
    options = options or DEFAULT_OPTIONS
    rules = resolve_locale(locale)

    # ── Step 1: Normalize ───────────────────────────────────────────
    canonical = normalize(number)
    logger.debug("Normalized %r → %s", number, canonical)

    # ── Step 2: Decompose (fails fast on magnitude) ─────────────────
    groups = decompose(canonical.integer_digits)
    logger.debug("Decomposed into %d group(s)", len(groups))

    # ── Step 3: Assemble ────────────────────────────────────────────
    currency = resolve_currency(options, rules) if options.format == Format.CURRENCY else None
    return assemble(canonical, options, rules, currency=currency, groups=groups)


def try_convert(
    number: object, options: Optional[ConversionOptions] = None, locale: LocaleLike = "en"
) -> ConversionResult:
    """Like ``convert`` but reports failures as a result object."""
    try:
        text = convert(number, options, locale)
    except ConversionError as exc:
        return ConversionResult(ok=False, error_code=exc.code, message=exc.message, details=exc.details)
    return ConversionResult(ok=True, text=text)


class SpelledNumbers:
    """Stateful convenience wrapper with a current locale.

    Usage:
        speller = SpelledNumbers("vi")
        speller(1001)                  # "một nghìn không trăm linh một"
        speller(float("inf"))          # "Vô cực"
        speller("abc")                 # "Không phải là số"

    Not for concurrent use: ``set_locale`` mutates the instance.
    """

    def __init__(self, locale: str = "en", fallback_on_error: Optional[str] = None):
        self.fallback_on_error = fallback_on_error
        self._locale = load_locale(locale)

    @property
    def current_locale(self) -> str:
        return self._locale.code

    @property
    def rules(self) -> LocaleRuleSet:
        return self._locale

    def set_locale(self, code: str) -> None:
        """Switch locale; raises ``UnsupportedLocale`` for unknown codes."""
        self._locale = load_locale(code)

    def set_locale_safe(self, code: str, default: str = "en") -> bool:
        """Switch locale, falling back to ``default`` if ``code`` is unknown.

        Returns:
            True if ``code`` itself was applied.
        """
        try:
            self.set_locale(code)
        except UnsupportedLocale:
            logger.warning("Locale '%s' not supported, using '%s'", code, default)
            self.set_locale(default)
            return False
        return True

    def convert(self, number: object, options: Optional[ConversionOptions] = None) -> str:
        """Spell ``number``; never raises ``ConversionError``."""
        try:
            return convert(number, options, self._locale)
        except NonFiniteInput as exc:
            if not exc.is_nan:
                return self._locale.negative_infinity if exc.negative else self._locale.infinity
            logger.warning("Cannot spell %r: %s", number, exc.message)
        except ConversionError as exc:
            logger.warning("Cannot spell %r: [%s] %s", number, exc.code, exc.message)
        return self.fallback_on_error or self._locale.not_a_number

    __call__ = convert
