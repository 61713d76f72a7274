"""
Tests for the public entry points, the locale registry and settings.

    convert / try_convert   typed errors vs. structured results
    SpelledNumbers          display strings for every failure
    locales                 lookup, caching, schema validation
    config                  SPELLED_NUMBERS_* environment variables
"""

from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from spelled_numbers import __version__
from spelled_numbers.config import load_settings
from spelled_numbers.converter import SpelledNumbers, convert, try_convert
from spelled_numbers.exceptions import (
    ConversionError,
    InvalidInput,
    MagnitudeExceeded,
    NonFiniteInput,
    UnsupportedLocale,
)
from spelled_numbers.locales import (
    available_currencies,
    available_locales,
    load_currency,
    load_locale,
)
from spelled_numbers.models import Format
from spelled_numbers.options import ConversionOptions
from spelled_numbers.rules import LocaleRuleSet


# ═══════════════════════════════════════════════════════════════════════
# CONVERT / TRY_CONVERT
# ═══════════════════════════════════════════════════════════════════════


class TestConvert:
    def test_default_locale_is_english(self):
        assert convert(42) == "forty-two"

    def test_accepts_loaded_rule_set(self):
        assert convert(2, locale=load_locale("ru")) == "два"

    def test_infinity_distinct_from_bad_string(self):
        with pytest.raises(NonFiniteInput):
            convert(float("inf"))
        with pytest.raises(InvalidInput):
            convert("twelve")

    def test_unknown_locale(self):
        with pytest.raises(UnsupportedLocale) as exc_info:
            convert(1, locale="xx")
        assert exc_info.value.code == "UNSUPPORTED_LOCALE"

    def test_errors_share_a_base(self):
        with pytest.raises(ConversionError):
            convert("1" + "0" * 24)


class TestTryConvert:
    def test_success(self):
        result = try_convert(7)
        assert result.ok
        assert result.text == "seven"
        assert result.error_code is None

    def test_failure_is_reported_not_raised(self):
        result = try_convert("1" + "0" * 24)
        assert not result.ok
        assert result.text is None
        assert result.error_code == "MAGNITUDE_EXCEEDED"
        assert result.details["limit"] == 24

    def test_unsupported_currency_code(self):
        result = try_convert(1, ConversionOptions(format=Format.CURRENCY, currency="XYZ"))
        assert result.error_code == "UNSUPPORTED_CURRENCY"


# ═══════════════════════════════════════════════════════════════════════
# SPELLED NUMBERS WRAPPER
# ═══════════════════════════════════════════════════════════════════════


class TestSpelledNumbers:
    def test_call_and_convert_agree(self):
        speller = SpelledNumbers("vi")
        assert speller(1001) == speller.convert(1001) == "một nghìn không trăm linh một"

    def test_infinity_words(self):
        speller = SpelledNumbers("en")
        assert speller(float("inf")) == "Infinity"
        assert speller(float("-inf")) == "Negative Infinity"

    def test_nan_uses_locale_word(self):
        assert SpelledNumbers("ru")(float("nan")) == "Не число"

    def test_invalid_input_uses_fallback(self):
        speller = SpelledNumbers("en", fallback_on_error="n/a")
        assert speller("abc") == "n/a"
        assert speller("1" + "0" * 24) == "n/a"

    def test_fallback_does_not_hide_infinity(self):
        assert SpelledNumbers("pl", fallback_on_error="?")(float("inf")) == "Nieskończoność"

    def test_failure_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="spelled_numbers.converter"):
            SpelledNumbers("en")("abc")
        assert "INVALID_INPUT" in caplog.text

    def test_set_locale(self):
        speller = SpelledNumbers()
        speller.set_locale("PL")
        assert speller.current_locale == "pl"
        assert speller(2) == "dwa"

    def test_set_locale_unknown_raises(self):
        speller = SpelledNumbers("ru")
        with pytest.raises(UnsupportedLocale):
            speller.set_locale("klingon")
        assert speller.current_locale == "ru"

    def test_set_locale_safe_falls_back(self):
        speller = SpelledNumbers("ru")
        assert speller.set_locale_safe("klingon", default="uk") is False
        assert speller.current_locale == "uk"

    def test_set_locale_safe_applies_known_code(self):
        speller = SpelledNumbers()
        assert speller.set_locale_safe("vi") is True
        assert speller.current_locale == "vi"

    def test_options_forwarded(self):
        speller = SpelledNumbers("en")
        assert speller.convert(1984, ConversionOptions(format=Format.YEAR)) == "nineteen eighty-four"


# ═══════════════════════════════════════════════════════════════════════
# LOCALE REGISTRY
# ═══════════════════════════════════════════════════════════════════════


class TestLocaleRegistry:
    def test_shipped_locales(self):
        assert available_locales() == ["en", "pl", "ru", "uk", "vi"]

    def test_shipped_currencies(self):
        assert set(available_currencies()) >= {"USD", "GBP", "VND", "RUB", "UAH", "PLN"}

    def test_codes_are_case_insensitive(self):
        assert load_locale(" EN ").code == "en"
        assert load_currency("rub").code == "RUB"

    def test_rule_sets_are_cached(self):
        assert load_locale("ru") is load_locale("ru")

    def test_rule_sets_are_frozen(self):
        with pytest.raises(ValidationError):
            load_locale("en").zero = "nil"

    @pytest.mark.parametrize("code", ["en", "pl", "ru", "uk", "vi"])
    def test_default_currency_resolves(self, code):
        rules = load_locale(code)
        assert load_currency(rules.default_currency).code == rules.default_currency

    def test_missing_scales_rejected(self):
        data = load_locale("en").model_dump()
        del data["scales"][7]
        with pytest.raises(ValidationError, match="scales missing"):
            LocaleRuleSet.model_validate(data)

    def test_teen_keys_checked(self):
        data = load_locale("en").model_dump()
        data["teens"][25] = "twenty-five"
        with pytest.raises(ValidationError):
            LocaleRuleSet.model_validate(data)

    def test_custom_rule_set_needs_no_registry(self):
        data = load_locale("en").model_dump()
        data.update(code="en-x", negative_word="negative")
        assert convert(-3, locale=LocaleRuleSet.model_validate(data)) == "negative three"


# ═══════════════════════════════════════════════════════════════════════
# SETTINGS
# ═══════════════════════════════════════════════════════════════════════


class TestSettings:
    def test_defaults(self):
        settings = load_settings(dotenv=False)
        assert settings.locale == "en"
        assert settings.fallback is None
        assert settings.log_level_number == logging.WARNING

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("SPELLED_NUMBERS_LOCALE", "VI")
        monkeypatch.setenv("SPELLED_NUMBERS_FALLBACK", "—")
        monkeypatch.setenv("SPELLED_NUMBERS_LOG_LEVEL", "debug")
        settings = load_settings(dotenv=False)
        assert settings.locale == "vi"
        assert settings.fallback == "—"
        assert settings.log_level_number == logging.DEBUG

    def test_unknown_level_falls_back_to_warning(self, monkeypatch):
        monkeypatch.setenv("SPELLED_NUMBERS_LOG_LEVEL", "chatty")
        assert load_settings(dotenv=False).log_level_number == logging.WARNING


def test_version():
    assert __version__ == "1.0.0"
