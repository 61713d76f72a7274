"""
Exception hierarchy for number-to-words conversion.

Each exception type maps to one failure category of the pipeline, so callers
can tell "this is not a number" apart from "this is infinity" or "this is too
big to spell". The machine-readable ``code`` is what the HTTP layer and
``try_convert`` report back.
"""

from __future__ import annotations


class ConversionError(Exception):
    """Base exception for all conversion failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class InvalidInput(ConversionError):
    """The input is not a supported numeric type or not a valid numeral."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_INPUT", message, details)


class NonFiniteInput(ConversionError):
    """NaN or infinity — callers may render these literally instead of failing."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("NON_FINITE_INPUT", message, details)

    @property
    def is_nan(self) -> bool:
        return bool(self.details.get("nan"))

    @property
    def negative(self) -> bool:
        return bool(self.details.get("negative"))


class MagnitudeExceeded(ConversionError):
    """The integer part has more digits than the scale ladder supports."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("MAGNITUDE_EXCEEDED", message, details)


class UnsupportedLocale(ConversionError):
    """No rule set is registered for the requested locale code."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("UNSUPPORTED_LOCALE", message, details)


class UnsupportedCurrency(ConversionError):
    """No currency word set is registered for the requested code."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("UNSUPPORTED_CURRENCY", message, details)


class LocaleDataError(ConversionError):
    """A shipped locale or currency table failed schema validation."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("LOCALE_DATA_INVALID", message, details)
