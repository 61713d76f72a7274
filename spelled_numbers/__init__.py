"""
Spelled Numbers — numbers to words, in several languages.

Architecture: Normalize → Decompose → Select plural → Render groups → Assemble
Philosophy:  One generic pipeline. Every language difference is data.
"""

from .converter import SpelledNumbers, convert, try_convert
from .exceptions import (
    ConversionError,
    InvalidInput,
    LocaleDataError,
    MagnitudeExceeded,
    NonFiniteInput,
    UnsupportedCurrency,
    UnsupportedLocale,
)
from .locales import available_currencies, available_locales, load_currency, load_locale
from .models import DecimalSeparator, Format, Gender, GrammaticalCase
from .options import ConversionOptions

__version__ = "1.0.0"

__all__ = [
    "ConversionError",
    "ConversionOptions",
    "DecimalSeparator",
    "Format",
    "Gender",
    "GrammaticalCase",
    "InvalidInput",
    "LocaleDataError",
    "MagnitudeExceeded",
    "NonFiniteInput",
    "SpelledNumbers",
    "UnsupportedCurrency",
    "UnsupportedLocale",
    "available_currencies",
    "available_locales",
    "convert",
    "load_currency",
    "load_locale",
    "try_convert",
]
