"""
Pydantic models for the conversion pipeline — strict typing at every seam.

The canonical number and the digit groups are frozen: they are built once per
conversion and never mutated afterwards.  If data doesn't fit the model, it
fails loudly at the boundary — not silently inside the assembler.
"""

from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator


# ─── Enumerations ───────────────────────────────────────────────────


class Sign(str, Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"


class PluralCategory(str, Enum):
    """Word-form slot chosen for a count."""

    SINGULAR = "singular"
    PLURAL = "plural"
    PLURAL_2_TO_4 = "plural_2_to_4"
    PLURAL_GENITIVE = "plural_genitive"


class Gender(str, Enum):
    MASCULINE = "masculine"
    FEMININE = "feminine"
    NEUTER = "neuter"


class GrammaticalCase(str, Enum):
    NOMINATIVE = "nominative"
    GENITIVE = "genitive"
    DATIVE = "dative"
    ACCUSATIVE = "accusative"


class Format(str, Enum):
    """Output-shaping strategy requested by the caller."""

    PLAIN = "plain"
    YEAR = "year"
    CURRENCY = "currency"


class DecimalSeparator(str, Enum):
    """Which separator word is spoken between integer and fraction."""

    COMMA = "comma"
    PERIOD = "period"
    POINT = "point"  # Synonym of PERIOD


# ─── Canonical Number ───────────────────────────────────────────────


class CanonicalNumber(BaseModel):
    """Exact signed decimal: the single representation every stage works on."""

    model_config = {"frozen": True}

    sign: Sign = Sign.POSITIVE
    integer_digits: str = "0"
    fraction_digits: str = ""

    @field_validator("integer_digits")
    @classmethod
    def _check_integer_digits(cls, value: str) -> str:
        if not value or not value.isascii() or not value.isdigit():
            raise ValueError(f"integer_digits must be decimal digits, got {value!r}")
        if len(value) > 1 and value[0] == "0":
            raise ValueError(f"integer_digits has a leading zero: {value!r}")
        return value

    @field_validator("fraction_digits")
    @classmethod
    def _check_fraction_digits(cls, value: str) -> str:
        if value and (not value.isascii() or not value.isdigit()):
            raise ValueError(f"fraction_digits must be decimal digits, got {value!r}")
        return value

    @model_validator(mode="after")
    def _zero_is_positive(self) -> CanonicalNumber:
        if self.sign == Sign.NEGATIVE and self.is_zero:
            raise ValueError("zero must carry a positive sign")
        return self

    @property
    def is_negative(self) -> bool:
        return self.sign == Sign.NEGATIVE

    @property
    def is_zero(self) -> bool:
        return self.integer_digits == "0" and not self.fraction_digits.strip("0")

    @property
    def significant_fraction(self) -> str:
        """Fraction digits without trailing zeros ("50" → "5", "000" → "")."""
        return self.fraction_digits.rstrip("0")

    def integer_value(self) -> int:
        return int(self.integer_digits)

    def absolute(self) -> CanonicalNumber:
        return self.model_copy(update={"sign": Sign.POSITIVE})

    def to_decimal(self) -> Decimal:
        text = self.integer_digits
        if self.fraction_digits:
            text += "." + self.fraction_digits
        value = Decimal(text)
        return -value if self.is_negative else value

    def __str__(self) -> str:
        prefix = "-" if self.is_negative else ""
        if self.fraction_digits:
            return f"{prefix}{self.integer_digits}.{self.fraction_digits}"
        return f"{prefix}{self.integer_digits}"


# ─── Digit Group ────────────────────────────────────────────────────


class DigitGroup(BaseModel):
    """One 3-digit slice of the integer part and its position on the scale ladder."""

    model_config = {"frozen": True}

    value: int = Field(ge=0, le=999)
    scale_index: int = Field(ge=0)


# ─── Structured Result ──────────────────────────────────────────────


class ConversionResult(BaseModel):
    """Outcome of ``try_convert``: either text, or a machine-readable failure."""

    ok: bool
    text: Optional[str] = None
    error_code: Optional[str] = None  # e.g. "MAGNITUDE_EXCEEDED"
    message: Optional[str] = None
    details: dict = Field(default_factory=dict)
