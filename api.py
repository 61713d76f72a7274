"""
Spelled Numbers — FastAPI Server
================================

RESTful API for spelling numbers in words.

Endpoints:
    POST /convert           Spell one number (plain, decimal, year, currency)
    GET  /locales           Registered locales
    GET  /currencies        Registered currency codes
    GET  /health            Health check

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production

Docs:
    http://localhost:8000/docs             # Swagger UI (auto-generated)
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional, Union

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, StrictFloat, StrictInt, StrictStr

from spelled_numbers import __version__
from spelled_numbers.config import Settings, load_settings
from spelled_numbers.converter import convert
from spelled_numbers.exceptions import ConversionError, UnsupportedCurrency, UnsupportedLocale
from spelled_numbers.locales import available_currencies, available_locales, load_locale
from spelled_numbers.models import DecimalSeparator, Format, Gender, GrammaticalCase
from spelled_numbers.options import ConversionOptions

logger = logging.getLogger(__name__)


# ─── Application Lifespan (pre-warm default locale) ─────────────────

_settings: Settings | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load settings and the default locale table on startup."""
    global _settings  # noqa: PLW0603
    _settings = load_settings()
    load_locale(_settings.locale)
    yield
    _settings = None


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="Spelled Numbers API",
    description=(
        "Convert numbers to words in English, Vietnamese, Russian, Ukrainian "
        "and Polish. Cardinals, decimals, years and currency amounts with "
        "correct plural and gender agreement."
    ),
    version=__version__,
    lifespan=lifespan,
)


# ─── Request / Response Schemas ─────────────────────────────────────


class ConvertRequest(BaseModel):
    """Request body for the /convert endpoint."""

    # Strict: JSON true/false must not turn into 1/0
    number: Union[StrictInt, StrictFloat, StrictStr] = Field(
        ...,
        description="Number to spell. Send large or exact values as strings.",
        json_schema_extra={"example": "1234.56"},
    )
    locale: Optional[str] = Field(default=None, description="Locale code; server default if omitted.")
    format: Format = Format.PLAIN
    decimal_separator: Optional[DecimalSeparator] = None
    round: bool = False
    gender: Optional[Gender] = None
    case: Optional[GrammaticalCase] = None
    currency: Optional[str] = None
    include_and: Optional[bool] = None
    include_era: Optional[bool] = None
    alternate_link: bool = False
    negative_prefix: Optional[str] = None

    def to_options(self) -> ConversionOptions:
        return ConversionOptions.model_validate(
            self.model_dump(exclude={"number", "locale"}, exclude_none=True)
        )


class ConvertResponse(BaseModel):
    text: str
    locale: str
    format: Format

    model_config = {"json_schema_extra": {"example": {
        "text": "one thousand two hundred thirty-four point five six",
        "locale": "en",
        "format": "plain",
    }}}


class ErrorResponse(BaseModel):
    code: str
    message: str
    details: dict = Field(default_factory=dict)


class LocaleOut(BaseModel):
    code: str
    name: str
    default_currency: str


class HealthResponse(BaseModel):
    status: str
    version: str
    locales_loaded: int


# ─── Error Mapping ───────────────────────────────────────────────────


@app.exception_handler(ConversionError)
async def conversion_error_handler(request: Request, exc: ConversionError) -> JSONResponse:
    """Unknown locale/currency → 404, every other conversion failure → 422."""
    status = 404 if isinstance(exc, (UnsupportedLocale, UnsupportedCurrency)) else 422
    logger.info("Conversion failed [%s]: %s", exc.code, exc.message)
    body = ErrorResponse(code=exc.code, message=exc.message, details=exc.details)
    return JSONResponse(status_code=status, content=body.model_dump(mode="json"))


# ─── Helpers ─────────────────────────────────────────────────────────


def _get_settings() -> Settings:
    if _settings is None:
        raise HTTPException(status_code=503, detail="Service not initialised")
    return _settings


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/convert",
    summary="Spell a number in words",
    tags=["Conversion"],
    responses={
        404: {"model": ErrorResponse, "description": "Unknown locale or currency"},
        422: {"model": ErrorResponse, "description": "Number cannot be spelled"},
        503: {"description": "Service not yet initialised"},
    },
)
def convert_number(request: ConvertRequest) -> ConvertResponse:
    """Run the conversion pipeline on one number.

    - **format**: `plain` (cardinal or decimal), `year`, or `currency`
    - **currency**: ISO code such as `USD`; the locale's default if omitted
    - **round**: round currency amounts to the subunit instead of truncating
    """
    settings = _get_settings()
    rules = load_locale(request.locale or settings.locale)
    text = convert(request.number, request.to_options(), rules)
    return ConvertResponse(text=text, locale=rules.code, format=request.format)


@app.get("/locales", summary="List supported locales", tags=["Reference"])
def list_locales() -> list[LocaleOut]:
    out = []
    for code in available_locales():
        rules = load_locale(code)
        out.append(LocaleOut(code=rules.code, name=rules.name, default_currency=rules.default_currency))
    return out


@app.get("/currencies", summary="List supported currency codes", tags=["Reference"])
def list_currencies() -> list[str]:
    return available_currencies()


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
    responses={503: {"description": "Service not yet initialised"}},
)
def health_check() -> HealthResponse:
    """Returns service status and configuration info."""
    _get_settings()
    return HealthResponse(
        status="healthy",
        version=__version__,
        locales_loaded=len(available_locales()),
    )
