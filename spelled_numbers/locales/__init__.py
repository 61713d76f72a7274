"""
Locale registry — loads the shipped JSON word tables on demand.

Each ``<code>.json`` file in this directory is one ``LocaleRuleSet``;
``currencies.json`` maps currency codes to ``CurrencyInfo`` tables.  Files are
read once and validated into frozen models, then served from an LRU cache, so
every conversion shares the same immutable rule set.

    load_locale("RU")       → LocaleRuleSet(code="ru", …)
    load_currency("usd")    → CurrencyInfo(code="USD", …)
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ..exceptions import LocaleDataError, UnsupportedCurrency, UnsupportedLocale
from ..rules import CurrencyInfo, LocaleRuleSet

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).parent
_CURRENCY_FILE = "currencies.json"


def _read_json(path: Path) -> Any:
    with path.open(encoding="utf-8") as f:
        return json.load(f)


# ─── Locales ────────────────────────────────────────────────────────


def available_locales() -> list[str]:
    """Sorted codes of every shipped locale table."""
    return sorted(p.stem for p in _DATA_DIR.glob("*.json") if p.name != _CURRENCY_FILE)


def load_locale(code: str) -> LocaleRuleSet:
    """Return the rule set for ``code`` (case-insensitive).

    Raises:
        UnsupportedLocale: No table is shipped for the code.
        LocaleDataError: The table exists but fails validation.
    """
    return _load_locale(code.strip().lower())


@lru_cache(maxsize=None)
def _load_locale(code: str) -> LocaleRuleSet:
    path = _DATA_DIR / f"{code}.json"
    if not code or code not in available_locales():
        raise UnsupportedLocale(
            f"Locale '{code}' is not supported",
            details={"locale": code, "available": available_locales()},
        )

    try:
        rules = LocaleRuleSet.model_validate(_read_json(path))
    except ValidationError as exc:
        raise LocaleDataError(
            f"Locale table '{path.name}' is invalid: {exc.error_count()} error(s)",
            details={"locale": code, "errors": exc.errors(include_url=False, include_context=False)},
        ) from exc

    logger.info("Loaded locale '%s' (%s)", rules.code, rules.name)
    return rules


# ─── Currencies ─────────────────────────────────────────────────────


@lru_cache(maxsize=1)
def _currency_table() -> dict[str, dict[str, Any]]:
    raw = _read_json(_DATA_DIR / _CURRENCY_FILE)
    return {key.upper(): value for key, value in raw.items()}


def available_currencies() -> list[str]:
    return sorted(_currency_table())


def load_currency(code: str) -> CurrencyInfo:
    """Return the word set for a currency code such as ``"usd"``.

    Raises:
        UnsupportedCurrency: The code is not in ``currencies.json``.
        LocaleDataError: The entry fails validation.
    """
    return _load_currency(code.strip().upper())


@lru_cache(maxsize=None)
def _load_currency(code: str) -> CurrencyInfo:
    entry = _currency_table().get(code)
    if entry is None:
        raise UnsupportedCurrency(
            f"Currency '{code}' is not supported",
            details={"currency": code, "available": available_currencies()},
        )

    try:
        currency = CurrencyInfo.model_validate({"code": code, **entry})
    except ValidationError as exc:
        raise LocaleDataError(
            f"Currency table entry '{code}' is invalid: {exc.error_count()} error(s)",
            details={"currency": code, "errors": exc.errors(include_url=False, include_context=False)},
        ) from exc

    logger.info("Loaded currency '%s'", code)
    return currency


def clear_cache() -> None:
    """Drop every cached table (tests and hot reloads)."""
    _load_locale.cache_clear()
    _load_currency.cache_clear()
    _currency_table.cache_clear()
