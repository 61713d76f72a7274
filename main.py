#!/usr/bin/env python3
"""
Spelled Numbers — Entry Point
=============================

Spells numbers from the command line, or prints a demo table across every
shipped locale when no numbers are given.

Usage:
    python main.py                                  # Demo table
    python main.py 1001 21.05 --locale vi           # Spell given numbers
    python main.py 1984 --format year               # Year reading
    python main.py 5.22 --format currency -l ru     # Currency with agreement
"""

from __future__ import annotations

import argparse
import logging
import sys

from spelled_numbers.config import load_settings
from spelled_numbers.converter import try_convert
from spelled_numbers.exceptions import ConversionError
from spelled_numbers.locales import available_locales, load_locale
from spelled_numbers.models import Format
from spelled_numbers.options import ConversionOptions


# ─── Demo Inputs ─────────────────────────────────────────────────────

DEMO_CASES: list[tuple[str, Format]] = [
    ("0", Format.PLAIN),
    ("21", Format.PLAIN),
    ("105", Format.PLAIN),
    ("1001", Format.PLAIN),
    ("121000", Format.PLAIN),
    ("-7", Format.PLAIN),
    ("1.05", Format.PLAIN),
    ("2024", Format.YEAR),
    ("1.50", Format.CURRENCY),
    ("21.05", Format.CURRENCY),
    ("1" + "0" * 24, Format.PLAIN),  # One digit past the scale ladder
]


# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_GREEN = "\033[92m"
_CYAN = "\033[96m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"
_WIDTH = 72


# ─── Pretty Printer ─────────────────────────────────────────────────


def _print_header(title: str) -> None:
    print(f"\n{'=' * _WIDTH}")
    print(f"{_BOLD}{_CYAN}  {title}{_RESET}")
    print(f"{'=' * _WIDTH}")


def _print_line(number: str, fmt: Format, result) -> bool:
    """Print one conversion; returns False if it failed."""
    label = f"{number} {_DIM}[{fmt.value}]{_RESET}"
    if result.ok:
        print(f"  {label:<36} {_GREEN}{result.text}{_RESET}")
        return True
    print(f"  {label:<36} {_RED}[{result.error_code}] {result.message}{_RESET}")
    return False


def run_demo() -> int:
    """Spell every demo case in every locale. Failures here are expected."""
    for code in available_locales():
        rules = load_locale(code)
        _print_header(f"{rules.name} ({rules.code})")
        for number, fmt in DEMO_CASES:
            _print_line(number, fmt, try_convert(number, ConversionOptions(format=fmt), rules))
    print(f"{'=' * _WIDTH}\n")
    return 0


def run_numbers(numbers: list[str], locale: str, fmt: Format, options: ConversionOptions) -> int:
    """Spell the given numbers.

    Returns:
        0 if every conversion succeeded, 1 otherwise.
    """
    rules = load_locale(locale)
    _print_header(f"{rules.name} ({rules.code})")
    ok = [_print_line(n, fmt, try_convert(n, options, rules)) for n in numbers]
    print(f"{'=' * _WIDTH}\n")
    return 0 if all(ok) else 1


# ─── Main ────────────────────────────────────────────────────────────


def _parse_args(argv: list[str] | None, default_locale: str) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Spell numbers in words.")
    parser.add_argument("numbers", nargs="*", help="Numbers to spell (demo table if omitted)")
    parser.add_argument("-l", "--locale", default=default_locale, help="Locale code (default: %(default)s)")
    parser.add_argument("-f", "--format", choices=[f.value for f in Format], default=Format.PLAIN.value)
    parser.add_argument("-c", "--currency", help="Currency code for --format currency")
    parser.add_argument("--round", action="store_true", help="Round currency to the subunit")
    parser.add_argument("--and", dest="include_and", action=argparse.BooleanOptionalAction, default=None,
                        help='Insert "and" after hundreds (default: locale setting)')
    parser.add_argument("--era", dest="include_era", action=argparse.BooleanOptionalAction, default=None,
                        help="Append the era word to positive years (default: locale setting)")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, configure logging and run the demo or conversions."""
    settings = load_settings()
    logging.basicConfig(level=settings.log_level_number, format="%(levelname)s %(name)s: %(message)s")
    args = _parse_args(argv, settings.locale)

    if not args.numbers:
        return run_demo()

    fmt = Format(args.format)
    options = ConversionOptions(
        format=fmt,
        currency=args.currency,
        round=args.round,
        include_and=args.include_and,
        include_era=args.include_era,
    )
    try:
        return run_numbers(args.numbers, args.locale, fmt, options)
    except ConversionError as exc:  # Unknown locale or a broken locale table
        print(f"{_RED}[{exc.code}] {exc.message}{_RESET}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
