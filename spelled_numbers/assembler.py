"""
Assembler / format dispatcher — turns digit groups into the final sentence.

Strategies (chosen by ``ConversionOptions.format`` and the number itself):

    plain     123          → "one hundred twenty-three"
    decimal   1.05         → "one point zero five"
    negative  -7           → "minus seven"
    year      -44          → "forty-four BC"           (never the minus word)
    currency  2.50 (RUB)   → "два рубля пятьдесят копеек"

The assembler never fails on valid groups: every group/scale combination has a
rendering, possibly empty.  Magnitude and input errors are raised upstream by
the decomposer and the normalizer.
"""

from __future__ import annotations

import logging
from typing import Optional

from .decomposer import MAX_DIGITS, decompose
from .models import CanonicalNumber, DigitGroup, Format, Gender, GrammaticalCase
from .options import ConversionOptions
from .plurals import form_for
from .renderer import render_group
from .rules import CurrencyInfo, LocaleRuleSet

logger = logging.getLogger(__name__)

# English-style "nineteen eighty-four" reading applies inside these ranges
_PAIR_YEAR_RANGES = ((1100, 2000), (2010, 2100))


# ─── Entry Point ────────────────────────────────────────────────────


def assemble(
    number: CanonicalNumber,
    options: ConversionOptions,
    locale: LocaleRuleSet,
    *,
    currency: Optional[CurrencyInfo] = None,
    groups: Optional[list[DigitGroup]] = None,
) -> str:
    """Dispatch on the requested format and produce the final string.

    Args:
        groups: Pre-computed groups of ``number.integer_digits`` (re-used when
            the strategy renders the integer part unchanged).
        currency: Resolved currency; required for ``Format.CURRENCY``.
    """
    if options.format == Format.YEAR:
        logger.debug("Assembling %s as a year (%s)", number, locale.code)
        words = _render_year(number, options, locale)
        return _join(words)

    negative = number.is_negative
    if options.format == Format.CURRENCY:
        if currency is None:
            raise ValueError("Currency format requires a resolved CurrencyInfo")
        logger.debug("Assembling %s as %s currency (%s)", number, currency.code, locale.code)
        main, sub = _split_currency(number, currency, options.round)
        words = _render_currency(main, sub, options, locale, currency)
        # "-0.001" truncates to nothing: no "minus zero dollars"
        negative = negative and (main, sub) != (0, 0)
    else:
        logger.debug("Assembling %s as a cardinal (%s)", number, locale.code)
        words = _render_number(number, options, locale, groups)

    if negative:
        words = [options.sign_word(locale), *words]
    return _join(words)


# ─── Cardinal Pipeline ──────────────────────────────────────────────


def render_integer(
    groups: list[DigitGroup],
    locale: LocaleRuleSet,
    *,
    gender: Optional[Gender] = None,
    case: Optional[GrammaticalCase] = None,
    include_and: bool = False,
    alternate_link: bool = False,
    year: bool = False,
) -> list[str]:
    """Spell a decomposed non-negative integer, scale words included."""
    if all(group.value == 0 for group in groups):
        return _apply_case([locale.zero], locale, case)

    link = locale.hundred_link
    and_in_final = include_and and link is not None and link.mode == "always"
    padding = locale.padding

    tokens: list[str] = []
    seen_nonzero = False
    gap = False  # Empty groups since the last non-empty one

    for group in groups:
        if group.value == 0:
            gap = gap or seen_nonzero
            continue

        if padding is not None and seen_nonzero:
            if gap:
                tokens.append(padding.link(alternate_link))
            elif group.value < 100:
                tokens.append(padding.word)
                if group.value < 10:
                    tokens.append(padding.link(alternate_link))

        is_units = group.scale_index == 0
        group_gender = gender if is_units else locale.scales[group.scale_index].gender
        words = render_group(
            group.value,
            locale,
            gender=group_gender,
            include_and=and_in_final and is_units,
            alternate_link=alternate_link,
            year=year,
        )
        tokens.extend(_apply_case(words, locale, case))

        if not is_units:
            forms = locale.scale_forms(group.scale_index, case)
            tokens.append(form_for(group.value, forms, locale.plural_rule))

        seen_nonzero = True
        gap = False

    return tokens


def _apply_case(words: list[str], locale: LocaleRuleSet, case: Optional[GrammaticalCase]) -> list[str]:
    table = locale.case_words.get(case) if case is not None else None
    if not table:
        return words
    return [" ".join(table.get(part, part) for part in word.split(" ")) for word in words]


# ─── Plain / Decimal ────────────────────────────────────────────────


def _render_number(
    number: CanonicalNumber,
    options: ConversionOptions,
    locale: LocaleRuleSet,
    groups: Optional[list[DigitGroup]],
) -> list[str]:
    words = render_integer(
        groups if groups is not None else decompose(number.integer_digits),
        locale,
        gender=options.gender,
        case=options.case,
        include_and=options.wants_and(locale),
        alternate_link=options.alternate_link,
    )

    fraction = number.significant_fraction
    if not fraction:
        return words

    words.append(locale.separator_word(options.decimal_separator))
    words.extend(_render_fraction(fraction, locale, options))
    return words


def _render_fraction(fraction: str, locale: LocaleRuleSet, options: ConversionOptions) -> list[str]:
    if not locale.fraction_as_cardinal:
        return [locale.digits[int(d)] for d in fraction]

    # Leading zeros are spoken one by one, the rest as a single cardinal
    significant = fraction.lstrip("0")
    if len(significant) > MAX_DIGITS:
        # Past the scale ladder there is no cardinal reading
        return [locale.digits[int(d)] for d in fraction]

    words = [locale.digits[0]] * (len(fraction) - len(significant))
    words.extend(
        render_integer(
            decompose(significant),
            locale,
            include_and=options.wants_and(locale),
            alternate_link=options.alternate_link,
        )
    )
    return words


# ─── Year ───────────────────────────────────────────────────────────


def _render_year(number: CanonicalNumber, options: ConversionOptions, locale: LocaleRuleSet) -> list[str]:
    year = number.integer_value()  # Fraction truncated, sign handled below
    include_and = options.wants_and(locale)

    if _reads_as_pairs(year, locale):
        words = _render_year_pairs(year, locale, options, include_and)
    else:
        words = _render_year_cardinal(year, locale, options, include_and)

    era = locale.era
    if number.is_negative and year > 0:
        if era.negative_position == "prefix":
            return [era.negative, *words]
        return [*words, era.negative]
    if options.wants_era(locale) and year > 0:
        words.append(era.positive)
    return words


def _reads_as_pairs(year: int, locale: LocaleRuleSet) -> bool:
    if locale.year_style != "pairs" or not locale.hundred_word:
        return False
    return any(low <= year < high for low, high in _PAIR_YEAR_RANGES)


def _render_year_cardinal(
    year: int, locale: LocaleRuleSet, options: ConversionOptions, include_and: bool
) -> list[str]:
    def spell(value: int) -> list[str]:
        return render_integer(
            decompose(str(value)),
            locale,
            gender=options.gender,
            case=options.case,
            include_and=include_and,
            alternate_link=options.alternate_link,
            year=True,
        )

    # "two thousand (and) five": the link also bridges a missing hundreds digit
    link = locale.hundred_link
    tail = year % 1000
    if include_and and link is not None and link.mode == "always" and year >= 1000 and 0 < tail < 100:
        return [*spell(year - tail), link.pick(options.alternate_link), *spell(tail)]
    return spell(year)


def _render_year_pairs(
    year: int, locale: LocaleRuleSet, options: ConversionOptions, include_and: bool
) -> list[str]:
    high, low = divmod(year, 100)
    words = render_integer(decompose(str(high)), locale, year=True)
    if low == 0:
        return [*words, locale.hundred_word]

    low_words = render_integer(decompose(str(low)), locale, year=True)
    if low < 10:
        # "nineteen hundred (and) five"
        link = locale.hundred_link
        words.append(locale.hundred_word)
        if include_and and link is not None:
            words.append(link.pick(options.alternate_link))
    return [*words, *low_words]


# ─── Currency ───────────────────────────────────────────────────────


def _split_currency(number: CanonicalNumber, currency: CurrencyInfo, round_half_up: bool) -> tuple[int, int]:
    """Exact (main, sub) counts, truncated or rounded half-up to the subunit."""
    main = number.integer_value()
    if not currency.has_subunit:
        return main, 0

    digits = currency.subunit_digits
    fraction = number.fraction_digits.ljust(digits + 1, "0")
    sub = int(fraction[:digits])
    if round_half_up and fraction[digits] >= "5":
        sub += 1
        if sub == 10**digits:
            main, sub = main + 1, 0
    return main, sub


def _render_currency(
    main: int,
    sub: int,
    options: ConversionOptions,
    locale: LocaleRuleSet,
    currency: CurrencyInfo,
) -> list[str]:
    rule = locale.plural_rule
    include_and = options.wants_and(locale)
    show_sub = currency.has_subunit and (sub > 0 or currency.always_render_subunit)

    words: list[str] = []
    if main > 0 or not show_sub or currency.zero_main_with_subunit:
        words.extend(
            render_integer(
                decompose(str(main)),
                locale,
                gender=currency.main_gender,
                case=options.case,
                include_and=include_and,
                alternate_link=options.alternate_link,
            )
        )
        words.append(form_for(main, currency.main, rule))

    if show_sub:
        if words and currency.separator:
            words.append(currency.separator)
        words.extend(
            render_integer(
                decompose(str(sub)),
                locale,
                gender=currency.sub_gender,
                case=options.case,
                include_and=include_and,
                alternate_link=options.alternate_link,
            )
        )
        words.append(form_for(sub, currency.sub, rule))

    return words


# ─── Output ─────────────────────────────────────────────────────────


def _join(words: list[str]) -> str:
    return " ".join(" ".join(words).split())
