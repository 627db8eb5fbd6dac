"""Render canonical decimals as localized money without float parsing."""

from __future__ import annotations

from locale_decimal.intl.cache import FormatterCache, resolve_cache
from locale_decimal.intl.decimal_input import (
    clamp_fraction_digits,
    inject_fraction_part,
    parse_canonical_decimal_parts,
    signed_integer,
)
from locale_decimal.intl.tokens import resolve_locale_tokens
from locale_decimal.models.decimal import FormatMoneyInput, MoneyFormatOptions
from locale_decimal.models.locale import FormatterOptions


def get_currency_fraction_digits(
    locale: str,
    currency: str,
    cache: FormatterCache | None = None,
) -> int:
    """Native fraction digits of *currency* (2 for USD/BRL, 0 for JPY)."""
    formatter = resolve_cache(cache).get(locale, FormatterOptions(style="currency", currency=currency))
    return formatter.resolved_options().minimum_fraction_digits


def build_fraction_part(
    fraction_part: str,
    minimum_fraction_digits: int,
    maximum_fraction_digits: int | None = None,
) -> str:
    """Pad *fraction_part* to the minimum; truncate it only when a maximum is given."""
    if maximum_fraction_digits is not None:
        fraction_part = fraction_part[: max(minimum_fraction_digits, maximum_fraction_digits)]
    return fraction_part.ljust(minimum_fraction_digits, "0")


def format_money(
    value: str | None,
    locale: str,
    currency: str,
    options: MoneyFormatOptions | None = None,
    cache: FormatterCache | None = None,
) -> str:
    """Format a canonical decimal as money for *locale* and *currency*.

    The integer portion is rendered with the currency's symbol and
    grouping; the fraction digits are spliced in as text, so
    ``"9007199254740993.01"`` keeps every digit.  When no minimum is given
    the currency's native fraction digits apply.  Returns ``""`` for input
    that is not a canonical decimal.
    """
    parts = parse_canonical_decimal_parts(value)
    if parts is None:
        return ""

    options = options or MoneyFormatOptions()
    cache = resolve_cache(cache)

    if options.minimum_fraction_digits is not None:
        minimum = options.minimum_fraction_digits
    else:
        minimum = get_currency_fraction_digits(locale, currency, cache)
    maximum = options.maximum_fraction_digits
    fraction = build_fraction_part(
        parts.fraction_part,
        clamp_fraction_digits(minimum, 0),
        clamp_fraction_digits(maximum, len(parts.fraction_part)) if maximum is not None else None,
    )

    integer_formatter = cache.get(
        locale,
        FormatterOptions(
            style="currency",
            currency=currency,
            minimum_fraction_digits=0,
            maximum_fraction_digits=0,
            use_grouping=options.use_grouping,
            currency_format=options.currency_format,
        ),
    )
    currency_parts = integer_formatter.format_to_parts(signed_integer(parts))
    radix = resolve_locale_tokens(locale, cache).radix
    return inject_fraction_part(currency_parts, fraction, radix)


def format_money_input(
    value: str | None,
    money_input: FormatMoneyInput,
    cache: FormatterCache | None = None,
) -> str:
    """``format_money`` taking its locale/currency context as one model."""
    return format_money(
        value,
        money_input.locale,
        money_input.currency,
        options=money_input.options,
        cache=cache,
    )
