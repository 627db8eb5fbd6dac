#!/usr/bin/env python3
"""Parse a locale-formatted amount and print its canonical and display forms."""
import sys

# Load .env file
from dotenv import load_dotenv
load_dotenv()

from locale_decimal.config import Settings
from locale_decimal.intl.cache import FormatterCache
from locale_decimal.intl.decimal_input import (
    format_canonical_decimal,
    parse_locale_decimal_to_canonical,
    to_canonical_with_fixed_fraction,
)
from locale_decimal.intl.money import format_money, get_currency_fraction_digits
from locale_decimal.intl.tokens import resolve_locale_tokens
from locale_decimal.utils.logging import setup_logging


def main(raw: str, locale: str | None = None, currency: str | None = None) -> None:
    """Parse *raw* for *locale* and print every rendering of it."""
    settings = Settings()
    setup_logging(settings.log_level)
    locale = locale or settings.fallback_locale
    currency = currency or settings.default_currency
    cache = FormatterCache.from_settings(settings)

    tokens = resolve_locale_tokens(locale, cache)
    print(f"Locale: {locale} (radix {tokens.radix!r}, group {tokens.thousands_separator!r})")
    print("-" * 50)

    scale = get_currency_fraction_digits(locale, currency, cache)
    canonical = parse_locale_decimal_to_canonical(raw, locale, cache=cache)
    if canonical is None:
        print(f"Error: not a number in {locale}: {raw!r}")
        sys.exit(1)

    fixed = to_canonical_with_fixed_fraction(canonical, scale)
    print(f"Canonical: {canonical}")
    print(f"Fixed ({scale} digits): {fixed}")
    print(f"Display: {format_canonical_decimal(canonical, locale, cache=cache)}")
    quantity_scale = settings.default_quantity_scale
    quantity = format_canonical_decimal(canonical, locale, maximum_fraction_digits=quantity_scale, cache=cache)
    print(f"Quantity ({quantity_scale} digits): {quantity}")
    print(f"Money ({currency}): {format_money(fixed, locale, currency, cache=cache)}")


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python scripts/format_amount.py <amount> [locale] [currency]")
        sys.exit(1)

    main(*sys.argv[1:4])
