"""Derive a locale's decimal and grouping separators by probing its formatter."""

from __future__ import annotations

from decimal import Decimal

from locale_decimal.intl.cache import FormatterCache, resolve_cache
from locale_decimal.models.locale import FormatterOptions, LocaleTokens
from locale_decimal.utils.logging import get_logger

logger = get_logger(__name__)

# One fraction digit and enough integer digits to trigger grouping
PROBE_VALUE = Decimal("1234.5")
PROBE_OPTIONS = FormatterOptions(
    use_grouping=True,
    minimum_fraction_digits=1,
    maximum_fraction_digits=1,
)


def normalize_thousands_separator(value: str) -> str:
    """Collapse whitespace-like group glyphs (NBSP, narrow NBSP) to a plain space."""
    if not value:
        return ","
    if value.isspace():
        return " "
    return value


def resolve_locale_tokens(locale: str, cache: FormatterCache | None = None) -> LocaleTokens:
    """Resolve radix, thousands separator and alternate radix glyphs for *locale*.

    The radix is ``","`` only when the locale's formatter writes a comma in
    the decimal position, otherwise ``"."``.  When the probe shows no group
    glyph the opposite of the radix is assumed.  The other common separator
    is mapped to the radix unless the locale already groups with it.
    """
    parts = resolve_cache(cache).get(locale, PROBE_OPTIONS).format_to_parts(PROBE_VALUE)

    decimal_part = next((part.value for part in parts if part.type == "decimal"), None)
    group_part = next((part.value for part in parts if part.type == "group"), None)

    radix = "," if decimal_part == "," else "."
    fallback_group = "." if radix == "," else ","
    thousands_separator = normalize_thousands_separator(group_part or fallback_group)
    alternate = "." if radix == "," else ","
    map_to_radix = tuple(
        separator
        for separator in (alternate,)
        if separator != radix and separator != thousands_separator
    )

    tokens = LocaleTokens(
        radix=radix,
        thousands_separator=thousands_separator,
        map_to_radix=map_to_radix,
    )
    logger.debug(
        "locale_tokens_resolved",
        locale=locale,
        radix=tokens.radix,
        thousands_separator=tokens.thousands_separator,
        map_to_radix=list(tokens.map_to_radix),
    )
    return tokens


def get_locale_decimal_separator(locale: str, cache: FormatterCache | None = None) -> str:
    """Return the decimal separator (``"."`` or ``","``) typed in *locale*."""
    return resolve_locale_tokens(locale, cache).radix
