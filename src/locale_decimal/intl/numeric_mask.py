"""Bridge between canonical decimals and a live-input number mask.

The browser-side masking library takes a configuration object (radix,
thousands separator, scale ...) and hands back masked display strings.
This module builds that configuration from the locale's resolved tokens
and converts masked strings to and from canonical decimals.
"""

from __future__ import annotations

from locale_decimal.intl.cache import FormatterCache, resolve_cache
from locale_decimal.intl.decimal_input import format_canonical_decimal, parse_locale_decimal_to_canonical
from locale_decimal.intl.money import get_currency_fraction_digits
from locale_decimal.intl.tokens import resolve_locale_tokens
from locale_decimal.models.decimal import MaskOptions, NumericMaskConfig
from locale_decimal.models.locale import DEFAULT_QUANTITY_SCALE, MAX_FRACTION_DIGITS, LocaleTokens


def clamp_scale(scale: int | None, fallback: int = DEFAULT_QUANTITY_SCALE) -> int:
    """Clamp *scale* to ``[0, 20]``; missing or negative scales become *fallback*."""
    if not isinstance(scale, int) or isinstance(scale, bool) or scale < 0:
        return fallback
    return min(scale, MAX_FRACTION_DIGITS)


def get_numeric_mask_locale_tokens(locale: str, cache: FormatterCache | None = None) -> LocaleTokens:
    return resolve_locale_tokens(locale, cache)


def create_numeric_mask_options(
    config: NumericMaskConfig,
    cache: FormatterCache | None = None,
) -> MaskOptions:
    cache = resolve_cache(cache)
    tokens = get_numeric_mask_locale_tokens(config.locale, cache)
    return MaskOptions(
        scale=clamp_scale(config.scale, cache.default_quantity_scale),
        radix=tokens.radix,
        map_to_radix=list(tokens.map_to_radix),
        thousands_separator=tokens.thousands_separator if config.use_thousands_separator else "",
        pad_fractional_zeros=config.pad_fractional_zeros,
        normalize_zeros=config.normalize_zeros,
        min=0,
    )


def build_mask_options(
    locale: str,
    scale: int | None = None,
    use_thousands_separator: bool = True,
    cache: FormatterCache | None = None,
) -> MaskOptions:
    return create_numeric_mask_options(
        NumericMaskConfig(
            locale=locale,
            scale=scale,
            use_thousands_separator=use_thousands_separator,
        ),
        cache,
    )


def build_money_mask_options(
    locale: str,
    currency: str,
    cache: FormatterCache | None = None,
) -> MaskOptions:
    """Mask options for a money field: scale fixed to the currency's digits, zero padded."""
    return create_numeric_mask_options(
        NumericMaskConfig(
            locale=locale,
            scale=get_currency_fraction_digits(locale, currency, cache),
            pad_fractional_zeros=True,
        ),
        cache,
    )


def masked_value_to_canonical(
    masked_value: str | None,
    locale: str,
    scale: int | None,
    cache: FormatterCache | None = None,
) -> str | None:
    """Convert a masked display string into a canonical decimal, ``None`` when none parses.

    A missing *scale* falls back to the cache's ``default_quantity_scale``.
    """
    cache = resolve_cache(cache)
    return parse_locale_decimal_to_canonical(
        masked_value,
        locale,
        max_fraction_digits=clamp_scale(scale, cache.default_quantity_scale),
        cache=cache,
    )


def canonical_to_masked_value(
    canonical_value: str | None,
    locale: str,
    minimum_fraction_digits: int | None = None,
    maximum_fraction_digits: int | None = None,
    cache: FormatterCache | None = None,
) -> str:
    """Render a canonical decimal as the mask would display it."""
    if not canonical_value or not canonical_value.strip():
        return ""
    return format_canonical_decimal(
        canonical_value,
        locale,
        minimum_fraction_digits=minimum_fraction_digits,
        maximum_fraction_digits=maximum_fraction_digits,
        cache=cache,
    )
