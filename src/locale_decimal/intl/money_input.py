"""Canonical value flow of a money input field.

While the user types, the masked text is read into a canonical decimal at
the currency's scale and validated.  On blur the value is closed to exactly
that many fraction digits and redisplayed.  The field always emits the
canonical value alongside what it displays.
"""

from __future__ import annotations

from pydantic import BaseModel

from locale_decimal.intl.cache import FormatterCache, resolve_cache
from locale_decimal.intl.decimal_input import to_canonical_with_fixed_fraction, validate_canonical_decimal
from locale_decimal.intl.money import get_currency_fraction_digits
from locale_decimal.intl.numeric_mask import (
    build_money_mask_options,
    canonical_to_masked_value,
    masked_value_to_canonical,
)
from locale_decimal.models.decimal import (
    DecimalValidationRules,
    MaskOptions,
    NumericInputValidationError,
)


class CanonicalInputValueChange(BaseModel):
    canonical_value: str
    display_value: str
    error: NumericInputValidationError | None = None


class MoneyInputState:
    """Money field bound to a locale, a currency and validation rules."""

    def __init__(
        self,
        locale: str,
        currency: str,
        rules: DecimalValidationRules | None = None,
        cache: FormatterCache | None = None,
    ):
        self.locale = locale
        self.currency = currency
        self.rules = rules or DecimalValidationRules()
        self._cache = resolve_cache(cache)
        self.scale = get_currency_fraction_digits(locale, currency, self._cache)

    def mask_options(self) -> MaskOptions:
        return build_money_mask_options(self.locale, self.currency, self._cache)

    def initial_display(self, canonical_value: str) -> str:
        """Display text for a stored canonical value, at the currency scale."""
        return canonical_to_masked_value(
            canonical_value,
            self.locale,
            minimum_fraction_digits=self.scale,
            maximum_fraction_digits=self.scale,
            cache=self._cache,
        )

    def on_change(self, masked_value: str) -> CanonicalInputValueChange:
        canonical = masked_value_to_canonical(masked_value, self.locale, self.scale, self._cache) or ""
        return CanonicalInputValueChange(
            canonical_value=canonical,
            display_value=masked_value,
            error=validate_canonical_decimal(canonical, self.rules),
        )

    def on_blur(self, masked_value: str) -> CanonicalInputValueChange:
        """Close the typed value to the currency scale, truncating extra digits."""
        typed = masked_value_to_canonical(masked_value, self.locale, self.scale, self._cache)
        canonical = to_canonical_with_fixed_fraction(typed, self.scale) if typed else None
        if canonical is None:
            return CanonicalInputValueChange(
                canonical_value="",
                display_value="",
                error=validate_canonical_decimal("", self.rules),
            )
        return CanonicalInputValueChange(
            canonical_value=canonical,
            display_value=self.initial_display(canonical),
            error=validate_canonical_decimal(canonical, self.rules),
        )
