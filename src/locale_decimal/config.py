"""Engine configuration via environment variables with LOCALE_DECIMAL_ prefix."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from locale_decimal.models.locale import (
    DEFAULT_MAX_FRACTION_DIGITS,
    DEFAULT_QUANTITY_SCALE,
    MAX_FRACTION_DIGITS,
)


class Settings(BaseSettings):
    """Locale decimal engine configuration.

    All settings are read from environment variables prefixed with
    ``LOCALE_DECIMAL_``.  None of them change parsing semantics; they only pick
    defaults for callers that do not pass an explicit locale, currency or scale.
    The scale fields reach the engine through ``FormatterCache.from_settings``.
    """

    model_config = SettingsConfigDict(env_prefix="LOCALE_DECIMAL_")

    # ── Locale ─────────────────────────────────────────────────────────────
    # Used when a caller passes a locale Babel has no CLDR data for
    fallback_locale: str = "en-US"
    default_currency: str = "USD"

    # ── Scales ─────────────────────────────────────────────────────────────
    default_quantity_scale: int = Field(default=DEFAULT_QUANTITY_SCALE, ge=0, le=MAX_FRACTION_DIGITS)
    default_max_fraction_digits: int = Field(
        default=DEFAULT_MAX_FRACTION_DIGITS, ge=0, le=MAX_FRACTION_DIGITS
    )

    # ── Logging ────────────────────────────────────────────────────────────
    log_level: str = "INFO"
