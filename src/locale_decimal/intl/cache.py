"""Process-lifetime cache of ``NumberFormatter`` instances.

Building a formatter parses CLDR data and a number pattern, so input
components that format on every keystroke go through this cache.  Entries
are keyed by normalized locale plus the sorted-key JSON of the options and
are never evicted: the key space is the handful of locales and option sets
the application uses.  Callers that build ``FormatterOptions`` from
unbounded data (e.g. per-request digit counts) grow the cache without bound.
"""

from __future__ import annotations

import threading

from babel import Locale, UnknownLocaleError

from locale_decimal.config import Settings
from locale_decimal.intl.formatter import NumberFormatter
from locale_decimal.models.locale import (
    DEFAULT_MAX_FRACTION_DIGITS,
    DEFAULT_QUANTITY_SCALE,
    FormatterOptions,
    normalize_locale,
)
from locale_decimal.utils.logging import get_logger

logger = get_logger(__name__)


def create_formatter_key(locale: str, options: FormatterOptions | None) -> str:
    options_key = options.cache_key() if options is not None else ""
    return f"{normalize_locale(locale)}::{options_key}"


class FormatterCache:
    """Lazily populated, append-only map of (locale, options) to formatter.

    Also carries the digit defaults the parsers and mask builders fall back
    to when a caller passes no explicit fraction cap or scale.
    """

    def __init__(
        self,
        fallback_locale: str = "en-US",
        default_quantity_scale: int = DEFAULT_QUANTITY_SCALE,
        default_max_fraction_digits: int = DEFAULT_MAX_FRACTION_DIGITS,
    ):
        self._fallback_locale = fallback_locale
        self.default_quantity_scale = default_quantity_scale
        self.default_max_fraction_digits = default_max_fraction_digits
        self._formatters: dict[str, NumberFormatter] = {}
        self._locales: dict[str, Locale] = {}
        self._lock = threading.Lock()

    @classmethod
    def from_settings(cls, settings: Settings) -> FormatterCache:
        return cls(
            fallback_locale=settings.fallback_locale,
            default_quantity_scale=settings.default_quantity_scale,
            default_max_fraction_digits=settings.default_max_fraction_digits,
        )

    def __len__(self) -> int:
        return len(self._formatters)

    def __contains__(self, key: object) -> bool:
        return key in self._formatters

    def get(self, locale: str, options: FormatterOptions | None = None) -> NumberFormatter:
        """Return the cached formatter for *locale* and *options*, building it on first use."""
        key = create_formatter_key(locale, options)
        formatter = self._formatters.get(key)
        if formatter is not None:
            return formatter

        with self._lock:
            formatter = self._formatters.get(key)
            if formatter is None:
                formatter = NumberFormatter(self._load_locale(locale), options)
                self._formatters[key] = formatter
                logger.debug("formatter_cache_miss", key=key, size=len(self._formatters))
        return formatter

    def _load_locale(self, locale: str) -> Locale:
        identifier = normalize_locale(locale)
        if identifier not in self._locales:
            try:
                self._locales[identifier] = Locale.parse(identifier)
            except (UnknownLocaleError, ValueError, TypeError):
                logger.warning(
                    "unknown_locale_fallback",
                    locale=locale,
                    fallback=self._fallback_locale,
                )
                self._locales[identifier] = Locale.parse(normalize_locale(self._fallback_locale))
        return self._locales[identifier]


_default_cache: FormatterCache | None = None
_default_cache_lock = threading.Lock()


def get_default_cache() -> FormatterCache:
    """Return the shared cache used when callers do not pass one explicitly."""
    global _default_cache
    if _default_cache is None:
        with _default_cache_lock:
            if _default_cache is None:
                _default_cache = FormatterCache.from_settings(Settings())
    return _default_cache


def resolve_cache(cache: FormatterCache | None) -> FormatterCache:
    return cache if cache is not None else get_default_cache()
