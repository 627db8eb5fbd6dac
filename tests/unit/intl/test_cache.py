"""Test the formatter cache."""
import threading

import locale_decimal.intl.cache as cache_module
from locale_decimal.config import Settings
from locale_decimal.intl.cache import FormatterCache, create_formatter_key, get_default_cache, resolve_cache
from locale_decimal.intl.decimal_input import parse_locale_decimal_to_canonical
from locale_decimal.intl.numeric_mask import build_mask_options
from locale_decimal.models.locale import FormatterOptions, Language


class TestCreateFormatterKey:
    def test_field_order_does_not_matter(self):
        first = FormatterOptions(minimum_fraction_digits=1, use_grouping=False)
        second = FormatterOptions(use_grouping=False, minimum_fraction_digits=1)
        assert create_formatter_key("en-US", first) == create_formatter_key("en-US", second)

    def test_locale_spelling_normalized(self):
        options = FormatterOptions()
        assert create_formatter_key("pt-BR", options) == create_formatter_key("pt_BR", options)

    def test_different_options_differ(self):
        assert create_formatter_key("en-US", FormatterOptions(maximum_fraction_digits=0)) != create_formatter_key(
            "en-US", FormatterOptions(maximum_fraction_digits=1)
        )

    def test_no_options(self):
        assert create_formatter_key("en-US", None) == "en_US::"


class TestFormatterCache:
    def test_miss_then_hit_returns_same_instance(self, cache):
        options = FormatterOptions(minimum_fraction_digits=2)
        first = cache.get("en-US", options)
        second = cache.get("en-US", FormatterOptions(minimum_fraction_digits=2))
        assert first is second
        assert len(cache) == 1

    def test_separate_entries_per_locale(self, cache):
        cache.get("en-US")
        cache.get("pt-BR")
        assert len(cache) == 2

    def test_contains_key(self, cache):
        cache.get("en-US")
        assert create_formatter_key("en-US", None) in cache

    def test_unknown_locale_falls_back(self):
        cache = FormatterCache(fallback_locale="pt-BR")
        formatter = cache.get("xx-YY")
        assert str(formatter.locale) == "pt_BR"

    def test_concurrent_first_use_builds_once(self, cache):
        options = FormatterOptions(style="currency", currency="BRL")
        barrier = threading.Barrier(8)
        results = []

        def worker():
            barrier.wait()
            results.append(cache.get("pt-BR", options))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(results) == 8
        assert all(result is results[0] for result in results)
        assert len(cache) == 1


class TestDefaultCache:
    def test_default_is_shared(self):
        assert get_default_cache() is get_default_cache()

    def test_resolve_prefers_explicit(self, cache):
        assert resolve_cache(cache) is cache
        assert resolve_cache(None) is get_default_cache()

    def test_default_reads_settings_from_env(self, monkeypatch):
        monkeypatch.setenv("LOCALE_DECIMAL_DEFAULT_QUANTITY_SCALE", "2")
        monkeypatch.setenv("LOCALE_DECIMAL_DEFAULT_MAX_FRACTION_DIGITS", "3")
        monkeypatch.setattr(cache_module, "_default_cache", None)

        cache = get_default_cache()
        assert cache.default_quantity_scale == 2
        assert cache.default_max_fraction_digits == 3
        assert parse_locale_decimal_to_canonical("1.23456", Language.EN_US) == "1.234"
        assert build_mask_options(Language.EN_US).scale == 2


class TestFromSettings:
    def test_copies_defaults(self):
        settings = Settings(fallback_locale="pt-BR", default_quantity_scale=6, default_max_fraction_digits=8)
        cache = FormatterCache.from_settings(settings)
        assert cache.default_quantity_scale == 6
        assert cache.default_max_fraction_digits == 8
        assert str(cache.get("xx-YY").locale) == "pt_BR"
