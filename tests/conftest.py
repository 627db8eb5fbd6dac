"""Shared test fixtures."""
import pytest
import structlog
from locale_decimal.config import Settings
from locale_decimal.intl.cache import FormatterCache


@pytest.fixture
def settings():
    """Settings with the defaults the tests assume."""
    return Settings(
        fallback_locale="en-US",
        default_currency="USD",
        default_quantity_scale=4,
        default_max_fraction_digits=12,
    )


@pytest.fixture
def cache(settings):
    """A fresh formatter cache per test, so entry counts start at zero."""
    return FormatterCache.from_settings(settings)


@pytest.fixture
def reset_structlog():
    yield
    structlog.reset_defaults()
