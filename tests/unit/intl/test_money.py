"""Test money formatting from canonical decimals."""
import pytest
from locale_decimal.intl.decimal_input import parse_locale_decimal_to_canonical
from locale_decimal.intl.money import (
    build_fraction_part,
    format_money,
    format_money_input,
    get_currency_fraction_digits,
)
from locale_decimal.models.decimal import FormatMoneyInput, MoneyFormatOptions
from locale_decimal.models.locale import Currency, Language


def normalize_spaces(value: str) -> str:
    return value.replace("\u00a0", " ").replace("\u202f", " ")


class TestFormatMoney:
    def test_brl_in_pt_br(self, cache):
        result = normalize_spaces(format_money("1234.56", Language.PT_BR, Currency.BRL, cache=cache))
        assert result == "R$ 1.234,56"

    def test_usd_in_en_us(self, cache):
        assert format_money("1234.56", Language.EN_US, Currency.USD, cache=cache) == "$1,234.56"

    def test_cross_locale_currency(self, cache):
        usd_in_pt_br = normalize_spaces(format_money("1234.56", Language.PT_BR, Currency.USD, cache=cache))
        brl_in_en_us = format_money("1234.56", Language.EN_US, Currency.BRL, cache=cache)
        assert "US$" in usd_in_pt_br
        assert "1.234,56" in usd_in_pt_br
        assert "R$" in brl_in_en_us
        assert "1,234.56" in brl_in_en_us

    def test_no_float_artifacts(self, cache):
        assert format_money("0.30", Language.EN_US, Currency.USD, cache=cache) == "$0.30"

    def test_beyond_safe_integer(self, cache):
        result = format_money("9007199254740993.01", Language.EN_US, Currency.USD, cache=cache)
        assert result == "$9,007,199,254,740,993.01"

    def test_integer_part_beyond_int_string_limit(self, cache):
        value = "9" * 5000 + ".01"
        result = format_money(value, Language.EN_US, Currency.USD, cache=cache)
        assert result.startswith("$9,999,")
        assert result.replace(",", "") == "$" + value

    def test_pads_to_currency_digits(self, cache):
        assert format_money("1234.5", Language.EN_US, Currency.USD, cache=cache) == "$1,234.50"
        assert format_money("1234", Language.EN_US, Currency.USD, cache=cache) == "$1,234.00"

    def test_keeps_extra_digits_without_maximum(self, cache):
        assert format_money("1.999", Language.EN_US, Currency.USD, cache=cache) == "$1.999"

    def test_maximum_truncates(self, cache):
        options = MoneyFormatOptions(maximum_fraction_digits=2)
        assert format_money("1.999", Language.EN_US, Currency.USD, options, cache=cache) == "$1.99"

    def test_minimum_override(self, cache):
        options = MoneyFormatOptions(minimum_fraction_digits=3)
        assert format_money("1234", Language.EN_US, Currency.USD, options, cache=cache) == "$1,234.000"

    def test_zero_decimal_override(self, cache):
        options = MoneyFormatOptions(minimum_fraction_digits=0)
        assert format_money("1234", Language.EN_US, Currency.USD, options, cache=cache) == "$1,234"

    def test_zero_digit_currency(self, cache):
        assert format_money("1234", Language.EN_US, "JPY", cache=cache) == "¥1,234"

    def test_negative(self, cache):
        assert format_money("-1234.5", Language.EN_US, Currency.USD, cache=cache) == "-$1,234.50"

    def test_accounting_negative(self, cache):
        options = MoneyFormatOptions(currency_format="accounting")
        assert format_money("-1234.56", Language.EN_US, Currency.USD, options, cache=cache) == "($1,234.56)"

    def test_accounting_output_reads_back_unsigned(self, cache):
        options = MoneyFormatOptions(currency_format="accounting")
        displayed = format_money("-0.5", Language.EN_US, Currency.USD, options, cache=cache)
        assert displayed == "($0.50)"
        assert parse_locale_decimal_to_canonical(displayed, Language.EN_US, cache=cache) == "0.50"

    def test_without_grouping(self, cache):
        options = MoneyFormatOptions(use_grouping=False)
        assert format_money("1234.56", Language.EN_US, Currency.USD, options, cache=cache) == "$1234.56"

    @pytest.mark.parametrize("value", ["12a.34", "", "1,234.56", None])
    def test_invalid_input_is_empty(self, value, cache):
        assert format_money(value, Language.EN_US, Currency.USD, cache=cache) == ""

    def test_money_input_model(self, cache):
        money_input = FormatMoneyInput(locale="en-US", currency="USD")
        assert format_money_input("10", money_input, cache=cache) == "$10.00"


class TestCurrencyFractionDigits:
    def test_defaults(self, cache):
        assert get_currency_fraction_digits("en-US", "USD", cache) == 2
        assert get_currency_fraction_digits("pt-BR", "BRL", cache) == 2
        assert get_currency_fraction_digits("en-US", "JPY", cache) == 0


class TestBuildFractionPart:
    def test_pads(self):
        assert build_fraction_part("5", 2) == "50"

    def test_empty_when_no_digits_needed(self):
        assert build_fraction_part("", 0) == ""

    def test_keeps_longer_fraction(self):
        assert build_fraction_part("1234", 2) == "1234"

    def test_truncates_to_maximum(self):
        assert build_fraction_part("1234", 2, 3) == "123"
        assert build_fraction_part("1234", 2, 1) == "12"
