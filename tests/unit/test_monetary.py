"""Test signed monetary deltas."""
import pytest
from locale_decimal.monetary import (
    BalanceInvariantViolation,
    TransactionSource,
    TransactionType,
    get_signed_transaction_delta,
    invert_monetary_delta,
    is_zero_monetary_delta,
    to_unsigned_monetary,
)


class TestToUnsignedMonetary:
    def test_missing_is_zero(self):
        assert to_unsigned_monetary(None) == "0.00"
        assert to_unsigned_monetary("  ") == "0.00"

    def test_strips_sign(self):
        assert to_unsigned_monetary("-12.50") == "12.50"
        assert to_unsigned_monetary("+3") == "3"

    def test_integers(self):
        assert to_unsigned_monetary(42) == "42"

    @pytest.mark.parametrize("value", ["12.345", "abc", "1,000.00", "--1", "1."])
    def test_invalid_raises(self, value):
        with pytest.raises(BalanceInvariantViolation):
            to_unsigned_monetary(value)

    def test_violation_is_value_error(self):
        with pytest.raises(ValueError):
            to_unsigned_monetary("x")


class TestSignedTransactionDelta:
    def test_account_income_increases(self):
        assert get_signed_transaction_delta(TransactionType.INCOME, TransactionSource.ACCOUNT, "10.00") == "10.00"

    def test_account_expense_decreases(self):
        assert get_signed_transaction_delta(TransactionType.EXPENSE, TransactionSource.ACCOUNT, "10.00") == "-10.00"

    def test_credit_card_expense_increases(self):
        assert get_signed_transaction_delta(TransactionType.EXPENSE, TransactionSource.CREDIT_CARD, "10.00") == "10.00"

    def test_credit_card_income_decreases(self):
        assert get_signed_transaction_delta(TransactionType.INCOME, TransactionSource.CREDIT_CARD, "-10.00") == "-10.00"


class TestDeltaHelpers:
    def test_invert(self):
        assert invert_monetary_delta("-5.00") == "5.00"
        assert invert_monetary_delta("5.00") == "-5.00"

    def test_is_zero(self):
        assert is_zero_monetary_delta("0.00") is True
        assert is_zero_monetary_delta("-0") is True
        assert is_zero_monetary_delta("0.01") is False
        assert is_zero_monetary_delta("10") is False
