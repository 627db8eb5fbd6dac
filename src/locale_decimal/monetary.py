"""Signed balance deltas for stored transaction amounts.

Stored amounts are unsigned two-place decimal strings; the sign of the
balance change is derived from the transaction type and where the money
moved (a bank account or a credit card).
"""

from __future__ import annotations

import re
from enum import StrEnum

UNSIGNED_MONETARY_PATTERN = re.compile(r"[0-9]+(?:\.[0-9]{1,2})?")


class BalanceInvariantViolation(ValueError):
    """A stored monetary amount is not a valid unsigned decimal."""


class TransactionType(StrEnum):
    INCOME = "income"
    EXPENSE = "expense"


class TransactionSource(StrEnum):
    ACCOUNT = "account"
    CREDIT_CARD = "credit_card"


def to_unsigned_monetary(value: str | int | None) -> str:
    """Normalize a monetary value to an unsigned decimal string.

    ``None`` and blank values become ``"0.00"``; one leading ``+``/``-`` is
    dropped.  Anything else that is not digits with at most two fraction
    digits raises ``BalanceInvariantViolation``.
    """
    if value is None:
        return "0.00"

    trimmed = str(value).strip()
    if not trimmed:
        return "0.00"

    unsigned = trimmed[1:] if trimmed[0] in "+-" else trimmed
    if not UNSIGNED_MONETARY_PATTERN.fullmatch(unsigned):
        raise BalanceInvariantViolation(f"Invalid monetary amount: {value!r}")
    return unsigned


def get_signed_transaction_delta(
    transaction_type: TransactionType,
    transaction_source: TransactionSource,
    value: str | int,
) -> str:
    """Balance change caused by a transaction.

    Accounts grow on income; credit card balances (debt) grow on expenses.
    """
    amount = to_unsigned_monetary(value)
    if transaction_source == TransactionSource.ACCOUNT:
        should_increase = transaction_type == TransactionType.INCOME
    else:
        should_increase = transaction_type == TransactionType.EXPENSE
    return amount if should_increase else f"-{amount}"


def invert_monetary_delta(delta: str) -> str:
    if delta.startswith("-"):
        return delta[1:]
    return f"-{delta}"


def is_zero_monetary_delta(delta: str) -> bool:
    unsigned = delta[1:] if delta.startswith("-") else delta
    integer_part, _, fraction_part = unsigned.partition(".")
    return not integer_part.strip("0") and not fraction_part.strip("0")
