"""Canonical decimal parsing, formatting, comparison and validation.

Values typed by users are turned into canonical decimal strings
(``"1234.56"``, ``"-0.5"``) and rendered back for a locale without passing
through ``float``.  Every function here is total for string input: malformed
values yield ``None`` or ``""`` and callers branch on that.

Fraction digits are truncated, never rounded, both while typing and in
fixed-fraction normalization.
"""

from __future__ import annotations

import re
from decimal import Decimal
from typing import Literal

from locale_decimal.intl.cache import FormatterCache, resolve_cache
from locale_decimal.intl.tokens import resolve_locale_tokens
from locale_decimal.models.decimal import (
    CanonicalDecimalParts,
    DecimalValidationRules,
    LocaleDecimalDraft,
    NumericInputValidationError,
)
from locale_decimal.models.locale import MAX_FRACTION_DIGITS, FormatPart, FormatterOptions

CANONICAL_DECIMAL_PATTERN = re.compile(r"-?[0-9]+(?:\.[0-9]+)?")
DIGITS = "0123456789"

INTEGER_ONLY_OPTIONS = FormatterOptions(
    style="decimal",
    minimum_fraction_digits=0,
    maximum_fraction_digits=0,
)

CompareResult = Literal[-1, 0, 1]


# ---------------------------------------------------------------------------
# Canonical parts
# ---------------------------------------------------------------------------


def normalize_integer_part(value: str) -> str:
    """Strip leading zeros, keeping a single ``"0"``."""
    return value.lstrip("0") or "0"


def clamp_fraction_digits(value: int | None, fallback: int) -> int:
    """Clamp a requested fraction digit count to ``[0, 20]``; invalid counts use *fallback*."""
    if not isinstance(value, int) or isinstance(value, bool) or value < 0:
        return fallback
    return min(value, MAX_FRACTION_DIGITS)


def _is_zero_magnitude(integer_part: str, fraction_part: str) -> bool:
    return integer_part.strip("0") == "" and fraction_part.strip("0") == ""


def parse_canonical_decimal_parts(value: str | None) -> CanonicalDecimalParts | None:
    """Split a canonical decimal into sign, integer and fraction digits.

    Leading integer zeros are normalized away and a signed zero (``"-0"``,
    ``"-0.00"``) loses its sign.  Returns ``None`` for anything that does not
    match the canonical grammar.
    """
    if not isinstance(value, str):
        return None
    trimmed = value.strip()
    if not CANONICAL_DECIMAL_PATTERN.fullmatch(trimmed):
        return None

    is_negative = trimmed.startswith("-")
    unsigned = trimmed[1:] if is_negative else trimmed
    integer_raw, _, fraction_part = unsigned.partition(".")
    integer_part = normalize_integer_part(integer_raw)

    return CanonicalDecimalParts(
        is_negative=is_negative and not _is_zero_magnitude(integer_part, fraction_part),
        integer_part=integer_part,
        fraction_part=fraction_part,
    )


def is_canonical_decimal(value: str | None) -> bool:
    return parse_canonical_decimal_parts(value) is not None


def _build_canonical(is_negative: bool, integer_part: str, fraction_part: str) -> str:
    integer_part = normalize_integer_part(integer_part)
    sign = "-" if is_negative and not _is_zero_magnitude(integer_part, fraction_part) else ""
    if fraction_part:
        return f"{sign}{integer_part}.{fraction_part}"
    return f"{sign}{integer_part}"


def to_canonical_with_fixed_fraction(value: str | None, fraction_digits: int) -> str | None:
    """Pad or truncate a canonical decimal to exactly *fraction_digits* digits.

    ``"12.3"`` with 2 gives ``"12.30"``, ``"12.345"`` with 2 gives ``"12.34"``
    and 0 drops the fraction and its separator.
    """
    parts = parse_canonical_decimal_parts(value)
    if parts is None:
        return None

    digits = clamp_fraction_digits(fraction_digits, 0)
    fraction = parts.fraction_part[:digits].ljust(digits, "0")
    return _build_canonical(parts.is_negative, parts.integer_part, fraction)


# ---------------------------------------------------------------------------
# Locale input parsing
# ---------------------------------------------------------------------------


def parse_locale_decimal_draft(
    raw: str | None,
    locale: str,
    max_fraction_digits: int | None = None,
    cache: FormatterCache | None = None,
) -> LocaleDecimalDraft:
    """Sanitize a value as it is being typed.

    Digits are kept, the first radix (or mapped alternate) opens the
    fraction, and everything else, including further separators, is
    dropped.  A leading ``-`` is kept.  The fraction is capped at
    *max_fraction_digits* mid-typing.  ``","`` typed in ``pt-BR`` yields a
    ``"0,"`` display value with no canonical value yet.
    """
    cache = resolve_cache(cache)
    tokens = resolve_locale_tokens(locale, cache)
    decimal_separators = {tokens.radix, *tokens.map_to_radix}
    max_digits = clamp_fraction_digits(max_fraction_digits, cache.default_max_fraction_digits)

    text = (raw or "").lstrip()
    is_negative = text.startswith("-")
    if is_negative:
        text = text[1:]

    integer_digits = ""
    fraction_digits = ""
    has_decimal_separator = False
    has_trailing_decimal_separator = False

    for character in text:
        if character in DIGITS:
            if has_decimal_separator:
                if len(fraction_digits) < max_digits:
                    fraction_digits += character
            else:
                integer_digits += character
            has_trailing_decimal_separator = False
        elif character in decimal_separators and not has_decimal_separator:
            has_decimal_separator = True
            has_trailing_decimal_separator = True

    has_digits = bool(integer_digits or fraction_digits)
    sign = "-" if is_negative else ""
    if not has_digits and not has_decimal_separator:
        return LocaleDecimalDraft(display_value=sign)

    integer_part = normalize_integer_part(integer_digits)
    display_value = f"{sign}{integer_part}"
    if has_decimal_separator:
        display_value += f"{tokens.radix}{fraction_digits}"

    if not has_digits:
        return LocaleDecimalDraft(
            display_value=display_value,
            has_trailing_decimal_separator=has_trailing_decimal_separator,
        )

    return LocaleDecimalDraft(
        display_value=display_value,
        canonical_value=_build_canonical(is_negative, integer_part, fraction_digits),
        has_digits=True,
        has_trailing_decimal_separator=has_trailing_decimal_separator,
    )


def parse_locale_decimal_to_canonical(
    raw: str | None,
    locale: str,
    max_fraction_digits: int | None = None,
    cache: FormatterCache | None = None,
) -> str | None:
    """Parse locale-formatted text (``"R$ 1.234,56"``) into ``"1234.56"``.

    Currency symbols, letters and whitespace are ignored, grouping is
    removed and excess fraction digits are truncated.  Without
    *max_fraction_digits* the cache's ``default_max_fraction_digits``
    applies.  Returns ``None`` for input with no digits, more than one
    decimal separator or a ``-`` anywhere but the first non-blank position.

    Only a leading ``-`` marks a negative value.  Parentheses are ignored
    like any other symbol, so accounting output such as ``"($0.50)"`` reads
    back as ``"0.50"``.
    """
    if not isinstance(raw, str):
        return None

    cache = resolve_cache(cache)
    tokens = resolve_locale_tokens(locale, cache)
    max_digits = clamp_fraction_digits(max_fraction_digits, cache.default_max_fraction_digits)
    allowed = {tokens.radix, tokens.thousands_separator, *tokens.map_to_radix, "-"}

    text = raw.strip()
    is_negative = text.startswith("-")
    if is_negative:
        text = text[1:]

    cleaned = "".join(ch for ch in text if ch in DIGITS or ch in allowed)
    if "-" in cleaned:
        return None
    cleaned = cleaned.replace(tokens.thousands_separator, "")
    for separator in tokens.map_to_radix:
        cleaned = cleaned.replace(separator, tokens.radix)
    cleaned = cleaned.replace(tokens.radix, ".")

    if not cleaned or cleaned.count(".") > 1:
        return None

    integer_digits, _, fraction_digits = cleaned.partition(".")
    if not integer_digits and not fraction_digits:
        return None

    canonical = _build_canonical(is_negative, integer_digits, fraction_digits[:max_digits])
    if not CANONICAL_DECIMAL_PATTERN.fullmatch(canonical):
        return None
    return canonical


# ---------------------------------------------------------------------------
# Display formatting
# ---------------------------------------------------------------------------


def signed_integer(parts: CanonicalDecimalParts) -> Decimal:
    """Integer portion as an exact signed ``Decimal`` (keeps the sign of ``-0.5``)."""
    integer = Decimal(parts.integer_part)
    return integer.copy_negate() if parts.is_negative else integer


def inject_fraction_part(parts: list[FormatPart], fraction_part: str, decimal_separator: str) -> str:
    """Join formatted parts, splicing the fraction in after the last integer/group part."""
    if not fraction_part:
        return "".join(part.value for part in parts)

    last_numeric_index = -1
    for index, part in enumerate(parts):
        if part.type in ("integer", "group"):
            last_numeric_index = index
    if last_numeric_index == -1:
        return "".join(part.value for part in parts)

    return "".join(
        f"{part.value}{decimal_separator}{fraction_part}" if index == last_numeric_index else part.value
        for index, part in enumerate(parts)
    )


def format_canonical_decimal(
    value: str | None,
    locale: str,
    minimum_fraction_digits: int | None = None,
    maximum_fraction_digits: int | None = None,
    cache: FormatterCache | None = None,
) -> str:
    """Render a canonical decimal with the locale's grouping and radix.

    Only the integer portion goes through the formatter; the fraction is
    padded to the minimum and, when a maximum is given, truncated to it, as
    plain text.  ``"98.7654"`` renders as ``"98,7654"`` in ``pt-BR``.
    """
    parts = parse_canonical_decimal_parts(value)
    if parts is None:
        return ""

    minimum = clamp_fraction_digits(minimum_fraction_digits, 0)
    fraction = parts.fraction_part
    if maximum_fraction_digits is not None:
        maximum = clamp_fraction_digits(maximum_fraction_digits, len(fraction))
        fraction = fraction[: max(minimum, maximum)]
    fraction = fraction.ljust(minimum, "0")

    cache = resolve_cache(cache)
    integer_parts = cache.get(locale, INTEGER_ONLY_OPTIONS).format_to_parts(signed_integer(parts))
    radix = resolve_locale_tokens(locale, cache).radix
    return inject_fraction_part(integer_parts, fraction, radix)


# ---------------------------------------------------------------------------
# Comparison and validation
# ---------------------------------------------------------------------------


def _compare_magnitude(left: CanonicalDecimalParts, right: CanonicalDecimalParts) -> CompareResult:
    # Integer parts carry no leading zeros, so length orders them first
    if len(left.integer_part) != len(right.integer_part):
        return 1 if len(left.integer_part) > len(right.integer_part) else -1
    if left.integer_part != right.integer_part:
        return 1 if left.integer_part > right.integer_part else -1

    width = max(len(left.fraction_part), len(right.fraction_part))
    left_fraction = left.fraction_part.ljust(width, "0")
    right_fraction = right.fraction_part.ljust(width, "0")
    if left_fraction == right_fraction:
        return 0
    return 1 if left_fraction > right_fraction else -1


def compare_canonical_decimal(left: str | None, right: str | None) -> CompareResult | None:
    """Compare two canonical decimals digit by digit.

    Returns 1, 0 or -1, or ``None`` when either side is not canonical.
    ``"12.34"`` and ``"12.3400"`` compare equal and ``"-0"`` equals ``"0"``.
    """
    left_parts = parse_canonical_decimal_parts(left)
    right_parts = parse_canonical_decimal_parts(right)
    if left_parts is None or right_parts is None:
        return None

    if left_parts.is_negative != right_parts.is_negative:
        return -1 if left_parts.is_negative else 1

    magnitude = _compare_magnitude(left_parts, right_parts)
    return -magnitude if left_parts.is_negative else magnitude


def _bound(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    return value.strip()


def validate_canonical_decimal(
    value: str | None,
    rules: DecimalValidationRules | None = None,
) -> NumericInputValidationError | None:
    """Return the first violated rule for *value*, or ``None`` when it is valid.

    Checked in order: required, canonical format, greater than zero, min,
    max.  A blank value that is not required is valid; a bound that is not
    itself canonical is skipped.
    """
    rules = rules or DecimalValidationRules()
    trimmed = (value or "").strip()

    if not trimmed:
        return NumericInputValidationError.REQUIRED if rules.required else None

    if not is_canonical_decimal(trimmed):
        return NumericInputValidationError.INVALID

    if rules.greater_than_zero:
        comparison = compare_canonical_decimal(trimmed, "0")
        if comparison is not None and comparison <= 0:
            return NumericInputValidationError.GREATER_THAN_ZERO

    minimum = _bound(rules.min)
    if minimum is not None:
        comparison = compare_canonical_decimal(trimmed, minimum)
        if comparison is not None and comparison < 0:
            return NumericInputValidationError.MIN

    maximum = _bound(rules.max)
    if maximum is not None:
        comparison = compare_canonical_decimal(trimmed, maximum)
        if comparison is not None and comparison > 0:
            return NumericInputValidationError.MAX

    return None
