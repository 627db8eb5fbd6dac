"""Locale-aware number and currency formatting backed by Babel (CLDR data).

``NumberFormatter`` is the engine's platform formatting service.  It renders
``int``/``Decimal`` values through the locale's CLDR pattern, reports the
result as typed parts (``integer``, ``group``, ``decimal``, ``currency`` ...)
and exposes the fraction digit bounds it resolved from its options.
"""

from __future__ import annotations

import re
from decimal import Decimal, localcontext

from babel import Locale
from babel.numbers import (
    format_currency,
    format_decimal,
    get_currency_precision,
    get_currency_symbol,
    get_decimal_symbol,
    get_group_symbol,
    get_minus_sign_symbol,
    get_plus_sign_symbol,
)

from locale_decimal.models.locale import FormatPart, FormatterOptions, ResolvedNumberOptions

DIGITS = "0123456789"
DEFAULT_DECIMAL_MAX_FRACTION_DIGITS = 3

# Decimal point following a digit placeholder, plus the placeholders after it
_FRACTION_SECTION = re.compile(r"(?<=[0#])\.[0#]+")


def resolve_fraction_digits(options: FormatterOptions) -> ResolvedNumberOptions:
    """Apply the default fraction bounds for the option style.

    Currency defaults come from the currency's CLDR digits (2 for USD, 0 for
    JPY); plain decimals default to 0..3.  A maximum below the minimum is
    raised to the minimum.
    """
    if options.style == "currency":
        default_minimum = get_currency_precision(options.currency)
        default_maximum = default_minimum
    else:
        default_minimum = 0
        default_maximum = DEFAULT_DECIMAL_MAX_FRACTION_DIGITS

    minimum = options.minimum_fraction_digits
    maximum = options.maximum_fraction_digits
    if minimum is None:
        minimum = default_minimum if maximum is None else min(default_minimum, maximum)
    if maximum is None:
        maximum = max(minimum, default_maximum)
    return ResolvedNumberOptions(
        minimum_fraction_digits=minimum,
        maximum_fraction_digits=max(minimum, maximum),
    )


def rewrite_fraction_section(pattern: str, minimum: int, maximum: int) -> str:
    """Replace the fraction section of every subpattern of a CLDR number pattern."""
    fraction = "" if maximum == 0 else "." + "0" * minimum + "#" * (maximum - minimum)
    rewritten = []
    for subpattern in pattern.split(";"):
        subpattern = _FRACTION_SECTION.sub("", subpattern)
        last_placeholder = max(subpattern.rfind("0"), subpattern.rfind("#"))
        rewritten.append(
            subpattern[: last_placeholder + 1] + fraction + subpattern[last_placeholder + 1:]
        )
    return ";".join(rewritten)


class NumberFormatter:
    """Formats numbers for one locale and one option set.

    Instances are immutable after construction and safe to share, which is
    what lets ``FormatterCache`` hand out a single instance per key.
    """

    def __init__(self, locale: Locale, options: FormatterOptions | None = None):
        self._locale = locale
        self._options = options or FormatterOptions()
        self._resolved = resolve_fraction_digits(self._options)
        self._pattern = rewrite_fraction_section(
            self._base_pattern(),
            self._resolved.minimum_fraction_digits,
            self._resolved.maximum_fraction_digits,
        )
        self._decimal_symbol = get_decimal_symbol(locale)
        self._group_symbol = get_group_symbol(locale)
        self._minus_sign = get_minus_sign_symbol(locale)
        self._plus_sign = get_plus_sign_symbol(locale)
        self._currency_symbol = (
            get_currency_symbol(self._options.currency, locale)
            if self._options.style == "currency"
            else None
        )

    @property
    def locale(self) -> Locale:
        return self._locale

    @property
    def options(self) -> FormatterOptions:
        return self._options

    @property
    def pattern(self) -> str:
        return self._pattern

    def _base_pattern(self) -> str:
        if self._options.style == "currency":
            formats = self._locale.currency_formats
            number_pattern = formats.get(self._options.currency_format) or formats["standard"]
        else:
            number_pattern = self._locale.decimal_formats[None]
        return number_pattern.pattern

    def resolved_options(self) -> ResolvedNumberOptions:
        return self._resolved

    def format(self, value: int | Decimal) -> str:
        """Format *value* exactly.

        The decimal context precision is widened to the value's digit count
        so Babel's internal normalisation never rounds large integers.
        """
        number = value if isinstance(value, Decimal) else Decimal(value)
        with localcontext() as context:
            context.prec = max(
                context.prec,
                len(number.as_tuple().digits) + self._resolved.maximum_fraction_digits + 2,
            )
            if self._options.style == "currency":
                return format_currency(
                    number,
                    self._options.currency,
                    format=self._pattern,
                    locale=self._locale,
                    currency_digits=False,
                    group_separator=self._options.use_grouping,
                )
            return format_decimal(
                number,
                format=self._pattern,
                locale=self._locale,
                group_separator=self._options.use_grouping,
            )

    def format_to_parts(self, value: int | Decimal) -> list[FormatPart]:
        """Format *value* and split the output into typed parts."""
        return self._tokenize(self.format(value))

    def _tokenize(self, text: str) -> list[FormatPart]:
        parts: list[FormatPart] = []
        literal = ""
        seen_decimal = False
        index = 0

        def flush_literal() -> None:
            nonlocal literal
            if literal:
                parts.append(FormatPart(type="literal", value=literal))
                literal = ""

        while index < len(text):
            char = text[index]

            if self._currency_symbol and text.startswith(self._currency_symbol, index):
                flush_literal()
                parts.append(FormatPart(type="currency", value=self._currency_symbol))
                index += len(self._currency_symbol)
                continue

            if char in DIGITS:
                end = index
                while end < len(text) and text[end] in DIGITS:
                    end += 1
                flush_literal()
                parts.append(
                    FormatPart(type="fraction" if seen_decimal else "integer", value=text[index:end])
                )
                index = end
                continue

            # Separators only count as such between two digit runs
            between_digits = (
                not literal
                and bool(parts)
                and parts[-1].type == "integer"
                and index + 1 < len(text)
                and text[index + 1] in DIGITS
            )
            if between_digits and not seen_decimal and char == self._decimal_symbol:
                parts.append(FormatPart(type="decimal", value=char))
                seen_decimal = True
                index += 1
                continue
            if between_digits and char == self._group_symbol:
                parts.append(FormatPart(type="group", value=char))
                index += 1
                continue

            if text.startswith(self._minus_sign, index):
                flush_literal()
                parts.append(FormatPart(type="minusSign", value=self._minus_sign))
                index += len(self._minus_sign)
                continue
            if text.startswith(self._plus_sign, index):
                flush_literal()
                parts.append(FormatPart(type="plusSign", value=self._plus_sign))
                index += len(self._plus_sign)
                continue

            literal += char
            index += 1

        flush_literal()
        return parts
