"""Locale-aware data types shared by the formatter, cache and token resolver.

``FormatterOptions`` is the closed option set a ``NumberFormatter`` is built
from and doubles as the formatter cache key.  ``LocaleTokens`` is the
separator set derived from probing a locale's formatter.
"""

from __future__ import annotations

import json
from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

MAX_FRACTION_DIGITS = 20
DEFAULT_MAX_FRACTION_DIGITS = 12
DEFAULT_QUANTITY_SCALE = 4


class Language(StrEnum):
    EN_US = "en-US"
    PT_BR = "pt-BR"
    ES_ES = "es-ES"


class Currency(StrEnum):
    BRL = "BRL"
    USD = "USD"
    EUR = "EUR"


def normalize_locale(locale: str) -> str:
    """Normalize a BCP 47 tag (``pt-BR``) or POSIX id (``pt_BR.UTF-8``) to ``pt_BR``."""
    tag = locale.strip().split(".")[0].split("@")[0]
    return tag.replace("-", "_")


class FormatterOptions(BaseModel):
    """The exact option fields a number formatter recognises.

    Unknown fields are rejected so two option sets can only differ in a
    field the formatter actually uses.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    style: Literal["decimal", "currency"] = "decimal"
    currency: str | None = None
    minimum_fraction_digits: int | None = Field(default=None, ge=0, le=MAX_FRACTION_DIGITS)
    maximum_fraction_digits: int | None = Field(default=None, ge=0, le=MAX_FRACTION_DIGITS)
    use_grouping: bool = True
    currency_format: Literal["standard", "accounting"] = "standard"

    @model_validator(mode="after")
    def _currency_required_for_currency_style(self) -> FormatterOptions:
        if self.style == "currency" and not self.currency:
            raise ValueError("currency style requires a currency code")
        return self

    def cache_key(self) -> str:
        """Stable serialisation with keys sorted lexicographically."""
        return json.dumps(self.model_dump(), sort_keys=True)


class FormatPart(BaseModel):
    """One token of formatted output, typed like ECMA-402 ``formatToParts``."""

    model_config = ConfigDict(frozen=True)

    type: Literal[
        "integer", "group", "decimal", "fraction",
        "minusSign", "plusSign", "currency", "literal",
    ]
    value: str


class ResolvedNumberOptions(BaseModel):
    """Fraction digit bounds a formatter actually applies."""

    minimum_fraction_digits: int
    maximum_fraction_digits: int


class LocaleTokens(BaseModel):
    """Separator glyphs used to read and mask numbers typed in a locale."""

    model_config = ConfigDict(frozen=True)

    radix: Literal[".", ","] = "."
    thousands_separator: str = ","
    map_to_radix: tuple[str, ...] = ()
