"""Canonical decimal value types, validation rules and mask configuration.

A canonical decimal is a plain ``str`` matching ``^-?\\d+(\\.\\d+)?$``: no
grouping, ``.`` as the decimal point, a leading ``-`` as the only sign.  The
models here describe the pieces the engine splits it into and the payloads
it hands back to input components.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from locale_decimal.models.locale import MAX_FRACTION_DIGITS


class NumericInputValidationError(StrEnum):
    REQUIRED = "required"
    INVALID = "invalid"
    GREATER_THAN_ZERO = "greater_than_zero"
    MIN = "min"
    MAX = "max"


class CanonicalDecimalParts(BaseModel):
    """A canonical decimal split into sign, integer digits and fraction digits."""

    model_config = ConfigDict(frozen=True)

    is_negative: bool = False
    integer_part: str = "0"
    fraction_part: str = ""


class LocaleDecimalDraft(BaseModel):
    """Result of parsing a partially typed value on a single keystroke."""

    display_value: str = ""
    canonical_value: str | None = None
    has_digits: bool = False
    has_trailing_decimal_separator: bool = False


class DecimalValidationRules(BaseModel):
    """Declarative constraints checked by ``validate_canonical_decimal``.

    ``min`` and ``max`` are canonical decimal strings; blank bounds are ignored.
    """

    required: bool = False
    greater_than_zero: bool = False
    min: str | None = None
    max: str | None = None


class MoneyFormatOptions(BaseModel):
    """Display overrides for ``format_money``.

    Style and currency are fixed by the call itself, so they are not options.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    minimum_fraction_digits: int | None = Field(default=None, ge=0, le=MAX_FRACTION_DIGITS)
    maximum_fraction_digits: int | None = Field(default=None, ge=0, le=MAX_FRACTION_DIGITS)
    use_grouping: bool = True
    currency_format: Literal["standard", "accounting"] = "standard"


class FormatMoneyInput(BaseModel):
    """Locale and currency context for rendering a money value."""

    locale: str
    currency: str
    options: MoneyFormatOptions | None = None


class NumericMaskConfig(BaseModel):
    """Input-side configuration of a numeric mask."""

    locale: str
    scale: int | None = None
    pad_fractional_zeros: bool = False
    normalize_zeros: bool = True
    use_thousands_separator: bool = True


class MaskOptions(BaseModel):
    """Options for a live-input number mask.

    Serialised with camelCase keys (``mapToRadix``, ``thousandsSeparator``)
    as the browser masking library reads them.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    mask: Literal["Number"] = "Number"
    scale: int = Field(ge=0, le=MAX_FRACTION_DIGITS)
    radix: Literal[".", ","]
    map_to_radix: list[str] = Field(default_factory=list)
    thousands_separator: str = ""
    pad_fractional_zeros: bool = False
    normalize_zeros: bool = True
    min: int = 0

    def to_mask_config(self) -> dict:
        """Return the camelCase dict handed to the masking library."""
        return self.model_dump(by_alias=True)
