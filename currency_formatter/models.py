"""
Pydantic models for formatter state — strict typing at the setter boundary.

Every configurable attribute is a named, typed field instead of a generic
attribute id passed to the formatting engine. Invalid values fail when they
are set, not later when something is rendered.
"""

from __future__ import annotations

import decimal
from enum import Enum
from typing import Optional

from babel import Locale, UnknownLocaleError
from babel.numbers import is_currency
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# Upper bound for every fraction-digit setting.
MAX_FRACTION_DIGITS = 20


# ─── Enumerations ───────────────────────────────────────────────────


class RoundingMode(str, Enum):
    """How the symbolic formatter rounds to the configured precision."""

    CEILING = "CEILING"  # towards positive infinity
    FLOOR = "FLOOR"  # towards negative infinity
    DOWN = "DOWN"  # towards zero
    UP = "UP"  # away from zero
    HALF_EVEN = "HALF_EVEN"
    HALF_DOWN = "HALF_DOWN"
    HALF_UP = "HALF_UP"

    @property
    def decimal_rounding(self) -> str:
        """The matching ``decimal`` module rounding constant."""
        return _DECIMAL_ROUNDING[self]


_DECIMAL_ROUNDING: dict[RoundingMode, str] = {
    RoundingMode.CEILING: decimal.ROUND_CEILING,
    RoundingMode.FLOOR: decimal.ROUND_FLOOR,
    RoundingMode.DOWN: decimal.ROUND_DOWN,
    RoundingMode.UP: decimal.ROUND_UP,
    RoundingMode.HALF_EVEN: decimal.ROUND_HALF_EVEN,
    RoundingMode.HALF_DOWN: decimal.ROUND_HALF_DOWN,
    RoundingMode.HALF_UP: decimal.ROUND_HALF_UP,
}


class SpellMode(str, Enum):
    """Which parts of an amount spell() renders as words."""

    INT = "INT"  # integer part only
    FRACTION_AS_NUMBER = "FRACTION_AS_NUMBER"  # words + fraction digits verbatim
    ALL = "ALL"  # integer and fraction both as words


# ─── Formatter Configuration ────────────────────────────────────────


class FormattingConfig(BaseModel):
    """Everything one CurrencyFormatter knows about how to render amounts.

    Frozen: the formatter swaps in a freshly validated copy on every setter
    call, so a failed update never leaves a half-applied state behind.
    """

    model_config = ConfigDict(frozen=True)

    locale: str
    currency_code: Optional[str] = None  # None → the locale territory's currency
    fraction_digits: int = Field(default=2, ge=0, le=MAX_FRACTION_DIGITS)
    min_fraction_digits: int = Field(default=2, ge=0, le=MAX_FRACTION_DIGITS)
    max_fraction_digits: int = Field(default=2, ge=0, le=MAX_FRACTION_DIGITS)
    group_size: Optional[int] = Field(default=None, ge=0)  # None → locale, 0 → off
    rounding_mode: RoundingMode = RoundingMode.HALF_EVEN
    decimal_separator: Optional[str] = Field(default=None, min_length=1)
    group_separator: Optional[str] = None
    currency_symbol: Optional[str] = None

    @field_validator("locale")
    @classmethod
    def normalize_locale(cls, value: str) -> str:
        try:
            return str(Locale.parse(value.replace("-", "_")))
        except (UnknownLocaleError, ValueError) as exc:
            raise ValueError(f"Unknown locale: {value!r}") from exc

    @field_validator("currency_code")
    @classmethod
    def check_currency_code(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        code = value.strip().upper()
        if not is_currency(code):
            raise ValueError(f"Unknown ISO 4217 currency code: {value!r}")
        return code

    @model_validator(mode="after")
    def check_fraction_bounds(self) -> FormattingConfig:
        if self.min_fraction_digits > self.max_fraction_digits:
            raise ValueError(
                f"min_fraction_digits ({self.min_fraction_digits}) exceeds "
                f"max_fraction_digits ({self.max_fraction_digits})"
            )
        if not self.min_fraction_digits <= self.fraction_digits <= self.max_fraction_digits:
            raise ValueError(
                f"fraction_digits ({self.fraction_digits}) outside "
                f"[{self.min_fraction_digits}, {self.max_fraction_digits}]"
            )
        return self


# ─── Unit Names ─────────────────────────────────────────────────────


class CurrencyUnitNames(BaseModel):
    """Caller-supplied nouns for the two parts of an amount ("" means unset)."""

    integer_unit_name: str = ""  # e.g. "ruble"
    fraction_unit_name: str = ""  # e.g. "kopeck"


# ─── Decomposed Amount ──────────────────────────────────────────────


class DecomposedAmount(BaseModel):
    """An amount split at the decimal point of its fixed-point rendering.

    ``fraction`` keeps the digits exactly as rendered, so "05" stays
    distinguishable from "5". A magnitude below one loses its sign because
    the integer part is a plain int ("-0" parses to 0).
    """

    model_config = ConfigDict(frozen=True)

    integer_part: int
    fraction: str = Field(default="", pattern=r"^[0-9]*$")

    @classmethod
    def from_fixed_point(cls, text: str) -> DecomposedAmount:
        """Split a fixed-point string such as "1234.05" into its parts."""
        int_str, _, fraction_str = text.partition(".")
        return cls(integer_part=int(int_str), fraction=fraction_str)

    @property
    def fraction_value(self) -> int:
        """The fraction digits read as an integer (0 when there are none)."""
        return int(self.fraction) if self.fraction else 0

    def to_fixed_point(self) -> str:
        if not self.fraction:
            return str(self.integer_part)
        return f"{self.integer_part}.{self.fraction}"
