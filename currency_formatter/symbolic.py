"""
Symbolic currency rendering on top of babel's CLDR data.

Babel supplies the locale knowledge: the standard currency pattern (where
the symbol goes, default grouping), the decimal/group/minus symbols and the
currency symbol itself. This module layers the formatter's own settings on
top of it:

    amount ──► round (configured mode, max fraction digits)
           ──► babel NumberPattern.apply  (digits, grouping, fraction bounds)
           ──► separator overrides
           ──► sign + prefix/suffix (negative subpattern if the locale has one)

The number body is rendered without affixes so that separator overrides can
never touch spacing inside the locale's prefix or suffix (ru_RU uses a
no-break space both as group separator and before the "₽").

It also owns the internal fixed-point rendering used by the spelling
pipeline: ungrouped, "." as decimal point, no symbol.
"""

from __future__ import annotations

import copy
import logging
import re
from decimal import Decimal, InvalidOperation, localcontext
from typing import Union

from babel import Locale
from babel.numbers import (
    get_currency_precision,
    get_currency_symbol,
    get_decimal_symbol,
    get_group_symbol,
    get_minus_sign_symbol,
    get_territory_currencies,
    parse_pattern,
)

from .models import FormattingConfig, RoundingMode

logger = logging.getLogger(__name__)

Number = Union[int, float, Decimal]

# Generic currency sign, used when neither a symbol nor a currency is known.
_CURRENCY_SIGN = "¤"


# ─── Decimal Helpers ────────────────────────────────────────────────


def to_decimal(number: Number) -> Decimal:
    """Convert an int/float/Decimal to Decimal without binary float noise."""
    if isinstance(number, Decimal):
        return number
    return Decimal(str(number))


def quantize(value: Decimal, digits: int, rounding: RoundingMode) -> Decimal:
    """Round ``value`` to ``digits`` fractional digits using ``rounding``."""
    quantum = Decimal(1).scaleb(-digits)
    with localcontext() as ctx:
        # Enough precision for every integer digit plus the fraction.
        ctx.prec = max(ctx.prec, value.adjusted() + digits + 2)
        return value.quantize(quantum, rounding=rounding.decimal_rounding)


def fixed_point(number: Number, digits: int, rounding: RoundingMode) -> str:
    """Render ``number`` as an ungrouped fixed-point string with "." separator.

    Always shows exactly ``digits`` fractional digits ("1.5" at 2 → "1.50");
    at zero digits there is no decimal point at all.

    Raises:
        decimal.InvalidOperation: If the amount is NaN or infinite.
    """
    value = to_decimal(number)
    if not value.is_finite():
        raise InvalidOperation(f"Cannot render non-finite amount {value} as fixed-point")
    return f"{quantize(value, digits, rounding):f}"


# ─── Symbolic Formatter ─────────────────────────────────────────────


class SymbolicFormatter:
    """Locale-bound currency formatter driven by a FormattingConfig.

    Usage:
        formatter = SymbolicFormatter("en_US")
        formatter.format(1234.5, FormattingConfig(locale="en_US"))  # "$1,234.50"
    """

    def __init__(self, locale: str):
        self.locale = Locale.parse(locale)
        self._pattern = parse_pattern(self.locale.currency_formats["standard"])
        self._decimal_symbol = get_decimal_symbol(self.locale)
        self._group_symbol = get_group_symbol(self.locale)

    def default_currency(self) -> str | None:
        """ISO 4217 code currently tendered in the locale's territory, if any."""
        if not self.locale.territory:
            return None
        currencies = get_territory_currencies(self.locale.territory)
        return currencies[0] if currencies else None

    def currency_symbol(self, config: FormattingConfig) -> str:
        """The symbol format() will print for ``config``."""
        if config.currency_symbol is not None:
            return config.currency_symbol
        currency = config.currency_code or self.default_currency()
        if currency is None:
            return _CURRENCY_SIGN
        return get_currency_symbol(currency, locale=self.locale)

    def currency_precision(self, config: FormattingConfig) -> int:
        """Minor-unit digits of the configured (or territory) currency, else 2."""
        currency = config.currency_code or self.default_currency()
        if currency is None:
            return 2
        return get_currency_precision(currency)

    def format(self, number: Number, config: FormattingConfig) -> str:
        """Render ``number`` with digits, separators and the currency symbol."""
        value = to_decimal(number)
        if value.is_finite():
            value = quantize(value, config.max_fraction_digits, config.rounding_mode)
        is_negative = value.is_signed() and not value.is_zero()

        body_pattern = copy.copy(self._pattern)
        body_pattern.prefix = ("", "")
        body_pattern.suffix = ("", "")
        body_pattern.frac_prec = (config.min_fraction_digits, config.max_fraction_digits)
        if config.group_size:
            body_pattern.grouping = (config.group_size, config.group_size)

        body = body_pattern.apply(
            abs(value),
            self.locale,
            currency_digits=False,
            group_separator=config.group_size != 0,
        )
        body = self._replace_separators(body, config)

        currency = config.currency_code or self.default_currency()
        symbol = self.currency_symbol(config)
        prefix, suffix, sign = self._affixes(is_negative)
        prefix = self._fill_currency(prefix, currency, symbol)
        suffix = self._fill_currency(suffix, currency, symbol)

        return f"{sign}{prefix}{body}{suffix}"

    # ─── Internal Helpers ───────────────────────────────────────────

    def _affixes(self, is_negative: bool) -> tuple[str, str, str]:
        """(prefix, suffix, leading sign) for the amount's sign.

        A pattern with an explicit negative part ("¤ #,##0.00;¤ -#,##0.00"
        in nl_NL) places the minus itself; otherwise the minus symbol goes
        in front of the positive prefix.
        """
        minus = get_minus_sign_symbol(self.locale)
        if not is_negative:
            return self._pattern.prefix[0], self._pattern.suffix[0], ""
        if ";" in self._pattern.pattern:
            prefix, suffix = self._pattern.prefix[1], self._pattern.suffix[1]
            return prefix.replace("-", minus), suffix.replace("-", minus), ""
        return self._pattern.prefix[0], self._pattern.suffix[0], minus

    def _replace_separators(self, body: str, config: FormattingConfig) -> str:
        """Swap the locale's decimal/group symbols for configured overrides.

        Single pass, so swapping "," and "." with each other works.
        """
        replacements: dict[str, str] = {}
        if config.decimal_separator is not None:
            replacements[self._decimal_symbol] = config.decimal_separator
        if config.group_separator is not None:
            replacements[self._group_symbol] = config.group_separator
        if not replacements:
            return body

        separators = re.compile("|".join(re.escape(s) for s in replacements))
        return separators.sub(lambda m: replacements[m.group(0)], body)

    @staticmethod
    def _fill_currency(affix: str, currency: str | None, symbol: str) -> str:
        if _CURRENCY_SIGN not in affix:
            return affix
        # "¤¤" is the ISO code placeholder, a lone "¤" is the symbol.
        return affix.replace("¤¤", currency or symbol).replace(_CURRENCY_SIGN, symbol)
