"""
CurrencyFormatter — symbolic formatting and spelled-out amounts.

Two responsibilities share one object:

  1. Configuration surface: fluent setters over a FormattingConfig, plus
     format() which renders "$1,234.56" through the SymbolicFormatter.
  2. Spelling pipeline:

        amount
          │  fixed_point(fraction_digits, HALF_UP)         "1234.05"
          ▼
        DecomposedAmount(integer_part=1234, fraction="05")
          │  dispatch on SpellMode
          ├─ INT                 "<int words> <int unit>"
          ├─ FRACTION_AS_NUMBER  "<int words> <int unit> 05 <fraction unit>"
          └─ ALL                 "<int words> <int unit> <fraction words> <fraction unit>"

Spelling never sees the display separators: it parses its own ungrouped
fixed-point string, so set_group_size() and friends only affect format().

FRACTION_AS_NUMBER prints the fraction digits verbatim ("05"), while ALL
spells the fraction's integer value ("five"), so leading zeros are not
spoken in ALL mode.

Not thread-safe: configuration and rendering share mutable state, so use
one formatter per thread or guard it externally.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Union

from pydantic import ValidationError

from .exceptions import (
    InflectorNotConfigured,
    InvalidConfigurationError,
    InvalidSpellModeError,
)
from .inflection import Inflector
from .models import (
    CurrencyUnitNames,
    DecomposedAmount,
    FormattingConfig,
    RoundingMode,
    SpellMode,
)
from .settings import get_default_locale
from .spellout import NumberSpeller
from .symbolic import Number, SymbolicFormatter, fixed_point

logger = logging.getLogger(__name__)


class CurrencyFormatter:
    """Formats and spells monetary amounts in one locale.

    Usage:
        formatter = CurrencyFormatter("en_US", EnglishInflector(), "ruble", "kopeck")
        formatter.format(1234.5)                         # "$1,234.50"
        formatter.spell(1.05)                            # "one ruble five kopecks"
        formatter.spell(1.05, SpellMode.FRACTION_AS_NUMBER)  # "one ruble 05 kopecks"

    The inflector is optional: format() works without one, spell() raises
    InflectorNotConfigured.
    """

    def __init__(
        self,
        locale: str | None = None,
        inflector: Inflector | None = None,
        integer_unit_name: str = "",
        fraction_unit_name: str = "",
        currency_code: str | None = None,
    ):
        requested = locale if locale is not None else get_default_locale()
        self._config = self._validated(locale=requested, currency_code=currency_code)
        self._units = CurrencyUnitNames(
            integer_unit_name=integer_unit_name,
            fraction_unit_name=fraction_unit_name,
        )
        self._inflector = inflector
        self._symbolic = SymbolicFormatter(self._config.locale)
        self._speller: NumberSpeller | None = None
        # Precision follows the currency until a digits setter is called.
        self._explicit_digits = False
        self._apply_currency_precision()

    @classmethod
    def make(
        cls,
        locale: str | None = None,
        inflector: Inflector | None = None,
        integer_unit_name: str = "",
        fraction_unit_name: str = "",
        currency_code: str | None = None,
    ) -> CurrencyFormatter:
        """Alternative constructor, handy at the start of a setter chain."""
        return cls(locale, inflector, integer_unit_name, fraction_unit_name, currency_code)

    # ─── Read-only State ────────────────────────────────────────────

    @property
    def config(self) -> FormattingConfig:
        return self._config

    @property
    def locale(self) -> str:
        return self._config.locale

    @property
    def fraction_digits(self) -> int:
        """Precision spell() decomposes at; always what format() applies too."""
        return self._config.fraction_digits

    # ─── Unit Names ─────────────────────────────────────────────────

    def set_integer_unit_name(self, name: str) -> CurrencyFormatter:
        self._units = self._units.model_copy(update={"integer_unit_name": name})
        return self

    def set_fraction_unit_name(self, name: str) -> CurrencyFormatter:
        self._units = self._units.model_copy(update={"fraction_unit_name": name})
        return self

    # ─── Precision ──────────────────────────────────────────────────

    def set_fraction_digits(self, digits: int = 2) -> CurrencyFormatter:
        """Show exactly ``digits`` fractional digits; spell() splits at this precision."""
        return self._update_digits(
            fraction_digits=digits,
            min_fraction_digits=digits,
            max_fraction_digits=digits,
        )

    def set_min_fraction_digits(self, digits: int = 0) -> CurrencyFormatter:
        """Pad the fraction with zeros up to ``digits``.

        Raises the maximum (and the spelling precision) if they are lower.
        """
        current = self._config
        return self._update_digits(
            min_fraction_digits=digits,
            max_fraction_digits=max(current.max_fraction_digits, digits),
            fraction_digits=max(current.fraction_digits, digits),
        )

    def set_max_fraction_digits(self, digits: int) -> CurrencyFormatter:
        """Round to at most ``digits`` fractional digits.

        Lowers the minimum (and the spelling precision) if they are higher.
        """
        current = self._config
        return self._update_digits(
            max_fraction_digits=digits,
            min_fraction_digits=min(current.min_fraction_digits, digits),
            fraction_digits=min(current.fraction_digits, digits),
        )

    # ─── Symbolic Appearance ────────────────────────────────────────

    def set_group_size(self, size: int) -> CurrencyFormatter:
        """Digits per group in format(); 0 turns grouping off."""
        return self._update(group_size=size)

    def set_rounding_mode(self, mode: Union[RoundingMode, str]) -> CurrencyFormatter:
        return self._update(rounding_mode=mode)

    def set_decimal_separator(self, separator: str) -> CurrencyFormatter:
        """e.g. "/" renders 1234.57 as "$1,234/57"."""
        return self._update(decimal_separator=separator)

    def set_group_separator(self, separator: str) -> CurrencyFormatter:
        """e.g. "/" renders 123456.78 as "$123/456.78"."""
        return self._update(group_separator=separator)

    def set_currency_symbol(self, symbol: str) -> CurrencyFormatter:
        return self._update(currency_symbol=symbol)

    def set_currency_code(self, code: str) -> CurrencyFormatter:
        """ISO 4217 code whose locale symbol format() prints (e.g. "RUB").

        Unless a digits setter was called, precision follows the new
        currency's minor unit (JPY: 0, KWD: 3).
        """
        self._update(currency_code=code)
        self._apply_currency_precision()
        return self

    # ─── Rendering ──────────────────────────────────────────────────

    def format(self, number: Number) -> str:
        """Render ``number`` with the locale's currency pattern and overrides."""
        return self._symbolic.format(number, self._config)

    def decompose(self, number: Number) -> DecomposedAmount:
        """Split ``number`` into integer part and fraction digits.

        Uses the internal fixed-point rendering at ``fraction_digits``
        precision, independent of any display separators. Ties always round
        half away from zero here, whatever the rounding mode: that mode only
        governs format(), so 2.125 displays as "$2.12" under HALF_EVEN but
        decomposes to (2, "13").

        Raises:
            decimal.InvalidOperation: If ``number`` is NaN or infinite.
        """
        text = fixed_point(number, self._config.fraction_digits, RoundingMode.HALF_UP)
        return DecomposedAmount.from_fixed_point(text)

    def spell(self, number: Number, mode: Union[SpellMode, str] = SpellMode.ALL) -> str:
        """Spell ``number`` out with unit names that agree with each part.

        Args:
            number: The amount, e.g. 1.05.
            mode:   SpellMode.INT, FRACTION_AS_NUMBER or ALL (or their names).

        Returns:
            e.g. "one ruble five kopecks" for 1.05 in ALL mode. At zero
            fraction digits only the integer part is spelled, in every mode.

        Raises:
            InflectorNotConfigured: No inflector was passed to the constructor.
            InvalidSpellModeError: ``mode`` is not a SpellMode.
            decimal.InvalidOperation: ``number`` is NaN or infinite.
        """
        inflector = self._inflector
        if inflector is None:
            raise InflectorNotConfigured(
                "Pass an inflector (anything with plural(noun, quantity)) "
                "to CurrencyFormatter to use spell()",
                details={"locale": self.locale},
            )

        strategy = self._strategy(mode)
        amount = self.decompose(number)
        logger.debug("Spelling %s as %s via %s", number, amount.to_fixed_point(), strategy.__name__)
        return strategy(amount, inflector)

    # ─── Spelling Strategies ────────────────────────────────────────

    def _strategy(self, mode: Union[SpellMode, str]) -> Callable[[DecomposedAmount, Inflector], str]:
        try:
            spell_mode = SpellMode(mode)
        except ValueError:
            raise InvalidSpellModeError(
                f"Unknown spell mode: {mode!r}",
                details={"mode": repr(mode), "allowed": [m.value for m in SpellMode]},
            ) from None

        strategies: dict[SpellMode, Callable[[DecomposedAmount, Inflector], str]] = {
            SpellMode.INT: self._spell_integer,
            SpellMode.FRACTION_AS_NUMBER: self._spell_fraction_as_number,
            SpellMode.ALL: self._spell_all,
        }
        # Every SpellMode needs an entry here; a missing one must not fall back to ALL.
        if spell_mode not in strategies:
            raise InvalidSpellModeError(
                f"No spelling strategy for mode {spell_mode.value}",
                details={"mode": spell_mode.value},
            )
        return strategies[spell_mode]

    def _spell_integer(self, amount: DecomposedAmount, inflector: Inflector) -> str:
        return self._join(
            self._words(amount.integer_part),
            self._unit(inflector, self._units.integer_unit_name, amount.integer_part),
        )

    def _spell_fraction_as_number(self, amount: DecomposedAmount, inflector: Inflector) -> str:
        if not amount.fraction:
            return self._spell_integer(amount, inflector)
        return self._join(
            self._spell_integer(amount, inflector),
            amount.fraction,
            self._unit(inflector, self._units.fraction_unit_name, amount.fraction_value),
        )

    def _spell_all(self, amount: DecomposedAmount, inflector: Inflector) -> str:
        if not amount.fraction:
            return self._spell_integer(amount, inflector)
        return self._join(
            self._spell_integer(amount, inflector),
            self._words(amount.fraction_value),
            self._unit(inflector, self._units.fraction_unit_name, amount.fraction_value),
        )

    # ─── Internal Helpers ───────────────────────────────────────────

    def _words(self, number: int) -> str:
        if self._speller is None:
            self._speller = NumberSpeller(self.locale)
        return self._speller.format(number)

    @staticmethod
    def _unit(inflector: Inflector, name: str, quantity: int) -> str:
        # An unset ("") unit name is omitted, never sent to the inflector.
        if not name:
            return ""
        return inflector.plural(name, quantity)

    @staticmethod
    def _join(*parts: str) -> str:
        return " ".join(part for part in parts if part)

    def _apply_currency_precision(self) -> None:
        """Reset all digit settings to the currency's minor unit (2 if unknown)."""
        if self._explicit_digits:
            return
        digits = self._symbolic.currency_precision(self._config)
        self._update(
            fraction_digits=digits,
            min_fraction_digits=digits,
            max_fraction_digits=digits,
        )

    def _update_digits(self, **changes: Any) -> CurrencyFormatter:
        self._update(**changes)
        self._explicit_digits = True
        return self

    def _update(self, **changes: Any) -> CurrencyFormatter:
        self._config = self._validated(**{**self._config.model_dump(), **changes})
        logger.debug("Formatter config updated: %s", changes)
        return self

    @staticmethod
    def _validated(**values: Any) -> FormattingConfig:
        try:
            return FormattingConfig(**values)
        except ValidationError as exc:
            raise InvalidConfigurationError(
                f"Invalid formatter configuration: {exc.error_count()} error(s)",
                details={
                    "errors": [
                        {"field": ".".join(str(p) for p in e["loc"]), "message": e["msg"]}
                        for e in exc.errors()
                    ]
                },
            ) from exc
