#!/usr/bin/env python3
"""
Currency Formatter — Demo Entry Point
=====================================

Prints symbolic and spelled-out renderings of a few sample amounts.

Usage:
    python main.py                                   # en_US and ru_RU
    CURRENCY_FORMATTER_LOG_LEVEL=DEBUG python main.py
"""

from __future__ import annotations

import logging
import sys
from decimal import Decimal

from currency_formatter.formatter import CurrencyFormatter
from currency_formatter.inflection import default_inflector
from currency_formatter.models import SpellMode
from currency_formatter.settings import get_log_level

# ─── Sample Amounts ─────────────────────────────────────────────────

SAMPLE_AMOUNTS = [Decimal("0"), Decimal("1"), Decimal("2"), Decimal("1.05"), Decimal("1234.56")]

# (locale, integer unit, fraction unit)
SAMPLE_LOCALES = [
    ("en_US", "ruble", "kopeck"),
    ("ru_RU", "рубль", "копейка"),
]


# ─── ANSI Color Constants ───────────────────────────────────────────

_CYAN = "\033[96m"
_GREEN = "\033[92m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"
_WIDTH = 72


# ─── Pretty Printer ─────────────────────────────────────────────────


def _print_amount(formatter: CurrencyFormatter, amount: Decimal) -> None:
    """Print one amount in every rendering."""
    print(f"  {_BOLD}{formatter.format(amount)}{_RESET}")
    for mode in SpellMode:
        print(f"    {_DIM}{mode.value:<19}{_RESET} {formatter.spell(amount, mode)}")


def print_locale(locale: str, integer_unit: str, fraction_unit: str) -> None:
    """Print every sample amount for one locale, plus a regrouped example."""
    formatter = CurrencyFormatter(locale, default_inflector(locale), integer_unit, fraction_unit)

    print(f"\n{'=' * _WIDTH}")
    print(f"{_BOLD}{_CYAN}  {locale}{_RESET}  {_DIM}({integer_unit} / {fraction_unit}){_RESET}")
    print(f"{'─' * _WIDTH}")
    for amount in SAMPLE_AMOUNTS:
        _print_amount(formatter, amount)

    formatter.set_group_size(2).set_fraction_digits(0)
    print(f"{'─' * _WIDTH}")
    print(f"  group size 2:  {_GREEN}{formatter.format(543756765)}{_RESET}")


# ─── Main ────────────────────────────────────────────────────────────


def main():
    """Render the sample amounts for every sample locale."""
    logging.basicConfig(level=get_log_level(), format="%(levelname)s %(name)s: %(message)s")

    for locale, integer_unit, fraction_unit in SAMPLE_LOCALES:
        print_locale(locale, integer_unit, fraction_unit)
    print(f"{'=' * _WIDTH}\n")
    sys.exit(0)


if __name__ == "__main__":
    main()
