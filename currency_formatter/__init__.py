"""
Currency Formatter — monetary amounts as locale-aware digits and as words.

Architecture: FormattingConfig → SymbolicFormatter (babel) for "1,234.56";
fixed-point decomposition → num2words + inflector for
"one thousand two hundred thirty-four rubles fifty-six kopecks".
"""

from .exceptions import (
    CurrencyFormatterError,
    InflectorNotConfigured,
    InvalidConfigurationError,
    InvalidSpellModeError,
    UnsupportedLocaleError,
)
from .formatter import CurrencyFormatter
from .inflection import EnglishInflector, Inflector, PluralFormsInflector, default_inflector
from .models import RoundingMode, SpellMode

__version__ = "1.0.0"

__all__ = [
    "CurrencyFormatter",
    "CurrencyFormatterError",
    "EnglishInflector",
    "Inflector",
    "InflectorNotConfigured",
    "InvalidConfigurationError",
    "InvalidSpellModeError",
    "PluralFormsInflector",
    "RoundingMode",
    "SpellMode",
    "UnsupportedLocaleError",
    "default_inflector",
]
