"""
Custom exception hierarchy for currency formatting.

Each exception type maps to a specific category of failure, so callers can
catch configuration mistakes separately from caller errors at their boundary.
Nothing here is retried or logged internally.
"""

from __future__ import annotations


class CurrencyFormatterError(Exception):
    """Base exception for all currency formatter failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class InflectorNotConfigured(CurrencyFormatterError):
    """spell() was called on a formatter built without an inflection service."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INFLECTOR_NOT_CONFIGURED", message, details)


class InvalidSpellModeError(CurrencyFormatterError):
    """The requested spelling mode is not one of INT, FRACTION_AS_NUMBER, ALL."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_SPELL_MODE", message, details)


class InvalidConfigurationError(CurrencyFormatterError):
    """A setter or constructor argument failed validation."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_CONFIGURATION", message, details)


class UnsupportedLocaleError(CurrencyFormatterError):
    """The number-to-words service has no converter for the locale's language."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("UNSUPPORTED_LOCALE", message, details)
