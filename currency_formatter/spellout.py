"""
Cardinal number spelling, the number-to-words service.

A thin, locale-bound wrapper around num2words. num2words resolves
"ru_RU" to its "ru" converter on its own; we check that resolution up front
so an unsupported language fails when the speller is built rather than on
the first amount.
"""

from __future__ import annotations

import logging

from num2words import CONVERTER_CLASSES, num2words

from .exceptions import UnsupportedLocaleError

logger = logging.getLogger(__name__)


def resolve_language(locale: str) -> str | None:
    """Map a locale identifier to the num2words converter key, if one exists.

    Example:
        "en_IN" → "en_IN", "ru_RU" → "ru", "xx_YY" → None
    """
    normalized = locale.replace("-", "_")
    if normalized in CONVERTER_CLASSES:
        return normalized
    language = normalized[:2]
    if language in CONVERTER_CLASSES:
        return language
    return None


class NumberSpeller:
    """Spells integers as cardinal words in one locale."""

    def __init__(self, locale: str):
        language = resolve_language(locale)
        if language is None:
            raise UnsupportedLocaleError(
                f"No number-to-words converter for locale {locale!r}",
                details={"locale": locale},
            )
        self.locale = locale
        self.language = language
        logger.debug("Number speller for %s uses num2words language %r", locale, language)

    def format(self, number: int) -> str:
        return num2words(number, lang=self.language, to="cardinal")
