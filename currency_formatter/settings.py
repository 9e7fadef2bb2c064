"""
Process-wide defaults, read from the environment (and a .env file if present).

    CURRENCY_FORMATTER_LOCALE     default locale for formatters built without one
    CURRENCY_FORMATTER_LOG_LEVEL  log level used by main.py (default WARNING)
"""

from __future__ import annotations

import logging
import os

from babel import default_locale
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

FALLBACK_LOCALE = "en_US"

load_dotenv()


def get_default_locale() -> str:
    """Locale for formatters constructed without an explicit one.

    Order: CURRENCY_FORMATTER_LOCALE, then the POSIX locale variables
    (LANGUAGE, LC_ALL, LC_CTYPE, LANG) as read by babel, then en_US.
    """
    configured = os.environ.get("CURRENCY_FORMATTER_LOCALE")
    if configured:
        return configured
    detected = default_locale()
    if detected:
        return detected
    logger.debug("No locale in the environment, falling back to %s", FALLBACK_LOCALE)
    return FALLBACK_LOCALE


def get_log_level() -> str:
    return os.environ.get("CURRENCY_FORMATTER_LOG_LEVEL", "WARNING").upper()
