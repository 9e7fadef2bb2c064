"""
Noun agreement with a quantity: the inflection service.

spell() only needs ``plural(noun, quantity)``. Anything with that method can
be passed to CurrencyFormatter; two implementations ship with the package:

  - EnglishInflector: singular/plural via the `inflect` engine.
  - PluralFormsInflector: CLDR plural categories (babel) select a form from a
    noun table. This covers languages with richer numeral agreement than
    singular/plural, e.g. Russian:

        1 рубль · 2 рубля · 5 рублей · 21 рубль · 11 рублей
"""

from __future__ import annotations

import logging
from typing import Mapping, Protocol, runtime_checkable

import inflect
from babel import Locale

logger = logging.getLogger(__name__)


@runtime_checkable
class Inflector(Protocol):
    """Returns the form of ``noun`` that agrees with ``quantity``."""

    def plural(self, noun: str, quantity: int) -> str: ...


# ─── English ────────────────────────────────────────────────────────


class EnglishInflector:
    """English singular/plural agreement ("1 ruble", "0 rubles", "2 rubles")."""

    def __init__(self) -> None:
        self._engine = inflect.engine()

    def plural(self, noun: str, quantity: int) -> str:
        return self._engine.plural_noun(noun, quantity)


# ─── CLDR Plural Categories ─────────────────────────────────────────

# noun → {CLDR plural category → form}
RUSSIAN_FORMS: dict[str, dict[str, str]] = {
    "рубль": {"one": "рубль", "few": "рубля", "many": "рублей", "other": "рубля"},
    "копейка": {"one": "копейка", "few": "копейки", "many": "копеек", "other": "копейки"},
    "доллар": {"one": "доллар", "few": "доллара", "many": "долларов", "other": "доллара"},
    "цент": {"one": "цент", "few": "цента", "many": "центов", "other": "цента"},
    "евро": {"one": "евро", "few": "евро", "many": "евро", "other": "евро"},
    "тенге": {"one": "тенге", "few": "тенге", "many": "тенге", "other": "тенге"},
    "тиын": {"one": "тиын", "few": "тиына", "many": "тиынов", "other": "тиына"},
}


class PluralFormsInflector:
    """Picks a noun form by the CLDR plural category of the quantity.

    Args:
        locale: Locale whose plural rules decide the category (e.g. "ru_RU").
        forms:  noun → {category → form}. A missing category falls back to
                "other"; an unknown noun is returned unchanged.
    """

    def __init__(self, locale: str, forms: Mapping[str, Mapping[str, str]]):
        self.locale = Locale.parse(locale.replace("-", "_"))
        self.forms = forms

    def category(self, quantity: int) -> str:
        """CLDR plural category ("one", "few", "many", "other", ...)."""
        return self.locale.plural_form(abs(quantity))

    def plural(self, noun: str, quantity: int) -> str:
        table = self.forms.get(noun)
        if table is None:
            logger.debug("No plural forms for %r in %s, using it as-is", noun, self.locale)
            return noun
        category = self.category(quantity)
        return table.get(category, table.get("other", noun))


# ─── Factory ────────────────────────────────────────────────────────


def default_inflector(locale: str) -> Inflector | None:
    """The bundled inflector for ``locale``'s language, or None if there is none."""
    language = Locale.parse(locale.replace("-", "_")).language
    if language == "en":
        return EnglishInflector()
    if language == "ru":
        return PluralFormsInflector(locale, RUSSIAN_FORMS)
    return None
