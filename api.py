"""
Currency Formatter — FastAPI Server
===================================

HTTP access to symbolic formatting and spelled-out amounts.

Endpoints:
    POST /format            Render an amount as "$1,234.56"
    POST /spell             Render an amount as words with agreeing unit names
    GET  /health            Health check / readiness probe

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production

Docs:
    http://localhost:8000/docs             # Swagger UI (auto-generated)
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Optional

from babel import UnknownLocaleError
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from currency_formatter import __version__
from currency_formatter.exceptions import CurrencyFormatterError
from currency_formatter.formatter import CurrencyFormatter
from currency_formatter.inflection import Inflector, default_inflector
from currency_formatter.models import RoundingMode, SpellMode
from currency_formatter.settings import get_default_locale

logger = logging.getLogger(__name__)


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="Currency Formatter API",
    description=(
        "Locale-aware currency formatting and spelled-out amounts with "
        "grammatically agreeing unit names (invoices, checks, voice output)."
    ),
    version=__version__,
)


# ─── Request / Response Schemas ─────────────────────────────────────


class FormattingOptions(BaseModel):
    """Formatter settings shared by both endpoints; omitted fields keep defaults."""

    amount: Decimal = Field(..., allow_inf_nan=False, description="The monetary amount.")
    locale: Optional[str] = Field(default=None, description="e.g. en_US, ru_RU")
    currency_code: Optional[str] = None
    fraction_digits: Optional[int] = None
    min_fraction_digits: Optional[int] = None
    max_fraction_digits: Optional[int] = None
    rounding_mode: Optional[RoundingMode] = None


class FormatRequest(FormattingOptions):
    """Request body for the /format endpoint."""

    group_size: Optional[int] = None
    decimal_separator: Optional[str] = None
    group_separator: Optional[str] = None
    currency_symbol: Optional[str] = None

    model_config = {"json_schema_extra": {"example": {
        "amount": "543756765",
        "locale": "en_US",
        "group_size": 2,
    }}}


class SpellRequest(FormattingOptions):
    """Request body for the /spell endpoint."""

    mode: SpellMode = SpellMode.ALL
    integer_unit_name: str = ""
    fraction_unit_name: str = ""

    model_config = {"json_schema_extra": {"example": {
        "amount": "1.05",
        "locale": "en_US",
        "mode": "FRACTION_AS_NUMBER",
        "integer_unit_name": "ruble",
        "fraction_unit_name": "kopeck",
    }}}


class FormatResponse(BaseModel):
    locale: str
    formatted: str


class SpellResponse(BaseModel):
    locale: str
    mode: SpellMode
    spelled: str
    integer_part: int
    fraction: str = Field(description="Fraction digits exactly as decomposed, e.g. '05'")


class HealthResponse(BaseModel):
    status: str
    version: str
    default_locale: str


# ─── Helpers ─────────────────────────────────────────────────────────


def _http_error(exc: CurrencyFormatterError) -> HTTPException:
    return HTTPException(
        status_code=422,
        detail={"code": exc.code, "message": exc.message, "details": exc.details},
    )


def _build_formatter(
    options: FormattingOptions, inflector: Inflector | None = None
) -> CurrencyFormatter:
    """Construct a formatter and apply every option the caller supplied."""
    formatter = CurrencyFormatter(
        options.locale, inflector, currency_code=options.currency_code
    )
    if options.fraction_digits is not None:
        formatter.set_fraction_digits(options.fraction_digits)
    if options.min_fraction_digits is not None:
        formatter.set_min_fraction_digits(options.min_fraction_digits)
    if options.max_fraction_digits is not None:
        formatter.set_max_fraction_digits(options.max_fraction_digits)
    if options.rounding_mode is not None:
        formatter.set_rounding_mode(options.rounding_mode)
    return formatter


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/format",
    summary="Format an amount with the locale's currency pattern",
    tags=["Formatting"],
    responses={422: {"description": "Invalid formatter configuration"}},
)
def format_amount(request: FormatRequest) -> FormatResponse:
    """Render the amount with separators, grouping and currency symbol."""
    try:
        formatter = _build_formatter(request)
        if request.group_size is not None:
            formatter.set_group_size(request.group_size)
        if request.decimal_separator is not None:
            formatter.set_decimal_separator(request.decimal_separator)
        if request.group_separator is not None:
            formatter.set_group_separator(request.group_separator)
        if request.currency_symbol is not None:
            formatter.set_currency_symbol(request.currency_symbol)
        return FormatResponse(locale=formatter.locale, formatted=formatter.format(request.amount))
    except CurrencyFormatterError as exc:
        raise _http_error(exc) from exc


@app.post(
    "/spell",
    summary="Spell an amount out in words",
    tags=["Formatting"],
    responses={422: {"description": "Invalid configuration, mode, or no inflector for locale"}},
)
def spell_amount(request: SpellRequest) -> SpellResponse:
    """Spell the amount with unit names agreeing with each part.

    Uses the bundled inflector for the locale's language (English, Russian);
    other languages answer 422 with code **INFLECTOR_NOT_CONFIGURED**.
    """
    try:
        locale = request.locale or get_default_locale()
        formatter = _build_formatter(request, default_inflector(locale))
        formatter.set_integer_unit_name(request.integer_unit_name)
        formatter.set_fraction_unit_name(request.fraction_unit_name)

        amount = formatter.decompose(request.amount)
        spelled = formatter.spell(request.amount, request.mode)
    except CurrencyFormatterError as exc:
        raise _http_error(exc) from exc
    except (UnknownLocaleError, ValueError) as exc:
        # default_inflector() parses the raw locale before the formatter validates it
        raise HTTPException(
            status_code=422,
            detail={
                "code": "INVALID_CONFIGURATION",
                "message": str(exc),
                "details": {"locale": request.locale},
            },
        ) from exc

    return SpellResponse(
        locale=formatter.locale,
        mode=request.mode,
        spelled=spelled,
        integer_part=amount.integer_part,
        fraction=amount.fraction,
    )


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
)
def health_check() -> HealthResponse:
    """Returns service status and configuration info."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        default_locale=get_default_locale(),
    )
