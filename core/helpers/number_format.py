"""
number_format.py

Lenient parsing of user-typed decimal strings and German (de-DE) formatting
for hours and Euro amounts.

Parsing follows the browser ``parseFloat`` habit of reading the leading
numeric prefix ("2h" -> 2, "abc" -> None). A single decimal comma is accepted
as decimal point when no dot is present ("10,50" -> 10.50).
"""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext
from typing import Iterable, Optional

_NUMBER_PREFIX = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")
_CENT = Decimal("0.01")

PLACEHOLDER = "-"


def parse_decimal(raw: Optional[str]) -> Optional[Decimal]:
    """
    Returns the finite Decimal at the start of ``raw`` or None.

    None, empty strings, "NaN", "Infinity" and non-numeric text yield None.
    """
    if raw is None:
        return None
    text = str(raw).strip()
    if not text:
        return None
    if "," in text and "." not in text:
        text = text.replace(",", ".", 1)
    match = _NUMBER_PREFIX.match(text)
    if not match:
        return None
    try:
        value = Decimal(match.group(0))
    except InvalidOperation:
        return None
    if not value.is_finite():
        return None
    return value


def _to_cents(value: Decimal) -> Decimal:
    # quantize needs every digit up to the cent position to fit the context precision
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        return value.quantize(_CENT, rounding=ROUND_HALF_UP)


def sum_parseable(values: Iterable[Optional[str]]) -> Decimal:
    """Sum of all values that parse; the rest contribute nothing."""
    total = Decimal("0")
    for raw in values:
        value = parse_decimal(raw)
        if value is not None:
            total += value
    return total


def format_hours(value: Decimal | float) -> str:
    """Two decimals with a dot, e.g. ``2.00``."""
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return f"{_to_cents(value):.2f}"


def format_currency(amount: Decimal | float, currency: str = "€") -> str:
    """
    Deutsche Formatierung: ``1.234,56 €``.
    """
    if not isinstance(amount, Decimal):
        amount = Decimal(str(amount))
    amount = _to_cents(amount)

    sign = "-" if amount < 0 else ""
    text = f"{abs(amount):,.2f}"  # 1,234.56
    text = text.replace(",", "\x00").replace(".", ",").replace("\x00", ".")
    return f"{sign}{text} {currency}"


def hours_or_placeholder(raw: Optional[str]) -> str:
    value = parse_decimal(raw)
    return format_hours(value) if value is not None else PLACEHOLDER


def currency_or_placeholder(raw: Optional[str]) -> str:
    value = parse_decimal(raw)
    return format_currency(value) if value is not None else PLACEHOLDER
