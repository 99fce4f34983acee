"""Lenient decimal parsing and de-DE formatting."""
from __future__ import annotations

from decimal import Decimal

import pytest

from core.helpers.number_format import (
    currency_or_placeholder,
    format_currency,
    format_hours,
    hours_or_placeholder,
    parse_decimal,
    sum_parseable,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("2", Decimal("2")),
        ("10.50", Decimal("10.50")),
        (" 1.25 ", Decimal("1.25")),
        ("10,50", Decimal("10.50")),
        ("2h", Decimal("2")),
        (".5", Decimal("0.5")),
        ("-3", Decimal("-3")),
        ("1e2", Decimal("100")),
    ],
)
def test_parse_decimal_accepts_numbers(raw, expected) -> None:
    assert parse_decimal(raw) == expected


@pytest.mark.parametrize("raw", [None, "", "   ", "abc", "NaN", "Infinity", "-inf", ".", "h2"])
def test_parse_decimal_rejects_non_numbers(raw) -> None:
    assert parse_decimal(raw) is None


def test_sum_parseable_skips_invalid_values() -> None:
    assert sum_parseable(["2", "abc", "", "0.5", None]) == Decimal("2.5")


def test_format_hours_uses_two_decimals() -> None:
    assert format_hours(Decimal("2")) == "2.00"
    assert format_hours(1.005) == "1.01"


def test_format_currency_german_separators() -> None:
    assert format_currency(Decimal("10.50")) == "10,50 €"
    assert format_currency(Decimal("1234.5")) == "1.234,50 €"
    assert format_currency(Decimal("1234567.891")) == "1.234.567,89 €"
    assert format_currency(0) == "0,00 €"
    assert format_currency(Decimal("-5")) == "-5,00 €"


def test_placeholders_for_unparseable_values() -> None:
    assert hours_or_placeholder("abc") == "-"
    assert currency_or_placeholder("") == "-"
    assert hours_or_placeholder("3") == "3.00"
    assert currency_or_placeholder("99.9") == "99,90 €"


def test_formatting_values_beyond_default_precision() -> None:
    rate = parse_decimal("9" * 29)
    assert format_currency(rate).endswith(",00 €")
    assert format_currency(rate).startswith("99.999.999.")
    assert format_hours(parse_decimal("1e30")) == "1" + "0" * 30 + ".00"
    assert currency_or_placeholder("12345678901234567890123456789.995") == (
        "12.345.678.901.234.567.890.123.456.790,00 €"
    )
