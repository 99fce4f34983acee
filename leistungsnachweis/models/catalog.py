"""
Static option lists for the form: selectable companies and payment methods.
Both are read-only for the state holder and the renderer.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class CompanyOption:
    label: str
    value: str
    address: str


COMPANY_OPTIONS: Tuple[CompanyOption, ...] = (
    CompanyOption(
        label="IT Systemhaus Alsleben GmbH",
        value="alsleben",
        address="Treskowallee 114, 10319 Berlin",
    ),
    CompanyOption(
        label="Talk & Phone GmbH",
        value="talk-phone",
        address="Treskowallee 114, 10319 Berlin",
    ),
)

PAYMENT_METHODS: Tuple[str, ...] = ("Barzahlung", "Kartenzahlung", "Rechnung")
DEFAULT_PAYMENT_METHOD = PAYMENT_METHODS[0]


def find_company(value: str) -> Optional[CompanyOption]:
    for option in COMPANY_OPTIONS:
        if option.value == value:
            return option
    return None


def find_company_by_label(label: str) -> Optional[CompanyOption]:
    for option in COMPANY_OPTIONS:
        if option.label == label:
            return option
    return None
