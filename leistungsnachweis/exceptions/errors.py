"""Leistungsnachweis feature exceptions."""
from __future__ import annotations


class LeistungsnachweisError(Exception):
    """Base exception for the service record feature."""


class CompanyRequiredError(LeistungsnachweisError):
    """Raised when an export is requested without a selected company."""

    def __init__(self, message: str = "Pflichtfeld: bitte wählen Sie eine Firma") -> None:
        super().__init__(message)


class UnknownFieldError(LeistungsnachweisError, KeyError):
    """Raised when a form field name does not exist on the target record."""


class InvalidPaymentMethodError(LeistungsnachweisError, ValueError):
    """Raised when a payment method outside the fixed option list is chosen."""
