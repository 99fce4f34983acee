from __future__ import annotations

from enum import Enum


class SignerRole(str, Enum):
    """Who signs the service record."""
    TECHNICIAN = "technician"
    CUSTOMER = "customer"
