from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Customer:
    """Kundendaten, alles Freitext."""

    full_name: str = ""
    email: str = ""
    street: str = ""
    city: str = ""
    phone: str = ""
