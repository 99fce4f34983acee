"""Immutable snapshot of the whole form, handed to the document renderer."""
from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional, Tuple

from core.helpers.number_format import sum_parseable
from .catalog import DEFAULT_PAYMENT_METHOD, CompanyOption, find_company
from .customer import Customer
from .order import Order
from .service_entry import ServiceEntry


@dataclass(frozen=True)
class ServiceRecord:
    customer: Customer = field(default_factory=Customer)
    order: Order = field(default_factory=Order)
    payment_method: str = DEFAULT_PAYMENT_METHOD
    services: Tuple[ServiceEntry, ...] = ()
    technician_signature: Optional[bytes] = None
    customer_signature: Optional[bytes] = None

    @property
    def company(self) -> Optional[CompanyOption]:
        return find_company(self.order.company)

    @property
    def total_hours(self) -> Decimal:
        return sum_parseable(s.hours for s in self.services)

    @property
    def total_amount(self) -> Decimal:
        return sum_parseable(s.rate for s in self.services)
