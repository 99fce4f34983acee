"""
FormState – owns the mutable service record behind the form.

All mutations replace frozen model instances (``dataclasses.replace``) so a
``snapshot()`` can be handed to the renderer by value. Observers are notified
after every mutation; the GUI uses this to refresh totals and the
required-field marker.
"""

from __future__ import annotations

import logging
from dataclasses import fields, replace
from decimal import Decimal
from typing import Callable, List, Optional

from core.helpers.number_format import sum_parseable
from ..exceptions.errors import InvalidPaymentMethodError, UnknownFieldError
from ..models.catalog import DEFAULT_PAYMENT_METHOD, PAYMENT_METHODS, CompanyOption, find_company
from ..models.customer import Customer
from ..models.order import Order
from ..models.service_entry import EDITABLE_FIELDS, ServiceEntry
from ..models.service_record import ServiceRecord
from ..models.signer_role import SignerRole

logger = logging.getLogger(__name__)

Observer = Callable[["FormState"], None]


def _field_names(cls: type) -> set[str]:
    return {f.name for f in fields(cls)}


class FormState:
    """Form State Holder for customer, order, payment, services and signatures."""

    def __init__(self, *, customer: Optional[Customer] = None, order: Optional[Order] = None) -> None:
        self._customer = customer or Customer()
        self._order = order or Order()
        self._payment_method = DEFAULT_PAYMENT_METHOD
        self._services: List[ServiceEntry] = [ServiceEntry()]
        self._signatures: dict[SignerRole, Optional[bytes]] = {
            SignerRole.TECHNICIAN: None,
            SignerRole.CUSTOMER: None,
        }
        self._show_second_technician = bool(self._order.technician_two)
        self._company_touched = False
        self._observers: List[Observer] = []

    # ------------------------------------------------------------------ observers
    def subscribe(self, callback: Observer) -> None:
        if callback not in self._observers:
            self._observers.append(callback)

    def unsubscribe(self, callback: Observer) -> None:
        try:
            self._observers.remove(callback)
        except ValueError:
            pass

    def _notify(self) -> None:
        for cb in list(self._observers):
            cb(self)

    # ------------------------------------------------------------------ read access
    @property
    def customer(self) -> Customer:
        return self._customer

    @property
    def order(self) -> Order:
        return self._order

    @property
    def payment_method(self) -> str:
        return self._payment_method

    @property
    def services(self) -> tuple[ServiceEntry, ...]:
        return tuple(self._services)

    @property
    def show_second_technician(self) -> bool:
        return self._show_second_technician

    @property
    def company_touched(self) -> bool:
        return self._company_touched

    @property
    def company_error(self) -> bool:
        """Visible validation marker: company field was touched but is still empty."""
        return self._company_touched and not self._order.company

    def signature(self, role: SignerRole) -> Optional[bytes]:
        return self._signatures[SignerRole(role)]

    # Derived values are recomputed from the entry list on every read.
    @property
    def total_hours(self) -> Decimal:
        return sum_parseable(s.hours for s in self._services)

    @property
    def total_amount(self) -> Decimal:
        return sum_parseable(s.rate for s in self._services)

    @property
    def company_option(self) -> Optional[CompanyOption]:
        return find_company(self._order.company)

    @property
    def company_label(self) -> str:
        option = self.company_option
        return option.label if option else ""

    @property
    def company_address(self) -> str:
        option = self.company_option
        return option.address if option else ""

    # ------------------------------------------------------------------ customer / order
    def update_customer(self, field: str, value: str) -> None:
        if field not in _field_names(Customer):
            raise UnknownFieldError(f"Unknown customer field '{field}'")
        self._customer = replace(self._customer, **{field: value})
        self._notify()

    def update_order(self, field: str, value: str) -> None:
        if field not in _field_names(Order):
            raise UnknownFieldError(f"Unknown order field '{field}'")
        self._order = replace(self._order, **{field: value})
        self._notify()

    def mark_company_touched(self) -> None:
        if not self._company_touched:
            self._company_touched = True
            self._notify()

    def add_second_technician(self) -> None:
        self._show_second_technician = True
        self._notify()

    def remove_second_technician(self) -> None:
        self._show_second_technician = False
        self._order = replace(self._order, technician_two="")
        self._notify()

    def set_payment_method(self, method: str) -> None:
        if method not in PAYMENT_METHODS:
            raise InvalidPaymentMethodError(f"Unknown payment method '{method}'")
        self._payment_method = method
        self._notify()

    # ------------------------------------------------------------------ services
    def update_service(self, entry_id: str, field: str, value: str) -> None:
        if field not in EDITABLE_FIELDS:
            raise UnknownFieldError(f"Unknown service field '{field}'")
        for idx, entry in enumerate(self._services):
            if entry.id == entry_id:
                self._services[idx] = replace(entry, **{field: value})
                self._notify()
                return
        logger.debug("update_service: no entry with id %s", entry_id)

    def add_service(self) -> ServiceEntry:
        entry = ServiceEntry()
        self._services.append(entry)
        self._notify()
        return entry

    def remove_service(self, entry_id: str) -> None:
        """Removes an entry; the last remaining entry is kept."""
        if len(self._services) == 1:
            return
        remaining = [s for s in self._services if s.id != entry_id]
        if len(remaining) != len(self._services):
            self._services = remaining
            self._notify()

    # ------------------------------------------------------------------ signatures
    def set_signature(self, role: SignerRole, png: Optional[bytes]) -> None:
        self._signatures[SignerRole(role)] = png or None
        self._notify()

    # ------------------------------------------------------------------ snapshot
    def snapshot(self) -> ServiceRecord:
        return ServiceRecord(
            customer=self._customer,
            order=self._order,
            payment_method=self._payment_method,
            services=tuple(self._services),
            technician_signature=self._signatures[SignerRole.TECHNICIAN],
            customer_signature=self._signatures[SignerRole.CUSTOMER],
        )
