from .catalog import COMPANY_OPTIONS, PAYMENT_METHODS, DEFAULT_PAYMENT_METHOD, CompanyOption, find_company
from .customer import Customer
from .order import Order
from .service_entry import ServiceEntry
from .service_record import ServiceRecord
from .signer_role import SignerRole

__all__ = [
    "COMPANY_OPTIONS",
    "PAYMENT_METHODS",
    "DEFAULT_PAYMENT_METHOD",
    "CompanyOption",
    "find_company",
    "Customer",
    "Order",
    "ServiceEntry",
    "ServiceRecord",
    "SignerRole",
]
