from __future__ import annotations

from dataclasses import dataclass, field

from core.helpers.date_time_helper import current_year_str


@dataclass(frozen=True)
class Order:
    """
    Auftragsdaten.

    Attributes:
        company (str): value of a CompanyOption, empty until selected.
    """

    order_number: str = ""
    technician: str = ""
    technician_two: str = ""
    month: str = ""
    year: str = field(default_factory=current_year_str)
    company: str = ""
