from __future__ import annotations

import uuid
from dataclasses import dataclass, field


def _new_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class ServiceEntry:
    """One line item of work performed. Numbers stay strings until rendering."""

    id: str = field(default_factory=_new_id)
    date: str = ""
    description: str = ""
    hours: str = ""
    rate: str = ""


EDITABLE_FIELDS = ("date", "description", "hours", "rate")
