"""
log_entry.py

Dataclass für einen Logeintrag.

• as_dict()    – gibt für Anzeige und Export ein Dict mit
                 - timestamp_utc (ISO-UTC)
                 - timestamp      (lokale Europe/Berlin-Zeit)
                 zurück.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

import core.helpers.date_time_helper as dt


@dataclass
class LogEntry:
    id: Optional[int]
    timestamp: datetime          # immer UTC
    log_level: str
    feature: str
    event: str
    reference_id: Optional[str]
    message: Optional[str]

    # -------------------- Dict für Anzeige / Export ---------------------- #
    def as_dict(self) -> dict:
        utc_iso = self.timestamp.replace(microsecond=0).isoformat()
        local_str = dt.utc_to_local_str(utc_iso)  # z. B. '09.07.2025 17:21:03'
        return {
            "id": self.id,
            "timestamp_utc": utc_iso,
            "timestamp": local_str,
            "log_level": self.log_level,
            "feature": self.feature,
            "event": self.event,
            "reference_id": self.reference_id,
            "message": self.message,
        }
