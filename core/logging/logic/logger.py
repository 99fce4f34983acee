"""
core/logging/logic/logger.py
============================

Thread-sicherer Singleton-Logger für Feature-/Event-Einträge.

Jeder Eintrag wird an das Standard-``logging`` weitergereicht
(Logger-Name ``leistungsnachweis.<feature>``) und zusätzlich in einem
begrenzten In-Memory-Puffer gehalten, über den sich die letzten
Ereignisse abfragen lassen (fetch_logs / query_logs).
"""

from __future__ import annotations

import logging
import itertools
import threading
from collections import deque
from datetime import datetime, timezone
from pathlib import Path
from typing import Deque, List, Optional

from core.logging.models.log_entry import LogEntry

ROOT_LOGGER_NAME = "leistungsnachweis"
_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def configure_logging(level: str = "INFO", log_file: str | Path | None = None) -> logging.Logger:
    """
    Installiert Stream- und optional File-Handler am Root-Logger des Tools.
    Mehrfachaufrufe ersetzen die Handler statt sie zu duplizieren.
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(_FORMAT)
    stream = logging.StreamHandler()
    stream.setFormatter(formatter)
    root.addHandler(stream)

    if log_file:
        path = Path(log_file).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(path, encoding="utf-8")
        fh.setFormatter(formatter)
        root.addHandler(fh)
    return root


# --------------------------------------------------------------------------- #
#  Singleton-Klasse                                                           #
# --------------------------------------------------------------------------- #
class Logger:
    """Thread-sicherer Singleton-Logger mit Ringpuffer."""

    MAX_ENTRIES = 500

    _instance: "Logger | None" = None
    _instance_lock = threading.Lock()

    def __new__(cls) -> "Logger":  # noqa: D401
        if cls._instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
                    cls._instance._initialized = False  # type: ignore[attr-defined]
        return cls._instance  # type: ignore[return-value]

    def __init__(self) -> None:
        if getattr(self, "_initialized", False):
            return
        self._initialized = True

        self._lock = threading.Lock()
        self.entries: Deque[LogEntry] = deque(maxlen=self.MAX_ENTRIES)
        self._ids = itertools.count(1)

    # ------------------------------------------------------------------ #
    #  Öffentliche API: log                                              #
    # ------------------------------------------------------------------ #
    def log(
        self,
        feature: str,
        event: str,
        *,
        level: str = "INFO",
        reference_id: Optional[str] = None,
        message: Optional[str] = None,
    ) -> LogEntry:
        """Schreibt einen Eintrag und gibt ihn zurück."""
        entry = LogEntry(
            id=None,
            timestamp=datetime.now(timezone.utc),
            log_level=level.upper(),
            feature=feature,
            event=event,
            reference_id=reference_id,
            message=message,
        )
        with self._lock:
            entry.id = next(self._ids)
            self.entries.append(entry)

        std = logging.getLogger(f"{ROOT_LOGGER_NAME}.{feature.lower()}")
        text = f"[{event}] {message}" if message else f"[{event}]"
        if reference_id:
            text += f" (ref={reference_id})"
        std.log(getattr(logging, entry.log_level, logging.INFO), text)
        return entry

    # ------------------------------------------------------------------ #
    #  Fetch / Query / Clear                                             #
    # ------------------------------------------------------------------ #
    def fetch_logs(self, limit: int = 100) -> List[LogEntry]:
        with self._lock:
            return list(reversed(self.entries))[:limit]

    def query_logs(
        self,
        *,
        feature: Optional[str] = None,
        event: Optional[str] = None,
        level: Optional[str] = None,
        limit: int = 1_000,
    ) -> List[LogEntry]:
        with self._lock:
            rows = list(reversed(self.entries))
        if feature is not None:
            rows = [e for e in rows if e.feature == feature]
        if event is not None:
            rows = [e for e in rows if e.event == event]
        if level is not None:
            rows = [e for e in rows if e.log_level == level.upper()]
        return rows[:limit]

    def clear_logs(self) -> None:
        with self._lock:
            self.entries.clear()


# --------------------------------------------------------------------------- #
#  Globale Instanz                                                            #
# --------------------------------------------------------------------------- #
logger: Logger = Logger()
