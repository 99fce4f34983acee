"""
ServiceTable (Tkinter)
----------------------
Editable list of service entries with add/delete buttons and live totals.
Every keystroke is written straight into the FormState.
"""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Dict, List

from core.helpers.number_format import format_currency, format_hours
from core.i18n.translation_manager import T
from ..logic.form_state import FormState
from ..models.service_entry import ServiceEntry

_COLUMNS = (
    ("date", "service.date", "Datum", 12),
    ("description", "service.description", "Beschreibung der Leistung", 40),
    ("hours", "service.hours", "Stunden", 8),
    ("rate", "service.rate", "Preis (€)", 10),
)


class ServiceTable(ttk.Frame):
    def __init__(self, parent: tk.Misc, *, state: FormState) -> None:
        super().__init__(parent)
        self._state = state
        self._rows: Dict[str, List[tk.Widget]] = {}
        self._row_ids: List[str] = []

        self._body = ttk.Frame(self)
        self._body.grid(row=0, column=0, sticky="nsew")
        self.columnconfigure(0, weight=1)
        self._body.columnconfigure(1, weight=1)

        for col, (_, key, default, _) in enumerate(_COLUMNS):
            ttk.Label(self._body, text=T(key, default), font=("Segoe UI", 9, "bold"))\
                .grid(row=0, column=col, sticky="w", padx=4, pady=(0, 4))

        footer = ttk.Frame(self)
        footer.grid(row=1, column=0, sticky="ew", pady=(8, 0))
        footer.columnconfigure(1, weight=1)
        ttk.Button(footer, text=T("service.add", "＋ Weitere Leistung hinzufügen"),
                   command=self._state.add_service).grid(row=0, column=0, sticky="w")

        self._hours_var = tk.StringVar()
        self._amount_var = tk.StringVar()
        totals = ttk.Frame(footer)
        totals.grid(row=0, column=2, sticky="e")
        ttk.Label(totals, text=T("service.total_hours", "Gesamtstunden:")).grid(row=0, column=0, sticky="e")
        ttk.Label(totals, textvariable=self._hours_var, font=("Segoe UI", 10, "bold"))\
            .grid(row=0, column=1, sticky="e", padx=(4, 12))
        ttk.Label(totals, text=T("service.total_amount", "Gesamtpreis:")).grid(row=0, column=2, sticky="e")
        ttk.Label(totals, textvariable=self._amount_var, font=("Segoe UI", 10, "bold"))\
            .grid(row=0, column=3, sticky="e", padx=(4, 0))

        self.refresh()

    # --- rows ---------------------------------------------------------------

    def _build_row(self, entry: ServiceEntry) -> List[tk.Widget]:
        widgets: List[tk.Widget] = []
        for field, _, _, width in _COLUMNS:
            var = tk.StringVar(value=getattr(entry, field))
            ent = ttk.Entry(self._body, textvariable=var, width=width)
            var.trace_add("write", lambda *_a, f=field, v=var, eid=entry.id:
                          self._state.update_service(eid, f, v.get()))
            widgets.append(ent)
        btn = ttk.Button(self._body, text="✕", width=3,
                         command=lambda eid=entry.id: self._state.remove_service(eid))
        widgets.append(btn)
        return widgets

    def refresh(self) -> None:
        """Re-syncs rows with the state (only on add/remove) and updates totals."""
        ids = [s.id for s in self._state.services]
        if ids != self._row_ids:
            for eid in list(self._rows):
                if eid not in ids:
                    for w in self._rows.pop(eid):
                        w.destroy()
            for entry in self._state.services:
                if entry.id not in self._rows:
                    self._rows[entry.id] = self._build_row(entry)
            for row, eid in enumerate(ids, start=1):
                for col, w in enumerate(self._rows[eid]):
                    w.grid(row=row, column=col, sticky="ew", padx=4, pady=2)
            self._row_ids = ids

        self._hours_var.set(format_hours(self._state.total_hours))
        self._amount_var.set(format_currency(self._state.total_amount))
