"""
LeistungsnachweisView (Tkinter)
-------------------------------
The whole form on one scrollable page: customer data with payment method,
order data with company selection, service entries, two signature pads and
the PDF export button.
"""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk, messagebox
from typing import Callable, Optional

from core.i18n.translation_manager import T
from core.logging.logic.logger import logger
from signature.gui.signature_pad import SignaturePad
from ..exceptions.errors import CompanyRequiredError
from ..logic.export_service import ExportService
from ..logic.form_state import FormState
from ..models.catalog import COMPANY_OPTIONS, PAYMENT_METHODS, find_company, find_company_by_label
from ..models.signer_role import SignerRole
from .service_table import ServiceTable

_CUSTOMER_FIELDS = (
    ("full_name", "customer.full_name", "Vollständiger Name"),
    ("email", "customer.email", "E-Mail-Adresse"),
    ("street", "customer.street", "Straße und Hausnummer"),
    ("city", "customer.city", "PLZ und Ort"),
    ("phone", "customer.phone", "Telefonnummer"),
)

_ERROR_FG = "#b91c1c"
_HELPER_FG = "#666666"


class LeistungsnachweisView(ttk.Frame):
    def __init__(
        self,
        parent: tk.Misc,
        *,
        state: Optional[FormState] = None,
        export_service: Optional[ExportService] = None,
        on_status: Optional[Callable[[str], None]] = None,
    ) -> None:
        super().__init__(parent)
        self._state = state or FormState()
        self._export = export_service or ExportService()
        self._on_status = on_status
        self._vars: list[tk.StringVar] = []

        self.columnconfigure(0, weight=1)
        self._build_customer_card(row=0)
        self._build_order_card(row=1)
        self._build_services_card(row=2)
        self._build_signatures(row=3)

        ttk.Button(self, text=T("export.button", "Als PDF exportieren"), command=self._on_export)\
            .grid(row=4, column=0, sticky="e", padx=12, pady=12)

        self._state.subscribe(self._on_state_changed)
        self.bind("<Destroy>", lambda e: self._state.unsubscribe(self._on_state_changed)
                  if e.widget is self else None)
        self._on_state_changed(self._state)

    # --- helpers ------------------------------------------------------------

    def _card(self, row: int, eyebrow_key: str, eyebrow: str, title_key: str, title: str) -> ttk.LabelFrame:
        card = ttk.LabelFrame(self, text=T(eyebrow_key, eyebrow))
        card.grid(row=row, column=0, sticky="ew", padx=12, pady=6)
        ttk.Label(card, text=T(title_key, title), font=("Segoe UI", 12, "bold"))\
            .grid(row=0, column=0, columnspan=4, sticky="w", padx=8, pady=(4, 8))
        card.columnconfigure(1, weight=1)
        card.columnconfigure(3, weight=1)
        return card

    def _entry(self, parent: tk.Misc, row: int, col: int, label: str, value: str,
               on_write: Callable[[str], None]) -> tk.StringVar:
        ttk.Label(parent, text=label).grid(row=row, column=col, sticky="w", padx=8, pady=3)
        var = tk.StringVar(value=value)
        ent = ttk.Entry(parent, textvariable=var)
        ent.grid(row=row, column=col + 1, sticky="ew", padx=8, pady=3)
        var.trace_add("write", lambda *_a: on_write(var.get()))
        self._vars.append(var)
        return var

    # --- cards --------------------------------------------------------------

    def _build_customer_card(self, row: int) -> None:
        card = self._card(row, "customer.eyebrow", "Kundendaten",
                          "customer.title", "Informationen zum Kunden")
        for i, (field, key, default) in enumerate(_CUSTOMER_FIELDS):
            self._entry(card, 1 + i // 2, (i % 2) * 2, T(key, default), getattr(self._state.customer, field),
                        lambda v, f=field: self._state.update_customer(f, v))

        pay = ttk.Frame(card)
        pay.grid(row=4, column=0, columnspan=4, sticky="w", padx=8, pady=(8, 6))
        ttk.Label(pay, text=T("payment.label", "Zahlungsart")).pack(side="left", padx=(0, 8))
        self._payment_var = tk.StringVar(value=self._state.payment_method)
        for option in PAYMENT_METHODS:
            ttk.Radiobutton(pay, text=option, value=option, variable=self._payment_var,
                            command=lambda: self._state.set_payment_method(self._payment_var.get()))\
                .pack(side="left", padx=4)

    def _build_order_card(self, row: int) -> None:
        card = self._card(row, "order.eyebrow", "Auftragsinformationen",
                          "order.title", "Auftragsnummer und Zeitraum")
        order = self._state.order
        self._entry(card, 1, 0, T("order.order_number", "Auftragsnummer"), order.order_number,
                    lambda v: self._state.update_order("order_number", v))
        self._entry(card, 1, 2, T("order.technician", "Name des Technikers"), order.technician,
                    lambda v: self._state.update_order("technician", v))

        # Optional second technician
        self._second_frame = ttk.Frame(card)
        self._second_frame.columnconfigure(1, weight=1)
        self._second_var = self._entry(self._second_frame, 0, 0, T("order.technician_two", "Zweiter Techniker"),
                                         order.technician_two,
                                         lambda v: self._state.update_order("technician_two", v))
        ttk.Button(self._second_frame, text=T("order.remove_second", "Entfernen"),
                   command=self._remove_second_technician).grid(row=0, column=2, padx=4)
        self._add_second_btn = ttk.Button(card, text=T("order.add_second", "+ Zweiten Techniker hinzufügen"),
                                          command=self._state.add_second_technician)

        self._entry(card, 3, 0, T("order.month", "Monat"), order.month,
                    lambda v: self._state.update_order("month", v))
        self._entry(card, 3, 2, T("order.year", "Jahr"), order.year,
                    lambda v: self._state.update_order("year", v))

        # Company (required)
        ttk.Label(card, text=T("order.company", "Firma") + " *").grid(row=4, column=0, sticky="w", padx=8, pady=3)
        current = find_company(order.company)
        self._company_var = tk.StringVar(value=current.label if current else "")
        self._company_box = ttk.Combobox(card, textvariable=self._company_var, state="readonly",
                                         values=[c.label for c in COMPANY_OPTIONS])
        self._company_box.grid(row=4, column=1, columnspan=3, sticky="ew", padx=8, pady=3)
        self._company_box.bind("<<ComboboxSelected>>", self._on_company_selected)
        self._company_box.bind("<FocusOut>", lambda e: self._state.mark_company_touched())
        self._company_helper = ttk.Label(card)
        self._company_helper.grid(row=5, column=1, columnspan=3, sticky="w", padx=8, pady=(0, 6))

    def _build_services_card(self, row: int) -> None:
        card = self._card(row, "services.eyebrow", "Erbrachte Leistungen",
                          "services.title", "Tragen Sie hier die einzelnen Leistungspositionen ein")
        self._table = ServiceTable(card, state=self._state)
        self._table.grid(row=1, column=0, columnspan=4, sticky="ew", padx=8, pady=(0, 8))

    def _build_signatures(self, row: int) -> None:
        grid = ttk.Frame(self)
        grid.grid(row=row, column=0, sticky="ew", padx=12, pady=6)
        grid.columnconfigure(0, weight=1)
        grid.columnconfigure(1, weight=1)
        self.technician_pad = SignaturePad(
            grid,
            label=T("signature.technician", "Unterschrift Techniker"),
            helper=T("signature.technician_helper",
                     "Unterschrift des Technikers zur Bestätigung der erbrachten Leistungen"),
            on_change=lambda png: self._state.set_signature(SignerRole.TECHNICIAN, png),
        )
        self.technician_pad.grid(row=0, column=0, sticky="nsew", padx=(0, 6))
        self.customer_pad = SignaturePad(
            grid,
            label=T("signature.customer", "Unterschrift Kunde"),
            helper=T("signature.customer_helper",
                     "Unterschrift des Kunden zur Bestätigung der erbrachten Leistungen"),
            on_change=lambda png: self._state.set_signature(SignerRole.CUSTOMER, png),
        )
        self.customer_pad.grid(row=0, column=1, sticky="nsew", padx=(6, 0))

    # --- events -------------------------------------------------------------

    def _remove_second_technician(self) -> None:
        self._second_var.set("")
        self._state.remove_second_technician()

    def _on_company_selected(self, _event=None) -> None:
        option = find_company_by_label(self._company_var.get())
        self._state.update_order("company", option.value if option else "")

    def _on_state_changed(self, state: FormState) -> None:
        if state.show_second_technician:
            self._add_second_btn.grid_remove()
            self._second_frame.grid(row=2, column=0, columnspan=4, sticky="ew")
        else:
            self._second_frame.grid_remove()
            self._add_second_btn.grid(row=2, column=0, columnspan=2, sticky="w", padx=8, pady=3)

        if state.order.company:
            self._company_helper.configure(text=state.company_address, foreground=_HELPER_FG)
        else:
            self._company_helper.configure(
                text=T("order.company_required", "Pflichtfeld – bitte wählen Sie eine Firma"),
                foreground=_ERROR_FG if state.company_error else _HELPER_FG,
            )
        self._table.refresh()

    def _on_export(self) -> None:
        try:
            path = self._export.export(self._state)
        except CompanyRequiredError as exc:
            self._company_box.focus_set()
            messagebox.showwarning(T("export.title", "Export"), str(exc), parent=self)
            return
        except OSError as exc:
            logger.log(feature="Leistungsnachweis", event="ExportFailed", level="ERROR", message=str(exc))
            messagebox.showerror(T("export.title", "Export"), str(exc), parent=self)
            return
        if self._on_status:
            self._on_status(T("export.saved", "PDF gespeichert: ") + str(path))
        messagebox.showinfo(T("export.title", "Export"), T("export.saved", "PDF gespeichert: ") + str(path),
                            parent=self)
