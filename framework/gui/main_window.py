"""
framework/gui/main_window.py
============================

Root-Window: scrollbarer Anzeigebereich mit der Formular-View und
Statusleiste unten.
"""

from __future__ import annotations

import tkinter as tk
from tkinter import Frame, Label, X, ttk
from typing import Optional

from core.config.config_service import config_service
import leistungsnachweis


# --------------------------------------------------------------------------- #
#  MainWindow                                                                 #
# --------------------------------------------------------------------------- #
class MainWindow(tk.Tk):
    """Hauptfenster der Anwendung."""

    def __init__(self) -> None:
        super().__init__()

        self.title(leistungsnachweis.get_feature_name())
        self.geometry("1000x800")
        self.active_view: Optional[tk.Frame] = None

        # ---------- Frames ---------------------------------------------
        self.status_bar = Label(self, text=config_service.general.app_name, anchor="w", bg="#eeeeee")
        self.status_bar.pack(side="bottom", fill=X)

        container = Frame(self)
        container.pack(fill="both", expand=True)
        self._canvas = tk.Canvas(container, highlightthickness=0)
        scrollbar = ttk.Scrollbar(container, orient="vertical", command=self._canvas.yview)
        self._canvas.configure(yscrollcommand=scrollbar.set)
        scrollbar.pack(side="right", fill="y")
        self._canvas.pack(side="left", fill="both", expand=True)

        self.display_area = ttk.Frame(self._canvas)
        self._window_id = self._canvas.create_window((0, 0), window=self.display_area, anchor="nw")
        self.display_area.bind(
            "<Configure>", lambda e: self._canvas.configure(scrollregion=self._canvas.bbox("all"))
        )
        self._canvas.bind("<Configure>", lambda e: self._canvas.itemconfigure(self._window_id, width=e.width))
        self.bind_all("<MouseWheel>", self._on_mousewheel)

        self.load_view()

    # ------------------------------------------------------------------ #
    # View-Handling                                                      #
    # ------------------------------------------------------------------ #
    def clear_display_area(self) -> None:
        for widget in self.display_area.winfo_children():
            widget.destroy()
        self.active_view = None

    def load_view(self) -> None:
        self.clear_display_area()
        self.active_view = leistungsnachweis.create_feature_view(self.display_area, on_status=self.set_status)
        self.active_view.pack(fill="both", expand=True)

    # ------------------------------------------------------------------ #
    # Sonstige Helfer                                                    #
    # ------------------------------------------------------------------ #
    def _on_mousewheel(self, event) -> None:
        self._canvas.yview_scroll(int(-event.delta / 120) or (-1 if event.delta > 0 else 1), "units")

    def set_status(self, message: str) -> None:
        self.status_bar.config(text=message)


# --------------------------------------------------------------------------- #
# Stand-alone-Start                                                           #
# --------------------------------------------------------------------------- #
if __name__ == "__main__":
    MainWindow().mainloop()
