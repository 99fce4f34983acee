# signature/gui/signature_pad.py
from __future__ import annotations
import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional

from core.config.config_service import config_service
from core.i18n.translation_manager import T
from ..logic.signature_surface import SignatureSurface
from ..models.signature_enums import CaptureState
from ..models.stroke_style import StrokeStyle
from .theme import ttk_theme_provider


class SignaturePad(ttk.Frame):
    """
    Signature card: title, helper text, drawing canvas and a reset button.

    The Tk canvas only mirrors the strokes for display; the raster that gets
    exported lives in a SignatureSurface. ``on_change`` receives PNG bytes
    after every finished stroke and None after "Zurücksetzen".
    """
    CANVAS_W = 360
    CANVAS_H = 160

    def __init__(self, parent: tk.Misc, *, label: str, helper: Optional[str] = None,
                 on_change: Optional[Callable[[Optional[bytes]], None]] = None, **kwargs) -> None:
        super().__init__(parent, **kwargs)
        self._theme = ttk_theme_provider(self)
        self._stroke_width = config_service.signature.stroke_width
        self._last: Optional[tuple[int, int]] = None

        self.columnconfigure(0, weight=1)
        ttk.Label(self, text=label, font=("Segoe UI", 11, "bold")).grid(row=0, column=0, sticky="w")
        if helper:
            ttk.Label(self, text=helper, wraplength=self.CANVAS_W).grid(row=1, column=0, sticky="w")

        colors = self._theme()
        self.canvas = tk.Canvas(
            self, width=self.CANVAS_W, height=self.CANVAS_H, bg=colors.background,
            highlightthickness=1, highlightbackground="#888", cursor="pencil"
        )
        self.canvas.grid(row=2, column=0, sticky="nsew", pady=4)
        self.rowconfigure(2, weight=1)

        self.surface = SignatureSurface(
            self.CANVAS_W, self.CANVAS_H,
            pixel_ratio=self._pixel_ratio(),
            style=StrokeStyle(width=self._stroke_width),
            theme=self._theme,
            on_change=on_change,
        )

        ttk.Button(self, text=T("signature.clear", "Zurücksetzen"), command=self.clear)\
            .grid(row=3, column=0, sticky="e")
        ttk.Label(self, text=T("signature.hint",
                               "Unterschreiben Sie mit der Maus oder per Berührung auf dem Touchscreen"),
                  foreground="#666").grid(row=4, column=0, sticky="w")

        self.canvas.bind("<ButtonPress-1>", self._on_down)
        self.canvas.bind("<B1-Motion>", self._on_move)
        self.canvas.bind("<ButtonRelease-1>", self._on_up)
        self.canvas.bind("<Leave>", self._on_leave)
        self.canvas.bind("<Configure>", self._on_configure)

    def _pixel_ratio(self) -> float:
        try:
            return max(1.0, float(self.winfo_fpixels("1i")) / 96.0)
        except tk.TclError:
            return 1.0

    # Canvas handlers
    def _on_down(self, e):
        self._last = (e.x, e.y)
        self.surface.pointer_down(e.x, e.y)

    def _on_move(self, e):
        if self.surface.state is not CaptureState.DRAWING or self._last is None:
            return
        x0, y0 = self._last
        self.canvas.create_line(
            x0, y0, e.x, e.y,
            fill=self._theme().stroke,
            width=self._stroke_width,
            capstyle="round",
            joinstyle="round",
        )
        self._last = (e.x, e.y)
        self.surface.pointer_move(e.x, e.y)

    def _on_up(self, e):
        self._last = None
        self.surface.pointer_up()

    def _on_leave(self, e):
        self._last = None
        self.surface.pointer_leave()

    def _on_configure(self, e):
        if (e.width, e.height) == self.surface.size:
            return
        self.canvas.delete("all")
        self.canvas.configure(bg=self._theme().background)
        self.surface.resize(e.width, e.height, self._pixel_ratio())

    # Actions
    def clear(self) -> None:
        self._last = None
        self.canvas.delete("all")
        self.canvas.configure(bg=self._theme().background)
        self.surface.clear()
