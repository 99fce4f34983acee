from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable

from PIL import ImageColor

from core.config.config_service import config_service
from ..models.theme_colors import ThemeColors


def _to_hex(widget: tk.Misc, color: str) -> str | None:
    """Resolves Tk color names ("SystemButtonFace", "white") to #rrggbb."""
    if not color:
        return None
    try:
        ImageColor.getrgb(color)
        return color
    except ValueError:
        pass
    try:
        r, g, b = widget.winfo_rgb(color)
    except tk.TclError:
        return None
    return f"#{r >> 8:02x}{g >> 8:02x}{b >> 8:02x}"


def ttk_theme_provider(widget: tk.Misc) -> Callable[[], ThemeColors]:
    """
    Reads background/foreground from the active ttk style on every call, so a
    theme switch is picked up by the next stroke. Falls back to [Signature]
    colors from the config.
    """
    fallback = config_service.signature

    def provider() -> ThemeColors:
        style = ttk.Style(widget)
        bg = _to_hex(widget, style.lookup("TFrame", "background")) or fallback.background
        fg = _to_hex(widget, style.lookup("TLabel", "foreground")) or fallback.stroke
        return ThemeColors(background=bg, stroke=fg)

    return provider
