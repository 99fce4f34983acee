"""
Leistungsnachweis feature package.

Provides factory functions the main window calls to create the form view
without hard-coding internals.
"""

from typing import Optional, Callable
import tkinter as tk

from core.i18n.translation_manager import T


def get_feature_name() -> str:
    """Human readable feature name (used e.g. for the window title)."""
    return T("app.title", "Leistungsnachweis Generator")


def create_feature_view(parent: tk.Misc, on_status: Optional[Callable[[str], None]] = None) -> tk.Frame:
    """
    Factory for the form view.

    Args:
        parent (tk.Misc): Tk container to mount the view onto.
        on_status (callable, optional): receives short status messages.

    Returns:
        tk.Frame: A fully wired form with its own FormState.
    """
    from .gui.leistungsnachweis_view import LeistungsnachweisView
    return LeistungsnachweisView(parent, on_status=on_status)
