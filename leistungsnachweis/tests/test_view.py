"""LeistungsnachweisView wiring; skipped when no display is available."""
from __future__ import annotations

import tkinter as tk

import pytest

from leistungsnachweis.logic.form_state import FormState


@pytest.fixture
def root():
    try:
        root = tk.Tk()
    except tk.TclError:
        pytest.skip("no display available")
    root.withdraw()
    yield root
    root.destroy()


def test_removing_second_technician_resets_entry(root, state: FormState) -> None:
    from leistungsnachweis.gui.leistungsnachweis_view import LeistungsnachweisView

    view = LeistungsnachweisView(root, state=state)
    state.add_second_technician()
    view._second_var.set("Erika Muster")
    assert state.order.technician_two == "Erika Muster"

    view._remove_second_technician()
    assert view._second_var.get() == ""
    assert state.order.technician_two == ""
    assert not state.show_second_technician
