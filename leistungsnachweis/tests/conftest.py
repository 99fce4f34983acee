from __future__ import annotations

import io

import pytest
from PIL import Image, ImageDraw

from leistungsnachweis.logic.form_state import FormState


@pytest.fixture
def state() -> FormState:
    return FormState()


@pytest.fixture
def filled_state() -> FormState:
    s = FormState()
    s.update_customer("full_name", "Max Mustermann")
    s.update_customer("street", "Musterstraße 123")
    s.update_customer("city", "10115 Berlin")
    s.update_customer("phone", "+49 30 12345678")
    s.update_customer("email", "max@beispiel.de")
    s.update_order("order_number", "AUF-2025-001")
    s.update_order("technician", "Max Müller")
    s.update_order("month", "November")
    s.update_order("year", "2025")
    s.update_order("company", "alsleben")
    first = s.services[0]
    s.update_service(first.id, "date", "03.11.2025")
    s.update_service(first.id, "description", "Netzwerkwartung")
    s.update_service(first.id, "hours", "2")
    s.update_service(first.id, "rate", "10.50")
    second = s.add_service()
    s.update_service(second.id, "description", "Fehlersuche")
    s.update_service(second.id, "hours", "abc")
    s.update_service(second.id, "rate", "")
    return s


@pytest.fixture
def signature_png() -> bytes:
    img = Image.new("RGB", (300, 115), "white")
    ImageDraw.Draw(img).line([(10, 100), (150, 20), (290, 90)], fill="black", width=4)
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()
