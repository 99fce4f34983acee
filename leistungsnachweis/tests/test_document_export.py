"""PDF rendering and the export service."""
from __future__ import annotations

import io
from pathlib import Path

import pytest
from pypdf import PdfReader

from core.config.config_service import ConfigService
from core.logging.logic.logger import logger
from leistungsnachweis.exceptions.errors import CompanyRequiredError
from leistungsnachweis.logic.document_renderer import render_document
from leistungsnachweis.logic.export_service import ExportService
from leistungsnachweis.logic.form_state import FormState
from leistungsnachweis.models import SignerRole


def _text(pdf: bytes) -> str:
    reader = PdfReader(io.BytesIO(pdf))
    assert len(reader.pages) == 1
    return reader.pages[0].extract_text()


@pytest.fixture
def service(tmp_path: Path) -> ExportService:
    missing = tmp_path / "missing.ini"
    cfg = ConfigService(defaults_ini=missing, user_ini=missing,
                        environ={"LNW_EXPORT__OUTPUT_DIR": str(tmp_path / "out")})
    return ExportService(config=cfg)


def test_render_document_is_single_a4_page(filled_state: FormState) -> None:
    pdf = render_document(filled_state.snapshot())
    assert pdf.startswith(b"%PDF")
    page = PdfReader(io.BytesIO(pdf)).pages[0]
    assert float(page.mediabox.width) == pytest.approx(595.28, abs=0.1)
    assert float(page.mediabox.height) == pytest.approx(841.89, abs=0.1)


def test_render_document_contains_texts(filled_state: FormState) -> None:
    text = _text(render_document(filled_state.snapshot()))
    for expected in (
        "Leistungsnachweis",
        "IT Systemhaus Alsleben GmbH",
        "Treskowallee 114, 10319 Berlin",
        "Max Mustermann",
        "Auftragsnummer: AUF-2025-001",
        "Gesamtstunden: 2.00",
        "Datum, Unterschrift Kunde",
    ):
        assert expected in text


def test_render_document_embeds_signature(filled_state: FormState, signature_png: bytes) -> None:
    blank = PdfReader(io.BytesIO(render_document(filled_state.snapshot()))).pages[0]
    assert len(blank.images) == 0
    filled_state.set_signature(SignerRole.TECHNICIAN, signature_png)
    page = PdfReader(io.BytesIO(render_document(filled_state.snapshot()))).pages[0]
    assert len(page.images) >= 1


def test_export_refused_without_company(filled_state: FormState, service: ExportService) -> None:
    filled_state.update_order("company", "")
    with pytest.raises(CompanyRequiredError):
        service.export(filled_state)
    assert filled_state.company_error
    assert not service.output_path().exists()
    assert logger.query_logs(event="ExportRejected")


def test_export_writes_fixed_filename(filled_state: FormState, service: ExportService) -> None:
    path = service.export(filled_state)
    assert path.name == "leistungsnachweis.pdf"
    assert path == service.output_path()
    assert path.read_bytes().startswith(b"%PDF")
    assert logger.query_logs(event="Exported")[0].reference_id == "AUF-2025-001"


def test_export_to_explicit_directory(filled_state: FormState, service: ExportService, tmp_path: Path) -> None:
    path = service.export(filled_state, tmp_path / "elsewhere")
    assert path == tmp_path / "elsewhere" / "leistungsnachweis.pdf"
    assert path.exists()


def test_export_with_minimal_data(service: ExportService) -> None:
    state = FormState()
    state.update_order("company", "talk-phone")
    text = _text(service.render(state))
    assert "Talk & Phone GmbH" in text


def test_render_document_with_very_large_amounts(filled_state: FormState) -> None:
    entry = filled_state.services[0]
    filled_state.update_service(entry.id, "rate", "9" * 29)
    filled_state.update_service(entry.id, "hours", "1e30")
    text = _text(render_document(filled_state.snapshot()))
    assert "Gesamtpreis:" in text
