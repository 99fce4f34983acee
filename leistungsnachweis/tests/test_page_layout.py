"""Layout of the single A4 page: blocks, table rows, totals, signatures."""
from __future__ import annotations

import pytest

from leistungsnachweis.logic import page_layout as pl
from leistungsnachweis.logic.form_state import FormState
from leistungsnachweis.models import SignerRole


def test_page_is_a4_portrait() -> None:
    layout = pl.build_page_layout(FormState().snapshot())
    assert layout.page_width == pytest.approx(210, abs=0.01)
    assert layout.page_height == pytest.approx(297, abs=0.01)
    title = layout.ops[0]
    assert isinstance(title, pl.TextOp)
    assert title.lines == ("Leistungsnachweis",)
    assert title.align == "center"
    assert title.x == pytest.approx(layout.page_width / 2)


def test_technician_block_contains_company(filled_state: FormState) -> None:
    layout = pl.build_page_layout(filled_state.snapshot())
    assert layout.technician_lines == (
        "Max Müller",
        "IT Systemhaus Alsleben GmbH",
        "Treskowallee 114, 10319 Berlin",
    )
    assert "IT Systemhaus Alsleben GmbH" in layout.texts()


def test_second_technician_line(filled_state: FormState) -> None:
    filled_state.add_second_technician()
    filled_state.update_order("technician_two", "Anna Schulz")
    lines = pl.build_page_layout(filled_state.snapshot()).technician_lines
    assert lines[1] == "+ Anna Schulz"


def test_empty_fields_render_placeholders(state: FormState) -> None:
    layout = pl.build_page_layout(state.snapshot())
    assert layout.technician_lines == ("-",)
    assert layout.customer_lines == ("-",)
    assert layout.summary_lines[0] == "Auftragsnummer: -"
    assert layout.summary_lines[2] == "Zahlungsart: Barzahlung"
    row = layout.rows[0]
    assert (row.date_text, row.description_lines, row.hours_text, row.price_text) == ("-", ("-",), "-", "-")


def test_customer_block_prefixes(filled_state: FormState) -> None:
    lines = pl.build_page_layout(filled_state.snapshot()).customer_lines
    assert lines == (
        "Max Mustermann",
        "Musterstraße 123",
        "10115 Berlin",
        "Tel: +49 30 12345678",
        "E-Mail: max@beispiel.de",
    )


def test_cursor_advances_by_taller_block(filled_state: FormState) -> None:
    layout = pl.build_page_layout(filled_state.snapshot())
    block_top = pl.TITLE_Y + pl.TITLE_GAP
    taller = max(pl.block_height(layout.technician_lines), pl.block_height(layout.customer_lines))
    assert taller == (5 + 1) * pl.LINE_HEIGHT
    summary_start = block_top + taller + pl.BLOCK_GAP
    summary_ops = [op for op in layout.ops if isinstance(op, pl.TextOp) and op.lines[0].startswith("Auftragsnummer")]
    assert summary_ops[0].y == pytest.approx(summary_start)
    assert layout.table_top == pytest.approx(summary_start + 4 * pl.LINE_HEIGHT)


def test_summary_period_line(filled_state: FormState) -> None:
    layout = pl.build_page_layout(filled_state.snapshot())
    assert layout.summary_lines[1] == "Zeitraum: November 2025"
    filled_state.update_order("year", "")
    assert pl.build_page_layout(filled_state.snapshot()).summary_lines[1] == "Zeitraum: November"


def test_table_columns_fill_printable_width() -> None:
    cols = pl.table_columns()
    assert cols.total == pytest.approx(pl.PAGE_WIDTH - 2 * pl.MARGIN_X)
    assert (cols.date, cols.hours, cols.price) == (35, 30, 35)
    assert cols.description == pytest.approx(70, abs=0.01)


def test_header_row_is_shaded(state: FormState) -> None:
    layout = pl.build_page_layout(state.snapshot())
    rects = [op for op in layout.ops if isinstance(op, pl.RectOp)]
    assert len(rects) == 1
    assert rects[0].fill_rgb == (240, 240, 240)
    assert rects[0].y == layout.table_top
    assert rects[0].height == pl.HEADER_HEIGHT
    for heading in pl.TABLE_HEADINGS:
        assert heading in layout.texts()


def test_rows_render_formatted_values(filled_state: FormState) -> None:
    layout = pl.build_page_layout(filled_state.snapshot())
    first, second = layout.rows
    assert (first.hours_text, first.price_text) == ("2.00", "10,50 €")
    assert (second.hours_text, second.price_text) == ("-", "-")
    assert layout.totals_lines == ("Gesamtstunden: 2.00", "Gesamtpreis: 10,50 €")


def test_long_description_wraps_and_grows_row(state: FormState) -> None:
    entry = state.services[0]
    state.update_service(entry.id, "description", "Austausch der defekten Netzwerkkomponenten " * 6)
    short = state.add_service()
    state.update_service(short.id, "description", "Kurz")
    layout = pl.build_page_layout(state.snapshot())
    long_row, short_row = layout.rows

    assert len(long_row.description_lines) > 1
    assert long_row.height == len(long_row.description_lines) * pl.LINE_HEIGHT
    assert short_row.description_lines == ("Kurz",)
    assert short_row.height == pl.MIN_ROW_HEIGHT
    assert short_row.top == pytest.approx(long_row.top + long_row.height)
    assert layout.rows[0].top == pytest.approx(layout.table_top + pl.HEADER_HEIGHT)


def test_each_row_has_bottom_rule(filled_state: FormState) -> None:
    layout = pl.build_page_layout(filled_state.snapshot())
    rules = {op.y1 for op in layout.ops if isinstance(op, pl.LineOp) and op.y1 == op.y2}
    for row in layout.rows:
        assert row.top + row.height in rules


def test_signature_block_without_images(state: FormState) -> None:
    layout = pl.build_page_layout(state.snapshot())
    assert not [op for op in layout.ops if isinstance(op, pl.ImageOp)]
    sig_lines = [op for op in layout.ops if isinstance(op, pl.LineOp) and op.y1 == layout.signature_line_y]
    assert len(sig_lines) == 2
    assert pl.TECHNICIAN_CAPTION in layout.texts()
    assert pl.CUSTOMER_CAPTION in layout.texts()


def test_signature_images_above_lines(state: FormState, signature_png: bytes) -> None:
    state.set_signature(SignerRole.TECHNICIAN, signature_png)
    state.set_signature(SignerRole.CUSTOMER, signature_png)
    layout = pl.build_page_layout(state.snapshot())
    images = [op for op in layout.ops if isinstance(op, pl.ImageOp)]
    assert len(images) == 2
    left, right = images
    assert left.x == pl.MARGIN_X
    assert right.x + right.width == pytest.approx(layout.page_width - pl.MARGIN_X)
    for img in images:
        assert (img.width, img.height) == (pl.SIGNATURE_WIDTH, pl.SIGNATURE_HEIGHT)
        assert img.y + img.height == pytest.approx(layout.signature_line_y)


def test_wrap_text_keeps_explicit_newlines() -> None:
    assert pl.wrap_text("a\nb", 50) == ("a", "b")
    assert pl.wrap_text("", 50) == ("",)


def test_long_token_is_broken_inside_description_column(state: FormState) -> None:
    from reportlab.lib.units import mm
    from reportlab.pdfbase.pdfmetrics import stringWidth

    entry = state.services[0]
    url = "https://example.com/" + "x" * 80
    state.update_service(entry.id, "description", url)
    row = pl.build_page_layout(state.snapshot()).rows[0]
    limit = (pl.table_columns().description - 2 * pl.CELL_PAD_X) * mm

    assert len(row.description_lines) > 1
    assert "".join(row.description_lines) == url
    for line in row.description_lines:
        assert stringWidth(line, pl.FONT_REGULAR, pl.BODY_SIZE) <= limit
    assert row.height == len(row.description_lines) * pl.LINE_HEIGHT
