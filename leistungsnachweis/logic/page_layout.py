"""
page_layout.py

Maps a ServiceRecord onto a single A4 portrait page.

The result is a flat list of positioned drawing operations in millimetres,
measured from the top-left corner of the page (y grows downwards), plus the
intermediate values (block lines, row heights, cursor positions) the
renderer and the tests need. Nothing here touches a PDF canvas; text widths
come from reportlab's font metrics.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple, Union

from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.lib.utils import simpleSplit
from reportlab.pdfbase.pdfmetrics import stringWidth

from core.helpers.number_format import (
    PLACEHOLDER,
    currency_or_placeholder,
    format_currency,
    format_hours,
    hours_or_placeholder,
)
from ..models.service_record import ServiceRecord

# --------------------------------------------------------------------------- #
#  Page geometry (mm)                                                         #
# --------------------------------------------------------------------------- #
PAGE_WIDTH = A4[0] / mm
PAGE_HEIGHT = A4[1] / mm
MARGIN_X = 20.0
TITLE_Y = 25.0
TITLE_GAP = 14.0
LINE_HEIGHT = 6.0
BLOCK_GAP = 4.0

FONT_REGULAR = "Helvetica"
FONT_BOLD = "Helvetica-Bold"
TITLE_SIZE = 20
BODY_SIZE = 11

DATE_WIDTH = 35.0
HOURS_WIDTH = 30.0
PRICE_WIDTH = 35.0
HEADER_HEIGHT = 8.0
MIN_ROW_HEIGHT = 8.0
CELL_PAD_X = 3.0
CELL_BASELINE = 5.0
HEADER_BASELINE = 6.0
HEADER_FILL = (240, 240, 240)

SIGNATURE_GAP = 20.0
SIGNATURE_WIDTH = 60.0
SIGNATURE_HEIGHT = 23.0
SIGNATURE_LINE_EXTRA = 20.0

TITLE = "Leistungsnachweis"
TECHNICIAN_HEADING = "Techniker:"
CUSTOMER_HEADING = "Kunde:"
TABLE_HEADINGS = ("Datum", "Beschreibung", "Stunden", "Preis")
TECHNICIAN_CAPTION = "Datum, Unterschrift Techniker"
CUSTOMER_CAPTION = "Datum, Unterschrift Kunde"


# --------------------------------------------------------------------------- #
#  Drawing operations                                                         #
# --------------------------------------------------------------------------- #
@dataclass(frozen=True)
class TextOp:
    """One or more lines of text; ``y`` is the baseline of the first line."""
    x: float
    y: float
    lines: Tuple[str, ...]
    font: str = FONT_REGULAR
    size: int = BODY_SIZE
    align: str = "left"  # "left" | "center"
    leading: float = LINE_HEIGHT


@dataclass(frozen=True)
class LineOp:
    x1: float
    y1: float
    x2: float
    y2: float


@dataclass(frozen=True)
class RectOp:
    x: float
    y: float
    width: float
    height: float
    fill_rgb: Tuple[int, int, int]


@dataclass(frozen=True)
class ImageOp:
    """PNG placed with its top-left corner at (x, y)."""
    x: float
    y: float
    width: float
    height: float
    png: bytes = field(repr=False)


DrawOp = Union[TextOp, LineOp, RectOp, ImageOp]


@dataclass(frozen=True)
class TableColumns:
    date: float
    description: float
    hours: float
    price: float

    @property
    def total(self) -> float:
        return self.date + self.description + self.hours + self.price

    def offsets(self, left: float) -> Tuple[float, float, float, float]:
        """Left edges of the four columns."""
        return (
            left,
            left + self.date,
            left + self.date + self.description,
            left + self.date + self.description + self.hours,
        )


@dataclass(frozen=True)
class RowLayout:
    entry_id: str
    top: float
    height: float
    date_text: str
    description_lines: Tuple[str, ...]
    hours_text: str
    price_text: str


@dataclass
class PageLayout:
    page_width: float
    page_height: float
    ops: List[DrawOp] = field(default_factory=list)
    technician_lines: Tuple[str, ...] = ()
    customer_lines: Tuple[str, ...] = ()
    summary_lines: Tuple[str, ...] = ()
    columns: Optional[TableColumns] = None
    table_top: float = 0.0
    rows: List[RowLayout] = field(default_factory=list)
    totals_lines: Tuple[str, ...] = ()
    signature_line_y: float = 0.0

    def texts(self) -> List[str]:
        """All text lines in drawing order."""
        out: List[str] = []
        for op in self.ops:
            if isinstance(op, TextOp):
                out.extend(op.lines)
        return out


# --------------------------------------------------------------------------- #
#  Helpers                                                                    #
# --------------------------------------------------------------------------- #
def block_height(lines: Sequence[str]) -> float:
    """Heading plus one line per entry."""
    return (len(lines) + 1) * LINE_HEIGHT


def row_height(line_count: int) -> float:
    return max(line_count * LINE_HEIGHT, MIN_ROW_HEIGHT)


def table_columns(page_width: float = PAGE_WIDTH, margin_x: float = MARGIN_X) -> TableColumns:
    table_width = page_width - margin_x * 2
    return TableColumns(
        date=DATE_WIDTH,
        description=table_width - DATE_WIDTH - HOURS_WIDTH - PRICE_WIDTH,
        hours=HOURS_WIDTH,
        price=PRICE_WIDTH,
    )


def wrap_text(text: str, width_mm: float, font: str = FONT_REGULAR, size: int = BODY_SIZE) -> Tuple[str, ...]:
    """Splits text into lines that fit ``width_mm``; explicit newlines are kept."""
    limit = width_mm * mm
    lines: List[str] = []
    for paragraph in text.splitlines() or [""]:
        for line in simpleSplit(paragraph, font, size, limit) or [""]:
            lines.extend(_break_long_line(line, limit, font, size))
    return tuple(lines)


def _break_long_line(line: str, limit: float, font: str, size: int) -> List[str]:
    """Hard-breaks a line without usable spaces (URLs, serial numbers) per character."""
    if stringWidth(line, font, size) <= limit:
        return [line]
    parts: List[str] = []
    current = ""
    for char in line:
        if current and stringWidth(current + char, font, size) > limit:
            parts.append(current)
            current = char
        else:
            current += char
    parts.append(current)
    return parts


def technician_lines(record: ServiceRecord) -> Tuple[str, ...]:
    order = record.order
    company = record.company
    candidates = [
        order.technician or PLACEHOLDER,
        f"+ {order.technician_two}" if order.technician_two else "",
        company.label if company else "",
        company.address if company else "",
    ]
    return tuple(line for line in candidates if line)


def customer_lines(record: ServiceRecord) -> Tuple[str, ...]:
    customer = record.customer
    candidates = [
        customer.full_name or PLACEHOLDER,
        customer.street,
        customer.city,
        f"Tel: {customer.phone}" if customer.phone else "",
        f"E-Mail: {customer.email}" if customer.email else "",
    ]
    return tuple(line for line in candidates if line)


def summary_lines(record: ServiceRecord) -> Tuple[str, ...]:
    order = record.order
    return (
        f"Auftragsnummer: {order.order_number or PLACEHOLDER}",
        f"Zeitraum: {order.month or PLACEHOLDER} {order.year or ''}".strip(),
        f"Zahlungsart: {record.payment_method}",
    )


# --------------------------------------------------------------------------- #
#  Layout                                                                     #
# --------------------------------------------------------------------------- #
def build_page_layout(record: ServiceRecord) -> PageLayout:
    layout = PageLayout(page_width=PAGE_WIDTH, page_height=PAGE_HEIGHT)
    ops = layout.ops
    cursor = TITLE_Y

    # Title
    ops.append(TextOp(PAGE_WIDTH / 2, cursor, (TITLE,), font=FONT_BOLD, size=TITLE_SIZE, align="center"))
    cursor += TITLE_GAP

    # Technician / customer blocks side by side
    right_x = PAGE_WIDTH / 2 + 5
    layout.technician_lines = technician_lines(record)
    layout.customer_lines = customer_lines(record)
    ops.append(TextOp(MARGIN_X, cursor, (TECHNICIAN_HEADING,), font=FONT_BOLD))
    ops.append(TextOp(MARGIN_X, cursor + LINE_HEIGHT, layout.technician_lines))
    ops.append(TextOp(right_x, cursor, (CUSTOMER_HEADING,), font=FONT_BOLD))
    ops.append(TextOp(right_x, cursor + LINE_HEIGHT, layout.customer_lines))
    cursor += max(block_height(layout.technician_lines), block_height(layout.customer_lines)) + BLOCK_GAP

    # Summary
    layout.summary_lines = summary_lines(record)
    for line in layout.summary_lines:
        ops.append(TextOp(MARGIN_X, cursor, (line,)))
        cursor += LINE_HEIGHT
    cursor += LINE_HEIGHT

    # Table header
    columns = table_columns()
    layout.columns = columns
    layout.table_top = cursor
    col_x = columns.offsets(MARGIN_X)
    ops.append(RectOp(MARGIN_X, cursor, columns.total, HEADER_HEIGHT, HEADER_FILL))
    for x, heading in zip(col_x, TABLE_HEADINGS):
        ops.append(TextOp(x + CELL_PAD_X, cursor + HEADER_BASELINE, (heading,), font=FONT_BOLD))
    cursor += HEADER_HEIGHT

    # Rows
    for entry in record.services:
        desc_lines = wrap_text(entry.description or PLACEHOLDER, columns.description - 2 * CELL_PAD_X)
        height = row_height(len(desc_lines))
        row = RowLayout(
            entry_id=entry.id,
            top=cursor,
            height=height,
            date_text=entry.date or PLACEHOLDER,
            description_lines=desc_lines,
            hours_text=hours_or_placeholder(entry.hours),
            price_text=currency_or_placeholder(entry.rate),
        )
        layout.rows.append(row)
        baseline = cursor + CELL_BASELINE
        ops.append(TextOp(col_x[0] + CELL_PAD_X, baseline, (row.date_text,)))
        ops.append(TextOp(col_x[1] + CELL_PAD_X, baseline, row.description_lines))
        ops.append(TextOp(col_x[2] + CELL_PAD_X, baseline, (row.hours_text,)))
        ops.append(TextOp(col_x[3] + CELL_PAD_X, baseline, (row.price_text,)))
        ops.append(LineOp(MARGIN_X, cursor + height, MARGIN_X + columns.total, cursor + height))
        cursor += height

    # Totals
    cursor += 8
    layout.totals_lines = (
        f"Gesamtstunden: {format_hours(record.total_hours)}",
        f"Gesamtpreis: {format_currency(record.total_amount)}",
    )
    ops.append(TextOp(MARGIN_X, cursor, (layout.totals_lines[0],)))
    cursor += LINE_HEIGHT
    ops.append(TextOp(MARGIN_X, cursor, (layout.totals_lines[1],)))

    # Signatures
    cursor += SIGNATURE_GAP
    layout.signature_line_y = cursor
    right_image_x = PAGE_WIDTH - MARGIN_X - SIGNATURE_WIDTH
    if record.technician_signature:
        ops.append(ImageOp(MARGIN_X, cursor - SIGNATURE_HEIGHT, SIGNATURE_WIDTH, SIGNATURE_HEIGHT,
                           record.technician_signature))
    if record.customer_signature:
        ops.append(ImageOp(right_image_x, cursor - SIGNATURE_HEIGHT, SIGNATURE_WIDTH, SIGNATURE_HEIGHT,
                           record.customer_signature))

    line_len = SIGNATURE_WIDTH + SIGNATURE_LINE_EXTRA
    ops.append(LineOp(MARGIN_X, cursor, MARGIN_X + line_len, cursor))
    ops.append(LineOp(PAGE_WIDTH - MARGIN_X - line_len, cursor, PAGE_WIDTH - MARGIN_X, cursor))
    ops.append(TextOp(MARGIN_X, cursor + LINE_HEIGHT, (TECHNICIAN_CAPTION,)))
    ops.append(TextOp(PAGE_WIDTH - MARGIN_X - SIGNATURE_WIDTH - 10, cursor + LINE_HEIGHT, (CUSTOMER_CAPTION,)))
    return layout
