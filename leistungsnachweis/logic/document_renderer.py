from __future__ import annotations

from io import BytesIO

from PIL import Image
from reportlab.lib.units import mm
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from ..models.service_record import ServiceRecord
from .page_layout import ImageOp, LineOp, PageLayout, RectOp, TextOp, build_page_layout


class DocumentRenderer:
    """Draws a PageLayout onto a reportlab canvas (origin bottom-left, points)."""

    def __init__(self, layout: PageLayout) -> None:
        self._layout = layout

    def _y(self, y_mm: float) -> float:
        return (self._layout.page_height - y_mm) * mm

    def _draw_text(self, c: canvas.Canvas, op: TextOp) -> None:
        c.setFont(op.font, op.size)
        for i, line in enumerate(op.lines):
            y = self._y(op.y + i * op.leading)
            if op.align == "center":
                c.drawCentredString(op.x * mm, y, line)
            else:
                c.drawString(op.x * mm, y, line)

    def _draw_image(self, c: canvas.Canvas, op: ImageOp) -> None:
        # mask="auto" keeps transparent strokes transparent
        img = Image.open(BytesIO(op.png)).convert("RGBA")
        c.drawImage(ImageReader(img), op.x * mm, self._y(op.y + op.height),
                    width=op.width * mm, height=op.height * mm, mask="auto")

    def render(self) -> bytes:
        buf = BytesIO()
        layout = self._layout
        c = canvas.Canvas(buf, pagesize=(layout.page_width * mm, layout.page_height * mm))
        c.setTitle("Leistungsnachweis")
        c.setLineWidth(0.2 * mm)

        for op in layout.ops:
            if isinstance(op, TextOp):
                self._draw_text(c, op)
            elif isinstance(op, LineOp):
                c.line(op.x1 * mm, self._y(op.y1), op.x2 * mm, self._y(op.y2))
            elif isinstance(op, RectOp):
                r, g, b = op.fill_rgb
                c.saveState()
                c.setFillColorRGB(r / 255.0, g / 255.0, b / 255.0)
                c.rect(op.x * mm, self._y(op.y + op.height), op.width * mm, op.height * mm,
                       stroke=0, fill=1)
                c.restoreState()
            elif isinstance(op, ImageOp):
                self._draw_image(c, op)

        c.showPage()
        c.save()
        return buf.getvalue()


def render_document(record: ServiceRecord) -> bytes:
    """Lays out and renders the record; returns the PDF bytes."""
    return DocumentRenderer(build_page_layout(record)).render()
