# signature/logic/signature_surface.py
from __future__ import annotations

import io
import logging
from typing import Callable, Optional, Tuple

from PIL import Image, ImageChops, ImageDraw

from ..models.signature_enums import CaptureState
from ..models.stroke_style import StrokeStyle
from ..models.theme_colors import ThemeColors

logger = logging.getLogger(__name__)

ThemeProvider = Callable[[], ThemeColors]
ChangeCallback = Callable[[Optional[bytes]], None]


class SignatureSurface:
    """
    Freehand signature raster, independent of any UI toolkit.

    Coordinates passed to the pointer handlers are in CSS/widget pixels; the
    internal raster is ``width * pixel_ratio`` by ``height * pixel_ratio`` so
    strokes stay crisp on high-density screens.

    State machine:
      IDLE --pointer_down--> DRAWING
      DRAWING --pointer_move--> DRAWING (paints one segment)
      DRAWING --pointer_up / pointer_cancel / pointer_leave--> IDLE (+ export)

    ``clear()`` blanks the raster and reports ``None`` (signature absent).
    """

    def __init__(
        self,
        width: int = 300,
        height: int = 150,
        *,
        pixel_ratio: float = 1.0,
        style: Optional[StrokeStyle] = None,
        theme: Optional[ThemeProvider] = None,
        on_change: Optional[ChangeCallback] = None,
    ) -> None:
        self._style = style or StrokeStyle()
        self._theme: ThemeProvider = theme or ThemeColors
        self._on_change = on_change
        self._state = CaptureState.IDLE
        self._last: Tuple[float, float] = (0.0, 0.0)
        self._width = 0
        self._height = 0
        self._ratio = 1.0
        self._image: Image.Image
        self._draw: ImageDraw.ImageDraw
        self.resize(width, height, pixel_ratio)

    # ------------------------------------------------------------------ properties
    @property
    def state(self) -> CaptureState:
        return self._state

    @property
    def size(self) -> Tuple[int, int]:
        """Logical (widget) size."""
        return self._width, self._height

    @property
    def pixel_ratio(self) -> float:
        return self._ratio

    @property
    def raster_size(self) -> Tuple[int, int]:
        return self._image.size

    @property
    def image(self) -> Image.Image:
        return self._image.copy()

    # ------------------------------------------------------------------ buffer
    def _blank(self) -> None:
        bg = self._theme().background_rgb()
        raster = (max(1, round(self._width * self._ratio)), max(1, round(self._height * self._ratio)))
        self._image = Image.new("RGB", raster, bg)
        self._draw = ImageDraw.Draw(self._image)

    def resize(self, width: int, height: int, pixel_ratio: Optional[float] = None) -> None:
        """Re-initializes the raster; existing strokes are discarded."""
        if pixel_ratio is not None:
            self._ratio = float(pixel_ratio) if pixel_ratio and pixel_ratio > 0 else 1.0
        self._width = max(0, int(width))
        self._height = max(0, int(height))
        self._state = CaptureState.IDLE
        self._blank()
        logger.debug("signature surface resized to %sx%s @%s", self._width, self._height, self._ratio)

    # ------------------------------------------------------------------ pointer handlers
    def pointer_down(self, x: float, y: float) -> None:
        self._state = CaptureState.DRAWING
        self._last = (x, y)

    def pointer_move(self, x: float, y: float) -> None:
        if self._state is not CaptureState.DRAWING:
            return
        self._segment(self._last, (x, y))
        self._last = (x, y)

    def pointer_up(self) -> None:
        self._stop()

    def pointer_cancel(self) -> None:
        self._stop()

    def pointer_leave(self) -> None:
        self._stop()

    def _stop(self) -> None:
        if self._state is not CaptureState.DRAWING:
            return
        self._state = CaptureState.IDLE
        self._emit(self.export_png())

    def _segment(self, start: Tuple[float, float], end: Tuple[float, float]) -> None:
        r = self._ratio
        width = max(1, round(self._style.width * r))
        color = self._theme().stroke_rgb()
        p0 = (start[0] * r, start[1] * r)
        p1 = (end[0] * r, end[1] * r)
        self._draw.line([p0, p1], fill=color, width=width)
        # round caps and joins
        half = width / 2.0
        for px, py in (p0, p1):
            self._draw.ellipse([px - half, py - half, px + half, py + half], fill=color)

    # ------------------------------------------------------------------ actions
    def clear(self) -> None:
        self._state = CaptureState.IDLE
        self._blank()
        self._emit(None)

    def export_png(self) -> bytes:
        buf = io.BytesIO()
        self._image.save(buf, format="PNG")
        return buf.getvalue()

    def is_blank(self) -> bool:
        background = Image.new("RGB", self._image.size, self._theme().background_rgb())
        return ImageChops.difference(self._image, background).getbbox() is None

    def _emit(self, png: Optional[bytes]) -> None:
        if self._on_change is not None:
            self._on_change(png)
