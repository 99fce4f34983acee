from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

from PIL import ImageColor


@dataclass(frozen=True)
class ThemeColors:
    """
    Background/stroke colors taken from the surrounding visual theme, so
    exported images match the light or dark presentation.
    Values are anything PIL understands ("#0f172a", "white", ...).
    """
    background: str = "#ffffff"
    stroke: str = "#0f172a"

    def background_rgb(self) -> Tuple[int, int, int]:
        return ImageColor.getrgb(self.background)[:3]

    def stroke_rgb(self) -> Tuple[int, int, int]:
        return ImageColor.getrgb(self.stroke)[:3]
