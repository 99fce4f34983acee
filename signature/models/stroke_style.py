from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class StrokeStyle:
    """
    Pen settings in CSS pixels; the surface scales them by the pixel ratio.
    Caps and joins are always round.
    """
    width: float = 2.0
