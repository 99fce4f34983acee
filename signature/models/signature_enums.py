# signature/models/signature_enums.py
from __future__ import annotations
from enum import Enum


class CaptureState(str, Enum):
    """Interaction state of a signature surface."""
    IDLE = "idle"
    DRAWING = "drawing"
