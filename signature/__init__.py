"""
Signature capture module.

Turns pointer gestures into a raster image (SignatureSurface) and offers a
Tk widget (signature.gui.signature_pad.SignaturePad) bound to it.
"""
from .logic.signature_surface import SignatureSurface
from .models.signature_enums import CaptureState
from .models.theme_colors import ThemeColors

__all__ = ["SignatureSurface", "CaptureState", "ThemeColors"]
