"""
UI helpers.

Color palette and font cache shared by the renderer.
"""

from .colors import RGB, RED, BLUE, WHITE
from .fonts import FontCache

__all__ = ["RGB", "RED", "BLUE", "WHITE", "FontCache"]
