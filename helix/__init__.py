"""
Helix - window and formula demo programs.

Two small pygame programs: one draws a rectangle every frame, the other
also shows the symbolic derivative of a fixed formula.
"""

__version__ = "0.1.0"

from .config import Config, RECTANGLE_CONFIG, FORMULA_CONFIG

__all__ = ["Config", "RECTANGLE_CONFIG", "FORMULA_CONFIG"]
