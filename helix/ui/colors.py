"""
Color palette.

raylib's stock values for the colors the demos use, so they keep their
exact look (red square on a blue background, white text).
"""

from typing import Tuple

# Type aliases
RGB = Tuple[int, int, int]


RED: RGB = (230, 41, 55)
BLUE: RGB = (0, 121, 241)
WHITE: RGB = (255, 255, 255)
