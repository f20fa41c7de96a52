"""
Demo configuration.

Every literal the demos use lives here so both variants share one
definition of the window, the rectangle and the formula overlay.
"""

from dataclasses import dataclass
from typing import Optional

from .ui.colors import RGB, BLUE, RED, WHITE


@dataclass
class Config:
    """Demo configuration."""
    
    # ─────────────────────────────────────────────────────────────────────────
    # Window Settings
    # ─────────────────────────────────────────────────────────────────────────
    
    window_width: int = 900
    window_height: int = 900
    title: str = "TEST"
    
    # Target frame rate (0 = unpaced)
    target_fps: int = 60
    
    # Stop after this many frames (None = run until closed)
    max_frames: Optional[int] = None
    
    # ─────────────────────────────────────────────────────────────────────────
    # Scene
    # ─────────────────────────────────────────────────────────────────────────
    
    background: RGB = BLUE
    
    # Rectangle as (x, y, width, height)
    rect: tuple[int, int, int, int] = (20, 20, 60, 60)
    rect_color: RGB = RED
    
    # ─────────────────────────────────────────────────────────────────────────
    # Formula Overlay
    # ─────────────────────────────────────────────────────────────────────────
    
    # Draw the derivative of `formula` as text
    show_formula: bool = False
    
    formula: str = "cos(x) + sin(2x)"
    symbol: str = "x"
    
    text_position: tuple[int, int] = (100, 100)
    font_size: int = 30
    text_color: RGB = WHITE
    
    # Compute the derivative once instead of on every frame
    cache_derivative: bool = True
    
    # ─────────────────────────────────────────────────────────────────────────
    # Computed Properties
    # ─────────────────────────────────────────────────────────────────────────
    
    @property
    def window_size(self) -> tuple[int, int]:
        """Get window size as tuple."""
        return (self.window_width, self.window_height)
    
    def __post_init__(self):
        """Validate values that would break the loop."""
        if self.window_width <= 0 or self.window_height <= 0:
            raise ValueError(f"Invalid window size: {self.window_size}")
        if self.max_frames is not None and self.max_frames < 1:
            raise ValueError(f"max_frames must be positive, got {self.max_frames}")


# Default configuration instances
RECTANGLE_CONFIG = Config()
FORMULA_CONFIG = Config(show_formula=True)
