"""
Rendering pipeline.

All drawing goes to an off-screen canvas which is copied to the display
once per frame. Tests read pixels straight from the canvas.
"""

import logging
from typing import Optional

import pygame

from ..ui.colors import RGB
from ..ui.fonts import FontCache

logger = logging.getLogger(__name__)


class Renderer:
    """
    Draws primitives onto an off-screen canvas and presents it.
    
    The canvas is a 32-bit surface the size of the window, so pixel
    values do not depend on the display's pixel format.
    """
    
    def __init__(self, window: pygame.Surface, fonts: Optional[FontCache] = None):
        """
        Initialize the renderer.
        
        Args:
            window: Display surface returned by pygame.display.set_mode
            fonts: Font cache for text drawing
        """
        self.window = window
        self.fonts = fonts or FontCache()
        self.canvas = pygame.Surface(window.get_size(), 0, 32)
    
    def get_surface(self) -> pygame.Surface:
        """
        Get the canvas to draw on.
        
        Returns:
            The off-screen canvas
        """
        return self.canvas
    
    def clear(self, color: RGB) -> None:
        """Fill the whole canvas with a solid color."""
        self.canvas.fill(color)
    
    def draw_rectangle(self, x: int, y: int, width: int, height: int, color: RGB) -> None:
        """Draw an axis-aligned filled rectangle."""
        pygame.draw.rect(self.canvas, color, pygame.Rect(x, y, width, height))
    
    def draw_text(self, text: str, x: int, y: int, font_size: int, color: RGB) -> None:
        """
        Draw a single line of text.
        
        Args:
            text: String to draw
            x, y: Top-left corner of the text
            font_size: Font size in pixels
            color: Text color
        """
        if not text:
            return
        font = self.fonts.get_font(font_size)
        text_surface = font.render(text, True, color)
        self.canvas.blit(text_surface, (x, y))
    
    def present(self) -> None:
        """Copy the canvas to the display and flip."""
        self.window.blit(self.canvas, (0, 0))
        pygame.display.flip()
    
    def cleanup(self) -> None:
        """Clean up renderer resources."""
        self.fonts.clear()
        # Surfaces are automatically cleaned up by Python GC
