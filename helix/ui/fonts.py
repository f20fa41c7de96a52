"""
Font management.

Caches pygame fonts by size. Text uses pygame's bundled default font
unless a font file is given, so the demos need no assets on disk.
"""

import logging
from pathlib import Path
from typing import Dict, Optional

import pygame

logger = logging.getLogger(__name__)


class FontCache:
    """
    Cached access to fonts at different sizes.
    
    Font objects are only valid while pygame's font module is
    initialized, so a cache belongs to one window lifetime and must be
    cleared before pygame shuts down.
    """
    
    def __init__(self, font_path: Optional[Path] = None):
        """
        Initialize the font cache.
        
        Args:
            font_path: Optional TTF/OTF file; None uses pygame's default font
        """
        self.font_path = font_path
        self._fonts: Dict[int, pygame.font.Font] = {}
    
    def get_font(self, size: int) -> pygame.font.Font:
        """
        Get a font at the specified size.
        
        Args:
            size: Font size in pixels
        
        Returns:
            Pygame font object
        """
        if size <= 0:
            raise ValueError(f"Font size must be positive, got {size}")
        
        if size in self._fonts:
            return self._fonts[size]
        
        if not pygame.font.get_init():
            pygame.font.init()
        
        font = self._load_font(size)
        self._fonts[size] = font
        return font
    
    def _load_font(self, size: int) -> pygame.font.Font:
        """Load a font from file, falling back to the default font."""
        if self.font_path is not None:
            if self.font_path.exists():
                try:
                    font = pygame.font.Font(str(self.font_path), size)
                    logger.debug(f"Loaded font: {self.font_path.name} size={size}")
                    return font
                except pygame.error as e:
                    logger.error(f"Failed to load {self.font_path}: {e}")
            else:
                logger.warning(f"Font file not found: {self.font_path}")
        
        logger.debug(f"Using default font size={size}")
        return pygame.font.Font(None, size)
    
    def clear(self) -> None:
        """Drop all cached fonts."""
        self._fonts.clear()
    
    def __len__(self) -> int:
        return len(self._fonts)
