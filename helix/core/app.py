"""
Demo application.

Runs the frame loop: poll the close signal, draw one frame, repeat,
then release the window.
"""

import logging
from typing import Optional

from ..algebra.evaluator import DerivativeEvaluator
from ..config import Config
from .window import Window, open_window

logger = logging.getLogger(__name__)


class Application:
    """
    Frame loop for both demo variants.
    
    The rectangle variant clears the frame and draws a square; the
    formula variant also draws the derivative of the configured formula.
    """
    
    def __init__(self, config: Config):
        """
        Initialize the application.
        
        Args:
            config: Demo configuration
        """
        self.config = config
        self.window: Optional[Window] = None
        self.frame_count = 0
        
        self.evaluator: Optional[DerivativeEvaluator] = None
        if config.show_formula:
            self.evaluator = DerivativeEvaluator(
                config.formula,
                config.symbol,
                cache=config.cache_derivative
            )
    
    def run(self) -> None:
        """Open the window and loop until it is asked to close."""
        config = self.config
        
        with open_window(
            config.window_width,
            config.window_height,
            config.title,
            fps=config.target_fps
        ) as window:
            self.window = window
            
            while not window.should_close():
                with window.frame():
                    self._render(window)
                
                self.frame_count += 1
                if config.max_frames is not None and self.frame_count >= config.max_frames:
                    logger.debug(f"Frame limit reached: {self.frame_count}")
                    window.request_close()
        
        logger.info(f"Stopped after {self.frame_count} frames")
    
    def _render(self, window: Window) -> None:
        """Draw one frame."""
        config = self.config
        
        window.clear(config.background)
        window.draw_rectangle(*config.rect, config.rect_color)
        
        if self.evaluator:
            text = self.evaluator.evaluate()
            x, y = config.text_position
            window.draw_text(text, x, y, config.font_size, config.text_color)
