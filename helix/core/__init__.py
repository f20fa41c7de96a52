"""
Core engine module.

Contains the window lifecycle, the rendering pipeline and the frame loop.
"""

from .app import Application
from .renderer import Renderer
from .window import Window, WindowState, WindowStateError, open_window

__all__ = ["Application", "Renderer", "Window", "WindowState", "WindowStateError", "open_window"]
