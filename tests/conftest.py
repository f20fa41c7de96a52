"""
Shared test setup.

SDL's dummy drivers let the window tests run without a display.
"""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest

from helix.core.window import Window, WindowState


@pytest.fixture
def window():
    """A running 200x200 window, shut down after the test."""
    win = Window()
    win.initialize(200, 200, "test")
    yield win
    if win.state is WindowState.RUNNING:
        win.shutdown()
