"""
Window lifecycle.

Owns the pygame display, the frame clock and the close signal. A window
moves through UNINITIALIZED -> RUNNING -> TERMINATED exactly once, and
drawing is only accepted between begin_frame() and end_frame().
"""

import logging
from contextlib import contextmanager
from enum import Enum
from typing import Iterator, Optional

import pygame

from ..ui.colors import RGB
from ..ui.fonts import FontCache
from .renderer import Renderer

logger = logging.getLogger(__name__)


class WindowState(Enum):
    """Window lifecycle states."""
    UNINITIALIZED = "uninitialized"
    RUNNING = "running"
    TERMINATED = "terminated"


class WindowStateError(RuntimeError):
    """Raised when a window operation is called in the wrong state."""


class Window:
    """
    Explicitly owned handle to the display.

    pygame has a single display per process, so at most one Window can
    be RUNNING at a time.
    """

    _live: Optional["Window"] = None

    def __init__(self, exit_key: Optional[int] = pygame.K_ESCAPE, fonts: Optional[FontCache] = None):
        """
        Create an uninitialized window.

        Args:
            exit_key: Key that requests a close, None to only close on QUIT
            fonts: Font cache for text drawing
        """
        self.exit_key = exit_key
        self.state = WindowState.UNINITIALIZED
        self.renderer: Optional[Renderer] = None
        self._fonts = fonts or FontCache()

        # Timing
        self.clock: Optional[pygame.time.Clock] = None
        self.target_fps = 0

        self._close_requested = False
        self._in_frame = False
        self._cleared = False

    # ─────────────────────────────────────────────────────────────────────────
    # Lifecycle
    # ─────────────────────────────────────────────────────────────────────────

    def initialize(self, width: int, height: int, title: str) -> None:
        """
        Acquire the display.

        Args:
            width: Window width in pixels
            height: Window height in pixels
            title: Window caption

        Raises:
            WindowStateError: If called more than once, or while another
                window is running
            pygame.error: If the display cannot be created
        """
        if self.state is not WindowState.UNINITIALIZED:
            raise WindowStateError(f"initialize() called on a {self.state.value} window")
        if Window._live is not None:
            raise WindowStateError("Another window is already running")

        try:
            pygame.display.init()
            pygame.font.init()
            pygame.display.set_caption(title)
            surface = pygame.display.set_mode((width, height))
        except pygame.error as e:
            logger.warning(f"Could not open window: {e}")
            pygame.quit()
            raise

        self.renderer = Renderer(surface, self._fonts)
        self.clock = pygame.time.Clock()
        self.state = WindowState.RUNNING
        Window._live = self

        logger.info(f"Window '{title}' opened: {width}x{height} "
                    f"(driver: {pygame.display.get_driver()})")

    def shutdown(self) -> None:
        """
        Release the display.

        Raises:
            WindowStateError: If the window is not running
        """
        if self.state is not WindowState.RUNNING:
            raise WindowStateError(f"shutdown() called on a {self.state.value} window")

        if self._in_frame:
            logger.warning("Shutting down with an unfinished frame")
            self._in_frame = False

        self.renderer.cleanup()
        self.renderer = None
        self.clock = None
        pygame.quit()

        self.state = WindowState.TERMINATED
        Window._live = None
        logger.info("Window closed")

    def set_target_rate(self, fps: int) -> None:
        """
        Set the target frame rate.

        Pacing is best-effort; 0 or less disables it.
        """
        self.target_fps = max(0, int(fps))
        logger.debug(f"Target frame rate: {self.target_fps}")

    def should_close(self) -> bool:
        """
        Poll for a close request.

        Drains the event queue; a QUIT event or the exit key latches the
        request, so once this returns True it keeps returning True.
        """
        self._require_running("should_close")

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._close_requested = True
            elif event.type == pygame.KEYDOWN and self.exit_key is not None:
                if event.key == self.exit_key:
                    self._close_requested = True

        return self._close_requested

    def request_close(self) -> None:
        """Latch a close request without an event."""
        self._close_requested = True

    # ─────────────────────────────────────────────────────────────────────────
    # Frames
    # ─────────────────────────────────────────────────────────────────────────

    def begin_frame(self) -> None:
        """Start a frame; drawing is valid until end_frame()."""
        self._require_running("begin_frame")
        if self._in_frame:
            raise WindowStateError("begin_frame() called inside a frame")
        self._in_frame = True
        self._cleared = False

    def end_frame(self) -> None:
        """Present the frame and wait for the next one."""
        self._require_running("end_frame")
        if not self._in_frame:
            raise WindowStateError("end_frame() called outside a frame")
        self._in_frame = False

        self.renderer.present()
        self.clock.tick(self.target_fps)

    @contextmanager
    def frame(self) -> Iterator["Window"]:
        """Scope one frame; end_frame() runs even if drawing raises."""
        self.begin_frame()
        try:
            yield self
        finally:
            self.end_frame()

    # ─────────────────────────────────────────────────────────────────────────
    # Drawing
    # ─────────────────────────────────────────────────────────────────────────

    def clear(self, color: RGB) -> None:
        """Fill the frame with a solid color. Must come first in a frame."""
        self._require_frame("clear")
        self.renderer.clear(color)
        self._cleared = True

    def draw_rectangle(self, x: int, y: int, width: int, height: int, color: RGB) -> None:
        """Draw an axis-aligned filled rectangle."""
        self._require_drawable("draw_rectangle")
        self.renderer.draw_rectangle(x, y, width, height, color)

    def draw_text(self, text: str, x: int, y: int, font_size: int, color: RGB) -> None:
        """Draw a string with its top-left corner at (x, y)."""
        self._require_drawable("draw_text")
        self.renderer.draw_text(text, x, y, font_size, color)

    def get_surface(self) -> pygame.Surface:
        """Get the off-screen canvas of the current window."""
        self._require_running("get_surface")
        return self.renderer.get_surface()

    # ─────────────────────────────────────────────────────────────────────────
    # State checks
    # ─────────────────────────────────────────────────────────────────────────

    def _require_running(self, operation: str) -> None:
        if self.state is not WindowState.RUNNING:
            raise WindowStateError(f"{operation}() called on a {self.state.value} window")

    def _require_frame(self, operation: str) -> None:
        self._require_running(operation)
        if not self._in_frame:
            raise WindowStateError(f"{operation}() called outside a frame")

    def _require_drawable(self, operation: str) -> None:
        self._require_frame(operation)
        if not self._cleared:
            raise WindowStateError(f"{operation}() called before clear()")


@contextmanager
def open_window(width: int, height: int, title: str, fps: int = 0,
                exit_key: Optional[int] = pygame.K_ESCAPE) -> Iterator[Window]:
    """
    Open a window for the duration of a with-block.

    Args:
        width, height: Window size in pixels
        title: Window caption
        fps: Target frame rate (0 = unpaced)
        exit_key: Key that requests a close

    Yields:
        The running window; it is shut down when the block exits
    """
    window = Window(exit_key=exit_key)
    window.initialize(width, height, title)
    try:
        window.set_target_rate(fps)
        yield window
    finally:
        window.shutdown()
