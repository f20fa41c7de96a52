"""
Tests for the window lifecycle and drawing.

Checked properties:
1. Drawing is rejected before initialize() and after shutdown()
2. initialize() and shutdown() each happen exactly once
3. Frames are balanced and start with clear()
4. A rendered frame has the rectangle in red on a blue background
5. QUIT and the exit key latch the close signal
"""

import pygame
import pytest

from helix.core.window import Window, WindowState, WindowStateError, open_window
from helix.ui.colors import BLUE, RED, WHITE


def pixel(surface, x, y):
    return tuple(surface.get_at((x, y)))[:3]


# =============================================================================
# Lifecycle
# =============================================================================


class TestLifecycle:
    """UNINITIALIZED -> RUNNING -> TERMINATED."""
    
    def test_new_window_is_uninitialized(self):
        assert Window().state is WindowState.UNINITIALIZED
    
    def test_drawing_before_initialize(self):
        win = Window()
        with pytest.raises(WindowStateError):
            win.begin_frame()
        with pytest.raises(WindowStateError):
            win.clear(BLUE)
        with pytest.raises(WindowStateError):
            win.draw_rectangle(20, 20, 60, 60, RED)
        with pytest.raises(WindowStateError):
            win.should_close()
    
    def test_drawing_after_shutdown(self, window):
        window.shutdown()
        assert window.state is WindowState.TERMINATED
        with pytest.raises(WindowStateError):
            window.begin_frame()
        with pytest.raises(WindowStateError):
            window.draw_text("late", 0, 0, 30, WHITE)
    
    def test_initialize_twice(self, window):
        with pytest.raises(WindowStateError):
            window.initialize(200, 200, "again")
    
    def test_shutdown_twice(self, window):
        window.shutdown()
        with pytest.raises(WindowStateError):
            window.shutdown()
    
    def test_shutdown_before_initialize(self):
        with pytest.raises(WindowStateError):
            Window().shutdown()
    
    def test_no_reinitialize_after_shutdown(self, window):
        window.shutdown()
        with pytest.raises(WindowStateError):
            window.initialize(200, 200, "again")
    
    def test_single_live_window(self, window):
        with pytest.raises(WindowStateError):
            Window().initialize(100, 100, "second")
    
    def test_window_size_and_title(self, window):
        assert window.get_surface().get_size() == (200, 200)
        assert pygame.display.get_caption()[0] == "test"
    
    def test_open_window_shuts_down_on_error(self):
        with pytest.raises(ZeroDivisionError):
            with open_window(100, 100, "boom") as win:
                1 / 0
        assert win.state is WindowState.TERMINATED
        assert Window._live is None
    
    def test_failed_display_releases_pygame(self, monkeypatch):
        """A set_mode failure leaves pygame shut down and the window reusable."""
        def no_display(size):
            raise pygame.error("no available video device")
        
        monkeypatch.setattr(pygame.display, "set_mode", no_display)
        win = Window()
        with pytest.raises(pygame.error):
            win.initialize(100, 100, "unavailable")
        
        assert not pygame.display.get_init()
        assert not pygame.font.get_init()
        assert win.state is WindowState.UNINITIALIZED
        assert Window._live is None
        
        monkeypatch.undo()
        win.initialize(100, 100, "available")
        try:
            assert win.state is WindowState.RUNNING
        finally:
            win.shutdown()


# =============================================================================
# Frames
# =============================================================================


class TestFrames:
    """begin_frame()/end_frame() pairing and clear() ordering."""
    
    def test_nested_begin_frame(self, window):
        window.begin_frame()
        with pytest.raises(WindowStateError):
            window.begin_frame()
    
    def test_end_frame_without_begin(self, window):
        with pytest.raises(WindowStateError):
            window.end_frame()
    
    def test_draw_outside_frame(self, window):
        with pytest.raises(WindowStateError):
            window.clear(BLUE)
    
    def test_draw_before_clear(self, window):
        with window.frame():
            with pytest.raises(WindowStateError):
                window.draw_rectangle(20, 20, 60, 60, RED)
    
    def test_frame_ends_when_drawing_raises(self, window):
        with pytest.raises(ValueError):
            with window.frame():
                raise ValueError("draw failed")
        # A new frame can start, so the previous one was ended
        window.begin_frame()
        window.end_frame()
    
    def test_clear_required_every_frame(self, window):
        with window.frame():
            window.clear(BLUE)
        with window.frame():
            with pytest.raises(WindowStateError):
                window.draw_rectangle(0, 0, 1, 1, RED)


# =============================================================================
# Drawing
# =============================================================================


class TestDrawing:
    """Pixels on the off-screen canvas."""
    
    def test_rectangle_on_background(self, window):
        """The 60x60 square at (20, 20) is red, everything around it blue."""
        with window.frame():
            window.clear(BLUE)
            window.draw_rectangle(20, 20, 60, 60, RED)
            surface = window.get_surface()
            
            for x, y in [(20, 20), (79, 20), (20, 79), (79, 79), (50, 50)]:
                assert pixel(surface, x, y) == RED
            for x, y in [(19, 19), (80, 80), (19, 50), (50, 19), (80, 50), (50, 80), (150, 150)]:
                assert pixel(surface, x, y) == BLUE
    
    def test_same_pixels_every_frame(self, window):
        snapshots = []
        for _ in range(3):
            with window.frame():
                window.clear(BLUE)
                window.draw_rectangle(20, 20, 60, 60, RED)
                surface = window.get_surface()
                snapshots.append(pygame.image.tostring(surface, "RGB"))
        assert snapshots[0] == snapshots[1] == snapshots[2]
    
    def test_clear_erases_previous_frame(self, window):
        with window.frame():
            window.clear(BLUE)
            window.draw_rectangle(20, 20, 60, 60, RED)
        with window.frame():
            window.clear(BLUE)
            assert pixel(window.get_surface(), 50, 50) == BLUE
    
    def test_text_is_drawn(self, window):
        with window.frame():
            window.clear(BLUE)
            window.draw_text("-sin(x)", 100, 100, 30, WHITE)
            surface = window.get_surface()
            region = [
                pixel(surface, x, y)
                for x in range(100, 200)
                for y in range(100, 130)
            ]
        assert any(color != BLUE for color in region)
        assert pixel(surface, 50, 50) == BLUE
    
    def test_empty_text_draws_nothing(self, window):
        with window.frame():
            window.clear(BLUE)
            window.draw_text("", 100, 100, 30, WHITE)
            assert pixel(window.get_surface(), 100, 100) == BLUE


# =============================================================================
# Close signal
# =============================================================================


class TestCloseSignal:
    """should_close() polling."""
    
    def test_open_by_default(self, window):
        assert window.should_close() is False
    
    def test_quit_event(self, window):
        pygame.event.post(pygame.event.Event(pygame.QUIT))
        assert window.should_close() is True
        # Latched
        assert window.should_close() is True
    
    def test_exit_key(self, window):
        pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE))
        assert window.should_close() is True
    
    def test_other_key_ignored(self, window):
        pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a))
        assert window.should_close() is False
    
    def test_exit_key_disabled(self):
        win = Window(exit_key=None)
        win.initialize(100, 100, "no exit key")
        try:
            pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE))
            assert win.should_close() is False
        finally:
            win.shutdown()
    
    def test_request_close(self, window):
        window.request_close()
        assert window.should_close() is True
    
    def test_target_rate(self, window):
        window.set_target_rate(60)
        assert window.target_fps == 60
        window.set_target_rate(-5)
        assert window.target_fps == 0
