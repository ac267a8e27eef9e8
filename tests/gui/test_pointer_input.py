"""
Tests for the pointer input adapter
"""

import pygame

from canvas_pong.core.entities import Paddle
from canvas_pong.gui.pointer_input import PointerInput


def motion(x: int, y: int) -> pygame.event.Event:
    return pygame.event.Event(pygame.MOUSEMOTION, pos=(x, y), rel=(0, 0), buttons=(0, 0, 0))


class TestPointerInput:
    """Tests for PointerInput class"""

    def test_pointer_move_sets_paddle_y(self) -> None:
        """Test the pointer y becomes the paddle y"""
        paddle = Paddle(485.0, 30.0)
        PointerInput(paddle).on_pointer_move(120.0)
        assert paddle.y == 120.0
        assert paddle.x == 485.0

    def test_surface_offset(self) -> None:
        """Test the position is relative to the surface top"""
        paddle = Paddle(485.0, 30.0)
        PointerInput(paddle, surface_top=40.0).on_pointer_move(100.0)
        assert paddle.y == 60.0

    def test_no_clamping(self) -> None:
        """Test out of range positions are accepted as is"""
        paddle = Paddle(485.0, 30.0)
        adapter = PointerInput(paddle, surface_top=40.0)
        adapter.on_pointer_move(0.0)
        assert paddle.y == -40.0
        adapter.on_pointer_move(5000.0)
        assert paddle.y == 4960.0

    def test_last_write_wins(self) -> None:
        """Test only the latest pointer position is kept"""
        paddle = Paddle(485.0, 30.0)
        adapter = PointerInput(paddle)
        for y in (10, 50, 70):
            adapter.handle_event(motion(3, y))
        assert paddle.y == 70.0

    def test_handle_motion_event(self) -> None:
        """Test mouse motion events move the paddle"""
        paddle = Paddle(485.0, 30.0)
        assert PointerInput(paddle).handle_event(motion(250, 80))
        assert paddle.y == 80.0

    def test_other_events_are_ignored(self) -> None:
        """Test unrelated events leave the paddle alone"""
        paddle = Paddle(485.0, 30.0)
        event = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE)
        assert not PointerInput(paddle).handle_event(event)
        assert paddle.y == 30.0
