"""
Pointer input for the human paddle
"""

import pygame

from canvas_pong.core.entities import Paddle


class PointerInput:
    """Maps the pointer vertical position onto a paddle"""

    def __init__(self, paddle: Paddle, surface_top: float = 0.0):
        """
        Args:
            paddle: Paddle driven by the pointer
            surface_top: Offset of the drawing surface within the window
        """
        self.paddle = paddle
        self.surface_top = surface_top

    def on_pointer_move(self, pointer_y: float) -> None:
        """Writes the pointer position as the paddle y, without any clamping"""
        self.paddle.y = pointer_y - self.surface_top

    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Process a pygame event.

        Returns:
            bool: True if the event moved the paddle
        """
        if event.type != pygame.MOUSEMOTION:
            return False
        self.on_pointer_move(event.pos[1])
        return True
