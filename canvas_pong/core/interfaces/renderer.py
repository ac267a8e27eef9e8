"""
Renderer protocol - defines interface for different rendering backends
"""

from collections.abc import Sequence
from typing import Protocol

from canvas_pong.core.entities import Scores
from canvas_pong.core.geometry import Rect


class Drawable(Protocol):
    """Anything drawn as a filled rectangle"""

    rect: Rect


class RendererProtocol(Protocol):
    """
    Protocol for renderer implementations.

    Enables multiple rendering backends: Pygame window, headless frame buffer, etc.
    A frame is drawn with ``draw``, optionally ``draw_scores`` and
    ``draw_game_over``, then published with ``present``.
    """

    def draw(self, entities: Sequence[Drawable]) -> None:
        """
        Clear the surface and draw each entity as a filled rectangle.

        Args:
            entities: Entities in drawing order
        """
        ...

    def draw_scores(self, scores: Scores) -> None:
        """Draw the left score left-aligned and the right score right-aligned"""
        ...

    def draw_game_over(self) -> None:
        """Draw the centered game over message"""
        ...

    def present(self) -> None:
        """Publish the current frame"""
        ...
