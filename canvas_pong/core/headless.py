"""
Headless renderer drawing into a numpy frame buffer
"""

from collections.abc import Sequence

import numpy as np
import numpy.typing as npt

from canvas_pong.core.entities import Scores
from canvas_pong.core.interfaces.renderer import Drawable
from canvas_pong.utils.config import game_config


class ArrayRenderer:
    """
    Renderer without a display.

    Rectangles are rasterized into an ``(height, width, 3)`` uint8 array using
    the configured colors. Text is not rasterized: the last drawn scores and the
    game over flag are kept as attributes instead. Every ``present`` appends a
    copy of the frame to ``frames`` when ``keep_frames`` is set.
    """

    def __init__(
        self, width: int | None = None, height: int | None = None, keep_frames: bool = False
    ):
        self.width = width or game_config.ARENA_WIDTH
        self.height = height or game_config.ARENA_HEIGHT
        self.keep_frames = keep_frames

        self.background_color = np.array(game_config.BACKGROUND_COLOR, dtype=np.uint8)
        self.foreground_color = np.array(game_config.FOREGROUND_COLOR, dtype=np.uint8)

        self.frame: npt.NDArray[np.uint8] = np.zeros((self.height, self.width, 3), dtype=np.uint8)
        self.frame[:] = self.background_color
        self.frames: list[npt.NDArray[np.uint8]] = []

        self.scores: tuple[int, int] | None = None
        self.game_over_shown = False
        self.draw_calls = 0
        self.present_calls = 0

    def draw(self, entities: Sequence[Drawable]) -> None:
        """Clear the frame and fill each entity rectangle"""
        self.frame[:] = self.background_color
        for entity in entities:
            self._fill_rect(*entity.rect.to_tuple())
        self.draw_calls += 1

    def _fill_rect(self, x: float, y: float, width: float, height: float) -> None:
        # Clip to the frame, entities are allowed to stick out of the arena
        left = max(0, int(round(x)))
        top = max(0, int(round(y)))
        right = min(self.width, int(round(x + width)))
        bottom = min(self.height, int(round(y + height)))
        if left < right and top < bottom:
            self.frame[top:bottom, left:right] = self.foreground_color

    def draw_scores(self, scores: Scores) -> None:
        self.scores = scores.as_tuple()

    def draw_game_over(self) -> None:
        self.game_over_shown = True

    def present(self) -> None:
        self.present_calls += 1
        if self.keep_frames:
            self.frames.append(self.frame.copy())

    def lit_pixels(self) -> int:
        """Number of pixels drawn with the foreground color"""
        return int(np.all(self.frame == self.foreground_color, axis=-1).sum())
