"""
Tests for the numpy frame buffer renderer
"""

import numpy as np

from canvas_pong.core.entities import Scores
from canvas_pong.core.geometry import Rect
from canvas_pong.core.headless import ArrayRenderer


class Box:
    """Minimal drawable"""

    def __init__(self, x: float, y: float, width: float, height: float):
        self.rect = Rect(x, y, width, height)


class TestArrayRenderer:
    """Tests for ArrayRenderer class"""

    def test_initial_frame_is_background(self) -> None:
        """Test a new frame is filled with the background color"""
        renderer = ArrayRenderer(20, 10)
        assert renderer.frame.shape == (10, 20, 3)
        assert renderer.frame.dtype == np.uint8
        assert renderer.lit_pixels() == 0

    def test_draw_fills_rectangles(self) -> None:
        """Test each entity becomes a filled rectangle"""
        renderer = ArrayRenderer(20, 10)
        renderer.draw([Box(2, 3, 4, 2), Box(10, 0, 1, 10)])

        assert renderer.lit_pixels() == 8 + 10
        assert (renderer.frame[3:5, 2:6] == 255).all()
        assert (renderer.frame[5, 2:6] == 0).all()

    def test_draw_clears_previous_frame(self) -> None:
        """Test draw starts from a clean surface"""
        renderer = ArrayRenderer(20, 10)
        renderer.draw([Box(0, 0, 20, 10)])
        renderer.draw([Box(0, 0, 1, 1)])
        assert renderer.lit_pixels() == 1

    def test_entities_outside_are_clipped(self) -> None:
        """Test entities sticking out of the surface are clipped"""
        renderer = ArrayRenderer(20, 10)
        renderer.draw([Box(-3, -3, 5, 5), Box(100, 100, 5, 5)])
        assert renderer.lit_pixels() == 4

    def test_scores_and_game_over_are_recorded(self) -> None:
        """Test text draw calls are recorded"""
        renderer = ArrayRenderer(20, 10)
        scores = Scores()
        scores.award_left()

        renderer.draw_scores(scores)
        assert renderer.scores == (1, 0)
        assert not renderer.game_over_shown

        renderer.draw_game_over()
        assert renderer.game_over_shown

    def test_keep_frames(self) -> None:
        """Test presented frames are copied"""
        renderer = ArrayRenderer(20, 10, keep_frames=True)
        renderer.draw([Box(0, 0, 1, 1)])
        renderer.present()
        renderer.draw([])
        renderer.present()

        assert renderer.present_calls == 2
        assert len(renderer.frames) == 2
        assert int(renderer.frames[0].any(axis=-1).sum()) == 1
        assert not renderer.frames[1].any()

    def test_fractional_edges_are_rounded(self) -> None:
        """Test fractional positions light the pixels of the rounded edges"""
        renderer = ArrayRenderer(20, 10)
        renderer.draw([Box(2.6, 0, 5, 1), Box(2.5, 2, 5, 1)])

        assert renderer.frame[0, 3:8].all()
        assert not renderer.frame[0, 2].any()
        assert not renderer.frame[0, 8].any()
        # round(2.5) == 2 and round(7.5) == 8
        assert renderer.frame[2, 2:8].all()
        assert not renderer.frame[2, 8].any()
