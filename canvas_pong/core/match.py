"""
Match orchestration: one ball, two paddles, a scoreboard and the tick sequence
"""

import logging
from enum import Enum
from typing import Any

from canvas_pong.core.computer import follow_ball
from canvas_pong.core.entities import Ball, Paddle, Scores
from canvas_pong.core.interfaces.renderer import Drawable, RendererProtocol
from canvas_pong.utils.config import game_config

logger = logging.getLogger(__name__)


class MatchState(Enum):
    """Match lifecycle, OVER is terminal"""

    PLAYING = "playing"
    OVER = "over"


def _empty_events() -> dict[str, Any]:
    return {"paddle_hits": [], "wall_bounces": [], "goals": [], "game_over": False}


class Match:
    """Single match between the computer (left) and the pointer (right)"""

    def __init__(self, width: int | None = None, height: int | None = None):
        self.width = width if width is not None else game_config.ARENA_WIDTH
        self.height = height if height is not None else game_config.ARENA_HEIGHT

        self.ball = Ball()
        self.left_paddle = Paddle.left()
        self.right_paddle = Paddle.right(self.width)
        self.scores = Scores()

        self.state = MatchState.PLAYING
        self.tick_count = 0

    def entities(self) -> list[Drawable]:
        """Entities in drawing order"""
        return [self.ball, self.left_paddle, self.right_paddle]

    def render(self, renderer: RendererProtocol) -> None:
        """Draws the entities and the scoreboard"""
        renderer.draw(self.entities())
        renderer.draw_scores(self.scores)

    def tick(self, renderer: RendererProtocol) -> dict[str, Any]:
        """
        Runs one step of the match.

        The frame is rendered before the update, so what is on screen always
        lags one tick behind the resolved state.

        Args:
            renderer: Where this tick's frame is drawn

        Returns:
            Dict with the events that occurred during the tick
        """
        events = _empty_events()
        if self.state is MatchState.OVER:
            return events

        self.render(renderer)
        renderer.present()

        self.ball.advance()
        follow_ball(self.left_paddle, self.ball)

        if self.ball.check_paddle_collision(self.left_paddle, abs(self.ball.x_speed)):
            events["paddle_hits"].append({"player": 1})
        if self.ball.check_paddle_collision(self.right_paddle, -abs(self.ball.x_speed)):
            events["paddle_hits"].append({"player": 2})

        for wall in self.ball.check_wall_collision(self.width, self.height, self.scores):
            if wall == "left_goal":
                events["goals"].append({"player": 2, "score": self.scores.as_tuple()})
            elif wall == "right_goal":
                events["goals"].append({"player": 1, "score": self.scores.as_tuple()})
            else:
                events["wall_bounces"].append(wall)

        for goal in events["goals"]:
            logger.debug("Player %d scores, score is now %s", goal["player"], goal["score"])

        self.tick_count += 1

        if self.scores.has_winner():
            self._finish(renderer)
            events["game_over"] = True

        return events

    def _finish(self, renderer: RendererProtocol) -> None:
        """Enters the terminal state and draws the last frame with its overlay"""
        self.state = MatchState.OVER
        logger.info(
            "Game over after %d ticks: player %d wins %d - %d",
            self.tick_count,
            self.get_winner(),
            *self.scores.as_tuple(),
        )
        self.render(renderer)
        renderer.draw_game_over()
        renderer.present()

    def is_game_over(self) -> bool:
        """Checks if the match is over"""
        return self.state is MatchState.OVER

    def get_winner(self) -> int:
        """Returns the winner (1 for left, 2 for right), or 0 if no winner"""
        return self.scores.winner()

    def get_game_state(self) -> dict[str, Any]:
        """Returns the complete match state"""
        return {
            "ball_position": (self.ball.rect.x, self.ball.rect.y),
            "ball_velocity": self.ball.velocity(),
            "left_paddle_position": (self.left_paddle.x, self.left_paddle.y),
            "right_paddle_position": (self.right_paddle.x, self.right_paddle.y),
            "score": self.scores.as_tuple(),
            "state": self.state.value,
            "tick_count": self.tick_count,
            "arena_size": (self.width, self.height),
        }
