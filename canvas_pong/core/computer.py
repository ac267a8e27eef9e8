"""
Scripted opponent for Canvas Pong
"""

from canvas_pong.core.entities import Ball, Paddle
from canvas_pong.utils.config import game_config


def follow_ball(paddle: Paddle, ball: Ball, step: float | None = None) -> float:
    """
    Moves the paddle one step towards the ball.

    The paddle only moves when the ball sticks out above or below it, and never
    by more than ``step`` per tick.

    Returns:
        float: vertical displacement applied to the paddle
    """
    if step is None:
        step = game_config.COMPUTER_STEP

    ball_box = ball.rect.bounding_box()
    paddle_box = paddle.rect.bounding_box()

    if ball_box.top < paddle_box.top:
        delta = -step
    elif ball_box.bottom > paddle_box.bottom:
        delta = step
    else:
        return 0.0

    paddle.y += delta
    return delta
