"""
Canvas Pong game entities: ball, paddles, scores
"""

from canvas_pong.core.geometry import Rect
from canvas_pong.utils.config import game_config


class Paddle:
    """Player paddle, only its y coordinate moves"""

    def __init__(self, x: float, y: float):
        self.rect = Rect(x, y, game_config.PADDLE_WIDTH, game_config.PADDLE_HEIGHT)

    @classmethod
    def left(cls) -> "Paddle":
        """Paddle sitting PADDLE_OFFSET away from the left wall"""
        return cls(game_config.PADDLE_OFFSET, game_config.LEFT_PADDLE_Y)

    @classmethod
    def right(cls, arena_width: float) -> "Paddle":
        """Paddle whose right edge sits PADDLE_OFFSET away from the right wall"""
        x = arena_width - game_config.PADDLE_OFFSET - game_config.PADDLE_WIDTH
        return cls(x, game_config.RIGHT_PADDLE_Y)

    @property
    def x(self) -> float:
        return self.rect.x

    @property
    def y(self) -> float:
        return self.rect.y

    @y.setter
    def y(self, value: float) -> None:
        self.rect.y = value


class Ball:
    """Game ball"""

    def __init__(self) -> None:
        # Position is a placeholder until reset() serves the ball
        self.rect = Rect(0.0, 0.0, game_config.BALL_SIZE, game_config.BALL_SIZE)
        self.x_speed = 0.0
        self.y_speed = 0.0
        self.reset()

    def reset(self) -> None:
        """Puts the ball back on the serve point with the serve velocity"""
        self.rect.x = game_config.SERVE_X
        self.rect.y = game_config.SERVE_Y
        self.x_speed = game_config.SERVE_X_SPEED
        self.y_speed = game_config.SERVE_Y_SPEED

    def advance(self) -> None:
        """Moves the ball by one tick of its velocity"""
        self.rect.x += self.x_speed
        self.rect.y += self.y_speed

    def adjust_angle(self, distance_from_top: float, distance_from_bottom: float) -> None:
        """
        Steers the ball according to where it hit the paddle.

        Args:
            distance_from_top: ball top minus paddle top, negative when the
                ball sticks out above the paddle
            distance_from_bottom: paddle bottom minus ball bottom, negative when
                the ball sticks out below the paddle
        """
        if distance_from_top < 0:
            self.y_speed -= game_config.ANGLE_ADJUSTMENT
        elif distance_from_bottom < 0:
            self.y_speed += game_config.ANGLE_ADJUSTMENT
        else:
            return

        max_y_speed = game_config.MAX_Y_SPEED
        if max_y_speed is not None:
            self.y_speed = max(-max_y_speed, min(max_y_speed, self.y_speed))

    def check_paddle_collision(self, paddle: Paddle, x_speed_after_bounce: float) -> bool:
        """
        Bounces the ball off the paddle if their boxes overlap.

        The caller picks the sign of x_speed_after_bounce so the ball leaves
        away from the paddle.

        Returns:
            bool: True if a collision occurred
        """
        ball_box = self.rect.bounding_box()
        paddle_box = paddle.rect.bounding_box()

        if not ball_box.overlaps(paddle_box):
            return False

        distance_from_top = ball_box.top - paddle_box.top
        distance_from_bottom = paddle_box.bottom - ball_box.bottom
        self.adjust_angle(distance_from_top, distance_from_bottom)
        self.x_speed = x_speed_after_bounce
        return True

    def check_wall_collision(
        self, arena_width: float, arena_height: float, scores: "Scores"
    ) -> list[str]:
        """
        Handles goals and top/bottom bounces.

        All checks use the box computed before any reset, so they are
        independent of each other.

        Returns:
            list[str]: fired events among "left_goal", "right_goal", "top", "bottom".
                A ball outside both horizontal walls reports both, with a single flip.
        """
        ball_box = self.rect.bounding_box()
        events = []

        # Ball left through the left wall: point for the right player
        if ball_box.left < 0:
            scores.award_right()
            self.reset()
            events.append("left_goal")

        if ball_box.right > arena_width:
            scores.award_left()
            self.reset()
            events.append("right_goal")

        # No position correction, the next advance() brings the ball back in
        if ball_box.top < 0 or ball_box.bottom > arena_height:
            self.y_speed = -self.y_speed
            if ball_box.top < 0:
                events.append("top")
            if ball_box.bottom > arena_height:
                events.append("bottom")

        return events

    def velocity(self) -> tuple[float, float]:
        return (self.x_speed, self.y_speed)


class Scores:
    """Points of both players, only ever incremented"""

    def __init__(self) -> None:
        self._left_score = 0
        self._right_score = 0

    @property
    def left_score(self) -> int:
        return self._left_score

    @property
    def right_score(self) -> int:
        return self._right_score

    def award_left(self) -> None:
        self._left_score += 1

    def award_right(self) -> None:
        self._right_score += 1

    def has_winner(self, winning_score: int | None = None) -> bool:
        """Checks if one of the players reached the winning score"""
        return self.winner(winning_score) != 0

    def winner(self, winning_score: int | None = None) -> int:
        """Returns the winner (1 for left, 2 for right), or 0 if no winner"""
        if winning_score is None:
            winning_score = game_config.WINNING_SCORE
        if self._left_score >= winning_score:
            return 1
        elif self._right_score >= winning_score:
            return 2
        return 0

    def as_tuple(self) -> tuple[int, int]:
        return (self._left_score, self._right_score)

    def __repr__(self) -> str:
        return f"Scores(left={self._left_score}, right={self._right_score})"
