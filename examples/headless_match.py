"""
Example of a Canvas Pong match played without a window

The right paddle is driven through the pointer adapter by a scripted "mouse"
that tracks the ball center, so the whole match runs on the numpy renderer.
"""

from canvas_pong.core.headless import ArrayRenderer
from canvas_pong.core.match import Match
from canvas_pong.gui.pointer_input import PointerInput


def run_headless_match(max_ticks: int = 100000) -> Match:
    """Play a match until it ends or max_ticks is reached"""
    match = Match()
    renderer = ArrayRenderer(match.width, match.height)
    pointer = PointerInput(match.right_paddle)

    while not match.is_game_over() and match.tick_count < max_ticks:
        ball_center = match.ball.rect.y + match.ball.rect.height / 2
        pointer.on_pointer_move(ball_center - match.right_paddle.rect.height / 2)
        match.tick(renderer)

    return match


if __name__ == "__main__":
    print("=== CANVAS PONG - HEADLESS MATCH ===")
    result = run_headless_match()
    left, right = result.scores.as_tuple()
    print(f"Ticks played: {result.tick_count}")
    print(f"Final score: {left} - {right}")
    if result.is_game_over():
        print(f"Player {result.get_winner()} wins!")
    else:
        print("Match stopped before a winner was found")
