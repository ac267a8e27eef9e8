"""
PyGame renderer for Canvas Pong game
"""

from collections.abc import Sequence

import pygame

from canvas_pong.core.entities import Scores
from canvas_pong.core.interfaces.renderer import Drawable
from canvas_pong.utils.config import game_config


class PygameRenderer:
    """PyGame-based renderer for Canvas Pong"""

    def __init__(self, width: int | None = None, height: int | None = None):
        """Initialize the PyGame renderer"""
        self.width = width or game_config.ARENA_WIDTH
        self.height = height or game_config.ARENA_HEIGHT

        # Initialize PyGame
        pygame.init()

        # Create the display
        self.screen = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption("Canvas Pong")

        self.background_color: tuple[int, int, int] = game_config.BACKGROUND_COLOR
        self.foreground_color: tuple[int, int, int] = game_config.FOREGROUND_COLOR

        # SysFont falls back to the default pygame font when the family is missing
        self.font = pygame.font.SysFont(game_config.FONT_NAME, game_config.FONT_SIZE)
        self.score_margin = game_config.SCORE_MARGIN

    def clear_screen(self) -> None:
        """Clear the screen with background color"""
        self.screen.fill(self.background_color)

    def draw(self, entities: Sequence[Drawable]) -> None:
        """Clear the screen and draw each entity as a filled rectangle"""
        self.clear_screen()
        for entity in entities:
            x, y, width, height = entity.rect.to_tuple()
            # Edges are rounded like ArrayRenderer so both rasterize the same pixels
            left, top = int(round(x)), int(round(y))
            right, bottom = int(round(x + width)), int(round(y + height))
            pygame.draw.rect(
                self.screen,
                self.foreground_color,
                pygame.Rect(left, top, right - left, bottom - top),
            )

    def draw_scores(self, scores: Scores) -> None:
        """Draw the left score left-aligned and the right score right-aligned"""
        left_surface = self.font.render(str(scores.left_score), True, self.foreground_color)
        left_rect = left_surface.get_rect()
        left_rect.bottomleft = (self.score_margin, self.score_margin)
        self.screen.blit(left_surface, left_rect)

        right_surface = self.font.render(str(scores.right_score), True, self.foreground_color)
        right_rect = right_surface.get_rect()
        right_rect.bottomright = (self.width - self.score_margin, self.score_margin)
        self.screen.blit(right_surface, right_rect)

    def draw_game_over(self) -> None:
        """Draw the game over message at the center of the screen"""
        text_surface = self.font.render("GAME OVER", True, self.foreground_color)
        text_rect = text_surface.get_rect()
        text_rect.center = (self.width // 2, self.height // 2)
        self.screen.blit(text_surface, text_rect)

    def present(self) -> None:
        """Present the rendered frame to the screen"""
        pygame.display.flip()

    def cleanup(self) -> None:
        """Clean up PyGame resources"""
        pygame.quit()
