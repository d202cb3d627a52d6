"""
PyGame renderer for Classic Pong
"""

import pygame

from classic_pong.core.entities import Ball
from classic_pong.core.entities import Paddle
from classic_pong.core.physics import GameState
from classic_pong.utils.config import DisplayConfig
from classic_pong.utils.config import display_config
from classic_pong.utils.config import game_config


def format_score(score: tuple[int, int]) -> str:
    """Formats the score line shown in the middle of the screen"""
    return f"{score[0]} - {score[1]}"


class PygameRenderer:
    """PyGame-based renderer for Classic Pong"""

    def __init__(
        self,
        width: int | None = None,
        height: int | None = None,
        config: DisplayConfig | None = None,
    ):
        """Initialize the PyGame renderer"""
        self.width = width or game_config.FIELD_WIDTH
        self.height = height or game_config.FIELD_HEIGHT
        self.config = config or display_config

        pygame.init()

        self.screen = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption(self.config.TITLE)

        # Clock for controlling frame rate
        self.clock = pygame.time.Clock()

        self.background_color: tuple[int, int, int] = self.config.BACKGROUND_COLOR
        self.entity_color: tuple[int, int, int] = self.config.ENTITY_COLOR
        self.font_color: tuple[int, int, int] = self.config.FONT_COLOR
        self.font_size = self.config.FONT_SIZE
        self.font = pygame.font.Font(None, self.font_size)

    def clear_screen(self) -> None:
        """Clear the screen with background color"""
        self.screen.fill(self.background_color)

    def draw_ball(self, ball: Ball) -> None:
        """Draw the game ball"""
        pos = (int(ball.position.x), int(ball.position.y))
        pygame.draw.circle(self.screen, self.entity_color, pos, ball.radius)

    def draw_paddle(self, paddle: Paddle) -> None:
        """Draw a player paddle"""
        rect = pygame.Rect(
            int(paddle.position.x), int(paddle.position.y), int(paddle.width), int(paddle.height)
        )
        pygame.draw.rect(self.screen, self.entity_color, rect)

    def draw_score(self, score: tuple[int, int]) -> None:
        """Draw the score, left of center by one font size, at mid height"""
        text_surface = self.font.render(format_score(score), True, self.font_color)
        self.screen.blit(text_surface, (self.width // 2 - self.font_size, self.height // 2))

    def render_frame(self, state: GameState) -> None:
        """Render the complete game state"""
        self.clear_screen()
        self.draw_paddle(state.paddle_left)
        self.draw_paddle(state.paddle_right)
        self.draw_ball(state.ball)
        self.draw_score(state.score)

    def present(self) -> None:
        """Present the rendered frame"""
        pygame.display.flip()

    def update(self, fps: int | None = None) -> None:
        """Maintain frame rate"""
        self.clock.tick(fps or self.config.FPS)

    def cleanup(self) -> None:
        """Clean up PyGame resources"""
        pygame.quit()
