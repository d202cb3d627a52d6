"""
Physics system for Classic Pong
"""

import logging
from typing import Any

import numpy as np

from classic_pong.core.collision import check_ball_walls
from classic_pong.core.collision import clamp
from classic_pong.core.collision import hits_horizontal_wall
from classic_pong.core.collision import paddle_collision
from classic_pong.core.entities import Ball
from classic_pong.core.entities import Paddle
from classic_pong.core.interfaces import FrameInput
from classic_pong.utils.config import GameConfig
from classic_pong.utils.config import game_config

logger = logging.getLogger(__name__)


class GameState:
    """Ball, both paddles and the score, advanced one frame at a time"""

    def __init__(
        self, config: GameConfig | None = None, rng: np.random.Generator | None = None
    ) -> None:
        self.config = config or game_config
        self.field_width = self.config.FIELD_WIDTH
        self.field_height = self.config.FIELD_HEIGHT
        self.rng = rng if rng is not None else np.random.default_rng()

        self.ball = Ball(
            self.field_width / 2,
            self.field_height / 2,
            self.config.BALL_VELOCITY_X,
            self.config.BALL_VELOCITY_Y,
            self.config.BALL_RADIUS,
        )
        # Paddles start with their top edge at mid-height
        self.paddle_left = self._make_paddle(self.config.PADDLE_MARGIN)
        self.paddle_right = self._make_paddle(
            self.field_width - self.config.PADDLE_MARGIN - self.config.PADDLE_WIDTH
        )
        self.score: tuple[int, int] = (0, 0)

    def _make_paddle(self, x: float) -> Paddle:
        return Paddle(
            x,
            self.field_height / 2,
            self.config.PADDLE_WIDTH,
            self.config.PADDLE_HEIGHT,
            self.config.PADDLE_SPEED,
        )

    def update(self, frame_input: FrameInput) -> None:
        """Advances the game by one frame"""
        self.paddle_left.move(frame_input.left.up, frame_input.left.down)
        self.paddle_right.move(frame_input.right.up, frame_input.right.down)

        max_y = self.config.paddle_max_y
        for paddle in (self.paddle_left, self.paddle_right):
            paddle.position.y = clamp(paddle.position.y, 0.0, max_y)

        self.ball.update()

        # Flips on every overlapping frame, not only on entry
        if self.paddle_collision(self.paddle_left) or self.paddle_collision(self.paddle_right):
            self.ball.bounce_horizontal()

        self.wall_collision()

    def paddle_collision(self, paddle: Paddle) -> bool:
        """Checks whether the ball currently overlaps the given paddle"""
        return paddle_collision(self.ball, paddle)

    def wall_collision(self) -> None:
        """Reflects off the top/bottom edges and handles goals"""
        if hits_horizontal_wall(self.ball, self.field_height):
            self.ball.bounce_vertical()

        side = check_ball_walls(self.ball, self.field_width, self.field_height)
        if side == "right_goal":
            self.score = (self.score[0] + 1, self.score[1])
            self._reset_ball_after_goal()
            logger.info("Left player scores: %d - %d", *self.score)
        elif side == "left_goal":
            self.score = (self.score[0], self.score[1] + 1)
            self._reset_ball_after_goal()
            logger.info("Right player scores: %d - %d", *self.score)

    def _reset_ball_after_goal(self) -> None:
        """Re-serves from the center line at a random height, reversing direction"""
        self.ball.position.x = self.field_width / 2
        self.ball.bounce_horizontal()
        self.ball.position.y = float(self.rng.integers(0, self.field_height, endpoint=True))

    def get_game_state(self) -> dict[str, Any]:
        """Returns a plain snapshot of the state for logging and debugging"""
        return {
            "ball_position": self.ball.position.to_tuple(),
            "ball_velocity": self.ball.velocity.to_tuple(),
            "ball_radius": self.ball.radius,
            "paddle_left_position": self.paddle_left.position.to_tuple(),
            "paddle_right_position": self.paddle_right.position.to_tuple(),
            "paddle_size": self.paddle_left.size.to_tuple(),
            "score": self.score,
            "field_bounds": (0, self.field_width, 0, self.field_height),
        }
