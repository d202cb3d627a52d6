"""
Main game application with PyGame GUI
"""

import logging

import pygame

from classic_pong.core.interfaces import RendererProtocol
from classic_pong.core.physics import GameState
from classic_pong.gui.human_player import InputManager
from classic_pong.gui.pygame_renderer import PygameRenderer
from classic_pong.utils.config import display_config

logger = logging.getLogger(__name__)


class PongApp:
    """Owns the frame loop: events, input, update, render, tick"""

    def __init__(
        self,
        game_state: GameState | None = None,
        renderer: RendererProtocol | None = None,
        input_manager: InputManager | None = None,
    ) -> None:
        self.renderer = renderer or PygameRenderer()
        self.game_state = game_state or GameState()
        self.input_manager = input_manager or InputManager()
        self.running = True
        self.frame_count = 0

    def handle_event(self, event: pygame.event.Event) -> None:
        """Stops the loop on window close or Escape"""
        if event.type == pygame.QUIT:
            logger.debug("Window close requested")
            self.running = False
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            logger.debug("Escape pressed")
            self.running = False

    def step(self) -> None:
        """Runs a single frame"""
        for event in pygame.event.get():
            self.handle_event(event)
        if not self.running:
            return

        self.game_state.update(self.input_manager.poll())

        self.renderer.render_frame(self.game_state)
        self.renderer.present()
        self.renderer.update(display_config.FPS)
        self.frame_count += 1

    def run(self, max_frames: int | None = None) -> tuple[int, int]:
        """
        Runs until the window is closed.

        Args:
            max_frames: Optional frame limit, mostly for headless runs

        Returns:
            The final score
        """
        logger.info("Starting Pong at %d FPS", display_config.FPS)
        try:
            while self.running:
                if max_frames is not None and self.frame_count >= max_frames:
                    break
                self.step()
        finally:
            self.renderer.cleanup()

        logger.info(
            "Pong stopped after %d frames, final score %s",
            self.frame_count,
            self.game_state.score,
        )
        logger.debug("Final state: %s", self.game_state.get_game_state())
        return self.game_state.score

