"""Pytest configuration for headless pygame tests."""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import numpy as np  # noqa: E402
import pygame  # noqa: E402
import pytest  # noqa: E402

from classic_pong.core.physics import GameState  # noqa: E402


@pytest.fixture
def game_state() -> GameState:
    """Game state with a seeded random source"""
    return GameState(rng=np.random.default_rng(1234))


@pytest.fixture
def pygame_display():
    """Initialized pygame with a small dummy window, torn down afterwards"""
    pygame.init()
    screen = pygame.display.set_mode((1, 1))
    yield screen
    pygame.quit()
