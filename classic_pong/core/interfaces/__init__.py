"""
Interfaces between the game core and its input/render collaborators
"""

from classic_pong.core.interfaces.player import FrameInput
from classic_pong.core.interfaces.player import PlayerInput
from classic_pong.core.interfaces.renderer import RendererProtocol

__all__ = ["FrameInput", "PlayerInput", "RendererProtocol"]
