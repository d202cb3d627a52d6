"""
Renderer protocol - defines interface for rendering backends
"""

from typing import TYPE_CHECKING
from typing import Protocol

if TYPE_CHECKING:
    from classic_pong.core.physics import GameState


class RendererProtocol(Protocol):
    """
    Protocol for renderer implementations.

    The frame loop only needs to hand a finished GameState to something that
    draws it, so a headless or terminal backend can stand in for pygame.
    """

    def render_frame(self, state: "GameState") -> None:
        """
        Render a single frame of the game.

        Args:
            state: Game state after this frame's update
        """
        ...

    def present(self) -> None:
        """Make the rendered frame visible"""
        ...

    def update(self, fps: int | None = None) -> None:
        """Wait out the rest of the frame at the target rate"""
        ...

    def cleanup(self) -> None:
        """Clean up renderer resources"""
        ...
