"""
Player input snapshots consumed by the game core once per frame
"""

from dataclasses import dataclass
from dataclasses import field


@dataclass(frozen=True)
class PlayerInput:
    """Which movement directions one player is holding"""

    up: bool = False
    down: bool = False


@dataclass(frozen=True)
class FrameInput:
    """Input for both players for a single frame"""

    left: PlayerInput = field(default_factory=PlayerInput)
    right: PlayerInput = field(default_factory=PlayerInput)
