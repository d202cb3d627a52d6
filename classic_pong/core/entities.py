"""
Classic Pong game entities: ball and paddles
"""

from dataclasses import dataclass


@dataclass
class Vector2D:
    """Simple 2D vector for positions, sizes and velocities"""

    x: float
    y: float

    def __add__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x + other.x, self.y + other.y)

    def __iadd__(self, other: "Vector2D") -> "Vector2D":
        self.x += other.x
        self.y += other.y
        return self

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


class Ball:
    """Game ball"""

    def __init__(self, x: float, y: float, vx: float, vy: float, radius: float):
        self.position = Vector2D(x, y)
        self.velocity = Vector2D(vx, vy)
        self.radius = radius

    def update(self) -> None:
        """Advances the ball by one frame of velocity"""
        self.position += self.velocity

    def bounce_vertical(self) -> None:
        """Vertical bounce (top/bottom walls)"""
        self.velocity.y = -self.velocity.y

    def bounce_horizontal(self) -> None:
        """Horizontal bounce (paddles, goals)"""
        self.velocity.x = -self.velocity.x

    def get_rect(self) -> tuple[float, float, float, float]:
        """Returns the bounding square (x, y, width, height)"""
        return (
            self.position.x - self.radius,
            self.position.y - self.radius,
            self.radius * 2,
            self.radius * 2,
        )


class Paddle:
    """Player paddle, moves vertically only"""

    def __init__(self, x: float, y: float, width: float, height: float, speed: float):
        self.position = Vector2D(x, y)
        self.size = Vector2D(width, height)
        self.speed = speed

    @property
    def width(self) -> float:
        return self.size.x

    @property
    def height(self) -> float:
        return self.size.y

    def move(self, up: bool, down: bool) -> None:
        """Steps the paddle; up and down are independent and may cancel out"""
        if up:
            self.position.y -= self.speed
        if down:
            self.position.y += self.speed

    def get_rect(self) -> tuple[float, float, float, float]:
        """Returns the collision rectangle properties (x, y, width, height)"""
        return (self.position.x, self.position.y, self.size.x, self.size.y)
