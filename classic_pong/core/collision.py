"""
Collision detection for Classic Pong
"""

from classic_pong.core.entities import Ball, Paddle


def clamp(value: float, minimum: float, maximum: float) -> float:
    """Clamps a value into [minimum, maximum]"""
    return min(max(value, minimum), maximum)


def rects_overlap(
    rect_a: tuple[float, float, float, float], rect_b: tuple[float, float, float, float]
) -> bool:
    """Strict axis-aligned overlap test, touching edges do not count"""
    ax, ay, aw, ah = rect_a
    bx, by, bw, bh = rect_b
    return ax < bx + bw and ax + aw > bx and ay < by + bh and ay + ah > by


def paddle_collision(ball: Ball, paddle: Paddle) -> bool:
    """Checks whether the ball's bounding square overlaps the paddle"""
    return rects_overlap(ball.get_rect(), paddle.get_rect())


def hits_horizontal_wall(ball: Ball, field_height: float) -> bool:
    """True when the ball is at or past the top or bottom edge"""
    return ball.position.y >= field_height or ball.position.y <= 0


def check_ball_walls(ball: Ball, field_width: float, field_height: float) -> str | None:
    """
    Classifies the ball position against the field edges.

    Goals are checked on the truncated horizontal position, walls on the raw
    vertical position. A goal takes priority over a wall in the result.

    Returns:
        "right_goal", "left_goal", "top", "bottom" or None
    """
    x = int(ball.position.x)
    if x >= field_width:
        return "right_goal"
    if x <= 0:
        return "left_goal"

    if hits_horizontal_wall(ball, field_height):
        return "top" if ball.position.y <= 0 else "bottom"
    return None
