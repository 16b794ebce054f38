"""
Collision detection for Mini Pong

All checks work on axis-aligned rectangles given as (left, top, width, height).
"""

Rect = tuple[float, float, float, float]


def rects_overlap(a: Rect, b: Rect) -> bool:
    """Checks if two rectangles overlap on both axes (touching edges do not count)"""
    ax, ay, aw, ah = a
    bx, by, bw, bh = b
    return ax < bx + bw and ax + aw > bx and ay < by + bh and ay + ah > by


def ball_hits_wall(rect: Rect, field_height: float) -> bool:
    """Checks if a rectangle crosses the top or the bottom of the field.

    A single condition covers both walls, so a box past both at once still
    counts as one hit.
    """
    _, y, _, height = rect
    return y < 0 or y + height > field_height


def ball_past_right_edge(rect: Rect, field_width: float) -> bool:
    """Checks if a rectangle's right edge crossed the right side of the field"""
    x, _, width, _ = rect
    return x + width > field_width


def ball_past_left_edge(rect: Rect) -> bool:
    """Checks if a rectangle's left edge crossed the left side of the field"""
    return rect[0] < 0
