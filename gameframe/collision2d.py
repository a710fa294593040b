"""Hit tests between 2D boxes and circles."""

from __future__ import annotations

from gameframe.shapes import Rect


def is_hit_box(
    x1: float, y1: float, w1: float, h1: float,
    x2: float, y2: float, w2: float, h2: float,
) -> bool:
    """True if two boxes (top-left corner and size) overlap; touching edges do not count."""
    return x1 < x2 + w2 and x2 < x1 + w1 and y1 < y2 + h2 and y2 < y1 + h1


def is_hit_rect(rect1: Rect, rect2: Rect) -> bool:
    return is_hit_box(rect1.x, rect1.y, rect1.w, rect1.h, rect2.x, rect2.y, rect2.w, rect2.h)


def is_hit_circle(x1: float, y1: float, r1: float, x2: float, y2: float, r2: float) -> bool:
    """True if two circles overlap; touching circles do not count."""
    w = x1 - x2
    h = y1 - y2
    r = r1 + r2
    return r * r > w * w + h * h


def is_hit_circle_and_box(
    box_x: float, box_y: float, box_w: float, box_h: float,
    circle_x: float, circle_y: float, circle_r: float,
) -> bool:
    """Circle against box test.

    Outside the box's rows, the distance is measured to the box's top-left corner
    and its square is truncated to an integer before being compared.
    """
    if not (
        circle_x > box_x - circle_r
        and circle_y > box_y - circle_r
        and circle_x < box_x + box_w + circle_r
        and circle_y < box_y + box_h + circle_r
    ):
        return False

    radius_sq = circle_r * circle_r
    corner_sq = int((box_x - circle_x) ** 2 + (box_y - circle_y) ** 2)
    beside_corner = circle_x != box_x and (circle_y < box_y or circle_y > box_y + box_h)
    return not (beside_corner and corner_sq > radius_sq)