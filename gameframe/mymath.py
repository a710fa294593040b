"""Scalar helpers and small vector predicates."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gameframe.vector3 import Vector3

_EFFECTIVE_RANGE = 0.001


def deg_to_rad(deg: float) -> float:
    return deg * math.pi / 180.0


def rad_to_deg(rad: float) -> float:
    return rad * 180.0 / math.pi


def clamp(min_n: float, max_n: float, n: float) -> float:
    """Limit n to the range [min_n, max_n]."""
    if n <= min_n:
        return min_n
    if n >= max_n:
        return max_n
    return n


def lerp(a: float, b: float, f: float) -> float:
    return a + f * (b - a)


def near_zero(val: float, epsilon: float = 0.001) -> bool:
    return abs(val) <= epsilon


def cot(angle: float) -> float:
    return 1.0 / math.tan(angle)


def len_seg_on_separate_axis(sep: Vector3, e1: Vector3, e2: Vector3, e3: Vector3 | None = None) -> float:
    """Length of the projection of up to three half-axes onto a unit separating axis."""
    total = abs(sep.dot(e1)) + abs(sep.dot(e2))
    if e3 is not None and (e3.x != 0 or e3.y != 0 or e3.z != 0):
        total += abs(sep.dot(e3))
    return total


def check_acute_angle(p1: Vector3, p2: Vector3, p3: Vector3) -> bool:
    """True if the angle at p2 between p1 and p3 is at most a right angle."""
    return (p1 - p2).dot(p3 - p2) >= 0.0


def check_parallel_relation(
    line_1_start: Vector3, line_1_end: Vector3, line_2_start: Vector3, line_2_end: Vector3
) -> bool:
    line_1 = line_1_end - line_1_start
    line_2 = line_2_end - line_2_start
    value = line_1.cross(line_2).magnitude()
    return -_EFFECTIVE_RANGE <= value <= _EFFECTIVE_RANGE


def check_vertical_relation(
    line_1_start: Vector3, line_1_end: Vector3, line_2_start: Vector3, line_2_end: Vector3
) -> bool:
    line_1 = line_1_end - line_1_start
    line_2 = line_2_end - line_2_start
    dot = line_1.dot(line_2)
    return -_EFFECTIVE_RANGE <= dot <= _EFFECTIVE_RANGE


def calc_vector_angle(v1: Vector3, v2: Vector3) -> float:
    """Angle between two vectors in radians; 0 if either is zero."""
    sq1 = v1.dot(v1)
    sq2 = v2.dot(v2)
    if sq1 > 0.0 and sq2 > 0.0:
        cos = v1.dot(v2) / (math.sqrt(sq1) * math.sqrt(sq2))
        return math.acos(max(-1.0, min(1.0, cos)))
    return 0.0