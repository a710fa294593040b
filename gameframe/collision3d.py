"""Hit tests and closest-point queries between 3D shapes."""

from __future__ import annotations

import math

from gameframe.collision2d import is_hit_box
from gameframe.mymath import (
    check_acute_angle,
    check_parallel_relation,
    clamp,
    len_seg_on_separate_axis,
)
from gameframe.shapes import OBB, Capsule, PointLineShort, Sphere, TwoLineShort
from gameframe.vector3 import Vector3

_DEGENERATE = 0.001


def plane_collision(pos1: Vector3, w1: float, d1: float, pos2: Vector3, w2: float, d2: float) -> bool:
    """Overlap of two rectangles centred on pos1 and pos2 in the x-z plane."""
    a = pos1 - Vector3(w1 / 2, 0.0, d1 / 2)
    b = pos2 - Vector3(w2 / 2, 0.0, d2 / 2)
    return is_hit_box(a.x, a.z, w1, d1, b.x, b.z, w2, d2)


def aabb_collision(
    pos1: Vector3, w1: float, h1: float, d1: float,
    pos2: Vector3, w2: float, h2: float, d2: float,
) -> bool:
    """Overlap of two axis-aligned boxes given by their centres and sizes."""
    a = pos1 - Vector3(w1 / 2, h1 / 2, d1 / 2)
    b = pos2 - Vector3(w2 / 2, h2 / 2, d2 / 2)
    return is_hit_box(a.x, a.z, w1, d1, b.x, b.z, w2, d2) and is_hit_box(
        a.x, a.y, w1, h1, b.x, b.y, w2, h2
    )


def circle_collision(pos1: Vector3, r1: float, pos2: Vector3, r2: float) -> bool:
    """Overlap of two circles in the x-z plane; y is ignored."""
    dx = pos1.x - pos2.x
    dz = pos1.z - pos2.z
    r = r1 + r2
    return r * r > dx * dx + dz * dz


def cylinder_collision(pos1: Vector3, r1: float, h1: float, pos2: Vector3, r2: float, h2: float) -> bool:
    """Overlap of two upright cylinders standing on pos1 and pos2.

    Vertically, the bottom or top of the second must lie strictly inside the first.
    """
    if not circle_collision(pos1, r1, pos2, r2):
        return False
    bottom, top = pos1.y, pos1.y + h1
    return bottom < pos2.y < top or bottom < pos2.y + h2 < top


def aabb_short_length(box: Vector3, wide: float, height: float, depth: float, point: Vector3) -> float:
    """Shortest distance from a point to an axis-aligned box centred on ``box``."""
    sq_len = 0.0
    for p, c, half in zip(point, box, (wide / 2, height / 2, depth / 2)):
        if p < c - half:
            sq_len += (p - (c - half)) ** 2
        if p > c + half:
            sq_len += (p - (c + half)) ** 2
    return math.sqrt(sq_len)


def _separated(interval: Vector3, axis: Vector3, ra: float, rb: float) -> bool:
    return abs(interval.dot(axis)) > ra + rb


def obb_collision(obb_1: OBB, obb_2: OBB) -> bool:
    """Separating-axis test between two oriented boxes."""
    na = obb_1.directions
    nb = obb_2.directions
    ae = [d * (full / 2) for d, full in zip(na, obb_1.length)]
    be = [d * (full / 2) for d, full in zip(nb, obb_2.length)]
    interval = obb_1.center_pos - obb_2.center_pos

    for axis, half in zip(na, ae):
        if _separated(interval, axis, half.magnitude(), len_seg_on_separate_axis(axis, *be)):
            return False
    for axis, half in zip(nb, be):
        if _separated(interval, axis, len_seg_on_separate_axis(axis, *ae), half.magnitude()):
            return False

    for i, a_dir in enumerate(na):
        a_rest = [v for k, v in enumerate(ae) if k != i]
        for j, b_dir in enumerate(nb):
            b_rest = [v for k, v in enumerate(be) if k != j]
            cross = a_dir.cross(b_dir)
            ra = len_seg_on_separate_axis(cross, *a_rest)
            rb = len_seg_on_separate_axis(cross, *b_rest)
            if _separated(interval, cross, ra, rb):
                return False
    return True


def point_line_short_length(line_start: Vector3, line_end: Vector3, point: Vector3) -> PointLineShort:
    """Closest point to ``point`` on the infinite line through the two points."""
    line = line_end - line_start
    length = line.dot(line)
    coefficient = line.dot(point - line_start) / length if length > 0.0 else 0.0
    hit_point = line_start + line * coefficient
    return PointLineShort(hit_point, (hit_point - point).magnitude(), coefficient)


def point_line_seg_short_length(line_start: Vector3, line_end: Vector3, point: Vector3) -> PointLineShort:
    """Closest point to ``point`` on a segment given in world coordinates.

    The coefficient stays the one of the infinite line. Past the end point the
    distance is measured from the segment's direction vector, as the engine does.
    """
    end = line_end - line_start
    result = point_line_short_length(line_start, line_end, point)
    if not check_acute_angle(point, line_start, line_end):
        result.hit_point = line_start.copy()
        result.length = (line_start - point).magnitude()
    elif not check_acute_angle(point, line_start + end, line_start):
        result.hit_point = line_start + end
        result.length = (end - point).magnitude()
    return result


def two_line_short_point(
    line_1_start: Vector3, line_1_end: Vector3, line_2_start: Vector3, line_2_end: Vector3
) -> TwoLineShort:
    """Points where the common perpendicular of two lines meets them."""
    one_way = line_1_end - line_1_start
    two_way = line_2_end - line_2_start

    if check_parallel_relation(line_1_start, line_1_end, line_2_start, line_2_end):
        pls = point_line_seg_short_length(line_1_start, line_1_end, line_2_start)
        return TwoLineShort(
            line_1_point=line_1_start.copy(),
            line_2_point=pls.hit_point,
            line_1_coefficient=0.0,
            line_2_coefficient=pls.coefficient,
            length=pls.length,
        )

    dot_ow_tw = one_way.dot(two_way)
    dot_os_ow = one_way.dot(one_way)
    dot_ts_tw = two_way.dot(two_way)
    sub = line_1_start - line_2_start

    c1 = (dot_ow_tw * two_way.dot(sub) - dot_ts_tw * one_way.dot(sub)) / (
        dot_os_ow * dot_ts_tw - dot_ow_tw * dot_ow_tw
    )
    p1 = line_1_start + one_way * c1
    c2 = two_way.dot(p1 - line_2_start) / dot_ts_tw
    p2 = line_2_start + two_way * c2
    return TwoLineShort(p1, p2, c1, c2, (p2 - p1).magnitude())


def _in_unit(value: float) -> bool:
    return 0.0 <= value <= 1.0


def two_segment_short_point(
    line_1_start: Vector3, line_1_end: Vector3, line_2_start: Vector3, line_2_end: Vector3
) -> TwoLineShort:
    """Closest points between two segments, treating very short segments as points."""
    one_way = line_1_end - line_1_start
    two_way = line_2_end - line_2_start

    if one_way.dot(one_way) < _DEGENERATE:
        if two_way.dot(two_way) < _DEGENERATE:
            return TwoLineShort(
                line_1_start.copy(), line_2_start.copy(), 0.0, 0.0,
                (line_2_start - line_1_start).magnitude(),
            )
        value = point_line_seg_short_length(line_2_start, line_2_end, line_1_start)
        return TwoLineShort(
            line_1_start.copy(), value.hit_point, 0.0, clamp(0.0, 1.0, value.coefficient), value.length
        )
    if two_way.dot(two_way) < _DEGENERATE:
        value = point_line_seg_short_length(line_1_start, line_1_end, line_2_start)
        return TwoLineShort(
            value.hit_point, line_2_start.copy(), clamp(0.0, 1.0, value.coefficient), 0.0, value.length
        )

    if check_parallel_relation(line_1_start, line_1_end, line_2_start, line_2_end):
        value = point_line_seg_short_length(line_1_start, line_1_end, line_2_start)
        result = TwoLineShort(line_1_start.copy(), value.hit_point, 0.0, value.coefficient, value.length)
        if _in_unit(result.line_2_coefficient):
            return result
    else:
        result = two_line_short_point(line_1_start, line_1_end, line_2_start, line_2_end)
        if _in_unit(result.line_1_coefficient) and _in_unit(result.line_2_coefficient):
            return result

    # The perpendicular falls outside a segment: clamp and drop it again.
    c1 = clamp(0.0, 1.0, result.line_1_coefficient)
    p1 = line_1_start + one_way * c1
    value = point_line_seg_short_length(line_2_start, line_2_end, p1)
    if _in_unit(value.coefficient):
        return TwoLineShort(p1, value.hit_point, c1, value.coefficient, value.length)

    c2 = clamp(0.0, 1.0, value.coefficient)
    p2 = line_2_start + two_way * c2
    value = point_line_seg_short_length(line_1_start, line_1_end, p2)
    if _in_unit(value.coefficient):
        return TwoLineShort(value.hit_point, p2, value.coefficient, c2, value.length)

    c1 = clamp(0.0, 1.0, value.coefficient)
    p1 = line_1_start + one_way * c1
    return TwoLineShort(p1, p2, c1, c2, (p2 - p1).magnitude())


def sphere_col(pos1: Vector3, r1: float, pos2: Vector3, r2: float) -> bool:
    """True if two spheres overlap or touch."""
    diff = pos2 - pos1
    return diff.dot(diff) <= (r1 + r2) * (r1 + r2)


def spheres_collide(sphere1: Sphere, sphere2: Sphere) -> bool:
    return sphere_col(sphere1.center_pos, sphere1.r, sphere2.center_pos, sphere2.r)


def two_capsule_col(
    line_1_start: Vector3, line_1_end: Vector3, r_1: float,
    line_2_start: Vector3, line_2_end: Vector3, r_2: float,
) -> bool:
    value = two_segment_short_point(line_1_start, line_1_end, line_2_start, line_2_end)
    return sphere_col(value.line_1_point, r_1, value.line_2_point, r_2)


def capsules_collide(capsule1: Capsule, capsule2: Capsule) -> bool:
    return two_capsule_col(
        capsule1.down_pos, capsule1.up_pos, capsule1.r,
        capsule2.down_pos, capsule2.up_pos, capsule2.r,
    )


def sphere_capsule_col(
    sphere_pos: Vector3, sphere_r: float,
    capsule_start: Vector3, capsule_end: Vector3, capsule_r: float,
) -> tuple[bool, Vector3]:
    """Whether a sphere and a capsule touch, and the capsule axis point closest to the sphere."""
    value = point_line_seg_short_length(capsule_start, capsule_end, sphere_pos)
    return sphere_col(sphere_pos, sphere_r, value.hit_point, capsule_r), value.hit_point


def point_obb(point: Vector3, obb: OBB) -> Vector3:
    """Point of the box closest to ``point``."""
    offset = point - obb.center_pos
    result = obb.center_pos.copy()
    for direction, full in zip(obb.directions, obb.length):
        half = full / 2
        result = result + direction * clamp(-half, half, offset.dot(direction))
    return result


def obb_sphere_col(obb: OBB, point: Vector3, r: float) -> Vector3 | None:
    """Point of the box closest to the sphere if they touch, otherwise None."""
    pos = point_obb(point, obb)
    diff = pos - point
    return pos if diff.dot(diff) <= r * r else None


def obb_capsule_col(obb: OBB, line_start: Vector3, line_end: Vector3, r: float) -> Vector3 | None:
    """Point of the box nearest the capsule axis if they touch, otherwise None."""
    axis_point = point_line_seg_short_length(line_start, line_end, obb.center_pos).hit_point
    pos = point_obb(axis_point, obb)
    diff = pos - axis_point
    return pos if diff.dot(diff) <= r * r else None