"""Plain geometric shapes and result records used by the collision tests."""

from __future__ import annotations

from dataclasses import dataclass, field

from gameframe.vector3 import Vector3


@dataclass
class Rect:
    """Axis-aligned rectangle given by its top-left corner and size."""

    x: float = 0.0
    y: float = 0.0
    w: float = 0.0
    h: float = 0.0


@dataclass
class RectPlus(Rect):
    """Rectangle with a centre point and a facing direction."""

    cx: float = 0.0
    cy: float = 0.0
    direction: float = 0.0


@dataclass
class Circle:
    x: float = 0.0
    y: float = 0.0
    r: float = 0.0


@dataclass
class PointLineShort:
    """Closest point on a line to a point, its distance and line coefficient."""

    hit_point: Vector3 = field(default_factory=Vector3)
    length: float = 0.0
    coefficient: float = 0.0


@dataclass
class TwoLineShort:
    """Closest points between two lines and their line coefficients."""

    line_1_point: Vector3 = field(default_factory=Vector3)
    line_2_point: Vector3 = field(default_factory=Vector3)
    line_1_coefficient: float = 0.0
    line_2_coefficient: float = 0.0
    length: float = 0.0


@dataclass
class Sphere:
    center_pos: Vector3 = field(default_factory=Vector3)
    r: float = 0.0


def _world_axes() -> list[Vector3]:
    return [Vector3(1.0, 0.0, 0.0), Vector3(0.0, 1.0, 0.0), Vector3(0.0, 0.0, 1.0)]


@dataclass
class OBB:
    """Oriented box: centre, three unit axis directions and full edge lengths (w, h, d).

    By default the axes match the world axes, so the box starts as an AABB.
    """

    center_pos: Vector3 = field(default_factory=Vector3)
    directions: list[Vector3] = field(default_factory=_world_axes)
    length: list[float] = field(default_factory=lambda: [0.0, 0.0, 0.0])


@dataclass
class Capsule:
    """Vertical capsule standing on ``down_pos`` with height ``up`` and radius ``r``."""

    up_pos: Vector3 = field(default_factory=Vector3)
    down_pos: Vector3 = field(default_factory=Vector3)
    up: float = 0.0
    r: float = 0.0

    def update(self) -> None:
        """Recompute the top point from the bottom point and the height."""
        self.up_pos = self.down_pos + Vector3(0.0, self.up, 0.0)