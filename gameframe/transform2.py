"""2D transforms: location, rotation and scale."""

from __future__ import annotations

from dataclasses import dataclass, field

from gameframe.matrix4 import Matrix4
from gameframe.vector2 import Vector2
from gameframe.vector3 import Vector3


@dataclass
class Transform2:
    """Rotation (radians) and scale applied before moving to ``location``."""

    location: Vector2 = field(default_factory=Vector2)
    rotation: float = 0.0
    scale: Vector2 = field(default_factory=lambda: Vector2(1.0, 1.0))

    def create_matrix4(self) -> Matrix4:
        """Matrix that rotates about z, then scales, then translates."""
        return (
            Matrix4.create_rotation_z(self.rotation)
            * Matrix4.create_scale(self.scale.x, self.scale.y, 1.0)
            * Matrix4.create_translation(Vector3(self.location.x, self.location.y, 0.0))
        )