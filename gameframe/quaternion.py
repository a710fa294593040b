"""Unit quaternions for 3D rotations."""

from __future__ import annotations

import math
from dataclasses import dataclass

from gameframe import mymath
from gameframe.vector3 import Vector3


@dataclass
class Quaternion:
    """Quaternion with vector part (x, y, z) and scalar part w; identity by default."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    @classmethod
    def identity(cls) -> Quaternion:
        return cls(0.0, 0.0, 0.0, 1.0)

    @classmethod
    def from_axis_angle(cls, axis: Vector3, angle: float) -> Quaternion:
        """Rotation of ``angle`` radians about an already normalized axis."""
        scalar = math.sin(angle / 2.0)
        return cls(axis.x * scalar, axis.y * scalar, axis.z * scalar, math.cos(angle / 2.0))

    def conjugate(self) -> Quaternion:
        return Quaternion(-self.x, -self.y, -self.z, self.w)

    def length_sq(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w

    def length(self) -> float:
        return math.sqrt(self.length_sq())

    def normalized(self) -> Quaternion:
        length = self.length()
        return Quaternion(self.x / length, self.y / length, self.z / length, self.w / length)

    def dot(self, other: Quaternion) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    @staticmethod
    def lerp(a: Quaternion, b: Quaternion, f: float) -> Quaternion:
        """Component-wise linear interpolation, normalized."""
        return Quaternion(
            mymath.lerp(a.x, b.x, f),
            mymath.lerp(a.y, b.y, f),
            mymath.lerp(a.z, b.z, f),
            mymath.lerp(a.w, b.w, f),
        ).normalized()

    @staticmethod
    def slerp(a: Quaternion, b: Quaternion, f: float) -> Quaternion:
        """Spherical linear interpolation along the shorter arc."""
        raw_cosm = a.dot(b)
        cosom = abs(raw_cosm)
        if cosom < 0.9999:
            omega = math.acos(cosom)
            inv_sin = 1.0 / math.sin(omega)
            scale0 = math.sin((1.0 - f) * omega) * inv_sin
            scale1 = math.sin(f * omega) * inv_sin
        else:
            scale0 = 1.0 - f
            scale1 = f
        if raw_cosm < 0.0:
            scale1 = -scale1
        return Quaternion(
            scale0 * a.x + scale1 * b.x,
            scale0 * a.y + scale1 * b.y,
            scale0 * a.z + scale1 * b.z,
            scale0 * a.w + scale1 * b.w,
        ).normalized()

    @staticmethod
    def concatenate(q: Quaternion, p: Quaternion) -> Quaternion:
        """Rotation by q followed by p."""
        qv = Vector3(q.x, q.y, q.z)
        pv = Vector3(p.x, p.y, p.z)
        new_vec = qv * p.w + pv * q.w + pv.cross(qv)
        return Quaternion(new_vec.x, new_vec.y, new_vec.z, p.w * q.w - pv.dot(qv))

    @staticmethod
    def create_rotate(from_vec: Vector3, to_vec: Vector3) -> Quaternion:
        """Rotation that turns the direction of from_vec into that of to_vec."""
        up = from_vec.cross(to_vec)
        if mymath.near_zero(up.magnitude()):
            if mymath.near_zero((from_vec - to_vec).magnitude()):
                return Quaternion.from_axis_angle(up, math.pi)
            return Quaternion.identity()
        return Quaternion.from_axis_angle(up.normalize(), Vector3.angle(from_vec, to_vec))

    def rotate(self, v: Vector3) -> Vector3:
        """Rotate a vector by this quaternion."""
        qv = Vector3(self.x, self.y, self.z)
        return v + qv.cross(qv.cross(v) + v * self.w) * 2.0