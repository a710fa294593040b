"""4x4 matrices using the row-vector convention (translation in the last row)."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Iterator, Sequence

from gameframe.mymath import near_zero
from gameframe.vector3 import Vector3

if TYPE_CHECKING:
    from gameframe.quaternion import Quaternion

_IDENTITY_ROWS = (
    (1.0, 0.0, 0.0, 0.0),
    (0.0, 1.0, 0.0, 0.0),
    (0.0, 0.0, 1.0, 0.0),
    (0.0, 0.0, 0.0, 1.0),
)


def _det3(m: Sequence[Sequence[float]]) -> float:
    return (
        m[0][0] * (m[1][1] * m[2][2] - m[1][2] * m[2][1])
        - m[0][1] * (m[1][0] * m[2][2] - m[1][2] * m[2][0])
        + m[0][2] * (m[1][0] * m[2][1] - m[1][1] * m[2][0])
    )


class Matrix4:
    """A mutable 4x4 matrix of floats, stored row by row in ``mat``."""

    __slots__ = ("mat",)

    def __init__(self, rows: Sequence[Sequence[float]] | None = None) -> None:
        source = _IDENTITY_ROWS if rows is None else rows
        if len(source) != 4 or any(len(row) != 4 for row in source):
            raise ValueError("a Matrix4 needs 4 rows of 4 values")
        self.mat = [[float(value) for value in row] for row in source]

    def __iter__(self) -> Iterator[list[float]]:
        return iter(self.mat)

    def __repr__(self) -> str:
        return f"Matrix4({self.mat!r})"

    def __mul__(self, other: Matrix4) -> Matrix4:
        if not isinstance(other, Matrix4):
            return NotImplemented
        columns = list(zip(*other.mat))
        return Matrix4(
            [[sum(a * b for a, b in zip(row, col)) for col in columns] for row in self.mat]
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix4):
            return NotImplemented
        return self.mat == other.mat

    __hash__ = None  # type: ignore[assignment]

    @classmethod
    def identity(cls) -> Matrix4:
        return cls()

    def set_column(self, num: int, vector: Vector3) -> None:
        """Write the vector into the first three rows of column ``num``."""
        for row, value in zip(self.mat, vector):
            row[num] = value

    def set_row(self, num: int, vector: Vector3) -> None:
        """Write the vector into the first three columns of row ``num``."""
        self.mat[num][:3] = list(vector)

    def invert(self) -> None:
        """Invert the matrix in place; raises ValueError if it is singular."""
        m = self.mat
        cofactors = [
            [
                (-1) ** (i + j)
                * _det3([[v for c, v in enumerate(row) if c != j] for r, row in enumerate(m) if r != i])
                for j in range(4)
            ]
            for i in range(4)
        ]
        det = sum(a * c for a, c in zip(m[0], cofactors[0]))
        if det == 0.0:
            raise ValueError("matrix is singular and cannot be inverted")
        inv_det = 1.0 / det
        self.mat = [[cofactors[j][i] * inv_det for j in range(4)] for i in range(4)]

    def translation(self) -> Vector3:
        return Vector3(*self.mat[3][:3])

    def x_axis(self) -> Vector3:
        return Vector3(*self.mat[0][:3]).normalize()

    def y_axis(self) -> Vector3:
        return Vector3(*self.mat[1][:3]).normalize()

    def z_axis(self) -> Vector3:
        return Vector3(*self.mat[2][:3]).normalize()

    def scale(self) -> Vector3:
        """Scale factors along the three axes, taken from the row lengths."""
        return Vector3(*(Vector3(*row[:3]).magnitude() for row in self.mat[:3]))

    @classmethod
    def create_scale(
        cls,
        x_scale: float | Vector3,
        y_scale: float | None = None,
        z_scale: float | None = None,
    ) -> Matrix4:
        """Scale matrix from three factors, a Vector3 of factors, or one uniform factor."""
        if isinstance(x_scale, Vector3):
            x_scale, y_scale, z_scale = x_scale.x, x_scale.y, x_scale.z
        elif y_scale is None and z_scale is None:
            y_scale = z_scale = x_scale
        elif y_scale is None or z_scale is None:
            raise TypeError("give one uniform factor or all three factors")
        return cls(
            [
                [x_scale, 0.0, 0.0, 0.0],
                [0.0, y_scale, 0.0, 0.0],
                [0.0, 0.0, z_scale, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )

    @classmethod
    def create_rotation_x(cls, theta: float) -> Matrix4:
        c, s = math.cos(theta), math.sin(theta)
        return cls(
            [
                [1.0, 0.0, 0.0, 0.0],
                [0.0, c, s, 0.0],
                [0.0, -s, c, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )

    @classmethod
    def create_rotation_y(cls, theta: float) -> Matrix4:
        c, s = math.cos(theta), math.sin(theta)
        return cls(
            [
                [c, 0.0, -s, 0.0],
                [0.0, 1.0, 0.0, 0.0],
                [s, 0.0, c, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )

    @classmethod
    def create_rotation_z(cls, theta: float) -> Matrix4:
        c, s = math.cos(theta), math.sin(theta)
        return cls(
            [
                [c, s, 0.0, 0.0],
                [-s, c, 0.0, 0.0],
                [0.0, 0.0, 1.0, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )

    @classmethod
    def create_from_quaternion(cls, q: Quaternion) -> Matrix4:
        x, y, z, w = q.x, q.y, q.z, q.w
        return cls(
            [
                [1.0 - 2.0 * y * y - 2.0 * z * z, 2.0 * x * y + 2.0 * w * z, 2.0 * x * z - 2.0 * w * y, 0.0],
                [2.0 * x * y - 2.0 * w * z, 1.0 - 2.0 * x * x - 2.0 * z * z, 2.0 * y * z + 2.0 * w * x, 0.0],
                [2.0 * x * z + 2.0 * w * y, 2.0 * y * z - 2.0 * w * x, 1.0 - 2.0 * x * x - 2.0 * y * y, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )

    @classmethod
    def create_translation(cls, trans: Vector3) -> Matrix4:
        return cls(
            [
                [1.0, 0.0, 0.0, 0.0],
                [0.0, 1.0, 0.0, 0.0],
                [0.0, 0.0, 1.0, 0.0],
                [trans.x, trans.y, trans.z, 1.0],
            ]
        )

    @classmethod
    def create_look_at(cls, eye: Vector3, target: Vector3, up: Vector3) -> Matrix4:
        zaxis = (target - eye).normalize()
        xaxis = up.cross(zaxis).normalize()
        yaxis = zaxis.cross(xaxis).normalize()
        trans = Vector3(-xaxis.dot(eye), -yaxis.dot(eye), -zaxis.dot(eye))
        return cls(
            [
                [xaxis.x, yaxis.x, zaxis.x, 0.0],
                [xaxis.y, yaxis.y, zaxis.y, 0.0],
                [xaxis.z, yaxis.z, zaxis.z, 0.0],
                [trans.x, trans.y, trans.z, 1.0],
            ]
        )

    @classmethod
    def create_simple_view_proj(cls, width: float, height: float) -> Matrix4:
        return cls(
            [
                [2.0 / width, 0.0, 0.0, 0.0],
                [0.0, 2.0 / height, 0.0, 0.0],
                [0.0, 0.0, 1.0, 0.0],
                [0.0, 0.0, 1.0, 1.0],
            ]
        )

    def _apply(self, vec: Vector3, w: float) -> tuple[float, float, float, float]:
        m = self.mat
        return tuple(  # type: ignore[return-value]
            vec.x * m[0][c] + vec.y * m[1][c] + vec.z * m[2][c] + w * m[3][c] for c in range(4)
        )

    def transform(self, vec: Vector3, w: float = 1.0) -> Vector3:
        """Transform a row vector (x, y, z, w), dropping the resulting w."""
        x, y, z, _ = self._apply(vec, w)
        return Vector3(x, y, z)

    def transform_with_persp_div(self, vec: Vector3, w: float = 1.0) -> Vector3:
        """Transform and divide by the resulting w unless it is near zero."""
        x, y, z, tw = self._apply(vec, w)
        result = Vector3(x, y, z)
        if not near_zero(abs(tw)):
            result = result * (1.0 / tw)
        return result