"""Column-major 4x4 matrices and the usual transform builders."""

from __future__ import annotations

import math
from typing import Iterable

from deltaengine.vectors import Vec3, Vec4, cross, dot, normalize


class Mat4:
    """A 4x4 float matrix stored as 16 values in column-major order."""

    __hash__ = None  # mutable

    def __init__(self, data: Iterable[float] | None = None) -> None:
        values = [0.0] * 16 if data is None else [float(v) for v in data]
        if len(values) != 16:
            raise ValueError(f"a 4x4 matrix needs 16 values, got {len(values)}")
        self.data = values

    @classmethod
    def diagonal(cls, value: float) -> Mat4:
        """Matrix with value on the diagonal and zeros elsewhere."""
        return cls(value if row == col else 0.0 for col in range(4) for row in range(4))

    @classmethod
    def from_columns(cls, column1: Vec4, column2: Vec4, column3: Vec4, column4: Vec4) -> Mat4:
        """Matrix built from four column vectors."""
        return cls(v for column in (column1, column2, column3, column4) for v in column)

    @property
    def columns(self) -> tuple[Vec4, Vec4, Vec4, Vec4]:
        """The four columns as Vec4."""
        return tuple(Vec4(*self.data[c * 4:c * 4 + 4]) for c in range(4))

    def _product(self, other: Mat4) -> list[float]:
        a, b = self.data, other.data
        return [
            sum(a[k * 4 + i] * b[j * 4 + k] for k in range(4))
            for j in range(4)
            for i in range(4)
        ]

    def __mul__(self, other):
        if isinstance(other, Mat4):
            return Mat4(self._product(other))
        d = self.data
        if isinstance(other, Vec4):
            return Vec4(*(dot(Vec4(d[r], d[r + 4], d[r + 8], d[r + 12]), other) for r in range(4)))
        if isinstance(other, Vec3):
            return Vec3(*(dot(Vec3(d[r], d[r + 4], d[r + 8]), other) + d[r + 12] for r in range(3)))
        return NotImplemented

    def __imul__(self, other):
        if not isinstance(other, Mat4):
            return NotImplemented
        self.data = self._product(other)
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mat4):
            return NotImplemented
        return self.data == other.data

    def __repr__(self) -> str:
        return f"Mat4({self.data!r})"


def radians(angle: float) -> float:
    """Degrees to radians."""
    return angle * math.pi / 180.0


def degrees(angle: float) -> float:
    """Radians to degrees."""
    return angle * 180.0 / math.pi


def transpose(matrix: Mat4) -> Mat4:
    """Swap the off-diagonal entries of matrix; the diagonal of the result is zero."""
    d = matrix.data
    return Mat4(0.0 if row == col else d[row * 4 + col] for col in range(4) for row in range(4))


def translate(translation: Vec3) -> Mat4:
    """Translation matrix."""
    mat = Mat4.diagonal(1.0)
    mat.data[12:15] = [translation.x, translation.y, translation.z]
    return mat


def rotate(angle: float, axis: Vec3) -> Mat4:
    """Rotation by angle (radians) about axis."""
    n = normalize(axis)
    c, s = math.cos(angle), math.sin(angle)
    omc = 1.0 - c
    mat = Mat4.diagonal(1.0)
    d = mat.data
    d[0] = c + n.x * n.x * omc
    d[1] = n.y * n.x * omc + n.z * s
    d[2] = n.z * n.x * omc - n.y * s
    d[4] = n.x * n.y * omc - n.z * s
    d[5] = c + n.y * n.y * omc
    d[6] = n.z * n.y * omc + n.x * s
    d[8] = n.x * n.z * omc + n.y * s
    d[9] = n.y * n.z * omc - n.x * s
    d[10] = c + n.z * n.z * omc
    return mat


def scale(scaling: Vec3) -> Mat4:
    """Scaling matrix."""
    mat = Mat4.diagonal(1.0)
    mat.data[0], mat.data[5], mat.data[10] = scaling.x, scaling.y, scaling.z
    return mat


def orthographic(left: float, right: float, bottom: float, top: float, near: float, far: float) -> Mat4:
    """Orthographic projection matrix."""
    mat = Mat4.diagonal(1.0)
    d = mat.data
    d[0] = 2.0 / (right - left)
    d[5] = 2.0 / (top - bottom)
    d[10] = 2.0 / (near - far)
    d[12] = -(right + left) / (right - left)
    d[13] = -(top + bottom) / (top - bottom)
    d[14] = (near + far) / (near - far)
    return mat


def perspective(fovy: float, aspect_ratio: float, near: float, far: float) -> Mat4:
    """Perspective projection matrix; fovy in radians."""
    mat = Mat4()
    d = mat.data
    d[0] = 1.0 / (aspect_ratio * math.tan(fovy / 2.0))
    d[5] = aspect_ratio * d[0]
    d[10] = (near + far) / (near - far)
    d[11] = -1.0
    d[14] = (2 * near * far) / (near - far)
    return mat


def look_at(center_of_projection: Vec3, target: Vec3, world_up: Vec3) -> Mat4:
    """View matrix looking from center_of_projection towards target."""
    front = normalize(target - center_of_projection)
    right = normalize(cross(front, world_up))
    up = cross(right, front)
    mat = Mat4.diagonal(1.0)
    d = mat.data
    d[0], d[1], d[2] = right.x, up.x, -front.x
    d[4], d[5], d[6] = right.y, up.y, -front.y
    d[8], d[9], d[10] = right.z, up.z, -front.z
    d[12] = -dot(right, center_of_projection)
    d[13] = -dot(up, center_of_projection)
    d[14] = dot(front, center_of_projection)
    return mat