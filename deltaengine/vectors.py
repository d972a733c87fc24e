"""Small fixed-size float vectors used by the renderer."""

from __future__ import annotations

import math
import operator
from dataclasses import astuple, dataclass
from typing import Callable, Iterator, TypeVar

_V = TypeVar("_V", bound="_Vector")


class _Vector:
    """Component-wise arithmetic shared by Vec2, Vec3 and Vec4."""

    def __iter__(self) -> Iterator[float]:
        return iter(astuple(self))

    def __len__(self) -> int:
        return len(astuple(self))

    def _operand(self, other: object) -> tuple[float, ...] | None:
        if type(other) is type(self):
            return astuple(other)
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return (float(other),) * len(self)
        return None

    def _combine(self: _V, other: object, op: Callable[[float, float], float]) -> _V:
        values = self._operand(other)
        if values is None:
            return NotImplemented
        return type(self)(*(op(a, b) for a, b in zip(self, values)))

    def _describe(self) -> str:
        body = ", ".join(f"{value:g}" for value in self)
        return f"{type(self).__name__.lower()}: ({body})"


@dataclass(frozen=True)
class Vec2(_Vector):
    """Two-component vector; also readable as (s, t) or (r, g)."""

    x: float = 0.0
    y: float = 0.0

    s = property(lambda self: self.x)
    t = property(lambda self: self.y)
    r = property(lambda self: self.x)
    g = property(lambda self: self.y)

    def __add__(self, other):
        return self._combine(other, operator.add)

    def __radd__(self, other):
        return self._combine(other, operator.add)

    def __sub__(self, other):
        return self._combine(other, operator.sub)

    def __rsub__(self, other):
        # A scalar on the left is subtracted from the vector, not the reverse.
        return self._combine(other, operator.sub)

    def __mul__(self, other):
        return self._combine(other, operator.mul)

    def __rmul__(self, other):
        return self._combine(other, operator.mul)

    def __truediv__(self, other):
        return self._combine(other, operator.truediv)

    def __rtruediv__(self, other):
        # A scalar on the left divides the vector, not the reverse.
        return self._combine(other, operator.truediv)

    def __str__(self) -> str:
        return self._describe()


@dataclass(frozen=True)
class Vec3(_Vector):
    """Three-component vector; also readable as (s, t, p) or (r, g, b)."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    s = property(lambda self: self.x)
    t = property(lambda self: self.y)
    p = property(lambda self: self.z)
    r = property(lambda self: self.x)
    g = property(lambda self: self.y)
    b = property(lambda self: self.z)

    def __add__(self, other):
        return self._combine(other, operator.add)

    def __radd__(self, other):
        return self._combine(other, operator.add)

    def __sub__(self, other):
        return self._combine(other, operator.sub)

    def __rsub__(self, other):
        # A scalar on the left is subtracted from the vector, not the reverse.
        return self._combine(other, operator.sub)

    def __mul__(self, other):
        return self._combine(other, operator.mul)

    def __rmul__(self, other):
        return self._combine(other, operator.mul)

    def __truediv__(self, other):
        return self._combine(other, operator.truediv)

    def __rtruediv__(self, other):
        # A scalar on the left divides the vector, not the reverse.
        return self._combine(other, operator.truediv)

    def __str__(self) -> str:
        return self._describe()


@dataclass(frozen=True)
class Vec4(_Vector):
    """Four-component vector; also readable as (s, t, p, q) or (r, g, b, a)."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    s = property(lambda self: self.x)
    t = property(lambda self: self.y)
    p = property(lambda self: self.z)
    q = property(lambda self: self.w)
    r = property(lambda self: self.x)
    g = property(lambda self: self.y)
    b = property(lambda self: self.z)
    a = property(lambda self: self.w)

    def __add__(self, other):
        return self._combine(other, operator.add)

    def __radd__(self, other):
        return self._combine(other, operator.add)

    def __sub__(self, other):
        return self._combine(other, operator.sub)

    def __rsub__(self, other):
        # A scalar on the left is subtracted from the vector, not the reverse.
        return self._combine(other, operator.sub)

    def __mul__(self, other):
        return self._combine(other, operator.mul)

    def __rmul__(self, other):
        return self._combine(other, operator.mul)

    def __truediv__(self, other):
        return self._combine(other, operator.truediv)

    def __rtruediv__(self, other):
        # A scalar on the left divides the vector, not the reverse.
        return self._combine(other, operator.truediv)

    def __str__(self) -> str:
        return self._describe()


def dot(left: _Vector, right: _Vector) -> float:
    """Dot product of two vectors of the same kind."""
    if type(left) is not type(right) or not isinstance(left, _Vector):
        raise TypeError(
            f"dot needs two vectors of the same kind, got "
            f"{type(left).__name__} and {type(right).__name__}"
        )
    return sum(a * b for a, b in zip(left, right))


def cross(left: Vec3, right: Vec3) -> Vec3:
    """Cross product of two Vec3."""
    if not (isinstance(left, Vec3) and isinstance(right, Vec3)):
        raise TypeError("cross is defined for Vec3 only")
    return Vec3(
        left.y * right.z - right.y * left.z,
        left.z * right.x - right.z * left.x,
        left.x * right.y - right.x * left.y,
    )


def length2(vector: _Vector) -> float:
    """Squared Euclidean length."""
    return dot(vector, vector)


def length(vector: _Vector) -> float:
    """Euclidean length."""
    return math.sqrt(length2(vector))


def normalize(vector: _V) -> _V:
    """Vector of unit length in the same direction; a zero vector raises ZeroDivisionError."""
    return vector / length(vector)