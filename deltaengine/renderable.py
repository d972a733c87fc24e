"""Things that can be drawn, and the base for renderers that draw them."""

from __future__ import annotations

import struct
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from deltaengine.matrix import Mat4
from deltaengine.vectors import Vec2, Vec3, Vec4

VERTEX_FORMAT = "<3fI2ff"
VERTEX_SIZE = struct.calcsize(VERTEX_FORMAT)


def _default_texture_coordinates() -> list[Vec2]:
    return [Vec2(0.0, 0.0), Vec2(1.0, 0.0), Vec2(1.0, 1.0), Vec2(0.0, 1.0)]


@dataclass(frozen=True)
class Vertex:
    """One corner of a quad as laid out in the vertex buffer."""

    position: Vec3
    color: int
    texture_coordinate: Vec2
    texture_slot: float

    def pack(self) -> bytes:
        """The vertex in its buffer layout."""
        return struct.pack(
            VERTEX_FORMAT,
            *self.position,
            self.color,
            *self.texture_coordinate,
            self.texture_slot,
        )


class Renderable2D:
    """A rectangle with a position, size and either a colour or a texture."""

    def __init__(
        self,
        position: Vec3 | None = None,
        size: Vec2 | None = None,
        color: Vec4 | None = None,
        texture: Any = None,
    ) -> None:
        self.position = Vec3() if position is None else position
        self.size = Vec2() if size is None else size
        self.color = Vec4() if color is None else color
        self.texture = texture
        self.texture_coordinates = _default_texture_coordinates()

    def submit(self, renderer: Renderer2D) -> None:
        """Hand this object to renderer."""
        renderer.submit(self)

    @property
    def texture_id(self) -> int:
        """Id of the texture, or 0 when the object is plainly coloured."""
        return self.texture.id if self.texture is not None else 0


class Renderer2D(ABC):
    """Base renderer holding a stack of model transformations."""

    def __init__(self) -> None:
        self._transformations = [Mat4.diagonal(1.0)]

    def push_matrix(self, matrix: Mat4, override: bool = False) -> None:
        """Push matrix, combined with the current one unless override is set."""
        if override:
            self._transformations.append(Mat4(matrix.data))
        else:
            self._transformations.append(self._transformations[-1] * matrix)

    def pop_matrix(self) -> None:
        """Drop the top transformation; the identity at the bottom stays."""
        if len(self._transformations) > 1:
            self._transformations.pop()

    @property
    def current_matrix(self) -> Mat4:
        """The transformation applied to submitted objects."""
        return self._transformations[-1]

    def begin(self) -> None:
        """Prepare for a round of submissions."""

    @abstractmethod
    def submit(self, renderable: Renderable2D) -> None:
        """Queue renderable for drawing."""

    def end(self) -> None:
        """Finish a round of submissions."""

    @abstractmethod
    def flush(self) -> None:
        """Draw everything queued."""


class Sprite(Renderable2D):
    """A renderable quad: coloured when no texture is given, black-tinted otherwise."""

    def __init__(
        self,
        position: Vec3,
        size: Vec2,
        color: Vec4 | None = None,
        texture: Any = None,
    ) -> None:
        super().__init__(position, size, Vec4() if color is None else color, texture)


class Group(Renderable2D):
    """Renderables drawn together under one model transformation."""

    def __init__(self, model_matrix: Mat4) -> None:
        super().__init__()
        self.model_matrix = model_matrix
        self.children: list[Renderable2D] = []

    def add(self, renderable: Renderable2D) -> None:
        """Append renderable to the group."""
        self.children.append(renderable)

    def submit(self, renderer: Renderer2D) -> None:
        """Submit every child with the group's transformation pushed."""
        renderer.push_matrix(self.model_matrix)
        try:
            for child in self.children:
                child.submit(renderer)
        finally:
            renderer.pop_matrix()