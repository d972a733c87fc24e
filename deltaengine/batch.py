"""Batching of sprites into one vertex stream per draw call."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from deltaengine.renderable import Renderable2D, Renderer2D, Vertex
from deltaengine.vectors import Vec3, Vec4

MAX_SPRITES = 60000
MAX_TEXTURE_SLOTS = 32
INDICES_PER_SPRITE = 6
VERTICES_PER_SPRITE = 4

SHADER_VERTEX_INDEX = 0
SHADER_NORMAL_INDEX = 1
SHADER_TEXTURE_COORDINATE_INDEX = 2
SHADER_TEXTURE_SLOT_INDEX = 3
SHADER_COLOR_INDEX = 4


def _channel(value: float) -> int:
    return max(0, min(255, int(value * 255.0)))


def pack_color(color: Vec4) -> int:
    """Pack an RGBA colour with components in 0..1 into one 32-bit value, red lowest."""
    red, green, blue, alpha = (_channel(c) for c in (color.r, color.g, color.b, color.a))
    return red | (green << 8) | (blue << 16) | (alpha << 24)


def quad_indices(max_sprites: int) -> list[int]:
    """Indices drawing each group of four vertices as two triangles."""
    return [
        base + offset
        for base in range(0, max_sprites * VERTICES_PER_SPRITE, VERTICES_PER_SPRITE)
        for offset in (0, 1, 2, 2, 3, 0)
    ]


class BatchBackend(ABC):
    """Receives finished batches and draws them."""

    @abstractmethod
    def draw(self, vertices: Sequence[Vertex], index_count: int, texture_slots: Sequence[int]) -> None:
        """Draw index_count indices over vertices with textures bound to the given slots."""


class BatchRenderer2D(Renderer2D):
    """Collects sprites into one vertex stream, flushing when texture slots run out."""

    def __init__(self, backend: BatchBackend, max_sprites: int = MAX_SPRITES) -> None:
        super().__init__()
        if max_sprites < 1:
            raise ValueError("max_sprites must be at least 1")
        self.backend = backend
        self.max_sprites = max_sprites
        self._vertices: list[Vertex] = []
        self._index_count = 0
        self._texture_slots = [0] * MAX_TEXTURE_SLOTS
        self._writing = False

    @property
    def vertices(self) -> tuple[Vertex, ...]:
        """Vertices written since the last begin."""
        return tuple(self._vertices)

    @property
    def index_count(self) -> int:
        """Indices waiting to be drawn."""
        return self._index_count

    def begin(self) -> None:
        """Start writing vertices from the start of the buffer."""
        self._vertices = []
        self._writing = True

    def end(self) -> None:
        """Stop writing vertices."""
        self._writing = False

    def _slot_for(self, texture_id: int) -> int:
        for index, current in enumerate(self._texture_slots):
            if current in (0, texture_id):
                self._texture_slots[index] = texture_id
                return index + 1
        self.end()
        self.flush()
        self.begin()
        self._texture_slots[0] = texture_id
        return 1

    def submit(self, renderable: Renderable2D) -> None:
        """Write the four corners of renderable, transformed by the current matrix."""
        if not self._writing:
            raise RuntimeError("submit called outside begin/end")
        texture_id = renderable.texture_id
        if texture_id == 0:
            color, slot = pack_color(renderable.color), 0
        else:
            color, slot = 0, self._slot_for(texture_id)
        if len(self._vertices) >= self.max_sprites * VERTICES_PER_SPRITE:
            raise OverflowError(f"batch holds at most {self.max_sprites} sprites")

        matrix = self.current_matrix
        p, s = renderable.position, renderable.size
        corners = (
            p,
            Vec3(p.x + s.x, p.y, p.z),
            Vec3(p.x + s.x, p.y + s.y, p.z),
            Vec3(p.x, p.y + s.y, p.z),
        )
        self._vertices.extend(
            Vertex(matrix * corner, color, uv, float(slot))
            for corner, uv in zip(corners, renderable.texture_coordinates)
        )
        self._index_count += INDICES_PER_SPRITE

    def flush(self) -> None:
        """Draw the batch and free all texture slots."""
        self.backend.draw(tuple(self._vertices), self._index_count, tuple(self._texture_slots))
        self._index_count = 0
        self._texture_slots = [0] * MAX_TEXTURE_SLOTS