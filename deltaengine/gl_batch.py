"""OpenGL drawing of batches produced by BatchRenderer2D."""

from __future__ import annotations

from typing import Any, Sequence

from deltaengine.batch import (
    MAX_SPRITES,
    SHADER_COLOR_INDEX,
    SHADER_TEXTURE_COORDINATE_INDEX,
    SHADER_TEXTURE_SLOT_INDEX,
    SHADER_VERTEX_INDEX,
    VERTICES_PER_SPRITE,
    BatchBackend,
    quad_indices,
)
from deltaengine.buffers import IndexBuffer
from deltaengine.renderable import VERTEX_SIZE, Vertex

_POSITION_OFFSET = 0
_COLOR_OFFSET = 12
_TEXTURE_COORDINATE_OFFSET = 16
_TEXTURE_SLOT_OFFSET = 24

_gl: Any = None


def _api() -> Any:
    global _gl
    if _gl is None:
        import pyglet.gl

        _gl = pyglet.gl
    return _gl


class GLBatchBackend(BatchBackend):
    """Owns a dynamic vertex buffer and a shared quad index buffer."""

    def __init__(self, max_sprites: int = MAX_SPRITES) -> None:
        gl = _api()
        self.max_sprites = max_sprites
        handle = (gl.GLuint * 1)()
        gl.glGenVertexArrays(1, handle)
        self.vao = handle[0]
        handle = (gl.GLuint * 1)()
        gl.glGenBuffers(1, handle)
        self.vbo = handle[0]

        gl.glBindVertexArray(self.vao)
        gl.glBindBuffer(gl.GL_ARRAY_BUFFER, self.vbo)
        gl.glBufferData(
            gl.GL_ARRAY_BUFFER, VERTEX_SIZE * VERTICES_PER_SPRITE * max_sprites, None, gl.GL_DYNAMIC_DRAW
        )
        attributes = (
            (SHADER_VERTEX_INDEX, 3, gl.GL_FLOAT, gl.GL_FALSE, _POSITION_OFFSET),
            (SHADER_COLOR_INDEX, 4, gl.GL_UNSIGNED_BYTE, gl.GL_TRUE, _COLOR_OFFSET),
            (SHADER_TEXTURE_COORDINATE_INDEX, 2, gl.GL_FLOAT, gl.GL_FALSE, _TEXTURE_COORDINATE_OFFSET),
            (SHADER_TEXTURE_SLOT_INDEX, 1, gl.GL_FLOAT, gl.GL_FALSE, _TEXTURE_SLOT_OFFSET),
        )
        for index, components, kind, normalised, offset in attributes:
            gl.glVertexAttribPointer(index, components, kind, normalised, VERTEX_SIZE, offset)
            gl.glEnableVertexAttribArray(index)
        self.ibo = IndexBuffer(quad_indices(max_sprites))

    def draw(self, vertices: Sequence[Vertex], index_count: int, texture_slots: Sequence[int]) -> None:
        """Upload vertices, bind the slot textures and draw index_count indices."""
        gl = _api()
        data = b"".join(vertex.pack() for vertex in vertices)
        if data:
            gl.glBindBuffer(gl.GL_ARRAY_BUFFER, self.vbo)
            gl.glBufferSubData(gl.GL_ARRAY_BUFFER, 0, len(data), data)
        for unit, texture_id in enumerate(texture_slots):
            gl.glActiveTexture(gl.GL_TEXTURE0 + unit)
            gl.glBindTexture(gl.GL_TEXTURE_2D, texture_id)
        gl.glBindVertexArray(self.vao)
        self.ibo.bind()
        gl.glDrawElements(gl.GL_TRIANGLES, index_count, gl.GL_UNSIGNED_INT, None)

    def delete(self) -> None:
        """Release the GL objects."""
        gl = _api()
        gl.glDeleteVertexArrays(1, (gl.GLuint * 1)(self.vao))
        gl.glDeleteBuffers(1, (gl.GLuint * 1)(self.vbo))
        self.ibo.delete()