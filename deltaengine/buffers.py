"""Vertex, index and vertex-array objects."""

from __future__ import annotations

import struct
from typing import Any, Callable, Sequence

FLOAT_SIZE = struct.calcsize("f")
UINT_SIZE = struct.calcsize("I")
_gl: Any = None


def _api() -> Any:
    global _gl
    if _gl is None:
        import pyglet.gl

        _gl = pyglet.gl
    return _gl


def _generate(generator: Callable[..., Any]) -> int:
    handle = (_api().GLuint * 1)()
    generator(1, handle)
    return handle[0]


def _release(deleter: Callable[..., Any], handle_id: int) -> None:
    deleter(1, (_api().GLuint * 1)(handle_id))


class VertexBuffer:
    """A static buffer of floats grouped into attributes of component_count."""

    def __init__(self, data: Sequence[float], component_count: int) -> None:
        gl = _api()
        values = [float(value) for value in data]
        self.count = len(values)
        self.component_count = component_count
        self.buffer_id = _generate(gl.glGenBuffers)
        array = (gl.GLfloat * len(values))(*values)
        gl.glBindBuffer(gl.GL_ARRAY_BUFFER, self.buffer_id)
        gl.glBufferData(gl.GL_ARRAY_BUFFER, FLOAT_SIZE * len(values), array, gl.GL_STATIC_DRAW)

    def bind(self) -> None:
        """Bind as the array buffer."""
        gl = _api()
        gl.glBindBuffer(gl.GL_ARRAY_BUFFER, self.buffer_id)

    def unbind(self) -> None:
        """Unbind the array buffer."""
        gl = _api()
        gl.glBindBuffer(gl.GL_ARRAY_BUFFER, 0)

    def delete(self) -> None:
        """Release the buffer."""
        _release(_api().glDeleteBuffers, self.buffer_id)


class IndexBuffer:
    """A static buffer of unsigned int element indices."""

    def __init__(self, data: Sequence[int]) -> None:
        gl = _api()
        values = [int(value) for value in data]
        self.count = len(values)
        self.buffer_id = _generate(gl.glGenBuffers)
        array = (gl.GLuint * len(values))(*values)
        gl.glBindBuffer(gl.GL_ELEMENT_ARRAY_BUFFER, self.buffer_id)
        gl.glBufferData(
            gl.GL_ELEMENT_ARRAY_BUFFER, UINT_SIZE * len(values), array, gl.GL_STATIC_DRAW
        )

    def bind(self) -> None:
        """Bind as the element buffer."""
        gl = _api()
        gl.glBindBuffer(gl.GL_ELEMENT_ARRAY_BUFFER, self.buffer_id)

    def unbind(self) -> None:
        """Unbind the element buffer."""
        gl = _api()
        gl.glBindBuffer(gl.GL_ELEMENT_ARRAY_BUFFER, 0)

    def delete(self) -> None:
        """Release the buffer."""
        _release(_api().glDeleteBuffers, self.buffer_id)


class VertexArray:
    """A vertex array owning the vertex buffers attached to it."""

    def __init__(self) -> None:
        self.array_id = _generate(_api().glGenVertexArrays)
        self.buffers: list[VertexBuffer] = []
        _api().glBindVertexArray(self.array_id)

    def bind(self) -> None:
        """Bind this vertex array."""
        _api().glBindVertexArray(self.array_id)

    def unbind(self) -> None:
        """Unbind any vertex array."""
        _api().glBindVertexArray(0)

    def add_buffer(self, buffer: VertexBuffer, index: int) -> None:
        """Attach buffer as the float attribute at index; the array takes ownership."""
        gl = _api()
        self.buffers.append(buffer)
        self.bind()
        buffer.bind()
        gl.glEnableVertexAttribArray(index)
        gl.glVertexAttribPointer(
            index,
            buffer.component_count,
            gl.GL_FLOAT,
            gl.GL_FALSE,
            FLOAT_SIZE * buffer.component_count,
            None,
        )
        buffer.unbind()
        self.unbind()

    def delete(self) -> None:
        """Release the owned buffers and the array."""
        for buffer in self.buffers:
            buffer.delete()
        self.buffers.clear()
        _release(_api().glDeleteVertexArrays, self.array_id)