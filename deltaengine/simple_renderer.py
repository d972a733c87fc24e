"""Drawing sprites one at a time, each with its own GL objects."""

from __future__ import annotations

from collections import deque
from typing import Any

from deltaengine.buffers import IndexBuffer, VertexArray, VertexBuffer
from deltaengine.matrix import translate
from deltaengine.renderable import Renderable2D, Renderer2D
from deltaengine.shader import Shader
from deltaengine.vectors import Vec2, Vec3, Vec4

_gl: Any = None


def _api() -> Any:
    global _gl
    if _gl is None:
        import pyglet.gl

        _gl = pyglet.gl
    return _gl


class StaticSprite(Renderable2D):
    """A sprite owning its vertex array, index buffer and shader reference."""

    def __init__(
        self,
        position: Vec3,
        size: Vec2,
        color: Vec4,
        shader: Shader,
        texture: Any = None,
    ) -> None:
        super().__init__(position, size, color, texture)
        self.shader = shader
        vertices = [0, 0, 0, size.x, 0, 0, size.x, size.y, 0, 0, size.y, 0]
        colors = list(color) * 4
        texture_coordinates = [0.0, 0.0, 1.0, 0.0, 1.0, 1.0, 0.0, 1.0]
        self.vao = VertexArray()
        self.ibo = IndexBuffer([0, 1, 2, 2, 3, 0])
        self.vao.add_buffer(VertexBuffer(vertices, 3), 0)
        self.vao.add_buffer(VertexBuffer(texture_coordinates, 2), 2)
        self.vao.add_buffer(VertexBuffer(colors, 4), 4)

    def delete(self) -> None:
        """Release the sprite's GL objects."""
        self.vao.delete()
        self.ibo.delete()


class SimpleRenderer2D(Renderer2D):
    """Draws queued static sprites in submission order, one call each."""

    def __init__(self) -> None:
        super().__init__()
        self.queue: deque[StaticSprite] = deque()

    def submit(self, renderable: Renderable2D) -> None:
        """Queue a static sprite."""
        if not isinstance(renderable, StaticSprite):
            raise TypeError("SimpleRenderer2D draws StaticSprite objects only")
        self.queue.append(renderable)

    def flush(self) -> None:
        """Draw and dequeue every queued sprite."""
        gl = _api()
        while self.queue:
            sprite = self.queue.popleft()
            sprite.vao.bind()
            sprite.ibo.bind()
            sprite.shader.enable()
            sprite.shader.set_mat4("model", False, translate(sprite.position))
            gl.glDrawElements(gl.GL_TRIANGLES, sprite.ibo.count, gl.GL_UNSIGNED_INT, None)
            sprite.vao.unbind()
            sprite.ibo.unbind()