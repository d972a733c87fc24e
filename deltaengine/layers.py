"""Layers: a list of renderables drawn by one renderer with one shader."""

from __future__ import annotations

from typing import Any

from deltaengine.batch import BatchRenderer2D
from deltaengine.gl_batch import GLBatchBackend
from deltaengine.matrix import Mat4
from deltaengine.renderable import Renderable2D, Renderer2D


class Layer:
    """Owns a renderer, a shader, a projection and the renderables it draws."""

    def __init__(self, renderer: Renderer2D, shader: Any, projection_matrix: Mat4) -> None:
        self.renderer = renderer
        self.shader = shader
        self.renderables: list[Renderable2D] = []
        self._projection = projection_matrix
        self._upload_projection()

    def _upload_projection(self) -> None:
        self.shader.enable()
        self.shader.set_mat4("proj", False, self._projection)

    def __enter__(self) -> Layer:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.delete()

    def add(self, renderable: Renderable2D) -> None:
        """Append renderable; the layer takes ownership of it."""
        self.renderables.append(renderable)

    def render(self) -> None:
        """Submit every renderable and draw the result."""
        self.shader.enable()
        self.renderer.begin()
        for renderable in self.renderables:
            renderable.submit(self.renderer)
        self.renderer.end()
        self.renderer.flush()

    @property
    def projection_matrix(self) -> Mat4:
        """The projection uploaded to the shader's proj uniform."""
        return self._projection

    @projection_matrix.setter
    def projection_matrix(self, matrix: Mat4) -> None:
        self._projection = matrix
        self._upload_projection()

    def delete(self) -> None:
        """Release the renderables, the renderer and the shader that own GL resources."""
        owned = (
            *self.renderables,
            self.renderer,
            getattr(self.renderer, "backend", None),
            self.shader,
        )
        for resource in owned:
            release = getattr(resource, "delete", None)
            if callable(release):
                release()
        self.renderables.clear()


class TileLayer(Layer):
    """A layer drawn by a batch renderer on the GPU."""

    def __init__(self, shader: Any, projection_matrix: Mat4) -> None:
        super().__init__(BatchRenderer2D(GLBatchBackend()), shader, projection_matrix)