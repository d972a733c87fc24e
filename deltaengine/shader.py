"""GLSL shader programs built from source files."""

from __future__ import annotations

import os
from typing import Any, Callable, Iterable, Sequence

from deltaengine.files import read_file
from deltaengine.matrix import Mat4
from deltaengine.vectors import Vec2, Vec3, Vec4

_gl: Any = None
_shaders: Any = None


def _api() -> Any:
    global _gl
    if _gl is None:
        import pyglet.gl

        _gl = pyglet.gl
    return _gl


def _shader_api() -> Any:
    global _shaders
    if _shaders is None:
        import pyglet.graphics.shader

        _shaders = pyglet.graphics.shader
    return _shaders


class ShaderError(Exception):
    """Raised when a shader stage fails to compile or the program fails to link."""


def _c_string(gl: Any, text: str) -> Any:
    encoded = text.encode("utf-8") + b"\0"
    return (gl.GLchar * len(encoded)).from_buffer_copy(encoded)


class Shader:
    """A linked program of a vertex, a fragment and optionally a geometry shader."""

    def __init__(
        self,
        vertex_path: str | os.PathLike[str],
        fragment_path: str | os.PathLike[str],
        geometry_path: str | os.PathLike[str] | None = None,
    ) -> None:
        shaders = _shader_api()
        stages = [("vertex", vertex_path), ("fragment", fragment_path)]
        if geometry_path is not None:
            stages.append(("geometry", geometry_path))

        compiled: list[Any] = []
        try:
            for label, path in stages:
                try:
                    compiled.append(shaders.Shader(read_file(path), label))
                except shaders.ShaderException as error:
                    raise ShaderError(f"{label} shader compiling error: {error}") from error
            try:
                self._program = shaders.ShaderProgram(*compiled)
            except shaders.ShaderException as error:
                raise ShaderError(f"shader program linking error: {error}") from error
        finally:
            for stage in compiled:
                stage.delete()
        self.program_id = self._program.id

    def enable(self) -> None:
        """Make this program current."""
        _api().glUseProgram(self.program_id)

    def disable(self) -> None:
        """Make no program current."""
        _api().glUseProgram(0)

    def uniform_location(self, name: str) -> int:
        """Location of the named uniform, -1 if it does not exist."""
        gl = _api()
        return gl.glGetUniformLocation(self.program_id, _c_string(gl, name))

    def set_1iv(self, name: str, values: Sequence[int]) -> None:
        """Set an int array uniform."""
        gl = _api()
        values = [int(value) for value in values]
        array = (gl.GLint * len(values))(*values)
        gl.glUniform1iv(self.uniform_location(name), len(values), array)

    def set_1i(self, name: str, value: int) -> None:
        """Set an int uniform."""
        _api().glUniform1i(self.uniform_location(name), int(value))

    def set_1f(self, name: str, value: float) -> None:
        """Set a float uniform."""
        _api().glUniform1f(self.uniform_location(name), float(value))

    def _set_vector(self, upload: Callable[..., Any], name: str, vector: Iterable[float]) -> None:
        values = [float(value) for value in vector]
        array = (_api().GLfloat * len(values))(*values)
        upload(self.uniform_location(name), 1, array)

    def set_2f(self, name: str, vector: Vec2) -> None:
        """Set a vec2 uniform."""
        self._set_vector(_api().glUniform2fv, name, vector)

    def set_3f(self, name: str, vector: Vec3) -> None:
        """Set a vec3 uniform."""
        self._set_vector(_api().glUniform3fv, name, vector)

    def set_4f(self, name: str, vector: Vec4) -> None:
        """Set a vec4 uniform."""
        self._set_vector(_api().glUniform4fv, name, vector)

    def set_mat4(self, name: str, transpose: bool, matrix: Mat4) -> None:
        """Set a mat4 uniform from a column-major matrix."""
        gl = _api()
        array = (gl.GLfloat * 16)(*matrix.data)
        gl.glUniformMatrix4fv(
            self.uniform_location(name), 1, gl.GL_TRUE if transpose else gl.GL_FALSE, array
        )

    def delete(self) -> None:
        """Release the program."""
        self._program.delete()