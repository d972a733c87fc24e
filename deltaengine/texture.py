"""Two-dimensional textures loaded from image files."""

from __future__ import annotations

import os
from typing import Any

from deltaengine.images import load_image

_gl: Any = None


def _api() -> Any:
    global _gl
    if _gl is None:
        import pyglet.gl

        _gl = pyglet.gl
    return _gl


def texture_formats(bits_per_pixel: int, gamma_space: bool = True) -> tuple[Any, Any]:
    """Pixel format and internal format for an image of the given depth."""
    gl = _api()
    if bits_per_pixel == 24:
        return gl.GL_BGR, gl.GL_SRGB8 if gamma_space else gl.GL_RGB8
    if bits_per_pixel == 32:
        return gl.GL_BGRA, gl.GL_SRGB8_ALPHA8 if gamma_space else gl.GL_RGBA8
    return gl.GL_RED, gl.GL_R8


class Texture:
    """An image uploaded as a linearly filtered, edge-clamped 2D texture."""

    def __init__(self, image_path: str | os.PathLike[str], gamma_space: bool = True) -> None:
        gl = _api()
        handle = (gl.GLuint * 1)()
        gl.glGenTextures(1, handle)
        self.id = handle[0]
        try:
            image = load_image(image_path)
        except Exception:
            self.delete()
            raise
        self.width, self.height = image.width, image.height

        gl.glBindTexture(gl.GL_TEXTURE_2D, self.id)
        pixel_format, internal_format = texture_formats(image.bits_per_pixel, gamma_space)
        pixels = (gl.GLubyte * len(image.data)).from_buffer_copy(image.data)
        gl.glTexImage2D(
            gl.GL_TEXTURE_2D, 0, internal_format, image.width, image.height, 0,
            pixel_format, gl.GL_UNSIGNED_BYTE, pixels,
        )
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_WRAP_S, gl.GL_CLAMP_TO_EDGE)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_WRAP_T, gl.GL_CLAMP_TO_EDGE)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_MIN_FILTER, gl.GL_LINEAR)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_MAG_FILTER, gl.GL_LINEAR)

    def bind(self) -> None:
        """Bind to the active texture unit."""
        gl = _api()
        gl.glBindTexture(gl.GL_TEXTURE_2D, self.id)

    def unbind(self) -> None:
        """Unbind from the active texture unit."""
        gl = _api()
        gl.glBindTexture(gl.GL_TEXTURE_2D, 0)

    def delete(self) -> None:
        """Release the texture."""
        gl = _api()
        gl.glDeleteTextures(1, (gl.GLuint * 1)(self.id))