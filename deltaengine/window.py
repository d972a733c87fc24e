"""An application window that tracks keyboard, mouse and size state."""

from __future__ import annotations

import logging
from typing import Any

from deltaengine.vectors import Vec2

_log = logging.getLogger(__name__)
_pyglet: Any = None


def _api() -> Any:
    global _pyglet
    if _pyglet is None:
        import pyglet
        import pyglet.gl
        import pyglet.window

        _pyglet = pyglet
    return _pyglet


class Window:
    """A resizable window with an OpenGL context and polled input state.

    Mouse positions are reported with the origin at the top-left corner.
    """

    def __init__(self, title: str, width: int, height: int) -> None:
        pyglet = _api()
        gl = pyglet.gl
        self.title = title
        self._width = width
        self._height = height
        self._keys: set[int] = set()
        self._buttons: set[int] = set()
        self._mouse = Vec2()
        self._closed = False

        self._native = pyglet.window.Window(
            width=width, height=height, caption=title, resizable=True, vsync=False
        )
        self._native.switch_to()
        self._native.push_handlers(
            on_resize=self._on_resize,
            on_key_press=self._on_key_press,
            on_key_release=self._on_key_release,
            on_mouse_motion=self._on_mouse_motion,
            on_mouse_drag=self._on_mouse_drag,
            on_mouse_press=self._on_mouse_press,
            on_mouse_release=self._on_mouse_release,
            on_close=self._on_close,
        )
        gl.glEnable(gl.GL_FRAMEBUFFER_SRGB)

    def __enter__(self) -> Window:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self._native.close()

    def close(self) -> None:
        """Ask the window to close; is_closed reports it from now on."""
        self._closed = True

    def is_closed(self) -> bool:
        """Whether the window has been asked to close."""
        return self._closed

    def clear(self) -> None:
        """Clear the colour and depth buffers."""
        gl = _api().gl
        gl.glClear(gl.GL_COLOR_BUFFER_BIT | gl.GL_DEPTH_BUFFER_BIT)

    def update(self) -> None:
        """Report any pending GL error, show the frame and process events."""
        gl = _api().gl
        error = gl.glGetError()
        if error != gl.GL_NO_ERROR:
            _log.debug("OpenGL error %s", error)
        self._native.flip()
        self._native.dispatch_events()

    def is_key_pressed(self, key_code: int) -> bool:
        """Whether the key is held down."""
        return key_code in self._keys

    def is_button_pressed(self, button_code: int) -> bool:
        """Whether the mouse button is held down."""
        return button_code in self._buttons

    @property
    def mouse_position(self) -> Vec2:
        """Last cursor position, origin at the top-left corner."""
        return self._mouse

    @property
    def width(self) -> int:
        """Current width in screen coordinates."""
        return self._width

    @property
    def height(self) -> int:
        """Current height in screen coordinates."""
        return self._height

    def _on_resize(self, width: int, height: int) -> None:
        self._width = width
        self._height = height

    def _on_key_press(self, symbol: int, modifiers: int) -> None:
        self._keys.add(symbol)

    def _on_key_release(self, symbol: int, modifiers: int) -> None:
        self._keys.discard(symbol)

    def _move_cursor(self, x: float, y: float) -> None:
        self._mouse = Vec2(float(x), float(self._height - y))

    def _on_mouse_motion(self, x: float, y: float, dx: float, dy: float) -> None:
        self._move_cursor(x, y)

    def _on_mouse_drag(
        self, x: float, y: float, dx: float, dy: float, buttons: int, modifiers: int
    ) -> None:
        self._move_cursor(x, y)

    def _on_mouse_press(self, x: float, y: float, button: int, modifiers: int) -> None:
        self._buttons.add(button)

    def _on_mouse_release(self, x: float, y: float, button: int, modifiers: int) -> None:
        self._buttons.discard(button)

    def _on_close(self) -> bool:
        self._closed = True
        return True