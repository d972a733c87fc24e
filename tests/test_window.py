import logging
from unittest import mock
from unittest.mock import MagicMock

import pytest

from deltaengine.vectors import Vec2
from deltaengine.window import Window


@pytest.fixture
def fake_pyglet():
    fake = MagicMock()
    fake.gl.GL_NO_ERROR = 0
    fake.gl.glGetError.return_value = 0
    with mock.patch("deltaengine.window._pyglet", fake):
        yield fake


def _handlers(fake):
    native = fake.window.Window.return_value
    return native.push_handlers.call_args.kwargs


def test_window_is_created_with_size_and_title(fake_pyglet):
    window = Window("sprites", 800, 600)
    kwargs = fake_pyglet.window.Window.call_args.kwargs
    assert kwargs["width"] == 800
    assert kwargs["height"] == 600
    assert kwargs["caption"] == "sprites"
    assert kwargs["vsync"] is False
    assert (window.width, window.height) == (800, 600)


def test_key_press_and_release(fake_pyglet):
    window = Window("w", 800, 600)
    handlers = _handlers(fake_pyglet)
    assert window.is_key_pressed(42) is False
    handlers["on_key_press"](42, 0)
    assert window.is_key_pressed(42) is True
    handlers["on_key_release"](42, 0)
    assert window.is_key_pressed(42) is False


def test_mouse_buttons(fake_pyglet):
    window = Window("w", 800, 600)
    handlers = _handlers(fake_pyglet)
    handlers["on_mouse_press"](5, 5, 1, 0)
    assert window.is_button_pressed(1) is True
    assert window.is_button_pressed(4) is False
    handlers["on_mouse_release"](5, 5, 1, 0)
    assert window.is_button_pressed(1) is False


def test_mouse_position_has_top_left_origin(fake_pyglet):
    window = Window("w", 800, 600)
    handlers = _handlers(fake_pyglet)
    assert window.mouse_position == Vec2(0.0, 0.0)
    handlers["on_mouse_motion"](10, 600, 0, 0)
    assert window.mouse_position == Vec2(10.0, 0.0)
    handlers["on_mouse_drag"](3, 0, 0, 0, 1, 0)
    assert window.mouse_position == Vec2(3.0, 600.0)


def test_resize_updates_size(fake_pyglet):
    window = Window("w", 800, 600)
    _handlers(fake_pyglet)["on_resize"](1024, 768)
    assert (window.width, window.height) == (1024, 768)


def test_close_and_close_event(fake_pyglet):
    window = Window("w", 800, 600)
    assert window.is_closed() is False
    window.close()
    assert window.is_closed() is True

    other = Window("w", 800, 600)
    assert _handlers(fake_pyglet)["on_close"]() is True
    assert other.is_closed() is True


def test_update_swaps_and_polls(fake_pyglet):
    window = Window("w", 800, 600)
    native = fake_pyglet.window.Window.return_value
    window.update()
    assert native.flip.call_count == 1
    assert native.dispatch_events.call_count == 1
    assert window.is_closed() is False


def test_update_logs_gl_error(fake_pyglet, caplog):
    caplog.set_level(logging.DEBUG, logger="deltaengine.window")
    window = Window("w", 800, 600)
    fake_pyglet.gl.glGetError.return_value = 1282
    window.update()
    assert "OpenGL error 1282" in caplog.text


def test_clear_and_srgb(fake_pyglet):
    window = Window("w", 800, 600)
    fake_pyglet.gl.glEnable.assert_called_once_with(fake_pyglet.gl.GL_FRAMEBUFFER_SRGB)
    window.clear()
    assert fake_pyglet.gl.glClear.call_count == 1
    assert window.is_closed() is False
    assert (window.width, window.height) == (800, 600)


def test_context_manager_closes_native(fake_pyglet):
    with Window("w", 800, 600) as window:
        assert window.title == "w"
    assert fake_pyglet.window.Window.return_value.close.call_count == 1