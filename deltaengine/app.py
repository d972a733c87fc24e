"""Demo scenes: a grid of sprites and a nested group hierarchy."""

from __future__ import annotations

import argparse
import logging
import os
import random
from typing import Any, Iterable, Sequence

from deltaengine.layers import TileLayer
from deltaengine.matrix import orthographic, translate
from deltaengine.renderable import Group, Sprite
from deltaengine.shader import Shader
from deltaengine.texture import Texture
from deltaengine.timer import Timer
from deltaengine.vectors import Vec2, Vec3, Vec4
from deltaengine.window import Window

VERTEX_SHADER_PATH = "res/shaders/texture.vert"
FRAGMENT_SHADER_PATH = "res/shaders/texture.frag"
GRID_COLUMNS = 16
GRID_ROWS = 9
HIERARCHY_SAMPLERS = 10

_log = logging.getLogger(__name__)


def _gl_api() -> tuple[Any, Any]:
    import pyglet.gl
    import pyglet.window

    return pyglet.gl, pyglet.window.key


def _sprite_grid(textures: Sequence[Any], rng: random.Random) -> list[Sprite]:
    """One unit sprite per grid cell, each randomly coloured or textured in turn."""
    sprites: list[Sprite] = []
    next_texture = 0
    for x in range(GRID_COLUMNS):
        for y in range(GRID_ROWS):
            position = Vec3(float(x), float(y), 0.0)
            if rng.randrange(2):
                color = Vec4(
                    rng.randrange(1000) / 1000.0,
                    rng.randrange(1000) / 1000.0,
                    rng.randrange(1000) / 1000.0,
                    1.0,
                )
                sprites.append(Sprite(position, Vec2(1.0, 1.0), color))
            else:
                texture = textures[next_texture % len(textures)]
                next_texture += 1
                sprites.append(Sprite(position, Vec2(1.0, 1.0), texture=texture))
    return sprites


def _hierarchy_scene(small_texture: Any, large_texture: Any) -> Group:
    """A group holding a large sprite and a nested group with a small one."""
    outer = Group(translate(Vec3(1.0, 1.0, 0.0)))
    inner = Group(translate(Vec3(1.0, 1.0, 0.0)))
    outer.add(Sprite(Vec3(0.0, 0.0, 0.0), Vec2(8.0, 5.0), texture=large_texture))
    inner.add(Sprite(Vec3(0.0, 0.0, 0.0), Vec2(2.0, 2.0), texture=small_texture))
    outer.add(inner)
    return outer


def _run(window: Any, layer: Any, escape_key: int) -> None:
    """Render until the window closes, printing frames per second once a second."""
    second = Timer()
    frames = 0
    while not window.is_closed():
        frames += 1
        window.clear()
        if window.is_key_pressed(escape_key):
            window.close()
        layer.render()
        window.update()
        if second.elapsed() > 1.0:
            print(f"{frames} fps")
            frames = 0
            second.reset()


def _open_window(title: str) -> tuple[Window, Any]:
    gl, key = _gl_api()
    window = Window(title, 800, 600)
    gl.glClearColor(0.2, 0.3, 0.5, 1.0)
    _log.debug("OpenGL %s", gl.gl_info.get_version())
    return window, key


def many_sprites(texture_paths: Iterable[str | os.PathLike[str]]) -> None:
    """Show a 16 by 9 grid of coloured and textured sprites until closed."""
    paths = list(texture_paths)
    if not paths:
        raise ValueError("the sprite scene needs at least one texture")
    window, key = _open_window("sprites")
    with window:
        shader = Shader(VERTEX_SHADER_PATH, FRAGMENT_SHADER_PATH)
        with TileLayer(shader, orthographic(0, 16, 0, 9, -1, 1)) as layer:
            textures = [Texture(path) for path in paths]
            try:
                shader.set_1iv("textures", range(len(textures)))
                for sprite in _sprite_grid(textures, random.Random()):
                    layer.add(sprite)
                _run(window, layer, key.ESCAPE)
            finally:
                for texture in textures:
                    texture.delete()


def hierarchy(texture_paths: Iterable[str | os.PathLike[str]]) -> None:
    """Show a sprite with a nested, translated child group until closed."""
    paths = list(texture_paths)
    if len(paths) < 2:
        raise ValueError("the hierarchy scene needs two textures")
    window, key = _open_window("hierarchy")
    with window:
        shader = Shader(VERTEX_SHADER_PATH, FRAGMENT_SHADER_PATH)
        shader.enable()
        small, large = Texture(paths[0]), Texture(paths[1])
        try:
            for unit in range(HIERARCHY_SAMPLERS):
                shader.set_1i(f"textures[{unit}]", unit)
            with TileLayer(shader, orthographic(0, 16, 0, 9, -1, 1)) as layer:
                layer.add(_hierarchy_scene(small, large))
                _run(window, layer, key.ESCAPE)
        finally:
            small.delete()
            large.delete()


def main(argv: Sequence[str] | None = None) -> int:
    """Run one of the demo scenes with the given texture files."""
    parser = argparse.ArgumentParser(prog="deltaengine", description="Sprite rendering demo.")
    parser.add_argument("textures", nargs="+", help="image files used as textures")
    parser.add_argument(
        "--scene", choices=("sprites", "hierarchy"), default="sprites", help="scene to show"
    )
    args = parser.parse_args(argv)
    if args.scene == "hierarchy":
        hierarchy(args.textures)
    else:
        many_sprites(args.textures)
    return 0