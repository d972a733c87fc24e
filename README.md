# deltaengine

A small 2D sprite engine. It provides:

- **Math** (`deltaengine.vectors`, `deltaengine.matrix`) – frozen `Vec2`, `Vec3`,
  `Vec4` with element-wise arithmetic against vectors of the same kind or plain
  numbers, plus `dot`, `cross`, `length2`, `length` and `normalize`; a column-major
  `Mat4` with `Mat4.diagonal`, `Mat4.from_columns`, `columns`, and the builders
  `translate`, `rotate`, `scale`, `orthographic`, `perspective`, `look_at`,
  `radians` and `degrees`.
- **Scene objects** (`deltaengine.renderable`) – `Sprite` (a coloured or textured
  quad) and `Group`, which applies its model matrix to everything added to it and
  nests freely. `Renderer2D` is the base class holding the transformation stack.
- **Renderers** – `BatchRenderer2D` (`deltaengine.batch`) packs sprites into one
  vertex stream, hands out up to 32 texture slots and flushes on its own when they
  run out; `SimpleRenderer2D` (`deltaengine.simple_renderer`) draws `StaticSprite`
  objects one draw call each.
- **OpenGL layer** – `Window`, `Shader`, `Texture`, `VertexBuffer`, `IndexBuffer`,
  `VertexArray`, `GLBatchBackend`, and `Layer`/`TileLayer`, which tie a renderer, a
  shader and a projection together.
- **Utilities** – `read_file` (`deltaengine.files`), `load_image`
  (`deltaengine.images`) and a `Timer` stopwatch (`deltaengine.timer`).

The OpenGL parts use pyglet, which is imported only when they are first used, so
the math, scene and batching code runs without a display. Images are decoded with
Pillow.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Demo

The package installs a `deltaengine` command. It opens an 800 × 600 window and
draws a 16 × 9 grid of unit sprites, each randomly either coloured or textured
with the images given on the command line in turn, printing the frame rate once a
second. Press Escape to quit.

```
deltaengine bricks.png wall.jpg crate.png crate2.png
```

With `--scene hierarchy` it instead draws a group holding a large sprite textured
with the second image and a nested, further translated group holding a small
sprite textured with the first; this scene needs at least two images.

```
deltaengine --scene hierarchy small.png large.png
```

## What is not included

- **Shader sources.** The demo reads `res/shaders/texture.vert` and
  `res/shaders/texture.frag` relative to the current directory; the package does
  not ship these files. Any GLSL pair that takes a `proj` matrix uniform and a
  `textures` sampler array, and the vertex attributes laid out by
  `GLBatchBackend` (position at 0, texture coordinate at 2, texture slot at 3,
  colour at 4), will do.
- **Sample images.** Textures must be supplied on the command line.

## Using the math

```python
from deltaengine.vectors import Vec3, cross, normalize
from deltaengine.matrix import orthographic, translate, rotate, radians

projection = orthographic(0, 16, 0, 9, -1, 1)
model = translate(Vec3(1, 1, 0)) * rotate(radians(45), Vec3(0, 0, 1))
point = model * Vec3(0.5, 0.5, 0)

up = normalize(cross(Vec3(1, 0, 0), Vec3(0, 1, 0)))
```

Two behaviours worth knowing: with a number on the left, `2 - v` and `2 / v`
compute `v - 2` and `v / 2`; and `transpose` swaps the off-diagonal entries but
leaves the diagonal of its result at zero. `normalize` of a zero vector raises
`ZeroDivisionError`.

## Building a scene

```python
from deltaengine.vectors import Vec2, Vec3, Vec4
from deltaengine.matrix import translate
from deltaengine.renderable import Sprite, Group

outer = Group(translate(Vec3(1, 1, 0)))
inner = Group(translate(Vec3(1, 1, 0)))

outer.add(Sprite(Vec3(0, 0, 0), Vec2(8, 5), Vec4(0.8, 0.2, 0.2, 1), None))
inner.add(Sprite(Vec3(0, 0, 0), Vec2(2, 2), Vec4(0.2, 0.8, 0.2, 1), None))
outer.add(inner)
```

Submitting `outer` to a renderer pushes its matrix, submits its children (the
inner group pushes its own matrix on top) and pops again, so the inner sprite
ends up offset by both translations.

## Batching without a GPU

`BatchRenderer2D` does its bookkeeping in Python and hands each finished batch
to a backend implementing `BatchBackend.draw(vertices, index_count,
texture_slots)`. `GLBatchBackend` draws with OpenGL; any other object with a
`draw` method can be used to record or inspect batches:

```python
from deltaengine.batch import BatchRenderer2D

class Recorder:
    def __init__(self):
        self.batches = []

    def draw(self, vertices, index_count, texture_slots):
        self.batches.append((list(vertices), index_count, list(texture_slots)))

recorder = Recorder()
renderer = BatchRenderer2D(recorder, 60000)
renderer.begin()
outer.submit(renderer)
renderer.end()
renderer.flush()
```

Each sprite becomes four `Vertex` values and six indices. Coloured sprites get
texture slot 0 and a colour packed by `pack_color` (red in the lowest byte);
textured ones get the 1-based slot of their texture's `id`. Submitting outside
`begin`/`end` raises `RuntimeError`, and going past `max_sprites` in one batch
raises `OverflowError`.

## Drawing on screen

```python
from deltaengine.window import Window
from deltaengine.shader import Shader
from deltaengine.layers import TileLayer
from deltaengine.matrix import orthographic

with Window("sprites", 800, 600) as window:
    shader = Shader("texture.vert", "texture.frag", None)
    with TileLayer(shader, orthographic(0, 16, 0, 9, -1, 1)) as layer:
        layer.add(outer)
        while not window.is_closed():
            window.clear()
            layer.render()
            window.update()
```

`Shader` raises `ShaderError` when a stage fails to compile or the program fails
to link. `Texture` raises `ImageLoadError` when the image cannot be decoded.
Leaving the `TileLayer` block releases its renderables, renderer, GL backend and
shader. `Window.mouse_position` is measured from the top-left corner.