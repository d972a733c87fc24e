import itertools

import pytest

from deltaengine import buffers, gl_batch
from deltaengine.batch import BatchRenderer2D
from deltaengine.gl_batch import GLBatchBackend
from deltaengine.renderable import VERTEX_SIZE, Sprite
from deltaengine.vectors import Vec2, Vec3, Vec4


class FakeArrayType:
    def __init__(self, length):
        self.length = length

    def __call__(self, *values):
        return list(values) + [0] * (self.length - len(values))

    def from_buffer_copy(self, data):
        return bytes(data)


class FakeCType:
    def __mul__(self, length):
        return FakeArrayType(length)


class FakeGL:
    GL_TEXTURE0 = 100
    GLuint = FakeCType()
    GLfloat = FakeCType()

    def __init__(self):
        self.calls = []
        self.ids = itertools.count(1)

    def __getattr__(self, name):
        if name.startswith("GL_"):
            return name
        if name.startswith("gl"):
            def record(*args):
                self.calls.append((name, args))
                return 0
            return record
        raise AttributeError(name)

    def glGenBuffers(self, n, handle):
        handle[0] = next(self.ids)

    def glGenVertexArrays(self, n, handle):
        handle[0] = next(self.ids)

    def args(self, name):
        return [a for n, a in self.calls if n == name]


@pytest.fixture
def gl(monkeypatch):
    fake = FakeGL()
    monkeypatch.setattr(gl_batch, "_gl", fake)
    monkeypatch.setattr(buffers, "_gl", fake)
    return fake


def test_setup_allocates_buffers(gl):
    backend = GLBatchBackend(2)
    sizes = [a[1] for a in gl.args("glBufferData")]
    assert sizes[0] == VERTEX_SIZE * 4 * 2
    assert backend.ibo.count == 12
    assert sorted(a[0] for a in gl.args("glEnableVertexAttribArray")) == [0, 2, 3, 4]
    assert len({backend.vao, backend.vbo, backend.ibo.buffer_id}) == 3


def test_attribute_offsets(gl):
    backend = GLBatchBackend(1)
    assert backend.ibo.count == 6
    pointers = gl.args("glVertexAttribPointer")
    offsets = {a[0]: a[5] for a in pointers}
    assert offsets == {0: 0, 4: 12, 2: 16, 3: 24}
    assert all(a[4] == VERTEX_SIZE for a in pointers)


def test_draw_uploads_and_draws(gl):
    backend = GLBatchBackend(4)
    renderer = BatchRenderer2D(backend, 4)
    renderer.begin()
    renderer.submit(Sprite(Vec3(0, 0, 0), Vec2(1, 1), Vec4(1, 0, 0, 1)))
    renderer.end()
    gl.calls.clear()
    renderer.flush()
    upload = gl.args("glBufferSubData")[0]
    assert upload[2] == 4 * VERTEX_SIZE
    assert upload[3] == b"".join(v.pack() for v in renderer.vertices)
    assert gl.args("glDrawElements") == [("GL_TRIANGLES", 6, "GL_UNSIGNED_INT", None)]
    assert len(gl.args("glActiveTexture")) == 32


def test_delete_releases(gl):
    backend = GLBatchBackend(1)
    backend.delete()
    assert gl.args("glDeleteVertexArrays") == [(1, [backend.vao])]
    assert gl.args("glDeleteBuffers") == [(1, [backend.vbo]), (1, [backend.ibo.buffer_id])]