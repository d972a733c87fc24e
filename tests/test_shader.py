import pytest

from deltaengine import shader as shader_module
from deltaengine.matrix import Mat4
from deltaengine.shader import Shader, ShaderError
from deltaengine.vectors import Vec3


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
    GLint = FakeCType()
    GLfloat = FakeCType()
    GLchar = FakeCType()
    GLuint = FakeCType()

    def __init__(self):
        self.calls = []
        self.locations = {}

    def __getattr__(self, name):
        if name.startswith("GL_"):
            return name
        if name.startswith("gl"):
            def record(*args):
                self.calls.append((name, args))
                return 0
            return record
        raise AttributeError(name)

    def glGetUniformLocation(self, program_id, name):
        return self.locations.setdefault(name, len(self.locations) + 1)

    def args(self, name):
        return [a for n, a in self.calls if n == name]


class FakeShaderException(Exception):
    pass


class FakeStage:
    def __init__(self, owner, source, kind):
        self.owner = owner
        self.source = source
        self.kind = kind

    def delete(self):
        self.owner.deleted_stages.append(self.kind)


class FakeProgram:
    def __init__(self, owner, stages):
        self.owner = owner
        self.id = 42
        self.stages = stages

    def delete(self):
        self.owner.deleted_programs.append(self.id)


class FakeShaders:
    ShaderException = FakeShaderException

    def __init__(self, fail_stage=None, fail_link=False):
        self.fail_stage = fail_stage
        self.fail_link = fail_link
        self.stages = []
        self.programs = []
        self.deleted_stages = []
        self.deleted_programs = []

    def Shader(self, source, kind):
        if kind == self.fail_stage:
            raise FakeShaderException("bad shader")
        stage = FakeStage(self, source, kind)
        self.stages.append(stage)
        return stage

    def ShaderProgram(self, *stages):
        if self.fail_link:
            raise FakeShaderException("bad link")
        program = FakeProgram(self, stages)
        self.programs.append(program)
        return program


@pytest.fixture
def gl(monkeypatch):
    fake = FakeGL()
    monkeypatch.setattr(shader_module, "_gl", fake)
    return fake


@pytest.fixture
def shaders(monkeypatch):
    fake = FakeShaders()
    monkeypatch.setattr(shader_module, "_shaders", fake)
    return fake


@pytest.fixture
def sources(tmp_path):
    vert = tmp_path / "a.vert"
    frag = tmp_path / "a.frag"
    vert.write_text("void main() {}")
    frag.write_text("void main() { gl_FragColor = vec4(1.0); }")
    return vert, frag


def test_builds_program_from_two_stages(gl, shaders, sources):
    s = Shader(*sources)
    assert [stage.kind for stage in shaders.stages] == ["vertex", "fragment"]
    assert [stage.source for stage in shaders.stages] == [
        "void main() {}",
        "void main() { gl_FragColor = vec4(1.0); }",
    ]
    assert len(shaders.programs[0].stages) == 2
    assert shaders.deleted_stages == ["vertex", "fragment"]
    assert s.program_id == 42


def test_geometry_stage_added(gl, shaders, sources, tmp_path):
    geo = tmp_path / "a.geom"
    geo.write_text("void main() {}")
    s = Shader(*sources, geo)
    assert s.program_id == shaders.programs[0].id
    assert [stage.kind for stage in shaders.programs[0].stages] == ["vertex", "fragment", "geometry"]


def test_compile_failure_raises(monkeypatch, gl, sources):
    fake = FakeShaders(fail_stage="vertex")
    monkeypatch.setattr(shader_module, "_shaders", fake)
    with pytest.raises(ShaderError, match="vertex"):
        Shader(*sources)
    assert fake.programs == []


def test_fragment_failure_releases_compiled_stage(monkeypatch, gl, sources):
    fake = FakeShaders(fail_stage="fragment")
    monkeypatch.setattr(shader_module, "_shaders", fake)
    with pytest.raises(ShaderError, match="fragment"):
        Shader(*sources)
    assert fake.deleted_stages == ["vertex"]


def test_link_failure_raises(monkeypatch, gl, sources):
    fake = FakeShaders(fail_link=True)
    monkeypatch.setattr(shader_module, "_shaders", fake)
    with pytest.raises(ShaderError, match="bad link"):
        Shader(*sources)
    assert fake.deleted_stages == ["vertex", "fragment"]


def test_enable_disable(gl, shaders, sources):
    s = Shader(*sources)
    s.enable()
    s.disable()
    assert gl.args("glUseProgram") == [(s.program_id,), (0,)]


def test_uniform_location_passes_terminated_name(gl, shaders, sources):
    s = Shader(*sources)
    assert s.uniform_location("proj") == 1
    assert s.uniform_location("model") == 2
    assert list(gl.locations) == [b"proj\x00", b"model\x00"]


def test_set_1iv_passes_values(gl, shaders, sources):
    s = Shader(*sources)
    s.set_1iv("textures", [0, 1, 2, 3])
    location, count, array = gl.args("glUniform1iv")[0]
    assert location == s.uniform_location("textures")
    assert count == 4
    assert list(array) == [0, 1, 2, 3]


def test_set_mat4_passes_column_major_data(gl, shaders, sources):
    s = Shader(*sources)
    m = Mat4(range(16))
    s.set_mat4("proj", False, m)
    location, count, transpose, array = gl.args("glUniformMatrix4fv")[0]
    assert location == s.uniform_location("proj")
    assert transpose == "GL_FALSE"
    assert list(array) == m.data


def test_set_3f_passes_vector(gl, shaders, sources):
    s = Shader(*sources)
    s.set_3f("v", Vec3(1.0, 2.0, 3.0))
    location, count, values = gl.args("glUniform3fv")[0]
    assert location == s.uniform_location("v")
    assert count == 1
    assert list(values) == [1.0, 2.0, 3.0]


def test_delete(gl, shaders, sources):
    s = Shader(*sources)
    s.delete()
    assert shaders.deleted_programs == [s.program_id]