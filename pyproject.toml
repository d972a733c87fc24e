[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "deltaengine"
version = "0.1.0"
description = "A small 2D sprite engine: vector and matrix math, batched sprite rendering, groups and layers over OpenGL"
requires-python = ">=3.10"
keywords = ["opengl", "2d", "sprites", "renderer", "batching", "graphics", "pyglet"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Games/Entertainment",
]
dependencies = [
    "pyglet>=2.0",
    "pillow>=9.1",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[project.scripts]
deltaengine = "deltaengine.app:main"

[tool.hatch.build.targets.wheel]
packages = ["deltaengine"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
