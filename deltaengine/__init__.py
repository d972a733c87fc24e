"""A small 2D sprite engine: vector and matrix math, batched sprite rendering, groups and layers over OpenGL."""

__version__ = "0.1.0"