"""Core building blocks for a small 3D engine: events, timing, containers,
math, meshes, cameras, Perlin noise and DXT compression."""

__version__ = "0.1.0"