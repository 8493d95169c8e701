[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quasarcore"
version = "0.1.0"
description = "Core building blocks for a small 3D engine: events, math, meshes, cameras, noise and DXT compression"
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = ["3d", "engine", "rendering", "perlin", "dxt", "frustum", "mesh", "events"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["quasarcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
