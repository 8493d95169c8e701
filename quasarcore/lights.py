"""Light descriptions and coloured debug vertices."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "SpotLight",
    "PointLight",
    "DirectionalLight",
    "DebugLineVertex",
    "DebugTriangleVertex",
]

Vec3 = tuple[float, float, float]


@dataclass
class SpotLight:
    """A cone of light with distance attenuation; cutoffs are in degrees."""

    ambient: Vec3 = (0.1, 0.1, 0.1)
    diffuse: Vec3 = (0.8, 0.8, 0.8)
    specular: Vec3 = (1.0, 1.0, 1.0)

    direction: Vec3 = (-1.0, -1.0, -1.0)
    position: Vec3 = (0.0, 0.0, 0.0)

    constant: float = 1.0
    linear: float = 0.09
    quadratic: float = 0.032

    cutoff: float = 10.0
    outer_cutoff: float = 15.0


@dataclass
class PointLight:
    """A light radiating from a point, attenuated with distance."""

    ambient: Vec3
    diffuse: Vec3
    specular: Vec3

    position: Vec3

    constant: float
    linear: float
    quadratic: float


@dataclass
class DirectionalLight:
    """A light shining uniformly along one direction."""

    ambient: Vec3
    diffuse: Vec3
    specular: Vec3

    direction: Vec3


@dataclass(frozen=True)
class DebugLineVertex:
    position: Vec3
    color: Vec3


@dataclass(frozen=True)
class DebugTriangleVertex:
    position: Vec3
    color: Vec3