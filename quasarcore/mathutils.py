"""Range mapping, view-frustum extraction and 2D curve interpolation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, Sequence

import numpy as np

__all__ = [
    "Direction",
    "DIRECTION_VECTORS",
    "Plane",
    "Frustum",
    "map_range",
    "calculate_frustum",
    "catmull_rom_interpolation",
    "catmull_rom_spline_interpolation",
    "cubic_interpolation",
    "cubic_spline_interpolation",
    "bezier_interpolation",
    "bezier_spline_interpolation",
    "linear_interpolation",
    "linear_spline_interpolation",
]


class Direction(IntEnum):
    """The six axis directions; also the order of a frustum's planes."""

    LEFT = 0
    RIGHT = 1
    UP = 2
    DOWN = 3
    FORWARD = 4
    BACKWARD = 5


DIRECTION_VECTORS: dict[Direction, tuple[float, float, float]] = {
    Direction.LEFT: (1.0, 0.0, 0.0),
    Direction.RIGHT: (-1.0, 0.0, 0.0),
    Direction.UP: (0.0, 1.0, 0.0),
    Direction.DOWN: (0.0, -1.0, 0.0),
    Direction.FORWARD: (0.0, 0.0, 1.0),
    Direction.BACKWARD: (0.0, 0.0, -1.0),
}


@dataclass(frozen=True)
class Plane:
    """The plane ``a*x + b*y + c*z + d = 0``."""

    a: float
    b: float
    c: float
    d: float

    def signed_distance(self, point: Sequence[float]) -> float:
        """Evaluate the plane equation at ``point``."""
        x, y, z = point
        return self.a * x + self.b * y + self.c * z + self.d


@dataclass(frozen=True)
class Frustum:
    """Six planes, one per :class:`Direction`, with normals pointing inward."""

    planes: tuple[Plane, ...]

    def __getitem__(self, direction: Direction) -> Plane:
        return self.planes[direction]

    def __iter__(self) -> Iterator[Plane]:
        return iter(self.planes)

    def __len__(self) -> int:
        return len(self.planes)


def map_range(value: float, from_min: float, from_max: float, to_min: float, to_max: float) -> float:
    """Linearly map ``value`` from one range onto another."""
    return ((value - from_min) * (to_max - to_min)) / (from_max - from_min) + to_min


def calculate_frustum(camera: Sequence[Sequence[float]]) -> Frustum:
    """Extract normalised clipping planes from a 4x4 view-projection matrix.

    The matrix is indexed ``camera[row][column]``.
    """
    m = np.asarray(camera, dtype=float)
    if m.shape != (4, 4):
        raise ValueError(f"expected a 4x4 matrix, got shape {m.shape}")
    base = m[3, :]
    planes = []
    for direction in Direction:
        normal = m[direction // 2, :]
        if direction % 2 == 1:
            normal = -normal
        normal = normal + base
        length = float(np.linalg.norm(normal[:3]))
        eq = normal[:3] / length
        planes.append(Plane(float(eq[0]), float(eq[1]), float(eq[2]), float(normal[3] / length)))
    return Frustum(tuple(planes))


def _vec(point: Sequence[float]) -> np.ndarray:
    return np.asarray(point, dtype=float)


def _curve_steps() -> tuple[float, ...]:
    # Parameters 0, 0.01, ... accumulated in single precision while t <= 1.
    step = np.float32(0.01)
    t = np.float32(0.0)
    steps = []
    while t <= np.float32(1.0):
        steps.append(float(t))
        t = np.float32(t + step)
    return tuple(steps)


_CURVE_STEPS = _curve_steps()
_DENSE_POINTS = 1000


def _dense_steps() -> Iterator[float]:
    step = np.float32(1.0) / np.float32(_DENSE_POINTS)
    for i in range(_DENSE_POINTS + 1):
        yield float(np.float32(i) * step)


def _as_curve(points: list[np.ndarray]) -> np.ndarray:
    if not points:
        return np.empty((0, 2))
    return np.array(points, dtype=float)


def catmull_rom_interpolation(t: float, p0, p1, p2, p3) -> np.ndarray:
    """Point at ``t`` on the Catmull-Rom segment from ``p1`` to ``p2``."""
    p0, p1, p2, p3 = map(_vec, (p0, p1, p2, p3))
    t2 = t * t
    t3 = t2 * t
    v0 = (p2 - p0) * 0.5
    v1 = (p3 - p1) * 0.5
    h00 = 2.0 * t3 - 3.0 * t2 + 1.0
    h01 = -2.0 * t3 + 3.0 * t2
    h10 = t3 - 2.0 * t2 + t
    h11 = t3 - t2
    return h00 * p1 + h10 * v0 + h01 * p2 + h11 * v1


def catmull_rom_spline_interpolation(points) -> np.ndarray:
    """Sample a Catmull-Rom spline through ``points`` (at least two)."""
    pts = [_vec(p) for p in points]
    if len(pts) < 2:
        raise ValueError("a Catmull-Rom spline needs at least two points")
    samples = [
        catmull_rom_interpolation(t, p0, p1, p2, p3)
        for p0, p1, p2, p3 in zip(pts, pts[1:], pts[2:], pts[3:])
        for t in _CURVE_STEPS
    ]
    return _as_curve(samples)


def cubic_interpolation(t: float, p0, p1, p2, p3) -> np.ndarray:
    """Point at ``t`` on the cubic segment between ``p1`` and ``p2``."""
    p0, p1, p2, p3 = map(_vec, (p0, p1, p2, p3))
    t2 = t * t
    t3 = t2 * t
    b0 = 0.5 * (-t3 + 2.0 * t2 - t)
    b1 = 0.5 * (3.0 * t3 - 5.0 * t2 + 2.0)
    b2 = 0.5 * (-3.0 * t3 + 4.0 * t2 + t)
    b3 = 0.5 * (t3 - t2)
    return b0 * p0 + b1 * p1 + b2 * p2 + b3 * p3


def cubic_spline_interpolation(points) -> np.ndarray:
    """Sample a cubic spline through ``points`` (at least three)."""
    pts = [_vec(p) for p in points]
    if len(pts) < 3:
        raise ValueError("a cubic spline needs at least three points")
    samples = [
        cubic_interpolation(t, p0, p1, p2, p3)
        for p0, p1, p2, p3 in zip(pts, pts[1:], pts[2:], pts[3:])
        for t in _CURVE_STEPS
    ]
    return _as_curve(samples)


def bezier_interpolation(t: float, points) -> np.ndarray:
    """Weighted sum of ``points`` with Bernstein weights lacking binomial factors."""
    pts = [_vec(p) for p in points]
    n = len(pts) - 1
    result = np.zeros(2)
    for i, point in enumerate(pts):
        result = result + ((1.0 - t) ** (n - i)) * (t ** i) * point
    return result


def bezier_spline_interpolation(points) -> np.ndarray:
    """Sample :func:`bezier_interpolation` at 1001 evenly spaced parameters."""
    pts = [_vec(p) for p in points]
    return _as_curve([bezier_interpolation(t, pts) for t in _dense_steps()])


def linear_interpolation(t: float, p0, p1) -> np.ndarray:
    """Point at ``t`` on the segment from ``p0`` to ``p1``."""
    p0, p1 = _vec(p0), _vec(p1)
    return p0 + t * (p1 - p0)


def linear_spline_interpolation(points) -> np.ndarray:
    """Sample each segment of the polyline through ``points`` densely."""
    pts = [_vec(p) for p in points]
    samples = [
        linear_interpolation(t, p0, p1)
        for p0, p1 in zip(pts, pts[1:])
        for t in _dense_steps()
    ]
    return _as_curve(samples)