"""Triangle meshes: vertex data, an axis-aligned bounding box and frustum culling."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence

import numpy as np

from .material import MaterialSpecification
from .mathutils import Frustum

__all__ = ["Vertex", "Mesh"]

# Single-precision limits used as the starting extremes of the bounding box.
_FLOAT_MAX = float(np.finfo(np.float32).max)
_FLOAT_MIN = float(np.finfo(np.float32).tiny)


@dataclass(frozen=True)
class Vertex:
    """A mesh vertex: position, normal and texture coordinates."""

    position: tuple[float, float, float] = (0.0, 0.0, 0.0)
    normal: tuple[float, float, float] = (0.0, 0.0, 0.0)
    tex_coord: tuple[float, float] = (0.0, 0.0)


@dataclass
class Mesh:
    """Vertices and indices with a precomputed bounding box and a material."""

    vertices: tuple[Vertex, ...] = field(init=False, default=())
    indices: tuple[int, ...] = field(init=False, default=())
    material: MaterialSpecification = field(init=False)
    bounding_box_size: tuple[float, float, float] = field(init=False, default=(0.0, 0.0, 0.0))
    bounding_box_position: tuple[float, float, float] = field(init=False, default=(0.0, 0.0, 0.0))

    def __init__(
        self,
        vertices: Iterable[Vertex],
        indices: Iterable[int],
        material: Optional[MaterialSpecification] = None,
    ) -> None:
        self.material = material if material is not None else MaterialSpecification()
        self.vertices = ()
        self.indices = ()
        self.bounding_box_size = (0.0, 0.0, 0.0)
        self.bounding_box_position = (0.0, 0.0, 0.0)
        self.generate_mesh(vertices, indices)

    def _compute_bounding_box(self, vertices: Sequence[Vertex]) -> None:
        # Maxima start at the smallest positive float, so the upper corner
        # never lies below zero on any axis.
        mins = [_FLOAT_MAX] * 3
        maxs = [_FLOAT_MIN] * 3
        for vertex in vertices:
            for axis, coord in enumerate(vertex.position):
                if coord < mins[axis]:
                    mins[axis] = coord
                if coord > maxs[axis]:
                    maxs[axis] = coord
        self.bounding_box_size = tuple(float(hi - lo) for lo, hi in zip(mins, maxs))
        self.bounding_box_position = tuple(float(lo) for lo in mins)

    def generate_mesh(self, vertices: Iterable[Vertex], indices: Iterable[int]) -> None:
        """Replace the mesh data and recompute the bounding box."""
        vertex_list = tuple(vertices)
        self._compute_bounding_box(vertex_list)
        self.vertices = vertex_list
        self.indices = tuple(int(i) for i in indices)

    def is_visible(self, frustum: Frustum, model_matrix) -> bool:
        """Whether the box, moved by the matrix's translation, meets the frustum.

        ``model_matrix`` is a 4x4 matrix indexed ``[row][column]``.
        """
        m = np.asarray(model_matrix, dtype=float)
        if m.shape != (4, 4):
            raise ValueError(f"expected a 4x4 matrix, got shape {m.shape}")
        if m[3, 3] == 0.0:
            raise ValueError("cannot decompose a matrix whose last element is zero")
        position = m[:3, 3] / m[3, 3]
        corner = position + np.asarray(self.bounding_box_position)
        size = np.asarray(self.bounding_box_size)
        for plane in frustum:
            positive = corner.copy()
            if plane.a >= 0:
                positive[0] += size[0]
            if plane.b >= 0:
                positive[1] += size[1]
            if plane.c >= 0:
                positive[2] += size[2]
            if plane.signed_distance(positive) < 0:
                return False
        return True

    def vertices_count(self) -> int:
        return len(self.vertices)

    def indices_count(self) -> int:
        return len(self.indices)