"""Models: named collections of meshes."""

from __future__ import annotations

from typing import Dict, Iterable, Optional

from .mesh import Mesh, Vertex

__all__ = ["Model", "create_model"]


class Model:
    """A named model holding its meshes by name."""

    def __init__(self, name: str, vertices: Iterable[Vertex], indices: Iterable[int]) -> None:
        self.name = name
        self._meshes: Dict[str, Mesh] = {name: Mesh(vertices, indices)}

    def __repr__(self) -> str:
        return f"Model({self.name!r}, meshes={list(self._meshes)})"

    def get_mesh(self, name: str) -> Optional[Mesh]:
        """The mesh called ``name``, or ``None`` if there is none."""
        return self._meshes.get(name)

    def meshes(self) -> Dict[str, Mesh]:
        """All meshes keyed by name."""
        return self._meshes


def create_model(name: str, vertices: Iterable[Vertex], indices: Iterable[int]) -> Model:
    return Model(name, vertices, indices)