"""Perspective projection and a camera attached to a transform."""

from __future__ import annotations

import math
from typing import Optional, Protocol

import numpy as np

__all__ = ["TransformSource", "Camera", "perspective"]

_NEAR = 0.1
_FAR = 1000.0


class TransformSource(Protocol):
    """What a camera needs from the transform it follows."""

    def global_view_matrix(self) -> np.ndarray: ...

    def global_transform(self) -> np.ndarray: ...


def perspective(fov_y: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Right-handed perspective matrix with clip depth in [-1, 1].

    ``fov_y`` is in radians; the result is indexed ``[row][column]``.
    """
    if aspect == 0:
        raise ValueError("aspect ratio must not be zero")
    tan_half = math.tan(fov_y / 2.0)
    result = np.zeros((4, 4))
    result[0, 0] = 1.0 / (aspect * tan_half)
    result[1, 1] = 1.0 / tan_half
    result[2, 2] = -(far + near) / (far - near)
    result[3, 2] = -1.0
    result[2, 3] = -(2.0 * far * near) / (far - near)
    return result


class Camera:
    """Perspective camera whose view follows a transform component."""

    def __init__(self) -> None:
        self._projection = np.identity(4)
        self._fov = 45.0
        self.min_fov = 15.0
        self.max_fov = 95.0
        self.viewport_size = (1.0, 1.0)
        self._transform: Optional[TransformSource] = None

    def init(self, transform_component: TransformSource) -> None:
        """Attach the transform the camera follows."""
        self._transform = transform_component

    def _require_transform(self) -> TransformSource:
        if self._transform is None:
            raise RuntimeError("camera has no transform component; call init() first")
        return self._transform

    def view_matrix(self) -> np.ndarray:
        return self._require_transform().global_view_matrix()

    def projection_matrix(self) -> np.ndarray:
        return self._projection

    def transform(self) -> np.ndarray:
        return self._require_transform().global_transform()

    @property
    def fov(self) -> float:
        """Vertical field of view in degrees."""
        return self._fov

    def _update_projection(self) -> None:
        width, height = self.viewport_size
        self._projection = perspective(math.radians(self._fov), width / height, _NEAR, _FAR)

    def set_fov(self, fov: float) -> None:
        self._fov = fov
        self._update_projection()

    def on_resize(self, width: float, height: float) -> None:
        self.viewport_size = (width, height)
        self._update_projection()