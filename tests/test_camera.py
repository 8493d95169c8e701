import math

import numpy as np
import pytest

from quasarcore.camera import Camera, perspective


class _FakeTransform:
    def __init__(self, view, world):
        self.view = view
        self.world = world

    def global_view_matrix(self):
        return self.view

    def global_transform(self):
        return self.world


def test_perspective_structure():
    m = perspective(math.radians(60.0), 2.0, 0.1, 1000.0)
    assert m[3, 2] == -1.0
    assert m[3, 3] == 0.0
    assert m[0, 0] == pytest.approx(m[1, 1] / 2.0)
    assert m[1, 1] == pytest.approx(1.0 / math.tan(math.radians(30.0)))


def test_perspective_maps_near_and_far_to_clip_bounds():
    near, far = 0.1, 1000.0
    m = perspective(math.radians(45.0), 1.0, near, far)
    for depth, expected in ((near, -1.0), (far, 1.0)):
        clip = m @ np.array([0.0, 0.0, -depth, 1.0])
        assert clip[2] / clip[3] == pytest.approx(expected)


def test_perspective_rejects_zero_aspect():
    with pytest.raises(ValueError):
        perspective(1.0, 0.0, 0.1, 10.0)


def test_camera_defaults():
    camera = Camera()
    assert camera.fov == 45.0
    assert np.array_equal(camera.projection_matrix(), np.identity(4))


def test_on_resize_builds_projection():
    camera = Camera()
    camera.on_resize(1600.0, 900.0)
    expected = perspective(math.radians(45.0), 1600.0 / 900.0, 0.1, 1000.0)
    assert np.allclose(camera.projection_matrix(), expected)


def test_set_fov_uses_current_viewport():
    camera = Camera()
    camera.on_resize(800.0, 400.0)
    camera.set_fov(70.0)
    assert camera.fov == 70.0
    expected = perspective(math.radians(70.0), 2.0, 0.1, 1000.0)
    assert np.allclose(camera.projection_matrix(), expected)


def test_view_and_transform_come_from_component():
    view = np.arange(16.0).reshape(4, 4)
    world = np.identity(4) * 2.0
    camera = Camera()
    camera.init(_FakeTransform(view, world))
    assert np.array_equal(camera.view_matrix(), view)
    assert np.array_equal(camera.transform(), world)


def test_view_without_transform_raises():
    camera = Camera()
    with pytest.raises(RuntimeError):
        camera.view_matrix()
    with pytest.raises(RuntimeError):
        camera.transform()