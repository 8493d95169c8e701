import numpy as np
import pytest

from quasarcore.material import MaterialSpecification
from quasarcore.mathutils import calculate_frustum
from quasarcore.mesh import Mesh, Vertex


def _box(lo, hi):
    return [Vertex(position=lo), Vertex(position=hi)]


def _translation(x, y, z):
    m = np.identity(4)
    m[:3, 3] = (x, y, z)
    return m


def test_bounding_box_from_positions():
    mesh = Mesh(_box((0.0, 0.0, 0.0), (2.0, 3.0, 4.0)), [0, 1])
    assert mesh.bounding_box_size == (2.0, 3.0, 4.0)
    assert mesh.bounding_box_position == (0.0, 0.0, 0.0)


def test_bounding_box_upper_corner_never_below_zero():
    mesh = Mesh(_box((-2.0, -2.0, -2.0), (-1.0, -1.0, -1.0)), [])
    assert mesh.bounding_box_position == (-2.0, -2.0, -2.0)
    for size in mesh.bounding_box_size:
        assert size == pytest.approx(2.0)
        assert size > 2.0


def test_counts_and_data_are_kept():
    vertices = [Vertex((0.0, 0.0, 0.0)), Vertex((1.0, 0.0, 0.0)), Vertex((0.0, 1.0, 0.0))]
    mesh = Mesh(vertices, [0, 1, 2])
    assert mesh.vertices_count() == 3
    assert mesh.indices_count() == 3
    assert mesh.vertices == tuple(vertices)
    assert mesh.indices == (0, 1, 2)


def test_default_and_given_material():
    assert Mesh([], []).material == MaterialSpecification()
    spec = MaterialSpecification(albedo_texture="albedo.png")
    assert Mesh([], [], spec).material is spec


def test_generate_mesh_replaces_data():
    mesh = Mesh(_box((0.0, 0.0, 0.0), (1.0, 1.0, 1.0)), [0, 1])
    mesh.generate_mesh(_box((1.0, 1.0, 1.0), (5.0, 5.0, 5.0)), [1, 0, 1])
    assert mesh.bounding_box_position == (1.0, 1.0, 1.0)
    assert mesh.bounding_box_size == (4.0, 4.0, 4.0)
    assert mesh.indices_count() == 3


@pytest.mark.parametrize(
    "offset, expected",
    [
        ((0.0, 0.0, 0.0), True),
        ((0.5, 0.5, 0.5), True),
        ((10.0, 0.0, 0.0), False),
        ((-10.0, 0.0, 0.0), False),
        ((0.0, 10.0, 0.0), False),
        ((0.0, 0.0, -10.0), False),
    ],
)
def test_visibility_against_identity_frustum(offset, expected):
    frustum = calculate_frustum(np.identity(4))
    mesh = Mesh(_box((0.0, 0.0, 0.0), (1.0, 1.0, 1.0)), [])
    assert mesh.is_visible(frustum, _translation(*offset)) is expected


def test_visibility_rejects_degenerate_matrix():
    frustum = calculate_frustum(np.identity(4))
    mesh = Mesh(_box((0.0, 0.0, 0.0), (1.0, 1.0, 1.0)), [])
    with pytest.raises(ValueError):
        mesh.is_visible(frustum, np.zeros((4, 4)))


def test_visibility_rejects_wrong_shape():
    frustum = calculate_frustum(np.identity(4))
    mesh = Mesh([], [])
    with pytest.raises(ValueError):
        mesh.is_visible(frustum, np.identity(3))