import numpy as np
import pytest

from fault_terrain.grid import build_grid
from fault_terrain.mesh import Mesh, Vertex


@pytest.fixture
def mesh(rng):
    positions, colors, triangles = build_grid(4, rng)
    return Mesh(positions=positions, colors=colors, triangles=triangles)


def test_counts_and_grid_size(mesh):
    assert mesh.vertex_count == 16
    assert mesh.triangle_count == 18
    assert mesh.grid_size == 4


def test_arrays_are_read_only(mesh):
    with pytest.raises(ValueError):
        mesh.positions[0, 1] = 1.0
    with pytest.raises(ValueError):
        mesh.colors[0] = (1.0, 0.0, 0.0)
    with pytest.raises(ValueError):
        mesh.triangles[0, 0] = 3


def test_fields_cannot_be_reassigned(mesh):
    with pytest.raises(AttributeError):
        mesh.positions = np.zeros((16, 3))


def test_vertex_lookup(mesh):
    vertex = mesh.vertex(5)

    assert isinstance(vertex, Vertex)
    assert vertex.position == tuple(float(v) for v in mesh.positions[5])
    assert vertex.color == tuple(float(v) for v in mesh.colors[5])


def test_flat_index_buffer(mesh):
    indices = mesh.flat_indices()

    assert indices.ndim == 1
    assert len(indices) == 3 * mesh.triangle_count
    assert indices.dtype == np.uint32
    np.testing.assert_array_equal(indices[:6], [0, 1, 4, 1, 4, 5])


def test_height_bounds_of_a_flat_mesh(mesh):
    assert mesh.height_bounds() == (0.0, 0.0)


def test_mismatched_attribute_lengths_are_rejected():
    with pytest.raises(ValueError):
        Mesh(positions=np.zeros((4, 3)), colors=np.zeros((3, 3)), triangles=np.zeros((2, 3), dtype=np.uint32))
