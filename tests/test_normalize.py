import numpy as np
import pytest

from fault_terrain.errors import DegenerateRange
from fault_terrain.normalize import height_range, normalize_heights


def _positions_with_heights(heights):
    positions = np.zeros((len(heights), 3))
    positions[:, 1] = heights
    return positions


def test_heights_span_the_target_range():
    positions = _positions_with_heights([-3.0, -1.0, 1.0, 5.0])

    normalize_heights(positions, half_range=0.5)

    np.testing.assert_allclose(positions[:, 1], [-0.5, -0.25, 0.0, 0.5])


def test_midpoint_maps_to_zero():
    positions = _positions_with_heights([2.0, 4.0, 6.0])

    normalize_heights(positions, half_range=1.0)

    assert positions[1, 1] == 0.0
    assert height_range(positions) == (-1.0, 1.0)


def test_x_and_z_are_left_alone():
    positions = _positions_with_heights([1.0, -1.0])
    positions[:, 0] = [0.3, -0.7]
    positions[:, 2] = [0.9, 0.1]

    normalize_heights(positions)

    np.testing.assert_array_equal(positions[:, 0], [0.3, -0.7])
    np.testing.assert_array_equal(positions[:, 2], [0.9, 0.1])


def test_flat_heights_raise_and_are_unchanged():
    positions = _positions_with_heights([4.0, 4.0, 4.0])

    with pytest.raises(DegenerateRange) as excinfo:
        normalize_heights(positions)

    assert excinfo.value.value == 4.0
    assert np.all(positions[:, 1] == 4.0)


def test_height_range_of_an_empty_grid():
    assert height_range(np.zeros((0, 3))) == (0.0, 0.0)
