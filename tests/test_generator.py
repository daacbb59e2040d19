import logging

import numpy as np
import pytest

from fault_terrain import config as DEFAULTS
from fault_terrain.errors import InvalidConfiguration
from fault_terrain.faults import sample_fault_plane
from fault_terrain.generator import Configuration, TerrainGenerator, generate_terrain

C = DEFAULTS.HEIGHT_HALF_RANGE


# --- Configuration ---

def test_configuration_defaults():
    configuration = Configuration.from_dict({})

    assert configuration.grid_size == DEFAULTS.DEFAULT_GRID_SIZE
    assert configuration.fault_count == DEFAULTS.DEFAULT_FAULT_COUNT


def test_configuration_accepts_integer_strings():
    configuration = Configuration.from_dict({'grid_size': ' 12 ', 'fault_count': '40'})

    assert configuration == Configuration(12, 40)


@pytest.mark.parametrize("grid_size, fault_count", [
    (1, 10),
    (0, 10),
    (5, -1),
    ("abc", 10),
    (5, "ten"),
    (2.5, 10),
    (True, 10),
    (None, 10),
])
def test_invalid_configuration_is_rejected(grid_size, fault_count):
    with pytest.raises(InvalidConfiguration):
        Configuration(grid_size=grid_size, fault_count=fault_count)


def test_invalid_configuration_is_a_value_error():
    with pytest.raises(ValueError):
        Configuration(grid_size=1, fault_count=0)


# --- Generation ---

def test_three_by_three_without_faults_is_flat(rng, logger):
    mesh = TerrainGenerator(logger=logger, rng=rng).generate(Configuration(3, 0))

    assert mesh.vertex_count == 9
    assert mesh.triangle_count == 8
    assert np.all(mesh.heights == 0.0)
    assert [tuple(int(i) for i in t) for t in mesh.triangles] == [
        (0, 1, 3), (1, 3, 4), (1, 2, 4), (2, 4, 5),
        (3, 4, 6), (4, 6, 7), (4, 5, 7), (5, 7, 8),
    ]


def test_flat_plane_is_logged_not_raised(rng, logger, caplog):
    caplog.set_level(logging.INFO, logger=logger.name)

    mesh = TerrainGenerator(logger=logger, rng=rng).generate(Configuration(5, 0))

    assert mesh.height_bounds() == (0.0, 0.0)
    assert "flat plane" in caplog.text


def test_two_by_two_single_fault_follows_the_side_test():
    seed = 2024
    mesh = TerrainGenerator(rng=np.random.default_rng(seed)).generate(Configuration(2, 1))

    # Replay the generator's draws: 4 colors, then one fault plane.
    replay = np.random.default_rng(seed)
    replay.random(4)
    plane = sample_fault_plane(replay)
    raised = [plane.signed_distance(x, z) > 0 for x, _, z in mesh.positions]

    assert mesh.vertex_count == 4
    assert mesh.triangle_count == 2
    if all(raised) or not any(raised):
        # Every vertex fell on one side, so the terrain is flat.
        assert np.all(mesh.heights == 0.0)
    else:
        expected = [C if up else -C for up in raised]
        np.testing.assert_array_equal(mesh.heights, expected)


@pytest.mark.parametrize("seed", range(5))
def test_faulted_heights_span_exactly_the_target_range(seed):
    mesh = TerrainGenerator(seed=seed).generate(Configuration(20, 50))

    low, high = mesh.height_bounds()
    assert low == pytest.approx(-C)
    assert high == pytest.approx(C)


def test_custom_half_range(rng):
    mesh = TerrainGenerator(rng=rng, half_range=3.0).generate(Configuration(12, 30))

    assert mesh.height_bounds() == pytest.approx((-3.0, 3.0))


def test_repeated_calls_keep_shape_but_change_values(rng):
    generator = TerrainGenerator(rng=rng)
    configuration = Configuration(10, 40)

    first = generator.generate(configuration)
    second = generator.generate(configuration)

    assert first.positions.shape == second.positions.shape
    assert first.triangles.shape == second.triangles.shape
    np.testing.assert_array_equal(first.triangles, second.triangles)
    assert not np.array_equal(first.heights, second.heights)


def test_same_seed_reproduces_the_mesh():
    configuration = Configuration(8, 20)

    first = TerrainGenerator(seed=99).generate(configuration)
    second = TerrainGenerator(seed=99).generate(configuration)

    np.testing.assert_array_equal(first.positions, second.positions)
    np.testing.assert_array_equal(first.colors, second.colors)


def test_x_and_z_survive_the_pipeline(rng):
    mesh = generate_terrain(Configuration(6, 15), rng=rng)
    axis = np.linspace(-1.0, 1.0, 6)

    lattice = mesh.positions.reshape(6, 6, 3)
    np.testing.assert_array_equal(lattice[:, 0, 0], axis)
    np.testing.assert_array_equal(lattice[0, :, 2], axis)


def test_generated_mesh_is_read_only(rng):
    mesh = generate_terrain(Configuration(4, 5), rng=rng)

    with pytest.raises(ValueError):
        mesh.positions[:, 1] = 0.0


def test_completed_generation_is_logged(rng, logger, caplog):
    caplog.set_level(logging.INFO, logger=logger.name)

    TerrainGenerator(logger=logger, rng=rng).generate(Configuration(4, 3))

    assert "grid size 4 and 3 faults" in caplog.text
    assert "16 vertices, 18 triangles" in caplog.text
