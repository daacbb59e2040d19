# fault_terrain/generator.py

"""
================================================================================
CORE TERRAIN GENERATOR
================================================================================
This module contains the TerrainGenerator class, the single entry point a
renderer calls to obtain a new terrain mesh.

Data Contract:
---------------
- Inputs (on initialization):
    - logger: A configured Python logging object for runtime messages.
    - rng / seed: An injected NumPy random generator, or a seed to build one.
- Inputs (per call):
    - Configuration: grid_size N >= 2 and fault_count F >= 0.
- Outputs (from methods):
    - A read-only Mesh with N*N vertices and 2*(N-1)**2 triangles whose heights
      lie in [-c, c], or are all 0 when the terrain is flat.
- Side Effects: Logs messages using the provided logger. Consumes draws from
  the random generator.
- Invariants: The pipeline always runs grid -> faults -> normalization. No
  state other than the random generator survives between calls.
================================================================================
"""

import logging
import time
from dataclasses import dataclass

import numpy as np

from . import config as DEFAULTS
from .errors import DegenerateRange, InvalidConfiguration
from .faults import apply_faults
from .grid import build_grid
from .mesh import Mesh
from .normalize import normalize_heights


def _coerce_int(name: str, value) -> int:
    """Accepts ints and integer strings (as typed into a UI field); rejects everything else."""
    if isinstance(value, bool):
        raise InvalidConfiguration(f"'{name}' must be an integer, got {value!r}.")
    if isinstance(value, (int, np.integer)):
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            raise InvalidConfiguration(f"'{name}' must be an integer, got {value!r}.") from None
    raise InvalidConfiguration(f"'{name}' must be an integer, got {value!r}.")


@dataclass(frozen=True)
class Configuration:
    """The two recognized terrain parameters."""
    grid_size: int = DEFAULTS.DEFAULT_GRID_SIZE
    fault_count: int = DEFAULTS.DEFAULT_FAULT_COUNT

    def __post_init__(self):
        grid_size = _coerce_int('grid_size', self.grid_size)
        fault_count = _coerce_int('fault_count', self.fault_count)

        if grid_size < DEFAULTS.MIN_GRID_SIZE:
            raise InvalidConfiguration(
                f"Grid size must be at least {DEFAULTS.MIN_GRID_SIZE}, got {grid_size}."
            )
        if fault_count < 0:
            raise InvalidConfiguration(f"Fault count must be non-negative, got {fault_count}.")

        # Frozen dataclass: normalized values must be written via object.__setattr__.
        object.__setattr__(self, 'grid_size', grid_size)
        object.__setattr__(self, 'fault_count', fault_count)

    @classmethod
    def from_dict(cls, user_config: dict) -> 'Configuration':
        """Builds a Configuration, falling back to the internal defaults for missing keys."""
        return cls(
            grid_size=user_config.get('grid_size', DEFAULTS.DEFAULT_GRID_SIZE),
            fault_count=user_config.get('fault_count', DEFAULTS.DEFAULT_FAULT_COUNT),
        )


class TerrainGenerator:
    """
    Generates fault-formation terrain meshes.
    This class is backend-only and does not handle any visualization.
    """
    def __init__(
        self,
        logger: logging.Logger = None,
        rng: np.random.Generator = None,
        seed: int = DEFAULTS.DEFAULT_SEED,
        half_range: float = DEFAULTS.HEIGHT_HALF_RANGE,
        displacement: float = DEFAULTS.FAULT_DISPLACEMENT
    ):
        """
        Initializes the terrain generator.

        Args:
            logger (logging.Logger, optional): The logger instance for all output.
            rng (np.random.Generator, optional): An injected random source. Takes
                precedence over seed. Tests pass a seeded generator here.
            seed (int, optional): Seed for a new generator when rng is None.
                None draws fresh entropy from the OS.
            half_range (float): Heights are normalized into [-half_range, half_range].
            displacement (float): The height step applied by each fault.
        """
        self.logger = logger or logging.getLogger(__name__)
        self.half_range = half_range
        self.displacement = displacement

        if rng is not None:
            self.rng = rng
            self.logger.debug("Initialized with injected random generator.")
        else:
            self.rng = np.random.default_rng(seed)
            self.logger.debug(f"No random generator provided, created one from seed: {seed}")

    def generate(self, configuration: Configuration) -> Mesh:
        """
        Runs the full pipeline and returns a new Mesh.

        Raises:
            InvalidConfiguration: If the grid size is too small. No mesh is produced.
        """
        start_time = time.perf_counter()
        n = configuration.grid_size
        f = configuration.fault_count

        # 1. Build the flat grid.
        positions, colors, triangles = build_grid(n, self.rng)
        self.logger.debug(f"Built {n}x{n} grid: {len(positions)} vertices, {len(triangles)} triangles.")

        # 2. Displace heights with random faults.
        apply_faults(positions, f, self.rng, self.displacement)
        self.logger.debug(f"Applied {f} faults.")

        # 3. Rescale heights into the target range.
        try:
            normalize_heights(positions, self.half_range)
        except DegenerateRange as e:
            self.logger.info(f"Terrain is a flat plane, skipping normalization ({e})")

        mesh = Mesh(positions=positions, colors=colors, triangles=triangles)

        elapsed = time.perf_counter() - start_time
        self.logger.info(
            f"Generated terrain with grid size {n} and {f} faults: "
            f"{mesh.vertex_count} vertices, {mesh.triangle_count} triangles in {elapsed:.3f}s"
        )
        return mesh


def generate_terrain(
    configuration: Configuration,
    rng: np.random.Generator = None,
    logger: logging.Logger = None
) -> Mesh:
    """One-shot helper that builds a TerrainGenerator and generates a single mesh."""
    return TerrainGenerator(logger=logger, rng=rng).generate(configuration)
