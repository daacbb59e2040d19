# fault_terrain/faults.py

"""
================================================================================
FAULT FORMATION
================================================================================
This module displaces grid heights with the classic fault algorithm. Each fault
is a vertical plane through a random point on the grid with a random
horizontal normal. Every vertex on the positive side of the plane is raised by
a fixed unit and every other vertex is lowered by the same unit. Many faults
accumulate into a rough, natural-looking heightfield.

Data Contract:
---------------
- Inputs:
    - positions (np.ndarray): float64 (N*N, 3) vertex positions, writable.
    - fault_count (int): The number of faults to apply, F >= 0.
    - rng (np.random.Generator): The source of randomness for fault planes.
- Outputs: None. The y column of positions is edited in place.
- Side Effects: Consumes 3 draws from the rng per fault (x, z, theta).
- Invariants: The side test uses only x and z. A vertex lying exactly on the
  fault line is lowered (the test is a strict "> 0").
================================================================================
"""

import math
from dataclasses import dataclass

import numpy as np
from numba import njit

from . import config as DEFAULTS
from .errors import InvalidConfiguration


@dataclass(frozen=True)
class FaultPlane:
    """A vertical fault plane through point (x, 0, z) with a horizontal unit normal."""
    point: tuple[float, float, float]
    normal: tuple[float, float, float]
    theta: float

    @classmethod
    def from_angle(cls, x: float, z: float, theta: float) -> 'FaultPlane':
        return cls(
            point=(x, 0.0, z),
            normal=(math.sin(theta), 0.0, math.cos(theta)),
            theta=theta,
        )

    def signed_distance(self, x: float, z: float) -> float:
        """Dot product of (vertex - point) with the normal. Positive means the raised side."""
        return (x - self.point[0]) * self.normal[0] + (z - self.point[2]) * self.normal[2]


def sample_fault_plane(rng: np.random.Generator) -> FaultPlane:
    """Draws a fault plane through a uniform point in [-1, 1]^2 with a uniform angle in [0, 2*pi)."""
    x = rng.uniform(DEFAULTS.GRID_EXTENT_MIN, DEFAULTS.GRID_EXTENT_MAX)
    z = rng.uniform(DEFAULTS.GRID_EXTENT_MIN, DEFAULTS.GRID_EXTENT_MAX)
    theta = rng.uniform(0.0, 2.0 * math.pi)
    return FaultPlane.from_angle(float(x), float(z), float(theta))


@njit
def _displace_heights(positions, px, pz, nx, nz, displacement):
    """
    Raises or lowers every vertex depending on its side of the fault line.
    JIT-compiled with Numba; it runs once per fault over the whole grid.
    """
    for k in range(positions.shape[0]):
        # p.y and n.y are both zero, so the y term of the dot product vanishes.
        side = (positions[k, 0] - px) * nx + (positions[k, 2] - pz) * nz
        if side > 0:
            positions[k, 1] += displacement
        else:
            positions[k, 1] -= displacement


def apply_fault(positions: np.ndarray, plane: FaultPlane, displacement: float = DEFAULTS.FAULT_DISPLACEMENT):
    """Applies a single fault to the grid heights in place."""
    _displace_heights(
        positions,
        plane.point[0], plane.point[2],
        plane.normal[0], plane.normal[2],
        displacement
    )


def apply_faults(
    positions: np.ndarray,
    fault_count: int,
    rng: np.random.Generator,
    displacement: float = DEFAULTS.FAULT_DISPLACEMENT
) -> list[FaultPlane]:
    """
    Applies fault_count independent random faults to the grid heights in place.

    Returns:
        list[FaultPlane]: The planes that were applied, in order. A fault count
        of zero is a valid no-op and returns an empty list.

    Raises:
        InvalidConfiguration: If fault_count is negative.
    """
    if fault_count < 0:
        raise InvalidConfiguration(f"Fault count must be non-negative, got {fault_count}.")

    planes = []
    for _ in range(fault_count):
        plane = sample_fault_plane(rng)
        apply_fault(positions, plane, displacement)
        planes.append(plane)
    return planes
