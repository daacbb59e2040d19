# fault_terrain/mesh.py

"""
================================================================================
MESH RECORDS
================================================================================
Fixed-shape records describing a generated terrain surface. A Mesh is the only
thing the generator hands to a renderer.

Data Contract:
---------------
- positions (np.ndarray): float64, shape (N*N, 3). Row k is the (x, y, z)
  position of the vertex with row-major index k = row * N + col.
- colors (np.ndarray): float64, shape (N*N, 3). Row k is the (r, g, b) color
  of vertex k, each channel in [0, 1].
- triangles (np.ndarray): uint32, shape (2 * (N-1)**2, 3). Each row holds three
  vertex indices in [0, N*N).
- Side Effects: Constructing a Mesh marks all three arrays read-only.
- Invariants: len(positions) == len(colors) == N*N for some N >= 2.
================================================================================
"""

import math
from dataclasses import dataclass
from typing import NamedTuple

import numpy as np


class Vertex(NamedTuple):
    """A single grid vertex: a position and a color."""
    position: tuple[float, float, float]
    color: tuple[float, float, float]


@dataclass(frozen=True)
class Mesh:
    """
    An immutable triangulated terrain surface.

    Ownership passes to the renderer once generated. The arrays are flagged
    read-only, so any attempt to edit them in place raises a ValueError.
    """
    positions: np.ndarray
    colors: np.ndarray
    triangles: np.ndarray

    def __post_init__(self):
        if self.positions.shape != self.colors.shape:
            raise ValueError(
                f"positions {self.positions.shape} and colors {self.colors.shape} must have the same shape."
            )
        for array in (self.positions, self.colors, self.triangles):
            array.flags.writeable = False

    @property
    def vertex_count(self) -> int:
        return len(self.positions)

    @property
    def triangle_count(self) -> int:
        return len(self.triangles)

    @property
    def grid_size(self) -> int:
        """The number of vertices along one side of the square grid."""
        return math.isqrt(self.vertex_count)

    @property
    def heights(self) -> np.ndarray:
        """A read-only view of the y component of every vertex."""
        return self.positions[:, 1]

    def vertex(self, index: int) -> Vertex:
        """Returns the vertex at the given row-major index."""
        x, y, z = (float(v) for v in self.positions[index])
        r, g, b = (float(v) for v in self.colors[index])
        return Vertex(position=(x, y, z), color=(r, g, b))

    def flat_indices(self) -> np.ndarray:
        """The triangle list flattened into a single unsigned index buffer."""
        return self.triangles.ravel()

    def height_bounds(self) -> tuple[float, float]:
        """Returns (min_height, max_height) over all vertices."""
        return float(self.heights.min()), float(self.heights.max())
