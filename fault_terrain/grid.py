# fault_terrain/grid.py

"""
================================================================================
GRID CONSTRUCTION
================================================================================
This module builds the flat, regularly spaced starting grid for the fault
algorithm: vertex positions, vertex colors and the triangle index list.

Data Contract:
---------------
- Inputs:
    - grid_size (int): The number of vertices along one side, N >= 2.
    - rng (np.random.Generator): The source of randomness for vertex colors.
- Outputs:
    - positions (np.ndarray): float64 (N*N, 3). Row i of the lattice runs along
      x, column j along z, both spanning [-1, 1] inclusive. Every y is 0.
    - colors (np.ndarray): float64 (N*N, 3). Uniform gray: one value drawn from
      [0, 1) per vertex, repeated across r, g and b.
    - triangles (np.ndarray): uint32 (2 * (N-1)**2, 3).
- Side Effects: Consumes N*N draws from the rng.
- Invariants: Vertex (i, j) is stored at index i * N + j (row-major).
================================================================================
"""

import numpy as np

from . import config as DEFAULTS
from .errors import InvalidConfiguration


def grid_index(row: int, col: int, grid_size: int) -> int:
    """Row-major index of the vertex at (row, col)."""
    return row * grid_size + col


def validate_grid_size(grid_size: int):
    if grid_size < DEFAULTS.MIN_GRID_SIZE:
        raise InvalidConfiguration(
            f"Grid size must be at least {DEFAULTS.MIN_GRID_SIZE}, got {grid_size}."
        )


def build_positions(grid_size: int) -> np.ndarray:
    """Generates the flat lattice of vertex positions, evenly spaced by 2 / (N-1)."""
    axis = np.linspace(DEFAULTS.GRID_EXTENT_MIN, DEFAULTS.GRID_EXTENT_MAX, grid_size)
    # indexing='ij' keeps row i on x and column j on z, so ravel() is row-major.
    x, z = np.meshgrid(axis, axis, indexing='ij')

    positions = np.zeros((grid_size * grid_size, 3), dtype=np.float64)
    positions[:, 0] = x.ravel()
    positions[:, 2] = z.ravel()
    return positions


def build_colors(grid_size: int, rng: np.random.Generator) -> np.ndarray:
    """Assigns each vertex a random shade of gray."""
    gray = rng.random(grid_size * grid_size)
    return np.repeat(gray[:, np.newaxis], 3, axis=1)


def build_triangles(grid_size: int) -> np.ndarray:
    """
    Triangulates the grid with two triangles per cell.

    For the cell whose top-left vertex is (i, j) the triangles are
    (i,j) (i,j+1) (i+1,j) and (i,j+1) (i+1,j) (i+1,j+1), emitted cell by cell
    in row-major order.
    """
    cells = grid_size - 1
    rows, cols = np.meshgrid(np.arange(cells), np.arange(cells), indexing='ij')
    top_left = (rows * grid_size + cols).ravel()
    top_right = top_left + 1
    bottom_left = top_left + grid_size
    bottom_right = bottom_left + 1

    first = np.column_stack((top_left, top_right, bottom_left))
    second = np.column_stack((top_right, bottom_left, bottom_right))

    # Interleave so both triangles of a cell sit next to each other.
    triangles = np.empty((2 * cells * cells, 3), dtype=np.uint32)
    triangles[0::2] = first
    triangles[1::2] = second
    return triangles


def build_grid(grid_size: int, rng: np.random.Generator) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Builds a fresh flat grid.

    Returns:
        tuple: (positions, colors, triangles). The positions array is writable;
        the fault and normalization stages edit its y column in place.

    Raises:
        InvalidConfiguration: If grid_size is below the minimum.
    """
    validate_grid_size(grid_size)
    positions = build_positions(grid_size)
    colors = build_colors(grid_size, rng)
    triangles = build_triangles(grid_size)
    return positions, colors, triangles
