# fault_terrain/config.py

"""
================================================================================
INTERNAL DEFAULT CONFIGURATION
================================================================================
This module contains the default, fallback internal constants for the terrain
generator. These values are used if they are not explicitly provided by the
caller's configuration.

DO NOT MODIFY THIS FILE FOR A SPECIFIC TERRAIN.
Instead, pass a configuration dictionary to Configuration.from_dict().
================================================================================
"""

# --- Grid Resolution ---
# The number of vertices along one side of the square grid.
DEFAULT_GRID_SIZE = 50
# A grid needs at least two vertices per side to form a single cell.
MIN_GRID_SIZE = 2

# --- Grid Extent ---
# The lattice spans [GRID_EXTENT_MIN, GRID_EXTENT_MAX] on both the x and z axes,
# inclusive at both ends.
GRID_EXTENT_MIN = -1.0
GRID_EXTENT_MAX = 1.0

# --- Fault Formation ---
DEFAULT_FAULT_COUNT = 100
# The height added to one side of a fault and removed from the other (Rule 1).
FAULT_DISPLACEMENT = 1.0

# --- Height Normalization ---
# Normalized heights lie in [-HEIGHT_HALF_RANGE, HEIGHT_HALF_RANGE].
# 0.5 gives a total relief of 1.0, matching the width of the grid's half-extent.
HEIGHT_HALF_RANGE = 0.5

# --- Randomness ---
# None means a fresh, unpredictable seed is drawn from the OS for every generator.
DEFAULT_SEED = None
