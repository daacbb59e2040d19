# fault_terrain/__init__.py

# This file makes the 'fault_terrain' directory a Python package.
# We also use it to define the public API of the package.

from .errors import TerrainError, InvalidConfiguration, DegenerateRange
from .mesh import Mesh, Vertex
from .faults import FaultPlane
from .generator import Configuration, TerrainGenerator, generate_terrain

__all__ = [
    "Configuration",
    "TerrainGenerator",
    "generate_terrain",
    "Mesh",
    "Vertex",
    "FaultPlane",
    "TerrainError",
    "InvalidConfiguration",
    "DegenerateRange",
]
