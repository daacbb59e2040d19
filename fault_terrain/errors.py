# fault_terrain/errors.py

"""Exceptions raised by the terrain generation pipeline."""


class TerrainError(Exception):
    """Base class for all terrain generation errors."""


class InvalidConfiguration(TerrainError, ValueError):
    """The grid size or fault count is outside its valid range."""


class DegenerateRange(TerrainError):
    """
    All heights are equal, so there is no range to normalize against.

    This is a legitimate terrain state (a flat plane). The generator recovers
    from it by leaving the heights as they are.
    """

    def __init__(self, value: float):
        super().__init__(f"Cannot normalize heights: every vertex has height {value}.")
        self.value = value
