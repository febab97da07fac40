"""
Type definitions for farm grid processing.

Coordinate Convention:
    All coordinates use (x, y) order, with the origin at the bottom-left
    corner of the farm:
    - x: increases rightward (0 to width-1)
    - y: increases upward (0 to height-1)

    Grids are indexed as grid[x, y], so a grid's shape is (width, height).

Cell Convention:
    0 is an unassigned fertile cell, -1 a barren cell, and any positive
    integer the id of the fertile region the cell belongs to.
"""

from typing import NamedTuple, TypeAlias

import numpy as np
import numpy.typing as npt


# =============================================================================
# Grid Types
# =============================================================================

FarmGrid: TypeAlias = npt.NDArray[np.int32]
"""2D farm grid indexed as grid[x, y] -> cell state."""


class Proportions(NamedTuple):
    """Grid dimensions."""

    width: int
    height: int


# =============================================================================
# Coordinate Types
# =============================================================================


class Coord(NamedTuple):
    """Cell position in (x, y) format."""

    x: int
    y: int


class Rectangle(NamedTuple):
    """
    Axis-aligned rectangle given by its bottom-left (x1, y1) and
    top-right (x2, y2) corners, both inclusive.
    """

    x1: int
    y1: int
    x2: int
    y2: int

    @property
    def width(self) -> int:
        return self.x2 - self.x1 + 1

    @property
    def height(self) -> int:
        return self.y2 - self.y1 + 1

    @property
    def area(self) -> int:
        return self.width * self.height

    def __str__(self) -> str:
        return f"{self.x1} {self.y1} {self.x2} {self.y2}"
