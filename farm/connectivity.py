"""
Connectivity definitions for the farm grid.

A connectivity defines which cells are "neighbors" of each other, which
is what makes a set of fertile cells a single region. Fertile regions use
the 4 orthogonal directions (tower moves): cells touching only by a corner
belong to different regions.

Unlike a free set of coordinates, the farm is bounded, so neighbor
functions are built for a given set of proportions and never step outside
[0, width-1] x [0, height-1].
"""

from collections.abc import Sequence
from typing import Callable, Final

from .types import Coord, Proportions

# Bounded neighbor function: coordinate -> in-bounds neighbors
CoordNeighborFunc = Callable[[Coord], tuple[Coord, ...]]

# Left, down, right, up
TOWER_DELTAS: Final[tuple[Coord, ...]] = (
    Coord(-1, 0),
    Coord(0, -1),
    Coord(1, 0),
    Coord(0, 1),
)


def make_bounded_neighbors(
    deltas: Sequence[Coord], proportions: Proportions
) -> CoordNeighborFunc:
    """
    Create a neighbor function from a set of movement deltas.

    The returned function computes which cells are reachable from a given
    cell by moving one step along any of the deltas, keeping only the cells
    that lie inside the grid.

    Args:
        deltas: Unit moves, e.g. TOWER_DELTAS for 4-connectivity.
        proportions: Grid dimensions bounding the moves.

    Returns:
        A function coord -> neighbors within the grid.

    Example:
        >>> neighbors = make_bounded_neighbors(TOWER_DELTAS, Proportions(3, 3))
        >>> neighbors(Coord(0, 0))
        (Coord(x=1, y=0), Coord(x=0, y=1))
    """
    width, height = proportions
    moves = tuple(deltas)

    def neighbors(coord: Coord) -> tuple[Coord, ...]:
        x, y = coord
        return tuple(
            Coord(x + dx, y + dy)
            for dx, dy in moves
            if 0 <= x + dx < width and 0 <= y + dy < height
        )

    return neighbors


def tower_neighbors(coord: Coord, proportions: Proportions) -> tuple[Coord, ...]:
    """4-connected neighbors of coord inside a grid of the given proportions."""
    return make_bounded_neighbors(TOWER_DELTAS, proportions)(coord)
