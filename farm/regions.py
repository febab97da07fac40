"""
Fertile region extraction via flood fill.

A fertile region is a maximal set of 4-connected cells that are neither
barren nor already part of another region. Regions are labeled in place
on the farm grid with consecutive ids starting at FIRST_REGION_ID, so
once find_regions returns every fertile cell carries the id of its region.

The fill is breadth-first with an explicit queue, so even a region
covering the whole farm never grows the call stack.
"""

import logging
from collections import deque

from .connectivity import TOWER_DELTAS, CoordNeighborFunc, make_bounded_neighbors
from .constants import FIRST_REGION_ID, UNASSIGNED
from .types import Coord, FarmGrid, Proportions

logger = logging.getLogger(__name__)


def flood_fill(
    grid: FarmGrid, seed: Coord, label: int, neighbors: CoordNeighborFunc
) -> int:
    """
    Label the region containing seed and return its area.

    Args:
        grid: Farm grid, mutated in place.
        seed: An unassigned fertile cell.
        label: Region id written into every cell of the region.
        neighbors: Bounded neighbor function of the grid.

    Returns:
        int: number of cells in the region
    """
    grid[seed] = label
    area = 1

    # Breadth-first traversal
    queue = deque([seed])
    while queue:
        current = queue.popleft()
        for neighbor in neighbors(current):
            # Labeling on enqueue keeps every cell queued at most once
            if grid[neighbor] == UNASSIGNED:
                grid[neighbor] = label
                area += 1
                queue.append(neighbor)

    return area


def find_regions(grid: FarmGrid, proportions: Proportions | None = None) -> list[int]:
    """
    Label every fertile region of the grid and collect their areas.

    Cells are scanned in row-major order over (x, y). Each unassigned cell
    met by the scan seeds a new region, which is filled completely before
    the scan resumes.

    Args:
        grid: Farm grid with barren cells marked, mutated in place.
        proportions: Grid dimensions, defaults to the grid's shape.

    Returns:
        list[int]: region areas in discovery order, empty if the whole
        farm is barren
    """
    if proportions is None:
        proportions = Proportions(*grid.shape)
    width, height = proportions
    neighbors = make_bounded_neighbors(TOWER_DELTAS, proportions)

    areas: list[int] = []
    label = FIRST_REGION_ID
    for x in range(width):
        for y in range(height):
            if grid[x, y] != UNASSIGNED:
                continue

            seed = Coord(x, y)
            area = flood_fill(grid, seed, label, neighbors)
            logger.debug("Region %d seeded at %s covers %d cells", label, seed, area)
            areas.append(area)
            label += 1

    logger.debug("Found %d fertile regions", len(areas))
    return areas
