"""
Fertile land analysis of a rectangular farm.

A farm is a grid of 1x1 cells. Barren land is declared as rectangles; every
other cell is fertile. This package finds the maximal 4-connected fertile
regions and reports their areas.

**Builder** (builder.py)
    Parses and validates "x1 y1 x2 y2" rectangles and marks them on a grid.
    - build(rectangles, proportions) -> grid

**Regions** (regions.py)
    Breadth-first flood fill labeling each fertile region in place.
    - find_regions(grid) -> areas

**Connectivity** (connectivity.py)
    Bounded neighbor functions for the grid.
    - tower_neighbors: 4-connectivity (orthogonal only)

**Analysis** (analysis.py)
    - fertile_areas(rectangles, proportions) -> sorted areas
    - format_areas(areas) -> output line

**Display** (display.py)
    - farm_to_rich_text(grid, scale) -> colored map
"""

from .analysis import fertile_areas, format_areas
from .builder import (
    barren_area,
    build,
    mark_barren,
    parse_rectangle,
    validate_rectangle,
)
from .connectivity import (
    TOWER_DELTAS,
    CoordNeighborFunc,
    make_bounded_neighbors,
    tower_neighbors,
)
from .constants import BARREN, FARM_PROPORTIONS, FIRST_REGION_ID, UNASSIGNED
from .display import farm_to_rich_text
from .errors import (
    FarmInputError,
    InvalidCoordinates,
    MalformedInput,
    NoInputProvided,
)
from .regions import find_regions, flood_fill
from .types import Coord, FarmGrid, Proportions, Rectangle

__all__ = [
    # Types
    "Coord",
    "FarmGrid",
    "Proportions",
    "Rectangle",
    # Constants
    "BARREN",
    "UNASSIGNED",
    "FIRST_REGION_ID",
    "FARM_PROPORTIONS",
    # Builder
    "build",
    "parse_rectangle",
    "validate_rectangle",
    "mark_barren",
    "barren_area",
    # Connectivity
    "CoordNeighborFunc",
    "TOWER_DELTAS",
    "make_bounded_neighbors",
    "tower_neighbors",
    # Regions
    "find_regions",
    "flood_fill",
    # Analysis
    "fertile_areas",
    "format_areas",
    # Display
    "farm_to_rich_text",
    # Errors
    "FarmInputError",
    "MalformedInput",
    "InvalidCoordinates",
    "NoInputProvided",
]
