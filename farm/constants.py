"""
Global constants used throughout the farm analysis
"""

from typing import Final

from .types import Proportions

# Farm dimensions, x spans the width and y spans the height
FARM_WIDTH: Final[int] = 400
FARM_HEIGHT: Final[int] = 600
FARM_PROPORTIONS: Final[Proportions] = Proportions(FARM_WIDTH, FARM_HEIGHT)

# Cell states
UNASSIGNED: Final[int] = 0
BARREN: Final[int] = -1
FIRST_REGION_ID: Final[int] = 1

# A rectangle is "x1 y1 x2 y2"
RECTANGLE_TOKENS: Final[int] = 4

OUTPUT_SEPARATOR: Final[str] = " "
NO_FERTILE_AREAS: Final[str] = "No fertile areas"

EXIT_INVALID_INPUT: Final[int] = 1

USAGE: Final[str] = (
    "Each barren land rectangle should consist of four non-negative integers "
    "separated by spaces.\n"
    "The first two integers are the x,y coordinates of the bottom left corner, "
    "the next two the x,y coordinates of the top right corner.\n"
    '\nUSAGE  : barren-land-analysis "<barren land coordinates>" ...\n'
    'EXAMPLE: barren-land-analysis "48 192 351 207" "48 392 351 407" '
    '"120 52 135 547" "260 52 275 547"'
)

# Display
DISPLAY_SCALE: Final[int] = 20
CELL_WIDTH: Final[int] = 2

BARREN_COLOR: Final[tuple[int, int, int]] = (85, 85, 85)  # Grey (#555555)
UNASSIGNED_COLOR: Final[tuple[int, int, int]] = (0, 0, 0)  # Black (#000000)

# Region ids cycle through this palette
REGION_COLORS: Final[tuple[tuple[int, int, int], ...]] = (
    (79, 204, 48),  # Green (#4FCC30)
    (30, 147, 255),  # Blue (#1E93FF)
    (255, 220, 0),  # Yellow (#FFDC00)
    (229, 58, 163),  # Magenta (#E53AA3)
    (255, 133, 27),  # Orange (#FF851B)
    (135, 216, 241),  # Blue light (#87D8F1)
    (249, 60, 49),  # Red (#F93C31)
    (146, 18, 49),  # Maroon (#921231)
)
