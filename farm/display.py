"""
Terminal rendering of a farm grid.

The farm is far larger than a terminal, so the grid is sampled every
`scale` cells along both axes before being drawn as colored blocks.
"""

from rich.text import Text

from .constants import (
    BARREN,
    BARREN_COLOR,
    CELL_WIDTH,
    DISPLAY_SCALE,
    FIRST_REGION_ID,
    REGION_COLORS,
    UNASSIGNED_COLOR,
)
from .types import FarmGrid


def cell_color(cell: int) -> tuple[int, int, int]:
    if cell == BARREN:
        return BARREN_COLOR
    if cell < FIRST_REGION_ID:
        return UNASSIGNED_COLOR
    return REGION_COLORS[(cell - FIRST_REGION_ID) % len(REGION_COLORS)]


def farm_to_rich_text(
    grid: FarmGrid, scale: int = DISPLAY_SCALE, cell_width: int = CELL_WIDTH
) -> Text:
    """
    Convert a farm grid to a Rich Text object with colored blocks.

    The top line of the text is the highest sampled y, so the bottom-left
    corner of the farm is drawn bottom-left.
    """
    if scale < 1:
        raise ValueError(f"Display scale must be at least 1, got {scale}")

    sampled = grid[::scale, ::scale]
    text = Text()
    # Transposed so each line is a fixed y, reversed so y grows upward
    for line in sampled.T[::-1]:
        for cell in line:
            r, g, b = cell_color(int(cell))
            text.append(" " * cell_width, style=f"on rgb({r},{g},{b})")
        text.append("\n")
    return text
