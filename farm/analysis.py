"""
End to end fertile land analysis: barren rectangles in, sorted areas out.
"""

from collections.abc import Sequence

from .builder import build
from .constants import FARM_PROPORTIONS, NO_FERTILE_AREAS, OUTPUT_SEPARATOR
from .regions import find_regions
from .types import Proportions


def fertile_areas(
    rectangles: Sequence[str], proportions: Proportions = FARM_PROPORTIONS
) -> list[int]:
    """
    Areas of all fertile regions of a farm, in ascending order.

    Raises:
        FarmInputError: if the rectangles do not describe a valid farm.
    """
    grid = build(rectangles, proportions)
    return sorted(find_regions(grid, proportions))


def format_areas(areas: Sequence[int]) -> str:
    if not areas:
        return NO_FERTILE_AREAS
    return OUTPUT_SEPARATOR.join(str(area) for area in sorted(areas))
