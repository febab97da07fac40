"""
Farm grid construction from barren land rectangles.

A rectangle arrives as a raw string "x1 y1 x2 y2" holding the bottom-left
and top-right corners. Each one is parsed, validated against the farm
proportions, then every cell it covers is marked barren in a fresh grid.
"""

import logging
import re
from collections.abc import Sequence
from typing import Final

import numpy as np

from .constants import BARREN, FARM_PROPORTIONS, RECTANGLE_TOKENS, UNASSIGNED
from .errors import InvalidCoordinates, MalformedInput, NoInputProvided
from .types import FarmGrid, Proportions, Rectangle

logger = logging.getLogger(__name__)

INTEGER_PATTERN: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")


def parse_rectangle(raw: str) -> Rectangle:
    """
    Parse a whitespace separated "x1 y1 x2 y2" string.

    Raises:
        MalformedInput: if there are not exactly four tokens, or a token
            is not a base-10 integer.
    """
    tokens = raw.split()
    if len(tokens) != RECTANGLE_TOKENS:
        raise MalformedInput(
            raw, f"expected {RECTANGLE_TOKENS} coordinates, got {len(tokens)}"
        )

    for token in tokens:
        if not INTEGER_PATTERN.fullmatch(token):
            raise MalformedInput(raw, f"{token!r} is not an integer")

    x1, y1, x2, y2 = (int(token) for token in tokens)
    return Rectangle(x1, y1, x2, y2)


def validate_rectangle(
    rectangle: Rectangle, proportions: Proportions = FARM_PROPORTIONS
) -> None:
    """
    Check that a rectangle has positive width and height and fits the farm.

    Raises:
        InvalidCoordinates: if a coordinate is negative, if the corners are
            inverted or equal along an axis, or if the top-right corner lies
            outside the farm.
    """
    x1, y1, x2, y2 = rectangle
    width, height = proportions

    if min(x1, y1, x2, y2) < 0:
        raise InvalidCoordinates(rectangle, "coordinates must be non-negative")

    if x1 >= x2 or y1 >= y2:
        raise InvalidCoordinates(
            rectangle,
            "the bottom left corner must lie strictly below and left of the "
            "top right corner",
        )

    if x2 > width - 1 or y2 > height - 1:
        raise InvalidCoordinates(
            rectangle,
            f"the farm spans x in [0, {width - 1}] and y in [0, {height - 1}]",
        )


def mark_barren(grid: FarmGrid, rectangle: Rectangle) -> None:
    """Mark every cell of the inclusive rectangle as barren, in place."""
    x1, y1, x2, y2 = rectangle
    grid[x1 : x2 + 1, y1 : y2 + 1] = BARREN


def barren_area(grid: FarmGrid) -> int:
    return int(np.count_nonzero(grid == BARREN))


def build(
    rectangles: Sequence[str], proportions: Proportions = FARM_PROPORTIONS
) -> FarmGrid:
    """
    Build a farm grid with every barren rectangle marked.

    All rectangles are parsed and validated before the grid is touched, so
    the first invalid one aborts the build.

    Args:
        rectangles: Raw "x1 y1 x2 y2" strings.
        proportions: Farm dimensions, 400 x 600 by default.

    Returns:
        A (width, height) grid holding BARREN for barren cells and
        UNASSIGNED everywhere else.

    Raises:
        NoInputProvided: if rectangles is empty.
        MalformedInput: if a rectangle does not parse.
        InvalidCoordinates: if a rectangle does not fit the farm.
    """
    if not rectangles:
        raise NoInputProvided()

    parsed: list[Rectangle] = []
    for raw in rectangles:
        rectangle = parse_rectangle(raw)
        validate_rectangle(rectangle, proportions)
        parsed.append(rectangle)

    width, height = proportions
    grid: FarmGrid = np.full((width, height), UNASSIGNED, dtype=np.int32)
    for rectangle in parsed:
        mark_barren(grid, rectangle)
        logger.debug(
            "Marked barren rectangle '%s' (%d cells)", rectangle, rectangle.area
        )

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Built %dx%d farm with %d barren cells from %d rectangles",
            width,
            height,
            barren_area(grid),
            len(parsed),
        )
    return grid
