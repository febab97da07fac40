"""
Report the areas of the fertile regions of a farm.

Each positional argument is one barren land rectangle, given by the x,y
coordinates of its bottom left and top right corners:

    barren-land-analysis "48 192 351 207" "48 392 351 407" "120 52 135 547" "260 52 275 547"

The areas of all fertile regions are printed in ascending order on one line.
"""

import argparse
import logging
import sys
from collections.abc import Sequence

from rich.console import Console

from farm import (
    FarmInputError,
    Proportions,
    build,
    farm_to_rich_text,
    find_regions,
    format_areas,
)
from farm.constants import (
    DISPLAY_SCALE,
    EXIT_INVALID_INPUT,
    FARM_HEIGHT,
    FARM_WIDTH,
    USAGE,
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s | %(message)s",
)
logger = logging.getLogger(__name__)


def positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return number


def get_cli_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Configures and parses command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Outputs the areas of all fertile regions of a farm, in ascending order."
    )
    parser.add_argument(
        "rectangles",
        nargs="*",
        metavar="RECTANGLE",
        help='Barren land rectangle as "x1 y1 x2 y2" (bottom left, top right).',
    )
    parser.add_argument(
        "--width", type=positive_int, default=FARM_WIDTH, help="Farm width"
    )
    parser.add_argument(
        "--height", type=positive_int, default=FARM_HEIGHT, help="Farm height"
    )
    parser.add_argument(
        "--show", action="store_true", help="Display a map of the fertile regions"
    )
    parser.add_argument(
        "--scale",
        type=positive_int,
        default=DISPLAY_SCALE,
        help="Sample one cell out of SCALE along each axis when displaying",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point, returns the process exit status."""
    args = get_cli_args(argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    proportions = Proportions(args.width, args.height)

    try:
        grid = build(args.rectangles, proportions)
    except FarmInputError as e:
        print(f"ERROR  : {e}")
        print(USAGE)
        return EXIT_INVALID_INPUT

    areas = find_regions(grid, proportions)
    logger.info(
        "Found %d fertile regions on a %dx%d farm",
        len(areas),
        proportions.width,
        proportions.height,
    )
    print(format_areas(areas))

    if args.show:
        Console().print(farm_to_rich_text(grid, args.scale))

    return 0


if __name__ == "__main__":
    sys.exit(main())
