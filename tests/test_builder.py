"""
Tests for the farm grid builder.

Tests rectangle parsing, coordinate validation and barren marking.
"""

import numpy as np
import pytest

from farm import (
    BARREN,
    FARM_PROPORTIONS,
    UNASSIGNED,
    FarmInputError,
    InvalidCoordinates,
    MalformedInput,
    NoInputProvided,
    Proportions,
    Rectangle,
    barren_area,
    build,
    mark_barren,
    parse_rectangle,
    validate_rectangle,
)


class TestParseRectangle:
    """Tests for parse_rectangle."""

    def test_four_integers(self):
        assert parse_rectangle("48 192 351 207") == Rectangle(48, 192, 351, 207)

    def test_surrounding_and_repeated_whitespace(self):
        assert parse_rectangle("  1   2\t3 4 ") == Rectangle(1, 2, 3, 4)

    def test_signed_integers(self):
        """Signs parse; negative values are left to validation."""
        assert parse_rectangle("-1 +2 3 4") == Rectangle(-1, 2, 3, 4)

    @pytest.mark.parametrize("raw", ["", "1 2 3", "1 2 3 4 5", "   "])
    def test_wrong_token_count(self, raw):
        with pytest.raises(MalformedInput, match="expected 4 coordinates"):
            parse_rectangle(raw)

    @pytest.mark.parametrize("raw", ["1 2 3 x", "1.5 2 3 4", "1 2 3 1_000", "1 2 - 4"])
    def test_non_integer_token(self, raw):
        with pytest.raises(MalformedInput, match="is not an integer"):
            parse_rectangle(raw)

    def test_error_keeps_raw_input(self):
        with pytest.raises(MalformedInput) as exc_info:
            parse_rectangle("1 2 3")
        assert exc_info.value.raw == "1 2 3"


class TestValidateRectangle:
    """Tests for validate_rectangle on the default 400x600 farm."""

    def test_full_width_band(self):
        validate_rectangle(Rectangle(0, 292, 399, 307))

    def test_whole_farm(self):
        validate_rectangle(Rectangle(0, 0, 399, 599))

    def test_negative_coordinate(self):
        with pytest.raises(InvalidCoordinates, match="non-negative"):
            validate_rectangle(Rectangle(0, -292, 399, 307))

    @pytest.mark.parametrize(
        "rectangle",
        [
            Rectangle(0, 292, 281, 291),  # y2 < y1
            Rectangle(0, 292, 0, 307),  # x1 == x2
            Rectangle(48, 392, 30, 407),  # x2 < x1
            Rectangle(10, 20, 30, 20),  # y1 == y2
        ],
    )
    def test_degenerate_or_inverted(self, rectangle):
        with pytest.raises(InvalidCoordinates, match="strictly below and left"):
            validate_rectangle(rectangle)

    @pytest.mark.parametrize(
        "rectangle",
        [
            Rectangle(0, 292, 400, 307),  # x2 > 399
            Rectangle(0, 292, 399, 600),  # y2 > 599
            Rectangle(0, 292, 599, 307),  # x only spans 400 cells
        ],
    )
    def test_out_of_bounds(self, rectangle):
        with pytest.raises(InvalidCoordinates, match="the farm spans"):
            validate_rectangle(rectangle)

    def test_custom_proportions(self):
        validate_rectangle(Rectangle(0, 0, 4, 2), Proportions(5, 3))
        with pytest.raises(InvalidCoordinates):
            validate_rectangle(Rectangle(0, 0, 4, 3), Proportions(5, 3))

    def test_error_keeps_rectangle(self):
        with pytest.raises(InvalidCoordinates) as exc_info:
            validate_rectangle(Rectangle(48, 392, 30, 407))
        assert exc_info.value.rectangle == Rectangle(48, 392, 30, 407)
        assert "48 392 30 407" in str(exc_info.value)


class TestMarkBarren:
    """Tests for mark_barren."""

    def test_inclusive_corners(self):
        grid = np.zeros((5, 4), dtype=np.int32)
        mark_barren(grid, Rectangle(1, 1, 3, 2))

        assert barren_area(grid) == 6
        assert grid[1, 1] == BARREN
        assert grid[3, 2] == BARREN
        assert grid[0, 0] == UNASSIGNED
        assert grid[3, 3] == UNASSIGNED
        assert grid[4, 2] == UNASSIGNED

    def test_marking_twice_is_idempotent(self):
        grid = np.zeros((5, 4), dtype=np.int32)
        mark_barren(grid, Rectangle(1, 1, 3, 2))
        once = grid.copy()
        mark_barren(grid, Rectangle(1, 1, 3, 2))
        assert np.array_equal(grid, once)


class TestBuild:
    """Tests for build."""

    def test_empty_input(self):
        with pytest.raises(NoInputProvided):
            build([])

    def test_default_proportions(self):
        grid = build(["0 292 399 307"])
        assert grid.shape == (FARM_PROPORTIONS.width, FARM_PROPORTIONS.height)
        assert barren_area(grid) == 400 * 16

    def test_only_barren_and_unassigned_cells(self):
        grid = build(["48 192 351 207", "120 52 135 547"])
        assert set(np.unique(grid).tolist()) == {BARREN, UNASSIGNED}

    def test_overlapping_rectangles(self):
        grid = build(["0 0 2 2", "1 1 3 3"], Proportions(5, 5))
        assert barren_area(grid) == 9 + 9 - 4

    def test_duplicate_rectangles(self):
        once = build(["1 1 3 2"], Proportions(5, 4))
        twice = build(["1 1 3 2", "1 1 3 2"], Proportions(5, 4))
        assert np.array_equal(once, twice)

    def test_first_invalid_rectangle_aborts(self):
        with pytest.raises(MalformedInput):
            build(["0 0 1 1", "0 0 1"])
        with pytest.raises(InvalidCoordinates):
            build(["0 0 1 1", "0 292 400 307"])

    def test_errors_share_a_base(self):
        for rectangles in ([], ["a b c d"], ["0 292 0 307"]):
            with pytest.raises(FarmInputError):
                build(rectangles)
        assert issubclass(FarmInputError, ValueError)
