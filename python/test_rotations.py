"""
Test rotation framework for systematic directional testing.

This module provides utilities to write a collapse test once and automatically
run it in all 4 rotations (0°, 90°, 180°, 270°), ensuring every slide
direction gets the same coverage.
"""

from dataclasses import dataclass, field
from typing import Callable

from grid_parser import format_grid, parse_grid
from tile_types import Direction
from tilegrid import Grid


# =============================================================================
# Rotation Utilities
# =============================================================================


def rotate_grid_90(grid: Grid) -> Grid:
    """
    Rotate a Grid 90° clockwise.

    In an N×M grid rotated 90° clockwise, it becomes M×N.
    Position (row, col) → (col, N - 1 - row)
    """
    original_rows = grid.height
    original_cols = grid.width

    new_cells: list[list[int]] = [[0] * original_rows for _ in range(original_cols)]

    for row in range(original_rows):
        for col in range(original_cols):
            new_cells[col][original_rows - 1 - row] = grid.cells[row][col]

    return Grid(tuple(tuple(row) for row in new_cells))


def rotate_direction_90(direction: Direction) -> Direction:
    """Rotate a direction 90° clockwise."""
    rotation_map = {
        Direction.UP: Direction.RIGHT,
        Direction.RIGHT: Direction.DOWN,
        Direction.DOWN: Direction.LEFT,
        Direction.LEFT: Direction.UP,
    }
    return rotation_map[direction]


# =============================================================================
# Test Case Data Structures
# =============================================================================


@dataclass
class TestVariation:
    """A single direction with the grid expected after collapsing."""

    direction: Direction
    expected: str
    description: str = ""

    __test__ = False


@dataclass
class RotationalTestCase:
    """A starting grid and the variations to check in every rotation."""

    name: str
    grid: str
    variations: list[TestVariation] = field(default_factory=list)

    __test__ = False

    def get_all_rotations(self) -> list[tuple[int, Grid, Direction, Grid, str]]:
        """
        Generate the test in all 4 rotations.

        Returns:
            List of (rotation_degrees, start, direction, expected, description) tuples
        """
        results = []

        for variation in self.variations:
            start = parse_grid(self.grid)
            expected = parse_grid(variation.expected)
            direction = variation.direction

            for rotation in [0, 90, 180, 270]:
                results.append((rotation, start, direction, expected, variation.description))
                start = rotate_grid_90(start)
                expected = rotate_grid_90(expected)
                direction = rotate_direction_90(direction)

        return results


# =============================================================================
# Test Runner
# =============================================================================


def run_rotational_test(
    test_case: RotationalTestCase,
    operation: Callable[[Grid, Direction], Grid],
) -> None:
    """
    Run a rotational test case through all 4 rotations.

    Args:
        test_case: The test case to run
        operation: The deterministic move to test (e.g., collapse)
    """
    for rotation, start, direction, expected, description in test_case.get_all_rotations():
        result = operation(start, direction)
        assert result == expected, (
            f"{test_case.name} at {rotation}° - {description}: "
            f"slid {direction.value} from \"{format_grid(start)}\"\n"
            f"  Expected: \"{format_grid(expected)}\"\n"
            f"  Got:      \"{format_grid(result)}\""
        )


# =============================================================================
# Framework Self-Tests
# =============================================================================


class TestRotationUtilities:
    """Sanity checks for the rotation helpers."""

    def test_rotate_grid_90_moves_corners(self) -> None:
        """Top-left goes to top-right after a clockwise turn."""
        grid = parse_grid("2 _ _|_ _ _")
        rotated = rotate_grid_90(grid)

        assert (rotated.width, rotated.height) == (2, 3)
        assert rotated.cells[0][1] == 1

    def test_four_rotations_is_identity(self) -> None:
        """Rotating four times returns the original grid."""
        grid = parse_grid("2 4 8|16 _ 32")
        rotated = grid
        for _ in range(4):
            rotated = rotate_grid_90(rotated)

        assert rotated == grid

    def test_direction_cycle(self) -> None:
        """Four clockwise turns bring every direction back to itself."""
        for direction in Direction:
            rotated = direction
            for _ in range(4):
                rotated = rotate_direction_90(rotated)
            assert rotated == direction
