"""
Rotational tests for collapse operations.

Each test is automatically run in all 4 directions by rotating the starting
grid, the slide direction, and the expected grid.

## Usage

```python
test = RotationalTestCase(
    name="pair_merges",
    grid="2 2 _ _",
    variations=[
        TestVariation(Direction.LEFT, "4 _ _ _", "pair merges left"),
    ],
)
run_rotational_test(test, collapse)
```

Written as a left slide, the case is also checked as up, right and down.
"""

from tile_types import Direction
from tilegrid import collapse
from test_rotations import RotationalTestCase, TestVariation, run_rotational_test


class TestCollapseRotational:
    """Rotational tests for collapse."""

    def test_tiles_slide_into_gaps(self) -> None:
        """Tiles close up without merging when no neighbours match."""
        test = RotationalTestCase(
            name="slide_into_gaps",
            grid="2 _ 4 _",
            variations=[
                TestVariation(Direction.LEFT, "2 4 _ _", "compress left"),
                TestVariation(Direction.RIGHT, "_ _ 2 4", "compress right"),
            ],
        )

        run_rotational_test(test, collapse)

    def test_pair_merges_across_gap(self) -> None:
        """Equal tiles separated by an empty cell merge."""
        test = RotationalTestCase(
            name="merge_across_gap",
            grid="2 _ 2 _",
            variations=[
                TestVariation(Direction.LEFT, "4 _ _ _", "merge left"),
                TestVariation(Direction.RIGHT, "_ _ _ 4", "merge right"),
            ],
        )

        run_rotational_test(test, collapse)

    def test_merged_tile_does_not_merge_again(self) -> None:
        """2 2 4 becomes 4 4, not 8."""
        test = RotationalTestCase(
            name="no_double_merge",
            grid="2 2 4 _",
            variations=[
                TestVariation(Direction.LEFT, "4 4 _ _", "merge once left"),
            ],
        )

        run_rotational_test(test, collapse)

    def test_four_equal_tiles_make_two_pairs(self) -> None:
        """Four equal tiles merge into two, pairing from the slide edge."""
        test = RotationalTestCase(
            name="two_pairs",
            grid="2 2 2 2",
            variations=[
                TestVariation(Direction.LEFT, "4 4 _ _", "two pairs left"),
                TestVariation(Direction.RIGHT, "_ _ 4 4", "two pairs right"),
            ],
        )

        run_rotational_test(test, collapse)

    def test_odd_run_pairs_from_the_slide_edge(self) -> None:
        """Of three equal tiles, the two nearest the edge merge."""
        test = RotationalTestCase(
            name="odd_run",
            grid="_ 8 8 8",
            variations=[
                TestVariation(Direction.LEFT, "16 8 _ _", "pair nearest left edge"),
                TestVariation(Direction.RIGHT, "_ _ 8 16", "pair nearest right edge"),
            ],
        )

        run_rotational_test(test, collapse)

    def test_rows_collapse_independently(self) -> None:
        """Each line of a 2D grid collapses on its own."""
        test = RotationalTestCase(
            name="independent_rows",
            grid="2 2 _|_ 4 4|8 _ 2",
            variations=[
                TestVariation(Direction.LEFT, "4 _ _|8 _ _|8 2 _", "left"),
                TestVariation(Direction.UP, "2 2 4|8 4 2|_ _ _", "up"),
            ],
        )

        run_rotational_test(test, collapse)

    def test_blocked_line_is_unchanged(self) -> None:
        """A full line with no equal neighbours does not move."""
        test = RotationalTestCase(
            name="blocked",
            grid="2 4 8 16",
            variations=[
                TestVariation(Direction.LEFT, "2 4 8 16", "blocked left"),
                TestVariation(Direction.RIGHT, "2 4 8 16", "blocked right"),
            ],
        )

        run_rotational_test(test, collapse)

    def test_long_row_example(self) -> None:
        """A nine-cell row with several merges."""
        test = RotationalTestCase(
            name="long_row",
            grid="4 4 8 16 64 64 32 _ 64",
            variations=[
                TestVariation(Direction.LEFT, "8 8 16 128 32 64 _ _ _", "long row left"),
            ],
        )

        run_rotational_test(test, collapse)
