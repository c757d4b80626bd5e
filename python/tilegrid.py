"""
Grid engine for the 2048 tile-merging puzzle.

Every slide is reduced to a left slide: the grid is rotated so the requested
direction points left, each row is collapsed, and the rotation is undone.
Grids are frozen values; every operation returns a new Grid.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Callable, Iterable, Sequence

from tile_types import ConstructionError, Direction, GameOver, NoEmptyCell

logger = logging.getLogger(__name__)

Row = tuple[int, ...]
Cells = tuple[Row, ...]

# Chance that a spawned tile is a 4 (exponent 2) instead of a 2 (exponent 1)
FOUR_PROBABILITY = 0.1


# =============================================================================
# Data Structures
# =============================================================================


@dataclass(frozen=True)
class Grid:
    """A rectangular grid of tile exponents (0 = empty, n = tile 2**n)."""

    cells: Cells

    @property
    def height(self) -> int:
        return len(self.cells)

    @property
    def width(self) -> int:
        return len(self.cells[0]) if self.cells else 0

    @property
    def tile_count(self) -> int:
        """Number of non-empty cells."""
        return sum(1 for row in self.cells for cell in row if cell != 0)

    def empty_cells(self) -> list[tuple[int, int]]:
        """(row, col) of every empty cell, in row-major order."""
        return [
            (r, c)
            for r, row in enumerate(self.cells)
            for c, cell in enumerate(row)
            if cell == 0
        ]

    def values(self) -> tuple[tuple[int, ...], ...]:
        """Tile values instead of exponents, 0 for empty cells."""
        return tuple(tuple(2**cell if cell else 0 for cell in row) for row in self.cells)

    def with_cell(self, row: int, col: int, exponent: int) -> Grid:
        """Return a copy of this grid with one cell replaced."""
        mutable_cells = [list(r) for r in self.cells]
        mutable_cells[row][col] = exponent
        return Grid(tuple(tuple(r) for r in mutable_cells))


# =============================================================================
# Construction
# =============================================================================


def new_grid(width: int = 4, height: int = 4, rng: random.Random | None = None) -> Grid:
    """
    Create an empty grid and spawn the two starting tiles.

    Args:
        width: Number of columns
        height: Number of rows
        rng: Optional random source (defaults to the module-level generator)

    Returns:
        New Grid holding exactly two tiles

    Raises:
        ConstructionError: If a dimension is below 1, or both are below 2
    """
    if width < 1 or height < 1 or (width < 2 and height < 2):
        raise ConstructionError(
            f"Invalid grid size {width}x{height}\n"
            f"  Both dimensions must be at least 1 and one must be at least 2"
        )

    grid = Grid(tuple((0,) * width for _ in range(height)))
    grid = spawn_tile(spawn_tile(grid, rng), rng)
    logger.debug("new_grid: %dx%d with tiles at %s", width, height, _tile_positions(grid))
    return grid


def grid_from_rows(rows: Iterable[Sequence[int]]) -> Grid:
    """
    Build a grid from explicit exponents, without spawning any tiles.

    Unlike new_grid(), any non-empty shape is accepted, including 1x1, since
    no starting tiles have to fit.

    Args:
        rows: Rectangular array of non-negative integer exponents

    Returns:
        Grid holding exactly the given cells

    Raises:
        ConstructionError: If the array is empty or ragged, or holds a cell
            that is not a non-negative int (bools and floats are rejected)
    """
    cells = tuple(tuple(row) for row in rows)

    if not cells or not cells[0]:
        raise ConstructionError("Grid must have at least one row and one column")

    cols = len(cells[0])
    mismatched = [(i, len(row)) for i, row in enumerate(cells) if len(row) != cols]
    if mismatched:
        error_msg = (
            f"Inconsistent row lengths\n"
            f"  Expected: {cols} columns (from row 0)\n"
            f"  Mismatched rows:\n"
        )
        for row_idx, actual_cols in mismatched:
            error_msg += f"    Row {row_idx}: {actual_cols} columns\n"
        raise ConstructionError(error_msg)

    not_int = [
        (r, c, cell)
        for r, row in enumerate(cells)
        for c, cell in enumerate(row)
        if not isinstance(cell, int) or isinstance(cell, bool)
    ]
    if not_int:
        error_msg = "Exponents must be integers\n  Invalid cells:\n"
        for row_idx, col_idx, cell in not_int:
            error_msg += f"    Row {row_idx}, column {col_idx}: {cell!r}\n"
        raise ConstructionError(error_msg)

    negative = [(r, c) for r, row in enumerate(cells) for c, cell in enumerate(row) if cell < 0]
    if negative:
        raise ConstructionError(f"Negative exponents at {negative}")

    return Grid(cells)


def grid_dimensions(grid: Grid) -> tuple[int, int]:
    """Return (width, height) of the grid."""
    return (grid.width, grid.height)


# =============================================================================
# Row Collapse
# =============================================================================


def compress_row(row: Sequence[int]) -> Row:
    """Move all tiles to the start of the row, keeping their order."""
    tiles = [cell for cell in row if cell != 0]
    return tuple(tiles) + (0,) * (len(row) - len(tiles))


def combine_row(row: Sequence[int]) -> Row:
    """
    Slide a single row to the left, merging equal neighbours.

    The row is compressed, then scanned left to right: two adjacent equal
    tiles become one tile with the next exponent and the scan resumes after
    the pair, so a merged tile never merges twice in one slide. A final
    compress closes the gaps the merges left.

    Example:
        [2, 2, 3, 4, 6, 6, 5, 0, 6] -> [3, 3, 4, 7, 5, 6, 0, 0, 0]
    """
    cells = list(compress_row(row))
    i = 0
    while i < len(cells) - 1:
        if cells[i] != 0 and cells[i] == cells[i + 1]:
            cells[i] += 1
            cells[i + 1] = 0
            i += 2
        else:
            i += 1
    return compress_row(cells)


# =============================================================================
# Orientation
# =============================================================================


def _transpose(cells: Cells) -> Cells:
    return tuple(zip(*cells))


def _reverse_rows(cells: Cells) -> Cells:
    return tuple(row[::-1] for row in cells)


def _identity(cells: Cells) -> Cells:
    return cells


# direction -> (rotate so the slide points left, undo that rotation)
_ORIENTATIONS: dict[Direction, tuple[Callable[[Cells], Cells], Callable[[Cells], Cells]]] = {
    Direction.LEFT: (_identity, _identity),
    Direction.RIGHT: (_reverse_rows, _reverse_rows),
    Direction.UP: (_transpose, _transpose),
    Direction.DOWN: (
        lambda cells: _reverse_rows(_transpose(cells)),
        lambda cells: _transpose(_reverse_rows(cells)),
    ),
}


# =============================================================================
# Moves
# =============================================================================


def collapse(grid: Grid, direction: Direction) -> Grid:
    """
    Slide and merge every line of the grid in the given direction.

    No tile is spawned; this is the deterministic half of slide().
    """
    to_left, from_left = _ORIENTATIONS[direction]
    rotated = to_left(grid.cells)
    collapsed = tuple(combine_row(row) for row in rotated)
    return Grid(from_left(collapsed))


def has_moves(grid: Grid) -> bool:
    """Check whether any direction would change the grid."""
    for r, row in enumerate(grid.cells):
        for c, cell in enumerate(row):
            if cell == 0:
                return True
            if c + 1 < grid.width and row[c + 1] == cell:
                return True
            if r + 1 < grid.height and grid.cells[r + 1][c] == cell:
                return True
    return False


def slide(grid: Grid, direction: Direction, rng: random.Random | None = None) -> Grid | GameOver:
    """
    Slide the grid in a direction and spawn a new tile if anything moved.

    Args:
        grid: Current grid
        direction: Direction to slide
        rng: Optional random source for the spawned tile

    Returns:
        - The input grid itself if the direction cannot move any tile
        - A new grid with one spawned tile if tiles moved or merged
        - The collapsed grid without a spawn if it has no empty cell left
        - GameOver if no direction can change the grid
    """
    collapsed = collapse(grid, direction)

    if collapsed == grid:
        if not has_moves(grid):
            logger.info("slide %s: no more options", direction.value)
            return GameOver(grid)
        logger.debug("slide %s: unchanged", direction.value)
        return grid

    try:
        result = spawn_tile(collapsed, rng)
    except NoEmptyCell:
        logger.debug("slide %s: changed, grid full after collapse", direction.value)
        return collapsed

    logger.debug("slide %s: changed, %d tiles", direction.value, result.tile_count)
    return result


# =============================================================================
# Spawning
# =============================================================================


def spawn_tile(grid: Grid, rng: random.Random | None = None) -> Grid:
    """
    Place a new tile on a uniformly chosen empty cell.

    The tile is a 2 (exponent 1) nine times out of ten, otherwise a 4.

    Raises:
        NoEmptyCell: If the grid is full
    """
    options = grid.empty_cells()
    if not options:
        raise NoEmptyCell(f"No empty cell in {grid.width}x{grid.height} grid")

    source = rng if rng is not None else random
    row, col = source.choice(options)
    exponent = 2 if source.random() < FOUR_PROBABILITY else 1

    logger.debug("spawn_tile: exponent %d at (%d, %d)", exponent, row, col)
    return grid.with_cell(row, col, exponent)


def _tile_positions(grid: Grid) -> list[tuple[int, int]]:
    return [
        (r, c)
        for r, row in enumerate(grid.cells)
        for c, cell in enumerate(row)
        if cell != 0
    ]
