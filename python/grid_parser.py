"""
Grid parsing utilities for tilegrid.

Grids are written as tile values: rows separated by |, cells by single
spaces, and _ for an empty cell.

    "2 2 _ 4|_ _ 8 _"
"""

from __future__ import annotations

from tile_types import ConstructionError
from tilegrid import Grid, grid_from_rows

__all__ = ["parse_grid", "format_grid"]


def _parse_tile(cell_str: str) -> int | None:
    """Exponent for a tile value string, or None if it is not a tile."""
    if cell_str == "_":
        return 0
    if not (cell_str.isascii() and cell_str.isdigit()):
        return None
    value = int(cell_str)
    if value < 2 or value & (value - 1):
        return None
    return value.bit_length() - 1


def parse_grid(definition: str) -> Grid:
    """
    Parse a grid from the compact text format.

    Format:
    - Rows separated by |
    - Cells separated by single spaces
    - Each cell is a power of two >= 2, or _ for empty

    Example:
        "2 _|4 2" -> Grid(((1, 0), (2, 1)))

    Args:
        definition: Grid definition string

    Returns:
        Grid with the parsed exponents

    Raises:
        ValueError: If a cell is not a tile or rows differ in length
    """
    row_strings = definition.strip().split("|")
    rows: list[list[int]] = []

    for row_idx, row_str in enumerate(row_strings):
        cells: list[int] = []

        for col_idx, cell_str in enumerate(row_str.strip().split(" ")):
            exponent = _parse_tile(cell_str)
            if exponent is None:
                error_msg = (
                    f"Invalid cell string: '{cell_str}'\n"
                    f"  Row {row_idx}: \"{row_str}\"\n"
                    f"  Position: column {col_idx}\n"
                    f"  Valid formats:\n"
                    f"    - Power of two (2, 4, 8, ...): tile\n"
                    f"    - '_': Empty cell"
                )
                raise ValueError(error_msg)
            cells.append(exponent)

        rows.append(cells)

    try:
        return grid_from_rows(rows)
    except ConstructionError as e:
        raise ValueError(f"Invalid grid definition \"{definition}\"\n{e}") from e


def format_grid(grid: Grid) -> str:
    """Write a grid in the format read by parse_grid."""
    return "|".join(
        " ".join(str(2**cell) if cell else "_" for cell in row) for row in grid.cells
    )
