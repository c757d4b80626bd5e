"""
Box rendering for tile grids.

Draws the grid as a bordered table using one of the line-style presets,
with every cell padded to a common field width.
"""

from __future__ import annotations

import logging
from typing import Callable

import simple_chalk as chalk  # type: ignore[import-untyped]

from tile_types import DEFAULT_STYLE, PRESETS, LineStyle, PresetNotFound
from tilegrid import Grid

logger = logging.getLogger(__name__)

MIN_FIELD_WIDTH = 2


# =============================================================================
# Presets
# =============================================================================


def select_preset(name: str) -> LineStyle:
    """
    Look up a line-style preset by name.

    Raises:
        PresetNotFound: If no preset has that name
    """
    try:
        return PRESETS[name]
    except KeyError:
        raise PresetNotFound(
            f"Unknown line style '{name}'\n"
            f"  Available styles: {', '.join(PRESETS)}"
        ) from None


def _resolve_style(style: LineStyle | str) -> LineStyle:
    return select_preset(style) if isinstance(style, str) else style


# =============================================================================
# Cell Formatting
# =============================================================================


def format_cell(exponent: int) -> str:
    """Tile value as text, a single blank for an empty cell."""
    return str(2**exponent) if exponent else " "


def field_width(grid: Grid) -> int:
    """Width every cell is padded to: the longest value, at least 2."""
    return max(
        [MIN_FIELD_WIDTH] + [len(format_cell(cell)) for row in grid.cells for cell in row]
    )


def format_numbers(grid: Grid) -> list[list[str]]:
    """Every cell as right-aligned text of the common field width."""
    width = field_width(grid)
    return [[format_cell(cell).rjust(width) for cell in row] for row in grid.cells]


# =============================================================================
# Colors
# =============================================================================

# Indexed by exponent, wrapping for tiles beyond the palette
TILE_COLORS: list[Callable[[str], str]] = [
    chalk.white,
    chalk.cyan,
    chalk.blue,
    chalk.green,
    chalk.yellow,
    chalk.magenta,
    chalk.red,
    chalk.blueBright,
    chalk.greenBright,
    chalk.yellowBright,
    chalk.redBright,
]


def tile_color(exponent: int) -> Callable[[str], str]:
    """Colour function for a tile; empty cells are left plain."""
    if exponent == 0:
        return lambda s: s
    return TILE_COLORS[exponent % len(TILE_COLORS)]


# =============================================================================
# Box Drawing
# =============================================================================


def _border(style: LineStyle, left: str, junction: str, right: str, cols: int, width: int) -> str:
    return left + junction.join([style.horizontal * width] * cols) + right


def render(grid: Grid, style: LineStyle | str = DEFAULT_STYLE, colorize: bool = False) -> str:
    """
    Render a grid as a box of line-drawing characters.

    Args:
        grid: The grid to render
        style: LineStyle or preset name ("Thin", "Medium", "Thick")
        colorize: Wrap each tile in an ANSI colour chosen by its exponent

    Returns:
        Rendered lines joined with newlines (no trailing newline)

    Raises:
        PresetNotFound: If style names an unknown preset
    """
    pipes = _resolve_style(style)
    numbers = format_numbers(grid)
    width = field_width(grid)
    cols = grid.width

    lines: list[str] = [
        _border(pipes, pipes.top_left, pipes.top_horizontal, pipes.top_right, cols, width)
    ]

    for r_idx, (texts, row) in enumerate(zip(numbers, grid.cells)):
        if colorize:
            texts = [tile_color(cell)(text) for text, cell in zip(texts, row)]
        lines.append(pipes.vertical + pipes.vertical.join(texts) + pipes.vertical)

        if r_idx == grid.height - 1:
            lines.append(
                _border(pipes, pipes.bottom_left, pipes.bottom_horizontal, pipes.bottom_right, cols, width)
            )
        else:
            lines.append(
                _border(pipes, pipes.left_vertical, pipes.cross, pipes.right_vertical, cols, width)
            )

    logger.debug("render: %dx%d grid, style=%s, field=%d", cols, grid.height, pipes.name, width)
    return "\n".join(lines)


def get_size(grid: Grid) -> tuple[int, int]:
    """
    Size of the rendered box in characters.

    Returns:
        Tuple of (width, lines), borders included
    """
    cols = grid.width
    rows = grid.height
    return (cols * field_width(grid) + cols + 1, rows * 2 + 1)


rendered_size = get_size
