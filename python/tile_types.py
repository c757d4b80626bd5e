"""
Shared type definitions for the tilegrid system.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Mapping

if TYPE_CHECKING:
    from tilegrid import Grid


class Direction(Enum):
    """Direction a grid is slid in."""

    LEFT = "left"  # Towards column 0
    RIGHT = "right"  # Towards the last column
    UP = "up"  # Towards row 0
    DOWN = "down"  # Towards the last row


# =============================================================================
# Errors and Outcomes
# =============================================================================


class ConstructionError(ValueError):
    """Grid dimensions or explicit cell state are invalid."""


class NoEmptyCell(Exception):
    """A tile was requested on a grid with no empty cell."""


class PresetNotFound(LookupError):
    """Unknown line-style preset name."""


@dataclass(frozen=True)
class GameOver:
    """Outcome of a slide when no direction can change the grid."""

    grid: Grid
    reason: str = "no more options"


# =============================================================================
# Line Styles
# =============================================================================


@dataclass(frozen=True)
class LineStyle:
    """Glyphs used to draw the box around a grid."""

    name: str
    horizontal: str
    vertical: str
    top_left: str
    top_right: str
    bottom_left: str
    bottom_right: str
    top_horizontal: str  # T pointing down, between columns on the top border
    bottom_horizontal: str  # T pointing up, between columns on the bottom border
    left_vertical: str  # Left edge of a row separator
    right_vertical: str  # Right edge of a row separator
    cross: str


THIN = LineStyle(
    name="Thin",
    horizontal="─",
    vertical="│",
    top_left="┌",
    top_right="┐",
    bottom_left="└",
    bottom_right="┘",
    top_horizontal="┬",
    bottom_horizontal="┴",
    left_vertical="├",
    right_vertical="┤",
    cross="┼",
)

MEDIUM = LineStyle(
    name="Medium",
    horizontal="━",
    vertical="┃",
    top_left="┏",
    top_right="┓",
    bottom_left="┗",
    bottom_right="┛",
    top_horizontal="┳",
    bottom_horizontal="┻",
    left_vertical="┣",
    right_vertical="┫",
    cross="╋",
)

THICK = LineStyle(
    name="Thick",
    horizontal="═",
    vertical="║",
    top_left="╔",
    top_right="╗",
    bottom_left="╚",
    bottom_right="╝",
    top_horizontal="╦",
    bottom_horizontal="╩",
    left_vertical="╠",
    right_vertical="╣",
    cross="╬",
)

PRESETS: Mapping[str, LineStyle] = MappingProxyType(
    {style.name: style for style in (THIN, MEDIUM, THICK)}
)

DEFAULT_STYLE = THICK
