"""
Interactive 2048 in the terminal.
Slide the grid with WASD until no move is left.

Usage: python interactive_demo.py [width height [style]]
"""

import logging
import os
import random
import sys

import readchar
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from box_render import render, select_preset
from tile_types import PRESETS, ConstructionError, Direction, GameOver, LineStyle, PresetNotFound
from tilegrid import Grid, new_grid, slide

logger = logging.getLogger(__name__)

KEY_DIRECTIONS = {
    "w": Direction.UP,
    "a": Direction.LEFT,
    "s": Direction.DOWN,
    "d": Direction.RIGHT,
}


class InteractiveGame:
    """Keyboard-driven game loop around the grid engine."""

    def __init__(
        self,
        width: int = 4,
        height: int = 4,
        style: LineStyle | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.width = width
        self.height = height
        self.rng = rng
        self.grid: Grid = new_grid(width, height, rng)
        self.style = style if style is not None else select_preset("Thick")
        self.console = Console()
        self.status_message = "Ready"
        self.game_over = False
        self.moves = 0

    @property
    def highest_tile(self) -> int:
        """Largest tile value on the grid."""
        return max(max(row) for row in self.grid.values())

    def generate_display(self) -> Panel:
        """Generate the current display with grid and status."""
        status = Text()
        status.append(Text.from_ansi(render(self.grid, self.style, colorize=True)))
        status.append("\n\n")
        status.append("Keys:\n", style="bold cyan")
        status.append("  W/A/S/D - Slide up/left/down/right\n")
        status.append("  P - Next line style\n")
        status.append("  R - Restart\n")
        status.append("  Q - Quit\n\n")

        status.append("─" * 40 + "\n", style="dim")
        status.append("Moves: ", style="bold")
        status.append(f"{self.moves}\n")
        status.append("Highest tile: ", style="bold")
        status.append(f"{self.highest_tile}\n")
        status.append("Status: ", style="bold")
        status.append(self.status_message, style="bold red" if self.game_over else None)

        title = f"2048 - {self.width}x{self.height}"
        return Panel(status, title=title, border_style="red" if self.game_over else "green")

    def attempt_slide(self, direction: Direction) -> None:
        """Slide the grid and update the status line."""
        if self.game_over:
            self.status_message = "Game over! Press R to restart or Q to quit"
            return

        result = slide(self.grid, direction, self.rng)

        if isinstance(result, GameOver):
            self.game_over = True
            self.status_message = "Game over! No more options!"
        elif result is self.grid:
            self.status_message = f"✗ Nothing moves {direction.value}"
        else:
            self.grid = result
            self.moves += 1
            self.status_message = f"✓ Slid {direction.value}"

    def cycle_style(self) -> None:
        """Switch to the next line-style preset."""
        names = list(PRESETS)
        self.style = PRESETS[names[(names.index(self.style.name) + 1) % len(names)]]
        self.status_message = f"Line style: {self.style.name}"

    def restart(self) -> None:
        """Start over with a fresh grid of the same size."""
        self.grid = new_grid(self.width, self.height, self.rng)
        self.game_over = False
        self.moves = 0
        self.status_message = "New game"

    def run(self) -> None:
        """Run the game until the player quits."""
        with Live(self.generate_display(), console=self.console, refresh_per_second=4) as live:
            try:
                while True:
                    live.update(self.generate_display())

                    key = readchar.readkey().lower()

                    if key == "q":
                        self.status_message = "Quitting..."
                        live.update(self.generate_display())
                        break
                    elif key == "r":
                        self.restart()
                    elif key == "p":
                        self.cycle_style()
                    elif key in KEY_DIRECTIONS:
                        self.attempt_slide(KEY_DIRECTIONS[key])
                    else:
                        self.status_message = f"Invalid input: {repr(key)}"

            except KeyboardInterrupt:
                self.status_message = "Interrupted by user"
                live.update(self.generate_display())


def parse_args(argv: list[str]) -> tuple[int, int, LineStyle]:
    """
    Read optional width, height and style name from the command line.

    Raises:
        ValueError: If width or height is not an integer
        PresetNotFound: If the style name is unknown
    """
    width, height = 4, 4
    if len(argv) >= 2:
        width, height = int(argv[0]), int(argv[1])
    style = select_preset(argv[2]) if len(argv) >= 3 else select_preset("Thick")
    return width, height, style


def main(argv: list[str]) -> int:
    level = os.environ.get("TILEGRID_LOG")
    if level:
        logging.basicConfig(level=level.upper(), format="%(levelname)s: %(message)s")

    try:
        width, height, style = parse_args(argv)
    except ValueError:
        print("Invalid arguments!")
        return 1
    except PresetNotFound as e:
        print(e)
        return 1

    try:
        game = InteractiveGame(width, height, style)
    except ConstructionError as e:
        print(e)
        return 1

    logger.info("starting %dx%d game with %s lines", width, height, style.name)
    game.run()
    return 0


def run_cli() -> None:
    sys.exit(main(sys.argv[1:]))


if __name__ == "__main__":
    run_cli()
