"""
Demonstration script for the tilegrid engine and renderer.
"""

import random

from box_render import get_size, render
from grid_parser import parse_grid
from tile_types import PRESETS, Direction, GameOver
from tilegrid import collapse, new_grid, slide


def demo() -> None:
    """Show collapses, styles and a short random game."""
    grid = parse_grid("2 2 4 8|_ 2 _ 2|4 _ 4 4|16 16 16 _")

    print("=" * 40)
    print("Starting grid:")
    print("=" * 40)
    print(render(grid))
    print()

    for direction in Direction:
        print("=" * 40)
        print(f"Collapsed {direction.value} (no spawn):")
        print("=" * 40)
        print(render(collapse(grid, direction)))
        print()

    for name, style in PRESETS.items():
        width, lines = get_size(grid)
        print("=" * 40)
        print(f"{name} lines ({width} x {lines} characters):")
        print("=" * 40)
        print(render(grid, style))
        print()

    print("=" * 40)
    print("Random game on a 3x3 grid (seed 2048):")
    print("=" * 40)
    rng = random.Random(2048)
    current = new_grid(3, 3, rng)
    moves = 0
    while True:
        result = slide(current, rng.choice(list(Direction)), rng)
        if isinstance(result, GameOver):
            break
        if result is not current:
            moves += 1
        current = result
    print(render(current, "Thin"))
    print(f"Game over after {moves} moves")


if __name__ == "__main__":
    demo()
