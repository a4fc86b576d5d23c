#!/usr/bin/env python3
"""
Example usage of the lifegrid package.
"""

import numpy as np

from lifegrid import Grid, GameOfLife, PatternLibrary


def main():
    """Demonstrate programmatic usage of the lifegrid package."""
    # Start from typed rows, the same format the console accepts
    grid = Grid(8, 8)
    grid.initialize_from_input(["", "", "00111", "01110"])
    game = GameOfLife(grid)

    print("Toad from text input:")
    print(grid.render())

    for _ in range(2):
        game.step()
        print(f"Generation {game.generation} (population {game.population}):")
        print(grid.render())

    # Place a library pattern instead
    library = PatternLibrary()
    glider = library.get_pattern("Glider")

    if glider:
        glider.apply_to_grid(grid, offset_row=1, offset_col=1)
        game.reset(clear_grid=False)

        for _ in range(4):
            game.step()

        print(f"Glider after {game.generation} generations:")
        print(grid.render())

    # Reproducible random start
    grid.initialize_random(0.2, np.random.default_rng(42))
    game.reset(clear_grid=False)
    game.run(delay=0, max_generations=10)

    stats = game.get_statistics()
    print("Final statistics:")
    for key, value in stats.items():
        print(f"  {key}: {value}")


if __name__ == "__main__":
    main()
