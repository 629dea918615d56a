#!/usr/bin/env python3
"""
Example usage of the lifegrid package.
"""

from lifegrid import GameOfLife, Grid, PatternLibrary
from lifegrid.frontends.cli import dump


def main():
    """Demonstrate programmatic usage of the lifegrid package."""
    # Create a grid and seed the demonstration pattern
    grid = Grid(20, 20)
    library = PatternLibrary()
    library.get_pattern("Reference").apply_to_grid(grid)

    print(f"Grid capacity: {grid.capacity} cells")
    print(f"Initial population: {grid.population}")

    # Run for at most 30 generations without pausing
    game = GameOfLife(grid)
    final_generation, reason = game.run(on_generation=lambda current, _: dump(current), max_generations=30)

    print(f"Stopped after {final_generation} generations ({reason})")

    # Show statistics
    stats = game.get_statistics()
    print("Final statistics:")
    for key, value in stats.items():
        print(f"  {key}: {value}")


if __name__ == "__main__":
    main()
