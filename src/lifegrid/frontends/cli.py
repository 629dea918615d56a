"""Command-line interface for Conway's Game of Life."""

import argparse
import sys
from typing import List, Optional, TextIO, Tuple

from ..core.grid import Grid, InvalidCoordinate, InvalidDimension
from ..core.game import GameOfLife
from ..core.patterns import PatternLibrary

DEFAULT_WIDTH = 20
DEFAULT_HEIGHT = 20
DEFAULT_TICK_DELAY = 1.0
DEFAULT_PATTERN = "Reference"


def format_grid(grid: Grid) -> str:
    """Format a grid for the console.

    A separator of ``width`` dashes is followed by one line per row.

    Args:
        grid: Grid to format

    Returns:
        Formatted grid string
    """
    lines = ["-" * grid.width]
    for y in range(grid.height):
        lines.append("".join(str(grid.get_cell(x, y)) for x in range(grid.width)))
    return "\n".join(lines)


def dump(grid: Grid, stream: Optional[TextIO] = None) -> None:
    """Write a grid to a text stream (stdout by default)."""
    stream = stream if stream is not None else sys.stdout
    stream.write(format_grid(grid) + "\n")
    stream.flush()


def parse_coordinate(value: str) -> Tuple[int, int]:
    """Parse an ``X,Y`` command-line value.

    Raises:
        argparse.ArgumentTypeError: If the value is not two comma-separated integers
    """
    parts = value.split(",")
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"Invalid coordinate '{value}', expected X,Y")
    try:
        return int(parts[0].strip()), int(parts[1].strip())
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid coordinate '{value}', expected integers X,Y")


class CLIGameOfLife:
    """Command-line interface for running Game of Life simulations."""

    def __init__(self, stream: Optional[TextIO] = None):
        """Initialize CLI interface.

        Args:
            stream: Where generations are rendered (stdout by default)
        """
        self.pattern_library = PatternLibrary()
        self.stream = stream

    def build_grid(
        self,
        width: int,
        height: int,
        seeds: Optional[List[Tuple[int, int]]] = None,
        pattern: Optional[str] = None,
        pattern_x: int = 0,
        pattern_y: int = 0,
    ) -> Grid:
        """Create a grid and seed it from explicit coordinates and/or a named pattern.

        Raises:
            InvalidDimension: If width or height is not positive
            InvalidCoordinate: If a seed falls outside the grid
            ValueError: If the pattern name is unknown
        """
        grid = Grid(width, height)

        if pattern:
            loaded_pattern = self.pattern_library.get_pattern(pattern)
            if loaded_pattern is None:
                raise ValueError(f"Pattern '{pattern}' not found")
            loaded_pattern.apply_to_grid(grid, pattern_x, pattern_y)

        for x, y in seeds or []:
            grid.seed(x, y)

        return grid

    def run_simulation(
        self,
        width: int,
        height: int,
        seeds: Optional[List[Tuple[int, int]]] = None,
        pattern: Optional[str] = None,
        pattern_x: int = 0,
        pattern_y: int = 0,
        tick_delay: float = DEFAULT_TICK_DELAY,
        max_generations: Optional[int] = None,
        verbose: bool = False,
    ) -> Tuple[int, str, dict]:
        """Run a Game of Life simulation, rendering every generation.

        Args:
            width: Grid width
            height: Grid height
            seeds: Explicit (x, y) cells to seed
            pattern: Optional pattern name to load
            pattern_x: X offset for pattern placement
            pattern_y: Y offset for pattern placement
            tick_delay: Pause between generations in seconds
            max_generations: Optional bound on generations
            verbose: Print progress updates

        Returns:
            Tuple of (final_generation, finish_reason, statistics)
        """
        grid = self.build_grid(width, height, seeds, pattern, pattern_x, pattern_y)
        game = GameOfLife(grid)
        initial_population = game.population

        if verbose:
            print(f"Initializing {width}x{height} grid ({grid.capacity} cells)")
            if pattern:
                print(f"Loaded pattern '{pattern}' at ({pattern_x}, {pattern_y})")
            print(f"Initial population: {initial_population} cells")

        final_generation, reason = game.run(
            on_generation=lambda current, _generation: dump(current, self.stream),
            tick_delay=tick_delay,
            max_generations=max_generations,
        )

        stats = game.get_statistics()
        stats["initial_population"] = initial_population
        return final_generation, reason, stats

    def list_patterns(self) -> None:
        """List available patterns by category."""
        print("Available patterns:")
        for category, names in self.pattern_library.get_patterns_by_category().items():
            print(f"\n{category}:")
            for pattern_name in names:
                pattern = self.pattern_library.get_pattern(pattern_name)
                size = pattern.get_size()
                print(f"  {pattern_name}: {size[0]}x{size[1]}, {len(pattern.cells)} cells")
                if pattern.description:
                    print(f"    {pattern.description}")


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Run Conway's Game of Life in the console until the population dies out",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run the demonstration seed on a 20x20 grid
  lifegrid

  # Run a glider on a 30x30 grid without pausing
  lifegrid -W 30 -H 30 --pattern Glider --pattern-x 2 --pattern-y 2 -d 0

  # Seed cells directly and stop after 50 generations
  lifegrid -s 1,2 -s 2,2 -s 3,2 -m 50

  # List available patterns
  lifegrid --list-patterns
        """,
    )

    # Grid configuration
    parser.add_argument(
        "-W", "--width", type=int, default=DEFAULT_WIDTH, help=f"Grid width (default: {DEFAULT_WIDTH})"
    )

    parser.add_argument(
        "-H", "--height", type=int, default=DEFAULT_HEIGHT, help=f"Grid height (default: {DEFAULT_HEIGHT})"
    )

    # Seed configuration
    parser.add_argument(
        "-s",
        "--seed",
        dest="seeds",
        type=parse_coordinate,
        action="append",
        metavar="X,Y",
        help="Seed a live cell; may be repeated",
    )

    parser.add_argument(
        "--pattern",
        type=str,
        help=f"Load a named pattern (default: {DEFAULT_PATTERN} when no --seed is given)",
    )

    parser.add_argument(
        "--pattern-x",
        type=int,
        default=0,
        help="X offset for pattern placement (default: 0)",
    )

    parser.add_argument(
        "--pattern-y",
        type=int,
        default=0,
        help="Y offset for pattern placement (default: 0)",
    )

    # Simulation configuration
    parser.add_argument(
        "-d",
        "--tick-delay",
        type=float,
        default=DEFAULT_TICK_DELAY,
        help=f"Seconds to pause between generations (default: {DEFAULT_TICK_DELAY})",
    )

    parser.add_argument(
        "-m",
        "--max-generations",
        type=int,
        help="Stop after this many generations (default: run until extinction)",
    )

    # Output configuration
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print detailed progress information",
    )

    parser.add_argument(
        "--list-patterns",
        action="store_true",
        help="List all available patterns and exit",
    )

    return parser


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors = []

    if args.width <= 0:
        errors.append("Width must be positive")

    if args.height <= 0:
        errors.append("Height must be positive")

    if args.tick_delay < 0:
        errors.append("Tick delay must be non-negative")

    if args.max_generations is not None and args.max_generations <= 0:
        errors.append("Max generations must be positive")

    if args.pattern_x < 0:
        errors.append("Pattern X offset must be non-negative")

    if args.pattern_y < 0:
        errors.append("Pattern Y offset must be non-negative")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def format_finish_reason(reason: str, generation: int) -> str:
    """Format the simulation finish reason for display."""
    if reason == "extinction":
        return f"Extinction after {generation} generations"
    if reason == "max_generations":
        return f"Stopped at generation limit ({generation})"
    return reason


def print_results(final_generation: int, reason: str, stats: dict, verbose: bool) -> None:
    """Print simulation results.

    Args:
        final_generation: Final generation number
        reason: Reason simulation ended
        stats: Simulation statistics
        verbose: Whether to print detailed statistics
    """
    print(f"\nSimulation completed after {final_generation} generations")
    print(f"Finish reason: {format_finish_reason(reason, final_generation)}")

    if verbose:
        print("\nDetailed Statistics:")
        print(f"  Grid size: {stats['grid_size'][0]}x{stats['grid_size'][1]}")
        print(f"  Initial population: {stats['initial_population']}")
        print(f"  Final population: {stats['population']}")
        print(f"  Population density: {stats['population_density']:.2%}")
        print(f"  Population change rate: {stats['population_change_rate']:.2f}")
        if stats["bounding_box"]:
            box_width, box_height = stats["bounding_box_size"]
            print(f"  Bounding box: {stats['bounding_box']} ({box_width}x{box_height})")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    cli = CLIGameOfLife()

    if args.list_patterns:
        cli.list_patterns()
        return 0

    if not validate_args(args):
        return 1

    pattern = args.pattern
    if pattern is None and not args.seeds:
        pattern = DEFAULT_PATTERN

    if pattern and cli.pattern_library.get_pattern(pattern) is None:
        available = cli.pattern_library.list_patterns()
        print(f"Error: Pattern '{pattern}' not found")
        print(f"Available patterns: {', '.join(available)}")
        print("Use --list-patterns to see detailed information")
        return 1

    try:
        final_generation, reason, stats = cli.run_simulation(
            width=args.width,
            height=args.height,
            seeds=args.seeds,
            pattern=pattern,
            pattern_x=args.pattern_x,
            pattern_y=args.pattern_y,
            tick_delay=args.tick_delay,
            max_generations=args.max_generations,
            verbose=args.verbose,
        )
    except (InvalidCoordinate, InvalidDimension) as e:
        print(f"Error: {e}")
        return 1
    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
        return 1

    print_results(final_generation, reason, stats, args.verbose)
    return 0


if __name__ == "__main__":
    sys.exit(main())
