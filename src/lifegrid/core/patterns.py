"""Named seed patterns for Conway's Game of Life."""

from typing import Dict, List, Optional, Tuple

from .grid import Grid

# Seed used by the demonstration run on a 20x20 grid.
REFERENCE_SEED: List[Tuple[int, int]] = [
    (7, 6),
    (6, 6),
    (6, 5),
    (6, 4),
    (5, 6),
    (5, 5),
    (5, 4),
    (4, 4),
    (4, 5),
    (4, 6),
]


class Pattern:
    """Represents a Game of Life pattern."""

    def __init__(self, name: str, cells: List[Tuple[int, int]], description: str = "") -> None:
        """Initialize a pattern.

        Args:
            name: Pattern name
            cells: List of (x, y) coordinates for living cells
            description: Optional description
        """
        self.name = name
        self.cells = cells
        self.description = description

    def apply_to_grid(self, grid: Grid, offset_x: int = 0, offset_y: int = 0) -> None:
        """Seed this pattern onto a grid.

        Cells already live on the grid stay live.

        Args:
            grid: Target grid
            offset_x: Horizontal offset
            offset_y: Vertical offset

        Raises:
            InvalidCoordinate: If any translated cell falls outside the grid;
                no cell is seeded in that case
        """
        translated = [(x + offset_x, y + offset_y) for x, y in self.cells]
        for x, y in translated:
            grid.index(x, y)
        for x, y in translated:
            grid.seed(x, y)

    def get_bounding_box(self) -> Tuple[int, int, int, int]:
        """Get bounding box of the pattern.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y)
        """
        if not self.cells:
            return (0, 0, 0, 0)

        xs, ys = zip(*self.cells)
        return (min(xs), min(ys), max(xs), max(ys))

    def get_size(self) -> Tuple[int, int]:
        """Get pattern size as (width, height)."""
        min_x, min_y, max_x, max_y = self.get_bounding_box()
        return (max_x - min_x + 1, max_y - min_y + 1)

    def normalize(self) -> "Pattern":
        """Return a new pattern with coordinates normalized to start at (0, 0)."""
        if not self.cells:
            return Pattern(self.name, [], self.description)

        min_x, min_y, _, _ = self.get_bounding_box()
        normalized_cells = [(x - min_x, y - min_y) for x, y in self.cells]
        return Pattern(self.name, normalized_cells, self.description)

    @classmethod
    def from_grid(cls, grid: Grid, name: str, description: str = "") -> "Pattern":
        """Create pattern from the living cells of a grid."""
        return cls(name, list(grid.live_cells()), description)

    def __repr__(self) -> str:
        return f"Pattern({self.name!r}, {len(self.cells)} cells)"


class PatternLibrary:
    """Manages a collection of patterns."""

    CATEGORIES: Dict[str, List[str]] = {
        "Demo": ["Reference"],
        "Still Life": ["Block", "Beehive", "Loaf"],
        "Oscillators": ["Blinker", "Toad", "Beacon"],
        "Spaceships": ["Glider"],
        "Methuselahs": ["R-pentomino", "Diehard"],
    }

    def __init__(self) -> None:
        self._patterns: Dict[str, Pattern] = {}
        self._load_builtin_patterns()

    def _load_builtin_patterns(self) -> None:
        """Load built-in common patterns."""
        self.add_pattern(
            Pattern("Reference", list(REFERENCE_SEED), "Seed used by the default demonstration run")
        )

        # Still life patterns
        self.add_pattern(Pattern("Block", [(0, 0), (0, 1), (1, 0), (1, 1)], "2x2 still life block"))
        self.add_pattern(
            Pattern("Beehive", [(1, 0), (2, 0), (0, 1), (3, 1), (1, 2), (2, 2)], "Beehive still life")
        )
        self.add_pattern(
            Pattern("Loaf", [(1, 0), (2, 0), (0, 1), (3, 1), (1, 2), (3, 2), (2, 3)], "Loaf still life")
        )

        # Oscillators
        self.add_pattern(Pattern("Blinker", [(0, 1), (1, 1), (2, 1)], "Period-2 oscillator"))
        self.add_pattern(
            Pattern("Toad", [(1, 0), (2, 0), (3, 0), (0, 1), (1, 1), (2, 1)], "Period-2 oscillator")
        )
        self.add_pattern(
            Pattern("Beacon", [(0, 0), (1, 0), (0, 1), (3, 2), (2, 3), (3, 3)], "Period-2 oscillator")
        )

        # Spaceships
        self.add_pattern(
            Pattern("Glider", [(1, 0), (2, 1), (0, 2), (1, 2), (2, 2)], "Smallest spaceship, period-4")
        )

        # Methuselahs
        self.add_pattern(
            Pattern(
                "R-pentomino",
                [(1, 0), (2, 0), (0, 1), (1, 1), (1, 2)],
                "Famous methuselah that stabilizes after 1103 generations",
            )
        )
        self.add_pattern(
            Pattern(
                "Diehard",
                [(6, 0), (0, 1), (1, 1), (1, 2), (5, 2), (6, 2), (7, 2)],
                "Dies after exactly 130 generations on an unbounded plane",
            )
        )

    def add_pattern(self, pattern: Pattern) -> None:
        """Add a pattern to the library, replacing any with the same name."""
        self._patterns[pattern.name] = pattern

    def get_pattern(self, name: str) -> Optional[Pattern]:
        """Get a pattern by name.

        Args:
            name: Pattern name

        Returns:
            Pattern instance or None if not found
        """
        return self._patterns.get(name)

    def list_patterns(self) -> List[str]:
        """Get list of all pattern names."""
        return list(self._patterns.keys())

    def get_patterns_by_category(self) -> Dict[str, List[str]]:
        """Get patterns organized by category.

        Returns:
            Dictionary mapping categories to pattern name lists
        """
        categories = {cat: list(names) for cat, names in self.CATEGORIES.items()}
        categories["Custom"] = []

        all_builtin = set()
        for cat_patterns in self.CATEGORIES.values():
            all_builtin.update(cat_patterns)

        for name in self._patterns:
            if name not in all_builtin:
                categories["Custom"].append(name)

        # Remove empty categories
        return {cat: patterns for cat, patterns in categories.items() if patterns}
