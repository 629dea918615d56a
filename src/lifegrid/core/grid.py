"""Grid data structure and generation engine for Conway's Game of Life."""

from enum import IntEnum
from typing import Iterable, Iterator, List, Optional, Tuple
import numpy as np


class CellState(IntEnum):
    """State of a single cell."""

    DEAD = 0
    LIVE = 1

    def __str__(self) -> str:
        return _GLYPHS[self]


_GLYPHS = {CellState.DEAD: " ", CellState.LIVE: "O"}

# Moore neighborhood, shared by every grid.
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (-1, -1),
    (0, -1),
    (1, -1),
    (-1, 0),
    (1, 0),
    (-1, 1),
    (0, 1),
    (1, 1),
)


class InvalidCoordinate(IndexError):
    """Raised when a coordinate falls outside the grid."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(f"Coordinates ({x}, {y}) out of bounds for {width}x{height} grid")
        self.x = x
        self.y = y
        self.width = width
        self.height = height


class InvalidDimension(ValueError):
    """Raised when a grid is constructed with a non-positive width or height."""


class Grid:
    """A fixed-size, hard-edged grid of cells.

    Cells live in a flat numpy array addressed by ``y * width + x``. A grid is
    only ever mutated by :meth:`seed`; :meth:`next_gen` builds a new grid and
    leaves this one untouched, so each generation is a separate snapshot.
    """

    def __init__(self, width: int, height: int) -> None:
        """Initialize a new grid with every cell dead.

        Args:
            width: Number of columns
            height: Number of rows

        Raises:
            InvalidDimension: If width or height is not a positive integer
        """
        for name, value in (("width", width), ("height", height)):
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)) or value <= 0:
                raise InvalidDimension(f"Grid {name} must be a positive integer, got {value!r}")

        self._width = int(width)
        self._height = int(height)
        self._cells = np.zeros(self._width * self._height, dtype=np.int8)

    @classmethod
    def from_cells(cls, width: int, height: int, cells: Iterable[Tuple[int, int]]) -> "Grid":
        """Build a grid with the given cells seeded live.

        Args:
            width: Number of columns
            height: Number of rows
            cells: (x, y) coordinates to seed

        Returns:
            New Grid instance
        """
        grid = cls(width, height)
        for x, y in cells:
            grid.seed(x, y)
        return grid

    @property
    def width(self) -> int:
        """Number of columns."""
        return self._width

    @property
    def height(self) -> int:
        """Number of rows."""
        return self._height

    @property
    def shape(self) -> Tuple[int, int]:
        """Get grid dimensions as (width, height)."""
        return (self._width, self._height)

    @property
    def capacity(self) -> int:
        """Total number of cells (width * height)."""
        return self._width * self._height

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the flat cell array."""
        view = self._cells.view()
        view.flags.writeable = False
        return view

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return int(np.count_nonzero(self._cells))

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def index(self, x: int, y: int) -> int:
        """Map a coordinate to its position in the flat cell array.

        Raises:
            InvalidCoordinate: If (x, y) lies outside the grid
        """
        if not self.in_bounds(x, y):
            raise InvalidCoordinate(x, y, self._width, self._height)
        return y * self._width + x

    def get_cell(self, x: int, y: int) -> CellState:
        """Get the state of a cell.

        Args:
            x: Column coordinate
            y: Row coordinate

        Returns:
            CellState.LIVE or CellState.DEAD

        Raises:
            InvalidCoordinate: If coordinates are out of bounds
        """
        return CellState(self._cells[self.index(x, y)])

    def seed(self, x: int, y: int) -> None:
        """Mark a cell as live.

        Seeding a cell that is already live has no further effect.

        Args:
            x: Column coordinate
            y: Row coordinate

        Raises:
            InvalidCoordinate: If coordinates are out of bounds; the grid is
                left unchanged
        """
        self._cells[self.index(x, y)] = CellState.LIVE

    def count_neighbors(self, x: int, y: int) -> int:
        """Count living neighbors of a cell.

        Neighbors outside the grid are skipped; edges do not wrap.

        Args:
            x: Column coordinate
            y: Row coordinate

        Returns:
            Number of living neighbors (0-8)
        """
        count = 0
        for dx, dy in NEIGHBOR_OFFSETS:
            nx, ny = x + dx, y + dy
            if not self.in_bounds(nx, ny):
                continue
            if self._cells[ny * self._width + nx] == CellState.LIVE:
                count += 1
        return count

    def next_state(self, x: int, y: int) -> CellState:
        """Compute the state of a cell in the next generation."""
        count = self.count_neighbors(x, y)
        status = self.get_cell(x, y)

        if status == CellState.DEAD and count == 3:
            return CellState.LIVE
        if status == CellState.LIVE and (count < 2 or count > 3):
            return CellState.DEAD
        if status == CellState.LIVE:
            return CellState.LIVE
        return CellState.DEAD

    def next_gen(self) -> "Grid":
        """Compute the next generation.

        Every cell of the result is derived from this grid only, which is
        never modified.

        Returns:
            New Grid of the same dimensions
        """
        successor = Grid(self._width, self._height)
        for y in range(self._height):
            for x in range(self._width):
                successor._cells[y * self._width + x] = self.next_state(x, y)
        return successor

    def is_over(self) -> bool:
        """Check whether the population has gone extinct."""
        for value in self._cells:
            if value == CellState.LIVE:
                return False
        return True

    def live_cells(self) -> Iterator[Tuple[int, int]]:
        """Iterate over living cells in row-major order.

        Yields:
            Tuples of (x, y) coordinates
        """
        for index in np.flatnonzero(self._cells):
            y, x = divmod(int(index), self._width)
            yield (x, y)

    def get_bounding_box(self) -> Optional[Tuple[int, int, int, int]]:
        """Get bounding box of living cells.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y) or None if no living cells
        """
        living = np.flatnonzero(self._cells)
        if len(living) == 0:
            return None

        ys, xs = np.divmod(living, self._width)
        return (int(xs.min()), int(ys.min()), int(xs.max()), int(ys.max()))

    def copy(self) -> "Grid":
        """Return an independent grid with the same cells."""
        duplicate = Grid(self._width, self._height)
        duplicate._cells[:] = self._cells
        return duplicate

    def to_rows(self) -> List[List[int]]:
        """Convert grid to nested list of rows, indexed as rows[y][x]."""
        return self._cells.reshape(self._height, self._width).tolist()

    def __eq__(self, other: object) -> bool:
        """Check if two grids are equal."""
        if not isinstance(other, Grid):
            return False
        return self.shape == other.shape and np.array_equal(self._cells, other._cells)

    def __repr__(self) -> str:
        return f"Grid(width={self._width}, height={self._height}, population={self.population})"

    def __str__(self) -> str:
        """String representation showing living cells as '*' and dead as '.'."""
        result = []
        for y in range(self._height):
            row = []
            for x in range(self._width):
                row.append("*" if self._cells[y * self._width + x] else ".")
            result.append("".join(row))
        return "\n".join(result)
