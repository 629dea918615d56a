"""Generation loop for Conway's Game of Life."""

from typing import Callable, Deque, Dict, Optional, Tuple
from collections import deque
import time
import numpy as np

from .grid import Grid

GenerationCallback = Callable[[Grid, int], None]


class GameOfLife:
    """Drives a grid from generation to generation.

    The game holds the current snapshot and the generation counter. Each
    step swaps in the grid returned by :meth:`Grid.next_gen`; earlier
    snapshots are not retained.
    """

    def __init__(self, grid: Grid) -> None:
        """Initialize the game with a grid.

        Args:
            grid: The seeded grid to simulate
        """
        self._grid = grid
        self._generation = 0
        self._population_history: Deque[int] = deque(maxlen=100)

        self._update_population_history()

    @property
    def grid(self) -> Grid:
        """The current generation's grid."""
        return self._grid

    @property
    def generation(self) -> int:
        """Current generation number."""
        return self._generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self._grid.population

    @property
    def population_history(self) -> list:
        """History of population counts."""
        return list(self._population_history)

    def is_over(self) -> bool:
        """Whether every cell of the current generation is dead."""
        return self._grid.is_over()

    def step(self) -> Grid:
        """Advance the simulation by one generation.

        Returns:
            The new current grid
        """
        self._grid = self._grid.next_gen()
        self._generation += 1
        self._update_population_history()
        return self._grid

    def run(
        self,
        on_generation: Optional[GenerationCallback] = None,
        tick_delay: float = 0.0,
        max_generations: Optional[int] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> Tuple[int, str]:
        """Run until the population dies out.

        Each iteration reports the current grid to ``on_generation``, advances
        one generation and then pauses for ``tick_delay`` seconds.

        Args:
            on_generation: Called with (grid, generation) before each step
            tick_delay: Pause between generations in seconds
            max_generations: Optional limit on the number of steps
            sleep: Function used to pause

        Returns:
            Tuple of (final_generation, reason) where reason is one of:
            'extinction', 'max_generations'

        Raises:
            ValueError: If tick_delay is negative or max_generations is not positive
        """
        if tick_delay < 0:
            raise ValueError(f"Tick delay must be non-negative, got {tick_delay}")
        if max_generations is not None and max_generations <= 0:
            raise ValueError(f"Max generations must be positive, got {max_generations}")

        steps = 0
        while not self.is_over():
            if max_generations is not None and steps >= max_generations:
                return self._generation, "max_generations"

            if on_generation is not None:
                on_generation(self._grid, self._generation)

            self.step()
            steps += 1

            if tick_delay > 0:
                sleep(tick_delay)

        return self._generation, "extinction"

    def _update_population_history(self) -> None:
        """Update the population history."""
        self._population_history.append(self.population)

    def get_population_change_rate(self, window_size: int = 10) -> float:
        """Calculate recent population change rate.

        Args:
            window_size: Number of recent generations to consider

        Returns:
            Average population change per generation
        """
        recent_history = list(self._population_history)[-window_size:]
        if len(recent_history) < 2:
            return 0.0

        changes = np.diff(recent_history)
        return float(np.mean(changes))

    def get_statistics(self) -> Dict:
        """Get simulation statistics.

        Returns:
            Dictionary with generation, population and extent figures
        """
        bbox = self._grid.get_bounding_box()

        stats = {
            "generation": self._generation,
            "population": self.population,
            "population_change_rate": self.get_population_change_rate(),
            "population_history": list(self._population_history),
            "grid_size": self._grid.shape,
            "population_density": self.population / self._grid.capacity,
        }

        if bbox:
            stats["bounding_box"] = bbox
            stats["bounding_box_size"] = (bbox[2] - bbox[0] + 1, bbox[3] - bbox[1] + 1)
        else:
            stats["bounding_box"] = None
            stats["bounding_box_size"] = (0, 0)

        return stats
