"""Conway's Game of Life simulation loop."""

from typing import Callable, Deque, Dict, Optional
from collections import deque
import threading
import time

from .grid import Grid

DEFAULT_DELAY = 2.0


class GameOfLife:
    """Conway's Game of Life simulation engine.

    Tracks the generation count and recent population of a grid and drives
    the render, update, delay loop. The automaton itself lives in
    :meth:`Grid.update`; no stable or oscillating end state is detected, so
    :meth:`run` continues until stopped.
    """

    def __init__(self, grid: Grid) -> None:
        """Initialize the game with a grid.

        Args:
            grid: The cellular grid to simulate
        """
        self.grid = grid
        self._generation = 0
        self._population_history: Deque[int] = deque(maxlen=100)

        # Track initial population
        self._update_population_history()

    @property
    def generation(self) -> int:
        """Current generation number."""
        return self._generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self.grid.population

    @property
    def population_history(self) -> list:
        """History of population counts."""
        return list(self._population_history)

    def step(self) -> None:
        """Advance the simulation by one generation."""
        self.grid.update()
        self._generation += 1
        self._update_population_history()

    def _update_population_history(self) -> None:
        self._population_history.append(self.population)

    def run(
        self,
        delay: float = DEFAULT_DELAY,
        max_generations: Optional[int] = None,
        stop_event: Optional[threading.Event] = None,
        on_generation: Optional[Callable[["GameOfLife"], None]] = None,
        sleep: Optional[Callable[[float], None]] = None,
    ) -> int:
        """Run the render, update, delay loop.

        The stop event is only checked between generations, never while a
        generation is being computed. With max_generations, the final
        generation is also passed to on_generation and no delay follows it.

        Args:
            delay: Seconds to wait after each update
            max_generations: Stop after this many updates (None runs until stopped)
            stop_event: Event that ends the loop once set
            on_generation: Called with the game for every generation shown, e.g. to render
            sleep: Blocking delay function (defaults to time.sleep)

        Returns:
            Number of generations advanced by this call

        Raises:
            ValueError: If delay or max_generations is negative
        """
        if delay < 0:
            raise ValueError(f"Delay must be non-negative, got {delay}")
        if max_generations is not None and max_generations < 0:
            raise ValueError(f"max_generations must be non-negative, got {max_generations}")
        if sleep is None:
            sleep = time.sleep

        advanced = 0
        while True:
            if stop_event is not None and stop_event.is_set():
                break

            if on_generation is not None:
                on_generation(self)

            # Last generation has been shown, no trailing delay
            if max_generations is not None and advanced >= max_generations:
                break

            self.step()
            advanced += 1

            sleep(delay)

        return advanced

    def reset(self, clear_grid: bool = True) -> None:
        """Reset the simulation.

        Args:
            clear_grid: Whether to clear the grid as well
        """
        if clear_grid:
            self.grid.clear()

        self._generation = 0
        self._population_history.clear()
        self._update_population_history()

    def get_statistics(self) -> Dict:
        """Get simulation statistics.

        Returns:
            Dictionary with generation, population and grid details
        """
        return {
            "generation": self._generation,
            "population": self.population,
            "population_history": list(self._population_history),
            "grid_size": self.grid.shape,
            "population_density": self.population / (self.grid.rows * self.grid.cols),
        }
