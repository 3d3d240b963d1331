"""Generation driver for Conway's Game of Life."""

from typing import Deque, Dict, Optional, Tuple
from collections import deque
import numpy as np

from .board import Board


class GameOfLife:
    """Conway's Game of Life simulation engine.

    Owns the current board and replaces it with the next generation on
    every step:
    - Live cell with 2-3 neighbors survives
    - Dead cell with exactly 3 neighbors becomes alive
    - All other cells die or stay dead
    """

    def __init__(self, board: Board) -> None:
        """Initialize the game with a board.

        Args:
            board: The starting generation
        """
        self.board = board
        self._generation = 0
        self._population_history: Deque[int] = deque(maxlen=100)
        self._state_history: Deque[Tuple[Tuple[int, int], bytes]] = deque(maxlen=1000)
        self._seen_states: Dict[Tuple[Tuple[int, int], bytes], int] = {}
        self._cycle_detected = False
        self._cycle_length = 0
        self._cycle_start_generation = 0

        self._update_population_history()
        self._record_state()

    @property
    def generation(self) -> int:
        """Current generation number."""
        return self._generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self.board.population

    @property
    def population_history(self) -> list:
        """History of population counts."""
        return list(self._population_history)

    @property
    def cycle_detected(self) -> bool:
        """Whether a repeated generation has been seen."""
        return self._cycle_detected

    @property
    def cycle_length(self) -> int:
        """Length of detected cycle (0 if no cycle)."""
        return self._cycle_length

    @property
    def cycle_start_generation(self) -> int:
        """Generation where cycle started (0 if no cycle)."""
        return self._cycle_start_generation

    def step(self) -> Board:
        """Advance the simulation by one generation.

        Returns:
            The new current board
        """
        self.board = self.board.advance()
        self._generation += 1
        self._update_population_history()
        self._record_state()
        return self.board

    def _update_population_history(self) -> None:
        self._population_history.append(self.population)

    def _record_state(self) -> None:
        """Remember the current generation and flag the first repeat."""
        if self._cycle_detected:
            return

        key = (self.board.shape, self.board.cells.tobytes())
        first_occurrence = self._seen_states.get(key)
        if first_occurrence is not None:
            self._cycle_detected = True
            self._cycle_length = self._generation - first_occurrence
            self._cycle_start_generation = first_occurrence
            # Nothing else is needed once the cycle is known
            self._seen_states.clear()
            self._state_history.clear()
            return

        # Forget the oldest generation so long runs stay bounded in memory
        if len(self._state_history) == self._state_history.maxlen:
            oldest = self._state_history[0]
            if self._seen_states.get(oldest) == self._generation - len(self._state_history):
                del self._seen_states[oldest]

        self._seen_states[key] = self._generation
        self._state_history.append(key)

    def reset(self, board: Optional[Board] = None) -> None:
        """Reset the simulation.

        Args:
            board: New starting board; the current board is cleared if omitted
        """
        if board is None:
            board = Board(self.board.width, self.board.height)
        self.board = board

        self._generation = 0
        self._population_history.clear()
        self._state_history.clear()
        self._seen_states.clear()
        self._cycle_detected = False
        self._cycle_length = 0
        self._cycle_start_generation = 0

        self._update_population_history()
        self._record_state()

    def run_until_stable(self, max_generations: int = 10000) -> Tuple[int, str]:
        """Run simulation until it dies out or repeats.

        Args:
            max_generations: Maximum generations to run

        Returns:
            Tuple of (final_generation, reason) where reason is one of:
            'cycle', 'extinction', 'max_generations'
        """
        for _ in range(max_generations):
            self.step()

            if self.population == 0:
                return self._generation, "extinction"

            if self._cycle_detected:
                return self._generation, "cycle"

        return self._generation, "max_generations"

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

        return float(np.mean(np.diff(recent_history)))

    def get_statistics(self) -> Dict:
        """Get simulation statistics.

        Returns:
            Dictionary with various statistics
        """
        area = self.board.width * self.board.height
        return {
            "generation": self._generation,
            "population": self.population,
            "population_change_rate": self.get_population_change_rate(),
            "population_history": list(self._population_history),
            "cycle_detected": self._cycle_detected,
            "cycle_length": self._cycle_length,
            "cycle_start_generation": self._cycle_start_generation,
            "board_size": self.board.shape,
            "population_density": self.population / area if area else 0.0,
        }
