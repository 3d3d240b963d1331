"""Board model for Conway's Game of Life on a bounded grid."""

from enum import Enum
from pathlib import Path
from typing import Iterator, List, Sequence, Tuple, Union
import numpy as np
import torch
import torch.nn.functional as F

# 3x3 Moore neighborhood, center excluded
_NEIGHBOR_KERNEL = torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)


class ShapeError(ValueError):
    """Raised when board input has rows of unequal length."""


class CellState(Enum):
    """State of a single cell."""

    ALIVE = 1
    DEAD = 0

    @classmethod
    def from_bool(cls, alive: bool) -> "CellState":
        """Map True to ALIVE and False to DEAD."""
        return cls.ALIVE if alive else cls.DEAD

    @classmethod
    def from_char(cls, char: str) -> "CellState":
        """Map '.' and '0' to DEAD, any other character to ALIVE."""
        return cls.DEAD if char in (".", "0") else cls.ALIVE

    @property
    def char(self) -> str:
        """Display character: '#' for alive, '.' for dead."""
        return "#" if self is CellState.ALIVE else "."

    def __bool__(self) -> bool:
        return self is CellState.ALIVE

    def __str__(self) -> str:
        return self.char


def _split_lines(text: str) -> List[str]:
    """Split text into lines without treating terminators as columns."""
    if not text:
        return []
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _check_rectangular(rows: Sequence[Sequence], source: str) -> None:
    for index in range(1, len(rows)):
        if len(rows[index - 1]) != len(rows[index]):
            raise ShapeError(
                f"Unable to build board from {source}: row {index} has length "
                f"{len(rows[index])}, expected {len(rows[index - 1])} "
                "(all rows must have equal length)"
            )


class Board:
    """A finite 2D grid of cells with bounded (non-wrapping) edges.

    Cells are stored row-major in a numpy array of shape (height, width),
    1 for alive and 0 for dead. Coordinates are (y, x) with the origin in
    the top-left corner.
    """

    def __init__(self, width: int = 0, height: int = 0) -> None:
        """Create an all-dead board.

        Args:
            width: Number of columns
            height: Number of rows

        Raises:
            ValueError: If either dimension is negative
        """
        if width < 0 or height < 0:
            raise ValueError(f"Board dimensions must be non-negative, got {width}x{height}")

        # A board without rows has no width either
        if height == 0:
            width = 0
        self._cells = np.zeros((height, width), dtype=np.int8)

        # Single-threaded convolution keeps frame timing predictable
        torch.set_num_threads(1)

    @classmethod
    def _from_array(cls, cells: np.ndarray) -> "Board":
        board = cls()
        if cells.shape[0] == 0:
            cells = np.zeros((0, 0), dtype=np.int8)
        board._cells = np.ascontiguousarray(cells, dtype=np.int8)
        return board

    @classmethod
    def from_bool_matrix(cls, matrix: Union[Sequence[Sequence[bool]], np.ndarray]) -> "Board":
        """Build a board from a rectangular matrix of booleans.

        Args:
            matrix: Rows of booleans, True meaning alive

        Returns:
            New Board instance

        Raises:
            ShapeError: If rows differ in length
        """
        if isinstance(matrix, np.ndarray):
            if matrix.ndim != 2:
                raise ShapeError(f"Expected a 2D matrix, got {matrix.ndim} dimensions")
            return cls._from_array((matrix != 0).astype(np.int8))

        rows = [list(row) for row in matrix]
        _check_rectangular(rows, "matrix")
        width = len(rows[0]) if rows else 0
        cells = np.array(
            [[1 if value else 0 for value in row] for row in rows], dtype=np.int8
        ).reshape(len(rows), width)
        return cls._from_array(cells)

    @classmethod
    def from_text(cls, text: str) -> "Board":
        """Parse a multi-line text pattern.

        Each line becomes one row and each character one cell: '.' and '0'
        are dead, anything else is alive.

        Args:
            text: Pattern text, one row per line

        Returns:
            New Board instance

        Raises:
            ShapeError: If any two adjacent lines differ in length
        """
        lines = _split_lines(text)
        _check_rectangular(lines, "text")
        width = len(lines[0]) if lines else 0
        cells = np.array(
            [[CellState.from_char(char).value for char in line] for line in lines],
            dtype=np.int8,
        ).reshape(len(lines), width)
        return cls._from_array(cells)

    @classmethod
    def load(cls, path: Union[str, Path]) -> "Board":
        """Load a board from a plain text snapshot file.

        Raises:
            OSError: If the file cannot be read
            ShapeError: If the file's lines differ in length
            UnicodeDecodeError: If the file is not UTF-8 text
        """
        return cls.from_text(Path(path).read_text(encoding="utf-8"))

    def save(self, path: Union[str, Path]) -> None:
        """Write the board as a plain text snapshot file."""
        Path(path).write_text(self.to_text(), encoding="utf-8")

    @property
    def cells(self) -> np.ndarray:
        """Get the underlying (height, width) cell array."""
        return self._cells

    @property
    def width(self) -> int:
        """Number of columns (0 if the board has no rows)."""
        return self._cells.shape[1] if self._cells.shape[0] else 0

    @property
    def height(self) -> int:
        """Number of rows."""
        return self._cells.shape[0]

    @property
    def shape(self) -> Tuple[int, int]:
        """Get board dimensions as (width, height)."""
        return (self.width, self.height)

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return int(np.count_nonzero(self._cells))

    def _check_bounds(self, key: Tuple[int, int]) -> Tuple[int, int]:
        y, x = key
        if not (0 <= y < self.height and 0 <= x < self.width):
            raise IndexError(f"Coordinates (y={y}, x={x}) out of bounds for {self.width}x{self.height} board")
        return y, x

    def __getitem__(self, key: Tuple[int, int]) -> CellState:
        y, x = self._check_bounds(key)
        return CellState.ALIVE if self._cells[y, x] else CellState.DEAD

    def __setitem__(self, key: Tuple[int, int], state: Union[CellState, bool]) -> None:
        y, x = self._check_bounds(key)
        if not isinstance(state, CellState):
            state = CellState.from_bool(state)
        self._cells[y, x] = state.value

    def rows(self) -> Iterator[List[CellState]]:
        """Iterate over rows as lists of cell states."""
        for row in self._cells:
            yield [CellState.ALIVE if value else CellState.DEAD for value in row]

    def clear(self) -> None:
        """Clear all cells (set all to dead)."""
        self._cells.fill(0)

    def randomize(self, probability: float = 0.5) -> None:
        """Overwrite every cell with a random state.

        Uses a fresh generator seeded from OS entropy, so results differ
        between calls and runs.

        Args:
            probability: Chance each cell will be alive (0.0 to 1.0)
        """
        rng = np.random.default_rng()
        self._cells[:] = rng.random(self._cells.shape) < probability

    def copy(self) -> "Board":
        """Return an independent copy of this board."""
        return Board._from_array(self._cells.copy())

    def count_neighbors(self) -> np.ndarray:
        """Count live neighbors for every cell.

        Positions outside the board are treated as absent, so edge and
        corner cells have fewer than 8 neighbors.

        Returns:
            (height, width) array of neighbor counts
        """
        if self._cells.size == 0:
            return np.zeros(self._cells.shape, dtype=np.int8)

        source = torch.from_numpy(self._cells.astype(np.float32)).unsqueeze(0).unsqueeze(0)

        # Zero padding gives bounded topology
        neighbors = F.conv2d(source, _NEIGHBOR_KERNEL, padding=1)
        return neighbors[0, 0].numpy().round().astype(np.int8)

    def advance(self) -> "Board":
        """Compute the next generation.

        Every count is taken from this board; the receiver is not modified.

        Returns:
            New Board of the same dimensions
        """
        if self._cells.size == 0:
            return self.copy()

        neighbor_counts = self.count_neighbors()
        alive = self._cells > 0

        # Survival: live cell with 2 or 3 neighbors
        survive_mask = alive & ((neighbor_counts == 2) | (neighbor_counts == 3))

        # Birth: dead cell with exactly 3 neighbors
        birth_mask = ~alive & (neighbor_counts == 3)

        return Board._from_array((survive_mask | birth_mask).astype(np.int8))

    def to_bool_matrix(self) -> List[List[bool]]:
        """Convert board to nested lists of booleans."""
        return (self._cells > 0).tolist()

    def to_text(self) -> str:
        """Render as text: one line per row, every row newline-terminated."""
        return "".join(
            "".join("#" if value else "." for value in row) + "\n" for row in self._cells
        )

    def __eq__(self, other: object) -> bool:
        """Check if two boards are equal cell for cell."""
        if not isinstance(other, Board):
            return NotImplemented
        return self.shape == other.shape and np.array_equal(self._cells, other._cells)

    def __repr__(self) -> str:
        return f"Board(width={self.width}, height={self.height}, population={self.population})"

    def __str__(self) -> str:
        return self.to_text()
