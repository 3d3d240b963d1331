"""Conway's Game of Life on a bounded board, animated in the terminal."""

__version__ = "0.1.0"

from .core.board import Board, CellState, ShapeError
from .core.game import GameOfLife
from .core.patterns import Pattern, PatternLibrary

__all__ = ["Board", "CellState", "ShapeError", "GameOfLife", "Pattern", "PatternLibrary"]
