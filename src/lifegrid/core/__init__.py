"""Core cellular automata logic."""

from .board import Board, CellState, ShapeError
from .game import GameOfLife
from .patterns import Pattern, PatternLibrary

__all__ = ["Board", "CellState", "ShapeError", "GameOfLife", "Pattern", "PatternLibrary"]
