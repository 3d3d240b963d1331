"""Basic tests for the lifegrid package."""

import lifegrid
from lifegrid import Board, CellState, GameOfLife, PatternLibrary, ShapeError


def test_public_api():
    """Test the package exports its core types."""
    assert lifegrid.__version__ == "0.1.0"
    assert issubclass(ShapeError, ValueError)


def test_board_creation():
    """Test basic board creation and cell operations."""
    board = Board(10, 10)
    assert board.width == 10
    assert board.height == 10
    assert board[0, 0] is CellState.DEAD

    board[5, 5] = True
    assert board[5, 5] is CellState.ALIVE


def test_game_creation():
    """Test basic game creation."""
    game = GameOfLife(Board(5, 5))
    assert game.population == 0

    game.board[2, 2] = True
    assert game.population == 1


def test_pattern_library(tmp_path):
    """Test pattern library has some patterns."""
    library = PatternLibrary(str(tmp_path))
    patterns = library.list_patterns()
    assert len(patterns) > 0
    assert "Glider" in patterns


def test_blinker_pattern():
    """Test the blinker pattern oscillates correctly."""
    board = Board(5, 5)
    board[1, 2] = True
    board[2, 2] = True
    board[3, 2] = True
    game = GameOfLife(board)

    assert game.population == 3

    # Step once - should become horizontal
    game.step()
    assert game.population == 3
    assert game.board[2, 1] and game.board[2, 2] and game.board[2, 3]

    # Step again - should return to vertical
    game.step()
    assert game.board == board
