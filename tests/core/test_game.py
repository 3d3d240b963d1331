"""Tests for the GameOfLife class."""

from lifegrid.core.board import Board
from lifegrid.core.game import GameOfLife

BLINKER = ".....\n..#..\n..#..\n..#..\n.....\n"
BLOCK = "....\n.##.\n.##.\n....\n"


class TestGameOfLife:
    """Test cases for the GameOfLife class."""

    def test_initialization(self):
        """Test game initialization."""
        board = Board(10, 10)
        game = GameOfLife(board)

        assert game.board is board
        assert game.generation == 0
        assert game.population == 0
        assert game.population_history == [0]
        assert not game.cycle_detected
        assert game.cycle_length == 0
        assert game.cycle_start_generation == 0

    def test_step_replaces_board(self):
        """Test that stepping swaps in a new board and leaves the old one alone."""
        start = Board.from_text(BLINKER)
        game = GameOfLife(start)

        new_board = game.step()

        assert new_board is game.board
        assert new_board is not start
        assert str(start) == BLINKER
        assert str(new_board) == ".....\n.....\n.###.\n.....\n.....\n"
        assert game.generation == 1

    def test_still_life_block(self):
        """Test that a block is detected as a cycle of length 1."""
        game = GameOfLife(Board.from_text(BLOCK))

        game.step()

        assert str(game.board) == BLOCK
        assert game.cycle_detected
        assert game.cycle_length == 1
        assert game.cycle_start_generation == 0

    def test_oscillator_blinker(self):
        """Test blinker oscillator (period 2)."""
        game = GameOfLife(Board.from_text(BLINKER))

        game.step()
        assert not game.cycle_detected
        assert game.population == 3

        game.step()
        assert str(game.board) == BLINKER
        assert game.cycle_detected
        assert game.cycle_length == 2
        assert game.cycle_start_generation == 0

    def test_extinction(self):
        """Test a lone cell dies out."""
        game = GameOfLife(Board.from_text("...\n.#.\n..."))
        game.step()
        assert game.population == 0

    def test_population_history(self):
        """Test population is recorded every generation."""
        game = GameOfLife(Board.from_text("...\n#..\n#..\n..."))
        game.step()
        game.step()
        assert game.population_history == [2, 0, 0]

    def test_reset(self):
        """Test resetting clears counters and the board."""
        game = GameOfLife(Board.from_text(BLINKER))
        game.step()
        game.step()
        assert game.cycle_detected

        game.reset()

        assert game.generation == 0
        assert game.population == 0
        assert game.board.shape == (5, 5)
        assert not game.cycle_detected
        assert game.population_history == [0]

    def test_reset_with_board(self):
        """Test resetting onto a new board."""
        game = GameOfLife(Board(3, 3))
        game.step()

        block = Board.from_text(BLOCK)
        game.reset(block)

        assert game.board is block
        assert game.generation == 0
        assert game.population == 4

    def test_run_until_stable_extinction(self):
        """Test run ends on extinction."""
        game = GameOfLife(Board.from_text("#"))
        final_generation, reason = game.run_until_stable(100)
        assert reason == "extinction"
        assert final_generation == 1

    def test_run_until_stable_cycle(self):
        """Test run ends when the blinker repeats."""
        game = GameOfLife(Board.from_text(BLINKER))
        final_generation, reason = game.run_until_stable(100)
        assert reason == "cycle"
        assert final_generation == 2

    def test_run_until_stable_max_generations(self):
        """Test run ends at the generation limit."""
        board = Board(40, 40)
        board.randomize(0.3)
        game = GameOfLife(board)
        final_generation, reason = game.run_until_stable(1)
        assert final_generation == 1
        assert reason in ("max_generations", "extinction", "cycle")

    def test_glider_travels(self):
        """Test a glider moves one cell diagonally every four generations."""
        game = GameOfLife(Board.from_text(".#....\n..#...\n###...\n......\n......\n......\n"))
        for _ in range(4):
            game.step()
        assert str(game.board) == "......\n..#...\n...#..\n.###..\n......\n......\n"
        assert not game.cycle_detected

    def test_population_change_rate(self):
        """Test the average population change."""
        game = GameOfLife(Board.from_text(BLINKER))
        assert game.get_population_change_rate() == 0.0

        game.step()
        assert game.get_population_change_rate() == 0.0

        dying = GameOfLife(Board.from_text("##"))
        dying.step()
        assert dying.get_population_change_rate() == -2.0

    def test_get_statistics(self):
        """Test statistics contents."""
        game = GameOfLife(Board.from_text(BLOCK))
        game.step()
        stats = game.get_statistics()

        assert stats["generation"] == 1
        assert stats["population"] == 4
        assert stats["board_size"] == (4, 4)
        assert stats["population_density"] == 0.25
        assert stats["cycle_detected"] is True
        assert stats["cycle_length"] == 1

    def test_get_statistics_empty_board(self):
        """Test statistics on a degenerate board."""
        stats = GameOfLife(Board(0, 0)).get_statistics()
        assert stats["population"] == 0
        assert stats["population_density"] == 0.0
