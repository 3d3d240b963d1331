"""Terminal frontend for Conway's Game of Life."""

import argparse
import sys
import time
from pathlib import Path
from typing import Optional, TextIO

from ..core.board import Board, ShapeError
from ..core.game import GameOfLife
from ..core.patterns import PatternLibrary

# Clear the whole screen and move the cursor home
CLEAR_SCREEN = "\033[2J\033[H"


class CLIGameOfLife:
    """Runs a Game of Life animation in the terminal."""

    def __init__(self, pattern_dir: Optional[str] = None, out: Optional[TextIO] = None):
        """Initialize CLI interface.

        Args:
            pattern_dir: Directory of extra text snapshot patterns
            out: Stream to draw frames on (defaults to stdout)
        """
        self.pattern_library = PatternLibrary(pattern_dir)
        self.pattern_library.load_all_patterns()
        self.out = out

    @property
    def _stream(self) -> TextIO:
        return self.out if self.out is not None else sys.stdout

    def build_board(
        self,
        width: int,
        height: int,
        population_rate: float = 0.5,
        file: Optional[str] = None,
        pattern: Optional[str] = None,
        pattern_x: int = 0,
        pattern_y: int = 0,
    ) -> Board:
        """Create the starting board.

        A snapshot file wins over a pattern, which wins over a random board.

        Raises:
            OSError: If the snapshot file cannot be read
            ShapeError: If the snapshot file is ragged
            KeyError: If the pattern is unknown
        """
        if file:
            return Board.load(file)

        board = Board(width, height)
        if pattern:
            loaded_pattern = self.pattern_library.get_pattern(pattern)
            if loaded_pattern is None:
                raise KeyError(pattern)
            loaded_pattern.apply_to_board(board, pattern_x, pattern_y)
        else:
            board.randomize(population_rate)
        return board

    def render_frame(self, game: GameOfLife, clear: bool = True, verbose: bool = False) -> None:
        """Draw the current generation."""
        stream = self._stream
        if clear:
            stream.write(CLEAR_SCREEN)
        stream.write(str(game.board))
        if verbose:
            stream.write(f"Generation {game.generation} - population {game.population}\n")
        stream.flush()

    def run(
        self,
        game: GameOfLife,
        fps: float = 12.5,
        max_generations: int = 0,
        stop_when_stable: bool = False,
        clear: bool = True,
        verbose: bool = False,
    ) -> GameOfLife:
        """Animate a game until a stop condition is met.

        The game is stepped in place, so it holds the last drawn generation
        even if the loop is interrupted.

        Args:
            game: Game holding the starting board
            fps: Frames per second
            max_generations: Stop after this many generations (0 runs forever)
            stop_when_stable: Stop once the board dies out or repeats
            clear: Clear the terminal before each frame
            verbose: Print a status line under each frame

        Returns:
            The same game in its final state
        """
        delay = 1.0 / fps

        self.render_frame(game, clear, verbose)
        while max_generations <= 0 or game.generation < max_generations:
            time.sleep(delay)
            game.step()
            self.render_frame(game, clear, verbose)

            if stop_when_stable and (game.population == 0 or game.cycle_detected):
                break

        return game

    def list_patterns(self) -> None:
        """List available patterns by category."""
        print("Available patterns:")
        for category, names in self.pattern_library.get_patterns_by_category().items():
            print(f"\n{category}:")
            for name in names:
                pattern = self.pattern_library.get_pattern(name)
                if pattern:
                    width, height = pattern.size
                    print(f"  {name}: {width}x{height}, {pattern.population} cells")
                    if pattern.description:
                        print(f"    {pattern.description}")


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Animate Conway's Game of Life in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Random 50x50 board at the default frame rate
  lifegrid-cli

  # Small random board, sparse population, 30 frames per second
  lifegrid-cli -W 30 -H 20 --population 0.2 --fps 30

  # Load a text snapshot ('.' or '0' dead, anything else alive)
  lifegrid-cli --file board.txt

  # Glider on a 20x20 board, stop when the run settles and save the result
  lifegrid-cli -W 20 -H 20 --pattern Glider --stop-when-stable --save final.txt

  # List available patterns
  lifegrid-cli --list-patterns
        """,
    )

    # Board configuration
    parser.add_argument("-W", "--width", type=int, default=50, help="Board width (default: 50)")

    parser.add_argument("-H", "--height", type=int, default=50, help="Board height (default: 50)")

    parser.add_argument(
        "-p",
        "--population",
        type=float,
        default=0.5,
        help="Initial random population rate 0.0-1.0 (default: 0.5)",
    )

    parser.add_argument(
        "-f",
        "--file",
        type=str,
        help="Load the starting board from a text snapshot file",
    )

    # Pattern configuration
    parser.add_argument(
        "--pattern",
        type=str,
        help="Load a specific pattern instead of random population",
    )

    parser.add_argument(
        "--pattern-x",
        type=int,
        default=0,
        help="X offset for pattern placement (default: centered)",
    )

    parser.add_argument(
        "--pattern-y",
        type=int,
        default=0,
        help="Y offset for pattern placement (default: centered)",
    )

    parser.add_argument(
        "--pattern-dir",
        type=str,
        help="Directory of extra text snapshot patterns (default: patterns)",
    )

    # Animation configuration
    parser.add_argument(
        "--fps",
        type=float,
        default=12.5,
        help="Frames per second (default: 12.5)",
    )

    parser.add_argument(
        "-m",
        "--max-generations",
        type=int,
        default=0,
        help="Stop after this many generations (default: 0, run forever)",
    )

    parser.add_argument(
        "--stop-when-stable",
        action="store_true",
        help="Stop once the board dies out or repeats a previous generation",
    )

    # Output configuration
    parser.add_argument(
        "--save",
        type=str,
        help="Write the final board to this text snapshot file",
    )

    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Do not clear the terminal between frames",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print a status line per frame and a summary at the end",
    )

    parser.add_argument(
        "--list-patterns",
        action="store_true",
        help="List all available patterns and exit",
    )

    return parser


def format_finish_reason(game: GameOfLife) -> str:
    """Describe why a run ended.

    Args:
        game: Game in its final state

    Returns:
        Formatted reason string
    """
    if game.population == 0:
        return "Extinction - all cells died"
    if game.cycle_detected:
        if game.cycle_length == 1:
            return f"Still life reached at generation {game.cycle_start_generation}"
        return (
            f"Cycle detected - length {game.cycle_length}, "
            f"started at generation {game.cycle_start_generation}"
        )
    return f"Stopped at generation {game.generation}"


def print_results(game: GameOfLife, verbose: bool) -> None:
    """Print a summary of the finished run.

    Args:
        game: Game in its final state
        verbose: Whether to print detailed statistics
    """
    print(f"\nSimulation ended after {game.generation} generations")
    print(f"Finish reason: {format_finish_reason(game)}")

    if verbose:
        stats = game.get_statistics()
        print("\nDetailed Statistics:")
        print(f"  Board size: {stats['board_size'][0]}x{stats['board_size'][1]}")
        print(f"  Final population: {stats['population']}")
        print(f"  Population density: {stats['population_density']:.2%}")
        print(f"  Population change rate: {stats['population_change_rate']:.2f}")


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors = []

    if args.width <= 0:
        errors.append("Width must be positive")

    if args.height <= 0:
        errors.append("Height must be positive")

    if not 0.0 <= args.population <= 1.0:
        errors.append("Population rate must be between 0.0 and 1.0")

    if args.fps <= 0:
        errors.append("Frames per second must be positive")

    if args.max_generations < 0:
        errors.append("Max generations must be non-negative")

    if args.pattern_x < 0:
        errors.append("Pattern X offset must be non-negative")

    if args.pattern_y < 0:
        errors.append("Pattern Y offset must be non-negative")

    if args.file and args.pattern:
        errors.append("Use either --file or --pattern, not both")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def main(argv: Optional[list] = None) -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    cli = CLIGameOfLife(args.pattern_dir)

    # Handle special commands
    if args.list_patterns:
        cli.list_patterns()
        return 0

    # Validate arguments
    if not validate_args(args):
        return 1

    if args.pattern:
        pattern = cli.pattern_library.get_pattern(args.pattern)
        if not pattern:
            available = cli.pattern_library.list_patterns()
            print(f"Error: Pattern '{args.pattern}' not found")
            print(f"Available patterns: {', '.join(available)}")
            print("Use --list-patterns to see detailed information")
            return 1

        # Auto-center pattern if no offset specified
        if args.pattern_x == 0 and args.pattern_y == 0:
            pattern_width, pattern_height = pattern.size
            args.pattern_x = max(0, (args.width - pattern_width) // 2)
            args.pattern_y = max(0, (args.height - pattern_height) // 2)
            if args.verbose:
                print(f"Auto-centering pattern at ({args.pattern_x}, {args.pattern_y})")

    try:
        board = cli.build_board(
            width=args.width,
            height=args.height,
            population_rate=args.population,
            file=args.file,
            pattern=args.pattern,
            pattern_x=args.pattern_x,
            pattern_y=args.pattern_y,
        )
    except ShapeError as e:
        print(f"Error: Invalid board file '{args.file}': {e}")
        return 1
    except UnicodeDecodeError as e:
        print(f"Error: Board file '{args.file}' is not UTF-8 text: {e}")
        return 1
    except OSError as e:
        print(f"Error: Could not read board file '{args.file}': {e}")
        return 1

    game = GameOfLife(board)
    try:
        cli.run(
            game,
            fps=args.fps,
            max_generations=args.max_generations,
            stop_when_stable=args.stop_when_stable,
            clear=not args.no_clear,
            verbose=args.verbose,
        )
    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")

    print_results(game, args.verbose)

    if args.save:
        try:
            game.board.save(args.save)
        except OSError as e:
            print(f"Error: Could not save board to '{args.save}': {e}")
            return 1
        print(f"Board saved to: {Path(args.save)}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
