"""Common Conway's Game of Life patterns and pattern management."""

from typing import Dict, List, Tuple, Optional
from pathlib import Path

from .board import Board


class Pattern:
    """A literal Game of Life pattern stored as text rows."""

    def __init__(self, name: str, rows: List[str], description: str = "") -> None:
        """Initialize a pattern.

        Args:
            name: Pattern name
            rows: Pattern rows using '#' for alive and '.' for dead
            description: Optional description

        Raises:
            ShapeError: If rows differ in length
        """
        self.name = name
        self.description = description
        self._board = Board.from_text("".join(row + "\n" for row in rows))
        self.rows = self._board.to_text().splitlines()

    @property
    def size(self) -> Tuple[int, int]:
        """Pattern size as (width, height)."""
        return self._board.shape

    @property
    def population(self) -> int:
        """Number of live cells in the pattern."""
        return self._board.population

    def to_board(self) -> Board:
        """Build a board holding exactly this pattern."""
        return self._board.copy()

    def apply_to_board(self, board: Board, offset_x: int = 0, offset_y: int = 0) -> None:
        """Clear a board and stamp this pattern onto it.

        Args:
            board: Target board
            offset_x: Horizontal offset
            offset_y: Vertical offset
        """
        board.clear()
        for y, row in enumerate(self._board.rows()):
            for x, state in enumerate(row):
                if not state:
                    continue
                try:
                    board[y + offset_y, x + offset_x] = state
                except IndexError:
                    # Skip cells that fall outside the board
                    pass

    def to_text(self) -> str:
        """Render the pattern in snapshot format."""
        return self._board.to_text()

    @classmethod
    def from_board(cls, board: Board, name: str, description: str = "") -> "Pattern":
        """Create pattern from current board state.

        Args:
            board: Source board
            name: Pattern name
            description: Optional description

        Returns:
            New Pattern instance
        """
        return cls(name, board.to_text().splitlines(), description)


class PatternLibrary:
    """Manages a collection of patterns."""

    def __init__(self, storage_dir: Optional[str] = None) -> None:
        """Initialize pattern library.

        Args:
            storage_dir: Directory of plain text snapshots (defaults to 'patterns')
        """
        self.storage_dir = Path(storage_dir or "patterns")
        self._patterns: Dict[str, Pattern] = {}
        self._load_builtin_patterns()

    def _load_builtin_patterns(self) -> None:
        """Load built-in common patterns."""
        # Still life patterns
        self.add_pattern(Pattern("Block", ["##", "##"], "2x2 still life block"))
        self.add_pattern(Pattern("Beehive", [".##.", "#..#", ".##."], "Beehive still life"))
        self.add_pattern(Pattern("Loaf", [".##.", "#..#", ".#.#", "..#."], "Loaf still life"))

        # Oscillators
        self.add_pattern(Pattern("Blinker", ["...", "###", "..."], "Period-2 oscillator"))
        self.add_pattern(Pattern("Toad", [".###", "###."], "Period-2 oscillator"))
        self.add_pattern(Pattern("Beacon", ["##..", "#...", "...#", "..##"], "Period-2 oscillator"))
        self.add_pattern(
            Pattern(
                "Pulsar",
                [
                    "..###...###..",
                    ".............",
                    "#....#.#....#",
                    "#....#.#....#",
                    "#....#.#....#",
                    "..###...###..",
                    ".............",
                    "..###...###..",
                    "#....#.#....#",
                    "#....#.#....#",
                    "#....#.#....#",
                    ".............",
                    "..###...###..",
                ],
                "Period-3 oscillator",
            )
        )

        # Spaceships
        self.add_pattern(Pattern("Glider", [".#.", "..#", "###"], "Smallest spaceship, period-4"))
        self.add_pattern(
            Pattern(
                "Lightweight Spaceship",
                ["#..#.", "....#", "#...#", ".####"],
                "LWSS - Period-4 spaceship",
            )
        )

        # Methuselahs
        self.add_pattern(
            Pattern(
                "R-pentomino",
                [".##", "##.", ".#."],
                "Famous methuselah that stabilizes after 1103 generations",
            )
        )
        self.add_pattern(
            Pattern(
                "Diehard",
                ["......#.", "##......", ".#...###"],
                "Dies after exactly 130 generations",
            )
        )
        self.add_pattern(
            Pattern(
                "Acorn",
                [".#.....", "...#...", "##..###"],
                "Takes 5206 generations to stabilize",
            )
        )

    def add_pattern(self, pattern: Pattern) -> None:
        """Add a pattern to the library, replacing any with the same name."""
        self._patterns[pattern.name.lower()] = pattern

    def get_pattern(self, name: str) -> Optional[Pattern]:
        """Get a pattern by name, ignoring case.

        Args:
            name: Pattern name

        Returns:
            Pattern instance or None if not found
        """
        return self._patterns.get(name.lower())

    def list_patterns(self) -> List[str]:
        """Get list of all pattern names."""
        return [pattern.name for pattern in self._patterns.values()]

    def get_patterns_by_category(self) -> Dict[str, List[str]]:
        """Get patterns organized by category.

        Returns:
            Dictionary mapping categories to pattern name lists
        """
        categories: Dict[str, List[str]] = {
            "Still Life": ["Block", "Beehive", "Loaf"],
            "Oscillators": ["Blinker", "Toad", "Beacon", "Pulsar"],
            "Spaceships": ["Glider", "Lightweight Spaceship"],
            "Methuselahs": ["R-pentomino", "Diehard", "Acorn"],
            "Custom": [],
        }

        builtin = {name.lower() for names in categories.values() for name in names}
        for key, pattern in self._patterns.items():
            if key not in builtin:
                categories["Custom"].append(pattern.name)

        # Remove empty categories
        return {cat: names for cat, names in categories.items() if names}

    def save_pattern(self, pattern: Pattern, filename: Optional[str] = None) -> Path:
        """Save a pattern to disk as a plain text snapshot.

        Args:
            pattern: Pattern to save
            filename: Optional filename (defaults to pattern name)

        Returns:
            Path of the written file
        """
        if filename is None:
            filename = f"{pattern.name.replace(' ', '_').lower()}.txt"

        self.storage_dir.mkdir(parents=True, exist_ok=True)
        filepath = self.storage_dir / filename
        filepath.write_text(pattern.to_text(), encoding="utf-8")
        return filepath

    def load_pattern(self, filename: str) -> Pattern:
        """Load a pattern from a snapshot file in the storage directory.

        The pattern is named after the file stem.

        Args:
            filename: Filename to load from

        Returns:
            Loaded Pattern instance

        Raises:
            FileNotFoundError: If file doesn't exist
            ShapeError: If the file's lines differ in length
            UnicodeDecodeError: If the file is not UTF-8 text
        """
        filepath = self.storage_dir / filename
        board = Board.load(filepath)

        pattern = Pattern.from_board(board, filepath.stem, f"Loaded from {filepath.name}")
        self.add_pattern(pattern)
        return pattern

    def load_all_patterns(self) -> int:
        """Load all snapshots from the storage directory.

        Returns:
            Number of patterns loaded
        """
        if not self.storage_dir.is_dir():
            return 0

        loaded = 0
        for filepath in sorted(self.storage_dir.glob("*.txt")):
            try:
                self.load_pattern(filepath.name)
                loaded += 1
            except (ValueError, OSError) as e:
                print(f"Warning: Failed to load pattern from {filepath.name}: {e}")
        return loaded
