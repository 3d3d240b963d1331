#!/usr/bin/env python3
"""
Example usage of the lifegrid package.
"""

from lifegrid import Board, GameOfLife, PatternLibrary


def main():
    """Demonstrate programmatic usage of the lifegrid package."""
    board = Board(20, 20)

    # Load a pattern
    library = PatternLibrary()
    glider = library.get_pattern("Glider")

    if glider:
        # Apply glider pattern near the center of the board
        glider.apply_to_board(board, offset_x=8, offset_y=8)

    game = GameOfLife(board)
    print("Initial state:")
    print(game.board)
    print(f"Population: {game.population}")
    print()

    # Run simulation for 10 generations
    for _ in range(10):
        game.step()
        print(f"Generation {game.generation}:")
        print(game.board)
        print(f"Population: {game.population}")

        if game.cycle_detected:
            print(f"Cycle detected! Length: {game.cycle_length}")
            break

        print()

    # Boards also parse from text
    block = Board.from_text("....\n.##.\n.##.\n....\n")
    print("Block is a still life:", block.advance() == block)

    # Show statistics
    stats = game.get_statistics()
    print("Final statistics:")
    for key, value in stats.items():
        print(f"  {key}: {value}")


if __name__ == "__main__":
    main()
