"""
Sokoban Environment Simple Example

This script demonstrates basic usage of the Sokoban environment and the
undo/redo history of the underlying game.

Usage:
    pip install -e .
    python examples/sokoban_simple.py
"""

import logging

from sokoban_engine import SokobanAction, SokobanEnvironment

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
)
logger = logging.getLogger(__name__)

LEVEL = """\
; A small warm-up level
  #####
###   #
#.@$  #
### $.#
#.##$ #
# # . ##
#$ *$$.#
#   .  #
########
"""


def print_board(observation):
    """Print a visual representation of the Sokoban board."""
    # Reshape the flat board into 2D
    height, width = observation.board_shape
    board = []
    for i in range(height):
        row = observation.board[i * width:(i + 1) * width]
        board.append(row)

    # Symbol mapping for visualization
    symbols = {
        0: '·',  # Empty floor
        1: '█',  # Wall
        2: '□',  # Box
        3: '.',  # Goal
        4: '@',  # Player
        5: '▣',  # Box on goal
        6: '+',  # Player on goal
    }

    print("\nCurrent Board:")
    print("─" * (width * 2))
    for row in board:
        print(' '.join(symbols[cell] for cell in row))
    print("─" * (width * 2))


def main():
    print("Sokoban Environment Example")
    print("=" * 50)

    env = SokobanEnvironment(LEVEL, max_steps=50)
    observation = env.reset()

    print(f"\nInitial State:")
    print(f"  Board size: {observation.board_shape}")
    print(f"  Number of boxes: {observation.num_boxes}")
    print(f"  Player position: {observation.player_position}")
    print(f"  Boxes on goals: {observation.boxes_on_goals}/{observation.num_boxes}")

    print_board(observation)

    print("\nPlaying the game...")
    example_moves = ["right", "left", "left", "down", "right", "up", "up", "right"]

    for i, direction in enumerate(example_moves, 1):
        print(f"\n--- Move {i}: {direction.upper()} ---")
        observation = env.step(SokobanAction(direction=direction))

        print(f"Player position: {observation.player_position}")
        print(f"Boxes on goals: {observation.boxes_on_goals}/{observation.num_boxes}")
        print(f"Total moves: {observation.moves_count}")
        print(f"Total pushes: {observation.pushes_count}")
        print(f"Reward: {observation.reward:.2f}")

        print_board(observation)

        if observation.is_solved:
            print("\nPuzzle solved!")
            break

        if observation.done:
            print("\nMaximum steps reached!")
            break

    game = env.game
    print("\nUndoing every move...")
    while game.can_undo():
        game.undo()
    print(game)

    print("\nRedoing the first move...")
    game.redo()
    print(game.to_string("|"))
    logger.info(f"Redo still possible: {game.can_redo()}")


if __name__ == "__main__":
    main()
