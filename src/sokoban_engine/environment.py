# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""
Sokoban Environment Implementation.

Episodes over a fixed text level: the player pushes boxes onto goal positions
by moving in four directions, and every step is scored.
"""

import logging
from typing import Dict, Optional, Tuple
from uuid import uuid4

from .models import DynamicKind, EpisodeState, SokobanAction, SokobanObservation
from .sokoban import Sokoban

logger = logging.getLogger(__name__)

# Reward shaping
STEP_PENALTY = -0.1
BOX_ON_GOAL_REWARD = 10.0
BOX_OFF_GOAL_PENALTY = -10.0
SOLVED_REWARD = 100.0

# Direction name -> (dx, dy), y growing downwards
DIRECTIONS: Dict[str, Tuple[int, int]] = {
    "up": (0, -1),
    "down": (0, 1),
    "left": (-1, 0),
    "right": (1, 0),
}


class SokobanEnvironment:
    """
    Sokoban puzzle game environment.

    The goal is to push all boxes onto goal positions. The player can move
    in four directions. If there's a box in the direction of movement and
    an empty space behind it, the box will be pushed.

    Rewards:
        - +10 for placing a box on a goal
        - -10 for removing a box from a goal
        - +100 for solving the puzzle (all boxes on goals)
        - -0.1 for each move (to encourage efficiency)

    Example:
        >>> env = SokobanEnvironment("#####|#@$.#|#####")
        >>> obs = env.reset()
        >>> print(f"Board size: {obs.board_shape}")
        >>> obs = env.step(SokobanAction(direction="right"))
        >>> print(f"Boxes on goals: {obs.boxes_on_goals}/{obs.num_boxes}")
    """

    def __init__(self, level: str, max_steps: int = 200):
        """
        Initialize the Sokoban environment.

        Args:
            level: Level text, rows separated by newlines and/or '|'
            max_steps: Maximum steps before episode ends (default: 200)
        """
        self.level = level
        self.max_steps = max_steps

        self._state = EpisodeState(episode_id=str(uuid4()), step_count=0)
        self._game: Optional[Sokoban] = None
        self._moves_count = 0
        self._pushes_count = 0
        self._previous_boxes_on_goals = 0

        logger.info(f"SokobanEnvironment initialized with max_steps={max_steps}")

    @property
    def game(self) -> Sokoban:
        if self._game is None:
            raise RuntimeError("Environment must be reset before use")
        return self._game

    def reset(self, level: Optional[str] = None) -> SokobanObservation:
        """
        Reset the environment and load the level.

        Args:
            level: Optional replacement level text; defaults to the current level

        Returns:
            SokobanObservation with the initial board state
        """
        if level is not None:
            self.level = level

        self._game = Sokoban.from_string(self.level)
        self._state = EpisodeState(episode_id=str(uuid4()), step_count=0)
        logger.info(f"Environment reset. New episode ID: {self._state.episode_id}")
        self._moves_count = 0
        self._pushes_count = 0
        self._previous_boxes_on_goals = self.game.grid.boxes_on_goals()

        return self._get_observation()

    def step(self, action: SokobanAction) -> SokobanObservation:
        """
        Execute a step in the environment by moving the player.

        Args:
            action: SokobanAction containing the direction to move

        Returns:
            SokobanObservation with the updated board state

        Raises:
            ValueError: If the direction is not one of up, down, left, right
        """
        if action.direction not in DIRECTIONS:
            raise ValueError(f"Unknown direction: {action.direction!r}")
        dx, dy = DIRECTIONS[action.direction]
        game = self.game

        self._state.step_count += 1
        self._moves_count += 1
        reward = STEP_PENALTY

        move = game.move_player(dx, dy)
        if move is not None and move.is_push:
            self._pushes_count += 1

            current_boxes_on_goals = game.grid.boxes_on_goals()
            if current_boxes_on_goals > self._previous_boxes_on_goals:
                reward += BOX_ON_GOAL_REWARD
            elif current_boxes_on_goals < self._previous_boxes_on_goals:
                reward += BOX_OFF_GOAL_PENALTY
            self._previous_boxes_on_goals = current_boxes_on_goals

        observation = self._get_observation()

        if observation.is_solved:
            reward += SOLVED_REWARD
            observation.done = True
            logger.info(f"Episode {self._state.episode_id} solved! Final reward: {reward}")
        elif self._state.step_count >= self.max_steps:
            observation.done = True
            logger.warning(f"Episode {self._state.episode_id} ended due to max steps reached.")

        observation.reward = reward
        logger.debug(f"Step {self._state.step_count}: Action={action.direction}, Reward={reward}, Done={observation.done}")
        return observation

    def _get_observation(self) -> SokobanObservation:
        """Create an observation from the current board state."""
        grid = self.game.grid
        board = grid.board_codes()

        return SokobanObservation(
            board=[int(code) for code in board.flatten()],
            board_shape=[grid.height, grid.width],
            num_boxes=grid.count_cells(dynamic=DynamicKind.BOX),
            boxes_on_goals=grid.boxes_on_goals(),
            player_position=[grid.player_y, grid.player_x],
            moves_count=self._moves_count,
            pushes_count=self._pushes_count,
            is_solved=grid.is_solved(),
            done=False,
            reward=0.0,
            metadata={
                "step": self._state.step_count,
                "max_steps": self.max_steps,
            },
        )

    @property
    def state(self) -> EpisodeState:
        """
        Get the current environment state.

        Returns:
            Current EpisodeState with episode_id and step_count
        """
        return self._state
