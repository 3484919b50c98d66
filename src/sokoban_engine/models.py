# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""
Data models for the Sokoban rules engine.

Sokoban is a classic puzzle game where the player pushes boxes to goal locations.
The player can move in four directions and push boxes (but not pull them).
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Dict, List, Literal, Optional


class MalformedLevelError(ValueError):
    """Raised when level text cannot produce a playable grid."""


class StaticKind(IntEnum):
    """Terrain of a cell, fixed when the level is loaded."""

    FLOOR = 0
    WALL = 1
    GOAL = 2


class DynamicKind(IntEnum):
    """Occupant of a cell, changed by moves."""

    EMPTY = 0
    BOX = 1
    PLAYER = 2


@dataclass(frozen=True)
class Move:
    """
    A single applied player step.

    Attributes:
        dx: Horizontal step (-1, 0 or 1)
        dy: Vertical step (-1, 0 or 1)
        is_push: Whether the step relocated a box
    """

    dx: int
    dy: int
    is_push: bool


@dataclass(frozen=True)
class Moved:
    """Outcome of a step that relocated the player."""

    is_push: bool


@dataclass(frozen=True)
class Blocked:
    """Outcome of a step that changed nothing."""


BLOCKED = Blocked()

MoveResult = Moved | Blocked


@dataclass(kw_only=True)
class SokobanAction:
    """
    Action for the Sokoban environment.

    Attributes:
        direction: The direction to move ("up", "down", "left", "right")
    """

    direction: Literal["up", "down", "left", "right"]


@dataclass(kw_only=True)
class SokobanObservation:
    """
    Observation from the Sokoban environment.

    Attributes:
        board: Flattened representation of the game board.
                Each cell is encoded as:
                0 = empty floor
                1 = wall
                2 = box
                3 = goal
                4 = player
                5 = box on goal
                6 = player on goal
        board_shape: Shape of the board (height, width)
        num_boxes: Total number of boxes in the puzzle
        boxes_on_goals: Number of boxes currently on goal positions
        player_position: (row, col) position of the player
        moves_count: Number of moves taken so far
        pushes_count: Number of box pushes performed
        is_solved: Whether all boxes are on goals
        done: Whether the episode has ended
        reward: Reward for the last step
        metadata: Extra episode information
    """

    board: List[int]
    board_shape: List[int]
    num_boxes: int
    boxes_on_goals: int
    player_position: List[int]
    moves_count: int = 0
    pushes_count: int = 0
    is_solved: bool = False
    done: bool = False
    reward: Optional[float] = None
    metadata: Dict[str, Any] = field(default_factory=dict)


@dataclass
class EpisodeState:
    """Bookkeeping for the current environment episode."""

    episode_id: str
    step_count: int = 0
