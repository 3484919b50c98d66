# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""
Move rules and undo/redo history.

A step moves the player one cell in a cardinal direction. If there's a box in
the direction of movement and a free cell behind it, the box is pushed along.
Every applied step is recorded as a :class:`Move` command holding just enough
to reverse it against the current grid.
"""

import logging
from typing import List, Optional

from .grid import Grid
from .models import BLOCKED, Move, MoveResult, Moved

logger = logging.getLogger(__name__)


def do_move(grid: Grid, dx: int, dy: int) -> MoveResult:
    """
    Step the player by (dx, dy), pushing a box if one is in the way.

    The direction is not validated here: callers pass a unit cardinal step.

    Returns:
        ``Moved(is_push)`` if the player moved, ``BLOCKED`` otherwise (the
        grid is then untouched)
    """
    x, y = grid.player_x, grid.player_y
    cell = grid.get_cell(x, y)
    forward1 = grid.get_cell(x + dx, y + dy)
    if forward1 is None:
        return BLOCKED
    forward2 = grid.get_cell(x + dx + dx, y + dy + dy)

    is_push = False
    if forward1.is_box() and forward2 is not None and not forward2.is_occupied():
        forward1.move_to(forward2)
        is_push = True

    if is_push or not forward1.is_occupied():
        cell.move_to(forward1)
        grid.player_x += dx
        grid.player_y += dy
        return Moved(is_push)
    return BLOCKED


def undo_move(grid: Grid, dx: int, dy: int, was_push: bool) -> None:
    """Revert the last applied :func:`do_move` with the same arguments."""
    x, y = grid.player_x, grid.player_y
    cell = grid.get_cell(x, y)
    backward = grid.get_cell(x - dx, y - dy)
    cell.move_to(backward)
    if was_push:
        forward = grid.get_cell(x + dx, y + dy)
        forward.move_to(cell)
    grid.player_x -= dx
    grid.player_y -= dy


def _check_direction(dx: int, dy: int) -> None:
    if (dx, dy) not in ((1, 0), (-1, 0), (0, 1), (0, -1)):
        raise ValueError(f"Not a cardinal unit step: ({dx}, {dy})")


class MoveHistory:
    """
    Linear undo/redo history over a grid it does not own.

    Commands before ``cursor`` are applied; commands from ``cursor`` on were
    undone and can be redone until a new move replaces them.

    Example:
        >>> history = MoveHistory(Grid.from_string("#####|#@$ #|#####"))
        >>> history.move_player(1, 0)
        Move(dx=1, dy=0, is_push=True)
        >>> history.undo()
        >>> history.can_redo()
        True
    """

    def __init__(self, grid: Grid):
        self.grid = grid
        self.moves: List[Move] = []
        self.cursor = 0

    def __len__(self) -> int:
        return len(self.moves)

    def move_player(self, dx: int, dy: int) -> Optional[Move]:
        """
        Try a step and record it.

        Returns:
            The recorded command, or ``None`` if the step was blocked (the
            history is then unchanged)

        Raises:
            ValueError: If (dx, dy) is not a unit cardinal step
        """
        _check_direction(dx, dy)
        result = do_move(self.grid, dx, dy)
        if not isinstance(result, Moved):
            logger.debug(f"Move ({dx}, {dy}) blocked at ({self.grid.player_x}, {self.grid.player_y})")
            return None

        command = Move(dx, dy, result.is_push)
        del self.moves[self.cursor:]
        self.moves.append(command)
        self.cursor += 1
        logger.debug(f"Applied {command}, history size {len(self.moves)}")
        return command

    def can_undo(self) -> bool:
        return self.cursor > 0

    def undo(self) -> None:
        if not self.can_undo():
            return
        self.cursor -= 1
        command = self.moves[self.cursor]
        undo_move(self.grid, command.dx, command.dy, command.is_push)
        logger.debug(f"Undid {command}")

    def can_redo(self) -> bool:
        return self.cursor < len(self.moves)

    def redo(self) -> None:
        if not self.can_redo():
            return
        command = self.moves[self.cursor]
        self.cursor += 1
        do_move(self.grid, command.dx, command.dy)
        logger.debug(f"Redid {command}")

    def applied_moves(self) -> List[Move]:
        """Commands currently applied to the grid, oldest first."""
        return self.moves[:self.cursor]

    def clear(self) -> None:
        self.moves.clear()
        self.cursor = 0
