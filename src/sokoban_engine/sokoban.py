# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""
Sokoban game facade: a loaded level plus its move history.
"""

import logging
from typing import Iterable, Optional, TextIO, Tuple

from .cell import Cell
from .engine import MoveHistory
from .grid import Grid
from .models import DynamicKind, Move

logger = logging.getLogger(__name__)


class Sokoban:
    """
    A playable Sokoban level.

    Example:
        >>> game = Sokoban.from_string("#####\\n#@$.#\\n#####")
        >>> game.move_player(1, 0)
        Move(dx=1, dy=0, is_push=True)
        >>> print(game)
        #####
        # @*#
        #####
    """

    def __init__(self, lines: Optional[Iterable[str]] = None):
        """
        Initialize the game.

        Args:
            lines: Level text lines; if omitted, call :meth:`load` before playing

        Raises:
            TypeError: If ``lines`` is a single string; use :meth:`from_string`
        """
        if isinstance(lines, str):
            raise TypeError("Sokoban() takes a sequence of lines; use Sokoban.from_string() for a single string")
        self._grid: Optional[Grid] = None
        self._history: Optional[MoveHistory] = None
        if lines is not None:
            self._set_grid(Grid.parse(lines))

    @classmethod
    def from_string(cls, level: str) -> "Sokoban":
        game = cls()
        game._set_grid(Grid.from_string(level))
        return game

    def _set_grid(self, grid: Grid) -> None:
        self._grid = grid
        self._history = MoveHistory(grid)
        logger.info(
            f"Loaded level {grid.width}x{grid.height} with "
            f"{grid.count_cells(dynamic=DynamicKind.BOX)} boxes, player at ({grid.player_x}, {grid.player_y})"
        )

    @property
    def grid(self) -> Grid:
        if self._grid is None:
            raise RuntimeError("No level loaded")
        return self._grid

    @property
    def history(self) -> MoveHistory:
        if self._history is None:
            raise RuntimeError("No level loaded")
        return self._history

    # Text transport

    def load(self, stream: TextIO) -> None:
        """Replace the current level with one read from a text stream; the history is cleared."""
        self._set_grid(Grid.parse(stream))

    def save(self, stream: TextIO) -> None:
        """Write the current level to a text stream."""
        stream.write(self.to_string())
        stream.flush()

    def to_string(self, separator: str = "\n") -> str:
        return self.grid.serialize(separator)

    def __str__(self) -> str:
        return self.to_string()

    # Queries

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    def get_width(self) -> int:
        return self.width

    def get_height(self) -> int:
        return self.height

    @property
    def player_position(self) -> Tuple[int, int]:
        """Player coordinates as (x, y)."""
        return self.grid.player_x, self.grid.player_y

    def get_cell(self, x: int, y: int) -> Optional[Cell]:
        return self.grid.get_cell(x, y)

    def _existing_cell(self, x: int, y: int) -> Cell:
        cell = self.grid.get_cell(x, y)
        if cell is None:
            raise IndexError(f"Cell ({x}, {y}) outside {self.width}x{self.height} grid")
        return cell

    def get_static_cell_value(self, x: int, y: int) -> int:
        return self._existing_cell(x, y).static_value()

    def get_dynamic_cell_value(self, x: int, y: int) -> int:
        return self._existing_cell(x, y).dynamic_value()

    def count_cells(self, static: Optional[int] = None, dynamic: Optional[int] = None) -> int:
        return self.grid.count_cells(static, dynamic)

    def is_solved(self) -> bool:
        return self.grid.is_solved()

    # Moves

    def move_player(self, dx: int, dy: int) -> Optional[Move]:
        """Step the player; returns the recorded move or ``None`` if blocked."""
        return self.history.move_player(dx, dy)

    def can_undo(self) -> bool:
        return self.history.can_undo()

    def undo(self) -> None:
        self.history.undo()

    def can_redo(self) -> bool:
        return self.history.can_redo()

    def redo(self) -> None:
        self.history.redo()
