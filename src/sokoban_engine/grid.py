# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""
Rectangular Sokoban level grid.

The grid keeps two flat, row-major numpy layers (index = y * width + x):
    static layer  - terrain (floor, wall, goal), fixed at load time
    dynamic layer - occupants (empty, box, player), mutated by moves

Level text uses the XSB characters described in :mod:`.cell`. Lines starting
with ``;`` are comments, and a single line may pack several rows separated
by ``|``.
"""

import logging
import re
from typing import Iterable, List, Optional

import numpy as np

from .cell import FLOOR_CHAR, Cell, decode_char
from .models import DynamicKind, MalformedLevelError, StaticKind

logger = logging.getLogger(__name__)

ROW_SEPARATORS = re.compile(r"[\n|]+")
COMMENT_PREFIX = ";"

# Combined cell encoding used by observations
EMPTY = 0
WALL = 1
BOX = 2
GOAL = 3
PLAYER = 4
BOX_ON_GOAL = 5
PLAYER_ON_GOAL = 6


def split_level_lines(lines: Iterable[str]) -> List[str]:
    """
    Turn raw level lines into grid rows.

    Comment lines are dropped, line terminators are removed, and every
    remaining line is split on runs of newline or ``|`` characters.

    Args:
        lines: Raw text lines, e.g. as read from a file

    Returns:
        The list of grid rows, top to bottom
    """
    rows: List[str] = []
    for line in lines:
        line = line.rstrip("\r\n")
        if line.startswith(COMMENT_PREFIX):
            continue
        pieces = ROW_SEPARATORS.split(line)
        # a trailing separator yields an empty piece that is not a row
        while len(pieces) > 1 and pieces[-1] == "":
            pieces.pop()
        rows.extend(piece.rstrip("\r") for piece in pieces)
    return rows


class Grid:
    """
    A Sokoban level: terrain, boxes and the player on a fixed rectangle.

    Example:
        >>> grid = Grid.from_string("#####|#@$.#|#####")
        >>> grid.width, grid.height
        (5, 3)
        >>> grid.get_cell(2, 1).is_box()
        True
        >>> print(grid.serialize("|"))
        #####|#@$.#|#####
    """

    def __init__(self, width: int, static_layer: np.ndarray, dynamic_layer: np.ndarray, player_x: int, player_y: int):
        """
        Build a grid from already decoded layers. Use :meth:`parse` for text.

        Args:
            width: Number of columns
            static_layer: Flat row-major terrain codes
            dynamic_layer: Flat row-major occupant codes
            player_x: Column of the player
            player_y: Row of the player
        """
        if width <= 0 or static_layer.size % width != 0 or static_layer.shape != dynamic_layer.shape:
            raise MalformedLevelError(f"Inconsistent grid layers for width {width}")
        self.width = width
        self._static = static_layer
        self._dynamic = dynamic_layer
        self.player_x = player_x
        self.player_y = player_y

    @classmethod
    def parse(cls, lines: Iterable[str]) -> "Grid":
        """
        Parse level text lines into a grid.

        Shorter rows are padded with floor.

        Raises:
            MalformedLevelError: If there are no rows, all rows are empty,
                or the level does not have exactly one player
        """
        rows = split_level_lines(lines)
        if not rows:
            raise MalformedLevelError("Level has no rows")

        width = max(len(row) for row in rows)
        if width == 0:
            raise MalformedLevelError(f"Level has {len(rows)} rows but all of them are empty")

        height = len(rows)
        static_layer = np.zeros(width * height, dtype=np.int8)
        dynamic_layer = np.zeros(width * height, dtype=np.int8)
        player_x, player_y = -1, -1
        players = 0

        for y, row in enumerate(rows):
            for x in range(width):
                static, dynamic = decode_char(row[x] if x < len(row) else FLOOR_CHAR)
                index = y * width + x
                static_layer[index] = static
                dynamic_layer[index] = dynamic
                if dynamic == DynamicKind.PLAYER:
                    players += 1
                    player_x, player_y = x, y

        if players != 1:
            raise MalformedLevelError(
                f"Level of size {width}x{height} must have exactly one player ('@' or '+'), found {players}"
            )

        logger.debug(f"Parsed level {width}x{height}, player at ({player_x}, {player_y})")
        return cls(width, static_layer, dynamic_layer, player_x, player_y)

    @classmethod
    def from_string(cls, level: str) -> "Grid":
        """Parse a level given as one string, rows separated by newlines and/or ``|``."""
        lines = level.split("\n")
        while lines and lines[-1] == "":
            lines.pop()
        return cls.parse(lines)

    @property
    def height(self) -> int:
        return self._static.size // self.width

    def _index(self, x: int, y: int) -> Optional[int]:
        if x < 0 or y < 0 or x >= self.width or y >= self.height:
            return None
        return y * self.width + x

    def get_cell(self, x: int, y: int) -> Optional[Cell]:
        """Return the cell at (x, y), or ``None`` outside the grid."""
        index = self._index(x, y)
        if index is None:
            return None
        return Cell(self._static, self._dynamic, index)

    def cells(self) -> List[Cell]:
        """All cells in row-major order."""
        return [Cell(self._static, self._dynamic, index) for index in range(self._static.size)]

    def serialize(self, separator: str = "\n") -> str:
        """Encode the grid as level text, ``separator`` between rows."""
        chars = [cell.to_char() for cell in self.cells()]
        rows = ["".join(chars[y * self.width:(y + 1) * self.width]) for y in range(self.height)]
        return separator.join(rows)

    def __str__(self) -> str:
        return self.serialize("\n")

    def count_cells(self, static: Optional[int] = None, dynamic: Optional[int] = None) -> int:
        """
        Count cells matching both filters; a ``None`` filter matches every cell.

        Example:
            >>> grid.count_cells(static=StaticKind.GOAL, dynamic=DynamicKind.BOX)
        """
        mask = np.ones(self._static.size, dtype=bool)
        if static is not None:
            mask &= self._static == int(static)
        if dynamic is not None:
            mask &= self._dynamic == int(dynamic)
        return int(np.count_nonzero(mask))

    def boxes_on_goals(self) -> int:
        """Count how many boxes are currently on goal positions."""
        return self.count_cells(StaticKind.GOAL, DynamicKind.BOX)

    def is_solved(self) -> bool:
        """Whether no box stands off a goal."""
        return self.count_cells(dynamic=DynamicKind.BOX) == self.boxes_on_goals()

    def board_codes(self) -> np.ndarray:
        """
        Combined per-cell codes, shaped (height, width).

        0 = empty floor, 1 = wall, 2 = box, 3 = goal, 4 = player,
        5 = box on goal, 6 = player on goal
        """
        on_goal = self._static == StaticKind.GOAL
        codes = np.full(self._static.shape, EMPTY, dtype=np.int8)
        codes[self._static == StaticKind.WALL] = WALL
        codes[on_goal] = GOAL
        codes[self._dynamic == DynamicKind.BOX] = BOX
        codes[(self._dynamic == DynamicKind.BOX) & on_goal] = BOX_ON_GOAL
        codes[self._dynamic == DynamicKind.PLAYER] = PLAYER
        codes[(self._dynamic == DynamicKind.PLAYER) & on_goal] = PLAYER_ON_GOAL
        return codes.reshape(self.height, self.width)
