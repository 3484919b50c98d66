# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""
Single grid positions and their character encoding.

Characters follow the XSB convention:
    #  wall
    (space), -, _  floor
    .  goal
    $  box
    *  box on goal
    @  player
    +  player on goal
"""

from typing import Dict, Tuple

import numpy as np

from .models import DynamicKind, StaticKind

CellKinds = Tuple[StaticKind, DynamicKind]

FLOOR_CHAR = " "

CHAR_TO_KINDS: Dict[str, CellKinds] = {
    "#": (StaticKind.WALL, DynamicKind.EMPTY),
    " ": (StaticKind.FLOOR, DynamicKind.EMPTY),
    "-": (StaticKind.FLOOR, DynamicKind.EMPTY),
    "_": (StaticKind.FLOOR, DynamicKind.EMPTY),
    ".": (StaticKind.GOAL, DynamicKind.EMPTY),
    "$": (StaticKind.FLOOR, DynamicKind.BOX),
    "*": (StaticKind.GOAL, DynamicKind.BOX),
    "@": (StaticKind.FLOOR, DynamicKind.PLAYER),
    "+": (StaticKind.GOAL, DynamicKind.PLAYER),
}

KINDS_TO_CHAR: Dict[CellKinds, str] = {
    (StaticKind.WALL, DynamicKind.EMPTY): "#",
    (StaticKind.FLOOR, DynamicKind.EMPTY): FLOOR_CHAR,
    (StaticKind.GOAL, DynamicKind.EMPTY): ".",
    (StaticKind.FLOOR, DynamicKind.BOX): "$",
    (StaticKind.GOAL, DynamicKind.BOX): "*",
    (StaticKind.FLOOR, DynamicKind.PLAYER): "@",
    (StaticKind.GOAL, DynamicKind.PLAYER): "+",
}


def decode_char(char: str) -> CellKinds:
    """Map a level character to its (static, dynamic) kinds; unknown characters are floor."""
    return CHAR_TO_KINDS.get(char, (StaticKind.FLOOR, DynamicKind.EMPTY))


def encode_char(static: StaticKind, dynamic: DynamicKind) -> str:
    """Inverse of :func:`decode_char`."""
    # walls never carry an occupant
    return KINDS_TO_CHAR.get((StaticKind(static), DynamicKind(dynamic)), "#")


class Cell:
    """
    A view onto one position of a grid's cell layers.

    The grid owns the storage; a Cell only knows the two layers and its
    row-major index into them, so mutating a Cell mutates the grid.
    """

    __slots__ = ("_static", "_dynamic", "index")

    def __init__(self, static_layer: np.ndarray, dynamic_layer: np.ndarray, index: int):
        self._static = static_layer
        self._dynamic = dynamic_layer
        self.index = index

    @property
    def static_kind(self) -> StaticKind:
        return StaticKind(int(self._static[self.index]))

    @property
    def dynamic_kind(self) -> DynamicKind:
        return DynamicKind(int(self._dynamic[self.index]))

    def static_value(self) -> int:
        return int(self._static[self.index])

    def dynamic_value(self) -> int:
        return int(self._dynamic[self.index])

    def is_wall(self) -> bool:
        return bool(self._static[self.index] == StaticKind.WALL)

    def is_goal(self) -> bool:
        return bool(self._static[self.index] == StaticKind.GOAL)

    def is_player(self) -> bool:
        return bool(self._dynamic[self.index] == DynamicKind.PLAYER)

    def is_box(self) -> bool:
        return bool(self._dynamic[self.index] == DynamicKind.BOX)

    def is_occupied(self) -> bool:
        """Whether something stands here that a step cannot enter (occupant or wall)."""
        return bool(self._dynamic[self.index] != DynamicKind.EMPTY) or self.is_wall()

    def to_char(self) -> str:
        return encode_char(self.static_kind, self.dynamic_kind)

    def move_to(self, other: "Cell") -> None:
        """Transfer this cell's occupant to ``other`` and leave this cell empty."""
        other._dynamic[other.index] = self._dynamic[self.index]
        self._dynamic[self.index] = DynamicKind.EMPTY

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cell):
            return NotImplemented
        return self._dynamic is other._dynamic and self.index == other.index

    def __hash__(self) -> int:
        return hash((id(self._dynamic), self.index))

    def __repr__(self) -> str:
        return f"Cell(index={self.index}, char={self.to_char()!r})"
