# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""Sokoban rules engine - level grid, push rules and undo/redo history."""

from .cell import Cell, decode_char, encode_char
from .engine import MoveHistory, do_move, undo_move
from .environment import SokobanEnvironment
from .grid import Grid, split_level_lines
from .models import (
    BLOCKED,
    Blocked,
    DynamicKind,
    EpisodeState,
    MalformedLevelError,
    Move,
    Moved,
    MoveResult,
    SokobanAction,
    SokobanObservation,
    StaticKind,
)
from .sokoban import Sokoban

__all__ = [
    "BLOCKED",
    "Blocked",
    "Cell",
    "DynamicKind",
    "EpisodeState",
    "Grid",
    "MalformedLevelError",
    "Move",
    "MoveHistory",
    "MoveResult",
    "Moved",
    "Sokoban",
    "SokobanAction",
    "SokobanEnvironment",
    "SokobanObservation",
    "StaticKind",
    "decode_char",
    "do_move",
    "encode_char",
    "split_level_lines",
    "undo_move",
]
