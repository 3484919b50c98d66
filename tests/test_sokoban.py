import io

import pytest

from sokoban_engine import MalformedLevelError, Move, Sokoban
from sokoban_engine.models import DynamicKind, StaticKind

LEVEL_FILE = """\
; Level 1
; a comment line
#######
#.@ $ #
#######
"""


def test_load_from_stream():
    game = Sokoban()
    game.load(io.StringIO(LEVEL_FILE))

    assert game.get_width() == 7
    assert game.get_height() == 3
    assert game.player_position == (2, 1)
    assert str(game) == "#######\n#.@ $ #\n#######"


def test_save_to_stream():
    game = Sokoban.from_string("#####|#@$.#|#####")
    game.move_player(1, 0)

    out = io.StringIO()
    game.save(out)

    assert out.getvalue() == "#####\n# @*#\n#####"
    assert game.is_solved()


def test_constructor_accepts_lines():
    game = Sokoban(["####", "#@ #", "####"])
    assert game.to_string("|") == "####|#@ #|####"


def test_cell_value_queries():
    game = Sokoban.from_string("#####|#@$.#|#####")
    assert game.get_static_cell_value(0, 0) == StaticKind.WALL
    assert game.get_static_cell_value(3, 1) == StaticKind.GOAL
    assert game.get_dynamic_cell_value(1, 1) == DynamicKind.PLAYER
    assert game.get_dynamic_cell_value(2, 1) == DynamicKind.BOX
    assert game.get_cell(2, 1).is_box()
    assert game.get_cell(9, 9) is None


@pytest.mark.parametrize("x, y", [(-1, 0), (5, 1), (0, 3)])
def test_cell_value_queries_out_of_bounds(x, y):
    game = Sokoban.from_string("#####|#@$.#|#####")
    with pytest.raises(IndexError):
        game.get_static_cell_value(x, y)
    with pytest.raises(IndexError):
        game.get_dynamic_cell_value(x, y)


def test_count_cells():
    game = Sokoban.from_string("#####|#@$.#|#####")
    assert game.count_cells(StaticKind.GOAL, None) == 1
    assert game.count_cells(None, DynamicKind.BOX) == 1
    assert game.count_cells(StaticKind.GOAL, DynamicKind.BOX) == 0
    assert game.count_cells() == 15


def test_move_undo_redo():
    game = Sokoban.from_string("#######|#@$  #|#######")
    assert game.move_player(1, 0) == Move(1, 0, True)
    assert game.move_player(0, 1) is None
    assert game.can_undo()

    game.undo()
    assert game.player_position == (1, 1)
    assert game.can_redo()

    game.redo()
    assert game.player_position == (2, 1)
    assert not game.can_redo()


def test_load_replaces_level_and_history():
    game = Sokoban.from_string("#@  #")
    game.move_player(1, 0)

    game.load(io.StringIO("#####\n#  @#\n#####\n"))

    assert not game.can_undo()
    assert game.player_position == (3, 1)


def test_load_without_player_raises():
    game = Sokoban()
    with pytest.raises(MalformedLevelError):
        game.load(io.StringIO("; nothing\n####\n"))


def test_unloaded_game_raises():
    game = Sokoban()
    with pytest.raises(RuntimeError):
        game.move_player(1, 0)
    with pytest.raises(RuntimeError):
        game.get_width()


def test_constructor_rejects_single_string():
    with pytest.raises(TypeError):
        Sokoban("#@ #")
