import pytest

from sokoban_engine.cell import KINDS_TO_CHAR, decode_char, encode_char
from sokoban_engine.grid import Grid
from sokoban_engine.models import DynamicKind, StaticKind


@pytest.mark.parametrize(
    "char, static, dynamic",
    [
        ("#", StaticKind.WALL, DynamicKind.EMPTY),
        (" ", StaticKind.FLOOR, DynamicKind.EMPTY),
        ("-", StaticKind.FLOOR, DynamicKind.EMPTY),
        ("_", StaticKind.FLOOR, DynamicKind.EMPTY),
        (".", StaticKind.GOAL, DynamicKind.EMPTY),
        ("$", StaticKind.FLOOR, DynamicKind.BOX),
        ("*", StaticKind.GOAL, DynamicKind.BOX),
        ("@", StaticKind.FLOOR, DynamicKind.PLAYER),
        ("+", StaticKind.GOAL, DynamicKind.PLAYER),
    ],
)
def test_decode_char(char, static, dynamic):
    assert decode_char(char) == (static, dynamic)


@pytest.mark.parametrize("char", ["x", "?", "7", "\t"])
def test_unknown_char_decodes_to_empty_floor(char):
    assert decode_char(char) == (StaticKind.FLOOR, DynamicKind.EMPTY)


def test_encode_is_inverse_of_decode():
    for (static, dynamic), char in KINDS_TO_CHAR.items():
        assert decode_char(char) == (static, dynamic)
        assert encode_char(static, dynamic) == char


def test_floor_aliases_encode_as_space():
    assert encode_char(*decode_char("-")) == " "
    assert encode_char(*decode_char("_")) == " "


def test_cell_queries():
    grid = Grid.from_string("#@$*.")
    wall, player, box, box_on_goal, goal = (grid.get_cell(x, 0) for x in range(5))
    player_on_goal = Grid.from_string("+").get_cell(0, 0)

    assert wall.is_wall() and wall.is_occupied() and not wall.is_box()
    assert player.is_player() and player.is_occupied()
    assert box.is_box() and box.is_occupied() and not box.is_goal()
    assert box_on_goal.is_box() and box_on_goal.is_goal()
    assert goal.is_goal() and not goal.is_occupied()
    assert player_on_goal.is_player() and player_on_goal.static_kind is StaticKind.GOAL

    assert box_on_goal.static_value() == StaticKind.GOAL
    assert box_on_goal.dynamic_value() == DynamicKind.BOX
    assert [grid.get_cell(x, 0).to_char() for x in range(5)] == list("#@$*.")
    assert player_on_goal.to_char() == "+"


def test_move_to_transfers_occupant_only():
    grid = Grid.from_string("@$.")
    box = grid.get_cell(1, 0)
    goal = grid.get_cell(2, 0)

    box.move_to(goal)

    assert goal.to_char() == "*"
    assert box.to_char() == " "
    assert box.static_kind is StaticKind.FLOOR
    assert goal.static_kind is StaticKind.GOAL


def test_cells_with_same_position_are_equal():
    grid = Grid.from_string("@ ")
    assert grid.get_cell(1, 0) == grid.get_cell(1, 0)
    assert grid.get_cell(0, 0) != grid.get_cell(1, 0)
