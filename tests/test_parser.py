import pytest

from flip_solver.grid.parser import (
    ConstraintParseError,
    MoveParseError,
    constraints_from_board,
    is_quit,
    parse_constraints,
    parse_int_list,
    parse_move,
)
from flip_solver.types import LineConstraint


def test_parse_constraints_row_then_column_order(scenario_text):
    cons = parse_constraints(scenario_text)
    assert len(cons) == 10
    assert cons[0] == LineConstraint(7, 1)
    assert cons[4] == LineConstraint(7, 1)
    assert cons[5] == LineConstraint(8, 1)
    assert cons[9] == LineConstraint(2, 3)


def test_parse_constraints_accepts_whitespace_and_sequences(scenario_text):
    spaced = " " + scenario_text.replace(",", " , ") + "\n"
    assert parse_constraints(spaced) == parse_constraints(scenario_text)
    ints = [int(x) for x in scenario_text.split(",")]
    assert parse_constraints(ints) == parse_constraints(scenario_text)


@pytest.mark.parametrize(
    "text",
    [
        "1,2,3",
        "7,1,5,1,4,2,7,0,7,1,8,1,6,0,8,0,6,1,2",
        "7,1,5,1,4,2,7,0,7,1,8,1,6,0,8,0,6,1,2,3,4",
        "7,1,5,1,4,2,7,0,7,1,8,1,6,0,8,0,6,1,2,x",
        "",
        "16,0,5,1,4,2,7,0,7,1,8,1,6,0,8,0,6,1,2,3",
        "7,6,5,1,4,2,7,0,7,1,8,1,6,0,8,0,6,1,2,3",
        "-1,1,5,1,4,2,7,0,7,1,8,1,6,0,8,0,6,1,2,3",
    ],
)
def test_parse_constraints_rejects_bad_input(text):
    with pytest.raises(ConstraintParseError):
        parse_constraints(text)


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        parse_int_list("1,two,3")


def test_constraints_from_board():
    board = [
        0, 1, 2, 3, 1,
        1, 1, 2, 1, 0,
        2, 1, 1, 0, 0,
        3, 1, 1, 1, 1,
        2, 2, 2, 1, 0,
    ]
    cons = constraints_from_board(board)
    assert cons[0] == LineConstraint(7, 1)
    assert cons[2] == LineConstraint(4, 2)
    assert cons[3] == LineConstraint(7, 0)
    assert cons[5] == LineConstraint(8, 1)
    assert cons[9] == LineConstraint(2, 3)


def test_constraints_from_board_requires_25_values():
    with pytest.raises(ValueError):
        constraints_from_board([0] * 24)


def test_parse_move():
    assert parse_move("1, 2, 3") == (1, 2, 3)
    assert parse_move(" 0,4,0\n") == (0, 4, 0)


@pytest.mark.parametrize("text", ["1,2", "1,2,3,4", "a,b,c", "", "1;2;3"])
def test_parse_move_rejects_bad_input(text):
    with pytest.raises(MoveParseError):
        parse_move(text)


@pytest.mark.parametrize("text,expected", [("q", True), (" quit\n", True), ("Q", False), ("1,2,3", False)])
def test_is_quit(text, expected):
    assert is_quit(text) is expected
