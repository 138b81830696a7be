import json

import numpy as np

from flip_solver.eval.confidence import ODDS_COLUMNS, rank_guesses
from flip_solver.postprocess.render_result import (
    build_result,
    render_choices,
    render_grid,
    render_state,
)
from flip_solver.types import CellDomain


def test_render_grid_open_board(scenario_state):
    lines = render_grid(scenario_state.grid()).splitlines()
    assert len(lines) == 16
    assert lines[0] == "-" * 16
    assert lines[1] == "|01|01|01|01|01|"
    assert lines[2] == "|23|23|23|23|23|"
    assert lines[-1] == "-" * 16


def test_render_grid_blanks_missing_values(scenario_state):
    cells = list(scenario_state.cells)
    cells[0] = CellDomain.singleton(1)
    cells[1] = CellDomain.of({0, 3})
    lines = render_grid(scenario_state.with_cells(cells).grid()).splitlines()
    assert lines[1] == "| 1|0 |01|01|01|"
    assert lines[2] == "|  | 3|23|23|23|"


def test_render_state_shows_constraints(scenario_state):
    lines = render_state(scenario_state).splitlines()
    assert lines[0] == "-" * 18
    assert lines[1] == "|01|01|01|01|01| 7"
    assert lines[2] == "|23|23|23|23|23| 1"
    assert lines[7] == "|01|01|01|01|01| 4"
    assert lines[8] == "|23|23|23|23|23| 2"
    assert lines[-2] == "| 8| 6| 8| 6| 2|"
    assert lines[-1] == "| 1| 0| 0| 1| 3|"


def test_render_choices_limits_rows(scenario_state):
    table = rank_guesses(scenario_state.simplify_to_fixpoint())
    text = render_choices(table, limit=3)
    assert len(text.splitlines()) == min(3, len(table))
    assert "p0=" in text


def test_build_result_is_json_friendly(scenario_state):
    state = scenario_state.simplify_to_fixpoint()
    odds = state.approximate_odds()
    odds[0, 0] = np.nan
    result = build_result(state, odds)
    assert result["shape"] == (5, 5)
    assert len(result["board"]) == 5
    assert all(len(row) == 5 for row in result["board"])
    assert result["constraints"][0] == {"sum": 7, "zeros": 1}
    assert result["complete"] == state.is_complete()
    assert result["odds"][0][0] == [None, None, None, None]
    json.dumps(result)


def test_build_result_without_odds(scenario_state):
    result = build_result(scenario_state)
    assert "odds" not in result
    assert result["board"][0][0] == [0, 1, 2, 3]


def test_render_choices_lists_every_odds_column(open_state):
    text = render_choices(rank_guesses(open_state), limit=1)
    for col in ODDS_COLUMNS:
        assert f"{col}=" in text
    assert text.startswith("(")
