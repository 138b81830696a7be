# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so "flip_solver" can be imported without installing
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from flip_solver.grid.board import PuzzleState  # noqa: E402
from flip_solver.grid.parser import parse_constraints  # noqa: E402

SCENARIO = "7,1,5,1,4,2,7,0,7,1,8,1,6,0,8,0,6,1,2,3"


@pytest.fixture
def scenario_state():
    return PuzzleState.new(parse_constraints(SCENARIO))


@pytest.fixture
def scenario_text():
    return SCENARIO


# Every row and column is a rotation of the same five values, so line-by-line
# deduction cannot narrow anything on the open grid.
ROTATED_BOARD = [[0, 1, 1, 2, 2][(c - r) % 5] for r in range(5) for c in range(5)]


@pytest.fixture
def rotated_board():
    return list(ROTATED_BOARD)


@pytest.fixture
def open_state():
    from flip_solver.grid.parser import constraints_from_board

    return PuzzleState.new(constraints_from_board(ROTATED_BOARD))
