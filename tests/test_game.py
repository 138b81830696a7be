from flip_solver.game import describe, main, play
from flip_solver.grid.board import PuzzleState
from flip_solver.grid.parser import constraints_from_board
from flip_solver.types import CellDomain


def scripted(*replies):
    it = iter(replies)

    def input_fn(prompt):
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    return input_fn


def test_open_state_is_not_narrowed(open_state):
    assert open_state.simplify_to_fixpoint() == open_state
    assert not open_state.is_complete()


def test_play_quits(open_state):
    out = []
    board = play(open_state, scripted("q"), out.append)
    assert out[-1] == "Exiting"
    assert any(line.startswith("Board:") for line in out)
    assert board == open_state


def test_play_reprompts_on_invalid_input(open_state):
    out = []
    play(open_state, scripted("nonsense", "quit"), out.append)
    assert any("Invalid input" in line for line in out)
    assert out[-1] == "Exiting"


def test_play_applies_moves(open_state, rotated_board):
    out = []
    board = play(open_state, scripted(f"2, 3, {rotated_board[13]}", "q"), out.append)
    assert board.cell(2, 3) == CellDomain.singleton(rotated_board[13])
    for idx, value in enumerate(rotated_board):
        assert board.cells[idx].contains(value)


def test_play_ignores_out_of_range_moves(open_state):
    out = []
    board = play(open_state, scripted("7, 7, 1", "q"), out.append)
    assert board == open_state


def test_play_stops_on_eof(open_state):
    out = []
    play(open_state, scripted(), out.append)
    assert out[-1] == "Exiting"


def test_play_reports_completed_board():
    state = PuzzleState.new(constraints_from_board([1] * 25))
    out = []
    board = play(state, scripted(), out.append)
    assert board.is_complete()
    assert out[-1].startswith("Completed board:")


def test_describe_lists_choices_when_nothing_is_safe(open_state):
    text = describe(open_state)
    assert text.startswith("Board:")
    assert "choices:" in text
    assert "Safe plays" not in text


def test_describe_lists_safe_plays(open_state):
    cells = list(open_state.cells)
    cells[6] = CellDomain.of({1, 2})
    text = describe(open_state.with_cells(cells))
    assert "Safe plays: [(1, 1)]" in text


def test_main_rejects_bad_constraints(capsys):
    assert main(["1,2,3"]) == 2
    assert "20 numbers" in capsys.readouterr().out


def test_main_requires_constraints(capsys):
    assert main([]) == 2
    assert "Pass in a single string" in capsys.readouterr().out


def test_main_once(capsys, scenario_text):
    assert main(["--once", scenario_text]) == 0
    assert "Board:" in capsys.readouterr().out


def test_main_random_once(capsys):
    assert main(["--random", "--seed", "3", "--once"]) == 0
    assert "Board:" in capsys.readouterr().out
