# -*- coding: utf-8 -*-
"""
コマンドラインから遊ぶための対話ループです。

使い方::

    python -m flip_solver "7,1,5,1,4,2,7,0,7,1,8,1,6,0,8,0,6,1,2,3"
    python -m flip_solver --random --seed 42
    python -m flip_solver --once "7,1,5,1,..."

1 手ごとに "row, col, val" を入力すると、そのマスを固定して盤面を絞り込み直します。
q / quit で終了します。
"""

from __future__ import annotations

import argparse
from typing import Callable, List, Optional

from .config import MAX_DISPLAYED_CHOICES, PROMPT
from .eval.confidence import rank_guesses
from .grid.board import PuzzleState
from .grid.generator import random_puzzle
from .grid.parser import (
    ConstraintParseError,
    MoveParseError,
    is_quit,
    parse_constraints,
    parse_move,
)
from .logging_utils import get_logger
from .postprocess.render_result import render_choices, render_state

logger = get_logger()

USAGE_HINT = (
    "Invalid constraints string, should be a comma separated list of 20 numbers. "
    "row1 sum, row1 zeros, row2 sum, row2 zeros,...,col5 sum, col5 zeros"
)


def describe(state: PuzzleState) -> str:
    """
    盤面と、次に開けるマスの提案をテキストにまとめます。

    安全なマスがあればそれを、無ければ外れの確率が低い順の候補を表示します。
    """
    lines = [f"Board:\n{render_state(state)}"]
    safe = state.safe_cells()
    if safe:
        lines.append(f"Safe plays: {safe}")
    else:
        choices = render_choices(rank_guesses(state), limit=MAX_DISPLAYED_CHOICES)
        lines.append(f"choices:\n{choices}")
    return "\n".join(lines)


def play(
    state: PuzzleState,
    input_fn: Callable[[str], str] = input,
    output: Callable[[str], None] = print,
) -> PuzzleState:
    """
    盤面が完成するか、ユーザーが終了するまで手を受け付けます。

    Parameters
    ----------
    state : PuzzleState
        開始時の盤面。
    input_fn : callable
        プロンプトを受け取り 1 行を返す関数（テスト用に差し替え可能）。
    output : callable
        1 つの文字列を表示する関数。

    Returns
    -------
    PuzzleState
        ループ終了時の盤面。
    """
    board = state.simplify_to_fixpoint()
    while True:
        output("\n\n")
        if board.is_complete():
            output(f"Completed board:\n{render_state(board)}")
            break
        output(describe(board))

        try:
            reply = input_fn(PROMPT)
        except EOFError:
            output("Exiting")
            break

        if is_quit(reply):
            output("Exiting")
            break

        try:
            row, col, val = parse_move(reply)
        except MoveParseError:
            output(f"Invalid input {reply!r}")
            continue

        logger.info("move: row=%d col=%d val=%d", row, col, val)
        board = board.set_value(row, col, val).simplify_to_fixpoint()

    return board


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="flip-solver",
        description="Deduce cell values of a 5x5 sum / zero-count puzzle.",
    )
    parser.add_argument(
        "constraints",
        nargs="?",
        help="20 comma separated numbers: row1 sum, row1 zeros, ..., col5 sum, col5 zeros",
    )
    parser.add_argument(
        "--random", action="store_true", help="play a randomly generated board"
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for --random")
    parser.add_argument(
        "--once",
        action="store_true",
        help="print the simplified board and suggestions, then exit",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    if args.random:
        state = random_puzzle(args.seed)
    elif args.constraints is None:
        print("Pass in a single string for the game to play")
        return 2
    else:
        try:
            state = PuzzleState.new(parse_constraints(args.constraints))
        except ConstraintParseError as e:
            logger.debug("constraint parse failed: %s", e)
            print(USAGE_HINT)
            return 2

    if args.once:
        print(describe(state.simplify_to_fixpoint()))
        return 0

    play(state)
    return 0
