# flip_solver/__init__.py
# -*- coding: utf-8 -*-
"""
flip_solver パッケージの入口となるモジュールです。

    from flip_solver import solve

と呼び出されることを想定しています。

ここでは、10 本の制約（または 20 個の整数の文字列）を受け取り、
1. 制約のパース
2. 全マス未確定の盤面の作成
3. 不動点までの絞り込み
4. マスごとの確率（近似）の計算
5. 表示用の結果構築
を順番に呼び出します。
"""

from __future__ import annotations

from typing import Any, Dict, Sequence, Union

import pandas as pd

from .logging_utils import get_logger
from .types import CellDomain, Line, LineConstraint
from .csp.search import enumerate_line_solutions
from .csp.domains import combine_solutions, intersect_axes, reduce_line
from .grid.board import PuzzleState, is_resolved_domain
from .grid.parser import (
    ConstraintParseError,
    MoveParseError,
    constraints_from_board,
    parse_constraints,
)
from .grid.generator import random_board, random_puzzle
from .eval.confidence import approximate_odds, rank_guesses
from .postprocess.render_result import build_result, render_state

logger = get_logger()

__all__ = [
    "CellDomain",
    "Line",
    "LineConstraint",
    "PuzzleState",
    "ConstraintParseError",
    "MoveParseError",
    "approximate_odds",
    "build_result",
    "combine_solutions",
    "constraints_from_board",
    "enumerate_line_solutions",
    "intersect_axes",
    "is_resolved_domain",
    "parse_constraints",
    "random_board",
    "random_puzzle",
    "rank_guesses",
    "reduce_line",
    "render_state",
    "solve",
]


def solve(
    constraints: Union[str, Sequence[int], Sequence[LineConstraint]],
) -> Dict[str, Any]:
    """
    パズルを解くメイン関数です。

    Parameters
    ----------
    constraints : str or sequence
        "7,1,5,1,..." のような 20 個の整数の文字列、整数の並び、
        または 10 個の LineConstraint。

    Returns
    -------
    dict
        :func:`build_result` の結果に、外れの確率が低い順の候補
        （"choices"）を加えたもの。

    Raises
    ------
    ConstraintParseError
        文字列や整数の並びが不正な場合。
    """
    logger.info("=== solve() START ===")

    if (
        not isinstance(constraints, str)
        and len(constraints) > 0
        and all(isinstance(c, LineConstraint) for c in constraints)
    ):
        line_constraints = list(constraints)  # type: ignore[arg-type]
    else:
        line_constraints = parse_constraints(constraints)  # type: ignore[arg-type]

    state = PuzzleState.new(line_constraints).simplify_to_fixpoint()
    logger.info(
        "Simplified: %d/%d cells determined, complete=%s",
        sum(d.is_determined() for d in state.cells),
        len(state.cells),
        state.is_complete(),
    )

    odds = approximate_odds(state)
    result = build_result(state, odds)
    choices = rank_guesses(state)
    # NaN は JSON で扱えないので None にする
    choices = choices.astype(object).where(pd.notna(choices), None)
    result["choices"] = choices.to_dict(orient="records")

    logger.info("=== solve() END ===")
    return result
