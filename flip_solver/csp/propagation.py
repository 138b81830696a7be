# -*- coding: utf-8 -*-
"""
制約伝播（propagation）を行うモジュールです。

1 ステップ（simplify_state）は次の 3 つから成ります。

1. 現在の盤面を 5 本の行ラインと 5 本の列ラインに分解
2. ラインごとに解を列挙し、位置ごとのドメインに和集合でまとめる
3. 行の結果と列の結果をマスごとに共通集合で合成し、新しい盤面を作る

これを盤面が変化しなくなる（不動点）まで繰り返すのが
simplify_state_to_fixpoint です。ドメインは縮む一方なので必ず止まりますが、
念のため MAX_FIXPOINT_ITERATIONS で打ち切ります。
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..config import MAX_FIXPOINT_ITERATIONS
from ..logging_utils import get_logger
from .domains import intersect_axes, reduce_line

if TYPE_CHECKING:
    from ..grid.board import PuzzleState

logger = get_logger()


def simplify_state(state: "PuzzleState") -> "PuzzleState":
    """
    盤面を 1 ステップだけ絞り込んだ新しい PuzzleState を返します。
    制約はそのまま引き継がれ、元の state は変更しません。
    """
    row_lines = [reduce_line(line) for line in state.rows()]
    col_lines = [reduce_line(line) for line in state.cols()]
    return state.with_cells(intersect_axes(row_lines, col_lines))


def simplify_state_to_fixpoint(
    state: "PuzzleState",
    max_iterations: int = MAX_FIXPOINT_ITERATIONS,
) -> "PuzzleState":
    """
    simplify_state を、盤面が変わらなくなるまで繰り返します。

    Parameters
    ----------
    state : PuzzleState
        開始時の盤面。
    max_iterations : int
        反復回数の上限。

    Returns
    -------
    PuzzleState
        不動点に達した盤面（上限に達した場合はその時点の盤面）。
    """
    current = state
    for i in range(1, max_iterations + 1):
        nxt = simplify_state(current)
        if nxt == current:
            logger.debug("fixpoint reached after %d iteration(s)", i)
            return nxt
        current = nxt

    logger.warning("fixpoint not reached within %d iterations", max_iterations)
    return current
