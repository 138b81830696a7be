# -*- coding: utf-8 -*-
"""
盤面の状態をもとに表示用の情報を構築するモジュールです。

テキスト表示では、1 マスを 2 行で表します。
上の行に 0 と 1、下の行に 2 と 3 を、候補に残っていれば表示し、
残っていなければ空白にします。

    ------------------
    |01|01|01|01|01| 7
    |23|23|23|23|23| 1
    ...
    | 8| 6| 8| 6| 2|
    | 1| 0| 0| 1| 3|
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, TYPE_CHECKING

import numpy as np
import pandas as pd

from ..config import GRID_SIZE
from ..eval.confidence import ODDS_COLUMNS
from ..types import CellDomain

if TYPE_CHECKING:
    from ..grid.board import PuzzleState


def _cell_lines(domain: CellDomain) -> tuple[str, str]:
    top = ("0" if domain.contains(0) else " ") + ("1" if domain.contains(1) else " ")
    bottom = ("2" if domain.contains(2) else " ") + ("3" if domain.contains(3) else " ")
    return top, bottom


def _row_lines(row: List[CellDomain]) -> tuple[str, str]:
    line1 = ""
    line2 = ""
    for elem in row:
        top, bottom = _cell_lines(elem)
        line1 += "|" + top
        line2 += "|" + bottom
    return line1, line2


def render_grid(grid: List[List[CellDomain]]) -> str:
    """
    ドメインの 5×5 グリッドだけをテキストで表示します（制約なし）。
    """
    bar = "-" * (3 * GRID_SIZE + 1)
    lines: List[str] = []
    for row in grid:
        lines.append(bar)
        line1, line2 = _row_lines(row)
        lines.append(line1 + "|")
        lines.append(line2 + "|")
    lines.append(bar)
    return "\n".join(lines)


def render_state(state: "PuzzleState") -> str:
    """
    盤面と制約をまとめてテキストで表示します。

    各行の右側に その行の合計 / 0 の個数、
    盤面の下に 各列の合計 / 0 の個数 を表示します。
    """
    bar = "-" * (3 * GRID_SIZE + 3)
    lines: List[str] = []
    for i, row in enumerate(state.grid()):
        lines.append(bar)
        line1, line2 = _row_lines(row)
        cons = state.row_constraints[i]
        lines.append(f"{line1}|{cons.sum:2d}")
        lines.append(f"{line2}|{cons.zeros:2d}")
    lines.append(bar)

    line1 = "".join(f"|{c.sum:2d}" for c in state.col_constraints)
    line2 = "".join(f"|{c.zeros:2d}" for c in state.col_constraints)
    lines.append(line1 + "|")
    lines.append(line2 + "|")
    return "\n".join(lines)


def render_choices(table: pd.DataFrame, limit: Optional[int] = None) -> str:
    """
    rank_guesses の結果を 1 マス 1 行のテキストにします。
    """
    if limit is not None:
        table = table.head(limit)
    lines = []
    for rec in table.to_dict(orient="records"):
        probs = " ".join(
            f"{k}={rec[k]:.3f}" for k in ODDS_COLUMNS
        )
        lines.append(f"({int(rec['row'])}, {int(rec['col'])}) {probs}")
    return "\n".join(lines)


def build_result(
    state: "PuzzleState",
    odds: Optional[np.ndarray] = None,
) -> Dict[str, Any]:
    """
    盤面の状態を JSON にしやすい辞書にまとめます。

    Returns
    -------
    dict
        - board       : 各マスの候補値リストの 5×5 リスト
        - constraints : {"sum", "zeros"} の 10 個のリスト（行→列）
        - complete    : is_complete() の結果
        - determined  : is_determined() の結果
        - safe_cells  : 安全なマスの座標リスト
        - odds        : odds が与えられた場合のみ、5×5×4 のリスト
    """
    board = [[list(d.values) for d in row] for row in state.grid()]
    result: Dict[str, Any] = {
        "board": board,
        "constraints": [{"sum": c.sum, "zeros": c.zeros} for c in state.constraints],
        "complete": state.is_complete(),
        "determined": state.is_determined(),
        "safe_cells": [list(rc) for rc in state.safe_cells()],
        "shape": (GRID_SIZE, GRID_SIZE),
    }
    if odds is not None:
        # NaN は JSON で扱えないので None にする
        result["odds"] = [
            [[None if np.isnan(p) else float(p) for p in cell] for cell in row]
            for row in np.asarray(odds).tolist()
        ]
    return result
