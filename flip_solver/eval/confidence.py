# flip_solver/eval/confidence.py
# -*- coding: utf-8 -*-
"""
各マスについて、値 0〜3 が入る確率を近似的に見積もるモジュールです。

計算方法
--------
1. 行ごと・列ごとに、現在のドメインと制約でラインの解を列挙する
2. 位置ごとに「その値が現れた解の割合」を数え、長さ 4 の頻度ベクトルを作る
3. マスごとに、行の頻度ベクトルと列の頻度ベクトルを要素ごとに掛け合わせ、
   合計が 1 になるよう正規化する

3 は「行と列の結果が独立である」と仮定した近似です。
実際には行と列は独立ではないため、真の同時確率ではありません。
正確な値が欲しければ盤面全体を同時に列挙する必要がありますが、
ここではそこまでは行いません。

解が 1 つも無いラインの頻度は定義できないため NaN で表します。
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
import pandas as pd

from ..config import GRID_SIZE, RISK_VALUE, VALUES
from ..csp.search import enumerate_line_solutions
from ..logging_utils import get_logger
from ..types import Line

if TYPE_CHECKING:
    from ..grid.board import PuzzleState

logger = get_logger()

ODDS_COLUMNS = [f"p{v}" for v in VALUES]


def line_value_frequencies(line: Line) -> np.ndarray:
    """
    ラインの位置ごとの値の出現頻度を返します。

    Returns
    -------
    numpy.ndarray
        shape = (ラインの長さ, 4)。各行の合計は 1。
        解が 1 つも無ければ全要素が NaN。
    """
    counts = np.zeros((len(line), len(VALUES)), dtype=float)
    sols = enumerate_line_solutions(line)
    for sol in sols:
        for pos, val in enumerate(sol):
            counts[pos, val] += 1.0

    if not sols:
        logger.debug("no solutions for %s; odds undefined", line.constraint)
        return np.full_like(counts, np.nan)

    return counts / len(sols)


def combine_frequencies(row_freq: np.ndarray, col_freq: np.ndarray) -> np.ndarray:
    """
    行と列の頻度ベクトルを独立とみなして合成します。

    要素ごとの積をとり、合計が 1 になるよう正規化します。
    積の合計が 0（行と列で両立する値が無い）または入力に NaN がある場合は
    NaN のベクトルを返します。
    """
    prod = np.asarray(row_freq, dtype=float) * np.asarray(col_freq, dtype=float)
    total = prod.sum()
    if not np.isfinite(total) or total <= 0.0:
        return np.full(len(VALUES), np.nan)
    return prod / total


def approximate_odds(state: "PuzzleState") -> np.ndarray:
    """
    盤面の全マスについて、値ごとの確率（近似）を計算します。

    Parameters
    ----------
    state : PuzzleState
        現在の盤面。

    Returns
    -------
    numpy.ndarray
        shape = (5, 5, 4)。odds[row, col, v] がマス (row, col) の値が v である確率。
    """
    row_stats = [line_value_frequencies(line) for line in state.rows()]
    col_stats = [line_value_frequencies(line) for line in state.cols()]

    odds = np.empty((GRID_SIZE, GRID_SIZE, len(VALUES)), dtype=float)
    for i in range(GRID_SIZE):
        for j in range(GRID_SIZE):
            odds[i, j] = combine_frequencies(row_stats[i][j], col_stats[j][i])
    return odds


def odds_table(state: "PuzzleState") -> pd.DataFrame:
    """
    全マスの確率を 1 マス 1 行の DataFrame にまとめます。

    列: row, col, determined, p0, p1, p2, p3
    """
    odds = approximate_odds(state)
    records = []
    for i in range(GRID_SIZE):
        for j in range(GRID_SIZE):
            rec = {"row": i, "col": j, "determined": state.cell(i, j).is_determined()}
            rec.update(zip(ODDS_COLUMNS, odds[i, j].tolist()))
            records.append(rec)
    return pd.DataFrame.from_records(
        records, columns=["row", "col", "determined", *ODDS_COLUMNS]
    )


def rank_guesses(state: "PuzzleState") -> pd.DataFrame:
    """
    未確定マスを「外れ（0）を引く確率」の低い順に並べた DataFrame を返します。

    確率が定義できないマス（NaN）は末尾に回します。
    """
    table = odds_table(state)
    table = table[~table["determined"]].drop(columns=["determined"])
    risk_col = f"p{RISK_VALUE}"
    table = table.sort_values(
        by=[risk_col, "row", "col"], na_position="last", kind="mergesort"
    )
    return table.reset_index(drop=True)
