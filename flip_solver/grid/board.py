# -*- coding: utf-8 -*-
"""
5×5 の盤面と 10 本の制約をまとめた PuzzleState を定義するモジュールです。

PuzzleState は不変（immutable）な値として扱います。
simplify / set_value などの操作は、元の盤面を書き換えずに
新しい PuzzleState を返します。

マスは行優先（row-major）で 25 個並べて保持します。
制約は「行 0〜4 → 列 0〜4」の順に 10 個並べます。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

import numpy as np

from ..config import GRID_SIZE, HAZARD_VALUES, LINE_COUNT, RISK_VALUE, VALUES
from ..csp.propagation import simplify_state, simplify_state_to_fixpoint
from ..eval.confidence import approximate_odds
from ..types import CellCoord, CellDomain, Line, LineConstraint


def is_resolved_domain(domain: CellDomain) -> bool:
    """
    1 マスが「解決済み」とみなせるかを判定するポリシー関数です。

    - 値が確定していれば解決済み
    - 未確定でも、危険値（2 と 3）を候補に含まなければ解決済み

    0 と 1 のどちらかしか残っていないマスは、どちらを選んでも
    このパズルの勝敗には関わらないため、曖昧なままで構いません。
    """
    if domain.is_determined():
        return True
    return not any(domain.contains(v) for v in HAZARD_VALUES)


def is_safe_domain(domain: CellDomain) -> bool:
    """未確定で、かつ外れ（0）を含まないマスなら True を返します。"""
    return not domain.is_determined() and not domain.contains(RISK_VALUE)


@dataclass(frozen=True)
class PuzzleState:
    """
    盤面全体の状態です。

    Attributes
    ----------
    cells : tuple of CellDomain
        行優先で並べた 25 マス分のドメイン。
    constraints : tuple of LineConstraint
        行 0〜4、列 0〜4 の順に並べた 10 個の制約。
    """

    cells: Tuple[CellDomain, ...]
    constraints: Tuple[LineConstraint, ...]

    @classmethod
    def new(cls, constraints: Sequence[LineConstraint]) -> "PuzzleState":
        """
        全マスが {0,1,2,3} の盤面を作ります。

        制約の数が 10 でなければ ValueError を送出します。
        """
        constraints = tuple(constraints)
        if len(constraints) != LINE_COUNT:
            raise ValueError(
                f"expected {LINE_COUNT} line constraints, got {len(constraints)}"
            )
        cells = tuple(CellDomain.full() for _ in range(GRID_SIZE * GRID_SIZE))
        return cls(cells=cells, constraints=constraints)

    # ---- 参照系 -----------------------------------------------------------

    @property
    def row_constraints(self) -> Tuple[LineConstraint, ...]:
        return self.constraints[:GRID_SIZE]

    @property
    def col_constraints(self) -> Tuple[LineConstraint, ...]:
        return self.constraints[GRID_SIZE:]

    def cell(self, row: int, col: int) -> CellDomain:
        return self.cells[GRID_SIZE * row + col]

    def grid(self) -> List[List[CellDomain]]:
        """5×5 の二次元リストとしてドメインを返します（表示用）。"""
        return [
            list(self.cells[GRID_SIZE * r:GRID_SIZE * (r + 1)])
            for r in range(GRID_SIZE)
        ]

    def row(self, row: int) -> Line:
        cells = self.cells[GRID_SIZE * row:GRID_SIZE * (row + 1)]
        return Line(tuple(cells), self.constraints[row])

    def col(self, col: int) -> Line:
        cells = tuple(self.cells[col + GRID_SIZE * i] for i in range(GRID_SIZE))
        return Line(cells, self.constraints[GRID_SIZE + col])

    def rows(self) -> List[Line]:
        return [self.row(i) for i in range(GRID_SIZE)]

    def cols(self) -> List[Line]:
        return [self.col(i) for i in range(GRID_SIZE)]

    def lines(self) -> Tuple[List[Line], List[Line]]:
        """(行ラインのリスト, 列ラインのリスト) を返します。"""
        return self.rows(), self.cols()

    def domain_sizes(self) -> np.ndarray:
        """各マスの候補数を 5×5 の配列で返します。"""
        sizes = np.array([len(d) for d in self.cells], dtype=int)
        return sizes.reshape(GRID_SIZE, GRID_SIZE)

    # ---- 判定系 -----------------------------------------------------------

    def is_complete(self) -> bool:
        """全マスが is_resolved_domain を満たせば True を返します。"""
        return all(is_resolved_domain(d) for d in self.cells)

    def is_determined(self) -> bool:
        """全マスの値が確定していれば True を返します。"""
        return all(d.is_determined() for d in self.cells)

    def has_contradiction(self) -> bool:
        """空ドメインのマスが 1 つでもあれば True を返します。"""
        return any(d.is_empty() for d in self.cells)

    def safe_cells(self) -> List[CellCoord]:
        """
        未確定だが 0 を含まないマスの座標を、行優先の順で返します。
        どの値を選んでも外れを引かないマスです。
        """
        return [
            (row, col)
            for row in range(GRID_SIZE)
            for col in range(GRID_SIZE)
            if is_safe_domain(self.cell(row, col))
        ]

    # ---- 更新系（いずれも新しい PuzzleState を返す） -----------------------

    def with_cells(self, cells: Sequence[CellDomain]) -> "PuzzleState":
        return PuzzleState(cells=tuple(cells), constraints=self.constraints)

    def set_value(self, row: int, col: int, value: int) -> "PuzzleState":
        """
        (row, col) のマスを value に固定した盤面を返します。

        - 座標が範囲外なら、何も変えずに自分自身を返します
        - value が候補に無ければ、そのマスは変わりません
        """
        if not (0 <= row < GRID_SIZE and 0 <= col < GRID_SIZE):
            return self
        if value not in VALUES:
            return self
        idx = GRID_SIZE * row + col
        cells = list(self.cells)
        cells[idx] = cells[idx].restrict_to(value)
        return self.with_cells(cells)

    def simplify(self) -> "PuzzleState":
        return simplify_state(self)

    def simplify_to_fixpoint(self) -> "PuzzleState":
        return simplify_state_to_fixpoint(self)

    def approximate_odds(self) -> np.ndarray:
        """
        各マスの値ごとの確率（近似）を shape = (5, 5, 4) の配列で返します。
        詳細は :func:`flip_solver.eval.confidence.approximate_odds` を参照。
        """
        return approximate_odds(self)
