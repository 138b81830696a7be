# -*- coding: utf-8 -*-
"""
1 本のライン（5 マス）に対して、制約を満たす値の割り当てを
すべて列挙するモジュールです。

ざっくり流れ
------------
1. ラインの一番右のマスに注目する
2. そのマスが確定していれば、その値を制約から差し引いて残りのマスで再帰
   - 値が残りの合計より大きい、または 0 なのに 0 の残り個数が 0 なら枝刈り
3. 確定していなければ、候補の値ごとに「そのマスを {v} に固定した」ラインで再帰
4. マスが 1 つだけ残ったら、残りの (合計, 0 の個数) から直接判定する

ラインの長さは 5、値は 4 種類なので、最悪でも 4^5 = 1024 通りしか調べません。
"""

from __future__ import annotations

from typing import List, Sequence

from ..types import CellDomain, Line, LineConstraint, LineSolution


def enumerate_line_solutions(line: Line) -> List[LineSolution]:
    """
    ラインのドメインと制約に矛盾しない、すべての値の並びを返します。

    Parameters
    ----------
    line : Line
        5 マス分のドメインと、そのラインの制約。

    Returns
    -------
    list of tuple[int, ...]
        各要素は 1 通りの解。i 番目の値は i 番目のマスのドメインに含まれ、
        合計と 0 の個数は制約と一致します。
    """
    return _solutions(list(line.cells), line.constraint)


def _solutions(
    cells: Sequence[CellDomain],
    constraint: LineConstraint,
) -> List[LineSolution]:
    if len(cells) == 0:
        return []

    if len(cells) == 1:
        return _single_cell_solutions(cells[0], constraint)

    *rest, last = cells

    if last.is_determined():
        v = last.value
        if v > constraint.sum:
            return []
        if v == 0 and constraint.zeros == 0:
            return []
        reduced = LineConstraint(
            sum=constraint.sum - v,
            zeros=constraint.zeros - (1 if v == 0 else 0),
        )
        return [sol + (v,) for sol in _solutions(rest, reduced)]

    # 未確定のマスは、候補ごとに一時的に {v} に固定して調べる
    res: List[LineSolution] = []
    for v in last.values:
        res.extend(_solutions(rest + [CellDomain.singleton(v)], constraint))
    return res


def _single_cell_solutions(
    cell: CellDomain,
    constraint: LineConstraint,
) -> List[LineSolution]:
    """
    残り 1 マスのときの判定です。

    - (0, 0)          : 解なし（合計 0 で 0 を含まない値は無い）
    - (S, 0)          : S が候補にあれば (S,)
    - (0, 1)          : 0 が候補にあれば (0,)
    - それ以外        : 解なし
    """
    s, z = constraint.sum, constraint.zeros
    if (s, z) == (0, 0):
        return []
    if z == 0:
        return [(s,)] if cell.contains(s) else []
    if (s, z) == (0, 1):
        return [(0,)] if cell.contains(0) else []
    return []
