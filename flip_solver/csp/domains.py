# -*- coding: utf-8 -*-
"""
列挙したラインの解から、マスごとのドメインを作り直すモジュールです。

- 1 本のラインについては、全ての解の和集合をとる
  （i 番目のマスのドメイン = どこかの解で i 番目に現れる値の集合）
- 盤面全体については、行から求めたドメインと列から求めたドメインの
  共通集合をとる

行と列のどちらか一方で除外された値は、盤面全体でも除外されます。
"""

from __future__ import annotations

from typing import Iterable, List, Sequence

from ..config import GRID_SIZE
from ..logging_utils import get_logger
from ..types import CellDomain, Line, LineSolution
from .search import enumerate_line_solutions

logger = get_logger()


def combine_solutions(
    solutions: Iterable[LineSolution],
    length: int = GRID_SIZE,
) -> List[CellDomain]:
    """
    ラインの解の集まりを、位置ごとのドメインにまとめます。

    Parameters
    ----------
    solutions : iterable of tuple[int, ...]
        :func:`enumerate_line_solutions` の結果。
    length : int
        ラインの長さ。

    Returns
    -------
    list[CellDomain]
        空のドメインから始めて、解の値を位置ごとに union したもの。
        解が 1 つも無ければ、全ての位置が空ドメインになります。
    """
    res = [CellDomain.empty() for _ in range(length)]
    for sol in solutions:
        res = [dom.union(CellDomain.singleton(v)) for dom, v in zip(res, sol)]
    return res


def reduce_line(line: Line) -> Line:
    """
    ラインの制約だけから導ける、最大限に絞り込んだラインを返します。
    制約はそのまま引き継ぎます。
    """
    sols = enumerate_line_solutions(line)
    if not sols:
        logger.debug("line %s has no solutions", line.constraint)
    return line.with_cells(combine_solutions(sols, len(line)))


def intersect_axes(
    row_lines: Sequence[Line],
    col_lines: Sequence[Line],
) -> List[CellDomain]:
    """
    行ごと・列ごとに絞り込んだドメインを、マスごとに共通集合で合成します。

    Returns
    -------
    list[CellDomain]
        行優先（row-major）に並べた 25 マス分のドメイン。
    """
    cells: List[CellDomain] = []
    for row in range(len(row_lines)):
        for col in range(len(col_lines)):
            row_tile = row_lines[row].cells[col]
            col_tile = col_lines[col].cells[row]
            cells.append(row_tile.intersect(col_tile))
    return cells
