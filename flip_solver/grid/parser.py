# -*- coding: utf-8 -*-
"""
入力文字列を内部表現に変換するモジュールです。

主な役割:
- "7,1,5,1,..." のような 20 個の整数の並びを 10 個の LineConstraint に変換
- "row, col, val" 形式の 1 手を (row, col, val) に変換
- 具体的な 25 マスの値から制約を作る

ここは外部との境界なので、不正な入力には例外で応えます。
"""

from __future__ import annotations

from typing import List, Sequence, Tuple, Union

from ..config import CONSTRAINT_COUNT, GRID_SIZE, MAX_LINE_SUM, QUIT_WORDS
from ..types import LineConstraint


class ConstraintParseError(ValueError):
    """制約の文字列が不正なときに送出される例外です。"""


class MoveParseError(ValueError):
    """1 手の入力が不正なときに送出される例外です。"""


def parse_int_list(text: str) -> List[int]:
    """
    カンマ区切りの文字列を整数のリストに変換します。

    数値でないトークンがあれば ConstraintParseError を送出します。
    """
    res: List[int] = []
    for token in str(text).strip().split(","):
        token = token.strip()
        try:
            res.append(int(token))
        except ValueError:
            raise ConstraintParseError(f"not an integer: {token!r}") from None
    return res


def constraints_from_list(values: Sequence[int]) -> List[LineConstraint]:
    """
    20 個の整数を 10 個の LineConstraint にまとめます。

    並び順は 行1の合計, 行1の0の個数, 行2の合計, ..., 列5の合計, 列5の0の個数 です。

    Raises
    ------
    ConstraintParseError
        個数が 20 でない、または値が範囲外の場合。
    """
    if len(values) != CONSTRAINT_COUNT:
        raise ConstraintParseError(
            f"expected {CONSTRAINT_COUNT} numbers, got {len(values)}"
        )

    res: List[LineConstraint] = []
    for i in range(CONSTRAINT_COUNT // 2):
        s, z = int(values[2 * i]), int(values[2 * i + 1])
        if not 0 <= s <= MAX_LINE_SUM:
            raise ConstraintParseError(f"line {i + 1}: sum {s} out of range")
        if not 0 <= z <= GRID_SIZE:
            raise ConstraintParseError(f"line {i + 1}: zeros {z} out of range")
        res.append(LineConstraint(sum=s, zeros=z))
    return res


def parse_constraints(text: Union[str, Sequence[int]]) -> List[LineConstraint]:
    """
    文字列（または整数の並び）から 10 個の制約を作ります。

    例: "7,1,5,1,4,2,7,0,7,1,8,1,6,0,8,0,6,1,2,3"
    """
    if isinstance(text, str):
        values = parse_int_list(text)
    else:
        values = [int(v) for v in text]
    return constraints_from_list(values)


def constraints_from_board(board: Sequence[int]) -> List[LineConstraint]:
    """
    行優先に並んだ 25 マスの値から、行 5 本・列 5 本の制約を作ります。
    """
    if len(board) != GRID_SIZE * GRID_SIZE:
        raise ValueError(f"expected {GRID_SIZE * GRID_SIZE} values, got {len(board)}")

    rows = [board[i * GRID_SIZE:(i + 1) * GRID_SIZE] for i in range(GRID_SIZE)]
    cols = [[board[i + GRID_SIZE * r] for r in range(GRID_SIZE)] for i in range(GRID_SIZE)]
    return [LineConstraint.from_values(line) for line in rows + cols]


def parse_move(text: str) -> Tuple[int, int, int]:
    """
    "row, col, val" 形式の文字列を (row, col, val) に変換します。

    ちょうど 3 つの整数でなければ MoveParseError を送出します。
    座標や値の範囲はここでは確認しません（盤面側で無視されます）。
    """
    parts = str(text).strip().split(",")
    if len(parts) != 3:
        raise MoveParseError(f"expected 'row, col, val', got {text!r}")
    try:
        row, col, val = (int(p.strip()) for p in parts)
    except ValueError:
        raise MoveParseError(f"expected three integers, got {text!r}") from None
    return row, col, val


def is_quit(text: str) -> bool:
    """終了を意味する入力（q / quit）なら True を返します。"""
    return str(text).strip() in QUIT_WORDS
