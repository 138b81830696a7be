# -*- coding: utf-8 -*-
"""
flip_solver で使う主なデータ構造（型）をまとめたモジュールです。

dataclass(frozen=True) を使うことで、
「この構造体はどんなフィールドを持っているのか」を分かりやすくしつつ、
一度作った値を書き換えられないようにしています。
盤面を更新するときは、常に新しい値を作って置き換えます。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Iterable, Iterator, Sequence, Tuple

from .config import VALUES

# グリッド上の座標を表す型 (row, col)
CellCoord = Tuple[int, int]

# ライン（行または列）に具体的な値を割り当てた 1 通りの解
LineSolution = Tuple[int, ...]


@dataclass(frozen=True)
class CellDomain:
    """
    1 マスがまだ取り得る値の集合（ドメイン）を表すクラスです。

    状態は次の 3 通りです。
    - 空集合 : 矛盾（正しい盤面からは到達しないはず）
    - 1 要素 : そのマスの値が確定している
    - 2〜4 要素 : まだ曖昧

    Attributes
    ----------
    candidates : frozenset of int
        {0, 1, 2, 3} の部分集合。
    """

    candidates: FrozenSet[int] = frozenset(VALUES)

    @classmethod
    def full(cls) -> "CellDomain":
        """全ての値を候補に持つドメインを返します。"""
        return cls(frozenset(VALUES))

    @classmethod
    def empty(cls) -> "CellDomain":
        return cls(frozenset())

    @classmethod
    def singleton(cls, value: int) -> "CellDomain":
        return cls(frozenset((value,)))

    @classmethod
    def of(cls, values: Iterable[int]) -> "CellDomain":
        return cls(frozenset(values))

    @property
    def values(self) -> Tuple[int, ...]:
        """候補を昇順のタプルで返します。"""
        return tuple(sorted(self.candidates))

    @property
    def value(self) -> int:
        """
        確定しているマスの値を返します。

        確定していない（候補が 1 つでない）場合は ValueError を送出します。
        """
        if not self.is_determined():
            raise ValueError(f"domain is not determined: {self.values}")
        return next(iter(self.candidates))

    def contains(self, value: int) -> bool:
        return value in self.candidates

    def is_determined(self) -> bool:
        return len(self.candidates) == 1

    def is_empty(self) -> bool:
        return not self.candidates

    def restrict_to(self, value: int) -> "CellDomain":
        """
        value が候補に含まれていれば {value} だけのドメインを返します。
        含まれていなければ、何も変えずに自分自身を返します（エラーにはしない）。
        """
        if self.contains(value):
            return CellDomain.singleton(value)
        return self

    def intersect(self, other: "CellDomain") -> "CellDomain":
        return CellDomain(self.candidates & other.candidates)

    def union(self, other: "CellDomain") -> "CellDomain":
        return CellDomain(self.candidates | other.candidates)

    def issubset(self, other: "CellDomain") -> bool:
        return self.candidates <= other.candidates

    def __contains__(self, value: object) -> bool:
        return value in self.candidates

    def __iter__(self) -> Iterator[int]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.candidates)

    def __repr__(self) -> str:
        return f"CellDomain({set(self.values) or '{}'})"


@dataclass(frozen=True)
class LineConstraint:
    """
    1 本のライン（行または列）が満たすべき制約です。

    Attributes
    ----------
    sum : int
        5 マスの値の合計。
    zeros : int
        値が 0 のマスの個数。
    """

    sum: int
    zeros: int

    @classmethod
    def from_values(cls, values: Sequence[int]) -> "LineConstraint":
        """具体的な値の並びから制約を作ります。"""
        values = [int(v) for v in values]
        return cls(sum=sum(values), zeros=values.count(0))

    def is_satisfied_by(self, values: Sequence[int]) -> bool:
        """values の合計と 0 の個数がこの制約と一致するかを返します。"""
        return LineConstraint.from_values(values) == self


@dataclass(frozen=True)
class Line:
    """
    盤面の 1 行（または 1 列）のドメインと、それに掛かる制約の組です。

    PuzzleState から必要なときに作られ、使い終わったら捨てられます。
    """

    cells: Tuple[CellDomain, ...]
    constraint: LineConstraint

    def __len__(self) -> int:
        return len(self.cells)

    def with_cells(self, cells: Sequence[CellDomain]) -> "Line":
        return Line(tuple(cells), self.constraint)
