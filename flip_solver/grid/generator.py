# -*- coding: utf-8 -*-
"""
ランダムな盤面を作るモジュールです。

答えが分かっている盤面から制約を作るので、
本物のゲームと同じように「正解のある」パズルを遊べます。
seed を与えると同じ盤面が再現されます。
"""

from __future__ import annotations

import random
from typing import List, Optional

from ..config import GRID_SIZE, VALUES
from .board import PuzzleState
from .parser import constraints_from_board


def random_board(seed: Optional[int] = None) -> List[int]:
    """{0,1,2,3} から一様に選んだ 25 マスの値（行優先）を返します。"""
    rng = random.Random(seed)
    return [rng.choice(VALUES) for _ in range(GRID_SIZE * GRID_SIZE)]


def random_puzzle(seed: Optional[int] = None) -> PuzzleState:
    """ランダムな盤面から制約を作り、全マス未確定の PuzzleState を返します。"""
    return PuzzleState.new(constraints_from_board(random_board(seed)))
