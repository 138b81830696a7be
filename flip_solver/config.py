# -*- coding: utf-8 -*-
"""
flip_solver 全体で共通して使う設定値をまとめたモジュールです。

ここを編集することで
- 盤面のサイズと値の種類
- 「完成」とみなす判定に使う危険値
- 不動点ループの反復上限
- 対話モードのプロンプト文字列
などを簡単に変更できます。
"""

from __future__ import annotations

import os
from typing import Tuple

# ==== 盤面関連 =============================================================

# 1辺のマス数（行・列ともに 5）
GRID_SIZE: int = 5

# 1マスが取り得る値
VALUES: Tuple[int, ...] = (0, 1, 2, 3)

# 制約の総数（行 5 本 + 列 5 本）
LINE_COUNT: int = 2 * GRID_SIZE

# 入力文字列に含まれる整数の個数（各ラインにつき 合計 と 0 の個数）
CONSTRAINT_COUNT: int = 2 * LINE_COUNT

# ライン合計の上限（3 × 5 マス）
MAX_LINE_SUM: int = max(VALUES) * GRID_SIZE

# ==== 判定ポリシー ==========================================================

# 曖昧なまま残してはいけない値（これが候補に残っているマスは未完成）
HAZARD_VALUES: Tuple[int, ...] = (2, 3)

# 「外れ」を表す値。この値を含まない未確定マスは安全に開けられる
RISK_VALUE: int = 0

# ==== 不動点ループ ==========================================================

# simplify を繰り返す回数の上限。
# ドメインは単調に縮むだけなので 値の数 × マス数 回で必ず止まる。
MAX_FIXPOINT_ITERATIONS: int = len(VALUES) * GRID_SIZE * GRID_SIZE

# ==== 対話モード ============================================================

# 1手を入力させるときのプロンプト
PROMPT: str = "Set value [row, col, val]: "

# 終了とみなす入力
QUIT_WORDS: Tuple[str, ...] = ("q", "quit")

# 安全なマスが無いとき、候補として表示する最大件数
MAX_DISPLAYED_CHOICES: int = 10

# ==== ログ関連 ==============================================================

# 既定のログレベル。環境変数 FLIP_SOLVER_LOG_LEVEL で上書きできます。
LOG_LEVEL: str = os.environ.get("FLIP_SOLVER_LOG_LEVEL", "INFO")
