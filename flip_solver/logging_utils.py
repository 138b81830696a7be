# -*- coding: utf-8 -*-
"""
ログ出力の設定を行うモジュールです。

初学者向けポイント:
- ロガーは "flip_solver" の 1 つだけで、各モジュールは import 時に get_logger() で受け取ります。
- 不動点ループの反復回数や解の無いラインは DEBUG、solve() の開始・終了や
  対話モードの 1 手は INFO で出力します。
- 表示するレベルは環境変数 FLIP_SOLVER_LOG_LEVEL（例: DEBUG）で切り替えられます。
"""

from __future__ import annotations

import logging

from .config import LOG_LEVEL

# flip_solver パッケージ共通で使うロガー名
LOGGER_NAME = "flip_solver"


def get_logger() -> logging.Logger:
    """
    flip_solver 全体で共通して使う logger を返します。

    すでに handler（出力先）が設定されていない場合は、
    標準エラー出力に LOG_LEVEL 以上のログを表示するように設定します。
    """
    logger = logging.getLogger(LOGGER_NAME)

    # まだハンドラが設定されていなければ、簡単な設定を行う
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(_resolve_level(LOG_LEVEL))

    return logger


def _resolve_level(name: str) -> int:
    # 不明なレベル名は INFO 扱い
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else logging.INFO
