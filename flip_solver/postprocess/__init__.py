# -*- coding: utf-8 -*-
"""
flip_solver.postprocess パッケージ

- render_result.py : 盤面のテキスト表示と、結果の辞書化
"""
