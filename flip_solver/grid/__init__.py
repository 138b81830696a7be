# -*- coding: utf-8 -*-
"""
flip_solver.grid パッケージ

盤面（グリッド）に関する処理をまとめたサブパッケージです。
- board.py     : 盤面の状態 PuzzleState
- parser.py    : 入力文字列から制約・手への変換
- generator.py : ランダムな盤面の生成
"""
