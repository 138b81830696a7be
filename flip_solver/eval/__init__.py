# -*- coding: utf-8 -*-
"""
flip_solver.eval パッケージ

- confidence.py : マスごとの値の確率（近似）の見積もり
"""
