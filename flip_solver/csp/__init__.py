# -*- coding: utf-8 -*-
"""
flip_solver.csp パッケージ

ラインの制約充足と盤面全体の絞り込みに関する処理をまとめています。

主に以下の役割を持つモジュールから構成されています。
- search.py      : 1 本のラインの解をバックトラックで全列挙
- domains.py     : 解の和集合によるドメイン再構成と、行・列の共通集合
- propagation.py : 盤面全体の絞り込みと不動点ループ
"""
