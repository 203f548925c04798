"""
内部ヘルパ群（API 非公開）。

どこで: `api.sketch_runner`
何を: `api.sketch` の補助（構成値の解決）を分離し、`run_sketch` 本体を薄く保つ。
"""

from __future__ import annotations

__all__: list[str] = []
