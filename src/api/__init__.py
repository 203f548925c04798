"""
どこで: `api` 入口（高レベル公開 API）。
何を: `Sketch` 契約・`Canvas`/`Path`/`Filled`/`Stroked`/`Style`・イベント型・`run_sketch` を再輸出。
なぜ: 利用者が単一名前空間からスケッチ定義 → 実行まで完結できるようにするため。

Usage:
    from api import Canvas, DefaultSeed, Path, Sketch, Stroked, Style, run

    class Ring(DefaultSeed, Sketch):
        def draw(self, ctx):
            canvas = Canvas()
            ring = Path.circle((256, 256), 80 + 40 * ctx.rng.random())
            canvas.draw(Style(color="#000000"), Stroked(ring, 2.0))
            return canvas

    run(Ring(), capture_root="captures")
"""

# コアクラス
from engine.core.canvas import Canvas
from engine.core.geometry import Geometry
from engine.core.paint import Filled, Paint, PaintCompositionError, Stroked
from engine.core.path import Close, CubicTo, LineTo, MoveTo, Path, QuadraticTo
from engine.core.sketch import DefaultSeed, Sketch
from engine.core.tessellate import TessellationError
from engine.render.types import Style
from engine.runtime.context import SketchConfig, SketchContext
from engine.runtime.events import Event, KeyEvent, MouseEvent, TextEvent
from engine.runtime.headless import HeadlessBackend

# 主要API
from .sketch import run_sketch as run
from .sketch import run_sketch as run_sketch

__all__ = [
    # 実行
    "run_sketch",  # 実行（詳細指定）
    "run",  # 実行（エイリアス、簡易）
    # スケッチ契約
    "Sketch",
    "DefaultSeed",
    "SketchConfig",
    "SketchContext",
    # 描画
    "Canvas",
    "Style",
    "Paint",
    "Path",
    "MoveTo",
    "LineTo",
    "QuadraticTo",
    "CubicTo",
    "Close",
    "Filled",
    "Stroked",
    "Geometry",
    # 入力
    "Event",
    "TextEvent",
    "KeyEvent",
    "MouseEvent",
    # バックエンド
    "HeadlessBackend",
    # 例外
    "PaintCompositionError",
    "TessellationError",
]

# バージョン情報
__version__ = "2026.10"
