"""共通フィクスチャ。

- 乱数シード固定
- 小さなパス/スケッチ試料
- 記録用の PathSurface
- 環境変数の隔離（`SEEDSKETCH_*`）
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

import numpy as np
import pytest

from common import settings
from engine.core.canvas import Canvas
from engine.core.paint import Filled
from engine.core.path import Path
from engine.core.sketch import DefaultSeed, Sketch
from engine.render.types import Style


@pytest.fixture(scope="session", autouse=True)
def np_seed() -> None:
    """NumPy の乱数を固定。"""
    np.random.seed(12345)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """外部の `SEEDSKETCH_*` がテストに漏れないようにし、終了後に設定を読み直す。"""
    import os

    for name in list(os.environ):
        if name.startswith(settings.ENV_PREFIX):
            monkeypatch.delenv(name, raising=False)
    settings.reload_from_env()
    yield
    monkeypatch.undo()
    settings.reload_from_env()


class RecordingSurface:
    """PathSurface の呼び出しを `(名前, 引数...)` で記録する。"""

    def __init__(self) -> None:
        self.calls: list[tuple] = []

    def move_to(self, to) -> None:
        self.calls.append(("move_to", tuple(to)))

    def line_to(self, to) -> None:
        self.calls.append(("line_to", tuple(to)))

    def quadratic_to(self, ctrl, to) -> None:
        self.calls.append(("quadratic_to", tuple(ctrl), tuple(to)))

    def cubic_to(self, ctrl1, ctrl2, to) -> None:
        self.calls.append(("cubic_to", tuple(ctrl1), tuple(ctrl2), tuple(to)))

    def close(self) -> None:
        self.calls.append(("close",))

    def set_stroke_thickness(self, thickness: float) -> None:
        self.calls.append(("set_stroke_thickness", thickness))

    def fill(self) -> None:
        self.calls.append(("fill",))

    def stroke(self) -> None:
        self.calls.append(("stroke",))

    @property
    def names(self) -> list[str]:
        return [c[0] for c in self.calls]


@pytest.fixture()
def surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture()
def square_path() -> Path:
    return Path.rect(0.0, 0.0, 10.0, 10.0)


@dataclass(frozen=True)
class SquareSketch(DefaultSeed, Sketch):
    """固定の正方形を 1 つ塗るだけのスケッチ。"""

    def draw(self, ctx):
        canvas = Canvas()
        canvas.draw(Style(color=(0.0, 0.0, 0.0, 1.0)), Filled(Path.rect(4.0, 4.0, 8.0, 8.0)))
        return canvas


@pytest.fixture()
def square_sketch() -> SquareSketch:
    return SquareSketch()
