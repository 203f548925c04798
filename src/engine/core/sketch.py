"""
どこで: `engine.core.sketch`。
何を: ユーザのアルゴリズムが満たす契約 `Sketch` と、既定値へ戻す再シード `DefaultSeed`。
なぜ: ループが draw/step/seed の 3 操作だけでスケッチを駆動できるようにするため。

状態モデル:
- スケッチの値はフレームごとのスナップショット。`step()` は現在値を受けて「置き換える値」を返し、
  `None` を返すと実行が終わる。ループは 1 つのスロットを丸ごと上書きするだけで、値の中身は書き換えない。
- 不変の `@dataclass(frozen=True)` で書くのが基本形。

再シード:
- `seed(ctx)` は抽象メソッド。無引数で既定値を作れるスケッチは `DefaultSeed` を先頭に継承すれば、
  コンテキストを無視して `type(self)()` を返す既定実装が得られる。
- どちらも無いスケッチはインスタンス化時に `TypeError`（明示実装を強制する）。

例:
    @dataclass(frozen=True)
    class Square(DefaultSeed, Sketch):
        def draw(self, ctx):
            canvas = Canvas()
            canvas.draw(Style(), Filled(Path.rect(10, 10, 100, 100)))
            return canvas
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Sequence, TypeVar

if TYPE_CHECKING:
    from engine.runtime.context import SketchContext
    from engine.runtime.events import Event

    from .canvas import Canvas

S = TypeVar("S", bound="Sketch")


class Sketch(ABC):
    """フレームごとの視覚アルゴリズム。"""

    @abstractmethod
    def draw(self, ctx: "SketchContext") -> "Canvas":
        """現在の状態を描いた新しいキャンバスを返す。"""

    def step(self: S, ctx: "SketchContext", events: Sequence["Event"]) -> S | None:
        """次フレームの状態を返す。既定は同じ値のまま続行（自分からは終了しない）。"""
        return self

    @abstractmethod
    def seed(self: S, ctx: "SketchContext") -> S:
        """再シード後のコンテキストから初期状態を作り直す。"""


class DefaultSeed:
    """`seed()` の既定実装: コンテキストを無視して既定値 `type(self)()` に戻す。

    `Sketch` より前に継承すること（`class A(DefaultSeed, Sketch)`）。
    """

    def seed(self: S, ctx: "SketchContext") -> S:
        return type(self)()


__all__ = ["Sketch", "DefaultSeed"]
