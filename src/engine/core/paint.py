"""
どこで: `engine.core.paint`。
何を: 描画可能物 `Paint` の契約と、塗り `Filled`／線 `Stroked` の装飾子を定義。
なぜ: スケッチがフレームごとの描画キューへ積む「形 + 確定方法」を小さな閉じた型集合で表すため。

合成規則:
- `Filled(D)` は D を描いた後に `fill()` を 1 回だけ発行する。
- `Stroked(D, t)` は D を描き、線幅を t に設定した直後に `stroke()` を 1 回だけ発行する。
- 合成は 1 段のみ。装飾子の中に装飾子を入れることはできない（`PaintCompositionError`）。
  内側で自ら fill/stroke する Paint を包んだ場合も、テッセレーション時に同じ例外になる。
  同じ形を塗りと線の両方で描く場合は、キャンバスへ 2 回 `draw` する。
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Protocol

from common.types import Vec2


class PaintCompositionError(TypeError):
    """サポートしない Paint の入れ子（装飾子の中の装飾子など）。"""


class PathSurface(Protocol):
    """Paint が描き込むパス構築面。テッセレータ側が実装する。"""

    def move_to(self, to: Vec2) -> None: ...

    def line_to(self, to: Vec2) -> None: ...

    def quadratic_to(self, ctrl: Vec2, to: Vec2) -> None: ...

    def cubic_to(self, ctrl1: Vec2, ctrl2: Vec2, to: Vec2) -> None: ...

    def close(self) -> None: ...

    def set_stroke_thickness(self, thickness: float) -> None: ...

    def fill(self) -> None: ...

    def stroke(self) -> None: ...


class Paint(ABC):
    """キャンバス上に表現できる型。"""

    @abstractmethod
    def paint(self, surface: PathSurface) -> None:
        """自身を `surface` へ描き込む。"""


class _Decorator(Paint):
    """1 つの内側 Paint を包み、確定方法（塗り/線）を付与する装飾子の基底。"""

    __slots__ = ("element",)

    def __init__(self, element: Paint) -> None:
        if isinstance(element, _Decorator):
            raise PaintCompositionError(
                f"{type(self).__name__} cannot wrap {type(element).__name__}: "
                "draw the geometry twice instead of nesting fill/stroke"
            )
        if not isinstance(element, Paint):
            raise TypeError(
                f"{type(self).__name__} element must be a Paint, got {type(element).__name__}"
            )
        self.element = element


class Filled(_Decorator):
    """パスを塗りで確定する。"""

    __slots__ = ()

    def paint(self, surface: PathSurface) -> None:
        self.element.paint(surface)
        surface.fill()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Filled):
            return NotImplemented
        return self.element == other.element

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Filled({self.element!r})"


class Stroked(_Decorator):
    """パスを線で確定する。`thickness` はキャンバス座標系の線幅。"""

    __slots__ = ("thickness",)

    def __init__(self, element: Paint, thickness: float) -> None:
        super().__init__(element)
        t = float(thickness)
        if not math.isfinite(t) or t <= 0.0:
            raise ValueError(f"thickness must be a finite positive number, got {thickness!r}")
        self.thickness = t

    def paint(self, surface: PathSurface) -> None:
        self.element.paint(surface)
        surface.set_stroke_thickness(self.thickness)
        surface.stroke()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Stroked):
            return NotImplemented
        return self.thickness == other.thickness and self.element == other.element

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Stroked({self.element!r}, thickness={self.thickness})"


__all__ = ["Paint", "PathSurface", "Filled", "Stroked", "PaintCompositionError"]
