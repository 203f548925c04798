"""
どこで: `engine.core.path`。
何を: パスイベント（MoveTo/LineTo/QuadraticTo/CubicTo/Close）と、それを Paint として扱う `Path` アダプタ。
なぜ: 「再生可能なイベント列」を明示的な 1 つの型に閉じ込め、任意のイテラブルを暗黙に Paint 扱いしないため。

`Path` の再生規則:
- `paint()` のたびにイベント列を先頭から再生し、1 イベントにつき面の呼び出し 1 回。
- 重複除去やまとめ描きはしない。
- 使い捨てイテレータ（ジェネレータ等）は 2 回目の再生で空になるため受け付けない。
  遅延生成したい場合は「新しいイテラブルを返す無引数関数」を渡す。
"""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Callable, Iterable, Sequence, Union

import numpy as np

from common.types import Vec2

from .paint import Paint, PathSurface

# 円弧を 3 次ベジェ 4 本で近似する際の制御点係数
_KAPPA = 0.5522847498307936


def _pt(p: Sequence[float]) -> Vec2:
    x, y = p
    return (float(x), float(y))


@dataclass(frozen=True)
class MoveTo:
    to: Vec2

    def apply(self, surface: PathSurface) -> None:
        surface.move_to(self.to)


@dataclass(frozen=True)
class LineTo:
    to: Vec2

    def apply(self, surface: PathSurface) -> None:
        surface.line_to(self.to)


@dataclass(frozen=True)
class QuadraticTo:
    ctrl: Vec2
    to: Vec2

    def apply(self, surface: PathSurface) -> None:
        surface.quadratic_to(self.ctrl, self.to)


@dataclass(frozen=True)
class CubicTo:
    ctrl1: Vec2
    ctrl2: Vec2
    to: Vec2

    def apply(self, surface: PathSurface) -> None:
        surface.cubic_to(self.ctrl1, self.ctrl2, self.to)


@dataclass(frozen=True)
class Close:
    def apply(self, surface: PathSurface) -> None:
        surface.close()


PathEvent = Union[MoveTo, LineTo, QuadraticTo, CubicTo, Close]
_EVENT_TYPES = (MoveTo, LineTo, QuadraticTo, CubicTo, Close)

EventSource = Union[Sequence[PathEvent], Callable[[], Iterable[PathEvent]]]


class Path(Paint):
    """再生可能なパスイベント列を Paint として扱うアダプタ。"""

    __slots__ = ("_events", "_factory")

    def __init__(self, events: EventSource) -> None:
        self._events: tuple[PathEvent, ...] | None = None
        self._factory: Callable[[], Iterable[PathEvent]] | None = None
        if isinstance(events, Iterator):
            raise TypeError(
                "Path needs a restartable source: pass a sequence of events or a "
                "zero-argument callable returning a fresh iterable, not an iterator"
            )
        if callable(events):
            self._factory = events
        else:
            self._events = tuple(events)
            for ev in self._events:
                _check_event(ev)

    def events(self) -> Iterator[PathEvent]:
        """イベント列を先頭から返す（呼ぶたびに新しいイテレータ）。"""
        if self._events is not None:
            return iter(self._events)
        assert self._factory is not None
        return iter(self._factory())

    def paint(self, surface: PathSurface) -> None:
        for ev in self.events():
            _check_event(ev).apply(surface)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        if self._events is not None and other._events is not None:
            return self._events == other._events
        return self is other

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self._events is not None:
            return f"Path({len(self._events)} events)"
        return f"Path(factory={self._factory!r})"

    # ---- 生成ヘルパ -------------------------------------------------------
    @classmethod
    def polygon(cls, points: Iterable[Sequence[float]], *, closed: bool = True) -> "Path":
        """点列を直線で結ぶ。`closed=True` で末尾に `Close` を付ける。"""
        pts = [_pt(p) for p in points]
        if not pts:
            raise ValueError("polygon needs at least one point")
        evs: list[PathEvent] = [MoveTo(pts[0])]
        evs.extend(LineTo(p) for p in pts[1:])
        if closed:
            evs.append(Close())
        return cls(evs)

    @classmethod
    def rect(cls, x: float, y: float, width: float, height: float) -> "Path":
        """左上 `(x, y)` と幅/高さで矩形を作る。"""
        x0, y0 = float(x), float(y)
        x1, y1 = x0 + float(width), y0 + float(height)
        return cls.polygon([(x0, y0), (x1, y0), (x1, y1), (x0, y1)])

    @classmethod
    def regular_polygon(
        cls, center: Sequence[float], radius: float, n_sides: int, *, phase: float = 0.0
    ) -> "Path":
        """半径 `radius` の円に内接する正多角形。`phase` は頂点開始角（度数法）。"""
        sides = int(n_sides)
        if sides < 3:
            raise ValueError(f"n_sides must be >= 3, got {n_sides}")
        cx, cy = _pt(center)
        t = np.linspace(0.0, 2.0 * np.pi, sides, endpoint=False) + np.deg2rad(float(phase))
        xs = cx + np.cos(t) * float(radius)
        ys = cy + np.sin(t) * float(radius)
        return cls.polygon(zip(xs.tolist(), ys.tolist()))

    @classmethod
    def circle(cls, center: Sequence[float], radius: float) -> "Path":
        """3 次ベジェ 4 本で近似した円。"""
        cx, cy = _pt(center)
        r = float(radius)
        if not math.isfinite(r) or r <= 0.0:
            raise ValueError(f"radius must be a finite positive number, got {radius!r}")
        k = r * _KAPPA
        return cls(
            [
                MoveTo((cx + r, cy)),
                CubicTo((cx + r, cy + k), (cx + k, cy + r), (cx, cy + r)),
                CubicTo((cx - k, cy + r), (cx - r, cy + k), (cx - r, cy)),
                CubicTo((cx - r, cy - k), (cx - k, cy - r), (cx, cy - r)),
                CubicTo((cx + k, cy - r), (cx + r, cy - k), (cx + r, cy)),
                Close(),
            ]
        )


def _check_event(ev: object) -> PathEvent:
    if not isinstance(ev, _EVENT_TYPES):
        raise TypeError(f"not a path event: {ev!r}")
    return ev


__all__ = [
    "MoveTo",
    "LineTo",
    "QuadraticTo",
    "CubicTo",
    "Close",
    "PathEvent",
    "Path",
]
