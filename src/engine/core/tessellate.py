"""
どこで: `engine.core.tessellate`。
何を: Paint を描画可能なポリライン集合 `Tessellation` へ変換する（曲線の折れ線化・塗りのハッチ化）。
なぜ: キャンバスが `draw()` の時点で形を確定できるよう、スタイルと形から GPU 直前のデータを作るため。

処理の流れ:
1) 新しい `PathBuilder` を面として `drawable.paint()` を実行する。
2) 面は 2 次/3 次ベジェを折れ線化しながらサブパスを蓄積し、`fill()`/`stroke()` のたびに
   `PathCommit` を 1 件記録してパスをリセットする（線幅状態は維持）。
   1 回の draw で確定は 1 回だけ。0 回は `TessellationError`、2 回以上は `PaintCompositionError`。
3) 線のコミットはそのままポリライン、塗りのコミットは偶奇規則のスキャンラインで
   水平ハッチ線分へ変換する。ハッチ間隔と同じ太さで描けば面が埋まる。

実装メモ
- 曲線の分割数は制御多角形の長さ L と許容誤差 tol から `ceil(sqrt(L / tol))`（1..MAX_CURVE_SEGMENTS）。
- 塗りでは各サブパスを暗黙に閉じる。交点は半開区間 `[y1, y2)` で数え、頂点の二重計上を避ける。
"""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

import numpy as np

from common.types import Vec2

from .geometry import Geometry
from .paint import Paint, PaintCompositionError

if TYPE_CHECKING:
    from engine.render.types import Style

MAX_CURVE_SEGMENTS = 512


class TessellationError(RuntimeError):
    """Paint を確定できない（不正なイベント順/コミット無しなど）。"""


class CommitMode(enum.Enum):
    FILL = "fill"
    STROKE = "stroke"


@dataclass(frozen=True)
class PathCommit:
    """1 回の `fill()`/`stroke()` で確定したパス。"""

    mode: CommitMode
    geometry: Geometry
    thickness: float


@dataclass(frozen=True)
class MeshPart:
    """描画単位: ポリライン集合とその線幅。"""

    mode: CommitMode
    geometry: Geometry
    thickness: float


@dataclass(frozen=True)
class Tessellation:
    """1 回の `Canvas.draw()` に対応するテッセレーション結果。"""

    parts: tuple[MeshPart, ...]

    @property
    def n_vertices(self) -> int:
        return sum(p.geometry.n_vertices for p in self.parts)

    def __iter__(self):
        return iter(self.parts)

    def __len__(self) -> int:
        return len(self.parts)


class Tessellator(Protocol):
    def tessellate(self, style: "Style", drawable: Paint) -> Tessellation:
        """`drawable` を `style` で確定し、描画可能なメッシュを返す。"""
        ...


def _segment_count(control: np.ndarray, tolerance: float) -> int:
    length = float(np.sum(np.hypot(*np.diff(control, axis=0).T)))
    if length <= 0.0:
        return 1
    return max(1, min(MAX_CURVE_SEGMENTS, int(math.ceil(math.sqrt(length / tolerance)))))


class PathBuilder:
    """`PathSurface` の具象実装。折れ線化したサブパスとコミット列を保持する。"""

    def __init__(self, *, tolerance: float = 0.25, thickness: float = 1.0) -> None:
        if not tolerance > 0.0:
            raise ValueError(f"tolerance must be > 0, got {tolerance!r}")
        self.tolerance = float(tolerance)
        self.thickness = float(thickness)
        self.commits: list[PathCommit] = []
        self._subpaths: list[list[Vec2]] = []
        self._current: list[Vec2] | None = None
        self._start: Vec2 | None = None

    # ---- PathSurface -------------------------------------------------------
    def move_to(self, to: Vec2) -> None:
        self._finish_subpath()
        p = (float(to[0]), float(to[1]))
        self._current = [p]
        self._start = p

    def line_to(self, to: Vec2) -> None:
        self._require_current("line_to").append((float(to[0]), float(to[1])))

    def quadratic_to(self, ctrl: Vec2, to: Vec2) -> None:
        cur = self._require_current("quadratic_to")
        p0 = np.asarray(cur[-1], dtype=np.float64)
        c = np.asarray(ctrl, dtype=np.float64)
        p1 = np.asarray(to, dtype=np.float64)
        n = _segment_count(np.stack([p0, c, p1]), self.tolerance)
        t = np.linspace(0.0, 1.0, n + 1)[1:, None]
        mt = 1.0 - t
        pts = mt * mt * p0 + 2.0 * mt * t * c + t * t * p1
        pts[-1] = p1
        cur.extend((float(x), float(y)) for x, y in pts)

    def cubic_to(self, ctrl1: Vec2, ctrl2: Vec2, to: Vec2) -> None:
        cur = self._require_current("cubic_to")
        p0 = np.asarray(cur[-1], dtype=np.float64)
        c1 = np.asarray(ctrl1, dtype=np.float64)
        c2 = np.asarray(ctrl2, dtype=np.float64)
        p1 = np.asarray(to, dtype=np.float64)
        n = _segment_count(np.stack([p0, c1, c2, p1]), self.tolerance)
        t = np.linspace(0.0, 1.0, n + 1)[1:, None]
        mt = 1.0 - t
        pts = mt**3 * p0 + 3.0 * mt * mt * t * c1 + 3.0 * mt * t * t * c2 + t**3 * p1
        pts[-1] = p1
        cur.extend((float(x), float(y)) for x, y in pts)

    def close(self) -> None:
        cur = self._require_current("close")
        assert self._start is not None
        if cur[-1] != self._start:
            cur.append(self._start)
        self._finish_subpath()
        # close 後のセグメントは同じ始点から新しいサブパスを開始する
        self._current = None

    def set_stroke_thickness(self, thickness: float) -> None:
        self.thickness = float(thickness)

    def fill(self) -> None:
        self._commit(CommitMode.FILL)

    def stroke(self) -> None:
        self._commit(CommitMode.STROKE)

    # ---- internal ----------------------------------------------------------
    def _require_current(self, op: str) -> list[Vec2]:
        if self._current is None:
            if self._start is None:
                raise TessellationError(f"{op} before move_to")
            self._current = [self._start]
        return self._current

    def _finish_subpath(self) -> None:
        if self._current:
            self._subpaths.append(self._current)
        self._current = None

    def _commit(self, mode: CommitMode) -> None:
        self._finish_subpath()
        geometry = Geometry.from_lines(self._subpaths)
        self.commits.append(PathCommit(mode, geometry, self.thickness))
        self._subpaths = []
        self._start = None


def hatch_evenodd(geometry: Geometry, spacing: float) -> Geometry:
    """複数輪郭を偶奇規則でまとめて水平ハッチ線分にする。

    - 各ポリラインは閉じた輪郭として扱う（末尾→先頭の辺を補う）。
    - スキャンラインは `min_y + spacing/2` から `spacing` 間隔。
    """
    if not spacing > 0.0:
        raise ValueError(f"spacing must be > 0, got {spacing!r}")
    rings = [ring.astype(np.float64) for ring in geometry.lines() if ring.shape[0] >= 2]
    if not rings:
        return Geometry.empty()

    starts = np.concatenate(rings, axis=0)
    ends = np.concatenate([np.roll(ring, -1, axis=0) for ring in rings], axis=0)
    x1, y1 = starts[:, 0], starts[:, 1]
    x2, y2 = ends[:, 0], ends[:, 1]

    min_y = float(np.min(starts[:, 1]))
    max_y = float(np.max(starts[:, 1]))
    ys = np.arange(min_y + spacing * 0.5, max_y, spacing)
    if ys.size == 0:
        return Geometry.empty()

    y = ys[:, None]
    crossing = ((y1 <= y) & (y < y2)) | ((y2 <= y) & (y < y1))
    dy = np.where(y2 != y1, y2 - y1, 1.0)
    xs_all = x1 + (y - y1) * (x2 - x1) / dy

    segments: list[np.ndarray] = []
    for row, yv in enumerate(ys):
        xs = np.sort(xs_all[row][crossing[row]])
        for j in range(0, xs.size - 1, 2):
            xa, xb = float(xs[j]), float(xs[j + 1])
            if xb - xa <= 1e-9:
                continue
            segments.append(np.array([[xa, yv], [xb, yv]], dtype=np.float32))
    return Geometry.from_lines(segments)


class PathTessellator:
    """既定のテッセレータ: 線はポリライン、塗りは偶奇ハッチ。"""

    def __init__(self, *, tolerance: float | None = None, fill_spacing: float | None = None):
        from common.settings import get as _get_settings

        settings = _get_settings()
        self.tolerance = float(tolerance if tolerance is not None else settings.CURVE_TOLERANCE)
        self.fill_spacing = float(
            fill_spacing if fill_spacing is not None else settings.FILL_SPACING
        )
        if not self.tolerance > 0.0:
            raise ValueError(f"tolerance must be > 0, got {tolerance!r}")
        if not self.fill_spacing > 0.0:
            raise ValueError(f"fill_spacing must be > 0, got {fill_spacing!r}")

    def tessellate(self, style: "Style", drawable: Paint) -> Tessellation:
        if not isinstance(drawable, Paint):
            raise TypeError(f"drawable must be a Paint, got {type(drawable).__name__}")
        builder = PathBuilder(tolerance=self.tolerance)
        drawable.paint(builder)
        if not builder.commits:
            raise TessellationError(
                f"{drawable!r} committed nothing; wrap it in Filled(...) or Stroked(...)"
            )
        if len(builder.commits) > 1:
            # 1 回の draw は 1 回の確定（塗り or 線）だけ。内側で確定する Paint の包み直しは不可
            modes = [c.mode.value for c in builder.commits]
            raise PaintCompositionError(
                f"{drawable!r} committed {len(modes)} times ({', '.join(modes)}); "
                "a drawable must commit exactly once per draw"
            )
        spacing = style.fill_spacing if style.fill_spacing is not None else self.fill_spacing
        parts: list[MeshPart] = []
        for commit in builder.commits:
            if commit.mode is CommitMode.FILL:
                parts.append(MeshPart(commit.mode, hatch_evenodd(commit.geometry, spacing), spacing))
            else:
                parts.append(MeshPart(commit.mode, commit.geometry, commit.thickness))
        return Tessellation(tuple(parts))


__all__ = [
    "CommitMode",
    "MeshPart",
    "PathBuilder",
    "PathCommit",
    "PathTessellator",
    "Tessellation",
    "TessellationError",
    "Tessellator",
    "hatch_evenodd",
]
