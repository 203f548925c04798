"""
平面ポリライン集合 `Geometry`（テッセレーション結果の格納型）

テッセレータが出力し、キャンバスのキューを経て Renderer/保存処理まで運ばれる唯一の幾何表現。

データモデル（不変条件）:
- `coords: float32 ndarray (N, 2)`: 全頂点を 1 本の連続メモリで保持（行は XY）。
- `offsets: int32 ndarray (M+1,)`: 各ポリラインの開始 index（末尾は必ず N）。
- i 本目の線は `coords[offsets[i] : offsets[i+1]]` で取り出せる。
- dtype/形状は生成時に上記へ正規化される。

直感図:

    # 2 本のポリライン（線0は3点、線1は2点）
    # coords (N=5): [[0,0], [1,0], [1,1], [2,2], [3,2]]
    # offsets (M+1=3): [0, 3, 5]
    #   線0 = coords[0:3], 線1 = coords[3:5]

補足:
- 空ジオメトリは `coords.shape==(0,2)`, `offsets==[0]`。
- 変換はすべて新しいインスタンスを返す純関数。
- 等価性は配列の内容比較（決定性テストでキュー同士を比べるため）。
"""

from __future__ import annotations

from typing import Iterable, Iterator, Sequence

import numpy as np

NumberLike = float | int
LineLike = np.ndarray | Sequence[Sequence[NumberLike]]


def _normalize_geometry_input(
    coords: np.ndarray,
    offsets: np.ndarray,
) -> tuple[np.ndarray, np.ndarray]:
    """`Geometry` 生成時の内部正規化ヘルパ。"""

    coords_arr = np.ascontiguousarray(coords, dtype=np.float32)
    if coords_arr.ndim != 2 or coords_arr.shape[1] != 2:
        raise ValueError(f"coords must have shape (N, 2), got {coords_arr.shape}")

    offsets_arr = np.ascontiguousarray(offsets, dtype=np.int32)
    if offsets_arr.ndim != 1 or offsets_arr.size == 0:
        raise ValueError("offsets must be a non-empty 1-D array")
    if offsets_arr[0] != 0:
        raise ValueError("offsets[0] must be 0")
    if offsets_arr[-1] != coords_arr.shape[0]:
        raise ValueError(
            f"offsets[-1] ({int(offsets_arr[-1])}) must equal len(coords) ({coords_arr.shape[0]})"
        )
    if np.any(np.diff(offsets_arr) < 0):
        raise ValueError("offsets must be non-decreasing")

    return coords_arr, offsets_arr


class Geometry:
    """平面ポリライン集合。

    フィールド:
    - `coords (N,2) float32`: すべての点列を連結した配列。
    - `offsets (M+1,) int32`: 各ポリラインの開始 index（末尾は N）。
    """

    __slots__ = ("coords", "offsets")

    coords: np.ndarray
    offsets: np.ndarray

    def __init__(self, coords: np.ndarray, offsets: np.ndarray) -> None:
        self.coords, self.offsets = _normalize_geometry_input(coords, offsets)

    # ── ファクトリ ───────────────────
    @classmethod
    def empty(cls) -> "Geometry":
        return cls(np.empty((0, 2), dtype=np.float32), np.zeros(1, dtype=np.int32))

    @classmethod
    def from_lines(cls, lines: Iterable[LineLike]) -> "Geometry":
        """点列の集合から `Geometry` を生成する。

        Parameters
        ----------
        lines : Iterable[LineLike]
            各要素は `(K, 2)` の座標列（list/tuple/ndarray）。

        Raises
        ------
        ValueError
            いずれかの線が `(K, 2)` に適合しない場合。
        """
        np_lines: list[np.ndarray] = []
        for line in lines:
            arr = np.asarray(line, dtype=np.float32)
            if arr.size == 0:
                arr = arr.reshape(0, 2)
            if arr.ndim != 2 or arr.shape[1] != 2:
                raise ValueError(f"line must have shape (K, 2), got {arr.shape}")
            np_lines.append(arr)

        if not np_lines:
            return cls.empty()

        offsets = np.zeros(len(np_lines) + 1, dtype=np.int32)
        offsets[1:] = np.cumsum([arr.shape[0] for arr in np_lines])
        coords = np.concatenate(np_lines, axis=0)
        return cls(coords, offsets)

    # ── 基本操作（すべて純粋） ────────
    def as_arrays(self, *, copy: bool = False) -> tuple[np.ndarray, np.ndarray]:
        """内部配列を返す。`copy=False` は読み取り専用ビュー。"""
        if copy:
            return self.coords.copy(), self.offsets.copy()
        coords_view = self.coords.view()
        offsets_view = self.offsets.view()
        coords_view.setflags(write=False)
        offsets_view.setflags(write=False)
        return coords_view, offsets_view

    def lines(self) -> Iterator[np.ndarray]:
        """各ポリラインの座標ビューを順に返す。"""
        for start, end in zip(self.offsets[:-1], self.offsets[1:]):
            yield self.coords[start:end]

    @property
    def is_empty(self) -> bool:
        return self.coords.size == 0

    def translate(self, dx: float = 0.0, dy: float = 0.0) -> "Geometry":
        """平行移動（純関数）。"""
        vec = np.array([dx, dy], dtype=np.float32)
        return Geometry(self.coords + vec, self.offsets.copy())

    def concat(self, other: "Geometry") -> "Geometry":
        """ポリライン集合の連結（純関数）。後段の offsets を先行頂点数だけシフトする。"""
        shift = self.coords.shape[0]
        coords = np.vstack([self.coords, other.coords])
        offsets = np.hstack([self.offsets, other.offsets[1:] + shift])
        return Geometry(coords, offsets)

    def __add__(self, other: "Geometry") -> "Geometry":
        return self.concat(other)

    def __len__(self) -> int:
        """ポリライン本数（`M`）を返す。"""
        return int(self.offsets.shape[0] - 1)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Geometry):
            return NotImplemented
        return np.array_equal(self.offsets, other.offsets) and np.array_equal(
            self.coords, other.coords
        )

    __hash__ = None  # type: ignore[assignment]

    @property
    def n_vertices(self) -> int:
        return int(self.coords.shape[0])

    @property
    def n_lines(self) -> int:
        return len(self)

    def __repr__(self) -> str:  # pragma: no cover - 表示用
        return f"Geometry(N={self.n_vertices}, M={self.n_lines})"


__all__ = ["Geometry", "LineLike"]
