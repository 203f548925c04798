"""
どこで: `engine.runtime.headless`。
何を: ウィンドウ/GPU を使わないバックエンド。与えたイベント列を順に返し、送出キューを記録し、
      フレームを `.npz`（ポリライン配列 + スタイル）として保存する。
なぜ: オフライン書き出しとテストで、対話実行と同じループ手順をそのまま検証できるようにするため。

保存形式（`{frame:06d}.npz`）:
- `entry{i}_part{j}_coords` (N,2) float32 / `entry{i}_part{j}_offsets` (M+1,) int32
- `entry{i}_part{j}_meta` [thickness, mode(0=fill,1=stroke)] float32
- `entry{i}_color` RGBA float32
- `entry_count` / `size`
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Sequence

import numpy as np

from engine.core.tessellate import CommitMode
from engine.render.types import DrawEntry
from util.paths import frame_filename

from .events import Event

logger = logging.getLogger(__name__)


class HeadlessBackend:
    """スクリプト化された入力で動くバックエンド。

    Parameters
    ----------
    batches : Iterable[Sequence[Event]]
        `events()` が順に返すイベントバッチ。尽きたら入力終了（None）。
    size : int
        保存ファイルに記録する出力サイズ（情報用）。
    """

    def __init__(self, batches: Iterable[Sequence[Event]], *, size: int = 0) -> None:
        self._batches = iter(batches)
        self.size = int(size)
        self.submitted: list[list[DrawEntry]] = []
        self.saved: list[Path] = []
        self.closed = False

    def events(self) -> list[Event] | None:
        batch = next(self._batches, None)
        if batch is None:
            return None
        return list(batch)

    def submit(self, entries: Sequence[DrawEntry]) -> None:
        self.submitted.append(list(entries))

    @property
    def last_frame(self) -> list[DrawEntry]:
        if not self.submitted:
            raise RuntimeError("nothing has been submitted yet")
        return self.submitted[-1]

    def save_frame(self, directory: Path, frame: int) -> Path:
        path = Path(directory) / frame_filename(frame, ".npz")
        arrays: dict[str, np.ndarray] = {
            "entry_count": np.array(len(self.last_frame), dtype=np.int32),
            "size": np.array(self.size, dtype=np.int32),
        }
        for i, (style, tessellation) in enumerate(self.last_frame):
            arrays[f"entry{i}_color"] = np.asarray(style.color, dtype=np.float32)
            for j, part in enumerate(tessellation.parts):
                key = f"entry{i}_part{j}"
                coords, offsets = part.geometry.as_arrays()
                arrays[f"{key}_coords"] = coords
                arrays[f"{key}_offsets"] = offsets
                mode = 0.0 if part.mode is CommitMode.FILL else 1.0
                arrays[f"{key}_meta"] = np.array([part.thickness, mode], dtype=np.float32)
        with path.open("wb") as f:
            np.savez(f, **arrays)
        self.saved.append(path)
        logger.debug("saved frame %d -> %s", frame, path)
        return path

    def close(self) -> None:
        self.closed = True


def load_frame(path: Path) -> list[tuple[np.ndarray, list[tuple[np.ndarray, np.ndarray, float, int]]]]:
    """`HeadlessBackend.save_frame` が書いたファイルを読み戻す。

    Returns
    -------
    list
        エントリごとに `(color, [(coords, offsets, thickness, mode), ...])`。
    """
    out = []
    with np.load(Path(path)) as data:
        for i in range(int(data["entry_count"])):
            parts = []
            j = 0
            while f"entry{i}_part{j}_coords" in data.files:
                key = f"entry{i}_part{j}"
                thickness, mode = data[f"{key}_meta"].tolist()
                parts.append(
                    (data[f"{key}_coords"], data[f"{key}_offsets"], float(thickness), int(mode))
                )
                j += 1
            out.append((data[f"entry{i}_color"], parts))
    return out


__all__ = ["HeadlessBackend", "load_frame"]
