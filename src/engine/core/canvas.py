"""
どこで: `engine.core.canvas`。
何を: 1 フレーム分の描画キュー `Canvas`（(Style, Tessellation) の順序付き列）。
なぜ: スケッチの `draw()` が積んだ形を、ループが挿入順のまま 1 回だけ取り出して送出できるようにするため。

契約:
- `draw(style, drawable)` はその場でテッセレーションして末尾に追加する。失敗時は何も積まれない。
- `drain()` は全要素を挿入順で返し、キャンバスを空にする。2 回目の `drain()` は空リスト。
- 挿入順が重なり順（後の要素ほど上）を決める。
"""

from __future__ import annotations

import logging

from engine.render.types import DrawEntry, Style

from .paint import Paint
from .tessellate import PathTessellator, Tessellator

logger = logging.getLogger(__name__)


class Canvas:
    """フレームごとの描画キュー。"""

    def __init__(self, tessellator: Tessellator | None = None) -> None:
        self._tessellator: Tessellator = tessellator if tessellator is not None else PathTessellator()
        self._queue: list[DrawEntry] = []

    def draw(self, style: Style, drawable: Paint) -> None:
        """`drawable` を `style` で確定してキューへ追加する。"""
        tessellation = self._tessellator.tessellate(style, drawable)
        self._queue.append((style, tessellation))

    def drain(self) -> list[DrawEntry]:
        """キューの中身を挿入順で返し、キャンバスを空にする。"""
        entries, self._queue = self._queue, []
        logger.debug("canvas drained: %d entries", len(entries))
        return entries

    def __len__(self) -> int:
        return len(self._queue)


__all__ = ["Canvas"]
