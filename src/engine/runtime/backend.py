"""
どこで: `engine.runtime.backend`。
何を: ループが入力/描画/保存のために使う協調者のインターフェース `Backend`。
なぜ: ループをウィンドウ・GPU・ファイル形式から切り離し、対話実行とヘッドレス実行を同じ手順で回すため。
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, Sequence

from engine.render.types import DrawEntry

from .events import Event


class Backend(Protocol):
    def events(self) -> list[Event] | None:
        """次のイベントバッチを返す。入力が閉じたら None。"""
        ...

    def submit(self, entries: Sequence[DrawEntry]) -> None:
        """描画キューを挿入順に描く（後の要素ほど上）。"""
        ...

    def save_frame(self, directory: Path, frame: int) -> Path:
        """直前に描いたフレームを `directory` へ保存し、書き出したパスを返す。"""
        ...


__all__ = ["Backend"]
