"""
どこで: `engine.runtime.window`。
何を: pyglet ウィンドウ + ModernGL による対話バックエンド（入力取得・キュー描画・PNG 保存）。
なぜ: ループの `Backend` 契約を実画面で満たすため。ヘッドレス環境では生成に失敗しうる。

入力の扱い:
- `events()` は pyglet のクロックを進めてウィンドウイベントを配送し、溜まった入力をバッチで返す。
- ESC またはクローズボタンでウィンドウが閉じた後は None（入力終了）を返す。
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

import moderngl
import pyglet

from common.types import RGBA
from engine.core.render_window import RenderWindow
from engine.export.image import save_frame_png
from engine.render.renderer import EntryRenderer
from engine.render.types import DrawEntry
from util.color import normalize_color

from .events import Event

logger = logging.getLogger(__name__)


class WindowBackend:
    """`size`×`size` のウィンドウに描くバックエンド。"""

    def __init__(
        self,
        size: int,
        *,
        background: object = (1.0, 1.0, 1.0, 1.0),
        caption: str = "seedsketch",
    ) -> None:
        self.size = int(size)
        self.background: RGBA = normalize_color(background)
        self.window = RenderWindow(self.size, self.size, caption=caption)
        self.window.switch_to()
        self.ctx = moderngl.create_context(require=330)
        self.renderer = EntryRenderer(self.ctx, self.size)
        self._released = False
        logger.info("window backend ready: %dx%d (%s)", self.size, self.size, self.ctx.info["GL_RENDERER"])

    def events(self) -> list[Event] | None:
        if self.window.closed:
            return None
        pyglet.clock.tick()
        self.window.dispatch_events()
        if self.window.closed:
            return None
        return self.window.pop_events()

    def submit(self, entries: Sequence[DrawEntry]) -> None:
        self.window.switch_to()
        self.renderer.render(entries, self.background)
        self.renderer.present()
        self.window.flip()

    def save_frame(self, directory: Path, frame: int) -> Path:
        return save_frame_png(self.renderer.read_pixels(), self.size, directory, frame)

    def close(self) -> None:
        """GL リソースとウィンドウを解放する（冪等）。"""
        if self._released:
            return
        self._released = True
        self.renderer.release()
        if not self.window.closed:
            self.window.close()


__all__ = ["WindowBackend"]
