"""
どこで: `engine.core` の描画ウィンドウ薄ラッパ。
何を: Pyglet Window を生成し、文字/キー/マウス入力をループ用のイベントとして溜める。
なぜ: ループはバッチ単位でイベントを受け取るため、pyglet のコールバックを `pop_events()` で回収できる形にする。

使用例:
    win = RenderWindow(512, 512)
    win.dispatch_events()
    batch = win.pop_events()
"""

from __future__ import annotations

import pyglet
from pyglet.gl import Config
from pyglet.window import key

from engine.runtime.events import Event, KeyEvent, MouseEvent, TextEvent


class RenderWindow(pyglet.window.Window):
    def __init__(
        self,
        width: int,
        height: int,
        *,
        caption: str = "seedsketch",
    ):
        """ウィンドウを生成する。

        引数:
            width: ウィンドウ幅（ピクセル）。
            height: ウィンドウ高さ（ピクセル）。
            caption: タイトル。
        """
        config = Config(double_buffer=True, major_version=3, minor_version=3, forward_compatible=True)
        super().__init__(width=width, height=height, caption=caption, config=config, resizable=False)
        self._pending: list[Event] = []
        self.closed = False

    def pop_events(self) -> list[Event]:
        """溜まったイベントを受け取り順で返し、内部キューを空にする。"""
        batch, self._pending = self._pending, []
        return batch

    # ---- pyglet イベント ----
    def on_text(self, text: str) -> None:
        self._pending.append(TextEvent(text))

    def on_key_press(self, symbol: int, modifiers: int) -> None:
        if symbol == key.ESCAPE:
            self.close()
            return
        self._pending.append(KeyEvent(symbol, modifiers))

    def on_mouse_press(self, x: int, y: int, button: int, modifiers: int) -> None:
        # pyglet は左下原点、キャンバスは左上原点
        self._pending.append(MouseEvent(float(x), float(self.height - y), button))

    def close(self) -> None:
        # ESC とクローズボタンの両方がここを通る
        self.closed = True
        super().close()

    def on_draw(self) -> None:
        # 描画はバックエンドの submit() が行う
        pass


__all__ = ["RenderWindow"]
