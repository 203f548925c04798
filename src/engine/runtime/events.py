"""
どこで: `engine.runtime.events`。
何を: バックエンドがループへ渡す入力イベント型と、再シード要求の判定。
なぜ: ループが解釈するのは再シード文字だけで、他のイベントはそのまま `step()` へ流すため。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Union

# 再シードを要求する文字入力
RESEED_CHAR = "r"


@dataclass(frozen=True)
class TextEvent:
    """文字入力（pyglet の `on_text` 相当）。"""

    text: str


@dataclass(frozen=True)
class KeyEvent:
    symbol: int
    modifiers: int = 0


@dataclass(frozen=True)
class MouseEvent:
    x: float
    y: float
    button: int = 0


Event = Union[TextEvent, KeyEvent, MouseEvent]


def contains_reseed(events: Iterable[object], char: str = RESEED_CHAR) -> bool:
    """バッチ内に再シード文字の入力があるか。"""
    return any(isinstance(ev, TextEvent) and ev.text == char for ev in events)


__all__ = ["RESEED_CHAR", "TextEvent", "KeyEvent", "MouseEvent", "Event", "contains_reseed"]
