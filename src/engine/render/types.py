"""
どこで: `engine.render` 型定義。
何を: 描画スタイル `Style` と、キャンバスのキュー要素 `DrawEntry`。
なぜ: 1 フレーム内で色や塗り間隔が異なる複数の形を順描画するため、形と見た目の組を運ぶ型が必要。
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from common.types import RGBA
from util.color import normalize_color

if TYPE_CHECKING:
    from engine.core.tessellate import Tessellation


@dataclass(frozen=True)
class Style:
    """色と塗りの間隔。

    - `color` は Hex / RGB(A) を受け付け、RGBA(0–1) に正規化して保持する。
    - `fill_spacing` は塗りハッチの間隔（キャンバス座標）。None でテッセレータ既定。
    """

    name: str = "default"
    color: RGBA = field(default=(0.0, 0.0, 0.0, 1.0))
    fill_spacing: float | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "color", normalize_color(self.color))
        if self.fill_spacing is not None:
            spacing = float(self.fill_spacing)
            if not math.isfinite(spacing) or spacing <= 0.0:
                raise ValueError(f"fill_spacing must be > 0, got {self.fill_spacing!r}")
            object.__setattr__(self, "fill_spacing", spacing)


DrawEntry = tuple[Style, "Tessellation"]


__all__ = ["Style", "DrawEntry", "RGBA"]
