"""
どこで: `util.color`。
何を: 色指定（Hex / RGB(A) 0–1 / RGB(A) 0–255）を RGBA(0–1) へ正規化。
なぜ: `Style` と背景色で同一の受理仕様とエラーメッセージを使うため。
"""

from __future__ import annotations

from common.types import RGBA


def parse_hex_color_str(s: str) -> RGBA:
    """"#RRGGBB" / "#RRGGBBAA"（`#` 省略可）から RGBA(0–1) を返す。"""
    t = s.strip().lstrip("#")
    if len(t) not in (6, 8):
        raise ValueError(f"invalid hex color length: '{s}' (expected RRGGBB or RRGGBBAA)")
    try:
        channels = [int(t[i : i + 2], 16) for i in range(0, len(t), 2)]
    except ValueError as e:
        raise ValueError(f"invalid hex color: '{s}'") from e
    if len(channels) == 3:
        channels.append(255)
    r, g, b, a = (c / 255.0 for c in channels)
    return (r, g, b, a)


def normalize_color(value: object) -> RGBA:
    """色を RGBA(0–1) へ正規化する。

    - 全成分が 0..1 の float 列はそのまま。
    - それ以外の数値列は 0–255 とみなして丸め/クランプ後にスケール。
    """
    if isinstance(value, str):
        return parse_hex_color_str(value)
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"unsupported color type: {type(value)!r}")
    if len(value) not in (3, 4):
        raise ValueError("color tuple/list must be length 3 or 4")
    try:
        comps = [float(c) for c in value]
    except (TypeError, ValueError) as e:
        raise ValueError(f"invalid color tuple/list: {value!r}") from e
    if len(comps) == 3:
        comps.append(1.0 if all(0.0 <= c <= 1.0 for c in comps) else 255.0)
    if all(0.0 <= c <= 1.0 for c in comps):
        r, g, b, a = comps
        return (r, g, b, a)
    r8, g8, b8, a8 = (max(0, min(255, int(round(c)))) for c in comps)
    return (r8 / 255.0, g8 / 255.0, b8 / 255.0, a8 / 255.0)


__all__ = ["parse_hex_color_str", "normalize_color"]
