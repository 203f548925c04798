"""
どこで: `api.sketch_runner.utils`（純粋関数/小ヘルパ）。
何を: 引数・構成ファイル・環境変数からサイズ/保存先/シード/待機時間を解決する。
なぜ: `api.sketch` を薄く保ち、優先順位の規則を単体でテストできるようにするため。

優先順位（すべて共通）:
    明示引数 > `config.yaml` / `configs/default.yaml` の `sketch:` セクション > `SEEDSKETCH_*` 環境変数 > 既定値
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from common.settings import get as _get_settings


def resolve_size(requested: int | None, section: Mapping[str, Any]) -> int:
    """出力の一辺 [px] を解決する。不正値は `ValueError`（既定へは落とさない）。"""
    raw = requested if requested is not None else section.get("size")
    if raw is None:
        return int(_get_settings().DEFAULT_SIZE)
    if isinstance(raw, bool):
        raise ValueError(f"invalid size: {raw!r}")
    try:
        size = int(raw)
    except (TypeError, ValueError) as e:
        raise ValueError(f"invalid size: {raw!r}") from e
    if size <= 0 or size != raw:
        raise ValueError(f"size must be a positive integer, got {raw!r}")
    return size


def resolve_capture_root(requested: str | Path | None, section: Mapping[str, Any]) -> Path | None:
    raw = requested if requested is not None else section.get("capture_root")
    if raw is None or raw == "":
        return _get_settings().CAPTURE_ROOT
    return Path(raw).expanduser()


def resolve_seed(requested: int | None, section: Mapping[str, Any]) -> int | None:
    raw = requested if requested is not None else section.get("seed")
    if raw is None:
        return None
    if isinstance(raw, bool):
        raise ValueError(f"invalid seed: {raw!r}")
    try:
        return int(raw)
    except (TypeError, ValueError) as e:
        raise ValueError(f"invalid seed: {raw!r}") from e


def resolve_frame_delay(requested: float | None, section: Mapping[str, Any]) -> float:
    """反復ごとの待機秒数。`sketch.frame_delay_ms` はミリ秒で書く。"""
    if requested is not None:
        return max(0.0, float(requested))
    raw = section.get("frame_delay_ms")
    if raw is not None:
        try:
            return max(0.0, float(raw) / 1000.0)
        except (TypeError, ValueError) as e:
            raise ValueError(f"invalid frame_delay_ms: {raw!r}") from e
    return max(0.0, float(_get_settings().FRAME_DELAY_MS) / 1000.0)


def resolve_background(requested: object, section: Mapping[str, Any]) -> object:
    if requested is not None:
        return requested
    return section.get("background", (1.0, 1.0, 1.0, 1.0))


__all__ = [
    "resolve_size",
    "resolve_capture_root",
    "resolve_seed",
    "resolve_frame_delay",
    "resolve_background",
]
