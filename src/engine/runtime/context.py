"""
どこで: `engine.runtime.context`。
何を: 実行設定 `SketchConfig` と、ループが所有する可変状態 `SketchContext`（フレーム番号/乱数/シード）。
なぜ: 同じシード・再シード無しなら乱数列とフレーム番号が再現し、スケッチの出力が決定的になるようにするため。

不変条件:
- `frame` は 1 反復ごとにちょうど 1 増え、再シード時のみ 0 に戻る。
- 再シードでは `rng` と `current_seed` を丸ごと差し替える（部分更新しない）。
- 新しいシードは OS エントロピーから引き、現在のシードからは導出しない。
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path

import numpy as np

# numpy の SeedSequence エントロピーを 63bit に丸める（ディレクトリ名/ログで扱いやすい範囲）
SEED_MASK = (1 << 63) - 1


@dataclass(frozen=True)
class SketchConfig:
    """実行中は読み取り専用の設定。

    Parameters
    ----------
    size : int
        出力（ウィンドウ/フレーム）の一辺のピクセル数。正の整数。
    capture_root : Path | None
        指定時、各フレームを `{capture_root}/{seed}/` へ保存する。
    seed : int | None
        固定シード。None なら実行開始時に 1 度だけ乱数で決める。
    """

    size: int
    capture_root: Path | None = None
    seed: int | None = None

    def __post_init__(self) -> None:
        if isinstance(self.size, bool) or not isinstance(self.size, (int, np.integer)):
            raise TypeError(f"size must be an int, got {type(self.size).__name__}")
        if self.size <= 0:
            raise ValueError(f"size must be positive, got {self.size}")
        object.__setattr__(self, "size", int(self.size))
        if self.seed is not None:
            if isinstance(self.seed, bool) or not isinstance(self.seed, (int, np.integer)):
                raise TypeError(f"seed must be an int or None, got {type(self.seed).__name__}")
            if self.seed < 0:
                raise ValueError(f"seed must be non-negative, got {self.seed}")
            object.__setattr__(self, "seed", int(self.seed))
        if self.capture_root is not None:
            object.__setattr__(self, "capture_root", Path(self.capture_root))


@dataclass
class SketchContext:
    """ループが所有し 1 反復に 1 度だけ更新する実行状態。"""

    cfg: SketchConfig
    frame: int
    rng: np.random.Generator
    current_seed: int


def draw_seed() -> int:
    """OS エントロピーから新しいシードを引く。"""
    return int(np.random.SeedSequence().entropy) & SEED_MASK


def make_rng(seed: int) -> np.random.Generator:
    return np.random.default_rng(int(seed))


def new_context(cfg: SketchConfig) -> SketchContext:
    """実行開始時のコンテキスト。シード未指定なら 1 度だけ引く。"""
    seed = cfg.seed if cfg.seed is not None else draw_seed()
    return SketchContext(cfg=cfg, frame=0, rng=make_rng(seed), current_seed=seed)


def reseeded(ctx: SketchContext) -> SketchContext:
    """新しいシード/乱数/フレーム 0 を持つ別のコンテキストを返す（`ctx` は変更しない）。"""
    seed = draw_seed()
    return replace(ctx, frame=0, rng=make_rng(seed), current_seed=seed)


__all__ = [
    "SketchConfig",
    "SketchContext",
    "draw_seed",
    "make_rng",
    "new_context",
    "reseeded",
]
