from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest

from engine.runtime.context import (
    SEED_MASK,
    SketchConfig,
    draw_seed,
    make_rng,
    new_context,
    reseeded,
)


def test_config_normalizes_capture_root(tmp_path) -> None:
    cfg = SketchConfig(size=64, capture_root=str(tmp_path), seed=np.int64(3))
    assert isinstance(cfg.capture_root, Path)
    assert cfg.seed == 3 and type(cfg.seed) is int


@pytest.mark.parametrize("size", [0, -1])
def test_config_rejects_non_positive_size(size) -> None:
    with pytest.raises(ValueError):
        SketchConfig(size=size)


@pytest.mark.parametrize("size", [1.5, "64", True, None])
def test_config_rejects_non_int_size(size) -> None:
    with pytest.raises(TypeError):
        SketchConfig(size=size)  # type: ignore[arg-type]


def test_config_rejects_negative_or_bool_seed() -> None:
    with pytest.raises(ValueError):
        SketchConfig(size=8, seed=-1)
    with pytest.raises(TypeError):
        SketchConfig(size=8, seed=True)


def test_new_context_uses_fixed_seed() -> None:
    ctx = new_context(SketchConfig(size=8, seed=42))
    assert ctx.frame == 0
    assert ctx.current_seed == 42
    assert ctx.rng.integers(0, 1 << 30) == make_rng(42).integers(0, 1 << 30)


def test_new_context_draws_seed_once_when_unset() -> None:
    ctx = new_context(SketchConfig(size=8))
    assert 0 <= ctx.current_seed <= SEED_MASK


def test_draw_seed_is_masked_and_varies() -> None:
    seeds = {draw_seed() for _ in range(8)}
    assert all(0 <= s <= SEED_MASK for s in seeds)
    assert len(seeds) > 1


def test_reseeded_returns_new_context_and_keeps_old() -> None:
    ctx = new_context(SketchConfig(size=8, seed=1))
    ctx.frame = 17
    nxt = reseeded(ctx)
    assert nxt is not ctx
    assert nxt.frame == 0
    assert nxt.cfg is ctx.cfg
    assert nxt.rng is not ctx.rng
    # 元のコンテキストは変更されない
    assert ctx.frame == 17
    assert ctx.current_seed == 1
