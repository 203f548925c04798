from __future__ import annotations

from dataclasses import dataclass

import pytest

from engine.core.canvas import Canvas
from engine.core.sketch import DefaultSeed, Sketch
from engine.runtime.context import SketchConfig, new_context


def test_sketch_without_seed_cannot_be_instantiated() -> None:
    class NoSeed(Sketch):
        def draw(self, ctx):
            return Canvas()

    with pytest.raises(TypeError):
        NoSeed()


def test_default_seed_returns_fresh_default_value() -> None:
    @dataclass(frozen=True)
    class Counter(DefaultSeed, Sketch):
        n: int = 0

        def draw(self, ctx):
            return Canvas()

        def step(self, ctx, events):
            return Counter(self.n + 1)

    ctx = new_context(SketchConfig(size=16, seed=1))
    advanced = Counter(5)
    reset = advanced.seed(ctx)
    assert reset == Counter()
    assert reset is not advanced


def test_default_step_keeps_running_with_same_value(square_sketch) -> None:
    ctx = new_context(SketchConfig(size=16, seed=1))
    assert square_sketch.step(ctx, []) is square_sketch


def test_explicit_seed_can_use_context_rng() -> None:
    @dataclass(frozen=True)
    class Walk(Sketch):
        x: float = 0.0

        def draw(self, ctx):
            return Canvas()

        def seed(self, ctx):
            return Walk(float(ctx.rng.uniform(0.0, 100.0)))

    ctx_a = new_context(SketchConfig(size=16, seed=7))
    ctx_b = new_context(SketchConfig(size=16, seed=7))
    assert Walk().seed(ctx_a) == Walk().seed(ctx_b)
