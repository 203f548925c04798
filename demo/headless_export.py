"""ウィンドウ無しで 60 フレーム書き出す（`captures/{seed}/000000.npz` ...）。"""

from __future__ import annotations

from dataclasses import dataclass

from api import Canvas, DefaultSeed, Filled, HeadlessBackend, Path, Sketch, Style, run

CANVAS_SIZE = 256
FRAMES = 60


@dataclass(frozen=True)
class Orbit(DefaultSeed, Sketch):
    def draw(self, ctx) -> Canvas:
        canvas = Canvas()
        n_sides = 3 + int(ctx.rng.integers(0, 5))
        shape = Path.regular_polygon(
            (CANVAS_SIZE / 2, CANVAS_SIZE / 2), 40 + ctx.frame, n_sides, phase=ctx.frame * 3.0
        )
        canvas.draw(Style(color="#000000", fill_spacing=2.0), Filled(shape))
        return canvas


if __name__ == "__main__":
    backend = HeadlessBackend([[]] * FRAMES, size=CANVAS_SIZE)
    ctx = run(Orbit(), size=CANVAS_SIZE, capture_root="captures", backend=backend, frame_delay=0.0)
    print(f"seed={ctx.current_seed} frames={ctx.frame} files={len(backend.saved)}")
