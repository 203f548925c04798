"""`r` で新しいシードから歩き直すランダムウォーク。`step()` が状態を 1 歩ずつ進める。"""

from __future__ import annotations

from dataclasses import dataclass

from api import Canvas, Path, Sketch, Stroked, Style, run

CANVAS_SIZE = 512
MAX_STEPS = 2000


@dataclass(frozen=True)
class Walk(Sketch):
    points: tuple[tuple[float, float], ...]

    def draw(self, ctx) -> Canvas:
        canvas = Canvas()
        if len(self.points) >= 2:
            line = Path.polygon(self.points, closed=False)
            canvas.draw(Style(color=(30, 60, 160)), Stroked(line, 1.5))
        return canvas

    def step(self, ctx, events) -> "Walk | None":
        if len(self.points) >= MAX_STEPS:
            return None
        x, y = self.points[-1]
        dx, dy = ctx.rng.normal(0.0, 4.0, size=2)
        nx = min(max(x + float(dx), 0.0), CANVAS_SIZE)
        ny = min(max(y + float(dy), 0.0), CANVAS_SIZE)
        return Walk(self.points + ((nx, ny),))

    def seed(self, ctx) -> "Walk":
        x, y = ctx.rng.uniform(0.0, CANVAS_SIZE, size=2)
        return Walk(((float(x), float(y)),))


if __name__ == "__main__":
    center = CANVAS_SIZE / 2
    run(Walk(((center, center),)), size=CANVAS_SIZE)
