from __future__ import annotations

from dataclasses import dataclass

from api import Canvas, DefaultSeed, Filled, Path, Sketch, Stroked, Style, run

CANVAS_SIZE = 400


@dataclass(frozen=True)
class Square(DefaultSeed, Sketch):
    """中央に塗りの正方形と、その外周の枠線。"""

    def draw(self, ctx) -> Canvas:
        canvas = Canvas()
        side = CANVAS_SIZE * 0.5
        x0 = (CANVAS_SIZE - side) / 2
        square = Path.rect(x0, x0, side, side)
        canvas.draw(Style(color="#d0d0d0"), Filled(square))
        canvas.draw(Style(color="#202020"), Stroked(square, 3.0))
        return canvas


if __name__ == "__main__":
    run(Square(), size=CANVAS_SIZE)
