from __future__ import annotations

import pytest

from engine.core.canvas import Canvas
from engine.core.geometry import Geometry
from engine.core.paint import Filled, Stroked
from engine.core.path import LineTo, MoveTo, Path
from engine.core.tessellate import CommitMode, MeshPart, Tessellation, TessellationError
from engine.render.types import Style


def test_drain_returns_entries_in_insertion_order() -> None:
    canvas = Canvas()
    red = Style(name="red", color="#ff0000")
    blue = Style(name="blue", color="#0000ff")
    canvas.draw(red, Filled(Path.rect(0, 0, 4, 4)))
    canvas.draw(blue, Stroked(Path.rect(1, 1, 2, 2), 1.0))
    canvas.draw(red, Stroked(Path.rect(2, 2, 2, 2), 2.0))
    entries = canvas.drain()
    assert [s.name for s, _ in entries] == ["red", "blue", "red"]
    assert [t.parts[0].mode for _, t in entries] == [
        CommitMode.FILL,
        CommitMode.STROKE,
        CommitMode.STROKE,
    ]


def test_drain_empties_canvas() -> None:
    canvas = Canvas()
    canvas.draw(Style(), Filled(Path.rect(0, 0, 4, 4)))
    assert len(canvas) == 1
    assert len(canvas.drain()) == 1
    assert canvas.drain() == []
    assert len(canvas) == 0


def test_draw_after_drain_starts_new_queue() -> None:
    canvas = Canvas()
    canvas.draw(Style(name="a"), Filled(Path.rect(0, 0, 4, 4)))
    canvas.drain()
    canvas.draw(Style(name="b"), Filled(Path.rect(0, 0, 4, 4)))
    assert [s.name for s, _ in canvas.drain()] == ["b"]


def test_failed_draw_leaves_queue_untouched() -> None:
    canvas = Canvas()
    canvas.draw(Style(), Filled(Path.rect(0, 0, 4, 4)))
    with pytest.raises(TessellationError):
        canvas.draw(Style(), Path([MoveTo((0, 0)), LineTo((1, 1))]))
    assert len(canvas) == 1


def test_custom_tessellator_is_used() -> None:
    seen = []

    class Recorder:
        def tessellate(self, style, drawable):
            seen.append((style.name, drawable))
            return Tessellation((MeshPart(CommitMode.STROKE, Geometry.empty(), 1.0),))

    canvas = Canvas(Recorder())
    shape = Filled(Path.rect(0, 0, 1, 1))
    canvas.draw(Style(name="x"), shape)
    assert seen == [("x", shape)]
