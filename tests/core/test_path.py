from __future__ import annotations

import math

import pytest

from engine.core.path import Close, CubicTo, LineTo, MoveTo, Path, QuadraticTo


def test_replay_emits_one_call_per_event(surface) -> None:
    path = Path(
        [
            MoveTo((0.0, 0.0)),
            LineTo((1.0, 0.0)),
            QuadraticTo((2.0, 0.0), (2.0, 1.0)),
            CubicTo((2.0, 2.0), (1.0, 3.0), (0.0, 3.0)),
            Close(),
        ]
    )
    path.paint(surface)
    assert surface.names == ["move_to", "line_to", "quadratic_to", "cubic_to", "close"]
    assert surface.calls[2] == ("quadratic_to", (2.0, 0.0), (2.0, 1.0))


def test_replay_is_repeatable(surface, square_path) -> None:
    square_path.paint(surface)
    first = list(surface.calls)
    surface.calls.clear()
    square_path.paint(surface)
    assert surface.calls == first


def test_no_dedup_of_repeated_events(surface) -> None:
    path = Path([MoveTo((0, 0)), LineTo((1, 1)), LineTo((1, 1))])
    path.paint(surface)
    assert surface.names.count("line_to") == 2


def test_one_shot_iterator_is_rejected() -> None:
    gen = (ev for ev in [MoveTo((0, 0)), LineTo((1, 1))])
    with pytest.raises(TypeError):
        Path(gen)
    with pytest.raises(TypeError):
        Path(iter([MoveTo((0, 0))]))


def test_factory_source_replays_fresh_iterable(surface) -> None:
    calls = []

    def factory():
        calls.append(1)
        yield MoveTo((0.0, 0.0))
        yield LineTo((5.0, 0.0))

    path = Path(factory)
    path.paint(surface)
    path.paint(surface)
    assert len(calls) == 2
    assert surface.names == ["move_to", "line_to", "move_to", "line_to"]


def test_non_event_items_are_rejected() -> None:
    with pytest.raises(TypeError):
        Path([MoveTo((0, 0)), (1, 1)])


def test_rect_is_closed_polygon(surface) -> None:
    Path.rect(1, 2, 3, 4).paint(surface)
    assert surface.calls == [
        ("move_to", (1.0, 2.0)),
        ("line_to", (4.0, 2.0)),
        ("line_to", (4.0, 6.0)),
        ("line_to", (1.0, 6.0)),
        ("close",),
    ]


def test_open_polygon_has_no_close(surface) -> None:
    Path.polygon([(0, 0), (1, 0), (1, 1)], closed=False).paint(surface)
    assert "close" not in surface.names


def test_regular_polygon_vertices_on_circle() -> None:
    path = Path.regular_polygon((10.0, 10.0), 5.0, 6)
    points = [ev.to for ev in path.events() if isinstance(ev, (MoveTo, LineTo))]
    assert len(points) == 6
    for x, y in points:
        assert math.isclose(math.hypot(x - 10.0, y - 10.0), 5.0, rel_tol=1e-9)
    with pytest.raises(ValueError):
        Path.regular_polygon((0, 0), 1.0, 2)


def test_circle_uses_four_cubics() -> None:
    path = Path.circle((0.0, 0.0), 3.0)
    kinds = [type(ev).__name__ for ev in path.events()]
    assert kinds == ["MoveTo", "CubicTo", "CubicTo", "CubicTo", "CubicTo", "Close"]
    with pytest.raises(ValueError):
        Path.circle((0.0, 0.0), 0.0)


def test_paths_compare_by_events() -> None:
    assert Path.rect(0, 0, 1, 1) == Path.rect(0, 0, 1, 1)
    assert Path.rect(0, 0, 1, 1) != Path.rect(0, 0, 2, 1)
