from __future__ import annotations

import math

import pytest

from engine.core.paint import Filled, Paint, PaintCompositionError, Stroked
from engine.core.path import Path


def test_filled_emits_exactly_one_fill_after_inner(surface, square_path) -> None:
    Filled(square_path).paint(surface)
    assert surface.names == ["move_to", "line_to", "line_to", "line_to", "close", "fill"]
    assert "stroke" not in surface.names
    assert "set_stroke_thickness" not in surface.names


def test_stroked_sets_thickness_immediately_before_stroke(surface, square_path) -> None:
    Stroked(square_path, 2.5).paint(surface)
    assert surface.names[-2:] == ["set_stroke_thickness", "stroke"]
    assert surface.calls[-2] == ("set_stroke_thickness", 2.5)
    assert surface.names.count("stroke") == 1
    assert "fill" not in surface.names


def test_fill_and_stroke_of_same_geometry_are_two_draws(surface, square_path) -> None:
    Filled(square_path).paint(surface)
    Stroked(square_path, 1.0).paint(surface)
    assert surface.names.count("fill") == 1
    assert surface.names.count("stroke") == 1
    assert surface.names.index("fill") < surface.names.index("stroke")


@pytest.mark.parametrize(
    "make",
    [
        lambda p: Filled(Stroked(p, 1.0)),
        lambda p: Stroked(Filled(p), 1.0),
        lambda p: Filled(Filled(p)),
        lambda p: Stroked(Stroked(p, 1.0), 2.0),
    ],
)
def test_nested_decorators_are_rejected(make, square_path) -> None:
    with pytest.raises(PaintCompositionError):
        make(square_path)


def test_composition_error_is_a_type_error() -> None:
    assert issubclass(PaintCompositionError, TypeError)


def test_decorator_requires_paint() -> None:
    with pytest.raises(TypeError):
        Filled([(0, 0), (1, 1)])  # type: ignore[arg-type]


@pytest.mark.parametrize("bad", [0.0, -1.0, math.inf, math.nan])
def test_stroke_thickness_must_be_positive_and_finite(bad, square_path) -> None:
    with pytest.raises(ValueError):
        Stroked(square_path, bad)


def test_custom_paint_can_be_decorated(surface) -> None:
    class Dot(Paint):
        def paint(self, surface) -> None:
            surface.move_to((1.0, 1.0))
            surface.line_to((1.0, 1.0))

    Stroked(Dot(), 3.0).paint(surface)
    assert surface.names == ["move_to", "line_to", "set_stroke_thickness", "stroke"]


def test_equality_and_repr(square_path) -> None:
    assert Filled(square_path) == Filled(Path.rect(0.0, 0.0, 10.0, 10.0))
    assert Stroked(square_path, 1.0) != Stroked(square_path, 2.0)
    assert "thickness=1.0" in repr(Stroked(square_path, 1.0))
