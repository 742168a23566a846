"""
Tests for class-syntax shapes (shapes.py).

Tests:
1-3.  Area of flat shapes, zero-sized shapes
4-5.  Square substitutes for Rectangle, shapes are read-only
6-8.  Invalid dimensions rejected
9-10. Polygon shoelace area, read-only vertices
11.   Solid shapes: surface area, volume, calculate()
12.   Equality and hashing
13.   Capability protocols
"""

import math

import pytest

from solid_notes.errors import InvalidShapeError
from solid_notes.interfaces import ManageShape, SupportsArea, SupportsVolume
from solid_notes.shapes import Circle, Cuboid, Polygon, Rectangle, Square, Sphere, Triangle


def test_circle_area():
    assert Circle(2).area() == pytest.approx(4 * math.pi)


def test_flat_shape_areas():
    assert Square(5).area() == 25
    assert Rectangle(3, 4).area() == 12
    assert Triangle(3, 4).area() == 6


def test_zero_dimensions_are_valid():
    assert Circle(0).area() == 0
    assert Square(0).area() == 0


def test_square_behaves_like_rectangle():
    for rect in (Rectangle(5, 5), Square(5)):
        assert isinstance(rect, Rectangle)
        assert rect.width == 5
        assert rect.height == 5
        assert rect.area() == 25
    assert Square(7).length == 7


def test_shapes_are_read_only():
    square = Square(5)
    with pytest.raises(AttributeError):
        square.width = 3
    with pytest.raises(AttributeError):
        Circle(1).radius = 2
    assert square.area() == 25


@pytest.mark.parametrize("value", [-1, -0.001, float("nan"), float("inf")])
def test_bad_numbers_rejected(value):
    with pytest.raises(InvalidShapeError):
        Circle(value)


@pytest.mark.parametrize("value", ["5", None, True, [1]])
def test_non_numbers_rejected(value):
    with pytest.raises(InvalidShapeError):
        Square(value)


def test_invalid_shape_error_is_value_error():
    with pytest.raises(ValueError):
        Rectangle(1, -2)


def test_polygon_area():
    unit_square = Polygon([(0, 0), (1, 0), (1, 1), (0, 1)])
    assert unit_square.area() == pytest.approx(1.0)
    # обход по часовой стрелке даёт ту же площадь
    assert Polygon([(0, 0), (0, 3), (4, 0)]).area() == pytest.approx(6.0)
    assert isinstance(unit_square.area(), float)


def test_polygon_validation():
    with pytest.raises(InvalidShapeError):
        Polygon([(0, 0), (1, 1)])
    with pytest.raises(InvalidShapeError):
        Polygon([(0, 0), (1, 0), (1, "x")])
    with pytest.raises(InvalidShapeError):
        Polygon([(0, 0), (1, 0), (1, float("inf"))])

    polygon = Polygon([(0, 0), (1, 0), (1, 1)])
    with pytest.raises(ValueError):
        polygon.vertices[0, 0] = 5


def test_solid_shapes():
    cube = Cuboid(3)
    assert cube.area() == 54
    assert cube.volume() == 27
    assert cube.calculate() == 27
    assert Square(3).calculate() == 9

    sphere = Sphere(1)
    assert sphere.area() == pytest.approx(4 * math.pi)
    assert sphere.volume() == pytest.approx(4 / 3 * math.pi)


def test_equality_and_hash():
    assert Square(2) == Square(2)
    assert Square(2) != Square(3)
    assert Square(2) != Rectangle(2, 2)
    assert len({Circle(1), Circle(1), Circle(2)}) == 2
    assert Polygon([(0, 0), (1, 0), (1, 1)]) == Polygon([(0, 0), (1, 0), (1, 1)])


def test_capability_protocols():
    assert isinstance(Circle(1), SupportsArea)
    assert not isinstance(Circle(1), SupportsVolume)
    assert isinstance(Cuboid(1), SupportsVolume)
    assert isinstance(Triangle(1, 1), ManageShape)
    assert not isinstance("круг", SupportsArea)
