import math

import pytest

from commongeom import (
    Point,
    Polygon,
    Rectangle,
    ShapeRelation,
    Triangle,
    __version__,
)
from commongeom.errors import NonConvexError
from commongeom.shapes import classify_convex, separating_gap, sides_meet


def square(left=0.0, bottom=0.0, size=1.0):
    return Rectangle.from_parameters(left, bottom + size, size, size)


def test_version_is_a_string():
    assert isinstance(__version__, str)


class TestMixedShapes:
    """relations between shapes of different types"""

    def test_triangle_in_square(self):
        t = Triangle(Point(0, 0), Point(1, 0), Point(0, 1))
        s = square()
        assert t.relation_to(s) is ShapeRelation.INSIDE
        assert s.relation_to(t) is ShapeRelation.CONTAINS

    def test_triangle_on_top_of_square(self):
        roof = Triangle(Point(0, 1), Point(1, 1), Point(0.5, 2))
        assert roof.relation_to(square()) is ShapeRelation.ADJACENT
        assert square().relation_to(roof) is ShapeRelation.ADJACENT

    def test_triangle_poking_into_square(self):
        roof = Triangle(Point(0, 0.9), Point(1, 0.9), Point(0.5, 2))
        assert roof.relation_to(square()) is ShapeRelation.INTERSECT

    def test_polygon_and_rectangle(self):
        p = Polygon([Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1)])
        assert p.relation_to(square()) is ShapeRelation.SAME
        assert square().relation_to(p) is ShapeRelation.SAME
        assert p.relation_to(square(1, 0)) is ShapeRelation.ADJACENT
        assert p.relation_to(square(3, 3)) is ShapeRelation.DISJOINT

    def test_rotated_square_vertex_on_side(self):
        ## a diamond whose lowest vertex rests on the top side of the square
        diamond = Rectangle.from_parameters(0, 1, 1, 1, rotation=45)
        lift = 1 - diamond.bottom
        resting = diamond.translate(Point(0, lift))
        assert resting.relation_to(square()) is ShapeRelation.ADJACENT
        sunk = diamond.translate(Point(0, lift - 0.1))
        assert sunk.relation_to(square()) is ShapeRelation.INTERSECT

    def test_translation_symmetry(self):
        t = Triangle(Point(0, 0), Point(3, 0), Point(0, 2))
        for dx, dy in ((0.5, 0.5), (3, 0), (10, 0)):
            other = t.translate(Point(dx, dy))
            assert t.relation_to(other) is other.relation_to(t)


class TestConcaveIntersection:
    """intersects_with accepts a concave operand on any receiver"""

    ell = Polygon([Point(0, 0), Point(2, 0), Point(2, 1), Point(1, 1), Point(1, 2), Point(0, 2)])

    def test_triangle_receiver(self):
        big = Triangle(Point(0, 0), Point(4, 0), Point(0, 4))
        assert big.intersects_with(self.ell)
        assert self.ell.intersects_with(big)
        in_notch = Triangle(Point(1.2, 1.2), Point(1.8, 1.2), Point(1.5, 1.8))
        assert not in_notch.intersects_with(self.ell)
        assert not self.ell.intersects_with(in_notch)

    def test_rotated_rectangle_receiver(self):
        diamond = Rectangle.from_parameters(0, 1, 1, 1, rotation=45)
        assert not diamond.is_parallel_to_axes()
        assert diamond.intersects_with(self.ell)
        assert self.ell.intersects_with(diamond)

    def test_axis_parallel_rectangle_receiver(self):
        in_notch = Rectangle.from_parameters(1.5, 3, 1.5, 1.5)
        assert not in_notch.intersects_with(self.ell)
        assert not self.ell.intersects_with(in_notch)
        touching = in_notch.translate(Point(-0.5, -0.5))
        assert touching.intersects_with(self.ell)
        assert self.ell.intersects_with(touching)

    def test_relation_still_needs_convex(self):
        with pytest.raises(NonConvexError):
            square().relation_to(self.ell)


class TestHelpers:

    def test_separating_gap(self):
        a = square().vertexes()
        assert separating_gap(a, square(3, 0).vertexes()) == pytest.approx(2)
        assert separating_gap(a, square(1, 0).vertexes()) == pytest.approx(0)
        assert separating_gap(a, square(0.5, 0.5).vertexes()) == pytest.approx(-0.5)

    def test_sides_meet(self):
        assert sides_meet(square(), square(1, 1))
        assert not sides_meet(square(), square(0.25, 0.25, 0.5))

    def test_classify_convex_is_antisymmetric(self):
        small = square(0.25, 0.25, 0.5)
        assert classify_convex(small, square()) is ShapeRelation.INSIDE
        assert classify_convex(square(), small) is ShapeRelation.CONTAINS

    def test_generic_accessors(self):
        s = square(size=2.0)
        assert s.side(0).start == s.vertex(0)
        assert s.side(3).end == s.vertex(0)
        assert all(a == pytest.approx(math.pi / 2) for a in s.angles())
        assert s.perimeter() == pytest.approx(8)
        assert hash(s) == hash(square(size=2.0))
