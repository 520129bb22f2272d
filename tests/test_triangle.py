import itertools
import math

import pytest

from commongeom.errors import InvalidGeometryError
from commongeom.normalize import signed_area
from commongeom.point import Point
from commongeom.relations import Location, ShapeRelation
from commongeom.triangle import Triangle


def close(a, b):
    return abs(a - b) < 1e-9


RIGHT_TRIANGLE = (Point(0, 0), Point(4, 0), Point(0, 3))


class TestTriangle:

    def test_normalized_vertexes(self):
        t = Triangle(*RIGHT_TRIANGLE)
        assert t.a == Point(0, 3)
        assert t.b == Point(4, 0)
        assert t.c == Point(0, 0)
        assert t.vertexes() == (t.a, t.b, t.c)
        assert t.size() == 3

    @pytest.mark.parametrize('order', list(itertools.permutations(RIGHT_TRIANGLE)))
    def test_permutations(self, order):
        t = Triangle(*order)
        assert close(t.area(), 6)
        assert t.centroid().equals(Point(4 / 3, 1))
        assert t.equals(Triangle(*RIGHT_TRIANGLE))
        assert t == Triangle(*RIGHT_TRIANGLE)

    def test_tiny_triangle_is_clockwise(self):
        t = Triangle(Point(0, 0), Point(0, 1.4e-4), Point(1e-4, 0))
        assert signed_area(t.vertexes()) < 0
        assert Triangle(*t.vertexes()) == t

    def test_collinear_rejected(self):
        with pytest.raises(InvalidGeometryError):
            Triangle(Point(0, 0), Point(1, 1), Point(2, 2))
        with pytest.raises(InvalidGeometryError):
            Triangle(Point(0, 0), Point(0, 0), Point(2, 2))

    def test_from_vertexes(self):
        assert Triangle.from_vertexes(RIGHT_TRIANGLE) == Triangle(*RIGHT_TRIANGLE)
        with pytest.raises(InvalidGeometryError):
            Triangle.from_vertexes(RIGHT_TRIANGLE[:2])

    def test_sides_and_angles(self):
        t = Triangle(*RIGHT_TRIANGLE)
        assert close(t.side_ab.length(), 5)
        assert close(t.side_bc.length(), 4)
        assert close(t.side_ca.length(), 3)
        assert close(t.perimeter(), 12)
        assert close(t.angle_c, math.pi / 2)
        assert close(sum(t.angles()), math.pi)
        assert close(t.angle_a, math.atan2(4, 3))
        assert t.vertex(3) == t.a
        assert t.side(-1) == t.side_ca

    def test_area_of_edges(self):
        assert close(Triangle.area_of_edges(3, 4, 5), 6)
        assert close(Triangle.area_of_edges(2, 2, 2), math.sqrt(3))
        with pytest.raises(InvalidGeometryError):
            Triangle.area_of_edges(1, 1, 5)

    def test_boundaries(self):
        t = Triangle(*RIGHT_TRIANGLE)
        assert (t.left, t.right, t.top, t.bottom) == (0, 4, 3, 0)
        r = t.bounding_rectangle()
        assert close(r.area(), 12)
        assert r.top_left == Point(0, 3)

    def test_rotate_and_translate(self):
        t = Triangle(*RIGHT_TRIANGLE)
        assert t.rotate(2 * math.pi).equals(t)
        turned = t.rotate(math.pi / 3)
        assert close(turned.area(), 6)
        assert turned.centroid().equals(t.centroid())
        moved = t.translate(Point(10, -2))
        assert moved.a == Point(10, 1)
        assert moved.centroid().equals(Point(4 / 3 + 10, -1))
        half = t.rotate_around(Point(0, 0), math.pi)
        ## (0, 0) and (-4, 0) tie for the top; the smaller x wins
        assert half.a.equals(Point(-4, 0))
        assert half.bottom == pytest.approx(-3)

    def test_immutable(self):
        t = Triangle(*RIGHT_TRIANGLE)
        with pytest.raises(AttributeError):
            t.foo = 1

    def test_relation_to_point(self):
        t = Triangle(*RIGHT_TRIANGLE)
        assert t.relation_to_point(Point(1, 1)) is Location.INSIDE
        assert t.relation_to_point(Point(2, 1.5)) is Location.ON
        assert t.relation_to_point(Point(3, 3)) is Location.OUTSIDE
        assert t.contains_point(Point(0, 0))

    def test_compare_to(self):
        t = Triangle(*RIGHT_TRIANGLE)
        assert t.compare_to(Triangle(*reversed(RIGHT_TRIANGLE))) == 0
        assert t.compare_to(t.translate(Point(1, 0))) == -1


class TestTriangleRelations:

    t = Triangle(*RIGHT_TRIANGLE)

    def test_same(self):
        other = Triangle(Point(0, 3), Point(0, 0), Point(4, 0))
        assert self.t.relation_to(other) is ShapeRelation.SAME

    def test_shared_side_is_adjacent(self):
        other = Triangle(Point(4, 0), Point(0, 3), Point(4, 3))
        assert self.t.relation_to(other) is ShapeRelation.ADJACENT
        assert other.relation_to(self.t) is ShapeRelation.ADJACENT

    def test_shared_vertex_is_adjacent(self):
        other = Triangle(Point(4, 0), Point(8, 0), Point(6, -2))
        assert self.t.relation_to(other) is ShapeRelation.ADJACENT

    def test_overlap(self):
        other = self.t.translate(Point(1, 1))
        assert self.t.relation_to(other) is ShapeRelation.INTERSECT
        assert self.t.intersects_with(other)

    def test_disjoint(self):
        other = self.t.translate(Point(10, 10))
        assert self.t.relation_to(other) is ShapeRelation.DISJOINT
        assert not self.t.intersects_with(other)

    def test_nested(self):
        small = Triangle(Point(1, 0.5), Point(2, 0.5), Point(1, 1.5))
        assert small.relation_to(self.t) is ShapeRelation.INSIDE
        assert self.t.relation_to(small) is ShapeRelation.CONTAINS
