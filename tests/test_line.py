import math

import pytest

from commongeom.errors import InvalidGeometryError
from commongeom.line import Line
from commongeom.point import Point
from commongeom.relations import Intersection, LineRelation
from commongeom.segment import LineSegment
from commongeom.tolerance import Tolerance


def close(a, b):
    return abs(a - b) < 1e-9


class TestLine:

    def test_create(self):
        line = Line(Point(0, 0), Point(1, 1))
        assert line.start == Point(0, 0)
        assert line.direction() == Point(1, 1)
        assert close(line.angle(), math.pi / 4)

    def test_coincident_points_rejected(self):
        with pytest.raises(InvalidGeometryError):
            Line(Point(1, 1), Point(1, 1))
        with pytest.raises(ValueError):
            Line(Point(1, 1), Point(1, 1 + 1e-12))

    def test_tolerance_not_part_of_equality(self):
        a = Line(Point(0, 0), Point(1, 0))
        b = Line(Point(0, 0), Point(1, 0), Tolerance(epsilon=1e-4))
        assert a == b

    def test_relation(self):
        x_axis = Line(Point(0, 0), Point(1, 0))
        assert x_axis.relation_to(Line(Point(0, 1), Point(1, 1))) is LineRelation.PARALLEL
        assert x_axis.relation_to(Line(Point(2, 0), Point(5, 0))) is LineRelation.EQUAL
        assert x_axis.relation_to(Line(Point(3, 0), Point(-1, 0))) is LineRelation.EQUAL
        assert x_axis.relation_to(Line(Point(0, 0), Point(1, 1))) is LineRelation.INTERSECT

    def test_predicates(self):
        x_axis = Line(Point(0, 0), Point(1, 0))
        shifted = Line(Point(0, 1), Point(1, 1))
        assert x_axis.is_parallel_with(shifted)
        assert not x_axis.intersects_with(shifted)
        assert not x_axis.intersects_or_collinear_with(shifted)
        assert x_axis.intersects_or_collinear_with(Line(Point(4, 0), Point(9, 0)))
        assert x_axis.equals(Line(Point(4, 0), Point(9, 0)))
        assert not x_axis.equals(shifted)
        assert x_axis.contains_point(Point(-100, 0))

    def test_intersection_point(self):
        a = Line(Point(0, 0), Point(2, 2))
        b = Line(Point(0, 2), Point(2, 0))
        assert a.intersection_point_with(b).equals(Point(1, 1))
        far = Line(Point(10, 0), Point(10, 1))
        assert a.intersection_point_with(far).equals(Point(10, 10))

    def test_intersection_outcomes(self):
        x_axis = Line(Point(0, 0), Point(1, 0))
        assert x_axis.intersection_point_with(Line(Point(0, 3), Point(1, 3))) is Intersection.PARALLEL
        assert x_axis.intersection_point_with(Line(Point(7, 0), Point(8, 0))) is Intersection.COLLINEAR

    def test_intersection_with_segment(self):
        x_axis = Line(Point(0, 0), Point(1, 0))
        crossing = LineSegment(Point(5, -1), Point(5, 1))
        short = LineSegment(Point(5, 1), Point(5, 2))
        assert x_axis.intersection_point_with_line_segment(crossing).equals(Point(5, 0))
        assert x_axis.intersection_point_with_line_segment(short) is Intersection.DISJOINT
        assert x_axis.intersects_with_line_segment(crossing)
        assert not x_axis.intersects_with_line_segment(short)
        touching = LineSegment(Point(5, 0), Point(5, 2))
        assert x_axis.intersects_with_line_segment(touching)

    def test_distances(self):
        x_axis = Line(Point(0, 0), Point(1, 0))
        assert close(x_axis.distance_to(Line(Point(0, 2), Point(-1, 2))), 2)
        assert close(x_axis.distance_to(Line(Point(0, 2), Point(1, 3))), 0)
        assert close(x_axis.distance_to_point(Point(3, -4)), 4)
        assert close(x_axis.distance_to_line_segment(LineSegment(Point(0, 1), Point(1, 3))), 1)
        assert close(x_axis.distance_to_line_segment(LineSegment(Point(0, 1), Point(1, -3))), 0)

    def test_transformations(self):
        line = Line(Point(0, 0), Point(1, 0))
        rotated = line.rotate_around(Point(0, 0), math.pi / 2)
        assert rotated.end.equals(Point(0, 1))
        moved = line.translate(Point(0, 5))
        assert moved.relation_to(line) is LineRelation.PARALLEL
        assert line.reverse().start == Point(1, 0)

    def test_angle_with(self):
        line = Line(Point(0, 0), Point(1, 0))
        assert close(line.angle_with(Line(Point(0, 0), Point(0, 1))), math.pi / 2)
        assert close(line.angle_with(LineSegment(Point(3, 3), Point(4, 4))), math.pi / 4)

    def test_compare_to(self):
        line = Line(Point(0, 0), Point(1, 0))
        assert line.compare_to(Line(Point(0, 0), Point(1, 0))) == 0
        above = Line(Point(0, 1), Point(1, 1))
        assert line.compare_to(above) == -above.compare_to(line)
        steep = Line(Point(0, 0), Point(1, 1))
        assert line.compare_to(steep) == -steep.compare_to(line)
