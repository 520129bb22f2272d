## finite, directed line segments
## Copyright (c) 2023 commongeom contributors
## All rights reserved

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""the ``LineSegment`` value type

====================
OVERVIEW
====================

A :class:`LineSegment` is a directed segment from ``start`` to ``end``.
It shares its orientation arithmetic with :class:`~commongeom.line.Line`
through :mod:`commongeom.orientation` and adds finiteness: intersection
and containment answers are restricted to the segment's extent.

Segments are parameterized over ``0 <= t <= 1``, with ``t=0`` at
``start`` and ``t=1`` at ``end``.

intersection outcomes
=====================

``intersection_point_with()`` returns either a :class:`Point` or one of
the :class:`~commongeom.relations.Intersection` values:

* ``PARALLEL`` -- parallel, not collinear
* ``COLLINEAR`` -- collinear and overlapping over more than one point;
  use ``overlap_with()`` to obtain the shared piece
* ``DISJOINT`` -- no common point

Collinear segments that share a single point (end to end) return that
point.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import List, Union

from commongeom import orientation as orient
from commongeom.errors import InvalidGeometryError
from commongeom.line import Line
from commongeom.point import Point
from commongeom.relations import Intersection, Location, SegmentRelation, Side
from commongeom.tolerance import DEFAULT_TOLERANCE, Tolerance, is_zero

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LineSegment:
    """A directed line segment with finite length."""

    start: Point
    end: Point
    tol: Tolerance = field(default=DEFAULT_TOLERANCE, compare=False, repr=False)

    def __post_init__(self):
        if self.start.equals(self.end, tol=self.tol):
            logger.debug('rejecting zero-length segment at %s', self.start)
            raise InvalidGeometryError(
                'the start point and the end point of a line segment cannot be the same: {}'.format(self.start))

    def as_line(self) -> Line:
        return Line(self.start, self.end, self.tol)

    def vector(self) -> Point:
        return self.end.subtract(self.start)

    def length(self) -> float:
        return self.start.distance_to(self.end)

    def center(self) -> Point:
        return Point((self.start.x + self.end.x) / 2, (self.start.y + self.end.y) / 2)

    def sample(self, t: float) -> Point:
        """Point at parameter ``t``; values outside ``[0, 1]`` extrapolate."""
        return Point(self.start.x + t * (self.end.x - self.start.x),
                     self.start.y + t * (self.end.y - self.start.y))

    def angle(self) -> float:
        return math.atan2(self.end.y - self.start.y, self.end.x - self.start.x)

    def angle_with(self, other) -> float:
        """Angle with another segment or a line, in radians."""
        return self.vector().angle_with(other.end.subtract(other.start))

    def reverse(self) -> "LineSegment":
        return LineSegment(self.end, self.start, self.tol)

    ## distances
    ## ---------

    def distance_to(self, other: "LineSegment") -> float:
        if self.intersects_with(other):
            return 0.0
        return min(self.start.distance_to_line_segment(other, tol=self.tol),
                   self.end.distance_to_line_segment(other, tol=self.tol),
                   other.start.distance_to_line_segment(self, tol=self.tol),
                   other.end.distance_to_line_segment(self, tol=self.tol))

    def distance_to_line(self, line: Line) -> float:
        """Zero when the segment touches or crosses ``line``."""
        r1 = self.start.relation_to_line(line, tol=self.tol)
        r2 = self.end.relation_to_line(line, tol=self.tol)
        if r1 is Side.ON or r2 is Side.ON or r1 is not r2:
            return 0.0
        return min(self.start.distance_to_line(line), self.end.distance_to_line(line))

    def distance_to_point(self, p: Point) -> float:
        return p.distance_to_line_segment(self, tol=self.tol)

    ## transformations
    ## ---------------

    def rotate(self, angle: float) -> "LineSegment":
        """Rotate around the start point by ``angle`` radians."""
        return LineSegment(self.start, self.end.rotate_around(self.start, angle), self.tol)

    def rotate_around(self, origin: Point, angle: float) -> "LineSegment":
        return LineSegment(self.start.rotate_around(origin, angle),
                           self.end.rotate_around(origin, angle), self.tol)

    def translate(self, delta: Point) -> "LineSegment":
        return LineSegment(self.start.add(delta), self.end.add(delta), self.tol)

    ## predicates
    ## ----------

    def contains_point(self, p: Point) -> bool:
        return p.is_on_line_segment(self, tol=self.tol)

    def equals(self, other: "LineSegment") -> bool:
        """Same start and same end; direction matters."""
        return (self.start.equals(other.start, tol=self.tol)
                and self.end.equals(other.end, tol=self.tol))

    def compare_to(self, other: "LineSegment") -> int:
        result = self.start.compare_to(other.start, tol=self.tol)
        if result == 0:
            result = self.end.compare_to(other.end, tol=self.tol)
        return result

    def is_parallel_with(self, other) -> bool:
        """Collinear and equal segments count as parallel."""
        return orient.are_parallel(self.start, self.end, other.start, other.end, tol=self.tol)

    def is_collinear_with(self, other) -> bool:
        return (self.is_parallel_with(other)
                and orient.is_on_line(other.start, other.end, self.start, tol=self.tol))

    def intersects_with(self, other: "LineSegment") -> bool:
        """Do the segments share at least one point.

        Equal segments, and collinear overlapping ones, intersect.
        """
        return orient.segments_intersect(self.start, self.end, other.start, other.end, tol=self.tol)

    def intersects_with_line(self, line: Line) -> bool:
        return line.intersects_with_line_segment(self)

    def relation_to(self, other: "LineSegment") -> SegmentRelation:
        if self.equals(other):
            return SegmentRelation.EQUAL
        if self.is_parallel_with(other):
            if not orient.is_on_line(other.start, other.end, self.start, tol=self.tol):
                return SegmentRelation.PARALLEL
            overlap = self.overlap_with(other)
            if overlap is None:
                return SegmentRelation.DISJOINT
            if isinstance(overlap, Point):
                return SegmentRelation.INTERSECT
            return SegmentRelation.COLLINEAR
        if self.intersects_with(other):
            return SegmentRelation.INTERSECT
        return SegmentRelation.DISJOINT

    def overlap_with(self, other: "LineSegment") -> Union["LineSegment", Point, None]:
        """The common part of two collinear segments.

        Returns a segment (directed like ``self``), a single point when
        they only touch, or ``None`` when they are not collinear or do
        not meet.
        """
        if not self.is_collinear_with(other):
            return None
        t0 = orient.parameter_of(self.start, self.end, other.start)
        t1 = orient.parameter_of(self.start, self.end, other.end)
        lo = max(0.0, min(t0, t1))
        hi = min(1.0, max(t0, t1))
        ## compare in length units so epsilon keeps its meaning
        gap = (hi - lo) * self.length()
        if gap < -self.tol.epsilon:
            return None
        if is_zero(gap, tol=self.tol):
            return self.sample(lo)
        return LineSegment(self.sample(lo), self.sample(hi), self.tol)

    def intersection_point_with(self, other: "LineSegment") -> Union[Point, Intersection]:
        if self.is_parallel_with(other):
            if not orient.is_on_line(other.start, other.end, self.start, tol=self.tol):
                return Intersection.PARALLEL
            overlap = self.overlap_with(other)
            if overlap is None:
                return Intersection.DISJOINT
            if isinstance(overlap, Point):
                return overlap
            return Intersection.COLLINEAR
        if not self.intersects_with(other):
            return Intersection.DISJOINT
        result = orient.line_intersection(self.start, self.end, other.start, other.end, tol=self.tol)
        if isinstance(result, Intersection):  # pragma: no cover - excluded by the parallel test
            return result
        return Point(*result)

    def intersection_point_with_line(self, line: Line) -> Union[Point, Intersection]:
        return line.intersection_point_with_line_segment(self)

    def is_inside_polygon(self, polygon) -> bool:
        """Does the whole segment lie within the closed region of ``polygon``.

        The segment may touch or run along the boundary.  It is split at
        every contact with the boundary and the midpoint of each piece
        is located; any proper crossing of a side, or any piece whose
        midpoint is outside, means the segment leaves the polygon.
        """
        tol = self.tol
        if (self.start.relation_to_polygon(polygon, tol=tol) is Location.OUTSIDE
                or self.end.relation_to_polygon(polygon, tol=tol) is Location.OUTSIDE):
            return False
        cuts: List[float] = [0.0, 1.0]
        for side in polygon.sides():
            if orient.segments_cross(self.start, self.end, side.start, side.end, tol=tol):
                return False
            for v in (side.start, side.end):
                if orient.is_on_segment(self.start, self.end, v, tol=tol):
                    cuts.append(orient.parameter_of(self.start, self.end, v))
        cuts.sort()
        for t0, t1 in zip(cuts, cuts[1:]):
            if is_zero((t1 - t0) * self.length(), tol=tol):
                continue
            mid = self.sample((t0 + t1) / 2)
            if mid.relation_to_polygon(polygon, tol=tol) is Location.OUTSIDE:
                return False
        return True


__all__ = ['LineSegment']
