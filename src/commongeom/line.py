## infinite lines in the plane
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

"""the ``Line`` value type

A :class:`Line` has infinite length.  Two points are still needed to
define it, and they also give it a direction, ``end - start``, which is
what ``LEFT`` and ``RIGHT`` are measured against.

Two lines are :meth:`~Line.equals` when they are collinear, whatever
points were used to define them.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Union

from commongeom import orientation as orient
from commongeom.errors import InvalidGeometryError
from commongeom.point import Point
from commongeom.relations import Intersection, LineRelation, Side
from commongeom.tolerance import DEFAULT_TOLERANCE, Tolerance, is_nonzero, is_zero, sign

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Line:
    """An infinite, directed line through ``start`` and ``end``."""

    start: Point
    end: Point
    tol: Tolerance = field(default=DEFAULT_TOLERANCE, compare=False, repr=False)

    def __post_init__(self):
        if self.start.equals(self.end, tol=self.tol):
            logger.debug('rejecting line with coincident points %s', self.start)
            raise InvalidGeometryError('the two points defining a line cannot be the same: {}'.format(self.start))

    def direction(self) -> Point:
        return self.end.subtract(self.start)

    def angle(self) -> float:
        """Angle between this line's direction and the x axis, in radians."""
        return math.atan2(self.end.y - self.start.y, self.end.x - self.start.x)

    def angle_with(self, other) -> float:
        """Angle between the directions of this line and a line or segment."""
        return self.direction().angle_with(other.end.subtract(other.start))

    def reverse(self) -> "Line":
        return Line(self.end, self.start, self.tol)

    ## distances
    ## ---------

    def distance_to(self, other: "Line") -> float:
        """Shortest distance to another line.

        Zero unless the lines are parallel, in which case it is the
        perpendicular distance between them.
        """
        if self.is_parallel_with(other):
            return self.start.distance_to_line(other)
        return 0.0

    def distance_to_line_segment(self, segment) -> float:
        return segment.distance_to_line(self)

    def distance_to_point(self, p: Point) -> float:
        return p.distance_to_line(self)

    ## transformations
    ## ---------------

    def rotate_around(self, origin: Point, angle: float) -> "Line":
        return Line(self.start.rotate_around(origin, angle),
                    self.end.rotate_around(origin, angle), self.tol)

    def translate(self, delta: Point) -> "Line":
        return Line(self.start.add(delta), self.end.add(delta), self.tol)

    ## predicates
    ## ----------

    def contains_point(self, p: Point) -> bool:
        return p.is_on_line(self, tol=self.tol)

    def equals(self, other: "Line") -> bool:
        """True when the two lines are collinear."""
        return self.relation_to(other) is LineRelation.EQUAL

    def compare_to(self, other: "Line") -> int:
        """Order lines by direction, then position.

        The line whose direction has the smaller angle sorts first;
        parallel lines sort with the one on the left of ``other`` first.
        """
        u = self.direction()
        v = other.direction()
        r = v.cross(u)
        if is_zero(r, tol=self.tol):
            w = self.start.subtract(other.start)
            return sign(w.cross(v), tol=self.tol)
        return sign(r, tol=self.tol)

    def relation_to(self, other: "Line") -> LineRelation:
        if not orient.are_parallel(self.start, self.end, other.start, other.end, tol=self.tol):
            return LineRelation.INTERSECT
        if orient.is_on_line(other.start, other.end, self.start, tol=self.tol):
            return LineRelation.EQUAL
        return LineRelation.PARALLEL

    def is_parallel_with(self, other) -> bool:
        """Collinear lines are considered parallel too."""
        return orient.are_parallel(self.start, self.end, other.start, other.end, tol=self.tol)

    def intersects_with(self, other: "Line") -> bool:
        """True when the lines meet at exactly one point."""
        r = self.direction().cross(other.direction())
        return is_nonzero(r, tol=self.tol)

    def intersects_or_collinear_with(self, other: "Line") -> bool:
        return self.relation_to(other) is not LineRelation.PARALLEL

    def intersects_with_line_segment(self, segment) -> bool:
        """Does the line cross, or touch, the finite segment."""
        s1 = orient.side_of_line(self.start, self.end, segment.start, tol=self.tol)
        s2 = orient.side_of_line(self.start, self.end, segment.end, tol=self.tol)
        return s1 is Side.ON or s2 is Side.ON or s1 is not s2

    def intersection_point_with(self, other: "Line") -> Union[Point, Intersection]:
        """The unique intersection point, or ``PARALLEL`` / ``COLLINEAR``."""
        result = orient.line_intersection(self.start, self.end, other.start, other.end, tol=self.tol)
        if isinstance(result, Intersection):
            return result
        return Point(*result)

    def intersection_point_with_line_segment(self, segment) -> Union[Point, Intersection]:
        """Intersection with a segment.

        Returns the point, ``COLLINEAR`` when the segment lies on this
        line, ``PARALLEL`` when it is parallel, or ``DISJOINT`` when the
        segment stops short of the line.
        """
        result = self.intersection_point_with(segment.as_line())
        if isinstance(result, Intersection):
            return result
        if not segment.contains_point(result):
            return Intersection.DISJOINT
        return result


__all__ = ['Line']
