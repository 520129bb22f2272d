## points and free vectors in the plane
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

"""the ``Point`` value type

====================
OVERVIEW
====================

A :class:`Point` is an immutable pair of coordinates.  Depending on
context it is a position or a free vector; the vector algebra
(``add``, ``subtract``, ``cross``, ``dot``, ...) treats it as the
latter.

Most of the relational logic of **commongeom** is expressed here as
methods that take a point and a shape, *e.g.* ``p.relation_to_line(l)``
or ``p.relation_to_polygon(poly)``.  They return values of the
enumerations in :mod:`commongeom.relations`, never bare booleans,
because lying *on* a boundary is a first-class outcome.

equality
========

``Point.__eq__`` (from the dataclass) is exact and consistent with
``__hash__``, so points can be dictionary keys.  Geometric code should
use :meth:`Point.equals`, which compares within epsilon.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Optional

from commongeom import orientation as orient
from commongeom.errors import InvalidGeometryError
from commongeom.relations import Location, Side
from commongeom.tolerance import (
    DEFAULT_TOLERANCE,
    Tolerance,
    eq,
    geq,
    is_zero,
    leq,
    lt,
    sign,
)


def _shape_tol(tol: Optional[Tolerance], shape) -> Tolerance:
    if tol is not None:
        return tol
    return getattr(shape, 'tol', DEFAULT_TOLERANCE)


@dataclass(frozen=True)
class Point:
    """A point, or a vector, in the plane."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: "Point") -> "Point":
        return self.add(other)

    def __sub__(self, other: "Point") -> "Point":
        return self.subtract(other)

    def __neg__(self) -> "Point":
        return Point(-self.x, -self.y)

    def __mul__(self, k: float) -> "Point":
        return self.scale(k)

    __rmul__ = __mul__

    def __str__(self) -> str:
        return '({:g}, {:g})'.format(self.x, self.y)

    ## vector algebra
    ## --------------

    def is_origin(self, *, tol: Tolerance = DEFAULT_TOLERANCE) -> bool:
        return is_zero(self.x, tol=tol) and is_zero(self.y, tol=tol)

    def add(self, off: "Point") -> "Point":
        return Point(self.x + off.x, self.y + off.y)

    def subtract(self, off: "Point") -> "Point":
        return Point(self.x - off.x, self.y - off.y)

    def scale(self, k: float) -> "Point":
        return Point(self.x * k, self.y * k)

    def translate(self, delta: "Point") -> "Point":
        return self.add(delta)

    def cross(self, p: "Point") -> float:
        return self.x * p.y - self.y * p.x

    def dot(self, p: "Point") -> float:
        return self.x * p.x + self.y * p.y

    def norm(self) -> float:
        """Length of the vector, i.e. distance from the origin."""
        return math.hypot(self.x, self.y)

    def angle(self) -> float:
        """Angle of the vector with the positive x axis, in radians."""
        return math.atan2(self.y, self.x)

    def angle_with(self, p: "Point") -> float:
        """Unsigned angle between two vectors, in radians (``0..pi``).

        Raises :class:`~commongeom.errors.InvalidGeometryError` if either
        vector is zero.
        """
        if (self.x == 0 and self.y == 0) or (p.x == 0 and p.y == 0):
            raise InvalidGeometryError('no angle with a zero vector')
        return math.atan2(abs(self.cross(p)), self.dot(p))

    def rotate_around(self, origin: "Point", angle: float) -> "Point":
        """Rotate counter-clockwise around ``origin`` by ``angle`` radians."""
        return self._rotate(origin, math.sin(angle), math.cos(angle))

    def rotate(self, angle: float) -> "Point":
        return self._rotate(Point(0.0, 0.0), math.sin(angle), math.cos(angle))

    def _rotate(self, o: "Point", sin: float, cos: float) -> "Point":
        dx = self.x - o.x
        dy = self.y - o.y
        return Point(o.x + dx * cos - dy * sin, o.y + dx * sin + dy * cos)

    def times(self, p1: "Point", p2: "Point") -> float:
        """Cross product of ``p1 - self`` and ``p2 - self``.

        Positive when ``p1, self, p2`` turn counter-clockwise, negative
        when they turn clockwise, zero (within epsilon) when collinear.
        """
        return orient.times(self, p1, p2)

    ## comparison
    ## ----------

    def equals(self, p: "Point", *, tol: Tolerance = DEFAULT_TOLERANCE) -> bool:
        return eq(self.x, p.x, tol=tol) and eq(self.y, p.y, tol=tol)

    def compare_to(self, p: "Point", *, tol: Tolerance = DEFAULT_TOLERANCE) -> int:
        """Order by x coordinate, then by y coordinate, within epsilon."""
        if not eq(self.x, p.x, tol=tol):
            return -1 if self.x < p.x else 1
        if not eq(self.y, p.y, tol=tol):
            return -1 if self.y < p.y else 1
        return 0

    ## distances
    ## ---------

    def distance_to(self, other: "Point") -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def distance_to_line(self, line) -> float:
        """Distance to a ``Line`` (a segment is treated as its line)."""
        return orient.distance_to_line(line.start, line.end, self)

    def distance_to_line_segment(self, segment, *, tol: Optional[Tolerance] = None) -> float:
        return orient.distance_to_segment(segment.start, segment.end, self,
                                          tol=_shape_tol(tol, segment))

    ## lines and segments
    ## ------------------

    def is_on_line(self, line, *, tol: Optional[Tolerance] = None) -> bool:
        return orient.is_on_line(line.start, line.end, self, tol=_shape_tol(tol, line))

    def is_on_line_segment(self, segment, *, tol: Optional[Tolerance] = None) -> bool:
        return orient.is_on_segment(segment.start, segment.end, self,
                                    tol=_shape_tol(tol, segment))

    def relation_to_line(self, line, *, tol: Optional[Tolerance] = None) -> Side:
        """``LEFT``, ``RIGHT`` or ``ON`` with respect to the directed line."""
        return orient.side_of_line(line.start, line.end, self, tol=_shape_tol(tol, line))

    def relation_to_line_segment(self, segment, *, tol: Optional[Tolerance] = None) -> Side:
        """Side test restricted to the segment's extent.

        ``ON`` requires the point to lie between the endpoints; a
        collinear point outside them is ``BEYOND``.
        """
        return orient.side_of_segment(segment.start, segment.end, self,
                                      tol=_shape_tol(tol, segment))

    def projection_to_line(self, line) -> "Point":
        """Foot of the perpendicular dropped from this point onto ``line``."""
        return Point(*orient.projection_onto_line(line.start, line.end, self))

    def symmetry_point_to_line(self, line) -> "Point":
        """Mirror image of this point across ``line``."""
        foot = self.projection_to_line(line)
        return Point(2 * foot.x - self.x, 2 * foot.y - self.y)

    ## convex shapes
    ## -------------

    def _relation_to_convex(self, sides, reference: "Point", tol: Tolerance) -> Location:
        ## the reference point is interior, so every side must agree with it
        for side in sides:
            if orient.is_on_segment(side.start, side.end, self, tol=tol):
                return Location.ON
            if (orient.side_of_line(side.start, side.end, self, tol=tol)
                    is not orient.side_of_line(side.start, side.end, reference, tol=tol)):
                return Location.OUTSIDE
        return Location.INSIDE

    def relation_to_triangle(self, triangle, *, tol: Optional[Tolerance] = None) -> Location:
        tol = _shape_tol(tol, triangle)
        return self._relation_to_convex(triangle.sides(), triangle.centroid(), tol)

    def is_inside_triangle(self, triangle, *, tol: Optional[Tolerance] = None) -> bool:
        return self.relation_to_triangle(triangle, tol=tol) is Location.INSIDE

    def is_on_triangle(self, triangle, *, tol: Optional[Tolerance] = None) -> bool:
        return self.relation_to_triangle(triangle, tol=tol) is Location.ON

    def is_outside_triangle(self, triangle, *, tol: Optional[Tolerance] = None) -> bool:
        return self.relation_to_triangle(triangle, tol=tol) is Location.OUTSIDE

    def relation_to_rectangle(self, rectangle, *, tol: Optional[Tolerance] = None) -> Location:
        """Locate this point relative to a rectangle, rotated or not.

        Axis-parallel rectangles take a fast path comparing coordinates
        against the boundaries directly.
        """
        tol = _shape_tol(tol, rectangle)
        if rectangle.is_parallel_to_axes():
            low = min(rectangle.top, rectangle.bottom)
            high = max(rectangle.top, rectangle.bottom)
            if not (geq(self.x, rectangle.left, tol=tol)
                    and leq(self.x, rectangle.right, tol=tol)
                    and geq(self.y, low, tol=tol)
                    and leq(self.y, high, tol=tol)):
                return Location.OUTSIDE
            if (eq(self.x, rectangle.left, tol=tol)
                    or eq(self.x, rectangle.right, tol=tol)
                    or eq(self.y, low, tol=tol)
                    or eq(self.y, high, tol=tol)):
                return Location.ON
            return Location.INSIDE
        return self._relation_to_convex(rectangle.sides(), rectangle.centroid(), tol)

    def is_inside_rectangle(self, rectangle, *, tol: Optional[Tolerance] = None) -> bool:
        return self.relation_to_rectangle(rectangle, tol=tol) is Location.INSIDE

    def is_on_rectangle(self, rectangle, *, tol: Optional[Tolerance] = None) -> bool:
        return self.relation_to_rectangle(rectangle, tol=tol) is Location.ON

    def is_outside_rectangle(self, rectangle, *, tol: Optional[Tolerance] = None) -> bool:
        return self.relation_to_rectangle(rectangle, tol=tol) is Location.OUTSIDE

    def relation_to_convex_polygon(self, convex, *, tol: Optional[Tolerance] = None) -> Location:
        """Locate this point relative to a convex polygon.

        The result is meaningless if ``convex`` is not actually convex;
        use :meth:`relation_to_polygon` for arbitrary simple polygons.
        """
        tol = _shape_tol(tol, convex)
        return self._relation_to_convex(convex.sides(), convex.centroid(), tol)

    def is_inside_convex_polygon(self, convex, *, tol: Optional[Tolerance] = None) -> bool:
        return self.relation_to_convex_polygon(convex, tol=tol) is Location.INSIDE

    def is_on_convex_polygon(self, convex, *, tol: Optional[Tolerance] = None) -> bool:
        return self.relation_to_convex_polygon(convex, tol=tol) is Location.ON

    def is_outside_convex_polygon(self, convex, *, tol: Optional[Tolerance] = None) -> bool:
        return self.relation_to_convex_polygon(convex, tol=tol) is Location.OUTSIDE

    ## general polygons
    ## ----------------

    def relation_to_polygon(self, polygon, *, tol: Optional[Tolerance] = None) -> Location:
        """Locate this point relative to a simple polygon by ray casting.

        A horizontal ray runs from this point to ``(-infinity, y)`` and
        the edges it crosses are counted; an odd count means inside.

        * an edge containing the point makes the answer ``ON``;
        * edges parallel to the ray are skipped;
        * an edge with an endpoint lying on the ray is counted only when
          its *other* endpoint is below, so a ray grazing a vertex is
          counted either twice or not at all, never once by accident.
        """
        tol = _shape_tol(tol, polygon)
        far = -tol.infinity
        count = 0
        for side in polygon.sides():
            s = side.start
            e = side.end
            if orient.is_on_segment(s, e, self, tol=tol):
                return Location.ON
            if eq(s.y, e.y, tol=tol):
                continue
            if self._is_on_ray(s, far, tol):
                if s.y > e.y:
                    count += 1
            elif self._is_on_ray(e, far, tol):
                if e.y > s.y:
                    count += 1
            elif sign(s.y - self.y, tol=tol) * sign(e.y - self.y, tol=tol) < 0:
                ## the edge straddles the ray's line; find where
                t = (self.y - s.y) / (e.y - s.y)
                xi = s.x + t * (e.x - s.x)
                if lt(xi, self.x, tol=tol) and xi >= far:
                    count += 1
        return Location.INSIDE if count % 2 == 1 else Location.OUTSIDE

    def _is_on_ray(self, v: "Point", far: float, tol: Tolerance) -> bool:
        return (eq(v.y, self.y, tol=tol)
                and leq(v.x, self.x, tol=tol)
                and geq(v.x, far, tol=tol))

    def is_inside_polygon(self, polygon, *, tol: Optional[Tolerance] = None) -> bool:
        return self.relation_to_polygon(polygon, tol=tol) is Location.INSIDE

    def is_on_polygon(self, polygon, *, tol: Optional[Tolerance] = None) -> bool:
        return self.relation_to_polygon(polygon, tol=tol) is Location.ON

    def is_outside_polygon(self, polygon, *, tol: Optional[Tolerance] = None) -> bool:
        return self.relation_to_polygon(polygon, tol=tol) is Location.OUTSIDE


ORIGIN = Point(0.0, 0.0)


__all__ = ['Point', 'ORIGIN']
