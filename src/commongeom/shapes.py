## common machinery of the composite shapes
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

"""vertex-list shape superclass and the shape-vs-shape classifier

===============
Overview
===============

:class:`Shape` is the superclass of ``Triangle``, ``Rectangle`` and
``Polygon``.  It holds a normalized tuple of vertexes (clockwise,
top-left first; see :mod:`commongeom.normalize`) together with the
tolerance the shape was validated with, and derives everything else
from them: sides, angles, area, centroid, boundaries.

Shapes are immutable.  ``rotate_around()`` and ``translate()`` build a
new shape, and re-normalize, since a rotation can change which vertex
is top-left.

shape-vs-shape relations
========================

:func:`classify_convex` decides how two convex shapes relate:

1. equal vertex lists: ``SAME``;
2. every vertex of the first on or inside the second: ``INSIDE``;
3. every vertex of the second on or inside the first: ``CONTAINS``;
4. no pair of sides meets: ``DISJOINT``;
5. sides meet, but some separating axis still has a zero-width gap
   between the two projections, so only the boundaries touch:
   ``ADJACENT``;
6. otherwise the interiors overlap: ``INTERSECT``.
"""

from __future__ import annotations

import math
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from commongeom import orientation as orient
from commongeom.errors import NonConvexError
from commongeom.normalize import (
    Boundaries,
    calculate_boundaries,
    is_convex,
    normalize,
    signed_area,
)
from commongeom.point import Point
from commongeom.relations import Location, ShapeRelation
from commongeom.segment import LineSegment
from commongeom.tolerance import DEFAULT_TOLERANCE, Tolerance, is_zero, leq, modulo


class Shape:
    """Immutable closed shape defined by a normalized vertex list."""

    __slots__ = ('_vertexes', '_tol', '_boundaries')

    def __init__(self, vertexes: Iterable[Point], *, tol: Tolerance = DEFAULT_TOLERANCE):
        vertexes = normalize(list(vertexes), tol=tol)
        object.__setattr__(self, '_vertexes', tuple(vertexes))
        object.__setattr__(self, '_tol', tol)
        object.__setattr__(self, '_boundaries', calculate_boundaries(vertexes, tol=tol))

    def __setattr__(self, name, value):
        raise AttributeError('{} is immutable'.format(type(self).__name__))

    def __delattr__(self, name):
        raise AttributeError('{} is immutable'.format(type(self).__name__))

    def __repr__(self):
        return '{}([{}])'.format(type(self).__name__,
                                 ', '.join(str(v) for v in self._vertexes))

    def __eq__(self, other):
        if not isinstance(other, Shape):
            return NotImplemented
        return type(self) is type(other) and self._vertexes == other._vertexes

    def __hash__(self):
        return hash((type(self).__name__, self._vertexes))

    def __len__(self):
        return len(self._vertexes)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._vertexes)

    ## rebuilding from transformed vertexes; subclasses validate here
    def _rebuild(self, vertexes: List[Point]) -> "Shape":
        return type(self)(vertexes, tol=self._tol)

    @property
    def tol(self) -> Tolerance:
        return self._tol

    ## accessors
    ## ---------

    def size(self) -> int:
        return len(self._vertexes)

    def vertexes(self) -> Tuple[Point, ...]:
        return self._vertexes

    def vertex(self, i: int) -> Point:
        """Vertex ``i``, indices taken modulo the number of vertexes."""
        return self._vertexes[modulo(i, len(self._vertexes))]

    def side(self, i: int) -> LineSegment:
        """Side from vertex ``i`` to vertex ``i+1`` (modulo indexing)."""
        return LineSegment(self.vertex(i), self.vertex(i + 1), self._tol)

    def sides(self) -> List[LineSegment]:
        return [self.side(i) for i in range(len(self._vertexes))]

    def angle(self, i: int) -> float:
        """Interior angle at vertex ``i``, in radians."""
        p = self.vertex(i)
        u = self.vertex(i - 1).subtract(p)
        v = self.vertex(i + 1).subtract(p)
        return u.angle_with(v)

    def angles(self) -> List[float]:
        return [self.angle(i) for i in range(len(self._vertexes))]

    ## measures
    ## --------

    def area(self) -> float:
        return abs(signed_area(self._vertexes))

    def perimeter(self) -> float:
        return sum(s.length() for s in self.sides())

    def centroid(self) -> Point:
        """Area-weighted centroid.

        This differs from the mean of the vertexes whenever the vertexes
        are unevenly spaced; for convex shapes it is always interior.
        """
        n = len(self._vertexes)
        cx = 0.0
        cy = 0.0
        area = 0.0
        for i in range(n):
            p = self._vertexes[i]
            q = self._vertexes[(i + 1) % n]
            a = p.x * q.y - q.x * p.y
            cx += (p.x + q.x) * a
            cy += (p.y + q.y) * a
            area += a
        area /= 2.0
        return Point(cx / (6.0 * area), cy / (6.0 * area))

    def center(self) -> Point:
        return self.centroid()

    @property
    def boundaries(self) -> Boundaries:
        return self._boundaries

    @property
    def left(self) -> float:
        return self._boundaries.left

    @property
    def right(self) -> float:
        return self._boundaries.right

    @property
    def top(self) -> float:
        return self._boundaries.top

    @property
    def bottom(self) -> float:
        return self._boundaries.bottom

    def bounding_rectangle(self):
        """Axis-aligned bounding ``Rectangle``."""
        from commongeom.rectangle import Rectangle
        return Rectangle.from_boundaries(self._boundaries, tol=self._tol)

    def is_convex(self) -> bool:
        return is_convex(self._vertexes, tol=self._tol)

    ## transformations
    ## ---------------

    def rotate_around(self, origin: Point, angle: float) -> "Shape":
        """Rotate counter-clockwise around ``origin`` by ``angle`` radians."""
        return self._rebuild([v.rotate_around(origin, angle) for v in self._vertexes])

    def rotate(self, angle: float) -> "Shape":
        """Rotate around the centroid."""
        return self.rotate_around(self.centroid(), angle)

    def translate(self, delta: Point) -> "Shape":
        return self._rebuild([v.add(delta) for v in self._vertexes])

    ## comparison
    ## ----------

    def equals(self, other: "Shape") -> bool:
        """Same normalized vertexes, within epsilon."""
        if len(self._vertexes) != len(other.vertexes()):
            return False
        return all(p.equals(q, tol=self._tol) for p, q in zip(self._vertexes, other.vertexes()))

    def compare_to(self, other: "Shape") -> int:
        """Lexicographic comparison of the normalized vertex lists."""
        for p, q in zip(self._vertexes, other.vertexes()):
            result = p.compare_to(q, tol=self._tol)
            if result != 0:
                return result
        n = len(self._vertexes)
        m = len(other.vertexes())
        return (n > m) - (n < m)

    ## relations
    ## ---------

    def relation_to_point(self, p: Point) -> Location:
        return p.relation_to_convex_polygon(self, tol=self._tol)

    def contains_point(self, p: Point) -> bool:
        """Inside or on the boundary."""
        return self.relation_to_point(p) is not Location.OUTSIDE

    def relation_to(self, other: "Shape") -> ShapeRelation:
        return classify_convex(self, other, tol=self._tol)

    def intersects_with(self, other: "Shape") -> bool:
        """Do the two shapes share at least one point.

        Unlike :meth:`relation_to` this works for concave shapes too: it
        only needs a side contact or one shape having a vertex within
        the other.
        """
        if sides_meet(self, other, tol=self._tol):
            return True
        return (other.relation_to_point(self.vertex(0)) is not Location.OUTSIDE
                or self.relation_to_point(other.vertex(0)) is not Location.OUTSIDE)


## the convex classifier
## ---------------------

def _vertexes_within(candidate: Sequence[Point], container: Shape, tol: Tolerance) -> bool:
    return all(p.relation_to_convex_polygon(container, tol=tol) is not Location.OUTSIDE
               for p in candidate)


def _edge_normals(vertexes: Sequence[Point]) -> Iterator[Tuple[float, float]]:
    n = len(vertexes)
    for i in range(n):
        p = vertexes[i]
        q = vertexes[(i + 1) % n]
        dx = q.x - p.x
        dy = q.y - p.y
        length = math.hypot(dx, dy)
        yield (-dy / length, dx / length)


def _project(vertexes: Sequence[Point], axis: Tuple[float, float]) -> Tuple[float, float]:
    values = [v.x * axis[0] + v.y * axis[1] for v in vertexes]
    return min(values), max(values)


def separating_gap(a: Sequence[Point], b: Sequence[Point]) -> float:
    """Largest gap between the projections of two convex vertex lists.

    Positive means the shapes are apart, zero that they touch, negative
    that they overlap by at least that much along every candidate axis.
    """
    best = -math.inf
    for axis in list(_edge_normals(a)) + list(_edge_normals(b)):
        amin, amax = _project(a, axis)
        bmin, bmax = _project(b, axis)
        best = max(best, bmin - amax, amin - bmax)
    return best


def sides_meet(a: Shape, b: Shape, *, tol: Optional[Tolerance] = None) -> bool:
    """Does any side of ``a`` share a point with any side of ``b``."""
    tol = tol or a.tol
    va = a.vertexes()
    vb = b.vertexes()
    for i in range(len(va)):
        p0 = va[i]
        p1 = va[(i + 1) % len(va)]
        for j in range(len(vb)):
            if orient.segments_intersect(p0, p1, vb[j], vb[(j + 1) % len(vb)], tol=tol):
                return True
    return False


def classify_convex(a: Shape, b: Shape, *, tol: Tolerance = DEFAULT_TOLERANCE) -> ShapeRelation:
    """Relation between two convex shapes (see module docstring).

    Raises ``NonConvexError`` if either shape is concave.
    """
    for shape in (a, b):
        if not shape.is_convex():
            raise NonConvexError('shape relations need convex shapes: {!r}'.format(shape))
    if a.equals(b):
        return ShapeRelation.SAME
    if _vertexes_within(a.vertexes(), b, tol):
        return ShapeRelation.INSIDE
    if _vertexes_within(b.vertexes(), a, tol):
        return ShapeRelation.CONTAINS
    if not sides_meet(a, b, tol=tol):
        return ShapeRelation.DISJOINT
    gap = separating_gap(a.vertexes(), b.vertexes())
    if is_zero(gap, tol=tol) or not leq(gap, 0.0, tol=tol):
        return ShapeRelation.ADJACENT
    return ShapeRelation.INTERSECT


__all__ = [
    'Shape',
    'classify_convex',
    'separating_gap',
    'sides_meet',
]
