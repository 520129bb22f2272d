## triangles
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

"""the ``Triangle`` shape

The three vertexes are stored normalized, so ``a`` is always the
top-left vertex and ``a, b, c`` run clockwise.  Construction fails with
:class:`~commongeom.errors.InvalidGeometryError` when the points are
collinear.
"""

from __future__ import annotations

import logging
import math
from typing import Iterable, List

from commongeom.errors import InvalidGeometryError
from commongeom.normalize import is_valid_triangle
from commongeom.point import Point
from commongeom.relations import Location
from commongeom.segment import LineSegment
from commongeom.shapes import Shape
from commongeom.tolerance import DEFAULT_TOLERANCE, Tolerance

logger = logging.getLogger(__name__)


class Triangle(Shape):
    """Triangle with vertexes ``a``, ``b`` and ``c``."""

    __slots__ = ()

    def __init__(self, a: Point, b: Point, c: Point, *, tol: Tolerance = DEFAULT_TOLERANCE):
        if not is_valid_triangle([a, b, c], tol=tol):
            logger.debug('rejecting degenerate triangle %s %s %s', a, b, c)
            raise InvalidGeometryError('not a valid triangle: {}, {}, {}'.format(a, b, c))
        super().__init__([a, b, c], tol=tol)

    @classmethod
    def from_vertexes(cls, vertexes: Iterable[Point], *, tol: Tolerance = DEFAULT_TOLERANCE) -> "Triangle":
        vertexes = list(vertexes)
        if len(vertexes) != 3:
            raise InvalidGeometryError('a triangle needs exactly 3 vertexes, got {}'.format(len(vertexes)))
        return cls(*vertexes, tol=tol)

    def _rebuild(self, vertexes: List[Point]) -> "Triangle":
        return Triangle(*vertexes, tol=self.tol)

    @property
    def a(self) -> Point:
        return self._vertexes[0]

    @property
    def b(self) -> Point:
        return self._vertexes[1]

    @property
    def c(self) -> Point:
        return self._vertexes[2]

    @property
    def side_ab(self) -> LineSegment:
        return self.side(0)

    @property
    def side_bc(self) -> LineSegment:
        return self.side(1)

    @property
    def side_ca(self) -> LineSegment:
        return self.side(2)

    @property
    def angle_a(self) -> float:
        return self.angle(0)

    @property
    def angle_b(self) -> float:
        return self.angle(1)

    @property
    def angle_c(self) -> float:
        return self.angle(2)

    def area(self) -> float:
        return abs(self.b.subtract(self.a).cross(self.c.subtract(self.a))) / 2.0

    def centroid(self) -> Point:
        """Intersection of the medians, the mean of the vertexes."""
        return Point((self.a.x + self.b.x + self.c.x) / 3.0,
                     (self.a.y + self.b.y + self.c.y) / 3.0)

    @staticmethod
    def area_of_edges(a: float, b: float, c: float) -> float:
        """Heron's formula; the area of a triangle with edge lengths ``a, b, c``.

        Edge lengths that violate the triangle inequality raise
        ``InvalidGeometryError``.
        """
        if a <= 0 or b <= 0 or c <= 0 or a + b < c or b + c < a or a + c < b:
            raise InvalidGeometryError('edge lengths {}, {}, {} do not form a triangle'.format(a, b, c))
        s = (a + b + c) / 2.0
        return math.sqrt(max(0.0, s * (s - a) * (s - b) * (s - c)))

    def relation_to_point(self, p: Point) -> Location:
        return p.relation_to_triangle(self, tol=self.tol)


__all__ = ['Triangle']
