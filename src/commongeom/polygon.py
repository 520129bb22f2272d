## simple polygons
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

"""the ``Polygon`` shape

A :class:`Polygon` is a simple polygon with three or more vertexes, no
three consecutive ones collinear.  It may be concave; point location
then uses ray casting rather than the per-side test convex shapes use.

Shape-vs-shape relations are only defined for convex polygons:
:meth:`Polygon.relation_to` raises
:class:`~commongeom.errors.NonConvexError` when either operand is
concave.
"""

from __future__ import annotations

import logging
from typing import Iterable, List

from commongeom.errors import InvalidGeometryError
from commongeom.normalize import is_valid_polygon
from commongeom.point import Point
from commongeom.relations import Location
from commongeom.shapes import Shape
from commongeom.tolerance import DEFAULT_TOLERANCE, Tolerance

logger = logging.getLogger(__name__)


class Polygon(Shape):
    """Simple polygon defined by its vertexes in boundary order."""

    __slots__ = ()

    def __init__(self, vertexes: Iterable[Point], *, tol: Tolerance = DEFAULT_TOLERANCE):
        vertexes = list(vertexes)
        if not is_valid_polygon(vertexes, tol=tol):
            logger.debug('rejecting invalid polygon with %d vertexes', len(vertexes))
            raise InvalidGeometryError(
                'not a valid polygon: [{}]'.format(', '.join(str(v) for v in vertexes)))
        super().__init__(vertexes, tol=tol)

    @classmethod
    def from_points(cls, *points: Point, tol: Tolerance = DEFAULT_TOLERANCE) -> "Polygon":
        return cls(points, tol=tol)

    def _rebuild(self, vertexes: List[Point]) -> "Polygon":
        return Polygon(vertexes, tol=self.tol)

    def relation_to_point(self, p: Point) -> Location:
        if self.is_convex():
            return p.relation_to_convex_polygon(self, tol=self.tol)
        return p.relation_to_polygon(self, tol=self.tol)


__all__ = ['Polygon']
