## rectangles, axis-parallel or rotated
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

"""the ``Rectangle`` shape

====================
OVERVIEW
====================

A :class:`Rectangle` can be built two ways.

* From four vertexes given in boundary order (either winding).  They
  are validated with :func:`~commongeom.normalize.is_valid_rectangle`
  and normalized.

* From parameters, with :meth:`Rectangle.from_parameters`: a top-left
  corner, a width and a height, then an optional scale, rotation and
  translation, applied in that order.  The rotation is in *degrees*,
  counter-clockwise, around a named anchor or an arbitrary point.

anchors
=======

Every rectangle carries nine named anchor points, the corners, the
midpoints of the sides and the center, listed in :class:`Anchor`.  The
names refer to the rectangle's own frame: after a rotation
``top-left`` is still the corner that started out top-left, even if
another corner is now higher.  For a rectangle built from vertexes the
frame is the one implied by the normalized vertex order.
"""

from __future__ import annotations

import logging
import math
from enum import Enum
from typing import Dict, Iterable, List, Union

from commongeom.errors import InvalidGeometryError, UnknownAnchorError
from commongeom.normalize import Boundaries, is_valid_rectangle
from commongeom.point import ORIGIN, Point
from commongeom.relations import Location
from commongeom.segment import LineSegment
from commongeom.shapes import Shape
from commongeom.tolerance import DEFAULT_TOLERANCE, Tolerance, eq, leq

logger = logging.getLogger(__name__)


class Anchor(str, Enum):
    """Named reference points of a rectangle."""

    TOP_LEFT = 'top-left'
    TOP = 'top'
    TOP_RIGHT = 'top-right'
    LEFT = 'left'
    CENTER = 'center'
    RIGHT = 'right'
    BOTTOM_LEFT = 'bottom-left'
    BOTTOM = 'bottom'
    BOTTOM_RIGHT = 'bottom-right'

    @classmethod
    def parse(cls, name: Union[str, "Anchor"]) -> "Anchor":
        if isinstance(name, Anchor):
            return name
        try:
            return cls(str(name).strip().lower().replace('_', '-'))
        except ValueError:
            raise UnknownAnchorError(name) from None


def _midpoint(p: Point, q: Point) -> Point:
    return Point((p.x + q.x) / 2.0, (p.y + q.y) / 2.0)


def _anchors_from_corners(tl: Point, tr: Point, br: Point, bl: Point) -> Dict[Anchor, Point]:
    return {
        Anchor.TOP_LEFT: tl,
        Anchor.TOP: _midpoint(tl, tr),
        Anchor.TOP_RIGHT: tr,
        Anchor.LEFT: _midpoint(tl, bl),
        Anchor.CENTER: _midpoint(tl, br),
        Anchor.RIGHT: _midpoint(tr, br),
        Anchor.BOTTOM_LEFT: bl,
        Anchor.BOTTOM: _midpoint(bl, br),
        Anchor.BOTTOM_RIGHT: br,
    }


class Rectangle(Shape):
    """A rectangle; see the module docstring for the two constructors."""

    __slots__ = ('_anchors',)

    def __init__(self, vertexes: Iterable[Point], *, tol: Tolerance = DEFAULT_TOLERANCE):
        vertexes = list(vertexes)
        if not is_valid_rectangle(vertexes, tol=tol):
            logger.debug('rejecting invalid rectangle %s', ', '.join(str(v) for v in vertexes))
            raise InvalidGeometryError(
                'not a valid rectangle: {}'.format(', '.join(str(v) for v in vertexes)))
        super().__init__(vertexes, tol=tol)
        v0, v1, v2, v3 = self._vertexes
        if tol.y_up:
            anchors = _anchors_from_corners(v0, v1, v2, v3)
        else:
            anchors = _anchors_from_corners(v0, v3, v2, v1)
        object.__setattr__(self, '_anchors', anchors)

    @classmethod
    def _with_anchors(cls, vertexes: Iterable[Point], anchors: Dict[Anchor, Point], *,
                      tol: Tolerance) -> "Rectangle":
        ## anchors already carried through a rotation keep their names
        rect = cls(vertexes, tol=tol)
        object.__setattr__(rect, '_anchors', dict(anchors))
        return rect

    @classmethod
    def from_parameters(cls, left: float, top: float, width: float, height: float,
                        scale: float = 1.0, rotation: float = 0.0,
                        rotation_origin: Union[str, Anchor, Point] = Anchor.CENTER,
                        translation: Point = ORIGIN, *,
                        tol: Tolerance = DEFAULT_TOLERANCE) -> "Rectangle":
        """Build a rectangle from its top-left corner and size.

        The rectangle is scaled around its top-left corner, rotated by
        ``rotation`` degrees counter-clockwise around ``rotation_origin``
        (an anchor name or a point), then moved by ``translation``.
        """
        if width <= 0 or height <= 0:
            raise InvalidGeometryError('width and height must be positive: {} x {}'.format(width, height))
        if scale <= 0:
            raise InvalidGeometryError('scale must be positive: {}'.format(scale))
        w = width * scale
        h = height * scale
        dy = -h if tol.y_up else h
        tl = Point(left, top)
        tr = Point(left + w, top)
        br = Point(left + w, top + dy)
        bl = Point(left, top + dy)
        anchors = _anchors_from_corners(tl, tr, br, bl)

        if isinstance(rotation_origin, Point):
            origin = rotation_origin
        else:
            origin = anchors[Anchor.parse(rotation_origin)]
        angle = math.radians(rotation % 360)
        if angle:
            anchors = {k: p.rotate_around(origin, angle) for k, p in anchors.items()}
        if translation.x or translation.y:
            anchors = {k: p.add(translation) for k, p in anchors.items()}

        corners = [anchors[Anchor.TOP_LEFT], anchors[Anchor.TOP_RIGHT],
                   anchors[Anchor.BOTTOM_RIGHT], anchors[Anchor.BOTTOM_LEFT]]
        return cls._with_anchors(corners, anchors, tol=tol)

    @classmethod
    def from_boundaries(cls, boundaries: Boundaries, *, tol: Tolerance = DEFAULT_TOLERANCE) -> "Rectangle":
        """Axis-parallel rectangle spanning ``boundaries``."""
        b = boundaries
        return cls([Point(b.left, b.top), Point(b.right, b.top),
                    Point(b.right, b.bottom), Point(b.left, b.bottom)], tol=tol)

    def _rebuild(self, vertexes: List[Point]) -> "Rectangle":
        return Rectangle(vertexes, tol=self.tol)

    ## anchors
    ## -------

    def anchor(self, name: Union[str, Anchor]) -> Point:
        """Look up a named anchor; unknown names raise ``UnknownAnchorError``."""
        return self._anchors[Anchor.parse(name)]

    def anchors(self) -> Dict[Anchor, Point]:
        return dict(self._anchors)

    @property
    def top_left(self) -> Point:
        return self._anchors[Anchor.TOP_LEFT]

    @property
    def top_right(self) -> Point:
        return self._anchors[Anchor.TOP_RIGHT]

    @property
    def bottom_left(self) -> Point:
        return self._anchors[Anchor.BOTTOM_LEFT]

    @property
    def bottom_right(self) -> Point:
        return self._anchors[Anchor.BOTTOM_RIGHT]

    @property
    def top_side(self) -> LineSegment:
        return LineSegment(self.top_left, self.top_right, self.tol)

    @property
    def right_side(self) -> LineSegment:
        return LineSegment(self.top_right, self.bottom_right, self.tol)

    @property
    def bottom_side(self) -> LineSegment:
        return LineSegment(self.bottom_right, self.bottom_left, self.tol)

    @property
    def left_side(self) -> LineSegment:
        return LineSegment(self.bottom_left, self.top_left, self.tol)

    @property
    def width(self) -> float:
        return self.top_left.distance_to(self.top_right)

    @property
    def height(self) -> float:
        return self.top_left.distance_to(self.bottom_left)

    ## measures
    ## --------

    def area(self) -> float:
        return self.width * self.height

    def centroid(self) -> Point:
        return self._anchors[Anchor.CENTER]

    def is_parallel_to_axes(self) -> bool:
        tl = self.top_left
        tr = self.top_right
        return eq(tl.y, tr.y, tol=self.tol) or eq(tl.x, tr.x, tol=self.tol)

    ## transformations keep the anchor names attached to the same corners

    def rotate_around(self, origin: Point, angle: float) -> "Rectangle":
        return self._transformed(lambda p: p.rotate_around(origin, angle))

    def translate(self, delta: Point) -> "Rectangle":
        return self._transformed(lambda p: p.add(delta))

    def _transformed(self, fn) -> "Rectangle":
        anchors = {k: fn(p) for k, p in self._anchors.items()}
        return Rectangle._with_anchors([fn(v) for v in self._vertexes], anchors, tol=self.tol)

    ## relations
    ## ---------

    def relation_to_point(self, p: Point) -> Location:
        return p.relation_to_rectangle(self, tol=self.tol)

    def intersects_with(self, other: Shape) -> bool:
        """Do the two shapes share at least one point.

        Two axis-parallel rectangles are compared by their boundaries.
        """
        if (isinstance(other, Rectangle) and self.is_parallel_to_axes()
                and other.is_parallel_to_axes()):
            tol = self.tol
            low_self = min(self.top, self.bottom)
            high_self = max(self.top, self.bottom)
            low_other = min(other.top, other.bottom)
            high_other = max(other.top, other.bottom)
            return (leq(max(self.left, other.left), min(self.right, other.right), tol=tol)
                    and leq(max(low_self, low_other), min(high_self, high_other), tol=tol))
        return super().intersects_with(other)

    def to_polygon(self):
        from commongeom.polygon import Polygon
        return Polygon(self._vertexes, tol=self.tol)


__all__ = ['Anchor', 'Rectangle']
