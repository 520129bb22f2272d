## shared orientation and vector-algebra core
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

"""orientation predicates shared by points, lines and segments

``Line`` and ``LineSegment`` answer nearly identical questions about
points; the only difference is whether the answer is restricted to a
finite extent.  The arithmetic lives here, once, and works on anything
with ``x`` and ``y`` attributes.  Functions that compute a new location
return a plain ``(x, y)`` tuple so this module never needs to construct
a ``Point``.

The sign convention is the usual right-handed one: a positive cross
product means a counter-clockwise (left) turn.
"""

from __future__ import annotations

import math
from typing import Tuple, Union

from commongeom.relations import Intersection, Side
from commongeom.tolerance import (
    DEFAULT_TOLERANCE,
    Tolerance,
    geq,
    is_zero,
    leq,
    sign,
)

XY = Tuple[float, float]


def cross(ux: float, uy: float, vx: float, vy: float) -> float:
    return ux * vy - uy * vx


def times(o, a, b) -> float:
    """Cross product of ``a - o`` and ``b - o``.

    Positive when ``a, o, b`` turn left (counter-clockwise), negative
    when they turn right, zero when the three points are collinear.
    """
    return (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x)


def side_of_line(start, end, p, *, tol: Tolerance = DEFAULT_TOLERANCE) -> Side:
    """Side of the directed line ``start -> end`` on which ``p`` lies."""
    r = cross(end.x - start.x, end.y - start.y, p.x - start.x, p.y - start.y)
    if is_zero(r, tol=tol):
        return Side.ON
    return Side.LEFT if r > 0 else Side.RIGHT


def within_extent(start, end, p, *, tol: Tolerance = DEFAULT_TOLERANCE) -> bool:
    """Is ``p`` inside the axis-aligned box spanned by ``start`` and ``end``.

    For a point already known to be collinear with the segment this is
    the same as its projection parameter lying in ``[0, 1]``.
    """
    return (sign(p.x - start.x, tol=tol) * sign(p.x - end.x, tol=tol) <= 0
            and sign(p.y - start.y, tol=tol) * sign(p.y - end.y, tol=tol) <= 0)


def is_on_line(start, end, p, *, tol: Tolerance = DEFAULT_TOLERANCE) -> bool:
    return side_of_line(start, end, p, tol=tol) is Side.ON


def is_on_segment(start, end, p, *, tol: Tolerance = DEFAULT_TOLERANCE) -> bool:
    return (side_of_line(start, end, p, tol=tol) is Side.ON
            and within_extent(start, end, p, tol=tol))


def side_of_segment(start, end, p, *, tol: Tolerance = DEFAULT_TOLERANCE) -> Side:
    """Like :func:`side_of_line`, but collinear points off the segment are ``BEYOND``."""
    side = side_of_line(start, end, p, tol=tol)
    if side is Side.ON and not within_extent(start, end, p, tol=tol):
        return Side.BEYOND
    return side


def parameter_of(start, end, p) -> float:
    """Parameter ``t`` of the projection of ``p`` onto ``start + t*(end - start)``."""
    dx = end.x - start.x
    dy = end.y - start.y
    return ((p.x - start.x) * dx + (p.y - start.y) * dy) / (dx * dx + dy * dy)


def projection_onto_line(start, end, p) -> XY:
    t = parameter_of(start, end, p)
    return (start.x + t * (end.x - start.x), start.y + t * (end.y - start.y))


def distance_to_line(start, end, p) -> float:
    ux = end.x - start.x
    uy = end.y - start.y
    return abs(cross(ux, uy, p.x - start.x, p.y - start.y)) / math.hypot(ux, uy)


def distance_to_segment(start, end, p, *, tol: Tolerance = DEFAULT_TOLERANCE) -> float:
    ux = end.x - start.x
    uy = end.y - start.y
    vx = p.x - start.x
    vy = p.y - start.y
    r = ux * vx + uy * vy
    if r <= 0:
        ## projection falls on the backward extension
        return math.hypot(vx, vy)
    w = ux * ux + uy * uy
    if geq(r, w, tol=tol):
        ## projection falls on the forward extension
        return math.hypot(p.x - end.x, p.y - end.y)
    return abs(cross(ux, uy, vx, vy)) / math.sqrt(w)


def boxes_overlap(a0, a1, b0, b1, *, tol: Tolerance = DEFAULT_TOLERANCE) -> bool:
    """Do the bounding boxes of segments ``a0-a1`` and ``b0-b1`` touch or overlap."""
    return (geq(max(a0.x, a1.x), min(b0.x, b1.x), tol=tol)
            and leq(min(a0.x, a1.x), max(b0.x, b1.x), tol=tol)
            and geq(max(a0.y, a1.y), min(b0.y, b1.y), tol=tol)
            and leq(min(a0.y, a1.y), max(b0.y, b1.y), tol=tol))


def segments_intersect(a0, a1, b0, b1, *, tol: Tolerance = DEFAULT_TOLERANCE) -> bool:
    """Do the closed segments ``a0-a1`` and ``b0-b1`` share at least one point.

    Bounding-box rejection first, then each segment's endpoints must lie
    on opposite sides of, or on, the other segment's line.  Touching at
    an endpoint and collinear overlap both count as intersecting.
    """
    if not boxes_overlap(a0, a1, b0, b1, tol=tol):
        return False
    s1 = sign(times(a0, b0, a1), tol=tol) * sign(times(a0, b1, a1), tol=tol)
    s2 = sign(times(b0, a0, b1), tol=tol) * sign(times(b0, a1, b1), tol=tol)
    return s1 <= 0 and s2 <= 0


def segments_cross(a0, a1, b0, b1, *, tol: Tolerance = DEFAULT_TOLERANCE) -> bool:
    """Do the segments cross at a single point interior to both."""
    s1 = sign(times(a0, b0, a1), tol=tol) * sign(times(a0, b1, a1), tol=tol)
    s2 = sign(times(b0, a0, b1), tol=tol) * sign(times(b0, a1, b1), tol=tol)
    return s1 < 0 and s2 < 0


def are_parallel(a0, a1, b0, b1, *, tol: Tolerance = DEFAULT_TOLERANCE) -> bool:
    """Are the directions ``a1 - a0`` and ``b1 - b0`` parallel (or collinear)."""
    return is_zero(cross(a1.x - a0.x, a1.y - a0.y, b1.x - b0.x, b1.y - b0.y), tol=tol)


def line_intersection(a0, a1, b0, b1, *,
                      tol: Tolerance = DEFAULT_TOLERANCE) -> Union[XY, Intersection]:
    """Intersection of the infinite lines through ``a0-a1`` and ``b0-b1``.

    Each line is written in implicit form ``A*x + B*y + C = 0`` and the
    2x2 system is solved by Cramer's rule.  A vanishing determinant
    means the lines are parallel, or collinear when one line's start
    lies on the other.
    """
    A1 = a1.y - a0.y
    B1 = a0.x - a1.x
    C1 = a1.x * a0.y - a0.x * a1.y
    A2 = b1.y - b0.y
    B2 = b0.x - b1.x
    C2 = b1.x * b0.y - b0.x * b1.y
    det = A1 * B2 - A2 * B1
    if is_zero(det, tol=tol):
        if is_on_line(b0, b1, a0, tol=tol):
            return Intersection.COLLINEAR
        return Intersection.PARALLEL
    x = (B1 * C2 - B2 * C1) / det
    y = (A2 * C1 - A1 * C2) / det
    return (x, y)


__all__ = [
    'cross',
    'times',
    'side_of_line',
    'side_of_segment',
    'within_extent',
    'is_on_line',
    'is_on_segment',
    'parameter_of',
    'projection_onto_line',
    'distance_to_line',
    'distance_to_segment',
    'boxes_overlap',
    'segments_intersect',
    'segments_cross',
    'are_parallel',
    'line_intersection',
]
