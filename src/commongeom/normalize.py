## canonical vertex order and shape validation
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

"""vertex-list normalization and validity checks

Shapes keep their vertexes in a *canonical* order: clockwise, starting
at the top-left vertex.  The top-left vertex has the extreme y
coordinate (largest when the y axis points up, smallest when it points
down); ties go to the smallest x.  Normalizing makes shape equality
independent of the winding and starting vertex chosen by the caller.

All functions accept any sequence of objects with ``x`` and ``y``
attributes and never modify their input.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Sequence

from commongeom import orientation as orient
from commongeom.tolerance import (
    DEFAULT_TOLERANCE,
    Tolerance,
    eq,
    is_negative,
    is_positive,
    is_zero,
)


@dataclass(frozen=True)
class Boundaries:
    """Extreme coordinates of a vertex list.

    ``top`` is the largest y when the y axis points up and the smallest
    y when it points down; ``bottom`` is the other extreme.
    """

    left: float
    right: float
    top: float
    bottom: float

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return abs(self.top - self.bottom)


def signed_area(vertexes: Sequence) -> float:
    """Shoelace area; positive for counter-clockwise vertex order."""
    n = len(vertexes)
    total = 0.0
    for i in range(n):
        p = vertexes[i]
        q = vertexes[(i + 1) % n]
        total += p.x * q.y - p.y * q.x
    return total / 2.0


def is_clockwise(vertexes: Sequence, *, tol: Tolerance = DEFAULT_TOLERANCE) -> bool:
    """Is the vertex list wound clockwise.

    The winding is read from the raw sign of the signed area, which
    agrees with the turn at the first vertex for convex lists and stays
    right when that vertex is reflex.  No epsilon is applied: a shape
    small enough to pass validation still has a definite winding, and
    normalizing it twice must give the same vertex list.
    """
    if len(vertexes) < 3:
        return False
    return signed_area(vertexes) < 0


def make_clockwise(vertexes: Sequence, *, tol: Tolerance = DEFAULT_TOLERANCE) -> List:
    if is_clockwise(vertexes, tol=tol):
        return list(vertexes)
    return list(reversed(vertexes))


def find_top_left_index(vertexes: Sequence, *, tol: Tolerance = DEFAULT_TOLERANCE) -> int:
    """Index of the top-left vertex (see module docstring)."""
    best = 0
    top_left = vertexes[0]
    for i in range(1, len(vertexes)):
        v = vertexes[i]
        dy = v.y - top_left.y
        higher = is_positive(dy, tol=tol) if tol.y_up else is_negative(dy, tol=tol)
        if higher or (eq(v.y, top_left.y, tol=tol) and is_negative(v.x - top_left.x, tol=tol)):
            best = i
            top_left = v
    return best


def normalize(vertexes: Sequence, *, tol: Tolerance = DEFAULT_TOLERANCE) -> List:
    """Clockwise order, rotated so that the top-left vertex comes first.

    Idempotent: normalizing a normalized list returns an equal list.
    """
    v = make_clockwise(vertexes, tol=tol)
    k = find_top_left_index(v, tol=tol)
    return v[k:] + v[:k]


def calculate_boundaries(vertexes: Sequence, *, tol: Tolerance = DEFAULT_TOLERANCE) -> Boundaries:
    xs = [v.x for v in vertexes]
    ys = [v.y for v in vertexes]
    if tol.y_up:
        return Boundaries(min(xs), max(xs), max(ys), min(ys))
    return Boundaries(min(xs), max(xs), min(ys), max(ys))


## validation
## ----------

def _distance(p, q) -> float:
    return math.hypot(p.x - q.x, p.y - q.y)


def is_valid_triangle(vertexes: Sequence, *, tol: Tolerance = DEFAULT_TOLERANCE) -> bool:
    """Three points that are not collinear."""
    if len(vertexes) != 3:
        return False
    a, b, c = vertexes
    return not is_zero(orient.times(a, b, c), tol=tol)


def is_valid_rectangle(vertexes: Sequence, *, tol: Tolerance = DEFAULT_TOLERANCE) -> bool:
    """Four points, in boundary order, forming a rectangle.

    Opposite sides must have equal length and so must the diagonals,
    which forces right-angled corners.  The vertexes must also turn the
    same way at every corner, which rejects self-crossing orderings.
    """
    if len(vertexes) != 4:
        return False
    v0, v1, v2, v3 = vertexes
    sides = [_distance(v0, v1), _distance(v1, v2), _distance(v2, v3), _distance(v3, v0)]
    if any(is_zero(s, tol=tol) for s in sides):
        return False
    if not (eq(sides[0], sides[2], tol=tol) and eq(sides[1], sides[3], tol=tol)):
        return False
    if not eq(_distance(v0, v2), _distance(v1, v3), tol=tol):
        return False
    turns = [orient.times(vertexes[i], vertexes[i - 1], vertexes[(i + 1) % 4]) for i in range(4)]
    return all(is_positive(t, tol=tol) for t in turns) or all(is_negative(t, tol=tol) for t in turns)


def is_valid_polygon(vertexes: Sequence, *, tol: Tolerance = DEFAULT_TOLERANCE) -> bool:
    """At least three vertexes, and no three consecutive ones collinear.

    Self-intersection is not checked; simple polygons are assumed.
    """
    n = len(vertexes)
    if n < 3:
        return False
    for i in range(n):
        prev = vertexes[i - 1]
        cur = vertexes[i]
        nxt = vertexes[(i + 1) % n]
        if is_zero(orient.times(cur, prev, nxt), tol=tol):
            return False
    return True


def is_convex(vertexes: Sequence, *, tol: Tolerance = DEFAULT_TOLERANCE) -> bool:
    """Each vertex ``i+2`` is on the same side of the line through ``i, i+1``."""
    n = len(vertexes)
    if n < 3:
        return False
    relation = orient.side_of_line(vertexes[0], vertexes[1], vertexes[2], tol=tol)
    for i in range(1, n):
        side = orient.side_of_line(vertexes[i], vertexes[(i + 1) % n], vertexes[(i + 2) % n], tol=tol)
        if side is not relation:
            return False
    return True


__all__ = [
    'Boundaries',
    'signed_area',
    'is_clockwise',
    'make_clockwise',
    'find_top_left_index',
    'normalize',
    'calculate_boundaries',
    'is_valid_triangle',
    'is_valid_rectangle',
    'is_valid_polygon',
    'is_convex',
]
