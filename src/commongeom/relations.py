"""Closed sets of outcomes returned by the relation queries."""

from __future__ import annotations

from enum import Enum


class Side(Enum):
    """Where a point lies relative to a directed line or segment.

    ``BEYOND`` is only produced for segments: the point is on the
    supporting line but outside the segment's extent.
    """

    LEFT = 'left'
    RIGHT = 'right'
    ON = 'on'
    BEYOND = 'beyond'

    def mirrored(self) -> "Side":
        """The side seen from the reversed line."""
        if self is Side.LEFT:
            return Side.RIGHT
        if self is Side.RIGHT:
            return Side.LEFT
        return self


class Location(Enum):
    """Where a point lies relative to a closed shape."""

    INSIDE = 'inside'
    OUTSIDE = 'outside'
    ON = 'on'


class LineRelation(Enum):
    """Relation between two infinite lines. ``EQUAL`` means collinear."""

    EQUAL = 'equal'
    PARALLEL = 'parallel'
    INTERSECT = 'intersect'


class SegmentRelation(Enum):
    """Relation between two line segments.

    ``COLLINEAR`` is reserved for collinear segments that overlap over
    more than a single point; collinear segments meeting at exactly one
    point ``INTERSECT``, and collinear segments with a gap are
    ``DISJOINT``.
    """

    EQUAL = 'equal'
    COLLINEAR = 'collinear'
    PARALLEL = 'parallel'
    INTERSECT = 'intersect'
    DISJOINT = 'disjoint'


class Intersection(Enum):
    """Non-point results of an intersection-point computation."""

    PARALLEL = 'parallel'
    COLLINEAR = 'collinear'
    DISJOINT = 'disjoint'


class ShapeRelation(Enum):
    """Relation between two convex shapes.

    ``INSIDE`` means the receiver lies within the argument, ``CONTAINS``
    the reverse.  ``ADJACENT`` shapes touch along their boundaries
    (a shared vertex or a shared piece of side) without overlapping
    interiors.
    """

    SAME = 'same'
    INSIDE = 'inside'
    CONTAINS = 'contains'
    INTERSECT = 'intersect'
    ADJACENT = 'adjacent'
    DISJOINT = 'disjoint'


__all__ = [
    'Side',
    'Location',
    'LineRelation',
    'SegmentRelation',
    'Intersection',
    'ShapeRelation',
]
