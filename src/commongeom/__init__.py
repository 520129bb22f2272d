# -*- coding: utf-8 -*-
"""commongeom: tolerant 2D geometry primitives.

Points, lines, segments, triangles, rectangles and polygons, with
epsilon-aware predicates and relation queries that return enumerated
outcomes.
"""

from importlib.metadata import PackageNotFoundError, version

from commongeom.errors import (
    ConfigurationError,
    GeometryError,
    InvalidGeometryError,
    NonConvexError,
    UnknownAnchorError,
)
from commongeom.line import Line
from commongeom.point import ORIGIN, Point
from commongeom.polygon import Polygon
from commongeom.rectangle import Anchor, Rectangle
from commongeom.relations import (
    Intersection,
    LineRelation,
    Location,
    SegmentRelation,
    ShapeRelation,
    Side,
)
from commongeom.segment import LineSegment
from commongeom.tolerance import (
    DEFAULT_TOLERANCE,
    Tolerance,
    YAxis,
    load_tolerance,
    save_tolerance,
)
from commongeom.triangle import Triangle

try:
    __version__ = version("commongeom")
except PackageNotFoundError:  # pragma: no cover - handled when package not installed
    __version__ = "unknown"

__all__ = [
    'Anchor',
    'ConfigurationError',
    'DEFAULT_TOLERANCE',
    'GeometryError',
    'Intersection',
    'InvalidGeometryError',
    'Line',
    'LineRelation',
    'LineSegment',
    'Location',
    'NonConvexError',
    'ORIGIN',
    'Point',
    'Polygon',
    'Rectangle',
    'SegmentRelation',
    'ShapeRelation',
    'Side',
    'Tolerance',
    'Triangle',
    'UnknownAnchorError',
    'YAxis',
    'load_tolerance',
    'save_tolerance',
]
