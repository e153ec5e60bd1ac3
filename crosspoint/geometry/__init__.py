"""
Geometry Layer
==============

Bounded Context: Pure geometric shapes and intersection queries.

Responsibilities:
- Shape representation (immutable)
- Segment/segment intersection
- Point-on-segment test
- Rectangle/segment intersection
- NO state, NO I/O, NO visualization

Design Philosophy:
- Pure functions where possible
- Immutable data structures
- Degenerate input falls through to "no intersection"
- Zero side effects (debug logging aside)
"""

from crosspoint.geometry.shapes import Point, Segment, Rectangle
from crosspoint.geometry.decimals import truncate, truncate_float
from crosspoint.geometry.engine import (
    IntersectionEngine,
    intersect,
    is_on_segment,
    intersect_rectangle,
)

__all__ = [
    "Point",
    "Segment",
    "Rectangle",
    "truncate",
    "truncate_float",
    "IntersectionEngine",
    "intersect",
    "is_on_segment",
    "intersect_rectangle",
]
