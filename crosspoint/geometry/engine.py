"""
Intersection Engine Module
==========================

Stateless intersection logic over immutable shapes.

Design:
- Cramer's rule on the implicit line form a*x + b*y = c
- Candidate points truncated to 5 decimals before membership tests
- Distance-sum test decides segment membership (finite vs infinite line)
- Rectangle intersection delegates edge by edge to segment intersection
- No exceptions for degenerate input: results are None or []

Endpoint policy:
    include_endpoints=False rejects a crossing that sits exactly on a segment
    endpoint. For rectangles the rule is applied once, to the aggregate
    result: a lone hit on a vertex or on an endpoint of the input segment is a
    touch, not a crossing. Two or more hits always pass.
"""

import logging
from decimal import Decimal
from typing import List, Optional

from crosspoint.geometry import decimals
from crosspoint.geometry.shapes import Point, Rectangle, Segment
from crosspoint.logging import LogEvent, StructuredLogger, create_logger

TOLERANCE = Decimal("0.00001")
"""The only non-zero distance-sum mismatch is_on_segment accepts."""


class IntersectionEngine:
    """
    Computes segment/segment and rectangle/segment intersections.

    Design Philosophy:
    - Pure functions behind instance methods (the logger is the only attribute)
    - Safe to share across threads
    - Decisions logged at DEBUG

    Usage:
        engine = IntersectionEngine()

        point = engine.intersect(
            Segment.of((0, 0), (4, 4)),
            Segment.of((0, 4), (4, 0)),
        )
        # Point(x=2.0, y=2.0)

        points = engine.intersect_rectangle(
            Rectangle(0, 0, 4, 4),
            Segment.of((2, 1), (2, -5)),
            include_endpoints=False,
        )
        # [Point(x=2.0, y=0.0), Point(x=2.0, y=-4.0)]
    """

    def __init__(self, logger: Optional[StructuredLogger] = None):
        """
        Args:
            logger: Structured logger (default: "geometry" at WARNING)
        """
        self.logger = logger or create_logger("geometry", level=logging.WARNING)

    def intersect(
        self,
        segment_a: Segment,
        segment_b: Segment,
        include_endpoints: bool = False,
    ) -> Optional[Point]:
        """
        Find the crossing point of two finite segments.

        Args:
            segment_a: First segment
            segment_b: Second segment
            include_endpoints: Accept a crossing on a segment endpoint

        Returns:
            Crossing point truncated to 5 decimals, or None when the lines
            are parallel/coincident or cross outside either segment.
        """
        a1, b1, c1 = segment_a.coefficients()
        a2, b2, c2 = segment_b.coefficients()

        determinant = a1 * b2 - a2 * b1
        if determinant == 0:
            self.logger.debug(
                event=LogEvent.INTERSECT_PARALLEL,
                message="Lines are parallel or coincident",
                metadata={'a': segment_a.to_dict(), 'b': segment_b.to_dict()},
            )
            return None

        x = (b2 * c1 - b1 * c2) / determinant
        y = (a1 * c2 - a2 * c1) / determinant
        candidate = Point(decimals.truncate_float(x), decimals.truncate_float(y))

        if not (self.is_on_segment(candidate, segment_a, include_endpoints)
                and self.is_on_segment(candidate, segment_b, include_endpoints)):
            self.logger.debug(
                event=LogEvent.INTERSECT_OFF_SEGMENT,
                message="Lines cross outside the segments",
                metadata={'candidate': candidate.to_dict(), 'include_endpoints': include_endpoints},
            )
            return None

        self.logger.debug(
            event=LogEvent.INTERSECT_FOUND,
            message="Segments intersect",
            metadata={'point': candidate.to_dict(), 'include_endpoints': include_endpoints},
        )
        return candidate

    def is_on_segment(
        self,
        point: Point,
        segment: Segment,
        include_endpoints: bool,
    ) -> bool:
        """
        Test whether a point lies on a finite segment.

        The point is on the segment when its distances to both endpoints sum
        to the segment length. Each distance and the length are truncated to
        5 decimals first; the sum must then equal the length exactly or differ
        from it by exactly 0.00001. A mismatch of 0.00002 is rejected.

        Args:
            point: Point to test
            segment: Finite segment
            include_endpoints: If False, both endpoints are reported as off
                the segment

        Returns:
            True if the point lies on the segment
        """
        if not include_endpoints and segment.has_endpoint(point):
            return False

        distance_sum = decimals.add(
            decimals.truncate(point.distance(segment.a)),
            decimals.truncate(point.distance(segment.b)),
        )
        length = decimals.truncate(segment.length)

        return (distance_sum == length
                or decimals.abs_difference(distance_sum, length) == TOLERANCE)

    def intersect_rectangle(
        self,
        rect: Rectangle,
        segment: Segment,
        include_endpoints: bool,
    ) -> List[Point]:
        """
        Find where a segment crosses the boundary of a rectangle.

        Args:
            rect: Axis-aligned rectangle
            segment: Finite segment
            include_endpoints: If False, a single hit that only touches a
                rectangle vertex or ends on the boundary is dropped

        Returns:
            Distinct crossing points in edge order (top, bottom, left, right),
            not in order along the segment. Empty if none.
        """
        edges = rect.edges()

        points: List[Point] = []
        for edge in edges:
            point = self.intersect(edge, segment, include_endpoints=True)
            if point is not None and point not in points:
                points.append(point)

        if include_endpoints or len(points) != 1:
            self._log_rectangle(points, include_endpoints)
            return points

        point = points[0]
        if segment.has_endpoint(point) or any(edge.has_endpoint(point) for edge in edges):
            self.logger.debug(
                event=LogEvent.RECTANGLE_TOUCH_DISCARDED,
                message="Single hit only touches a vertex or segment endpoint",
                metadata={'point': point.to_dict()},
            )
            return []

        self._log_rectangle(points, include_endpoints)
        return points

    def _log_rectangle(self, points: List[Point], include_endpoints: bool) -> None:
        self.logger.debug(
            event=LogEvent.RECTANGLE_INTERSECTED,
            message=f"Segment crosses rectangle boundary at {len(points)} point(s)",
            metadata={
                'points': [p.to_dict() for p in points],
                'include_endpoints': include_endpoints,
            },
        )


# Module-level convenience API bound to a shared default engine
_default_engine = IntersectionEngine()

intersect = _default_engine.intersect
is_on_segment = _default_engine.is_on_segment
intersect_rectangle = _default_engine.intersect_rectangle
