"""
Geometric Shapes Module
========================

Pure geometric value types - NO state, NO side effects.

Design:
- Immutable shapes (frozen dataclass pattern)
- Equality by value (exact float comparison)
- No validation: degenerate shapes are legal values
- Thread-safe by design (immutability)
"""

import math
from dataclasses import dataclass
from typing import Any, Dict, Sequence, Tuple

import numpy as np


@dataclass(frozen=True)
class Point:
    """
    Immutable 2D point.

    Attributes:
        x: Horizontal coordinate
        y: Vertical coordinate ("upper" means larger y)

    Example:
        >>> Point(2, 0) == Point(2.0, 0.0)
        True
    """

    x: float
    y: float

    def __post_init__(self):
        """Coerce coordinates to float (using object.__setattr__ for frozen)."""
        object.__setattr__(self, 'x', float(self.x))
        object.__setattr__(self, 'y', float(self.y))

    @classmethod
    def of(cls, xy: Sequence[float]) -> "Point":
        """Build a point from an (x, y) pair."""
        x, y = xy
        return cls(x, y)

    def distance(self, other: "Point") -> float:
        """Euclidean distance to another point."""
        dx = self.x - other.x
        dy = self.y - other.y
        return math.sqrt(dx * dx + dy * dy)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def to_dict(self) -> Dict[str, float]:
        return {'x': self.x, 'y': self.y}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Point":
        return cls(x=data['x'], y=data['y'])


@dataclass(frozen=True)
class Segment:
    """
    Immutable finite line segment between two endpoints.

    A degenerate segment (a == b) is accepted. Its implicit line has all-zero
    coefficients, so it never yields an intersection.

    Attributes:
        a: First endpoint
        b: Second endpoint
    """

    a: Point
    b: Point

    @classmethod
    def of(cls, a: Sequence[float], b: Sequence[float]) -> "Segment":
        """
        Build a segment from two (x, y) pairs.

        Example:
            >>> Segment.of((0, 0), (4, 4))
            Segment(a=Point(x=0.0, y=0.0), b=Point(x=4.0, y=4.0))
        """
        return cls(Point.of(a), Point.of(b))

    @property
    def endpoints(self) -> Tuple[Point, Point]:
        return (self.a, self.b)

    @property
    def length(self) -> float:
        return self.a.distance(self.b)

    def has_endpoint(self, point: Point) -> bool:
        """True if point is exactly equal to either endpoint."""
        return point == self.a or point == self.b

    def coefficients(self) -> Tuple[float, float, float]:
        """
        Implicit line form a*x + b*y = c through both endpoints.

        Returns:
            (a, b, c) with a = y2 - y1, b = x1 - x2, c = a*x1 + b*y1
        """
        a = self.b.y - self.a.y
        b = self.a.x - self.b.x
        c = a * self.a.x + b * self.a.y
        return a, b, c

    def as_array(self) -> np.ndarray:
        """2x2 array [[x1, y1], [x2, y2]]."""
        return np.array([self.a.as_tuple(), self.b.as_tuple()], dtype=float)

    def to_dict(self) -> Dict[str, Dict[str, float]]:
        return {'a': self.a.to_dict(), 'b': self.b.to_dict()}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Segment":
        return cls(a=Point.from_dict(data['a']), b=Point.from_dict(data['b']))


@dataclass(frozen=True)
class Rectangle:
    """
    Immutable axis-aligned rectangle anchored at its upper-left corner.

    Corners:
        upper-left  (x, y)           upper-right (x + width, y)
        lower-left  (x, y - height)  lower-right (x + width, y - height)

    Height extends downward (toward smaller y). Zero or negative extents are
    accepted and simply produce degenerate edges.

    Attributes:
        x: Upper-left x-coordinate
        y: Upper-left y-coordinate
        width: Extent along +x
        height: Extent along -y
    """

    x: float
    y: float
    width: float
    height: float

    def __post_init__(self):
        for name in ('x', 'y', 'width', 'height'):
            object.__setattr__(self, name, float(getattr(self, name)))

    @property
    def upper_left(self) -> Point:
        return Point(self.x, self.y)

    @property
    def upper_right(self) -> Point:
        return Point(self.x + self.width, self.y)

    @property
    def lower_left(self) -> Point:
        return Point(self.x, self.y - self.height)

    @property
    def lower_right(self) -> Point:
        return Point(self.x + self.width, self.y - self.height)

    def vertices(self) -> Tuple[Point, Point, Point, Point]:
        """Corners in order upper-left, upper-right, lower-right, lower-left."""
        return (self.upper_left, self.upper_right, self.lower_right, self.lower_left)

    def edges(self) -> Tuple[Segment, Segment, Segment, Segment]:
        """
        Boundary segments in test order: top, bottom, left, right.

        Returns:
            (upper-left -> upper-right, lower-left -> lower-right,
             upper-left -> lower-left, upper-right -> lower-right)
        """
        upper_left, upper_right = self.upper_left, self.upper_right
        lower_left, lower_right = self.lower_left, self.lower_right
        return (
            Segment(upper_left, upper_right),
            Segment(lower_left, lower_right),
            Segment(upper_left, lower_left),
            Segment(upper_right, lower_right),
        )

    def as_array(self) -> np.ndarray:
        """4x2 array of vertices, same order as vertices()."""
        return np.array([p.as_tuple() for p in self.vertices()], dtype=float)

    def to_dict(self) -> Dict[str, float]:
        return {'x': self.x, 'y': self.y, 'width': self.width, 'height': self.height}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Rectangle":
        return cls(x=data['x'], y=data['y'], width=data['width'], height=data['height'])
