"""
crosspoint v1.0
===============

Bounded Context: Intersection points of segments and rectangles.

Design Philosophy:
- Separation of Concerns: Geometry, Rendering, Logging separated
- Immutable value types, pure operations
- Fixed 5-decimal truncation instead of exact arithmetic
- Degenerate input is never an error: results are None or []

Architecture:

    crosspoint/
    ├── geometry/          # Pure geometry (immutable, stateless)
    │   ├── shapes.py      # Point, Segment, Rectangle
    │   ├── decimals.py    # Shared 5-decimal truncation
    │   └── engine.py      # IntersectionEngine
    │
    ├── rendering/         # Visualization (stateless drawing)
    │   └── visualizer.py  # IntersectionVisualizer
    │
    ├── logging/           # Structured JSON logging
    └── config.py          # YAML configuration and batch jobs

Usage:

    from crosspoint import Point, Segment, Rectangle, IntersectionEngine

    engine = IntersectionEngine()

    # 1. Two segments
    engine.intersect(Segment.of((0, 0), (4, 4)), Segment.of((0, 4), (4, 0)))
    # Point(x=2.0, y=2.0)

    # 2. Point on segment
    engine.is_on_segment(Point(2, 2), Segment.of((0, 0), (4, 4)), include_endpoints=False)
    # True

    # 3. Rectangle boundary
    engine.intersect_rectangle(
        Rectangle(x=0, y=0, width=4, height=4),
        Segment.of((2, 1), (2, -5)),
        include_endpoints=False,
    )
    # [Point(x=2.0, y=0.0), Point(x=2.0, y=-4.0)]

    # 4. Visualize
    from crosspoint import IntersectionVisualizer

    frame = IntersectionVisualizer().render(rect, [segment], points)
"""

# Geometry Layer (immutable, stateless)
from crosspoint.geometry import (
    Point,
    Segment,
    Rectangle,
    IntersectionEngine,
    intersect,
    is_on_segment,
    intersect_rectangle,
)

# Configuration
from crosspoint.config import CrosspointConfig, RenderConfig, JobConfig, load_jobs

# Rendering Layer (stateless)
from crosspoint.rendering import IntersectionVisualizer

__all__ = [
    # Geometry
    "Point",
    "Segment",
    "Rectangle",
    "IntersectionEngine",
    "intersect",
    "is_on_segment",
    "intersect_rectangle",
    # Configuration
    "CrosspointConfig",
    "RenderConfig",
    "JobConfig",
    "load_jobs",
    # Rendering
    "IntersectionVisualizer",
]

__version__ = "1.0.0"
