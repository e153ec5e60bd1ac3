"""
Rendering Layer
===============

Bounded Context: Scene visualization and drawing.

Responsibilities:
- Draw rectangles and segments on a canvas
- Mark intersection points (with optional labels)
- Map world coordinates (y up) to pixels (y down)
- Pure rendering - no intersection logic, no state

Design:
- Stateless drawing functions
- Uses supervision.draw.utils and OpenCV
- Style from RenderConfig
"""

from crosspoint.rendering.visualizer import IntersectionVisualizer, CanvasTransform

__all__ = [
    "IntersectionVisualizer",
    "CanvasTransform",
]
