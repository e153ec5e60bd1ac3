"""
Intersection Visualizer Module
==============================

Pure visualization layer for rectangles, segments and crossing points.

Design:
- Stateless rendering (pure functions)
- No intersection logic
- Style from RenderConfig
- Uses supervision drawing utilities, OpenCV for markers and file output

Dependencies:
- supervision (draw utilities, Color, Point)
- numpy (canvas, scene bounds)
- cv2 (circles, imwrite)
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Sequence, Tuple

import cv2
import numpy as np
import supervision as sv

from crosspoint.config import RenderConfig
from crosspoint.geometry.shapes import Point, Rectangle, Segment


def _color(rgb: Tuple[int, int, int]) -> sv.Color:
    r, g, b = rgb
    return sv.Color(r=r, g=g, b=b)


@dataclass(frozen=True)
class CanvasTransform:
    """
    World -> pixel mapping with uniform scale and flipped y axis.

    Attributes:
        min_x: World x mapped to the left of the drawing area
        max_y: World y mapped to the top of the drawing area
        scale: Pixels per world unit
        offset_x: Pixel column of min_x
        offset_y: Pixel row of max_y
    """

    min_x: float
    max_y: float
    scale: float
    offset_x: float
    offset_y: float

    @classmethod
    def fit(
        cls,
        points: np.ndarray,
        canvas_wh: Tuple[int, int],
        margin: int,
    ) -> "CanvasTransform":
        """
        Fit an Nx2 array of world points into the canvas, centered.

        Non-finite rows are ignored. Zero extents (a single point, a
        horizontal or vertical scene) are treated as one world unit.
        """
        width, height = canvas_wh
        usable = np.array([width - 2 * margin, height - 2 * margin], dtype=float)

        points = np.asarray(points, dtype=float).reshape(-1, 2)
        points = points[np.isfinite(points).all(axis=1)]
        if len(points) == 0:
            points = np.zeros((1, 2))

        mins = points.min(axis=0)
        maxs = points.max(axis=0)
        span = maxs - mins
        span = np.where(span > 0, span, 1.0)

        scale = float(np.min(usable / span))
        drawn = (maxs - mins) * scale
        offset = margin + (usable - drawn) / 2

        return cls(
            min_x=float(mins[0]),
            max_y=float(maxs[1]),
            scale=scale,
            offset_x=float(offset[0]),
            offset_y=float(offset[1]),
        )

    def to_pixel(self, point: Point) -> sv.Point:
        """Map a world point to integer pixel coordinates."""
        x = self.offset_x + (point.x - self.min_x) * self.scale
        y = self.offset_y + (self.max_y - point.y) * self.scale
        return sv.Point(x=int(round(x)), y=int(round(y)))


class IntersectionVisualizer:
    """
    Stateless visualizer for intersection scenes.

    Design Philosophy:
    - SRP: Only draws, doesn't compute
    - Configurable styles (RenderConfig)
    - Every draw_* takes the frame and returns the frame

    Usage:
        visualizer = IntersectionVisualizer(RenderConfig(canvas_wh=(640, 480)))

        frame = visualizer.render(
            rect=Rectangle(0, 0, 4, 4),
            segments=[Segment.of((2, 1), (2, -5))],
            points=[Point(2, 0), Point(2, -4)],
        )
        visualizer.save(frame, "runs/render/scene.png")
    """

    def __init__(self, config: Optional[RenderConfig] = None):
        """
        Initialize visualizer with style configuration.

        Args:
            config: Render style (default: RenderConfig())
        """
        self.config = config or RenderConfig()

    def blank_canvas(self) -> np.ndarray:
        """BGR canvas filled with the background color."""
        width, height = self.config.canvas_wh
        bgr = _color(self.config.background_color).as_bgr()
        return np.full((height, width, 3), bgr, dtype=np.uint8)

    def fit(
        self,
        rect: Optional[Rectangle],
        segments: Sequence[Segment],
        points: Sequence[Point] = (),
    ) -> CanvasTransform:
        """Transform that fits every shape of the scene in the canvas."""
        world = [np.array([p.as_tuple() for p in points], dtype=float).reshape(-1, 2)]
        world.extend(segment.as_array() for segment in segments)
        if rect is not None:
            world.append(rect.as_array())

        return CanvasTransform.fit(
            np.vstack(world),
            self.config.canvas_wh,
            self.config.margin,
        )

    def draw_rectangle(
        self,
        frame: np.ndarray,
        rect: Rectangle,
        transform: CanvasTransform,
    ) -> np.ndarray:
        """
        Draw the rectangle outline.

        Returns:
            Frame with rectangle drawn
        """
        polygon = np.array(
            [transform.to_pixel(p).as_xy_int_tuple() for p in rect.vertices()],
            dtype=np.int64,
        )
        return sv.draw_polygon(
            scene=frame,
            polygon=polygon,
            color=_color(self.config.rectangle_color),
            thickness=self.config.thickness,
        )

    def draw_segment(
        self,
        frame: np.ndarray,
        segment: Segment,
        transform: CanvasTransform,
    ) -> np.ndarray:
        """
        Draw a segment between its endpoints.

        Returns:
            Frame with segment drawn
        """
        return sv.draw_line(
            scene=frame,
            start=transform.to_pixel(segment.a),
            end=transform.to_pixel(segment.b),
            color=_color(self.config.segment_color),
            thickness=self.config.thickness,
        )

    def draw_points(
        self,
        frame: np.ndarray,
        points: Iterable[Point],
        transform: CanvasTransform,
    ) -> np.ndarray:
        """
        Mark intersection points as filled circles, optionally labelled.

        Non-finite points are skipped.

        Returns:
            Frame with points drawn
        """
        point_bgr = _color(self.config.point_color).as_bgr()

        for point in points:
            if not (np.isfinite(point.x) and np.isfinite(point.y)):
                continue

            center = transform.to_pixel(point)
            cv2.circle(
                frame,
                center.as_xy_int_tuple(),
                self.config.point_radius,
                point_bgr,
                thickness=-1,
            )

            if self.config.label_points:
                text_anchor = sv.Point(
                    x=center.x,
                    y=max(center.y - self.config.point_radius - 12, 12),
                )
                frame = sv.draw_text(
                    scene=frame,
                    text=f"({point.x:g}, {point.y:g})",
                    text_anchor=text_anchor,
                    text_color=_color(self.config.text_color),
                    text_scale=0.45,
                    text_thickness=1,
                    text_padding=4,
                    background_color=_color(self.config.background_color),
                )

        return frame

    def render(
        self,
        rect: Optional[Rectangle],
        segments: Sequence[Segment],
        points: Sequence[Point] = (),
    ) -> np.ndarray:
        """
        Draw a whole scene on a fresh canvas.

        Args:
            rect: Optional rectangle
            segments: Segments to draw
            points: Intersection points to mark

        Returns:
            BGR image of shape (height, width, 3)
        """
        transform = self.fit(rect, segments, points)
        frame = self.blank_canvas()

        if rect is not None:
            frame = self.draw_rectangle(frame, rect, transform)
        for segment in segments:
            frame = self.draw_segment(frame, segment, transform)

        return self.draw_points(frame, points, transform)

    @staticmethod
    def save(frame: np.ndarray, path: Path) -> Path:
        """
        Write the frame as an image (format from the file extension).

        Raises:
            OSError: If OpenCV cannot write the file
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        if not cv2.imwrite(str(path), frame):
            raise OSError(f"Failed to write image: {path}")
        return path
