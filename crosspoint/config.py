"""
Configuration schema for crosspoint.

This module defines the runtime settings (logging, CLI defaults, output
format, rendering style) and the batch job file consumed by
`crosspoint-cli batch`. Everything is loaded from YAML and validated at
construction.
"""

import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple
import yaml

from crosspoint.geometry.shapes import Point, Rectangle, Segment

Color = Tuple[int, int, int]

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR"}
VALID_OUTPUT_FORMATS = {"json", "text"}
VALID_JOB_KINDS = {"segment", "on_segment", "rectangle"}


def _optional_bool(name: str, value: Any) -> Optional[bool]:
    """YAML booleans only; quoted strings such as 'false' are rejected."""
    if value is not None and not isinstance(value, bool):
        raise ValueError(f"{name} must be true or false, got {value!r}")
    return value


def _validate_color(name: str, color: Color) -> None:
    if (not isinstance(color, tuple) or len(color) != 3
            or not all(0 <= channel <= 255 for channel in color)):
        raise ValueError(
            f"{name} must be an RGB triplet in [0, 255], got {color}"
        )


@dataclass(frozen=True)
class RenderConfig:
    """
    Rendering style for IntersectionVisualizer.

    Colors are RGB triplets. The scene is scaled uniformly to fit the canvas
    minus the margin on every side.
    """

    canvas_wh: Tuple[int, int] = (800, 800)  # (width, height)
    margin: int = 40
    background_color: Color = (255, 255, 255)
    rectangle_color: Color = (0, 160, 0)
    segment_color: Color = (0, 90, 255)
    point_color: Color = (220, 0, 0)
    text_color: Color = (0, 0, 0)
    thickness: int = 2
    point_radius: int = 5
    label_points: bool = True

    def __post_init__(self):
        """Validate render configuration."""
        if not isinstance(self.canvas_wh, tuple) or len(self.canvas_wh) != 2:
            raise ValueError(
                f"canvas_wh must be a (width, height) pair, got {self.canvas_wh}"
            )
        width, height = self.canvas_wh
        if not (1 <= width <= 8192 and 1 <= height <= 8192):
            raise ValueError(
                f"canvas_wh must be in [1, 8192], got {self.canvas_wh}"
            )

        if self.margin < 0 or 2 * self.margin >= min(width, height):
            raise ValueError(
                f"margin must be >= 0 and leave room on the canvas, got {self.margin}"
            )

        for name in ("background_color", "rectangle_color", "segment_color",
                     "point_color", "text_color"):
            _validate_color(name, getattr(self, name))

        if self.thickness < 1:
            raise ValueError(f"thickness must be >= 1, got {self.thickness}")

        if self.point_radius < 1:
            raise ValueError(f"point_radius must be >= 1, got {self.point_radius}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RenderConfig":
        """
        Build from a YAML mapping; sequences become tuples.

        Raises:
            ValueError: If the mapping is not a dict or has unknown keys
        """
        if not isinstance(data, dict):
            raise ValueError(f"render_config must be a mapping, got {type(data).__name__}")

        unknown = set(data) - {f.name for f in fields(cls)}
        if unknown:
            raise ValueError(f"Unknown render_config key(s): {sorted(unknown)}")

        values = {
            key: tuple(value) if isinstance(value, list) else value
            for key, value in data.items()
        }
        return cls(**values)


@dataclass(frozen=True)
class CrosspointConfig:
    """
    Top-level configuration.

    Immutable after construction (frozen dataclass).
    """

    log_level: str = "WARNING"
    include_endpoints: bool = False  # CLI default when the flag is absent
    output_format: str = "json"  # "json" or "text"
    render_config: RenderConfig = field(default_factory=RenderConfig)

    def __post_init__(self):
        """Validate configuration."""
        if not isinstance(self.include_endpoints, bool):
            raise ValueError(
                f"include_endpoints must be true or false, got {self.include_endpoints!r}"
            )

        if self.log_level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log_level: {self.log_level}. "
                f"Must be one of {sorted(VALID_LOG_LEVELS)}"
            )

        if self.output_format not in VALID_OUTPUT_FORMATS:
            raise ValueError(
                f"Invalid output_format: {self.output_format}. "
                f"Must be one of {sorted(VALID_OUTPUT_FORMATS)}"
            )

    @property
    def logging_level(self) -> int:
        """log_level as a logging module constant."""
        return getattr(logging, self.log_level)

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> "CrosspointConfig":
        """
        Load configuration from YAML file.

        Example YAML:
            log_level: "INFO"
            include_endpoints: false
            output_format: "text"

            render_config:
              canvas_wh: [1024, 768]
              margin: 32
              point_color: [255, 0, 0]
              label_points: true
        """
        path = Path(yaml_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Config root must be a mapping, got {type(data).__name__}")

        render_config = RenderConfig.from_dict(data.get("render_config") or {})

        return cls(
            log_level=str(data.get("log_level", "WARNING")).upper(),
            include_endpoints=_optional_bool("include_endpoints", data.get("include_endpoints", False)),
            output_format=data.get("output_format", "json"),
            render_config=render_config,
        )


@dataclass(frozen=True)
class JobConfig:
    """
    One batch job: an intersection query with its shapes.

    kind:
        segment     needs `segments` (exactly 2)
        on_segment  needs `point` and `segments` (exactly 1)
        rectangle   needs `rectangle` and `segments` (exactly 1)
    """

    job_id: str
    kind: str
    segments: Tuple[Segment, ...] = ()
    point: Optional[Point] = None
    rectangle: Optional[Rectangle] = None
    include_endpoints: Optional[bool] = None  # None: use CrosspointConfig default

    def __post_init__(self):
        """Validate job configuration."""
        object.__setattr__(self, 'segments', tuple(self.segments))
        _optional_bool("include_endpoints", self.include_endpoints)

        if self.kind not in VALID_JOB_KINDS:
            raise ValueError(
                f"Invalid kind for job '{self.job_id}': {self.kind}. "
                f"Must be one of {sorted(VALID_JOB_KINDS)}"
            )

        expected_segments = 2 if self.kind == "segment" else 1
        if len(self.segments) != expected_segments:
            raise ValueError(
                f"Job '{self.job_id}' ({self.kind}) needs exactly "
                f"{expected_segments} segment(s), got {len(self.segments)}"
            )

        if self.kind == "on_segment" and self.point is None:
            raise ValueError(f"Job '{self.job_id}' (on_segment) needs a point")

        if self.kind == "rectangle" and self.rectangle is None:
            raise ValueError(f"Job '{self.job_id}' (rectangle) needs a rectangle")

    @classmethod
    def from_dict(cls, data: Dict[str, Any], index: int = 0) -> "JobConfig":
        """
        Parse one job mapping.

        Segments are written as [[x1, y1], [x2, y2]], points as [x, y] and
        rectangles as {x, y, width, height}.
        """
        try:
            segments = tuple(Segment.of(a, b) for a, b in data.get("segments", []))
            point = Point.of(data["point"]) if data.get("point") is not None else None
            rectangle = (
                Rectangle.from_dict(data["rectangle"])
                if data.get("rectangle") is not None else None
            )
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Malformed shapes in job #{index}: {e}") from e

        include_endpoints = _optional_bool(
            f"include_endpoints of job #{index}", data.get("include_endpoints")
        )

        return cls(
            job_id=str(data.get("job_id", f"job-{index}")),
            kind=data.get("kind", ""),
            segments=segments,
            point=point,
            rectangle=rectangle,
            include_endpoints=include_endpoints,
        )


def load_jobs(yaml_path: Path) -> List[JobConfig]:
    """
    Load a batch job file.

    Example YAML:
        jobs:
          - job_id: "diagonals"
            kind: "segment"
            segments: [[[0, 0], [4, 4]], [[0, 4], [4, 0]]]

          - job_id: "midpoint"
            kind: "on_segment"
            point: [2, 2]
            segments: [[[0, 0], [4, 4]]]
            include_endpoints: false

          - job_id: "vertical-cut"
            kind: "rectangle"
            rectangle: {x: 0, y: 0, width: 4, height: 4}
            segments: [[[2, 1], [2, -5]]]

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If YAML or any job is invalid
    """
    path = Path(yaml_path)
    if not path.exists():
        raise FileNotFoundError(f"Job file not found: {path}")

    try:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e

    jobs_data = data.get("jobs") if isinstance(data, dict) else None
    if not isinstance(jobs_data, list):
        raise ValueError(f"Job file {path} must contain a 'jobs' list")

    return [JobConfig.from_dict(job, index) for index, job in enumerate(jobs_data)]
