"""
crosspoint CLI - Main entry point.

Provides a command-line interface to the intersection engine and renderer.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from crosspoint.config import CrosspointConfig, JobConfig, load_jobs
from crosspoint.geometry import IntersectionEngine, Point, Rectangle, Segment
from crosspoint.logging import LogEvent, StructuredLogger, create_logger
from crosspoint.rendering import IntersectionVisualizer
from crosspoint.utils import get_target_run_folder


def load_config(config_path: Optional[str]) -> CrosspointConfig:
    """
    Load CLI configuration, or defaults when no path is given.

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If the YAML or a value is invalid
        TypeError: If a value has the wrong type
    """
    if config_path is None:
        return CrosspointConfig()
    return CrosspointConfig.from_yaml(Path(config_path))


def format_point(point: Point) -> str:
    return f"({point.x:g}, {point.y:g})"


def run_job(
    engine: IntersectionEngine,
    job: JobConfig,
    default_include_endpoints: bool,
) -> Dict[str, Any]:
    """
    Execute one batch job.

    Returns:
        Result dictionary: job_id, kind and one of
        'intersection' (point or None), 'on_segment' (bool),
        'intersections' (list of points)
    """
    include_endpoints = (
        default_include_endpoints if job.include_endpoints is None
        else job.include_endpoints
    )
    result: Dict[str, Any] = {'job_id': job.job_id, 'kind': job.kind}

    if job.kind == "segment":
        point = engine.intersect(job.segments[0], job.segments[1], include_endpoints)
        result['intersection'] = point.to_dict() if point is not None else None
    elif job.kind == "on_segment":
        result['on_segment'] = engine.is_on_segment(job.point, job.segments[0], include_endpoints)
    else:  # rectangle
        points = engine.intersect_rectangle(job.rectangle, job.segments[0], include_endpoints)
        result['intersections'] = [p.to_dict() for p in points]

    return result


def format_result(result: Dict[str, Any], output_format: str) -> str:
    """Render a result dictionary as JSON or human-readable text."""
    if output_format == "json":
        return json.dumps(result)

    if 'results' in result:
        return "\n".join(
            f"{r['job_id']}: {format_result(r, output_format)}"
            for r in result['results']
        )

    if 'on_segment' in result:
        return "true" if result['on_segment'] else "false"

    if 'intersection' in result:
        point = result['intersection']
        return format_point(Point.from_dict(point)) if point else "no intersection"

    points = result.get('intersections', [])
    text = " ".join(format_point(Point.from_dict(p)) for p in points) or "no intersection"
    if 'output' in result:
        text = f"{text}\nwritten to {result['output']}"
    return text


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="crosspoint-cli",
        description="crosspoint CLI - Intersection points of segments and rectangles",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Two segments (x1 y1 x2 y2 for each)
  crosspoint-cli segment 0 0 4 4 0 4 4 0

  # Point on segment (px py, then the segment)
  crosspoint-cli on-segment 2 2 0 0 4 4 --include-endpoints

  # Rectangle (x y width height, then the segment)
  crosspoint-cli rectangle 0 0 4 4 2 1 2 -5

  # Batch from YAML
  crosspoint-cli --format text batch jobs.yaml

  # Draw rectangle, segment and crossings to an image
  crosspoint-cli render 0 0 4 4 2 1 2 -5 --output scene.png
"""
    )

    # Global arguments
    parser.add_argument(
        "--config",
        default=None,
        help="Path to crosspoint config YAML"
    )
    parser.add_argument(
        "--format",
        dest="output_format",
        choices=["json", "text"],
        default=None,
        help="Output format (default: from config, else json)"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Log level (default: from config, else WARNING)"
    )

    # Shared flag for every geometry command
    endpoints = argparse.ArgumentParser(add_help=False)
    endpoints.add_argument(
        "--include-endpoints",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Count crossings on segment endpoints / rectangle vertices (default: from config)"
    )

    # Subcommands
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    segment = subparsers.add_parser('segment', parents=[endpoints],
                                    help='Intersect two segments')
    segment.add_argument('coords', nargs=8, type=float,
                         metavar='N', help='x1 y1 x2 y2 x3 y3 x4 y4')

    on_segment = subparsers.add_parser('on-segment', parents=[endpoints],
                                       help='Test whether a point lies on a segment')
    on_segment.add_argument('coords', nargs=6, type=float,
                            metavar='N', help='px py x1 y1 x2 y2')

    rectangle = subparsers.add_parser('rectangle', parents=[endpoints],
                                      help='Intersect a rectangle with a segment')
    rectangle.add_argument('coords', nargs=8, type=float,
                           metavar='N', help='x y width height x1 y1 x2 y2')

    batch = subparsers.add_parser('batch', help='Run jobs from a YAML file')
    batch.add_argument('jobs', help='Path to jobs YAML')

    render = subparsers.add_parser('render', parents=[endpoints],
                                   help='Draw a rectangle, a segment and their crossings')
    render.add_argument('coords', nargs=8, type=float,
                        metavar='N', help='x y width height x1 y1 x2 y2')
    render.add_argument('--output', default=None,
                        help='Image path (default: ./runs/render/<timestamp>/scene.png)')

    return parser


def execute(
    args: argparse.Namespace,
    config: CrosspointConfig,
    engine: IntersectionEngine,
    logger: StructuredLogger,
) -> Dict[str, Any]:
    """Run the parsed subcommand and return its result dictionary."""
    include_endpoints = (
        config.include_endpoints if getattr(args, 'include_endpoints', None) is None
        else args.include_endpoints
    )

    if args.command == 'segment':
        c = args.coords
        point = engine.intersect(
            Segment.of(c[0:2], c[2:4]),
            Segment.of(c[4:6], c[6:8]),
            include_endpoints,
        )
        return {'intersection': point.to_dict() if point is not None else None}

    if args.command == 'on-segment':
        c = args.coords
        on = engine.is_on_segment(Point.of(c[0:2]), Segment.of(c[2:4], c[4:6]), include_endpoints)
        return {'on_segment': on}

    if args.command in ('rectangle', 'render'):
        c = args.coords
        rect = Rectangle(*c[0:4])
        segment = Segment.of(c[4:6], c[6:8])
        points = engine.intersect_rectangle(rect, segment, include_endpoints)
        result: Dict[str, Any] = {'intersections': [p.to_dict() for p in points]}

        if args.command == 'render':
            output = args.output or f"{get_target_run_folder('render')}/scene.png"
            visualizer = IntersectionVisualizer(config.render_config)
            frame = visualizer.render(rect, [segment], points)
            path = visualizer.save(frame, Path(output))
            logger.info(
                event=LogEvent.RENDER_SAVED,
                message="Scene rendered",
                metadata={'path': str(path)},
            )
            result['output'] = str(path)

        return result

    # batch
    jobs = load_jobs(Path(args.jobs))
    logger.info(
        event=LogEvent.JOBS_LOADED,
        message=f"Loaded {len(jobs)} job(s)",
        metadata={'path': args.jobs},
    )
    return {'results': [run_job(engine, job, include_endpoints) for job in jobs]}


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        config = load_config(args.config)
    except (FileNotFoundError, ValueError, TypeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    level = getattr(logging, args.log_level or config.log_level)
    logger = create_logger("cli", level=level)
    engine = IntersectionEngine(create_logger("geometry", level=level))
    output_format = args.output_format or config.output_format

    if args.config:
        logger.info(
            event=LogEvent.CONFIG_LOADED,
            message="Configuration loaded",
            metadata={'path': args.config},
        )

    # Execute command
    try:
        result = execute(args, config, engine, logger)
    except Exception as e:
        logger.error(
            event=LogEvent.COMMAND_FAILED,
            message=f"{args.command} failed",
            exc_info=e,
        )
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    logger.info(
        event=LogEvent.COMMAND_COMPLETED,
        message=f"{args.command} completed",
    )
    print(format_result(result, output_format))


if __name__ == '__main__':
    main()
