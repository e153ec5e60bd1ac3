"""
Test Configuration Loading
==========================

Usage:
    pytest test_config.py
"""

import logging
from pathlib import Path

import pytest

from crosspoint.config import CrosspointConfig, JobConfig, RenderConfig, load_jobs
from crosspoint.geometry import Point, Rectangle, Segment

EXAMPLE_JOBS = Path(__file__).parent / "config" / "jobs" / "example_jobs.yaml"
EXAMPLE_CONFIG = Path(__file__).parent / "config" / "crosspoint.yaml"


def test_defaults():
    config = CrosspointConfig()
    assert config.log_level == "WARNING"
    assert config.logging_level == logging.WARNING
    assert config.include_endpoints is False
    assert config.output_format == "json"
    assert config.render_config.canvas_wh == (800, 800)


def test_from_yaml(tmp_path):
    path = tmp_path / "crosspoint.yaml"
    path.write_text(
        "log_level: info\n"
        "include_endpoints: true\n"
        "output_format: text\n"
        "render_config:\n"
        "  canvas_wh: [320, 240]\n"
        "  point_color: [255, 0, 0]\n"
    )

    config = CrosspointConfig.from_yaml(path)

    assert config.log_level == "INFO"
    assert config.include_endpoints is True
    assert config.output_format == "text"
    assert config.render_config.canvas_wh == (320, 240)
    assert config.render_config.point_color == (255, 0, 0)


def test_example_config_loads():
    assert CrosspointConfig.from_yaml(EXAMPLE_CONFIG) == CrosspointConfig()


def test_empty_yaml_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert CrosspointConfig.from_yaml(path) == CrosspointConfig()


def test_missing_config_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        CrosspointConfig.from_yaml(tmp_path / "nope.yaml")


@pytest.mark.parametrize("kwargs", [
    {"log_level": "TRACE"},
    {"output_format": "xml"},
])
def test_invalid_config_values(kwargs):
    with pytest.raises(ValueError):
        CrosspointConfig(**kwargs)


@pytest.mark.parametrize("kwargs", [
    {"canvas_wh": (0, 100)},
    {"canvas_wh": (100, 100), "margin": 50},
    {"margin": -1},
    {"point_color": (256, 0, 0)},
    {"segment_color": (0, 0)},
    {"thickness": 0},
    {"point_radius": 0},
])
def test_invalid_render_values(kwargs):
    with pytest.raises(ValueError):
        RenderConfig(**kwargs)


def test_load_example_jobs():
    jobs = load_jobs(EXAMPLE_JOBS)

    assert [job.job_id for job in jobs] == [
        "diagonals", "shared-endpoint", "midpoint", "vertical-cut", "corner-touch",
    ]
    assert jobs[0].segments == (Segment.of((0, 0), (4, 4)), Segment.of((0, 4), (4, 0)))
    assert jobs[0].include_endpoints is None
    assert jobs[1].include_endpoints is True
    assert jobs[2].point == Point(2, 2)
    assert jobs[3].rectangle == Rectangle(0, 0, 4, 4)


def test_job_ids_default_to_index(tmp_path):
    path = tmp_path / "jobs.yaml"
    path.write_text(
        "jobs:\n"
        "  - kind: segment\n"
        "    segments: [[[0, 0], [1, 1]], [[0, 1], [1, 0]]]\n"
    )
    assert load_jobs(path)[0].job_id == "job-0"


@pytest.mark.parametrize("data", [
    {"kind": "polygon", "segments": [[[0, 0], [1, 1]]]},
    {"kind": "segment", "segments": [[[0, 0], [1, 1]]]},
    {"kind": "on_segment", "segments": [[[0, 0], [1, 1]]]},
    {"kind": "rectangle", "segments": [[[0, 0], [1, 1]]]},
    {"kind": "rectangle", "segments": [[[0, 0], [1, 1]]], "rectangle": {"x": 0}},
    {"kind": "segment", "segments": [[[0, 0, 0], [1, 1]], [[0, 1], [1, 0]]]},
])
def test_invalid_jobs(data):
    with pytest.raises(ValueError):
        JobConfig.from_dict(data)


def test_job_file_without_jobs_list(tmp_path):
    path = tmp_path / "jobs.yaml"
    path.write_text("jobs: 3\n")
    with pytest.raises(ValueError):
        load_jobs(path)


def test_job_file_with_broken_yaml(tmp_path):
    path = tmp_path / "jobs.yaml"
    path.write_text("jobs: [\n")
    with pytest.raises(ValueError):
        load_jobs(path)


def test_broken_config_yaml_is_value_error(tmp_path):
    path = tmp_path / "crosspoint.yaml"
    path.write_text("log_level: [unclosed\n")
    with pytest.raises(ValueError, match="Invalid YAML"):
        CrosspointConfig.from_yaml(path)


def test_unknown_render_key_is_value_error(tmp_path):
    path = tmp_path / "crosspoint.yaml"
    path.write_text("render_config:\n  canvas_size: [10, 10]\n")
    with pytest.raises(ValueError, match="canvas_size"):
        CrosspointConfig.from_yaml(path)


@pytest.mark.parametrize("data", [
    {"canvas_wh": [640]},
    {"canvas_wh": 640},
    {"point_color": 7},
    [1, 2],
])
def test_malformed_render_values_are_value_errors(data):
    with pytest.raises(ValueError):
        RenderConfig.from_dict(data)


@pytest.mark.parametrize("value", ['"false"', "no_thanks", "1", "''"])
def test_quoted_include_endpoints_is_rejected(tmp_path, value):
    """A string must not silently flip the endpoint policy."""
    path = tmp_path / "crosspoint.yaml"
    path.write_text(f"include_endpoints: {value}\n")
    with pytest.raises(ValueError, match="include_endpoints"):
        CrosspointConfig.from_yaml(path)


def test_job_include_endpoints_must_be_bool():
    data = {
        "kind": "segment",
        "segments": [[[0, 0], [1, 1]], [[0, 1], [1, 0]]],
        "include_endpoints": "false",
    }
    with pytest.raises(ValueError, match="include_endpoints"):
        JobConfig.from_dict(data)


def test_job_segments_are_immutable():
    job = JobConfig(
        job_id="cross",
        kind="segment",
        segments=[Segment.of((0, 0), (1, 1)), Segment.of((0, 1), (1, 0))],
    )
    assert isinstance(job.segments, tuple)
    assert hash(job) == hash(JobConfig(job_id="cross", kind="segment", segments=job.segments))
