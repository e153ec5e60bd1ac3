"""
Structured Log Event Types
==========================

Bounded Context: Observability Event Taxonomy

This module defines typed event names for structured logging.

Design:
- Enum-based (prevents typos, enables autocomplete)
- Hierarchical naming (component.category.action)
- Searchable in log aggregators

Event Naming Convention:
    <component>.<category>.<action>

    component: geometry, config, cli, render
    category: intersect, rectangle, command, ...
    action: found, parallel, completed, failed, ...
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - geometry.*: Intersection engine decisions
    - config.*: Configuration loading
    - cli.*: Command execution
    - render.*: Image output
    """

    # ========== Geometry Events ==========
    INTERSECT_FOUND = "geometry.intersect.found"
    """Two segments cross at a single point."""

    INTERSECT_PARALLEL = "geometry.intersect.parallel"
    """Determinant is zero: lines are parallel or coincident."""

    INTERSECT_OFF_SEGMENT = "geometry.intersect.off_segment"
    """Infinite lines cross, but outside at least one segment."""

    RECTANGLE_INTERSECTED = "geometry.rectangle.intersected"
    """Rectangle boundary crossing points computed."""

    RECTANGLE_TOUCH_DISCARDED = "geometry.rectangle.touch_discarded"
    """Lone hit on a vertex or segment endpoint dropped."""

    # ========== Config Events ==========
    CONFIG_LOADED = "config.loaded"
    """Configuration file parsed and validated."""

    JOBS_LOADED = "config.jobs.loaded"
    """Batch job file parsed and validated."""

    # ========== CLI Events ==========
    COMMAND_COMPLETED = "cli.command.completed"
    """CLI subcommand finished."""

    COMMAND_FAILED = "cli.command.failed"
    """CLI subcommand raised."""

    # ========== Render Events ==========
    RENDER_SAVED = "render.saved"
    """Rendered scene written to disk."""

