"""
Test Geometry Value Types and Truncation
========================================

Usage:
    pytest test_geometry.py
"""

import math
from decimal import Decimal

import numpy as np

from crosspoint.geometry import Point, Rectangle, Segment, truncate, truncate_float


def test_point_equality_is_by_value():
    """Integer and float coordinates compare and hash equal."""
    assert Point(2, 0) == Point(2.0, 0.0)
    assert hash(Point(2, 0)) == hash(Point(2.0, 0.0))
    assert Point(2, 0) != Point(2, 0.00001)
    assert isinstance(Point(1, 2).x, float)


def test_point_distance_and_dict():
    assert Point(0, 0).distance(Point(3, 4)) == 5.0
    assert Point.from_dict(Point(1.5, -2).to_dict()) == Point(1.5, -2)
    assert Point.of([3, 4]) == Point(3, 4)


def test_segment_coefficients():
    """a = y2 - y1, b = x1 - x2, c = a*x1 + b*y1."""
    a, b, c = Segment.of((0, 4), (4, 0)).coefficients()
    assert (a, b, c) == (-4.0, -4.0, -16.0)


def test_degenerate_segment_is_accepted():
    segment = Segment.of((1, 1), (1, 1))
    assert segment.length == 0.0
    assert segment.coefficients() == (0.0, 0.0, 0.0)


def test_segment_has_endpoint_and_array():
    segment = Segment.of((0, 0), (4, 4))
    assert segment.has_endpoint(Point(4, 4))
    assert not segment.has_endpoint(Point(2, 2))
    np.testing.assert_array_equal(segment.as_array(), [[0, 0], [4, 4]])


def test_rectangle_corners_subtract_height():
    rect = Rectangle(x=0, y=0, width=4, height=4)
    assert rect.upper_left == Point(0, 0)
    assert rect.upper_right == Point(4, 0)
    assert rect.lower_left == Point(0, -4)
    assert rect.lower_right == Point(4, -4)


def test_rectangle_edges_order():
    """top, bottom, left, right."""
    top, bottom, left, right = Rectangle(1, 2, 3, 5).edges()
    assert top == Segment.of((1, 2), (4, 2))
    assert bottom == Segment.of((1, -3), (4, -3))
    assert left == Segment.of((1, 2), (1, -3))
    assert right == Segment.of((4, 2), (4, -3))


def test_rectangle_accepts_negative_extent():
    rect = Rectangle(0, 0, -2, 0)
    assert rect.lower_right == Point(-2, 0)
    assert Rectangle.from_dict(rect.to_dict()) == rect


def test_truncate_rounds_toward_zero():
    assert truncate(1.999999) == Decimal("1.99999")
    assert truncate(-0.123456) == Decimal("-0.12345")
    assert truncate(0.000019) == Decimal("0.00001")


def test_truncate_strips_trailing_zeros():
    assert str(truncate(2.0)) == "2"
    assert str(truncate(2.5)) == "2.5"


def test_truncate_large_values_keep_precision():
    assert truncate(1e30) == Decimal("1E+30")


def test_truncate_float_normalizes_negative_zero():
    value = truncate_float(-0.000001)
    assert value == 0.0
    assert math.copysign(1.0, value) == 1.0


def test_truncate_passes_non_finite_through():
    assert truncate(float("inf")).is_infinite()
    assert truncate(float("nan")).is_nan()
    assert math.isinf(truncate_float(float("-inf")))
