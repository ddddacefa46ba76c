"""Tests for rectangle and ellipse transforms."""

import math

import pytest

from svgxform.engine import matrix as mx
from svgxform.engine.shapes import Ellipse, Rectangle, transform_ellipse, transform_rect
from svgxform.engine.transform_parser import parse_transform


def test_rect_translation_is_exact():
    assert transform_rect(0, 0, 10, 10, parse_transform("translate(3,4)")) == Rectangle(3, 4, 10, 10)


def test_rect_rotation_gives_bounding_box():
    rect = transform_rect(-5, -5, 10, 10, parse_transform("rotate(45)"))
    diag = 10 * math.sqrt(2)
    assert rect.width == pytest.approx(diag, abs=1e-6)
    assert rect.height == pytest.approx(diag, abs=1e-6)
    assert rect.x == pytest.approx(-diag / 2, abs=1e-6)
    assert rect.y == pytest.approx(-diag / 2, abs=1e-6)


def test_rect_scale():
    assert transform_rect(1, 1, 2, 2, mx.scale(2, 3)) == Rectangle(2, 3, 4, 6)


def test_rect_mirror_keeps_positive_size():
    assert transform_rect(0, 0, 10, 5, mx.scale(-1, 1)) == Rectangle(-10, 0, 10, 5)


def test_ellipse_translation_is_exact():
    assert transform_ellipse(0, 0, 5, 3, parse_transform("translate(2,2)")) == Ellipse(2, 2, 5, 3)


def test_ellipse_scale():
    assert transform_ellipse(1, 1, 5, 3, mx.scale(2, 3)) == Ellipse(2, 3, 10, 9)


def test_ellipse_rotation_keeps_radius_lengths():
    ellipse = transform_ellipse(0, 0, 5, 3, mx.rotate(90))
    assert ellipse.cx == pytest.approx(0, abs=1e-12)
    assert ellipse.cy == pytest.approx(0, abs=1e-12)
    assert ellipse.rx == pytest.approx(5)
    assert ellipse.ry == pytest.approx(3)


def test_ellipse_skew_stretches_vertical_radius():
    ellipse = transform_ellipse(0, 0, 4, 4, mx.skew_x(45))
    assert ellipse.rx == pytest.approx(4)
    assert ellipse.ry == pytest.approx(4 * math.sqrt(2))


def test_ellipse_radii_ignore_translation_part():
    ellipse = transform_ellipse(10, 10, 5, 5, parse_transform("translate(100, 50) scale(2)"))
    assert ellipse == Ellipse(120, 70, 10, 10)
