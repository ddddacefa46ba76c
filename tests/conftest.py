"""Shared test fixtures."""

from __future__ import annotations

import pytest

from svgxform.engine.session import ConversionSession, ElementRecord


# Sample path data
SQUARE_PATH = "M0,0 h10 v10 h-10 z"
RELATIVE_PATH = "M0,0 l10,0 l0,10"
ABSOLUTE_PATH = "M0,0 L10,0 L10,10"
CURVE_PATH = "M0,0 c1,1 2,2 3,3 1,1 2,2 3,3"
ARC_PATH = "M0,0 a5,5 30 0 1 10,0"

# Element records as handed over by the extraction layer
ICON_ELEMENTS = [
    ElementRecord("path", {"d": SQUARE_PATH, "transform": "translate(5,5) scale(2)", "fill": "#4ECDC4"}),
    ElementRecord("polygon", {"points": "0,0 10,0 5,8", "transform": "translate(5,5) scale(2)"}),
    ElementRecord("rect", {"x": "0", "y": "0", "width": "10", "height": "10", "transform": "translate(3,4)"}),
    ElementRecord("circle", {"cx": "1", "cy": "1", "r": "5", "transform": "scale(2)"}),
    ElementRecord("ellipse", {"cx": "0", "cy": "0", "rx": "5", "ry": "3"}),
]


@pytest.fixture
def session() -> ConversionSession:
    return ConversionSession()


@pytest.fixture
def icon_elements() -> list[ElementRecord]:
    return list(ICON_ELEMENTS)
