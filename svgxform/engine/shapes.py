"""Rectangle and ellipse transforms.

Both shapes stay axis-aligned after transformation. Under rotation or skew this
is an approximation: a rectangle becomes the bounding box of its transformed
corners, and an ellipse keeps its axes while its radii are measured along the
transformed radius vectors. Convert to path data first when exact geometry
matters.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from svgxform.engine.matrix import AffineMatrix, apply, is_translation


@dataclass(frozen=True)
class Rectangle:
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class Ellipse:
    cx: float
    cy: float
    rx: float
    ry: float


def transform_rect(x: float, y: float, width: float, height: float, matrix: AffineMatrix) -> Rectangle:
    if is_translation(matrix):
        return Rectangle(x + matrix.e, y + matrix.f, width, height)

    corners = [(x, y), (x + width, y), (x + width, y + height), (x, y + height)]
    pts = np.array([apply(matrix, px, py) for px, py in corners], dtype=np.float64)
    xmin, ymin = pts.min(axis=0)
    xmax, ymax = pts.max(axis=0)
    return Rectangle(float(xmin), float(ymin), float(xmax - xmin), float(ymax - ymin))


def transform_ellipse(cx: float, cy: float, rx: float, ry: float, matrix: AffineMatrix) -> Ellipse:
    """Translation is exact; anything else rescales the radii along the transformed axes."""
    if is_translation(matrix):
        return Ellipse(cx + matrix.e, cy + matrix.f, rx, ry)

    center = np.array(apply(matrix, cx, cy))
    x_edge = np.array(apply(matrix, cx + rx, cy))
    y_edge = np.array(apply(matrix, cx, cy + ry))
    return Ellipse(
        float(center[0]),
        float(center[1]),
        float(np.linalg.norm(x_edge - center)),
        float(np.linalg.norm(y_edge - center)),
    )
