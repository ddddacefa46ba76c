"""Affine matrix algebra.

A matrix is stored as the six coefficients ``(a, b, c, d, e, f)`` of

    | a  c  e |
    | b  d  f |
    | 0  0  1 |

Composition follows the transform-attribute convention: ``compose(m1, m2)`` is
the product ``m1 · m2``, i.e. ``m2`` operates inside the coordinate system set
up by ``m1``. Applied to a point, ``m2`` acts first and ``m1`` second.
"""

from __future__ import annotations

import math
from typing import NamedTuple

import numpy as np
from numpy.typing import NDArray


class AffineMatrix(NamedTuple):
    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    e: float = 0.0
    f: float = 0.0

    def __repr__(self) -> str:
        return "AffineMatrix(%g, %g, %g, %g, %g, %g)" % tuple(self)


IDENTITY = AffineMatrix(1.0, 0.0, 0.0, 1.0, 0.0, 0.0)


def identity() -> AffineMatrix:
    return IDENTITY


def to_array(m: AffineMatrix) -> NDArray[np.float64]:
    """3x3 homogeneous form of ``m``."""
    a, b, c, d, e, f = m
    return np.array([[a, c, e], [b, d, f], [0.0, 0.0, 1.0]], dtype=np.float64)


def from_array(arr: NDArray[np.float64]) -> AffineMatrix:
    """Inverse of :func:`to_array`. The bottom row is ignored."""
    return AffineMatrix(
        float(arr[0, 0]),
        float(arr[1, 0]),
        float(arr[0, 1]),
        float(arr[1, 1]),
        float(arr[0, 2]),
        float(arr[1, 2]),
    )


def compose(m1: AffineMatrix, m2: AffineMatrix) -> AffineMatrix:
    """Return ``m1 · m2``."""
    return from_array(to_array(m1) @ to_array(m2))


def is_identity(m: AffineMatrix) -> bool:
    """Exact comparison, no epsilon."""
    a, b, c, d, e, f = m
    return a == 1 and b == 0 and c == 0 and d == 1 and e == 0 and f == 0


def is_translation(m: AffineMatrix) -> bool:
    """True when the linear part is the identity (translation only)."""
    return m.a == 1 and m.b == 0 and m.c == 0 and m.d == 1


def apply(m: AffineMatrix, x: float, y: float) -> tuple[float, float]:
    a, b, c, d, e, f = m
    return (a * x + c * y + e, b * x + d * y + f)


# --- Primitive constructors ---


def translate(tx: float, ty: float = 0.0) -> AffineMatrix:
    return AffineMatrix(1.0, 0.0, 0.0, 1.0, float(tx), float(ty))


def scale(sx: float, sy: float | None = None) -> AffineMatrix:
    if sy is None:
        sy = sx
    return AffineMatrix(float(sx), 0.0, 0.0, float(sy), 0.0, 0.0)


def rotate(angle: float, cx: float = 0.0, cy: float = 0.0) -> AffineMatrix:
    """Rotation by ``angle`` degrees, optionally about the pivot ``(cx, cy)``.

    With a pivot the result is ``translate(cx, cy) · R · translate(-cx, -cy)``.
    """
    rad = math.radians(angle)
    cos, sin = math.cos(rad), math.sin(rad)
    r = AffineMatrix(cos, sin, -sin, cos, 0.0, 0.0)
    if cx == 0 and cy == 0:
        return r
    return compose(compose(translate(cx, cy), r), translate(-cx, -cy))


def skew_x(angle: float) -> AffineMatrix:
    return AffineMatrix(1.0, 0.0, math.tan(math.radians(angle)), 1.0, 0.0, 0.0)


def skew_y(angle: float) -> AffineMatrix:
    return AffineMatrix(1.0, math.tan(math.radians(angle)), 0.0, 1.0, 0.0, 0.0)
