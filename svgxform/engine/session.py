"""Conversion session — one conversion run over many elements.

The session owns the transform cache, so identical ``transform`` attributes are
parsed once per run and independent runs never see each other's entries.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from svgxform.engine.config import EngineConfig
from svgxform.engine.formatting import format_number
from svgxform.engine.matrix import AffineMatrix
from svgxform.engine.path_transformer import transform_path_data
from svgxform.engine.shapes import Ellipse, Rectangle, transform_ellipse, transform_rect
from svgxform.engine.transform_parser import TransformCache, parse_number, parse_transform

logger = logging.getLogger(__name__)


@dataclass
class ElementRecord:
    """An element already pulled out of a document: its tag name and attributes."""

    kind: str
    attributes: dict[str, str] = field(default_factory=dict)


def _float_attr(attrs: dict[str, str], name: str) -> float:
    raw = attrs.get(name)
    if raw is None or not raw.strip():
        return 0.0
    return parse_number(raw.strip())


class ConversionSession:
    """Applies transform attributes to element geometry for one run."""

    def __init__(
        self,
        cache: TransformCache | None = None,
        config: EngineConfig | None = None,
    ) -> None:
        self.config = config or EngineConfig()
        self.cache = cache if cache is not None else TransformCache()

    def matrix_for(self, transform: str | None) -> AffineMatrix | None:
        """Matrix for an expression, or ``None`` when there is nothing to apply."""
        if not transform:
            return None
        if not self.config.cache_transforms:
            return parse_transform(transform)
        return self.cache.get(transform)

    def transform_path(self, d: str, transform: str | None) -> str:
        m = self.matrix_for(transform)
        if m is None:
            return d
        return transform_path_data(d, m, self.config.precision)

    def transform_polygon(self, points: str, transform: str | None) -> str:
        """Polygon points reframed as the closed path ``M<points>z``."""
        return self.transform_path(f"M{points}z", transform)

    def transform_rect(
        self, x: float, y: float, width: float, height: float, transform: str | None
    ) -> Rectangle:
        m = self.matrix_for(transform)
        if m is None:
            return Rectangle(x, y, width, height)
        return transform_rect(x, y, width, height, m)

    def transform_circle(self, cx: float, cy: float, r: float, transform: str | None) -> Ellipse:
        """Circles go through the ellipse path; the caller keeps ``rx`` as the radius."""
        return self.transform_ellipse(cx, cy, r, r, transform)

    def transform_ellipse(
        self, cx: float, cy: float, rx: float, ry: float, transform: str | None
    ) -> Ellipse:
        m = self.matrix_for(transform)
        if m is None:
            return Ellipse(cx, cy, rx, ry)
        return transform_ellipse(cx, cy, rx, ry, m)

    def transform_element(self, element: ElementRecord) -> ElementRecord:
        """Bake an element's ``transform`` attribute into its geometry.

        The returned record has no ``transform`` attribute. Polygons come back
        as ``path`` records. Unknown kinds are returned unchanged.
        """
        attrs = dict(element.attributes)
        transform = attrs.pop("transform", None)

        def fmt(value: float) -> str:
            return format_number(value, self.config.precision)

        if element.kind == "path":
            attrs["d"] = self.transform_path(attrs.get("d", ""), transform)
            return ElementRecord("path", attrs)

        if element.kind == "polygon":
            points = attrs.pop("points", "")
            attrs["d"] = self.transform_polygon(points, transform)
            return ElementRecord("path", attrs)

        if element.kind == "rect":
            rect = self.transform_rect(
                _float_attr(attrs, "x"),
                _float_attr(attrs, "y"),
                _float_attr(attrs, "width"),
                _float_attr(attrs, "height"),
                transform,
            )
            attrs.update(x=fmt(rect.x), y=fmt(rect.y), width=fmt(rect.width), height=fmt(rect.height))
            return ElementRecord("rect", attrs)

        if element.kind == "circle":
            circle = self.transform_circle(
                _float_attr(attrs, "cx"), _float_attr(attrs, "cy"), _float_attr(attrs, "r"), transform
            )
            attrs.update(cx=fmt(circle.cx), cy=fmt(circle.cy), r=fmt(circle.rx))
            return ElementRecord("circle", attrs)

        if element.kind == "ellipse":
            ellipse = self.transform_ellipse(
                _float_attr(attrs, "cx"),
                _float_attr(attrs, "cy"),
                _float_attr(attrs, "rx"),
                _float_attr(attrs, "ry"),
                transform,
            )
            attrs.update(cx=fmt(ellipse.cx), cy=fmt(ellipse.cy), rx=fmt(ellipse.rx), ry=fmt(ellipse.ry))
            return ElementRecord("ellipse", attrs)

        logger.warning("Unsupported element kind %r left unchanged", element.kind)
        return element
