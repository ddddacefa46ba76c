"""svgxform affine transform engine."""

from svgxform.engine.formatting import format_number, format_point
from svgxform.engine.matrix import AffineMatrix, apply, compose, is_identity
from svgxform.engine.path_transformer import PathCommand, tokenize_path, transform_path_data
from svgxform.engine.session import ConversionSession, ElementRecord
from svgxform.engine.shapes import Ellipse, Rectangle, transform_ellipse, transform_rect
from svgxform.engine.transform_parser import TransformCache, TransformOp, parse_transform

__all__ = [
    "AffineMatrix",
    "apply",
    "compose",
    "is_identity",
    "parse_transform",
    "TransformCache",
    "TransformOp",
    "PathCommand",
    "tokenize_path",
    "transform_path_data",
    "Rectangle",
    "Ellipse",
    "transform_rect",
    "transform_ellipse",
    "format_number",
    "format_point",
    "ConversionSession",
    "ElementRecord",
]
