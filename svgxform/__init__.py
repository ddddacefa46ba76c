"""svgxform — bake affine transforms into vector path and shape data."""

__version__ = "0.1.0"
