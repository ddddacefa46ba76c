"""Path geometry probe — re-parses emitted path data with svgpathtools.

Downstream drawing code re-parses whatever we emit, so the probe uses the same
kind of parser to confirm the output is still valid path grammar.
"""

from __future__ import annotations

import logging

from svgpathtools import parse_path

logger = logging.getLogger(__name__)


def path_bbox(d: str) -> tuple[float, float, float, float]:
    """Compute (xmin, ymin, xmax, ymax) of a path. Empty paths give all zeros."""
    path = parse_path(d)
    if len(path) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    xmin, xmax, ymin, ymax = path.bbox()
    return (float(xmin), float(ymin), float(xmax), float(ymax))


def safe_path_bbox(d: str) -> tuple[float, float, float, float] | None:
    """Like :func:`path_bbox`, but ``None`` when the data cannot be parsed."""
    try:
        return path_bbox(d)
    except Exception as e:
        logger.warning("Failed to parse path for bbox: %s", e)
        return None
