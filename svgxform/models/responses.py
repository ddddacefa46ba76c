"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from svgxform.models.requests import ElementModel


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str


class MatrixResponse(BaseModel):
    matrix: list[float] = Field(..., description="Coefficients [a, b, c, d, e, f]")
    identity: bool = False


class PathResponse(BaseModel):
    d: str
    # (xmin, ymin, xmax, ymax); None when the output could not be re-parsed
    bbox: list[float] | None = None


class RectResponse(BaseModel):
    x: float
    y: float
    width: float
    height: float


class EllipseResponse(BaseModel):
    cx: float
    cy: float
    rx: float
    ry: float


class BatchResponse(BaseModel):
    elements: list[ElementModel] = Field(default_factory=list)
    cache_size: int = 0
    processing_time_ms: float = 0.0
