"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class MatrixRequest(BaseModel):
    transform: str = Field(default="", description="Transform expression, e.g. 'translate(5) rotate(45)'")


class PathRequest(BaseModel):
    d: str = Field(..., description="Path data")
    transform: str = Field(default="", description="Transform expression")


class RectRequest(BaseModel):
    x: float = 0.0
    y: float = 0.0
    width: float = Field(..., description="Rectangle width")
    height: float = Field(..., description="Rectangle height")
    transform: str = Field(default="", description="Transform expression")


class EllipseRequest(BaseModel):
    cx: float = 0.0
    cy: float = 0.0
    rx: float = Field(..., description="Horizontal radius")
    ry: float = Field(..., description="Vertical radius")
    transform: str = Field(default="", description="Transform expression")


class ElementModel(BaseModel):
    kind: str = Field(..., description="Element tag: path, polygon, rect, circle or ellipse")
    attributes: dict[str, str] = Field(
        default_factory=dict,
        description="Element attributes, including an optional 'transform'",
    )


class BatchRequest(BaseModel):
    elements: list[ElementModel] = Field(..., description="Elements converted in one session")
