"""POST /api/transform/* — bake transform expressions into geometry."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends, HTTPException

from svgxform.config import Settings
from svgxform.dependencies import get_session, get_settings
from svgxform.engine.geometry import safe_path_bbox
from svgxform.engine.matrix import is_identity
from svgxform.engine.session import ConversionSession, ElementRecord
from svgxform.models.requests import (
    BatchRequest,
    ElementModel,
    EllipseRequest,
    MatrixRequest,
    PathRequest,
    RectRequest,
)
from svgxform.models.responses import (
    BatchResponse,
    EllipseResponse,
    MatrixResponse,
    PathResponse,
    RectResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/transform")


@router.post("/matrix", response_model=MatrixResponse)
def transform_matrix(
    req: MatrixRequest,
    session: ConversionSession = Depends(get_session),
) -> MatrixResponse:
    m = session.matrix_for(req.transform)
    if m is None:
        return MatrixResponse(matrix=[1.0, 0.0, 0.0, 1.0, 0.0, 0.0], identity=True)
    return MatrixResponse(matrix=list(m), identity=is_identity(m))


@router.post("/path", response_model=PathResponse)
def transform_path(
    req: PathRequest,
    session: ConversionSession = Depends(get_session),
) -> PathResponse:
    d = session.transform_path(req.d, req.transform)
    bbox = safe_path_bbox(d)
    return PathResponse(d=d, bbox=list(bbox) if bbox is not None else None)


@router.post("/rect", response_model=RectResponse)
def transform_rect(
    req: RectRequest,
    session: ConversionSession = Depends(get_session),
) -> RectResponse:
    rect = session.transform_rect(req.x, req.y, req.width, req.height, req.transform)
    return RectResponse(x=rect.x, y=rect.y, width=rect.width, height=rect.height)


@router.post("/ellipse", response_model=EllipseResponse)
def transform_ellipse(
    req: EllipseRequest,
    session: ConversionSession = Depends(get_session),
) -> EllipseResponse:
    ellipse = session.transform_ellipse(req.cx, req.cy, req.rx, req.ry, req.transform)
    return EllipseResponse(cx=ellipse.cx, cy=ellipse.cy, rx=ellipse.rx, ry=ellipse.ry)


@router.post("/batch", response_model=BatchResponse)
def transform_batch(
    req: BatchRequest,
    session: ConversionSession = Depends(get_session),
    settings: Settings = Depends(get_settings),
) -> BatchResponse:
    """Convert many elements in one session; repeated transforms are parsed once."""
    if len(req.elements) > settings.max_batch_elements:
        raise HTTPException(
            status_code=413,
            detail=f"Batch of {len(req.elements)} elements exceeds limit of {settings.max_batch_elements}",
        )

    start = time.perf_counter()
    converted: list[ElementModel] = []
    for el in req.elements:
        out = session.transform_element(ElementRecord(kind=el.kind, attributes=dict(el.attributes)))
        converted.append(ElementModel(kind=out.kind, attributes=out.attributes))

    elapsed = (time.perf_counter() - start) * 1000
    logger.info(
        "Batch: %d elements, %d distinct transforms in %.1fms",
        len(converted),
        len(session.cache),
        elapsed,
    )
    return BatchResponse(
        elements=converted,
        cache_size=len(session.cache),
        processing_time_ms=elapsed,
    )
