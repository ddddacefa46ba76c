"""FastAPI dependency injection."""

from __future__ import annotations

from svgxform.config import Settings, settings
from svgxform.engine.config import EngineConfig
from svgxform.engine.session import ConversionSession


def get_settings() -> Settings:
    return settings


def get_session() -> ConversionSession:
    """Fresh session per request, so caches never leak between conversions."""
    config = EngineConfig(
        precision=settings.output_precision,
        cache_transforms=settings.transform_cache_enabled,
    )
    return ConversionSession(config=config)
