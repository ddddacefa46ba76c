"""Engine configuration — knobs shared by a conversion session."""

from __future__ import annotations

from dataclasses import dataclass

from svgxform.engine.formatting import DEFAULT_PRECISION


@dataclass
class EngineConfig:
    """Controls output formatting and caching for one conversion run."""

    # Decimal places kept in emitted coordinates
    precision: int = DEFAULT_PRECISION

    # Memoize parsed transform expressions for the lifetime of the session
    cache_transforms: bool = True
