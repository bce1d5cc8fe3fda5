"""Data models for retrieval requests and overlay rendering"""

from notebook_layouts.models.layout import (
    GeneratedLayout,
    LayoutMetadata,
    Query,
    RetrievalResult,
    ScoredCandidate,
)
from notebook_layouts.models.overlay import (
    LineSpacing,
    OverlayAlgorithm,
    OverlaySpec,
    PaperLineType,
    Placement,
    RasterImage,
)

__all__ = [
    "GeneratedLayout",
    "LayoutMetadata",
    "LineSpacing",
    "OverlayAlgorithm",
    "OverlaySpec",
    "PaperLineType",
    "Placement",
    "Query",
    "RasterImage",
    "RetrievalResult",
    "ScoredCandidate",
]
