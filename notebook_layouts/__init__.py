"""
Notebook layout engine.

Retrieves notebook page layouts for a free-text prompt from a pattern
catalog, and draws paper-style guide overlays onto raster images.
"""

from notebook_layouts.errors import InvalidQueryError, LayoutEngineError, UnsupportedMediaError
from notebook_layouts.models import OverlayAlgorithm, OverlaySpec, Query, RasterImage, RetrievalResult
from notebook_layouts.patterns import PatternCatalog
from notebook_layouts.renderer import render, render_all
from notebook_layouts.retrieval import assemble, rank, retrieve, suggest

__version__ = "0.1.0"

__all__ = [
    "InvalidQueryError",
    "LayoutEngineError",
    "OverlayAlgorithm",
    "OverlaySpec",
    "PatternCatalog",
    "Query",
    "RasterImage",
    "RetrievalResult",
    "UnsupportedMediaError",
    "assemble",
    "rank",
    "render",
    "render_all",
    "retrieve",
    "suggest",
]
