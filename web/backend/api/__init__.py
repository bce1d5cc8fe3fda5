"""API routes for the notebook layouts backend"""

from web.backend.api import layouts, overlays, patterns

__all__ = ["layouts", "overlays", "patterns"]
