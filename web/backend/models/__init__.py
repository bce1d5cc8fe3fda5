"""Data models for the notebook layouts API"""

from web.backend.models.requests import LayoutRequest

__all__ = ["LayoutRequest"]
