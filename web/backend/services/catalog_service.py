"""
Catalog service

Holds the process-wide pattern catalog and retrieval profile used by the
API routes. Both are built once, on first use.
"""

import logging
from typing import Optional

from notebook_layouts.config import RetrievalProfile, get_profile
from notebook_layouts.patterns import PatternCatalog
from web.backend.config import get_settings

logger = logging.getLogger(__name__)


class CatalogService:
    """Lazily loads the catalog named by the backend settings"""

    def __init__(self):
        self._catalog: Optional[PatternCatalog] = None
        self._profile: Optional[RetrievalProfile] = None

    @property
    def catalog(self) -> PatternCatalog:
        if self._catalog is None:
            settings = get_settings()
            if settings.catalog_path:
                self._catalog = PatternCatalog.load_json(settings.catalog_path)
            else:
                self._catalog = PatternCatalog.from_starter_patterns()
        return self._catalog

    @property
    def profile(self) -> RetrievalProfile:
        if self._profile is None:
            name = get_settings().profile
            self._profile = get_profile(name)
            logger.info("Using retrieval profile '%s'", name)
        return self._profile


# Global instance
catalog_service = CatalogService()


def get_catalog() -> PatternCatalog:
    return catalog_service.catalog


def get_retrieval_profile() -> RetrievalProfile:
    return catalog_service.profile
