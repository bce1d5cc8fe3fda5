"""Services for the notebook layouts API"""

from web.backend.services.catalog_service import (
    CatalogService,
    catalog_service,
    get_catalog,
    get_retrieval_profile,
)

__all__ = [
    "CatalogService",
    "catalog_service",
    "get_catalog",
    "get_retrieval_profile",
]
