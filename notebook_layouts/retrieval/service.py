"""
Layout retrieval service

Validates a query, ranks the catalog, assembles layouts and attaches
suggestions. Zero matches is a successful, empty result.
"""

import logging
import time
from typing import Optional

from notebook_layouts.config.profiles import DEFAULT, RetrievalProfile
from notebook_layouts.errors import InvalidQueryError
from notebook_layouts.models.layout import Query, RetrievalResult
from notebook_layouts.patterns.pattern_schema import PatternCategory
from notebook_layouts.retrieval.assembly import assemble
from notebook_layouts.retrieval.ranking import PatternSource, rank
from notebook_layouts.retrieval.suggestions import suggest

logger = logging.getLogger(__name__)

CATEGORY_VALUES = frozenset(c.value for c in PatternCategory)


def validate_query(query: Query) -> None:
    """Raise InvalidQueryError for blank text or an unknown category hint."""
    if not query.text or not query.text.strip():
        raise InvalidQueryError("Prompt is required")
    if query.category is not None and query.category not in CATEGORY_VALUES:
        raise InvalidQueryError(
            f"Unknown category '{query.category}'. Available: {sorted(CATEGORY_VALUES)}"
        )


def retrieve(
    query: Query,
    catalog: PatternSource,
    profile: Optional[RetrievalProfile] = None,
) -> RetrievalResult:
    profile = profile or DEFAULT
    validate_query(query)
    start = time.perf_counter()

    candidates = rank(query, catalog, profile)
    layouts = assemble(candidates, profile, include_elements=query.editable_requested)
    suggestions = suggest(query.text)

    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.info(
        "Retrieved %d layouts, %d suggestions for %r in %.2fms",
        len(layouts),
        len(suggestions),
        query.text,
        elapsed_ms,
    )
    return RetrievalResult(
        success=True,
        layouts=layouts,
        suggestions=suggestions,
        processing_time_ms=elapsed_ms,
    )
