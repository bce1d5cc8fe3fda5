"""
Lexical ranking of catalog patterns against a query.

Score per pattern:
    (# query tokens found as substrings of the pattern haystack)
    + category_bonus if the query category matches
    + popularity * popularity_weight
"""

import logging
from typing import Iterable, List, Optional, Union

from notebook_layouts.config.profiles import DEFAULT, RetrievalProfile
from notebook_layouts.models.layout import Query, ScoredCandidate
from notebook_layouts.patterns.pattern_catalog import CatalogProvider
from notebook_layouts.patterns.pattern_schema import LayoutPattern

logger = logging.getLogger(__name__)

PatternSource = Union[CatalogProvider, Iterable[LayoutPattern]]


def catalog_patterns(catalog: PatternSource) -> List[LayoutPattern]:
    if isinstance(catalog, CatalogProvider):
        return catalog.list_patterns()
    return list(catalog)


def tokenize(text: str, min_length: int = 3) -> List[str]:
    """Lowercase, split on whitespace, drop short tokens. Duplicates are kept."""
    return [t for t in text.lower().split() if len(t) >= min_length]


def build_haystack(pattern: LayoutPattern) -> str:
    return " ".join([
        pattern.name,
        pattern.description,
        " ".join(pattern.keywords),
        " ".join(pattern.tags),
    ]).lower()


def score_pattern(
    tokens: List[str],
    pattern: LayoutPattern,
    category: Optional[str] = None,
    profile: RetrievalProfile = DEFAULT,
) -> float:
    haystack = build_haystack(pattern)
    score = float(sum(1 for token in tokens if token in haystack))
    if category and pattern.category.value == category:
        score += profile.category_bonus
    score += pattern.popularity * profile.popularity_weight
    return score


def rank(
    query: Query,
    catalog: PatternSource,
    profile: RetrievalProfile = DEFAULT,
) -> List[ScoredCandidate]:
    """
    Score every pattern and return the best few.

    Args:
        query: Caller query; text may be empty
        catalog: Provider or plain iterable of patterns, in catalog order
        profile: Scoring knobs

    Returns:
        At most profile.max_results candidates with score > 0, best first
    """
    tokens = tokenize(query.text, profile.min_token_length)
    scored = [
        ScoredCandidate(pattern=p, score=score_pattern(tokens, p, query.category, profile))
        for p in catalog_patterns(catalog)
    ]

    if profile.tie_break == "pattern_id":
        scored.sort(key=lambda c: c.pattern.id)
    # sort is stable: equal scores keep the order established above
    scored.sort(key=lambda c: c.score, reverse=True)

    results = [c for c in scored if c.score > 0][: profile.max_results]
    logger.debug(
        "Ranked %d patterns for tokens %s -> %s",
        len(scored),
        tokens,
        [(c.pattern.id, round(c.score, 2)) for c in results],
    )
    return results
