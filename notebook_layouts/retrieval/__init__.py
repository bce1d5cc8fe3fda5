"""Lexical layout retrieval: ranking, assembly and suggestions"""

from notebook_layouts.retrieval.assembly import assemble, confidence, to_svg_data_uri
from notebook_layouts.retrieval.ranking import PatternSource, build_haystack, catalog_patterns, rank, score_pattern, tokenize
from notebook_layouts.retrieval.service import retrieve, validate_query
from notebook_layouts.retrieval.suggestions import SUGGESTION_TABLE, suggest

__all__ = [
    "PatternSource",
    "SUGGESTION_TABLE",
    "assemble",
    "build_haystack",
    "catalog_patterns",
    "confidence",
    "rank",
    "retrieve",
    "score_pattern",
    "suggest",
    "to_svg_data_uri",
    "tokenize",
    "validate_query",
]
