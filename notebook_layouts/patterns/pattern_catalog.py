"""
Pattern Catalog

Read-only, in-memory collection of layout patterns handed to the retrieval
engine. Patterns can be:
- Seeded from the starter set
- Loaded from / exported to a JSON array
- Filtered by category or tag
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Protocol, Tuple, runtime_checkable
from xml.etree import ElementTree as ET

from notebook_layouts.patterns.pattern_schema import EditableElement, LayoutPattern, PatternCategory

logger = logging.getLogger(__name__)


@runtime_checkable
class CatalogProvider(Protocol):
    """Anything that can hand the engine the full list of patterns."""

    def list_patterns(self) -> List[LayoutPattern]:
        ...


def artwork_canvas_size(artwork: str) -> Optional[Tuple[float, float]]:
    """Read the declared width/height of the root <svg>, or None if absent/unparseable."""
    try:
        root = ET.fromstring(artwork)
        return float(root.attrib["width"]), float(root.attrib["height"])
    except (ET.ParseError, KeyError, ValueError):
        return None


def find_out_of_bounds_elements(pattern: LayoutPattern) -> List[EditableElement]:
    """Editable elements whose box extends past the artwork canvas."""
    size = artwork_canvas_size(pattern.artwork)
    if size is None:
        return []
    width, height = size
    return [e for e in pattern.editable_elements if e.right > width or e.bottom > height]


class PatternCatalog:
    """Manages the collection of layout patterns read by the engine"""

    def __init__(self, patterns: Optional[Iterable[LayoutPattern]] = None):
        """
        Initialize the catalog.

        Args:
            patterns: Initial patterns, kept in the given order

        Raises:
            ValueError: If two patterns share an id
        """
        self._patterns: Dict[str, LayoutPattern] = {}
        for pattern in patterns or []:
            self._add(pattern)

    @classmethod
    def from_starter_patterns(cls) -> "PatternCatalog":
        from notebook_layouts.patterns.starter_patterns import create_starter_patterns

        catalog = cls(create_starter_patterns())
        logger.info("Loaded %d starter patterns", len(catalog))
        return catalog

    @classmethod
    def load_json(cls, path: str | Path) -> "PatternCatalog":
        """
        Load patterns from a JSON file holding an array of pattern objects.

        Args:
            path: JSON file written by export_json (or hand-authored)

        Returns:
            New catalog
        """
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
        catalog = cls(LayoutPattern.model_validate(item) for item in raw)
        logger.info("Loaded %d patterns from %s", len(catalog), path)
        return catalog

    def _add(self, pattern: LayoutPattern) -> None:
        if pattern.id in self._patterns:
            raise ValueError(f"Duplicate pattern id '{pattern.id}'")
        for element in find_out_of_bounds_elements(pattern):
            logger.warning(
                "Element '%s' of pattern '%s' extends past the artwork canvas",
                element.id,
                pattern.id,
            )
        self._patterns[pattern.id] = pattern

    def __len__(self) -> int:
        return len(self._patterns)

    def __iter__(self):
        return iter(self._patterns.values())

    def __contains__(self, pattern_id: object) -> bool:
        return pattern_id in self._patterns

    def list_patterns(self) -> List[LayoutPattern]:
        """All patterns in insertion order"""
        return list(self._patterns.values())

    def get(self, pattern_id: str) -> Optional[LayoutPattern]:
        """Get a pattern by ID"""
        return self._patterns.get(pattern_id)

    def get_or_raise(self, pattern_id: str) -> LayoutPattern:
        pattern = self.get(pattern_id)
        if pattern is None:
            raise KeyError(f"Pattern '{pattern_id}' not found")
        return pattern

    def list_by_category(self, category: PatternCategory | str) -> List[LayoutPattern]:
        value = PatternCategory(category)
        return [p for p in self._patterns.values() if p.category == value]

    def list_by_tag(self, tag: str) -> List[LayoutPattern]:
        return [p for p in self._patterns.values() if tag in p.tags]

    def export_json(self, output_path: str | Path) -> None:
        """Export the whole catalog to a single JSON file"""
        data = [p.model_dump(mode="json") for p in self._patterns.values()]
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

    def get_stats(self) -> Dict[str, Any]:
        """Get statistics about the catalog"""
        category_counts: Dict[str, int] = {}
        for pattern in self._patterns.values():
            cat = pattern.category.value
            category_counts[cat] = category_counts.get(cat, 0) + 1

        distinct_tags = {tag for p in self._patterns.values() for tag in p.tags}
        popularity = [p.popularity for p in self._patterns.values()]
        avg_popularity = sum(popularity) / len(popularity) if popularity else 0

        return {
            "total_patterns": len(self._patterns),
            "categories": category_counts,
            "distinct_tags": len(distinct_tags),
            "average_popularity": avg_popularity,
            "total_editable_elements": sum(len(p.editable_elements) for p in self._patterns.values()),
        }
