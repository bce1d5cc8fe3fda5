"""Pattern catalog: layout templates read by the retrieval engine"""

from notebook_layouts.patterns.pattern_schema import (
    EditableElement,
    ElementKind,
    ElementStyle,
    LayoutPattern,
    PatternCategory,
    create_pattern,
)
from notebook_layouts.patterns.pattern_catalog import (
    CatalogProvider,
    PatternCatalog,
    find_out_of_bounds_elements,
)
from notebook_layouts.patterns.starter_patterns import create_starter_patterns

__all__ = [
    "CatalogProvider",
    "EditableElement",
    "ElementKind",
    "ElementStyle",
    "LayoutPattern",
    "PatternCatalog",
    "PatternCategory",
    "create_pattern",
    "create_starter_patterns",
    "find_out_of_bounds_elements",
]
