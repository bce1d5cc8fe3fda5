"""Package ranked candidates into layouts callers can render and edit."""

from typing import List
from urllib.parse import quote

from notebook_layouts.config.profiles import DEFAULT, RetrievalProfile
from notebook_layouts.models.layout import GeneratedLayout, LayoutMetadata, ScoredCandidate

SVG_DATA_URI_PREFIX = "data:image/svg+xml;utf8,"

# Characters JavaScript's encodeURIComponent leaves alone besides [A-Za-z0-9_.-~]
_URI_COMPONENT_SAFE = "!'()*"


def confidence(score: float, divisor: float = 5.0) -> float:
    return min(max(score / divisor, 0.0), 1.0)


def to_svg_data_uri(svg: str) -> str:
    return SVG_DATA_URI_PREFIX + quote(svg, safe=_URI_COMPONENT_SAFE)


def assemble(
    candidates: List[ScoredCandidate],
    profile: RetrievalProfile = DEFAULT,
    include_elements: bool = True,
) -> List[GeneratedLayout]:
    """
    Build one GeneratedLayout per candidate, preserving order.

    Editable elements are deep copies; callers may mutate them freely.
    """
    layouts = []
    for candidate in candidates:
        pattern = candidate.pattern
        elements = [e.model_copy(deep=True) for e in pattern.editable_elements] if include_elements else []
        layouts.append(GeneratedLayout(
            name=pattern.name,
            description=pattern.description,
            category=pattern.category.value,
            confidence=confidence(candidate.score, profile.confidence_divisor),
            artwork=to_svg_data_uri(pattern.artwork),
            editable_elements=elements,
            metadata=LayoutMetadata(
                source=profile.source_label,
                popularity=pattern.popularity,
                tags=list(pattern.tags),
            ),
        ))
    return layouts
