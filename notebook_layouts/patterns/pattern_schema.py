"""
Layout Pattern Schema

A "pattern" is a catalog-resident page layout template:
- static SVG artwork shown as the page background
- positioned editable fields laid over the artwork
- keywords/tags used by lexical retrieval
"""

import re
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class PatternCategory(str, Enum):
    """Categories for organizing patterns"""
    PRODUCTIVITY = "productivity"
    STUDY = "study"
    CREATIVE = "creative"
    BUSINESS = "business"
    FITNESS = "fitness"
    WELLNESS = "wellness"
    PLANNING = "planning"


class ElementKind(str, Enum):
    """Kinds of editable fields"""
    TEXT = "text"
    TEXTAREA = "textarea"  # multi-line text
    CHECKBOX = "checkbox"
    DATE = "date"
    NUMBER = "number"
    SELECT = "select"  # single choice from options


class ElementStyle(BaseModel):
    """Optional visual overrides for an editable field"""
    font_size: Optional[float] = Field(None, gt=0)
    font_family: Optional[str] = None
    color: Optional[str] = None
    background_color: Optional[str] = None
    border: Optional[str] = None


class EditableElement(BaseModel):
    """Interactive field positioned over a pattern's artwork (pixels, origin top-left)"""
    id: str = Field(..., min_length=1, description="Unique within the parent pattern")
    kind: ElementKind = Field(..., description="Field kind")
    x: float = Field(..., ge=0, description="Left edge in artwork pixels")
    y: float = Field(..., ge=0, description="Top edge in artwork pixels")
    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)
    placeholder: Optional[str] = None
    options: Optional[List[str]] = Field(None, description="Choices, only for select fields")
    default_value: Optional[str] = None
    style: Optional[ElementStyle] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "mood-rating",
                "kind": "select",
                "x": 250,
                "y": 30,
                "width": 200,
                "height": 30,
                "options": ["Low", "Okay", "Great"],
            }
        }
    )

    @model_validator(mode="after")
    def _check_options(self) -> "EditableElement":
        if self.kind == ElementKind.SELECT:
            if not self.options:
                raise ValueError(f"select element '{self.id}' needs a non-empty options list")
        elif self.options is not None:
            raise ValueError(f"options are only allowed on select elements, not '{self.kind.value}'")
        return self

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


class LayoutPattern(BaseModel):
    """Named page template combining artwork with editable fields"""
    id: str = Field(..., min_length=1, description="Stable identifier, unique within a catalog")
    name: str = Field(..., min_length=1)
    description: str = ""
    category: PatternCategory
    keywords: Tuple[str, ...] = Field(..., min_length=1, description="Lowercase tokens for lexical matching")
    tags: Tuple[str, ...] = Field(..., min_length=1, description="Free-form labels surfaced in metadata")
    artwork: str = Field(..., description="SVG payload, opaque to the engine")
    editable_elements: Tuple[EditableElement, ...] = ()
    popularity: int = Field(default=0, ge=0, le=100, description="Static prior, 0-100")

    model_config = ConfigDict(frozen=True)

    @field_validator("keywords")
    @classmethod
    def _lowercase_keywords(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        return tuple(k.strip().lower() for k in value)

    @model_validator(mode="after")
    def _check_element_ids(self) -> "LayoutPattern":
        seen = set()
        for element in self.editable_elements:
            if element.id in seen:
                raise ValueError(f"duplicate editable element id '{element.id}' in pattern '{self.id}'")
            seen.add(element.id)
        return self


def slugify(name: str) -> str:
    """Turn a pattern name into a stable identifier ("Mood Tracker & Journal" -> "mood-tracker-journal")."""
    slug = re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-")
    return slug or "pattern"


def create_pattern(
    name: str,
    category: PatternCategory,
    keywords: List[str],
    tags: List[str],
    artwork: str,
    elements: Optional[List[Dict[str, Any]]] = None,
    description: str = "",
    popularity: int = 0,
    pattern_id: Optional[str] = None,
) -> LayoutPattern:
    """
    Helper function to create a pattern from plain dictionaries.

    Args:
        name: Pattern name
        category: Pattern category
        keywords: Lexical match tokens
        tags: Labels surfaced in metadata
        artwork: SVG template
        elements: Editable element dictionaries (EditableElement fields)
        description: What this pattern is for
        popularity: Static prior 0-100
        pattern_id: Explicit id (derived from the name if omitted)

    Returns:
        Validated LayoutPattern
    """
    return LayoutPattern(
        id=pattern_id or slugify(name),
        name=name,
        description=description,
        category=category,
        keywords=tuple(keywords),
        tags=tuple(tags),
        artwork=artwork,
        editable_elements=tuple(EditableElement(**e) for e in elements or []),
        popularity=popularity,
    )
