"""
Retrieval data models

Query in, scored candidates in the middle, generated layouts out.
"""

from dataclasses import dataclass
from typing import List, Optional

from pydantic import BaseModel, Field

from notebook_layouts.patterns.pattern_schema import EditableElement, LayoutPattern


class Query(BaseModel):
    """Caller's free-text request plus optional structured hints"""
    text: str = Field(default="", description="Free-form prompt")
    category: Optional[str] = Field(None, description="Category hint (PatternCategory value)")
    style: Optional[str] = Field(None, description="Style hint, informational")
    editable_requested: bool = Field(default=True, description="Include editable fields in the output")

    class Config:
        json_schema_extra = {
            "example": {
                "text": "weekly bullet journal for tasks",
                "category": "productivity",
                "editable_requested": True,
            }
        }


@dataclass(frozen=True)
class ScoredCandidate:
    """A pattern paired with its relevance score, prior to assembly"""
    pattern: LayoutPattern
    score: float


class LayoutMetadata(BaseModel):
    source: str = Field(..., description="Retrieval path that produced the layout")
    popularity: int
    tags: List[str] = Field(default_factory=list)


class GeneratedLayout(BaseModel):
    """Externally consumable layout built from a ranked pattern"""
    name: str
    description: str
    category: str
    confidence: float = Field(..., ge=0.0, le=1.0)
    artwork: str = Field(..., description="data:image/svg+xml URI, percent-encoded")
    editable_elements: List[EditableElement] = Field(default_factory=list)
    metadata: LayoutMetadata


class RetrievalResult(BaseModel):
    """Envelope returned by the retrieval service"""
    success: bool = True
    layouts: List[GeneratedLayout] = Field(default_factory=list)
    suggestions: List[str] = Field(default_factory=list)
    processing_time_ms: float = 0.0
