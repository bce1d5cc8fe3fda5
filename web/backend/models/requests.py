"""Request bodies accepted by the API"""

from typing import Optional

from pydantic import BaseModel, Field

from notebook_layouts.models import Query


class LayoutRequest(BaseModel):
    """Prompt-driven layout retrieval request"""
    prompt: str = Field(default="", description="Free-text description of the page")
    category: Optional[str] = Field(default=None, description="Preferred pattern category")
    style: Optional[str] = Field(default=None, description="Style hint; not used for scoring")
    editable: bool = Field(default=True, description="Include editable elements")

    class Config:
        json_schema_extra = {
            "example": {
                "prompt": "weekly bullet journal for tasks",
                "category": "productivity",
                "editable": True,
            }
        }

    def to_query(self) -> Query:
        return Query(
            text=self.prompt,
            category=self.category or None,
            style=self.style,
            editable_requested=self.editable,
        )
