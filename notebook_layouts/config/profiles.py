from pydantic import BaseModel, Field
from typing import Dict, Literal

TieBreak = Literal["catalog_order", "pattern_id"]


class RetrievalProfile(BaseModel):
    """Scoring and packaging knobs for the lexical retrieval path."""
    min_token_length: int = Field(default=3, ge=1, description="Shorter query tokens are dropped")
    category_bonus: float = Field(default=2.0, description="Added when the query category matches")
    popularity_weight: float = Field(default=0.01, description="Multiplier on pattern popularity (0-100)")
    max_results: int = Field(default=3, ge=1)
    confidence_divisor: float = Field(default=5.0, gt=0, description="Score that saturates confidence at 1.0")
    source_label: str = "RAG Database"
    tie_break: TieBreak = "catalog_order"


DEFAULT = RetrievalProfile()
DETERMINISTIC = RetrievalProfile(tie_break="pattern_id")

PROFILES: Dict[str, RetrievalProfile] = {
    "default": DEFAULT,
    "deterministic": DETERMINISTIC,
}


def get_profile(name: str = "default") -> RetrievalProfile:
    if name not in PROFILES:
        raise ValueError(f"Unknown profile '{name}'. Available: {list(PROFILES.keys())}")
    return PROFILES[name]
