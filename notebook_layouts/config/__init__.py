"""Engine configuration: drawing constants and retrieval profiles"""

from notebook_layouts.config.profiles import (
    PROFILES,
    RetrievalProfile,
    TieBreak,
    get_profile,
)

__all__ = [
    "PROFILES",
    "RetrievalProfile",
    "TieBreak",
    "get_profile",
]
