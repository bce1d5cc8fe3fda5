"""
Overlay data models

Parameters for drawing guide overlays onto a raster image.
"""

from dataclasses import dataclass
from enum import Enum

from PIL import ImageColor
from pydantic import BaseModel, Field, field_validator


class OverlayAlgorithm(str, Enum):
    """Which guide layer to draw"""
    RULED = "ruled"
    GRID = "grid"
    CALENDAR = "calendar"
    SMART_MARGINS = "smart-margins"


class LineSpacing(str, Enum):
    NARROW = "narrow"
    NORMAL = "normal"
    WIDE = "wide"


class PaperLineType(str, Enum):
    """Paper style of the notebook page; independent of the overlay algorithm"""
    RULED = "ruled"
    GRID = "grid"
    DOTS = "dots"
    BLANK = "blank"
    GRAPH = "graph"
    MUSIC = "music"
    CALENDAR = "calendar"


class Placement(BaseModel):
    """Affine placement of the source image on the output canvas"""
    offset_x: float = 0.0
    offset_y: float = 0.0
    scale: float = Field(default=1.0, gt=0)
    rotation_degrees: float = 0.0

    @property
    def is_identity(self) -> bool:
        return (
            self.offset_x == 0
            and self.offset_y == 0
            and self.scale == 1
            and self.rotation_degrees % 360 == 0
        )


class OverlaySpec(BaseModel):
    """Controls overlay geometry, color and opacity"""
    algorithm: OverlayAlgorithm = Field(..., description="Guide algorithm to run")
    line_spacing: LineSpacing = Field(default=LineSpacing.NORMAL)
    margin_line: bool = Field(default=False, description="Red margin line (ruled only)")
    line_color: str = Field(default="#CCCCCC", description="Any color Pillow understands")
    overlay_opacity: float = Field(default=0.3, ge=0.0, le=1.0)
    paper_line_type: PaperLineType = Field(default=PaperLineType.RULED)
    placement: Placement = Field(default_factory=Placement)

    @field_validator("line_color")
    @classmethod
    def _known_color(cls, v: str) -> str:
        ImageColor.getrgb(v)  # ValueError for unknown names
        return v

    class Config:
        json_schema_extra = {
            "example": {
                "algorithm": "grid",
                "line_spacing": "wide",
                "line_color": "#3B82F6",
                "overlay_opacity": 0.5,
            }
        }


@dataclass(frozen=True)
class RasterImage:
    """Encoded raster bytes with their declared MIME type"""
    data: bytes
    mime_type: str
