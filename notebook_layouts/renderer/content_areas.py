"""
Content area detection for the smart-margins overlay.

Detection is simulated: FixedContentAreaDetector returns the configured
rectangles resolved against the canvas size. A real detector only has to
implement ContentAreaDetector.detect.
"""

from dataclasses import dataclass
from typing import Dict, List, Mapping, Protocol, Tuple

from PIL import Image

from notebook_layouts.config.spacing import SMART_MARGIN_AREAS


@dataclass(frozen=True)
class ContentArea:
    name: str
    x: int
    y: int
    width: int
    height: int

    @property
    def bounds(self) -> Tuple[int, int, int, int]:
        """(left, top, right, bottom), normalized so left <= right and top <= bottom."""
        x0, x1 = sorted((self.x, self.x + self.width))
        y0, y1 = sorted((self.y, self.y + self.height))
        return x0, y0, x1, y1


class ContentAreaDetector(Protocol):
    def detect(self, image: Image.Image) -> List[ContentArea]:
        ...


def _resolve(value: int, extent: int, from_edge: bool) -> int:
    return extent + value if from_edge else value


class FixedContentAreaDetector:
    """Header band, body band and a bottom-right calendar corner."""

    def __init__(self, areas: Mapping[str, Dict[str, int]] = SMART_MARGIN_AREAS):
        self.areas = areas

    def detect(self, image: Image.Image) -> List[ContentArea]:
        width, height = image.size
        result = []
        for name, a in self.areas.items():
            result.append(ContentArea(
                name=name,
                x=_resolve(a["x"], width, a["x"] < 0),
                y=_resolve(a["y"], height, a["y"] < 0),
                width=_resolve(a["width"], width, a["width"] <= 0),
                height=_resolve(a["height"], height, a["height"] <= 0),
            ))
        return result
