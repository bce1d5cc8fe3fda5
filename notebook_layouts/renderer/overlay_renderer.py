import logging
import math
from typing import Dict, Optional, Tuple

from PIL import Image

from notebook_layouts.config.spacing import CALENDAR, SPACING_TABLES
from notebook_layouts.models.overlay import (
    OverlayAlgorithm,
    OverlaySpec,
    PaperLineType,
    Placement,
    RasterImage,
)
from notebook_layouts.renderer.content_areas import ContentAreaDetector, FixedContentAreaDetector
from notebook_layouts.renderer.image_io import decode_image, encode_image, has_alpha
from notebook_layouts.renderer.templates import (
    draw_calendar_overlay,
    draw_grid_overlay,
    draw_ruled_overlay,
    draw_smart_margins,
)

logger = logging.getLogger(__name__)


def line_spacing_px(spec: OverlaySpec) -> int:
    table = SPACING_TABLES.get(spec.algorithm.value, SPACING_TABLES["ruled"])
    return table[spec.line_spacing.value]


def placement_matrix(size: Tuple[int, int], placement: Placement) -> Tuple[float, ...]:
    """
    Inverse affine coefficients mapping canvas pixels back to source pixels.

    Forward placement scales the source, rotates it clockwise about its
    scaled center, then shifts it by the offset.
    """
    w, h = size
    s = placement.scale
    theta = math.radians(placement.rotation_degrees)
    cos, sin = math.cos(theta), math.sin(theta)
    # scaled center on the canvas
    tx = s * w / 2 + placement.offset_x
    ty = s * h / 2 + placement.offset_y
    return (
        cos / s, sin / s, (-cos * tx - sin * ty) / s + w / 2,
        -sin / s, cos / s, (sin * tx - cos * ty) / s + h / 2,
    )


def place_source(canvas: Image.Image, source: Image.Image, placement: Placement, alpha: float = 1.0):
    """Scale, rotate about the center, translate, then composite the source onto the canvas."""
    image = source.convert("RGBA")
    if placement.is_identity and image.size == canvas.size:
        layer = image
    else:
        # sampled straight into canvas size; never materializes the scaled source
        layer = image.transform(
            canvas.size,
            Image.Transform.AFFINE,
            placement_matrix(image.size, placement),
            resample=Image.Resampling.BILINEAR,
            fillcolor=(0, 0, 0, 0),
        )

    if alpha < 1:
        layer.putalpha(layer.getchannel("A").point(lambda a: round(a * alpha)))
    canvas.alpha_composite(layer)


def render(
    source: RasterImage,
    spec: OverlaySpec,
    detector: Optional[ContentAreaDetector] = None,
) -> RasterImage:
    """
    Draw the guide overlay chosen by spec.algorithm over the source image.

    Args:
        source: Encoded input image; never modified
        spec: Overlay parameters
        detector: Content area source for smart-margins

    Returns:
        New image, same dimensions and format as the source

    Raises:
        UnsupportedMediaError: If the source cannot be decoded
    """
    image = decode_image(source)
    canvas = Image.new("RGBA", image.size, (0, 0, 0, 0))
    algorithm = spec.algorithm
    color, opacity = spec.line_color, spec.overlay_opacity

    source_alpha = CALENDAR["backdrop_alpha"] if algorithm == OverlayAlgorithm.CALENDAR else 1.0
    place_source(canvas, image, spec.placement, source_alpha)

    if algorithm == OverlayAlgorithm.RULED:
        draw_ruled_overlay(canvas, line_spacing_px(spec), color, opacity, spec.margin_line)
    elif algorithm == OverlayAlgorithm.GRID:
        draw_grid_overlay(canvas, line_spacing_px(spec), color, opacity)
    elif algorithm == OverlayAlgorithm.CALENDAR:
        draw_calendar_overlay(canvas, color, opacity)
    elif algorithm == OverlayAlgorithm.SMART_MARGINS:
        areas = (detector or FixedContentAreaDetector()).detect(canvas)
        draw_smart_margins(canvas, areas, color, opacity, spec.paper_line_type == PaperLineType.RULED)
    else:
        raise ValueError(f"Unknown overlay algorithm '{algorithm}'")

    logger.debug("Rendered %s overlay on %dx%d %s", algorithm.value, canvas.width, canvas.height, source.mime_type)
    return encode_image(canvas, source.mime_type, keep_alpha=has_alpha(image))


def render_all(
    source: RasterImage,
    spec: OverlaySpec,
    detector: Optional[ContentAreaDetector] = None,
) -> Dict[OverlayAlgorithm, RasterImage]:
    """Render the source once per algorithm, sharing every other setting."""
    return {
        algorithm: render(source, spec.model_copy(update={"algorithm": algorithm}), detector)
        for algorithm in OverlayAlgorithm
    }
