from contextlib import contextmanager
from typing import Iterator, List, Optional, Sequence, Tuple

from PIL import Image, ImageColor, ImageDraw, ImageFont

from notebook_layouts.config.spacing import (
    CALENDAR,
    GRID_LINE_WIDTH,
    MARGIN_LINE_ALPHA_FACTOR,
    MARGIN_LINE_COLOR,
    MARGIN_LINE_WIDTH,
    MARGIN_LINE_X,
    RULE_WIDTH,
    SMART_MARGIN_DASH,
    SMART_MARGIN_RULE_ALPHA_FACTOR,
    SMART_MARGIN_RULE_INSET,
    SMART_MARGIN_RULE_SPACING,
)
from notebook_layouts.renderer.content_areas import ContentArea

Ink = Tuple[int, int, int, int]


def ink(color: str, alpha: float) -> Ink:
    r, g, b = ImageColor.getrgb(color)[:3]
    return r, g, b, round(255 * min(max(alpha, 0.0), 1.0))


@contextmanager
def guide_layer(canvas: Image.Image) -> Iterator[ImageDraw.ImageDraw]:
    """Draw onto a transparent layer, then composite it over the canvas."""
    layer = Image.new("RGBA", canvas.size, (0, 0, 0, 0))
    yield ImageDraw.Draw(layer)
    canvas.alpha_composite(layer)


def hline(d: ImageDraw.ImageDraw, y: int, x0: int, x1: int, fill: Ink, width: int = 1):
    if x1 < x0:
        return
    top = y - width // 2
    d.rectangle([x0, top, x1, top + width - 1], fill=fill)


def vline(d: ImageDraw.ImageDraw, x: int, y0: int, y1: int, fill: Ink, width: int = 1):
    if y1 < y0:
        return
    left = x - width // 2
    d.rectangle([left, y0, left + width - 1, y1], fill=fill)


def steps(spacing: int, limit: int) -> List[int]:
    return list(range(spacing, limit, spacing))


def dashed_hline(d: ImageDraw.ImageDraw, y: int, x0: int, x1: int, fill: Ink, dash: Sequence[int] = SMART_MARGIN_DASH):
    on, off = dash
    x = x0
    while x <= x1:
        hline(d, y, x, min(x + on - 1, x1), fill)
        x += on + off


def dashed_vline(d: ImageDraw.ImageDraw, x: int, y0: int, y1: int, fill: Ink, dash: Sequence[int] = SMART_MARGIN_DASH):
    on, off = dash
    y = y0
    while y <= y1:
        vline(d, x, y, min(y + on - 1, y1), fill)
        y += on + off


def dashed_rect(d: ImageDraw.ImageDraw, bounds: Tuple[int, int, int, int], fill: Ink):
    x0, y0, x1, y1 = bounds
    dashed_hline(d, y0, x0, x1, fill)
    dashed_hline(d, y1, x0, x1, fill)
    dashed_vline(d, x0, y0, y1, fill)
    dashed_vline(d, x1, y0, y1, fill)


def draw_ruled_overlay(canvas: Image.Image, spacing: int, color: str, opacity: float, margin_line: bool = False):
    width, height = canvas.size
    left = MARGIN_LINE_X if margin_line else 0
    with guide_layer(canvas) as d:
        for y in steps(spacing, height):
            hline(d, y, left, width - 1, ink(color, opacity), RULE_WIDTH)
    if margin_line:
        with guide_layer(canvas) as d:
            vline(d, MARGIN_LINE_X, 0, height - 1,
                  ink(MARGIN_LINE_COLOR, MARGIN_LINE_ALPHA_FACTOR * opacity), MARGIN_LINE_WIDTH)


def draw_grid_overlay(canvas: Image.Image, spacing: int, color: str, opacity: float):
    width, height = canvas.size
    fill = ink(color, opacity)
    with guide_layer(canvas) as d:
        for x in steps(spacing, width):
            vline(d, x, 0, height - 1, fill, GRID_LINE_WIDTH)
        for y in steps(spacing, height):
            hline(d, y, 0, width - 1, fill, GRID_LINE_WIDTH)


def calendar_boundaries(width: int, height: int) -> Tuple[List[int], List[int]]:
    """Column x positions and row y positions of the month grid, edges clamped."""
    top = CALENDAR["header_height"]
    cols, rows = CALENDAR["columns"], CALENDAR["rows"]
    xs = [min(round(i * width / cols), width - 1) for i in range(cols + 1)]
    ys = [min(round(top + j * (height - top) / rows), height - 1) for j in range(rows + 1)]
    return xs, ys


def draw_calendar_overlay(canvas: Image.Image, color: str, opacity: float, font: Optional[ImageFont.ImageFont] = None):
    width, height = canvas.size
    xs, ys = calendar_boundaries(width, height)
    with guide_layer(canvas) as d:
        fill = ink(color, opacity)
        for x in xs:
            vline(d, x, ys[0], ys[-1], fill)
        for y in ys:
            hline(d, y, 0, width - 1, fill)

    font = font or ImageFont.load_default()
    column_width = width / CALENDAR["columns"]
    baseline = CALENDAR["label_baseline_y"]
    with guide_layer(canvas) as d:
        fill = ink(color, CALENDAR["label_alpha"])
        for i, label in enumerate(CALENDAR["day_labels"]):
            left, top, right, bottom = d.textbbox((0, 0), label, font=font)
            cx = i * column_width + column_width / 2
            d.text((cx - (right - left) / 2 - left, baseline - bottom), label, fill=fill, font=font)


def draw_smart_margins(canvas: Image.Image, areas: Sequence[ContentArea], color: str, opacity: float, ruled_interior: bool = True):
    for area in areas:
        x0, y0, x1, y1 = area.bounds
        with guide_layer(canvas) as d:
            dashed_rect(d, (x0, y0, x1, y1), ink(color, opacity))
        if not ruled_interior:
            continue
        with guide_layer(canvas) as d:
            # solid rules; the next rectangle starts dashed again
            fill = ink(color, SMART_MARGIN_RULE_ALPHA_FACTOR * opacity)
            left, right = x0 + SMART_MARGIN_RULE_INSET, x1 - SMART_MARGIN_RULE_INSET
            if left > right:
                continue
            for y in range(y0 + SMART_MARGIN_RULE_SPACING, y1, SMART_MARGIN_RULE_SPACING):
                hline(d, y, left, right, fill)
