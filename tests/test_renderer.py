"""Tests for the overlay renderer."""

import io
import struct
import zlib

import pytest
from PIL import Image

from notebook_layouts.errors import UnsupportedMediaError
from notebook_layouts.models import OverlayAlgorithm, OverlaySpec, PaperLineType, Placement, RasterImage
from notebook_layouts.renderer import FixedContentAreaDetector, render, render_all
from notebook_layouts.renderer.overlay_renderer import placement_matrix
from notebook_layouts.renderer.templates import calendar_boundaries
from tests.conftest import make_image, open_result

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)


def _white(size):
    return RasterImage(data=make_image(size), mime_type="image/png")


def _spec(algorithm, **kwargs):
    kwargs.setdefault("line_color", "#000000")
    kwargs.setdefault("overlay_opacity", 1.0)
    return OverlaySpec(algorithm=algorithm, **kwargs)


def _rgb(raster):
    return open_result(raster).convert("RGB")


def _png_header(width, height):
    """PNG signature, IHDR and IEND only: declares a size without pixel data."""
    def chunk(tag, body):
        return struct.pack(">I", len(body)) + tag + body + struct.pack(">I", zlib.crc32(tag + body))

    ihdr = struct.pack(">IIBBBBB", width, height, 8, 2, 0, 0, 0)
    return b"\x89PNG\r\n\x1a\n" + chunk(b"IHDR", ihdr) + chunk(b"IEND", b"")


class TestRuled:
    def test_lines_at_normal_spacing(self):
        image = _rgb(render(_white((200, 100)), _spec("ruled")))
        dark_rows = [y for y in range(100) if image.getpixel((100, y)) == BLACK]
        assert dark_rows == [24, 48, 72, 96]
        assert image.getpixel((0, 24)) == BLACK
        assert image.getpixel((199, 24)) == BLACK

    @pytest.mark.parametrize("spacing,step", [("narrow", 18), ("wide", 32)])
    def test_spacing_classes(self, spacing, step):
        image = _rgb(render(_white((50, 100)), _spec("ruled", line_spacing=spacing)))
        dark_rows = [y for y in range(100) if image.getpixel((25, y)) == BLACK]
        assert dark_rows == list(range(step, 100, step))

    def test_margin_line(self):
        image = _rgb(render(_white((200, 100)), _spec("ruled", margin_line=True)))
        r, g, b = image.getpixel((60, 10))
        assert r > 200 and g < 150 and b < 150
        # rules start at the margin
        assert image.getpixel((30, 24)) == WHITE
        assert image.getpixel((100, 24)) == BLACK

    def test_opacity_blends(self):
        image = _rgb(render(_white((50, 50)), _spec("ruled", overlay_opacity=0.5)))
        value = image.getpixel((25, 24))[0]
        assert 120 <= value <= 135


class TestGrid:
    def test_wide_grid_on_300px_square(self, white_png):
        image = _rgb(render(white_png, _spec("grid", line_spacing="wide")))
        columns = [x for x in range(300) if image.getpixel((x, 5)) == BLACK]
        rows = [y for y in range(300) if image.getpixel((5, y)) == BLACK]
        expected = list(range(30, 300, 30))
        assert len(expected) == 9
        assert columns == expected
        assert rows == expected


class TestCalendar:
    def test_boundaries_clamped(self):
        xs, ys = calendar_boundaries(700, 460)
        assert xs == [0, 100, 200, 300, 400, 500, 600, 699]
        assert ys[0] == 60 and ys[-1] == 459
        assert len(ys) == 7

    def test_grid_and_header(self):
        image = _rgb(render(_white((700, 460)), _spec("calendar")))
        assert image.getpixel((0, 100)) == BLACK
        assert image.getpixel((699, 100)) == BLACK
        assert image.getpixel((350, 100)) == WHITE
        assert image.getpixel((350, 60)) == BLACK
        assert image.getpixel((350, 459)) == BLACK
        # header band is not gridded, but carries the day labels
        assert all(image.getpixel((x, 45)) == WHITE for x in range(700))
        header = image.crop((0, 0, 700, 31))
        assert header.getextrema() != ((255, 255), (255, 255), (255, 255))

    def test_source_dimmed(self):
        red = RasterImage(data=make_image((140, 120), color=(255, 0, 0, 255), mode="RGBA"), mime_type="image/png")
        image = open_result(render(red, _spec("calendar", overlay_opacity=0.0)))
        assert image.mode == "RGBA"
        assert image.getpixel((70, 90))[3] == round(255 * 0.4)


class TestSmartMargins:
    def test_dashed_rectangles_with_interior_rules(self):
        image = _rgb(render(_white((800, 600)), _spec("smart-margins")))
        top_edge = [image.getpixel((x, 100)) == BLACK for x in range(50, 70)]
        assert top_edge == [True] * 5 + [False] * 5 + [True] * 5 + [False] * 5
        assert 90 <= image.getpixel((400, 120))[0] <= 115
        assert image.getpixel((55, 120)) == WHITE
        assert image.getpixel((400, 130)) == WHITE
        # calendar corner at (600, 450)
        assert image.getpixel((600, 450)) == BLACK

    def test_no_interior_rules_for_other_paper(self):
        spec = _spec("smart-margins", paper_line_type=PaperLineType.BLANK)
        image = _rgb(render(_white((800, 600)), spec))
        assert image.getpixel((400, 120)) == WHITE
        assert image.getpixel((50, 100)) == BLACK

    def test_detector_areas(self):
        areas = {a.name: a for a in FixedContentAreaDetector().detect(Image.new("RGB", (800, 600)))}
        assert areas["header"].bounds == (50, 100, 750, 300)
        assert areas["body"].bounds == (50, 320, 750, 470)
        assert areas["calendar"].bounds == (600, 450, 780, 570)


class TestPlacement:
    def _halves(self):
        image = Image.new("RGBA", (100, 100), (0, 0, 255, 255))
        image.paste((255, 0, 0, 255), (0, 0, 50, 100))
        buf = io.BytesIO()
        image.save(buf, format="PNG")
        return RasterImage(data=buf.getvalue(), mime_type="image/png")

    def _render(self, **placement):
        spec = _spec("grid", overlay_opacity=0.0, placement=Placement(**placement))
        return open_result(render(self._halves(), spec))

    def test_offset(self):
        image = self._render(offset_x=50)
        assert image.getpixel((25, 50))[3] == 0
        assert image.getpixel((75, 50)) == (255, 0, 0, 255)

    def test_scale(self):
        image = self._render(scale=0.5)
        assert image.size == (100, 100)
        assert image.getpixel((10, 10)) == (255, 0, 0, 255)
        assert image.getpixel((75, 75))[3] == 0

    def test_rotation_is_clockwise_about_center(self):
        image = self._render(rotation_degrees=90)
        assert image.getpixel((50, 25)) == (255, 0, 0, 255)
        assert image.getpixel((50, 75)) == (0, 0, 255, 255)

    def test_large_scale_samples_into_canvas(self):
        red = RasterImage(data=make_image((40, 40), color=(255, 0, 0, 255), mode="RGBA"), mime_type="image/png")
        spec = _spec("grid", overlay_opacity=0.0, placement=Placement(scale=1000))
        image = open_result(render(red, spec))
        assert image.size == (40, 40)
        assert image.getextrema() == ((255, 255), (0, 0), (0, 0), (255, 255))

    def test_matrix_maps_canvas_back_to_source(self):
        a, b, c, d, e, f = placement_matrix((100, 100), Placement(scale=2, offset_x=10))
        assert (a, b, e) == pytest.approx((0.5, 0, 0.5))
        assert d == pytest.approx(0)
        # canvas (10, 0) is the source origin
        assert a * 10 + c == pytest.approx(0)
        assert f == pytest.approx(0)


class TestFormats:
    @pytest.mark.parametrize("algorithm", list(OverlayAlgorithm))
    def test_dimensions_preserved(self, algorithm):
        source = _white((320, 240))
        result = render(source, OverlaySpec(algorithm=algorithm))
        image = open_result(result)
        assert image.size == (320, 240)
        assert image.format == "PNG"
        assert result.mime_type == "image/png"

    def test_render_all(self):
        results = render_all(_white((120, 80)), OverlaySpec(algorithm="ruled"))
        assert set(results) == set(OverlayAlgorithm)
        assert all(open_result(r).size == (120, 80) for r in results.values())

    def test_deterministic(self, white_png):
        spec = OverlaySpec(algorithm="calendar", line_color="#3B82F6")
        assert render(white_png, spec).data == render(white_png, spec).data

    def test_source_untouched(self, white_png):
        before = white_png.data
        render(white_png, _spec("grid"))
        assert white_png.data == before

    @pytest.mark.parametrize("mime,fmt", [("image/jpeg", "JPEG"), ("image/jpg", "JPEG"), ("image/gif", "GIF"), ("image/webp", "WEBP")])
    def test_other_formats(self, mime, fmt):
        source = RasterImage(data=make_image((64, 48), fmt=fmt), mime_type=mime)
        image = open_result(render(source, OverlaySpec(algorithm="grid")))
        assert image.format == fmt
        assert image.size == (64, 48)

    def test_jpeg_flattened_to_rgb(self):
        source = RasterImage(data=make_image((64, 48), fmt="JPEG"), mime_type="image/jpeg")
        assert open_result(render(source, OverlaySpec(algorithm="calendar"))).mode == "RGB"


class TestUnsupportedMedia:
    def test_unaccepted_type(self, white_png):
        with pytest.raises(UnsupportedMediaError) as exc_info:
            render(RasterImage(data=white_png.data, mime_type="application/pdf"), OverlaySpec(algorithm="ruled"))
        assert exc_info.value.mime_type == "application/pdf"

    def test_mismatched_bytes(self, white_png):
        with pytest.raises(UnsupportedMediaError) as exc_info:
            render(RasterImage(data=white_png.data, mime_type="image/jpeg"), OverlaySpec(algorithm="ruled"))
        assert exc_info.value.__cause__ is not None

    def test_corrupt_bytes(self):
        with pytest.raises(UnsupportedMediaError):
            render(RasterImage(data=b"not an image", mime_type="image/png"), OverlaySpec(algorithm="grid"))

    def test_oversized_header(self):
        source = RasterImage(data=_png_header(20000, 20000), mime_type="image/png")
        with pytest.raises(UnsupportedMediaError) as exc_info:
            render(source, OverlaySpec(algorithm="grid"))
        assert isinstance(exc_info.value.__cause__, Image.DecompressionBombError)

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            render(RasterImage(data=b"", mime_type="text/plain"), OverlaySpec(algorithm="grid"))


def test_unknown_line_color():
    with pytest.raises(ValueError):
        OverlaySpec(algorithm="ruled", line_color="not-a-color")
