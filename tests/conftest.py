"""Pytest configuration and fixtures."""

import io

import pytest
from PIL import Image

from notebook_layouts.models import RasterImage
from notebook_layouts.patterns import PatternCatalog, PatternCategory, create_pattern

SMALL_SVG = "<svg xmlns='http://www.w3.org/2000/svg' width='400' height='300'><rect width='100%' height='100%'/></svg>"


def make_image(size=(300, 300), color="white", mode="RGB", fmt="PNG") -> bytes:
    buf = io.BytesIO()
    Image.new(mode, size, color).save(buf, format=fmt)
    return buf.getvalue()


def open_result(raster: RasterImage) -> Image.Image:
    return Image.open(io.BytesIO(raster.data))


@pytest.fixture
def starter_catalog() -> PatternCatalog:
    return PatternCatalog.from_starter_patterns()


@pytest.fixture
def cornell_zero_popularity():
    """Study pattern sharing no words with a weekly planning prompt."""
    return create_pattern(
        name="Cornell Notes",
        category=PatternCategory.STUDY,
        description="Cue column and summary strip",
        keywords=["cornell", "cue", "summary"],
        tags=["study"],
        artwork=SMALL_SVG,
        popularity=0,
    )


@pytest.fixture
def white_png() -> RasterImage:
    return RasterImage(data=make_image((300, 300)), mime_type="image/png")


@pytest.fixture
def client():
    """Test client for the FastAPI app."""
    from fastapi.testclient import TestClient

    from web.backend.main import app

    return TestClient(app)
