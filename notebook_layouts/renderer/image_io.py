"""Decode and encode raster images for the overlay renderer."""

import io
from typing import Tuple

from PIL import Image, UnidentifiedImageError

from notebook_layouts.config.spacing import FLATTEN_BACKGROUND, SUPPORTED_MEDIA
from notebook_layouts.errors import UnsupportedMediaError
from notebook_layouts.models.overlay import RasterImage

ALPHA_FORMATS = {"PNG", "GIF", "WEBP"}


def normalize_mime(mime_type: str) -> str:
    return (mime_type or "").split(";")[0].strip().lower()


def pillow_format(mime_type: str) -> str:
    fmt = SUPPORTED_MEDIA.get(normalize_mime(mime_type))
    if fmt is None:
        raise UnsupportedMediaError(
            f"Unsupported media type '{mime_type}'. Accepted: {sorted(SUPPORTED_MEDIA)}",
            mime_type=mime_type,
        )
    return fmt


def decode_image(source: RasterImage) -> Image.Image:
    """
    Open and fully load the image bytes.

    Raises:
        UnsupportedMediaError: Unaccepted MIME type, corrupt bytes,
            bytes whose real format differs from the declared one, or a
            header declaring more pixels than Pillow allows
    """
    fmt = pillow_format(source.mime_type)
    try:
        image = Image.open(io.BytesIO(source.data), formats=[fmt])
        image.load()
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, SyntaxError, ValueError) as e:
        raise UnsupportedMediaError(
            f"Could not decode {source.mime_type} image: {e}",
            mime_type=source.mime_type,
        ) from e
    return image


def has_alpha(image: Image.Image) -> bool:
    return image.mode in ("RGBA", "LA", "PA") or "transparency" in image.info


def encode_image(canvas: Image.Image, mime_type: str, keep_alpha: bool = True) -> RasterImage:
    """Encode an RGBA canvas in the format named by mime_type."""
    fmt = pillow_format(mime_type)
    out = canvas
    if fmt not in ALPHA_FORMATS or not keep_alpha:
        background = Image.new("RGBA", canvas.size, FLATTEN_BACKGROUND)
        background.alpha_composite(canvas)
        out = background.convert("RGB")

    buf = io.BytesIO()
    out.save(buf, format=fmt)
    return RasterImage(data=buf.getvalue(), mime_type=normalize_mime(mime_type))


def image_size(raster: RasterImage) -> Tuple[int, int]:
    return decode_image(raster).size
