from notebook_layouts.renderer.content_areas import ContentArea, ContentAreaDetector, FixedContentAreaDetector
from notebook_layouts.renderer.image_io import decode_image, encode_image, image_size
from notebook_layouts.renderer.overlay_renderer import render, render_all

__all__ = [
    "ContentArea",
    "ContentAreaDetector",
    "FixedContentAreaDetector",
    "decode_image",
    "encode_image",
    "image_size",
    "render",
    "render_all",
]
