"""Overlay rendering endpoint"""

import io

from fastapi import APIRouter, File, Form, HTTPException, UploadFile
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import Response
from pydantic import ValidationError

from notebook_layouts.models import (
    LineSpacing,
    OverlayAlgorithm,
    OverlaySpec,
    PaperLineType,
    Placement,
    RasterImage,
)
from notebook_layouts.renderer import render
from web.backend.config import get_settings

router = APIRouter()

UPLOAD_CHUNK_BYTES = 1024 * 1024


@router.post("/render")
async def render_overlay(
    file: UploadFile = File(...),
    algorithm: OverlayAlgorithm = Form(...),
    line_spacing: LineSpacing = Form(LineSpacing.NORMAL),
    margin_line: bool = Form(False),
    line_color: str = Form("#CCCCCC"),
    overlay_opacity: float = Form(0.3),
    paper_line_type: PaperLineType = Form(PaperLineType.RULED),
    offset_x: float = Form(0.0),
    offset_y: float = Form(0.0),
    scale: float = Form(1.0),
    rotation_degrees: float = Form(0.0),
) -> Response:
    """
    Draw a guide overlay onto the uploaded image.

    Returns the rendered image with the upload's content type. Undecodable
    or unaccepted images are rejected with 415.
    """
    max_bytes = get_settings().max_upload_bytes
    buf = io.BytesIO()
    size = 0
    try:
        while True:
            chunk = await file.read(UPLOAD_CHUNK_BYTES)
            if not chunk:
                break
            size += len(chunk)
            if size > max_bytes:
                raise HTTPException(status_code=413, detail=f"Upload exceeds {max_bytes} bytes")
            buf.write(chunk)
    finally:
        await file.close()

    try:
        spec = OverlaySpec(
            algorithm=algorithm,
            line_spacing=line_spacing,
            margin_line=margin_line,
            line_color=line_color,
            overlay_opacity=overlay_opacity,
            paper_line_type=paper_line_type,
            placement=Placement(
                offset_x=offset_x,
                offset_y=offset_y,
                scale=scale,
                rotation_degrees=rotation_degrees,
            ),
        )
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.errors(include_url=False, include_context=False))

    source = RasterImage(data=buf.getvalue(), mime_type=file.content_type or "")
    # CPU-bound, runs in the worker threadpool
    rendered = await run_in_threadpool(render, source, spec)
    return Response(content=rendered.data, media_type=rendered.mime_type)
