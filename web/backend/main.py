"""
FastAPI backend for the notebook layout engine

Prompt-driven layout retrieval, catalog browsing and guide overlay rendering.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from notebook_layouts import __version__
from notebook_layouts.errors import InvalidQueryError, UnsupportedMediaError
from web.backend.api import layouts, overlays, patterns
from web.backend.config import get_settings

settings = get_settings()
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Notebook Layouts API",
    description="Layout retrieval and overlay generation for a digital notebook",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(InvalidQueryError)
async def invalid_query_handler(request: Request, exc: InvalidQueryError):
    return JSONResponse(status_code=400, content={"success": False, "error": str(exc)})


@app.exception_handler(UnsupportedMediaError)
async def unsupported_media_handler(request: Request, exc: UnsupportedMediaError):
    return JSONResponse(
        status_code=415,
        content={"success": False, "error": str(exc), "mime_type": exc.mime_type},
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"success": False, "error": str(exc)})


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": "Notebook Layouts API",
        "version": __version__,
        "docs": "/docs",
        "status": "running",
    }


@app.get("/health")
async def health():
    """Health check endpoint"""
    return {"status": "healthy", "services": {"api": "running"}}


app.include_router(layouts.router, prefix="/api/layouts", tags=["layouts"])
app.include_router(patterns.router, prefix="/api/patterns", tags=["patterns"])
app.include_router(overlays.router, prefix="/api/overlays", tags=["overlays"])


if __name__ == "__main__":
    import uvicorn

    logger.info("Starting Notebook Layouts API, docs at http://localhost:8000/docs")
    uvicorn.run("web.backend.main:app", host="0.0.0.0", port=8000, reload=True)
