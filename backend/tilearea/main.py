"""Tile Area Calculator — FastAPI application entry point."""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from tilearea.config import settings
from tilearea.api.routes_area import router as area_router
from tilearea.api.routes_worksheet import router as worksheet_router

__version__ = "0.1.0"

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.app_name,
    version=__version__,
    description="Total tile area for one or more rectangles, with a contingency buffer.",
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(area_router, prefix="/api")
app.include_router(worksheet_router, prefix="/api")


@app.get("/api/health")
async def health():
    return {"status": "ok", "version": __version__}


@app.get("/", include_in_schema=False)
async def root():
    """The interactive API docs double as the worksheet UI."""
    return RedirectResponse("/docs")
