"""FastAPI application for carbon2html."""

from __future__ import annotations

from fastapi import FastAPI

from carbon2html import __version__
from server.routers.convert import router as convert_router

app = FastAPI(
    title="carbon2html",
    description="Carbon editor JSON to HTML conversion service",
    version=__version__,
)
app.include_router(convert_router)


@app.get("/health")
def health() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok", "version": __version__}
