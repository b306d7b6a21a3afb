"""Document endpoints."""

from __future__ import annotations

import asyncio
import os

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, Response

from md2page.exceptions import Md2pageError
from md2page.rendering import render_document
from md2page.utils.logging_config import get_logger
from server.models import HealthResponse

logger = get_logger(__name__)

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def read_document(request: Request) -> Response:
    """Render the served document and return the HTML page.

    **The document is re-read and re-rendered on every request**, so edits show
    up on reload. Conversions run in a worker thread and share no state.

    **Returns**

    - **HTMLResponse**: The rendered page
    - **PlainTextResponse**: **500** with the error message if rendering failed
    """
    state = request.app.state
    try:
        page = await asyncio.to_thread(
            render_document,
            state.document,
            template=state.template,
            options=state.options,
        )
    except Md2pageError as exc:
        logger.error(
            "Rendering failed",
            extra={"document": os.fspath(state.document), "error": str(exc)},
        )
        return PlainTextResponse(str(exc), status_code=500)
    return HTMLResponse(page.html)


@router.get("/healthz", response_model=HealthResponse)
async def healthz(request: Request) -> HealthResponse:
    """Report that the server is up and which document it serves."""
    return HealthResponse(document=os.fspath(request.app.state.document))
