"""FastAPI application serving a single rendered document."""

from __future__ import annotations

import os
import socket

import uvicorn
from fastapi import FastAPI

from md2page.page import PageTemplate
from md2page.rendering import RenderOptions
from md2page.utils.logging_config import get_logger
from server.routers import document
from server.server_config import DEFAULT_HOST, PORT_ATTEMPTS, PORT_BASE

logger = get_logger(__name__)


def create_app(
    source: str | os.PathLike[str],
    *,
    template: PageTemplate | None = None,
    options: RenderOptions | None = None,
) -> FastAPI:
    """Create the application serving ``source``."""
    app = FastAPI(title="md2page", docs_url=None, redoc_url=None, openapi_url=None)
    app.state.document = source
    app.state.template = template or PageTemplate()
    app.state.options = options or RenderOptions()
    app.include_router(document.router)
    return app


def open_listener(host: str = DEFAULT_HOST, base_port: int = PORT_BASE, attempts: int = PORT_ATTEMPTS) -> socket.socket:
    """Bind the first free port in ``base_port .. base_port + attempts - 1``.

    Falls back to a port chosen by the operating system when all are taken.
    """
    for port in range(base_port, base_port + attempts):
        try:
            return socket.create_server((host, port))
        except OSError as exc:
            logger.debug("Port %d unavailable: %s", port, exc)
    return socket.create_server((host, 0))


def serve(
    source: str | os.PathLike[str],
    *,
    host: str = DEFAULT_HOST,
    port: int | None = None,
    template: PageTemplate | None = None,
    options: RenderOptions | None = None,
) -> None:
    """Serve ``source`` until interrupted.

    With ``port`` set, only that port is tried.
    """
    app = create_app(source, template=template, options=options)
    if port is None:
        listener = open_listener(host)
    else:
        listener = socket.create_server((host, port))
    bound_port = listener.getsockname()[1]

    logger.info("Starting md2page server", extra={"host": host, "port": bound_port})
    print(f"serving {os.fspath(source)} at localhost:{bound_port}")

    server = uvicorn.Server(uvicorn.Config(app, log_config=None))
    server.run(sockets=[listener])
