"""Server module entry point for running with python -m server."""

import os
import sys

from md2page.utils.logging_config import configure_logging, get_logger
from server.main import serve

logger = get_logger(__name__)

if __name__ == "__main__":
    configure_logging()

    # Get configuration from environment variables
    document = os.getenv("MD2PAGE_DOCUMENT")
    if not document:
        logger.error("MD2PAGE_DOCUMENT is not set")
        sys.exit(1)
    port = os.getenv("PORT")

    serve(document, port=int(port) if port else None)
