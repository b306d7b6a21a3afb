"""Local configuration for md2page."""

from __future__ import annotations

import os

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT_BASE = 6060
DEFAULT_PORT_ATTEMPTS = 10
DEFAULT_LANG = "en"
DEFAULT_HIGHLIGHT_STYLE = "dracula"
DEFAULT_LOG_LEVEL = "INFO"

# Anchor namespace for table of contents entries; headings link back to "#toc-<id>".
TOC_ANCHOR_PREFIX = "toc-"

# Heading levels accepted as anchors, matching HTML h1..h6.
MAX_HEADING_LEVEL = 6

MD2PAGE_HOST = os.getenv("MD2PAGE_HOST", DEFAULT_HOST)
MD2PAGE_PORT_BASE = int(os.getenv("MD2PAGE_PORT_BASE", str(DEFAULT_PORT_BASE)))
MD2PAGE_PORT_ATTEMPTS = int(os.getenv("MD2PAGE_PORT_ATTEMPTS", str(DEFAULT_PORT_ATTEMPTS)))
MD2PAGE_LANG = os.getenv("MD2PAGE_LANG", DEFAULT_LANG)
MD2PAGE_HIGHLIGHT_STYLE = os.getenv("MD2PAGE_HIGHLIGHT_STYLE", DEFAULT_HIGHLIGHT_STYLE)
MD2PAGE_LOG_LEVEL = os.getenv("MD2PAGE_LOG_LEVEL", DEFAULT_LOG_LEVEL)
