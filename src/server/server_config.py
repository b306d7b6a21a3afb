"""Server configuration."""

from __future__ import annotations

from md2page.config import MD2PAGE_HOST, MD2PAGE_PORT_ATTEMPTS, MD2PAGE_PORT_BASE

DEFAULT_HOST = MD2PAGE_HOST
PORT_BASE = MD2PAGE_PORT_BASE
PORT_ATTEMPTS = MD2PAGE_PORT_ATTEMPTS
