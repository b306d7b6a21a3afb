"""Shared schemas for md2page."""

from md2page.schemas.headings import HeadingNode
from md2page.schemas.page import RenderedPage

__all__ = ["HeadingNode", "RenderedPage"]
