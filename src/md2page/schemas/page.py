"""Rendered page output model."""

from __future__ import annotations

from pydantic import BaseModel


class RenderedPage(BaseModel):
    """Final conversion output."""

    title: str
    table_of_contents: str
    content: str
    html: str
    heading_count: int = 0
