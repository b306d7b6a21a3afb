"""Heading tree models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HeadingNode(BaseModel):
    """A hierarchical heading node.

    Level 0 is reserved for the synthetic root that owns the top-level headings.
    """

    title: str = ""
    identifier: str = ""
    level: int = Field(..., ge=0, le=6)
    children: list["HeadingNode"] = Field(default_factory=list)

    @classmethod
    def root(cls) -> HeadingNode:
        """Create an empty synthetic root."""
        return cls(level=0)
