"""Pydantic models for the server responses."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response model for the /healthz endpoint."""

    status: str = Field(default="ok", description="Service status")
    document: str = Field(..., description="Path of the served document")
