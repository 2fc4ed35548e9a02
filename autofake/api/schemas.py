"""API request/response schemas."""

from __future__ import annotations
from typing import Any
from pydantic import BaseModel, Field


class GenerateRequest(BaseModel):
    """Request body for the /generate endpoint."""
    name: str
    count: int = Field(default=1, ge=0, le=1000)
    rule_sets: str | None = None     # Comma-delimited, e.g. "default,admin"


class GenerateResponse(BaseModel):
    """Response from the /generate endpoint."""
    name: str
    count: int
    items: list[dict[str, Any]]


class ModelInfo(BaseModel):
    name: str
    type: str
    members: list[str]
