"""API response models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"


class IconSetImportResponse(BaseModel):
    icon_set: dict[str, Any]
    count: int = 0
    prefix: str | None = None
    messages: list[str] = Field(default_factory=list)
