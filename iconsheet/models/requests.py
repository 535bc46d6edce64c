"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class IconSetImportRequest(BaseModel):
    svg: str = Field(..., description="Icon sheet markup with <symbol> elements in <defs>")
    optimize: bool | None = Field(
        default=None,
        description="Hoist common width/height (defaults to EXPORT_OPTIMIZE)",
    )
    prefix: str | None = Field(default=None, description="Icon set prefix; detected from keys when omitted")
    debug: bool | None = Field(default=None, description="Log skipped symbols (defaults to IMPORT_DEBUG)")
