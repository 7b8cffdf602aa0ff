"""Pydantic models for API request/response."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class UploadResponse(BaseModel):
    file_id: str
    preview_markdown: str


class RenderRequest(BaseModel):
    markdown: str | None = None
    file_id: str | None = None


class RenderResponse(BaseModel):
    html: str
    node_count: int


class ParseRequest(BaseModel):
    markdown: str


class ParseResponse(BaseModel):
    nodes: list[dict[str, Any]] = Field(default_factory=list)
