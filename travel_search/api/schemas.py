"""API request/response models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"


class ErrorResponse(BaseModel):
    message: str = Field(description="Human-readable error message")


class DiagnosticsResponse(BaseModel):
    tools: dict[str, str] = Field(default_factory=dict)
    providers: dict[str, Any] = Field(default_factory=dict)
