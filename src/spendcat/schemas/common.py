"""Schemas shared across resources."""

from pydantic import BaseModel, Field


class StatusResponse(BaseModel):
    """Body of ``GET /status`` and of successful deletes."""

    status: str = Field(description="Short status word")


class ErrorTitle(BaseModel):
    title: str


class ErrorResponse(BaseModel):
    """Shape of every error body: ``{"error": {"title": ...}}``."""

    error: ErrorTitle
