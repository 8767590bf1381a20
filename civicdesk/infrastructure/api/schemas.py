"""Request bodies for the HTTP API."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ComplaintCreate(BaseModel):
    reporter_id: str | None = Field(default=None, description="Authenticated user id")
    department: str | None = Field(default=None, description="Department code")
    description: str | None = None
    name: str | None = None
    phone: str | None = None
    address: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    photo_data: str | None = Field(
        default=None,
        description="Base64 image, raw or as a data:image/...;base64, URI",
    )
