"""Shared response DTOs and account provisioning schemas."""

from typing import Any

from pydantic import BaseModel, Field


class AcknowledgementResponse(BaseModel):
    """Body returned by delete endpoints."""

    success: bool = True


class SignupRequest(BaseModel):
    """Schema for provisioning the initial admin account."""

    email: str | None = Field(None, examples=["admin@example.com"])
    password: str | None = None
    name: str | None = Field(None, examples=["Admin"])


class SignupResponse(BaseModel):
    success: bool = True
    user: dict[str, Any]
