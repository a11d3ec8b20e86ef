"""Pydantic schema for the health check response."""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: Literal["ok"] = Field(default="ok", description="Service status")
    environment: str = Field(description="APP_ENV the service runs with")
    database: Literal["connected", "disconnected"] | None = Field(
        default=None,
        description="Whether SELECT 1 against the users database succeeded",
    )
