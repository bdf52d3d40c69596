"""Pydantic schema for the /ping health probe."""

from typing import Literal

from pydantic import BaseModel, Field


class PingResponse(BaseModel):
    """Response body for the health check endpoint."""

    status: Literal["ok"] = Field(default="ok", description="Service status")
    message: str = Field(default="API is working!")
    environment: str = Field(description="Current app environment (e.g. dev, prod)")
    database: Literal["connected", "disconnected"] | None = Field(
        default=None,
        description="Database connectivity status when check is performed",
    )
