"""Pydantic schemas for the JSON bodies returned by the video endpoints."""

from __future__ import annotations

from pydantic import BaseModel, Field


class RetryLaterResponse(BaseModel):
    """Body of the 202 returned while a video is still "being prepared"."""

    status: int = Field(202, description="Mirrors the HTTP status code.")
    message: str = Field("Please retry later", description="Human-readable hint.")
    attempt: int = Field(..., description="Attempt number for this video, starting at 1.", ge=1)
    videoId: str = Field(..., description="Video id exactly as it appeared in the path.")


class StatusMessageResponse(BaseModel):
    """Body of a forced upstream failure (429 or 404)."""

    status: int = Field(..., description="Mirrors the HTTP status code.")
    message: str


class EndpointErrorResponse(BaseModel):
    """Body returned for requests the mock does not serve."""

    error: str
    message: str

    @classmethod
    def invalid_endpoint(cls) -> "EndpointErrorResponse":
        return cls(
            error="Invalid endpoint",
            message="Only endpoints /video/1 through /video/100 are available",
        )
