"""Pydantic schemas for API requests and responses."""

from datetime import datetime

from pydantic import BaseModel, Field, StrictStr, model_validator


class ShortenRequest(BaseModel):
    """Request to shorten a URL.

    Only checks the shape of the body; URL syntax is validated afterwards by
    the service so the two failures produce different errors.
    """

    url: StrictStr = Field(..., description="The URL to shorten", min_length=1)

    @model_validator(mode="before")
    @classmethod
    def match_url_key(cls, data):
        """Accept the field name in any letter case ("URL", "Url")."""
        if isinstance(data, dict) and "url" not in data:
            for key, value in data.items():
                if isinstance(key, str) and key.lower() == "url":
                    return {**data, "url": value}
        return data

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"url": "https://example.com/very/long/path/to/resource"},
            ]
        }
    }


class ShortenResponse(BaseModel):
    """Response after shortening a URL."""

    short_url: str = Field(..., description="The complete short URL")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"short_url": "http://localhost:8080/0"},
            ]
        }
    }


class URLInfoResponse(BaseModel):
    """Response with URL information."""

    key: str
    target: str
    short_url: str


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Overall status")
    total_urls: int = Field(..., description="Number of stored short links")
    timestamp: datetime = Field(..., description="Check timestamp")


class ErrorResponse(BaseModel):
    """Error response."""

    error: str = Field(..., description="Error message")
