"""Pydantic schemas for API requests and responses."""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime


class LinkRequest(BaseModel):
    """Request to shorten a URL.

    Every field is optional here so that a missing field is reported with the
    service's own message and a 400 rather than a schema 422.
    """

    original_url: Optional[str] = Field(None, alias="originalUrl", description="The URL to shorten")
    username: Optional[str] = Field(None, description="Submitting user")
    notification_type: Optional[str] = Field(
        None,
        alias="notificationType",
        description="Notification type (EMAIL, SMS, PUSH, WHATSAPP), case-insensitive",
    )

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "originalUrl": "https://example.com/very/long/path/to/resource",
                    "username": "bob",
                    "notificationType": "EMAIL",
                }
            ]
        },
    )


class ShortCodeResponse(BaseModel):
    """Response after shortening a URL."""

    short_code: str = Field(..., alias="shortCode", description="12-character hex short code")

    model_config = ConfigDict(populate_by_name=True)


class MessageResponse(BaseModel):
    """Plain message response, used for delete results and errors."""

    message: str


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Overall status")
    store: str = Field(..., description="Store status")
    timestamp: datetime = Field(..., description="Check timestamp")
