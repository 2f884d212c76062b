"""
Quotes API - Pydantic Request/Response Schemas
===============================================

What:  The JSON contract of the API.
How:   FastAPI validates request bodies against the *Request models and
       serializes responses through the *Response envelopes. Every envelope
       carries `success` so clients can branch on a single field.

Schemas are kept separate from the SQLAlchemy model so that the wire format
can change without touching the table.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class QuoteCreate(BaseModel):
    """
    Body of POST /quotes.

    `text` is optional at the schema level so that a missing or empty value
    is answered with the service's 400 "Text is required" instead of a 422.
    """
    text: Optional[str] = Field(default=None, description="Quote text (required)")
    author: Optional[str] = Field(default=None, description="Author, defaults to 'Unknown'")


class QuoteUpdate(BaseModel):
    """Body of PUT /quotes/{id}. Author is kept when omitted or empty."""
    text: Optional[str] = Field(default=None, description="New quote text (required)")
    author: Optional[str] = Field(default=None, description="New author (optional)")


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class QuoteOut(BaseModel):
    id: int = Field(description="Storage-assigned quote id")
    text: str = Field(description="Quote text")
    author: Optional[str] = Field(default=None, description="Quote author")

    model_config = {"from_attributes": True}


class QuoteResponse(BaseModel):
    """Single-quote envelope; `message` is set on writes."""
    success: bool = True
    message: Optional[str] = None
    data: QuoteOut

    model_config = {"json_schema_extra": {"examples": [
        {"success": True, "data": {"id": 1, "text": "Stay hungry.", "author": "Steve Jobs"}},
    ]}}


class QuoteListResponse(BaseModel):
    success: bool = True
    count: int = Field(description="Number of quotes in `data`")
    data: List[QuoteOut]


class ErrorResponse(BaseModel):
    """
    Standardized error envelope for all API errors.

    Example:
        {"success": false, "error": "Quote not found", "request_id": "a1b2c3d4"}
    """
    success: bool = False
    error: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
