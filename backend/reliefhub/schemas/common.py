"""
ReliefHub Backend — Response Envelopes
========================================

What:  Pydantic models for the JSON envelopes every route returns.
Who:   Used by route handlers as ``response_model``.

Every successful resource response has the same outer shape:
    {"success": true, "message": "...", "data": ...}
``data`` is a document, a list of documents, a write acknowledgement, or null.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """Envelope without a payload, returned by registration."""
    success: bool = Field(default=True)
    message: str


class ApiResponse(BaseModel):
    """Envelope wrapping a resource payload."""
    success: bool = Field(default=True)
    message: str
    data: Any = Field(default=None, description="Document(s) or store acknowledgement")


class ServerStatus(BaseModel):
    """Returned by GET / to show the process is serving requests."""
    message: str = Field(default="Server is running smoothly")
    timestamp: datetime


class ErrorResponse(BaseModel):
    """Body of every error produced by the global exception handlers."""
    success: bool = Field(default=False)
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable explanation")
    request_id: str = Field(default="", description="Correlates with server logs")
