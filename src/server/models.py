"""Pydantic models for the conversion API."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, field_validator

from server.server_config import MAX_DOCUMENT_CHARS


class ErrorKind(str, Enum):
    """Failure categories reported by the API."""

    PARSE = "parse"
    STRUCTURE = "structure"
    SANITIZATION = "sanitization"


class ConvertRequest(BaseModel):
    """Request model for the /api/convert endpoint.

    Attributes
    ----------
    document : str
        Carbon editor JSON, as text.
    insert_min_chars : int | None
        Optional override of the custom insert length threshold.

    """

    document: str = Field(..., max_length=MAX_DOCUMENT_CHARS, description="Carbon editor JSON document")
    insert_min_chars: int | None = Field(default=None, ge=0, description="Custom insert length threshold")

    @field_validator("document")
    @classmethod
    def validate_document(cls, v: str) -> str:
        """Validate that ``document`` is not empty."""
        if not v.strip():
            err = "document cannot be empty"
            raise ValueError(err)
        return v


class ConvertSuccessResponse(BaseModel):
    """Success response model for the /api/convert endpoint."""

    html: str


class ConvertErrorResponse(BaseModel):
    """Error response model for the /api/convert endpoint."""

    error: str
    kind: ErrorKind
