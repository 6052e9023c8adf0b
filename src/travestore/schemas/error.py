"""Error response schema.

All error responses use the same envelope: {"success": false, "error": ...}.
``error`` is a single message, or one message per field for schema
validation failures. The translator in errors.py builds these.
"""

from typing import Literal

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Top-level error envelope returned by all error responses."""

    success: Literal[False] = False
    error: str | list[str] = Field(examples=["Product not found"])
