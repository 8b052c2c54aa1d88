"""Error response schemas.

Errors outside /deals use the envelope {"error": {"code": "...", "message": "..."}}.
Exception handlers in main.py construct these from domain exceptions.
"""

from pydantic import BaseModel


class ErrorDetail(BaseModel):
    """Machine-readable code plus a message safe to show to clients."""

    code: str
    message: str


class ErrorResponse(BaseModel):
    error: ErrorDetail
