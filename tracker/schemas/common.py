"""
Error envelope shared by every route's documented 4xx/5xx responses.
"""
from typing import Any, Optional
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """`{code, message, details}` as produced by TrackerException.to_dict()."""
    code: str
    message: str
    details: Optional[dict[str, Any]] = None
