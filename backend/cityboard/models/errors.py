"""Error response model."""
from typing import Any, Optional
from pydantic import BaseModel


class ErrorBody(BaseModel):
    """JSON body returned for every failed API call."""

    error: str
    details: Optional[Any] = None
