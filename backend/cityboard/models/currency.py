"""Currency exchange models."""
from typing import Optional
from pydantic import BaseModel, Field


class CurrencyQuote(BaseModel):
    """Exchange rate between two currencies."""

    base: str = Field(..., description="Base currency code")
    target: str = Field(..., description="Target currency code")
    rate: float = Field(..., gt=0, description="Units of target per one unit of base")
    date: Optional[str] = Field(None, description="Provider's last update time")
