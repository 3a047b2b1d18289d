"""
CONTRACT 1: Data Ingestion Layer

Input: symbol + credential
Output: list[PricePoint]

Provider adapters fetch raw daily history from external APIs and map it
onto these provider-neutral models.
"""

import datetime as dt
from enum import Enum
from pydantic import BaseModel, Field


# =============================================================================
# ENUMS
# =============================================================================


class DataProvider(str, Enum):
    ALPHA_VANTAGE = "alphavantage"
    POLYGON = "polygon"
    YAHOO = "yahoo"


# =============================================================================
# OUTPUT: PricePoint
# =============================================================================


class PricePoint(BaseModel):
    """Single daily close."""

    date: dt.date
    close: float = Field(..., description="Closing price for the trading day")
