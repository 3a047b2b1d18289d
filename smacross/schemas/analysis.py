"""
CONTRACT 2: SMA Crossover Analysis

Input: AnalysisRequest
Output: AnalysisResult | ErrorResponse

Field aliases follow the camelCase wire format used by the chart frontend.
"""

import datetime as dt
from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# ENUMS
# =============================================================================


class CrossoverKind(str, Enum):
    BULLISH = "bullish"
    BEARISH = "bearish"


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    AUTH = "auth"
    SYMBOL = "symbol"
    TRANSIENT = "transient"
    FORMAT = "format"
    EMPTY_SERIES = "empty_series"


# =============================================================================
# INPUT: AnalysisRequest
# =============================================================================


class AnalysisRequest(BaseModel):
    """
    Request for an SMA crossover analysis.
    Sent by: Frontend settings panel
    Received by: Analysis Service

    Values are range-checked by the service, not here, so that a zero or
    negative period is reported as a validation error of the pipeline.
    Numeric fields are strict: JSON booleans are not periods or timeouts.
    """

    model_config = ConfigDict(populate_by_name=True)

    symbol: Optional[str] = Field(
        default=None,
        description="Instrument symbol (e.g., 'SPY', '^GDAXI')",
    )
    short_period: Optional[int] = Field(
        default=None,
        alias="shortPeriod",
        strict=True,
        description="Window of the short SMA, in trading days",
    )
    long_period: Optional[int] = Field(
        default=None,
        alias="longPeriod",
        strict=True,
        description="Window of the long SMA, in trading days",
    )
    window_days: Optional[int] = Field(
        default=None,
        alias="windowDays",
        strict=True,
        description="Number of most recent trading days to return",
    )
    provider: Optional[str] = Field(
        default=None,
        description="Market data provider (alphavantage, polygon, yahoo)",
    )
    credential: Optional[str] = Field(
        default=None,
        description="Provider API key; falls back to the environment default",
    )
    timeout_seconds: Optional[float] = Field(
        default=None,
        alias="timeoutSeconds",
        strict=True,
        description="Fetch timeout; falls back to the configured default",
    )


# =============================================================================
# OUTPUT: AnalysisResult
# =============================================================================


class IndicatorPoint(BaseModel):
    """Close with both moving averages; None during warm-up."""

    model_config = ConfigDict(populate_by_name=True)

    date: dt.date
    close: float
    short_sma: Optional[float] = Field(default=None, alias="shortSMA")
    long_sma: Optional[float] = Field(default=None, alias="longSMA")


class CrossoverEvent(BaseModel):
    """Short SMA crossing the long SMA between two adjacent days."""

    date: dt.date
    kind: CrossoverKind


class AnalysisResult(BaseModel):
    """
    Time-windowed series ready for charting.
    Sent by: Analysis Service
    Received by: Frontend chart
    """

    symbol: str
    series: list[IndicatorPoint]
    events: list[CrossoverEvent]


class ErrorDetail(BaseModel):
    kind: ErrorKind
    message: str


class ErrorResponse(BaseModel):
    """Failure envelope returned across the service boundary."""

    error: ErrorDetail
