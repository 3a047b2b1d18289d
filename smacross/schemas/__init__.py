"""
SMA Crossover Schema Contracts

This module defines all JSON contracts between system components.
"""

from smacross.schemas.market import (
    DataProvider,
    PricePoint,
)
from smacross.schemas.analysis import (
    AnalysisRequest,
    AnalysisResult,
    CrossoverEvent,
    CrossoverKind,
    ErrorDetail,
    ErrorKind,
    ErrorResponse,
    IndicatorPoint,
)

__all__ = [
    "DataProvider",
    "PricePoint",
    "AnalysisRequest",
    "AnalysisResult",
    "CrossoverEvent",
    "CrossoverKind",
    "ErrorDetail",
    "ErrorKind",
    "ErrorResponse",
    "IndicatorPoint",
]
