"""
Service layer

Each service has a typed input/output contract (see base.BaseService).
"""

from smacross.services.base import (
    AuthError,
    BaseService,
    EmptySeriesError,
    FetchError,
    FormatError,
    PipelineError,
    SymbolError,
    TransientError,
    ValidationError,
)

__all__ = [
    "BaseService",
    "PipelineError",
    "ValidationError",
    "FetchError",
    "AuthError",
    "SymbolError",
    "TransientError",
    "FormatError",
    "EmptySeriesError",
]
