"""
Data Ingestion Service

CONTRACT:
    Input:  symbol + credential
    Output: list[PricePoint] (provider order)

RESPONSIBILITIES:
    - Fetch daily closes from Alpha Vantage, Polygon or Yahoo Finance
    - Map provider failures onto AuthError / SymbolError / TransientError / FormatError
    - Normalize series into ascending, deduplicated order

NO CACHING - one outbound call per analysis.
"""

from smacross.services.data_ingestion.interface import ProviderAdapter, classify_status
from smacross.services.data_ingestion.normalizer import normalize
from smacross.services.data_ingestion.providers import (
    ADAPTERS,
    get_adapter,
    get_providers_status,
)

__all__ = [
    "ProviderAdapter",
    "classify_status",
    "normalize",
    "ADAPTERS",
    "get_adapter",
    "get_providers_status",
]
