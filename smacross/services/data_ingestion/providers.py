"""
Provider Registry

Maps DataProvider values onto adapter classes.
"""

from typing import Optional

from smacross.core.config import Settings, get_settings
from smacross.schemas.market import DataProvider
from smacross.services.data_ingestion.interface import ProviderAdapter
from smacross.services.data_ingestion.alphavantage_adapter import AlphaVantageAdapter
from smacross.services.data_ingestion.polygon_adapter import PolygonAdapter
from smacross.services.data_ingestion.yahoo_adapter import YahooAdapter


ADAPTERS: dict[DataProvider, type[ProviderAdapter]] = {
    DataProvider.ALPHA_VANTAGE: AlphaVantageAdapter,
    DataProvider.POLYGON: PolygonAdapter,
    DataProvider.YAHOO: YahooAdapter,
}


def get_adapter(
    provider: DataProvider,
    settings: Optional[Settings] = None,
    lookback_days: Optional[int] = None,
    timeout: Optional[float] = None,
) -> ProviderAdapter:
    """Create a fresh adapter for one request."""
    adapter_cls = ADAPTERS[provider]
    return adapter_cls(settings=settings, lookback_days=lookback_days, timeout=timeout)


def get_providers_status(settings: Optional[Settings] = None) -> list[dict]:
    """Describe each provider and whether a default API key is configured."""
    settings = settings or get_settings()
    status = []

    for provider in DataProvider:
        adapter = get_adapter(provider, settings=settings)
        status.append({
            "provider": provider.value,
            "name": adapter.name,
            "requiresCredential": adapter.requires_credential,
            "credentialConfigured": bool(adapter.default_credential()),
        })

    return status
