"""
Provider Adapter Interface

Defines the contract every market data provider implements.
"""

import asyncio
import json
import logging
from abc import ABC, abstractmethod
from datetime import date, datetime, timedelta, timezone
from typing import Any, Optional

import aiohttp

from smacross.core.config import Settings, get_settings
from smacross.schemas.market import DataProvider, PricePoint
from smacross.services.base import (
    AuthError,
    FetchError,
    FormatError,
    SymbolError,
    TransientError,
)

logger = logging.getLogger(__name__)

# Trading days per calendar year, used to size provider lookbacks
TRADING_DAYS_PER_YEAR = 252


def classify_status(status: int, provider: str) -> FetchError:
    """Map a non-success HTTP status onto the fetch error taxonomy."""
    if status in (401, 403):
        return AuthError(f"{provider} rejected the API key (HTTP {status})")
    if status == 404:
        return SymbolError(f"{provider} does not know the requested symbol (HTTP {status})")
    if status == 429 or status >= 500:
        return TransientError(f"{provider} is unavailable (HTTP {status})")
    return FormatError(f"{provider} returned an unexpected response (HTTP {status})")


class ProviderAdapter(ABC):
    """
    Provider Adapter Contract.

    INPUT: symbol, credential (optional)

    OUTPUT: list[PricePoint]
        - One entry per trading day returned by the provider
        - Ordering is provider-specific; the normalizer establishes order

    RAISES: AuthError, SymbolError, TransientError, FormatError

    One outbound call per fetch, never retried here.
    """

    provider: DataProvider
    requires_credential: bool = True

    def __init__(
        self,
        settings: Optional[Settings] = None,
        lookback_days: Optional[int] = None,
        timeout: Optional[float] = None,
    ):
        self.settings = settings or get_settings()
        self.lookback_days = lookback_days or self.settings.history_lookback_days
        self.timeout = timeout or self.settings.fetch_timeout_seconds

    @property
    @abstractmethod
    def name(self) -> str:
        """Display name for logs and error messages."""
        pass

    @abstractmethod
    async def fetch(self, symbol: str, credential: Optional[str] = None) -> list[PricePoint]:
        """Fetch daily closes for a symbol."""
        pass

    def default_credential(self) -> Optional[str]:
        """Environment-level API key for this provider."""
        return None

    def resolve_credential(self, credential: Optional[str] = None) -> Optional[str]:
        """Explicit credential first, then the environment default."""
        if credential and credential.strip():
            return credential.strip()

        default = self.default_credential()
        if default:
            return default

        if self.requires_credential:
            raise AuthError(f"No API key supplied or configured for {self.name}")
        return None

    def today(self) -> date:
        return datetime.now(timezone.utc).date()

    def start_date(self) -> date:
        """Oldest date covered by the configured lookback."""
        return self.today() - timedelta(days=self.lookback_days)

    def expected_points(self) -> int:
        """Approximate number of trading days inside the lookback."""
        return self.lookback_days * TRADING_DAYS_PER_YEAR // 365

    async def _get_json(self, url: str, params: dict[str, Any]) -> Any:
        """Single GET returning decoded JSON, with transport errors mapped."""
        client_timeout = aiohttp.ClientTimeout(total=self.timeout)

        try:
            async with aiohttp.ClientSession(timeout=client_timeout) as session:
                async with session.get(
                    url,
                    params=params,
                    headers={"Accept": "application/json"},
                ) as resp:
                    body = await resp.read()
                    if resp.status != 200:
                        snippet = body[:200].decode("utf-8", errors="replace")
                        logger.warning(f"{self.name} HTTP {resp.status}: {snippet}")
                        raise classify_status(resp.status, self.name)
        except asyncio.TimeoutError as e:
            raise TransientError(f"{self.name} request timed out") from e
        except aiohttp.ClientError as e:
            logger.warning(f"{self.name} network error: {e}")
            raise TransientError(f"{self.name} could not be reached") from e

        # UnicodeDecodeError is a ValueError: undecodable bytes are a format problem
        try:
            return json.loads(body)
        except ValueError as e:
            raise FormatError(f"{self.name} returned a non-JSON payload") from e
