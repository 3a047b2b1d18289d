"""
Alpha Vantage Data Adapter

Fetches daily closes from the Alpha Vantage TIME_SERIES_DAILY endpoint.

Alpha Vantage answers HTTP 200 for most failures and reports them in the
body under "Error Message", "Note" or "Information". The time series is a
mapping keyed by date, newest first.
"""

import logging
from datetime import date
from typing import Any, Optional

from smacross.schemas.market import DataProvider, PricePoint
from smacross.services.base import AuthError, FormatError, SymbolError, TransientError
from smacross.services.data_ingestion.interface import ProviderAdapter

logger = logging.getLogger(__name__)


TIME_SERIES_KEY = "Time Series (Daily)"
CLOSE_KEY = "4. close"

# outputsize=compact returns the latest 100 data points
COMPACT_POINTS = 100

RATE_LIMIT_MARKERS = ("rate limit", "call frequency", "requests per")
AUTH_MARKERS = ("apikey", "api key", "premium")


class AlphaVantageAdapter(ProviderAdapter):
    """Alpha Vantage daily time series."""

    provider = DataProvider.ALPHA_VANTAGE
    requires_credential = True

    @property
    def name(self) -> str:
        return "Alpha Vantage"

    def default_credential(self) -> Optional[str]:
        return self.settings.alpha_vantage_api_key

    def output_size(self) -> str:
        return "compact" if self.expected_points() <= COMPACT_POINTS else "full"

    async def fetch(self, symbol: str, credential: Optional[str] = None) -> list[PricePoint]:
        api_key = self.resolve_credential(credential)
        params = {
            "function": "TIME_SERIES_DAILY",
            "symbol": symbol,
            "outputsize": self.output_size(),
            "apikey": api_key,
        }

        logger.info(f"Fetching {symbol} from Alpha Vantage ({params['outputsize']})...")
        payload = await self._get_json(self.settings.alpha_vantage_base_url, params)
        return self.parse_payload(payload, symbol)

    def parse_payload(self, payload: Any, symbol: str) -> list[PricePoint]:
        """Convert a TIME_SERIES_DAILY body into price points."""
        if not isinstance(payload, dict):
            raise FormatError("Alpha Vantage payload is not a JSON object")

        if "Error Message" in payload:
            message = str(payload["Error Message"])
            logger.warning(f"Alpha Vantage error for {symbol}: {message}")
            if any(marker in message.lower() for marker in AUTH_MARKERS):
                raise AuthError("Alpha Vantage rejected the API key")
            raise SymbolError(f"Alpha Vantage does not recognise symbol '{symbol}'")

        for key in ("Note", "Information"):
            if key in payload and TIME_SERIES_KEY not in payload:
                message = str(payload[key]).lower()
                logger.warning(f"Alpha Vantage {key.lower()} for {symbol}: {payload[key]}")
                if any(marker in message for marker in RATE_LIMIT_MARKERS):
                    raise TransientError("Alpha Vantage rate limit reached")
                if any(marker in message for marker in AUTH_MARKERS):
                    raise AuthError("Alpha Vantage API key is not entitled to this request")
                raise FormatError("Alpha Vantage returned a notice instead of data")

        series = payload.get(TIME_SERIES_KEY)
        if not isinstance(series, dict):
            raise FormatError(f"Alpha Vantage payload has no '{TIME_SERIES_KEY}' object")

        cutoff = self.start_date()
        points = []
        for day, values in series.items():
            try:
                point_date = date.fromisoformat(day)
                close = float(values[CLOSE_KEY])
            except (KeyError, TypeError, ValueError) as e:
                raise FormatError(f"Alpha Vantage row for {day!r} is malformed") from e

            if point_date < cutoff:
                continue
            points.append(PricePoint(date=point_date, close=close))

        logger.info(f"Alpha Vantage returned {len(points)} points for {symbol}")
        return points
