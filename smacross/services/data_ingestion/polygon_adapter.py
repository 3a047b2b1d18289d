"""
Polygon.io Data Adapter

Fetches daily aggregates from the Polygon v2 aggregates endpoint.

Bars are keyed by epoch milliseconds marking the start of the US/Eastern
trading day; an unknown ticker comes back as an empty result set.
"""

import logging
from datetime import datetime
from typing import Any, Optional
from urllib.parse import quote
from zoneinfo import ZoneInfo

from smacross.schemas.market import DataProvider, PricePoint
from smacross.services.base import AuthError, FormatError, TransientError
from smacross.services.data_ingestion.interface import ProviderAdapter

logger = logging.getLogger(__name__)
EASTERN = ZoneInfo("America/New_York")

MAX_RESULTS = 50000


class PolygonAdapter(ProviderAdapter):
    """Polygon.io daily aggregates."""

    provider = DataProvider.POLYGON
    requires_credential = True

    @property
    def name(self) -> str:
        return "Polygon"

    def default_credential(self) -> Optional[str]:
        return self.settings.polygon_api_key

    async def fetch(self, symbol: str, credential: Optional[str] = None) -> list[PricePoint]:
        api_key = self.resolve_credential(credential)
        start, end = self.start_date(), self.today()
        url = (
            f"{self.settings.polygon_base_url}/v2/aggs/ticker/{quote(symbol, safe='')}"
            f"/range/1/day/{start.isoformat()}/{end.isoformat()}"
        )
        params = {
            "adjusted": "true",
            "sort": "asc",
            "limit": MAX_RESULTS,
            "apiKey": api_key,
        }

        logger.info(f"Fetching {symbol} from Polygon ({start} to {end})...")
        payload = await self._get_json(url, params)
        return self.parse_payload(payload, symbol)

    def parse_payload(self, payload: Any, symbol: str) -> list[PricePoint]:
        """Convert an aggregates body into price points."""
        if not isinstance(payload, dict):
            raise FormatError("Polygon payload is not a JSON object")

        status = str(payload.get("status", "")).upper()
        if status in ("ERROR", "NOT_AUTHORIZED"):
            message = str(payload.get("error") or payload.get("message") or "")
            logger.warning(f"Polygon error for {symbol}: {status} {message}")
            lowered = message.lower()
            if status == "NOT_AUTHORIZED" or "api key" in lowered:
                raise AuthError("Polygon rejected the API key")
            if "exceeded" in lowered or "maximum requests" in lowered:
                raise TransientError("Polygon rate limit reached")
            raise FormatError("Polygon reported an error instead of data")

        results = payload.get("results")
        if results is None:
            logger.warning(f"No data returned for {symbol} from Polygon")
            return []
        if not isinstance(results, list):
            raise FormatError("Polygon 'results' is not a list")

        points = []
        for row in results:
            try:
                ts = datetime.fromtimestamp(int(row["t"]) / 1000, tz=EASTERN)
                close = float(row["c"])
            except (KeyError, TypeError, ValueError, OverflowError, OSError) as e:
                raise FormatError("Polygon aggregate row is malformed") from e
            points.append(PricePoint(date=ts.date(), close=close))

        logger.info(f"Polygon returned {len(points)} points for {symbol}")
        return points
