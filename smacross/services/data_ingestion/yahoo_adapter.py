"""
Yahoo Finance Data Adapter

Fetches daily closes from Yahoo Finance via yfinance.
No API key required. yfinance is blocking, so the download runs in a
worker thread.
"""

import asyncio
import logging
from datetime import date, timedelta
from typing import Optional

import pandas as pd
import yfinance as yf

from smacross.schemas.market import DataProvider, PricePoint
from smacross.services.base import FormatError, TransientError
from smacross.services.data_ingestion.interface import ProviderAdapter

logger = logging.getLogger(__name__)


class YahooAdapter(ProviderAdapter):
    """Yahoo Finance daily history."""

    provider = DataProvider.YAHOO
    requires_credential = False

    @property
    def name(self) -> str:
        return "Yahoo Finance"

    async def fetch(self, symbol: str, credential: Optional[str] = None) -> list[PricePoint]:
        # yfinance end date is exclusive
        start, end = self.start_date(), self.today() + timedelta(days=1)

        logger.info(f"Fetching {symbol} from Yahoo Finance ({start} to {end})...")
        try:
            hist = await asyncio.to_thread(self._download, symbol, start, end)
        except Exception as e:
            logger.error(f"Error fetching {symbol} from Yahoo Finance: {e}")
            raise TransientError(f"Yahoo Finance request failed for '{symbol}'") from e

        return self.parse_frame(hist, symbol)

    def _download(self, symbol: str, start: date, end: date) -> pd.DataFrame:
        ticker = yf.Ticker(symbol)
        return ticker.history(
            start=start.isoformat(),
            end=end.isoformat(),
            interval="1d",
            auto_adjust=False,
            timeout=self.timeout,
        )

    def parse_frame(self, hist: Optional[pd.DataFrame], symbol: str) -> list[PricePoint]:
        """Convert a yfinance history frame into price points."""
        if hist is None or hist.empty:
            logger.warning(f"No data returned for {symbol}")
            return []

        if "Close" not in hist.columns:
            raise FormatError("Yahoo Finance history has no 'Close' column")

        points = []
        for idx, close in hist["Close"].items():
            try:
                point_date = pd.Timestamp(idx).date()
                value = float(close)
            except (TypeError, ValueError) as e:
                raise FormatError(f"Yahoo Finance row {idx!r} is malformed") from e
            points.append(PricePoint(date=point_date, close=value))

        logger.info(f"Yahoo Finance returned {len(points)} points for {symbol}")
        return points
