"""Shared fixtures for the analysis pipeline tests."""

import asyncio
from datetime import date, timedelta
from typing import Optional

import pytest

from smacross.core.config import Settings
from smacross.schemas.market import DataProvider, PricePoint
from smacross.services.data_ingestion.interface import ProviderAdapter

SCENARIO_CLOSES = [10, 12, 11, 13, 15, 14, 16, 18, 17, 19]


def make_series(closes, start: date = date(2024, 1, 1)) -> list[PricePoint]:
    """Ascending series with one point per consecutive day."""
    return [
        PricePoint(date=start + timedelta(days=i), close=float(c))
        for i, c in enumerate(closes)
    ]


class StaticAdapter(ProviderAdapter):
    """Adapter returning canned points (or raising) without network access."""

    provider = DataProvider.YAHOO
    requires_credential = False

    def __init__(
        self,
        points: Optional[list[PricePoint]] = None,
        error: Optional[Exception] = None,
        delay: float = 0.0,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self.points = points or []
        self.error = error
        self.delay = delay
        self.calls: list[tuple] = []

    @property
    def name(self) -> str:
        return "Static"

    async def fetch(self, symbol, credential=None):
        self.calls.append((symbol, credential))
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return list(self.points)


class RecordingFactory:
    """Adapter factory handing out one prepared adapter and recording calls."""

    def __init__(self, adapter: ProviderAdapter):
        self.adapter = adapter
        self.calls: list[tuple] = []

    def __call__(self, provider, **kwargs):
        self.calls.append((provider, kwargs))
        return self.adapter


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        alpha_vantage_api_key=None,
        polygon_api_key=None,
        history_lookback_days=730,
        fetch_timeout_seconds=5.0,
    )


@pytest.fixture
def scenario_series() -> list[PricePoint]:
    return make_series(SCENARIO_CLOSES)
