"""
Analysis Service Implementation

Runs the SMA crossover pipeline for one request:
Validate -> Fetch -> Normalize -> Compute -> DetectCrossovers -> SelectWindow.

Each step fails fast; no partial result is returned and nothing is retried.
"""

import asyncio
import logging
import math
from typing import Any, Callable, Optional, Union

from smacross.core.config import Settings, get_settings
from smacross.schemas.analysis import AnalysisRequest, AnalysisResult, ErrorResponse
from smacross.schemas.market import DataProvider, PricePoint
from smacross.services.base import PipelineError, TransientError, ValidationError
from smacross.services.analysis.interface import AnalysisServiceInterface
from smacross.services.analysis.window import filter_events, select_window
from smacross.services.data_ingestion import ProviderAdapter, get_adapter, normalize
from smacross.services.data_ingestion.interface import TRADING_DAYS_PER_YEAR
from smacross.services.indicators import compute_smas, detect_crossovers

logger = logging.getLogger(__name__)

# Extra calendar days on top of the trading-day estimate (holidays)
LOOKBACK_BUFFER_DAYS = 14

AdapterFactory = Callable[..., ProviderAdapter]


def _require_positive_int(value: Any, field: str) -> int:
    if value is None:
        raise ValidationError(f"{field} is required")
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{field} must be an integer")
    if value <= 0:
        raise ValidationError(f"{field} must be a positive integer, got {value}")
    return value


class AnalysisService(AnalysisServiceInterface):
    """
    SMA Crossover Analysis Service.

    Holds configuration only, so one instance can serve concurrent requests.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        adapter_factory: Optional[AdapterFactory] = None,
    ):
        self.settings = settings or get_settings()
        self._adapter_factory = adapter_factory or get_adapter

    @property
    def name(self) -> str:
        return "AnalysisService"

    async def validate_input(self, input_data: AnalysisRequest) -> AnalysisRequest:
        """Reject missing or non-positive parameters and unknown providers."""
        symbol = (input_data.symbol or "").strip().upper()
        if not symbol:
            raise ValidationError("symbol is required")

        short_period = _require_positive_int(input_data.short_period, "shortPeriod")
        long_period = _require_positive_int(input_data.long_period, "longPeriod")
        window_days = _require_positive_int(input_data.window_days, "windowDays")

        provider_name = (input_data.provider or "").strip().lower()
        try:
            provider = DataProvider(provider_name)
        except ValueError:
            supported = ", ".join(p.value for p in DataProvider)
            raise ValidationError(
                f"Unknown provider '{input_data.provider}'. Supported: {supported}"
            ) from None

        timeout = input_data.timeout_seconds
        if timeout is not None and not (math.isfinite(timeout) and timeout > 0):
            raise ValidationError("timeoutSeconds must be a positive number")

        return input_data.model_copy(
            update={
                "symbol": symbol,
                "short_period": short_period,
                "long_period": long_period,
                "window_days": window_days,
                "provider": provider.value,
            }
        )

    def required_lookback_days(self, request: AnalysisRequest) -> int:
        """Calendar days needed for the window plus the longest SMA warm-up."""
        points = request.window_days + max(request.short_period, request.long_period) - 1
        calendar_days = math.ceil(points * 365 / TRADING_DAYS_PER_YEAR) + LOOKBACK_BUFFER_DAYS
        return max(self.settings.history_lookback_days, calendar_days)

    async def execute(self, input_data: AnalysisRequest) -> AnalysisResult:
        """Run the full pipeline for one request."""
        request = await self.validate_input(input_data)
        provider = DataProvider(request.provider)
        timeout = request.timeout_seconds or self.settings.fetch_timeout_seconds

        adapter = self._adapter_factory(
            provider,
            settings=self.settings,
            lookback_days=self.required_lookback_days(request),
            timeout=timeout,
        )

        raw = await self._fetch(adapter, request.symbol, request.credential, timeout)
        series = normalize(raw)
        points = compute_smas(series, request.short_period, request.long_period)
        events = detect_crossovers(points)
        window = select_window(points, request.window_days)
        visible_events = filter_events(events, window)

        logger.info(
            f"Analysed {request.symbol} via {adapter.name}: "
            f"{len(series)} points, SMA {request.short_period}/{request.long_period}, "
            f"{len(window)} shown, {len(visible_events)} of {len(events)} crossovers in window"
        )

        return AnalysisResult(
            symbol=request.symbol,
            series=window,
            events=visible_events,
        )

    async def analyze(self, input_data: AnalysisRequest) -> AnalysisResult:
        """Alias of execute()."""
        return await self.execute(input_data)

    async def analyze_or_error(
        self, input_data: AnalysisRequest
    ) -> Union[AnalysisResult, ErrorResponse]:
        """Run the pipeline, turning failures into the error envelope."""
        try:
            return await self.execute(input_data)
        except PipelineError as e:
            logger.warning(f"Analysis failed ({e.kind.value}): {e.message}")
            return e.to_error_response()

    async def _fetch(
        self,
        adapter: ProviderAdapter,
        symbol: str,
        credential: Optional[str],
        timeout: float,
    ) -> list[PricePoint]:
        """Await the provider call as one unit bounded by the timeout."""
        try:
            return await asyncio.wait_for(adapter.fetch(symbol, credential), timeout=timeout)
        except asyncio.TimeoutError as e:
            raise TransientError(f"{adapter.name} did not respond within {timeout:g}s") from e
        except PipelineError:
            raise
        except Exception as e:
            logger.exception(f"Unexpected error fetching {symbol} from {adapter.name}")
            raise TransientError(f"{adapter.name} fetch failed") from e

    async def health_check(self) -> bool:
        """Pure computation apart from the fetch; always ready."""
        return True


# Singleton instance
_service_instance: Optional[AnalysisService] = None


def get_analysis_service() -> AnalysisService:
    """Get or create analysis service instance."""
    global _service_instance
    if _service_instance is None:
        _service_instance = AnalysisService()
    return _service_instance
