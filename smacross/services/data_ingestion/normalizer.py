"""
Series Normalizer

Turns whatever order a provider returned into a strictly ascending,
one-point-per-date series.
"""

import logging
import math

from smacross.schemas.market import PricePoint
from smacross.services.base import EmptySeriesError

logger = logging.getLogger(__name__)


def normalize(raw: list[PricePoint]) -> list[PricePoint]:
    """
    Sort ascending by date and collapse duplicate dates.

    The last occurrence of a date in provider order wins. Points without a
    finite close (yfinance emits NaN rows around holidays) are dropped.
    History is never trimmed by date.

    Raises:
        EmptySeriesError: If no usable point remains
    """
    by_date: dict = {}
    dropped = 0

    for point in raw:
        if not math.isfinite(point.close):
            dropped += 1
            continue
        by_date[point.date] = point

    if dropped:
        logger.warning(f"Dropped {dropped} points without a usable close")

    if not by_date:
        raise EmptySeriesError("Provider returned no usable price data")

    return [by_date[day] for day in sorted(by_date)]
