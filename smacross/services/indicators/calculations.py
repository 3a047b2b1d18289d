"""
Technical Indicator Calculations

Pure Python/NumPy implementations of the moving averages.
All math is deterministic.
"""

import numpy as np

from smacross.schemas.analysis import IndicatorPoint
from smacross.schemas.market import PricePoint


# =============================================================================
# MOVING AVERAGES
# =============================================================================


def sma(data: np.ndarray, period: int) -> np.ndarray:
    """
    Simple Moving Average.

    Each value is the mean of its own window, so rounding never carries
    over from earlier days. Positions before period - 1 are NaN.
    """
    if period < 1:
        raise ValueError(f"SMA period must be >= 1, got {period}")

    data = np.asarray(data, dtype=float)
    result = np.full(len(data), np.nan)
    if len(data) < period:
        return result

    windows = np.lib.stride_tricks.sliding_window_view(data, period)
    result[period - 1 :] = windows.mean(axis=1)
    return result


def to_optional(values: np.ndarray) -> list:
    """NaN -> None, everything else -> float."""
    return [None if np.isnan(v) else float(v) for v in values]


# =============================================================================
# SMA PAIR
# =============================================================================


def compute_smas(
    series: list[PricePoint],
    short_period: int,
    long_period: int,
) -> list[IndicatorPoint]:
    """
    Attach the short and long SMA to every point of a normalized series.

    Output length always equals input length. A period longer than the
    series leaves that SMA absent everywhere.
    """
    closes = np.array([p.close for p in series], dtype=float)
    short_values = to_optional(sma(closes, short_period))
    long_values = to_optional(sma(closes, long_period))

    return [
        IndicatorPoint(
            date=point.date,
            close=point.close,
            short_sma=short_sma,
            long_sma=long_sma,
        )
        for point, short_sma, long_sma in zip(series, short_values, long_values)
    ]
