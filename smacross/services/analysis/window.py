"""
Window Selection

Trims the indicator series to what the chart shows. SMAs are computed on
the full history first, so the visible points keep their warm-up.
"""

from smacross.schemas.analysis import CrossoverEvent, IndicatorPoint


def select_window(points: list[IndicatorPoint], window_days: int) -> list[IndicatorPoint]:
    """Last min(window_days, len(points)) points, order preserved."""
    if window_days < 1:
        raise ValueError(f"window_days must be >= 1, got {window_days}")
    return points[-window_days:]


def filter_events(
    events: list[CrossoverEvent],
    window: list[IndicatorPoint],
) -> list[CrossoverEvent]:
    """Drop events dated outside the visible window."""
    visible = {point.date for point in window}
    return [event for event in events if event.date in visible]
