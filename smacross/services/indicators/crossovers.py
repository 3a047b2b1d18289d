"""
Crossover Detection

Finds the days on which the short SMA crosses the long SMA.
"""

import math
from typing import Optional

from smacross.schemas.analysis import CrossoverEvent, CrossoverKind, IndicatorPoint

# SMAs closer than this are treated as equal
REL_TOLERANCE = 1e-9
ABS_TOLERANCE = 1e-12


def _sign(point: IndicatorPoint) -> Optional[int]:
    """Sign of short - long, 0 when equal, None while either SMA is warming up."""
    if point.short_sma is None or point.long_sma is None:
        return None
    if math.isclose(
        point.short_sma,
        point.long_sma,
        rel_tol=REL_TOLERANCE,
        abs_tol=ABS_TOLERANCE,
    ):
        return 0
    return 1 if point.short_sma > point.long_sma else -1


def detect_crossovers(points: list[IndicatorPoint]) -> list[CrossoverEvent]:
    """
    Scan adjacent pairs for a strict sign change of short - long.

    Bullish: short below long on the previous day, above on the current one.
    Bearish: the mirror. A day where the SMAs are equal (within floating-point
    tolerance) counts as not yet crossed, so it never produces an event on
    either side.
    """
    events: list[CrossoverEvent] = []

    for prev, curr in zip(points, points[1:]):
        prev_sign = _sign(prev)
        curr_sign = _sign(curr)
        if prev_sign is None or curr_sign is None:
            continue

        if prev_sign < 0 and curr_sign > 0:
            events.append(CrossoverEvent(date=curr.date, kind=CrossoverKind.BULLISH))
        elif prev_sign > 0 and curr_sign < 0:
            events.append(CrossoverEvent(date=curr.date, kind=CrossoverKind.BEARISH))

    return events
