"""Tests for crossover detection."""

from datetime import date, timedelta

import pytest

from smacross.schemas.analysis import CrossoverKind, IndicatorPoint
from smacross.services.indicators import compute_smas, detect_crossovers

from tests.conftest import SCENARIO_CLOSES, make_series


def points_from_spreads(spreads, start=date(2024, 3, 1)):
    """IndicatorPoints with long SMA fixed at 100 and short = 100 + spread."""
    return [
        IndicatorPoint(
            date=start + timedelta(days=i),
            close=100.0,
            short_sma=None if s is None else 100.0 + s,
            long_sma=None if s is None else 100.0,
        )
        for i, s in enumerate(spreads)
    ]


def test_bullish_then_bearish():
    # short period 1 tracks the close; long SMA over 3 days
    series = make_series([3, 2, 1, 2, 6, 7, 1, 0])
    events = detect_crossovers(compute_smas(series, 1, 3))

    assert [(e.date, e.kind) for e in events] == [
        (series[3].date, CrossoverKind.BULLISH),
        (series[6].date, CrossoverKind.BEARISH),
    ]


def test_scenario_has_no_crossover():
    # short SMA is already above the long SMA at the first comparable day
    points = compute_smas(make_series(SCENARIO_CLOSES), 2, 4)
    assert detect_crossovers(points) == []


def test_event_dated_on_current_day():
    points = points_from_spreads([-1.0, 2.0])
    events = detect_crossovers(points)
    assert len(events) == 1
    assert events[0].date == points[1].date
    assert events[0].kind == CrossoverKind.BULLISH


def test_touching_equality_emits_nothing():
    assert detect_crossovers(points_from_spreads([-1.0, 0.0, 1.0])) == []
    assert detect_crossovers(points_from_spreads([1.0, 0.0, -1.0])) == []
    assert detect_crossovers(points_from_spreads([0.0, 0.0, 0.0])) == []


def test_warm_up_rows_never_trigger():
    points = points_from_spreads([None, None, -1.0, 1.0])
    events = detect_crossovers(points)
    assert [e.kind for e in events] == [CrossoverKind.BULLISH]

    # previous day lacks an SMA: no comparison possible
    assert detect_crossovers(points_from_spreads([None, 1.0, 2.0])) == []


def test_one_sided_warm_up():
    points = [
        IndicatorPoint(date=date(2024, 1, 1), close=1.0, short_sma=1.0, long_sma=None),
        IndicatorPoint(date=date(2024, 1, 2), close=3.0, short_sma=3.0, long_sma=2.0),
    ]
    assert detect_crossovers(points) == []


def test_event_kinds_follow_sign_changes():
    spreads = [-2.0, 1.0, 3.0, -1.0, -4.0, 2.0, 0.5, -0.5]
    kinds = [e.kind for e in detect_crossovers(points_from_spreads(spreads))]
    assert kinds == [
        CrossoverKind.BULLISH,
        CrossoverKind.BEARISH,
        CrossoverKind.BULLISH,
        CrossoverKind.BEARISH,
    ]


def test_monotonic_widening_emits_single_event():
    events = detect_crossovers(points_from_spreads([-3.0, -1.0, 1.0, 3.0, 5.0]))
    assert [e.kind for e in events] == [CrossoverKind.BULLISH]


def test_empty_and_single_point():
    assert detect_crossovers([]) == []
    assert detect_crossovers(points_from_spreads([1.0])) == []


@pytest.mark.parametrize("price", [101.37, 19.99])
def test_flat_series_emits_no_events(price):
    points = compute_smas(make_series([price] * 500), 5, 20)
    assert detect_crossovers(points) == []


def test_plateau_emits_no_spurious_events():
    # SMAs meet on the flat stretch, so the later fall starts from equality
    rise = [100 + i * 0.37 for i in range(40)]
    fall = [114.43 - i * 0.37 for i in range(1, 40)]
    closes = rise + [114.43] * 200 + fall
    assert detect_crossovers(compute_smas(make_series(closes), 5, 20)) == []


def test_rounding_level_spread_counts_as_equal():
    assert detect_crossovers(points_from_spreads([-1e-13, 1e-13, -1e-13, 1e-13])) == []
    # a near-equal day behaves like an exact touch
    assert detect_crossovers(points_from_spreads([-1.0, 1e-13, 1.0])) == []
    assert [e.kind for e in detect_crossovers(points_from_spreads([-1.0, 1e-6, 1.0]))] == [
        CrossoverKind.BULLISH
    ]
