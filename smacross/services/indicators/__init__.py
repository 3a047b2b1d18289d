"""
Indicator Engine

CONTRACT:
    Input:  Normalized list[PricePoint]
    Output: list[IndicatorPoint], list[CrossoverEvent]

PURE PYTHON - Uses NumPy for calculations.
All math is deterministic and reproducible.
"""

from smacross.services.indicators.calculations import compute_smas, sma
from smacross.services.indicators.crossovers import detect_crossovers

__all__ = [
    "compute_smas",
    "sma",
    "detect_crossovers",
]
