"""
Index Presets

Indices offered by the settings panel, with the Yahoo Finance tickers.
ETFs stand in for indices that other providers do not carry.
"""

INDEX_PRESETS = [
    {"name": "DAX", "symbol": "^GDAXI"},
    {"name": "Euro Stoxx 50", "symbol": "^STOXX50E"},
    {"name": "NASDAQ 100", "symbol": "QQQ"},
    {"name": "S&P 500", "symbol": "SPY"},
    {"name": "Nikkei 225", "symbol": "^N225"},
]


def get_index_presets() -> list[dict]:
    """Get preset indices in display order."""
    return [dict(preset) for preset in INDEX_PRESETS]
