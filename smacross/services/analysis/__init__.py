"""
Analysis Service

CONTRACT:
    Input:  AnalysisRequest
    Output: AnalysisResult

RESPONSIBILITIES:
    - Validate request parameters
    - Fetch history from the selected provider under a timeout
    - Normalize, compute SMAs, detect crossovers
    - Trim to the requested window

Failures surface as PipelineError with a stable kind.
"""

from smacross.services.analysis.interface import AnalysisServiceInterface
from smacross.services.analysis.service import AnalysisService, get_analysis_service
from smacross.services.analysis.window import filter_events, select_window

__all__ = [
    "AnalysisServiceInterface",
    "AnalysisService",
    "get_analysis_service",
    "filter_events",
    "select_window",
]
