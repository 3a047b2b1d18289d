"""
Analysis Service Interface

Defines the contract for the SMA crossover pipeline.
"""

from abc import abstractmethod
from typing import Union

from smacross.services.base import BaseService
from smacross.schemas.analysis import AnalysisRequest, AnalysisResult, ErrorResponse


class AnalysisServiceInterface(BaseService[AnalysisRequest, AnalysisResult]):
    """
    Analysis Service Contract.

    INPUT: AnalysisRequest
        - symbol: Instrument to analyse
        - shortPeriod / longPeriod: SMA windows
        - windowDays: Trading days to return
        - provider: Market data source
        - credential: Optional provider API key

    OUTPUT: AnalysisResult
        - series: Closes with both SMAs, last windowDays points
        - events: Crossovers dated inside the series

    RAISES: PipelineError subclass with a stable kind
    """

    @property
    def name(self) -> str:
        return "AnalysisService"

    @abstractmethod
    async def execute(self, input_data: AnalysisRequest) -> AnalysisResult:
        """Run the pipeline; raise PipelineError on failure."""
        pass

    @abstractmethod
    async def analyze_or_error(
        self, input_data: AnalysisRequest
    ) -> Union[AnalysisResult, ErrorResponse]:
        """Run the pipeline; return the error envelope on failure."""
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Check if the pipeline can serve requests."""
        pass
