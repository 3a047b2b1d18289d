"""
Base Service Interface

All services inherit from this base class.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from smacross.schemas.analysis import ErrorDetail, ErrorKind, ErrorResponse

InputT = TypeVar("InputT")
OutputT = TypeVar("OutputT")


class BaseService(ABC, Generic[InputT, OutputT]):
    """
    Base class for all services.

    Each service:
    - Has a defined input type
    - Has a defined output type
    - Can validate its inputs
    - Can check its health
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Service name for logging."""
        pass

    @abstractmethod
    async def execute(self, input_data: InputT) -> OutputT:
        """
        Execute the service's main function.

        Args:
            input_data: Input conforming to InputT schema

        Returns:
            Output conforming to OutputT schema

        Raises:
            PipelineError: If execution fails
        """
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Check if service is healthy and can process requests."""
        pass

    async def validate_input(self, input_data: InputT) -> InputT:
        """
        Validate input data.
        Default implementation returns input as-is (Pydantic handles validation).
        Override for custom validation logic.
        """
        return input_data


class PipelineError(Exception):
    """Base exception for analysis pipeline errors."""

    kind: ErrorKind = ErrorKind.TRANSIENT

    def __init__(self, message: str, details: dict = None):
        self.message = message
        self.details = details or {}
        super().__init__(f"[{self.kind.value}] {message}")

    def to_error_response(self) -> ErrorResponse:
        """Boundary envelope: stable kind plus message, nothing internal."""
        return ErrorResponse(error=ErrorDetail(kind=self.kind, message=self.message))


class ValidationError(PipelineError):
    """Input validation error."""

    kind = ErrorKind.VALIDATION


class FetchError(PipelineError):
    """Provider fetch failed."""


class AuthError(FetchError):
    """Missing or rejected provider credential."""

    kind = ErrorKind.AUTH


class SymbolError(FetchError):
    """Unknown or unsupported symbol."""

    kind = ErrorKind.SYMBOL


class TransientError(FetchError):
    """Rate limit, network failure, timeout or provider 5xx. Safe to retry."""

    kind = ErrorKind.TRANSIENT


class FormatError(FetchError):
    """Provider payload has an unexpected shape."""

    kind = ErrorKind.FORMAT


class EmptySeriesError(PipelineError):
    """Provider returned no usable price points."""

    kind = ErrorKind.EMPTY_SERIES
