"""
API Error Handlers

Maps pipeline error kinds onto HTTP status codes. The body is always the
{"error": {"kind", "message"}} envelope.
"""

import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from smacross.schemas.analysis import ErrorDetail, ErrorKind, ErrorResponse
from smacross.services.base import PipelineError

logger = logging.getLogger(__name__)


STATUS_BY_KIND = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.AUTH: 401,
    ErrorKind.SYMBOL: 404,
    ErrorKind.EMPTY_SERIES: 404,
    ErrorKind.TRANSIENT: 503,
    ErrorKind.FORMAT: 502,
}


def error_json(error: ErrorResponse) -> JSONResponse:
    return JSONResponse(
        status_code=STATUS_BY_KIND.get(error.error.kind, 500),
        content=error.model_dump(mode="json"),
    )


async def pipeline_error_handler(request: Request, exc: PipelineError) -> JSONResponse:
    logger.warning(f"{request.method} {request.url.path} failed ({exc.kind.value}): {exc.message}")
    return error_json(exc.to_error_response())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    problems = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ())[1:])
        problems.append(f"{location}: {err.get('msg')}" if location else str(err.get("msg")))

    message = "; ".join(problems) or "Invalid request"
    return error_json(
        ErrorResponse(error=ErrorDetail(kind=ErrorKind.VALIDATION, message=message))
    )
