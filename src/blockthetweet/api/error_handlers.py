"""
FastAPI exception handlers for structured error responses.

Maps the service error taxonomy to HTTP status codes. Clients only ever see
a generic message and the failure kind; details go to the log.
"""

import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError

from blockthetweet.api.models import ErrorResponse
from blockthetweet.exceptions import BadInputError, InferenceError, InternalError
from blockthetweet.models.enums import FailureKind

logger = logging.getLogger(__name__)

STATUS_BY_FAILURE = {
    FailureKind.BAD_INPUT: status.HTTP_400_BAD_REQUEST,
    FailureKind.INFERENCE_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
    FailureKind.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

_MESSAGES = {
    status.HTTP_400_BAD_REQUEST: "Bad Request",
    status.HTTP_500_INTERNAL_SERVER_ERROR: "Internal Server Error",
}


def error_response(failure: FailureKind) -> JSONResponse:
    """
    Build the error envelope for a failure kind.
    
    Args:
        failure: Failure kind
    
    Returns:
        JSON error response with the mapped status code
    """
    status_code = STATUS_BY_FAILURE[failure]
    body = ErrorResponse(
        status_code=status_code,
        message=_MESSAGES[status_code],
        error=failure.value,
    )
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(by_alias=True),
        headers={"Access-Control-Allow-Origin": "*"},
    )


async def bad_input_handler(request: Request, exc: BadInputError) -> JSONResponse:
    """
    Handle malformed request bodies and untokenizable input.
    
    Maps to 400 Bad Request.
    """
    logger.warning(
        "Bad input",
        extra={"error_type": type(exc).__name__, "details": exc.details},
    )
    return error_response(FailureKind.BAD_INPUT)


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Handle FastAPI request validation errors.
    
    Maps to 400 Bad Request instead of FastAPI's default 422.
    """
    logger.warning("Invalid request format", extra={"errors": exc.errors()})
    return error_response(FailureKind.BAD_INPUT)


async def pydantic_validation_error_handler(
    request: Request, exc: PydanticValidationError
) -> JSONResponse:
    """
    Handle Pydantic validation errors (invalid request format).
    
    Maps to 400 Bad Request.
    """
    logger.warning("Invalid request format", extra={"errors": exc.errors()})
    return error_response(FailureKind.BAD_INPUT)


async def inference_error_handler(request: Request, exc: InferenceError) -> JSONResponse:
    """
    Handle scoring model failures.
    
    Maps to 500 Internal Server Error. Not retried.
    """
    logger.error(
        "Inference error",
        extra={"error_type": type(exc).__name__, "details": exc.details},
    )
    return error_response(FailureKind.INFERENCE_ERROR)


async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle unexpected errors.
    
    Maps to 500 Internal Server Error.
    """
    logger.exception(
        "Unexpected error",
        extra={"error_type": type(exc).__name__},
    )
    return error_response(FailureKind.INTERNAL_ERROR)


# Exception handler mapping for FastAPI app.add_exception_handler()
EXCEPTION_HANDLERS = {
    BadInputError: bad_input_handler,
    RequestValidationError: request_validation_error_handler,
    PydanticValidationError: pydantic_validation_error_handler,
    InferenceError: inference_error_handler,
    InternalError: generic_error_handler,
    Exception: generic_error_handler,
}
