import logging
from typing import Any, List, Optional

from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.core.response.schemas import (
    ErrorDetail,
    ErrorResponse,
    PostDbResponse,
    PostDbStatus,
)

logger = logging.getLogger(__name__)

SUCCESS_STATUS = status.HTTP_200_OK
FAILURE_STATUS = status.HTTP_417_EXPECTATION_FAILED


def response_handler(response: PostDbResponse[Any]) -> JSONResponse:
    """Translate a store envelope into an HTTP response.

    ``Ok`` maps to 200 and ``Err`` to 417; the body is the bare payload in
    both cases, so a failed lookup answers ``null`` and a failed create ``0``.
    """
    if response.status == PostDbStatus.OK:
        status_code = SUCCESS_STATUS
    else:
        status_code = FAILURE_STATUS
    return JSONResponse(status_code=status_code, content=jsonable_encoder(response.value))


def error_response(
    error_code: str,
    message: str,
    status_code: int = status.HTTP_400_BAD_REQUEST,
    details: Optional[List[dict]] = None,
) -> JSONResponse:
    body = ErrorResponse(
        message=message,
        error_code=error_code,
        error_details=[ErrorDetail(**detail) for detail in details or []],
    )
    return JSONResponse(status_code=status_code, content=body.model_dump())


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Reject malformed bodies and path parameters before they reach the store."""
    logger.warning("Validation error on %s: %s", request.url.path, exc.errors())
    details = [
        {
            "field": ".".join(str(loc) for loc in error["loc"]),
            "code": error["type"],
            "message": error["msg"],
        }
        for error in exc.errors()
    ]
    return error_response(
        error_code="VALIDATION_ERROR",
        message="Invalid request data",
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        details=details,
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled exception on %s: %s", request.url.path, exc, exc_info=True)
    return error_response(
        error_code="INTERNAL_ERROR",
        message="An unexpected error occurred",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
