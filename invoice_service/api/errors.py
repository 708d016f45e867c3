"""API error envelope and exception handlers"""
from typing import Any, Dict, Optional

import structlog
from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..services.errors import InvalidAmountError


logger = structlog.get_logger(__name__)


class APIError(Exception):
    """Error that is rendered to the client inside the error envelope"""

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int = 400,
        details: Optional[Dict[str, Any]] = None
    ):
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", "unknown")


def create_error_response(
    code: str,
    message: str,
    request_id: str,
    details: Optional[Dict[str, Any]] = None,
    status_code: int = 400
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": {
                "code": code,
                "message": message,
                "request_id": request_id,
                "details": details or {}
            }
        }
    )


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    request_id = _request_id(request)

    logger.error(
        "api_error",
        code=exc.code,
        message=exc.message,
        request_id=request_id,
        path=request.url.path
    )

    return create_error_response(
        code=exc.code,
        message=exc.message,
        request_id=request_id,
        details=exc.details,
        status_code=exc.status_code
    )


async def invalid_amount_handler(request: Request, exc: InvalidAmountError) -> JSONResponse:
    """Non-finite amounts that slipped past request validation"""
    request_id = _request_id(request)

    logger.warning("invalid_amount", message=str(exc), request_id=request_id, path=request.url.path)

    return create_error_response(
        code="INVALID_AMOUNT",
        message=str(exc),
        request_id=request_id,
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    request_id = _request_id(request)
    errors = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
        for err in exc.errors()
    ]

    logger.warning(
        "validation_error",
        errors=errors,
        request_id=request_id,
        path=request.url.path
    )

    return create_error_response(
        code="VALIDATION_ERROR",
        message="Request validation failed",
        request_id=request_id,
        details={"errors": errors},
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    request_id = _request_id(request)

    logger.warning(
        "http_exception",
        status_code=exc.status_code,
        detail=exc.detail,
        request_id=request_id,
        path=request.url.path
    )

    return create_error_response(
        code="HTTP_ERROR",
        message=str(exc.detail),
        request_id=request_id,
        status_code=exc.status_code
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    request_id = _request_id(request)

    logger.error(
        "unhandled_exception",
        exc_info=exc,
        request_id=request_id,
        path=request.url.path
    )

    return create_error_response(
        code="INTERNAL_ERROR",
        message="An internal error occurred",
        request_id=request_id,
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
    )
