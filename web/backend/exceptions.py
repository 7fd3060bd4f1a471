#!/usr/bin/env python3
"""
Custom exceptions and error handlers for the web application.
"""

import logging
from fastapi import Request, HTTPException
from fastapi.responses import JSONResponse

from core.exceptions import (
    ApiError,
    AuthError,
    NetworkError,
    NotFoundError,
    SessionExpiredError,
    StaleResponseError,
    ValidationError,
)

logger = logging.getLogger(__name__)

LOGIN_REDIRECT = "/login"


class ServiceException(Exception):
    """Base exception for service layer errors."""
    pass


class JobNotFoundException(ServiceException):
    """Raised when a job is not part of the current cohort."""
    pass


def _status_for_api_error(exc: ApiError) -> int:
    if isinstance(exc, ValidationError):
        return 400
    if isinstance(exc, AuthError):
        return 401
    if isinstance(exc, NotFoundError):
        return 404
    if isinstance(exc, StaleResponseError):
        return 409
    if isinstance(exc, NetworkError):
        return 502
    return exc.status_code or 500


async def api_error_handler(
    request: Request,
    exc: ApiError
) -> JSONResponse:
    """
    Handle core API errors (upstream failures and invalid requests).

    Args:
        request: The FastAPI request.
        exc: The core exception.

    Returns:
        JSONResponse with error details.
    """
    status_code = _status_for_api_error(exc)
    if status_code >= 500:
        logger.error(f"Upstream error in {request.url.path}: {exc}")
    else:
        logger.info(f"{exc.__class__.__name__} in {request.url.path}: {exc}")

    content = {
        "success": False,
        "error": str(exc),
        "type": exc.__class__.__name__
    }
    if isinstance(exc, SessionExpiredError):
        content["redirect"] = LOGIN_REDIRECT

    return JSONResponse(status_code=status_code, content=content)


async def service_exception_handler(
    request: Request,
    exc: ServiceException
) -> JSONResponse:
    """
    Handle service layer exceptions.

    Args:
        request: The FastAPI request.
        exc: The service exception.

    Returns:
        JSONResponse with error details.
    """
    logger.error(f"Service error in {request.url.path}: {exc}")

    status_code = 500
    if isinstance(exc, JobNotFoundException):
        status_code = 404

    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": str(exc),
            "type": exc.__class__.__name__
        }
    )


async def http_exception_handler(
    request: Request,
    exc: HTTPException
) -> JSONResponse:
    """
    Handle FastAPI HTTP exceptions with consistent format.
    """
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "error": exc.detail,
            "type": "HTTPException"
        }
    )


async def general_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    Handle unexpected exceptions.
    """
    logger.exception(f"Unexpected error in {request.url.path}")

    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": "Internal server error",
            "type": "InternalError"
        }
    )
