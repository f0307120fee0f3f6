"""
Error handling decorators and utilities for API endpoints.

This module centralizes the translation of application exceptions into HTTP
responses so that routers stay thin pass-throughs to the services.
"""

from functools import wraps
from typing import Callable, List, Dict
import inspect
import logging

from fastapi import HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from constants import HTTPStatus
from exceptions import (
    ApplicationError,
    ConflictError,
    DatabaseError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def to_http_exception(operation_name: str, error: Exception) -> HTTPException:
    """
    Convert an exception raised below the API layer into an HTTPException.

    Args:
        operation_name: Human-readable name of the operation (e.g., "Get good")
        error: The exception to translate

    Returns:
        HTTPException with the status code for the error kind
    """
    if isinstance(error, NotFoundError):
        logger.warning(f"{operation_name} - Not found: {error.message}")
        return HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=error.message)
    if isinstance(error, ValidationError):
        logger.warning(f"{operation_name} - Validation error: {error.message}")
        return HTTPException(status_code=HTTPStatus.BAD_REQUEST, detail=error.message)
    if isinstance(error, ConflictError):
        logger.warning(f"{operation_name} - Conflict: {error.message}")
        return HTTPException(status_code=HTTPStatus.CONFLICT, detail=error.message)
    if isinstance(error, DatabaseError):
        logger.error(f"{operation_name} - Database error: {error.message}", exc_info=error)
        return HTTPException(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            detail=f"Database operation failed: {error.message}"
        )
    if isinstance(error, ApplicationError):
        logger.error(f"{operation_name} - Application error: {error.message}", exc_info=error)
        return HTTPException(status_code=HTTPStatus.INTERNAL_SERVER_ERROR, detail=error.message)

    logger.error(f"{operation_name} - Unexpected error: {error}", exc_info=error)
    return HTTPException(
        status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
        detail=f"{operation_name} failed. Please check server logs or contact support."
    )


def handle_api_errors(operation_name: str):
    """
    Decorator to handle common API errors consistently across endpoints.

    Args:
        operation_name: Human-readable name of the operation (e.g., "Create good")

    Returns:
        Decorated function that handles errors uniformly

    Example:
        @router.get("/goods/{good_id}")
        @handle_api_errors("Get good")
        def get_good(good_id: int, service: IGoodService = Depends(get_good_service)):
            return service.get_good_by_id(good_id)
    """
    def decorator(func: Callable):
        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except HTTPException:
                # Re-raise HTTPException as-is to preserve status code and detail
                raise
            except Exception as e:
                raise to_http_exception(operation_name, e) from e

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except HTTPException:
                raise
            except Exception as e:
                raise to_http_exception(operation_name, e) from e

        # Return appropriate wrapper based on whether the function is async
        if inspect.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator


def format_validation_errors(errors) -> List[Dict[str, str]]:
    """
    Flatten pydantic validation errors into field/message pairs.

    The location prefix added by FastAPI ("body", "path", "query") is dropped.
    """
    formatted = []
    for error in errors:
        location = [str(part) for part in error.get("loc", ()) if part not in ("body", "path", "query")]
        formatted.append({
            "field": ".".join(location),
            "message": error.get("msg", "Invalid value"),
        })
    return formatted


async def request_validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Return malformed input as 400 with field-level messages."""
    errors = format_validation_errors(exc.errors())
    logger.warning(f"Validation failed for {request.method} {request.url.path}: {errors}")
    return JSONResponse(
        status_code=HTTPStatus.BAD_REQUEST,
        content={"detail": "Validation failed", "errors": errors},
    )
