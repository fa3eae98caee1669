from enum import Enum
import logging
from typing import Any
from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import Response
from starlette.exceptions import HTTPException

logger = logging.getLogger(__name__)


class ResourceType(str, Enum):
    TASK = "Task"


class PlainTextErrorResponse(Response):
    """Error response with a human-readable text body.

    Existing clients expect every response to be labelled ``application/json``,
    including failures, while the failure body itself is plain text.
    """

    media_type = "application/json"

    def __init__(
        self, message: str, status_code: int, headers: dict[str, str] | None = None
    ) -> None:
        super().__init__(content=message, status_code=status_code, headers=headers)


# Exceptions
class ResourceNotFoundException(Exception):
    def __init__(
        self, resource_type: ResourceType, identifier: str, message: str | None = None
    ):
        self.resource_type = resource_type.value
        self.identifier = identifier
        super().__init__(message or f"{self.resource_type} '{identifier}' not found")


class KnownException(Exception):
    def __init__(self, message: str):
        super().__init__(message)


# Exception handlers
def resource_not_found_handler(request: Request, exc: ResourceNotFoundException):
    logger.error(exc)
    # Clients rely on 400 rather than 404 for unknown ids.
    return PlainTextErrorResponse(str(exc), status.HTTP_400_BAD_REQUEST)


def known_exception_handler(request: Request, exc: KnownException):
    logger.error(exc)
    return PlainTextErrorResponse(str(exc), status.HTTP_400_BAD_REQUEST)


def http_exception_handler(request: Request, exc: HTTPException):
    logger.error(f"{exc.status_code} on {request.url.path}: {exc.detail}")
    return PlainTextErrorResponse(str(exc.detail), exc.status_code, exc.headers)


def unexpected_exception_handler(request: Request, exc: Exception):
    logger.error(exc)
    return PlainTextErrorResponse(
        "An unexpected error occurred", status.HTTP_500_INTERNAL_SERVER_ERROR
    )


def loc_to_dot_sep(loc: tuple[Any, ...]) -> str:
    """Convert a tuple of location parts to a dot-separated string"""
    path = ""
    for i, x in enumerate(loc):
        if isinstance(x, str):
            if i > 0:
                path += "."
            path += x
        elif isinstance(x, int):
            path += f"[{x}]"
        else:
            raise TypeError("Unexpected type")
    return path


def format_validation_errors(errors: list[dict[str, Any]]) -> str:
    return "; ".join(f"{loc_to_dot_sep(error['loc'])}: {error['msg']}" for error in errors)


def validation_exception_handler(request: Request, exc: RequestValidationError):
    message = format_validation_errors(list(exc.errors()))
    logger.warning(f"Invalid request to {request.url.path}: {message}")
    return PlainTextErrorResponse(message, status.HTTP_400_BAD_REQUEST)


# Response definitions for OpenAPI documentation
ResponseDict = dict[int | str, dict[str, Any]]


def resource_not_found_response(
    resource_type: ResourceType,
) -> ResponseDict:
    return {
        400: {
            "description": f"{resource_type.value} not found",
            "content": {
                "application/json": {
                    "example": f"{resource_type.value} 'example' not found"
                }
            },
        }
    }


malformed_body_response: ResponseDict = {
    400: {
        "description": "Request body could not be decoded",
        "content": {
            "application/json": {
                "example": "body.applications: Input should be a valid list"
            }
        },
    }
}

internal_error_response: ResponseDict = {
    500: {
        "description": "Internal server error",
        "content": {"application/json": {"example": "An unexpected error occurred"}},
    }
}
