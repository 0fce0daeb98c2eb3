# app/core/responses.py
import logging
from typing import Any, TypeVar

from fastapi import HTTPException, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ApiError(HTTPException):
    """
    HTTP error raised by services and routers.

    Rendered by `http_exception_handler` as:
        {"success": false, "message": <message>, "error": <detail?>}

    `error` carries the underlying store/driver error text when there is one.
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        error: str | None = None,
    ):
        super().__init__(status_code=status_code, detail=message)
        self.error = error


async def http_exception_handler(
    _request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Global handler: every HTTP error leaves the API in the same envelope."""
    content: dict[str, Any] = {"success": False, "message": str(exc.detail)}
    error = getattr(exc, "error", None)
    if error is not None:
        content["error"] = error
    return JSONResponse(
        status_code=exc.status_code,
        content=content,
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed path, query or form fields: 422 in the same envelope."""
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "success": False,
            "message": "Invalid request",
            "error": jsonable_encoder(exc.errors()),
        },
    )


def send_response(data: T, empty_message: str) -> T:
    """
    Return `data` unchanged, or raise 404 with `empty_message`.

    `None`, an empty list and a zero count all count as "nothing to send".
    """
    if data is None or data == [] or data == 0:
        raise ApiError(status.HTTP_404_NOT_FOUND, empty_message)
    return data


def validate_existence(
    value: T,
    message: str,
    status_code: int = status.HTTP_400_BAD_REQUEST,
) -> T:
    """Raise `ApiError(status_code, message)` when `value` is falsy."""
    if not value:
        logger.info("Validation failed: %s", message)
        raise ApiError(status_code, message)
    return value


def success_response(message: str) -> dict[str, Any]:
    return {"success": True, "message": message}
