"""
Response envelope and exception rendering.

Success: {"code", "message", "data"}
Error:   {"code", "message", "error"}
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .errors import ApiError, DataAccessError

logger = logging.getLogger(__name__)


def success(status_code: int, message: str, data: Any = None) -> JSONResponse:
    body: dict[str, Any] = {"code": status_code, "message": message}
    if data is not None:
        body["data"] = data
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


def error(status_code: int, message: str, detail: str | None = None) -> JSONResponse:
    body: dict[str, Any] = {"code": status_code, "message": message}
    if detail:
        body["error"] = detail
    return JSONResponse(status_code=status_code, content=body)


def _format_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for item in exc.errors():
        loc = ".".join(str(p) for p in item.get("loc", ()) if p != "body")
        msg = str(item.get("msg") or "invalid value")
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts)


async def _api_error_handler(_: Request, exc: ApiError) -> JSONResponse:
    return error(exc.status_code, exc.title, exc.message)


async def _data_access_error_handler(request: Request, exc: DataAccessError) -> JSONResponse:
    logger.error(
        "request_failed method=%s path=%s operation=%s entity=%s id=%s error=%s",
        request.method,
        request.url.path,
        exc.operation,
        exc.entity,
        exc.entity_id,
        exc.message,
    )
    if exc.operation and exc.entity:
        message = f"Failed to {exc.operation} {exc.entity.replace('_', ' ')}"
    else:
        message = "Internal server error"
    return error(500, message)


async def _request_validation_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    return error(400, "Invalid request format", _format_validation_errors(exc))


async def _http_exception_handler(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error(exc.status_code, str(exc.detail))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DataAccessError, _data_access_error_handler)
    app.add_exception_handler(ApiError, _api_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
