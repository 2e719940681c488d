"""
App-wide exception handlers. Every error leaves the API in the same
envelope as successful responses.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import responses

logger = logging.getLogger(__name__)


def _validation_errors(exc: RequestValidationError) -> list[dict[str, str]]:
    errors: list[dict[str, str]] = []
    for err in exc.errors():
        # loc looks like ("body", "name") or ("path", "pathway_id").
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "path", "query")]
        errors.append({"field": ".".join(loc) or "request", "message": str(err.get("msg", ""))})
    return errors


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def validation_error(_: Request, exc: RequestValidationError):
        return responses.error_response(400, "Validation failed", _validation_errors(exc))

    @app.exception_handler(StarletteHTTPException)
    async def http_error(_: Request, exc: StarletteHTTPException):
        return responses.error_response(exc.status_code, str(exc.detail), headers=exc.headers)

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception):
        logger.exception("unhandled_error method=%s path=%s", request.method, request.url.path)
        return responses.error_response(500, "Internal server error", str(exc))
