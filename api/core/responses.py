"""
Uniform response envelope: {"status": <int>, "message": <str>, "data": <any>}.
"""

from __future__ import annotations

from typing import Any, Generic, Mapping, TypeVar

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from .results import Failure

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    status: int
    message: str
    data: T | None = None


def _envelope(
    status_code: int,
    message: str,
    data: Any,
    headers: Mapping[str, str] | None = None,
) -> JSONResponse:
    body = ApiResponse[Any](status=status_code, message=message, data=data)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body), headers=headers)


def success_response(message: str, data: Any = None, status_code: int = 200) -> JSONResponse:
    return _envelope(status_code, message, data)


def error_response(
    status_code: int,
    message: str,
    data: Any = None,
    headers: Mapping[str, str] | None = None,
) -> JSONResponse:
    return _envelope(status_code, message, data, headers)


def failure_response(failure: Failure, message: str) -> JSONResponse:
    return error_response(failure.status_code, message, failure.detail)
