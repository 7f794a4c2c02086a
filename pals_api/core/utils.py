"""
Utility helpers shared across routers.
"""

import math
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .errors import StoreError


class InvalidBodyError(StoreError):
    def __init__(self) -> None:
        super().__init__("Invalid JSON body", "invalid_body", 400)


def ensure_finite(value: Any) -> Any:
    """
    Rejeita NaN/Infinity, que o parser JSON aceita mas nao sao JSON padrao.
    """
    if isinstance(value, float) and not math.isfinite(value):
        raise InvalidBodyError()
    if isinstance(value, dict):
        for item in value.values():
            ensure_finite(item)
    elif isinstance(value, list):
        for item in value:
            ensure_finite(item)
    return value


def error_response(err: StoreError) -> JSONResponse:
    return JSONResponse(err.to_body(), status_code=err.status_code)


def internal_error_response(exc: Exception) -> JSONResponse:
    return JSONResponse({"error": str(exc)}, status_code=500)


async def invalid_body_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return error_response(InvalidBodyError())
