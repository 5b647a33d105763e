"""
Standard error envelope builder.

Every error response, whether from a global exception handler in main.py or
from a route reporting business-rule violations, goes through
make_error_response() so the body always matches ErrorResponse.
"""
from __future__ import annotations

from typing import Any, Optional

from fastapi.responses import JSONResponse

from salarytax.api.schemas import ErrorBody, ErrorDetail, ErrorResponse


def make_error_response(
    code: str,
    message: str,
    details: Optional[list[dict[str, Any]]] = None,
    status_code: int = 500,
) -> JSONResponse:
    """Build a standard {error: {code, message, details}} response."""
    body = ErrorResponse(
        error=ErrorBody(
            code=code,
            message=message,
            details=[ErrorDetail(**d) for d in details or []],
        )
    )
    return JSONResponse(status_code=status_code, content=body.model_dump())
