"""Error Handlers — global exception handlers for the gateway API.

Invariants:
    - Every error response uses the same envelope as InferenceGatewayError.to_response():
      code, message, category, severity, timestamp, context
    - InferenceGatewayError → its own http_status; 4xx logged as warning, 5xx as error
    - RequestValidationError → 400 VALIDATION_ERROR with per-field details; field paths
      are relative to the request body and use wire names (e.g. "inputResources.0.interface")
    - The transactionID of a malformed body is still echoed in the context when readable
    - Exception (catch-all) → 500 INTERNAL_ERROR, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (InferenceGatewayError), validation (Pydantic), catch-all (Exception)
    - Extracted from main.py to keep the app module small
"""

import logging
from datetime import datetime, timezone
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from inference_gateway.core.errors import ErrorCategory, ErrorSeverity, InferenceGatewayError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_gateway_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_gateway_error_handler(app: FastAPI) -> None:
    """Register gateway domain/collaborator error handler."""

    @app.exception_handler(InferenceGatewayError)
    async def gateway_error_handler(request: Request, exc: InferenceGatewayError):
        log = logger.warning if exc.http_status < 500 else logger.error
        log(
            f"InferenceGatewayError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "transaction_id": exc.context.transaction_id,
                "inference_request_id": exc.context.inference_request_id,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        details = _field_errors(exc)
        transaction_id = _transaction_id_of(exc.body)
        logger.warning(
            f"Malformed request body: {len(details)} field error(s)",
            extra={
                "error_code": "VALIDATION_ERROR",
                "path": request.url.path,
                "transaction_id": transaction_id,
            },
        )
        content = _error_envelope(
            "VALIDATION_ERROR", "Invalid request data",
            ErrorCategory.VALIDATION, ErrorSeverity.WARNING,
            transaction_id=transaction_id,
        )
        content["error"]["details"] = details
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=content)


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled {type(exc).__name__} on {request.url.path}: {exc}",
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_error_envelope(
                "INTERNAL_ERROR", "An unexpected error occurred",
                ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
            ),
        )


# ─── Envelope helpers ────────────────────────────────────────────

def _error_envelope(
    code: str,
    message: str,
    category: ErrorCategory,
    severity: ErrorSeverity,
    transaction_id: str | None = None,
) -> dict:
    return {
        "error": {
            "code": code,
            "message": message,
            "category": category.value,
            "severity": severity.value,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "context": {
                "transaction_id": transaction_id,
                "inference_request_id": None,
            },
        },
    }


def _field_errors(exc: RequestValidationError) -> list[dict]:
    return [
        {
            "field": ".".join(str(loc) for loc in _body_relative(e["loc"])),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]


def _body_relative(loc: tuple) -> tuple:
    return loc[1:] if loc and loc[0] == "body" else loc


def _transaction_id_of(body: Any) -> str | None:
    if isinstance(body, dict):
        value = body.get("transactionID")
        if isinstance(value, str):
            return value
    return None
