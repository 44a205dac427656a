"""Error Hierarchy — typed, categorized exceptions for all gateway failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Content-validation findings are NEVER raised: they are collected by
      enforce_request and surfaced as (is_valid, details)
    - Misuse of the aggregate is raised: configuration conflicts and precondition
      violations are distinct categories
    - to_response() produces the REST envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with InferenceGatewayError base: FastAPI global handler catches all
    - ErrorContext as dataclass: correlation ids without coupling to the logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    PRECONDITION = "precondition"
    CONFLICT = "conflict"
    RESOURCE_NOT_FOUND = "resource_not_found"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Correlation data attached to an error."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    transaction_id: str | None = None
    inference_request_id: str | None = None
    user_message: str | None = None
    debug_info: dict[str, Any] | None = None


class InferenceGatewayError(Exception):
    """Base exception for all gateway errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.context.user_message or self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "transaction_id": self.context.transaction_id,
                    "inference_request_id": self.context.inference_request_id,
                },
            }
        }


# ─── Guard Errors (misuse of the aggregate) ─────────────────────

class StorageConflictError(InferenceGatewayError):
    """Storage path was already configured for this request."""
    def __init__(self, current_path: str, context: ErrorContext | None = None):
        super().__init__(
            "StoragePath already configured.",
            "STORAGE_PATH_CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 409,
        )
        self.current_path = current_path


class PreconditionViolationError(InferenceGatewayError):
    """Operation invoked without its required precondition."""
    def __init__(
        self, message: str, code: str = "PRECONDITION_VIOLATED",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, code, ErrorCategory.PRECONDITION,
            ErrorSeverity.ERROR, context, 500,
        )


class InvalidStoragePathError(PreconditionViolationError):
    """Blank or whitespace-only storage path supplied."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Required input 'storagePath' cannot be null, empty or whitespace.",
            "INVALID_STORAGE_PATH", context,
        )


class AlgorithmNotResolvedError(PreconditionViolationError):
    """Job name requested before exactly one algorithm resolved."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Cannot derive a job name: no single algorithm resolved from 'inputResources'.",
            "ALGORITHM_NOT_RESOLVED", context,
        )


# ─── Submission Errors (400-level) ──────────────────────────────

class InferenceRequestRejectedError(InferenceGatewayError):
    """Submitted request failed content validation."""
    def __init__(self, details: str, context: ErrorContext | None = None):
        super().__init__(
            details, "INFERENCE_REQUEST_INVALID", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.details = details


class DuplicateTransactionError(InferenceGatewayError):
    """A request with the same transaction id is already tracked."""
    def __init__(self, transaction_id: str, context: ErrorContext | None = None):
        super().__init__(
            f"An inference request with transaction ID '{transaction_id}' already exists.",
            "DUPLICATE_TRANSACTION", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 409,
        )


class ResourceNotFoundError(InferenceGatewayError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )


# ─── Collaborator Errors (500-level) ────────────────────────────

class JobSubmissionError(InferenceGatewayError):
    """The job-scheduling platform refused or failed a job creation."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            f"Job submission failed: {message}",
            "JOB_SUBMISSION_FAILED", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.CRITICAL, context, 502,
        )
