"""Storage Location — exactly-once assignment of a request's working-storage path.

Invariants:
    - Blank or whitespace-only paths are rejected, whatever the current state
    - Once a non-blank path is set it never changes
    - Check-and-set runs under the aggregate lock: first setter wins,
      every later caller gets StorageConflictError
"""

from inference_gateway.core.errors import (
    ErrorContext,
    InvalidStoragePathError,
    StorageConflictError,
)
from inference_gateway.core.inference_request import InferenceRequest


def _context(request: InferenceRequest) -> ErrorContext:
    return ErrorContext(
        transaction_id=request.transaction_id,
        inference_request_id=str(request.inference_request_id),
    )


def configure_storage_location(request: InferenceRequest, storage_path: str) -> None:
    """Set the temporary storage path used for retrieved data."""
    if storage_path is None or not storage_path.strip():
        raise InvalidStoragePathError(_context(request))

    with request.lock:
        current = request.storage_path
        if current is not None and current.strip():
            raise StorageConflictError(current, _context(request))
        request.storage_path = storage_path
