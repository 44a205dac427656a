"""Inference Intake — turns a deserialized submission into a queued request.

Invariants:
    - validate_request runs before anything is stored; invalid requests never enter the arena
    - Accepted requests get storage_path = <storage_root>/<inference_request_id>, set exactly once
    - Duplicate transaction ids are rejected by the store (409), after validation

Design Decisions:
    - Storage is configured before add(): a queued request always has its working path
"""

import logging
import posixpath

from inference_gateway.config import Settings
from inference_gateway.core.enforce_request import validate_request
from inference_gateway.core.errors import ErrorContext, InferenceRequestRejectedError
from inference_gateway.core.inference_request import InferenceRequest
from inference_gateway.core.priority import classify_priority
from inference_gateway.core.repository_protocols import InferenceRequestRepository
from inference_gateway.core.storage_location import configure_storage_location

logger = logging.getLogger(__name__)


class InferenceIntake:
    """Validates, configures and enqueues incoming inference requests."""

    def __init__(self, store: InferenceRequestRepository, settings: Settings):
        self.store = store
        self.settings = settings

    def submit(self, request: InferenceRequest) -> InferenceRequest:
        """Accept a request or raise InferenceRequestRejectedError with the joined details."""
        is_valid, details = validate_request(request)
        if not is_valid:
            logger.warning(
                f"Inference request rejected: {details}",
                extra={
                    "transaction_id": request.transaction_id,
                    "error_code": "INFERENCE_REQUEST_INVALID",
                },
            )
            raise InferenceRequestRejectedError(
                details, ErrorContext(transaction_id=request.transaction_id),
            )

        configure_storage_location(
            request,
            posixpath.join(self.settings.storage_root, str(request.inference_request_id)),
        )
        self.store.add(request)
        logger.info(
            "Inference request accepted",
            extra={
                "transaction_id": request.transaction_id,
                "inference_request_id": request.inference_request_id,
                "priority": classify_priority(request.priority).value,
            },
        )
        return request
