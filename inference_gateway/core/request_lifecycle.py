"""Request Lifecycle — atomic counters and outcome bookkeeping on the aggregate.

Invariants:
    - try_count only grows, one step per increment, never loses a concurrent update
    - record_outcome(SUCCESS) → COMPLETED/SUCCESS
    - record_outcome(FAIL) increments try_count; beyond max_retries → COMPLETED/FAIL,
      otherwise the request goes back to QUEUED for resubmission
    - A non-retryable FAIL counts the attempt and completes immediately
    - State and Status are otherwise plain fields: no transition table is enforced

Design Decisions:
    - Retry limit is a parameter: the job pipeline owns the policy, the core owns the arithmetic
"""

from inference_gateway.core.domain_types import (
    InferenceRequestState,
    InferenceRequestStatus,
    MAX_RETRY_LIMIT,
)
from inference_gateway.core.errors import PreconditionViolationError
from inference_gateway.core.inference_request import InferenceRequest


def increment_try_count(request: InferenceRequest) -> int:
    """Atomically bump the retry counter. Returns the new value."""
    with request.lock:
        request.try_count += 1
        return request.try_count


def record_outcome(
    request: InferenceRequest,
    status: InferenceRequestStatus,
    max_retries: int = MAX_RETRY_LIMIT,
    retryable: bool = True,
) -> None:
    """Apply a job outcome reported by the pipeline."""
    if status == InferenceRequestStatus.UNKNOWN:
        raise PreconditionViolationError(
            "A job outcome must be Success or Fail.", "OUTCOME_UNKNOWN",
        )

    if status == InferenceRequestStatus.SUCCESS:
        request.state = InferenceRequestState.COMPLETED
        request.status = InferenceRequestStatus.SUCCESS
        return

    tries = increment_try_count(request)
    if not retryable or tries > max_retries:
        request.state = InferenceRequestState.COMPLETED
        request.status = InferenceRequestStatus.FAIL
    else:
        request.state = InferenceRequestState.QUEUED
