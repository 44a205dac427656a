"""Request Store — in-memory arena that owns every live InferenceRequest.

Invariants:
    - Each aggregate is registered once, keyed by inference_request_id and
      indexed by transaction_id; transaction ids are unique among tracked requests
    - take() hands out the oldest QUEUED request and marks it IN_PROCESS atomically:
      two dispatchers never receive the same request
    - update() applies request_lifecycle.record_outcome with the configured retry limit;
      requests re-queued by a failure go to the back of the queue
    - At most `completed_retention` COMPLETED requests are kept; the oldest are evicted
    - Lookups and take() never scan the whole arena
    - The index lock is never held while a caller works on an aggregate

Design Decisions:
    - In-memory, not a database: durable persistence belongs to an external
      collaborator behind InferenceRequestRepository
    - get_request_store() cached like get_settings(): one arena per process,
      overridable as a FastAPI dependency in tests
"""

import logging
import threading
from collections import deque
from functools import lru_cache

from inference_gateway.config import get_settings
from inference_gateway.core.domain_types import (
    COMPLETED_RETENTION,
    InferenceRequestId,
    InferenceRequestState,
    InferenceRequestStatus,
    MAX_RETRY_LIMIT,
)
from inference_gateway.core.errors import DuplicateTransactionError, ErrorContext
from inference_gateway.core.inference_request import InferenceRequest
from inference_gateway.core.request_lifecycle import record_outcome

logger = logging.getLogger(__name__)


class InMemoryInferenceRequestStore:
    """Thread-safe arena implementing InferenceRequestRepository."""

    def __init__(
        self,
        max_retry_limit: int = MAX_RETRY_LIMIT,
        completed_retention: int = COMPLETED_RETENTION,
    ):
        self._max_retry_limit = max_retry_limit
        self._completed_retention = completed_retention
        self._lock = threading.Lock()
        self._requests: dict[InferenceRequestId, InferenceRequest] = {}
        self._by_transaction: dict[str | None, InferenceRequestId] = {}
        self._queue: deque[InferenceRequestId] = deque()
        self._completed: deque[InferenceRequestId] = deque()

    def add(self, request: InferenceRequest) -> None:
        """Register a new request. Transaction ids must be unique within the arena."""
        with self._lock:
            if request.transaction_id in self._by_transaction:
                raise DuplicateTransactionError(
                    request.transaction_id or "",
                    ErrorContext(transaction_id=request.transaction_id),
                )
            self._requests[request.inference_request_id] = request
            self._by_transaction[request.transaction_id] = request.inference_request_id
            self._queue.append(request.inference_request_id)
        logger.info(
            "Inference request queued",
            extra={
                "transaction_id": request.transaction_id,
                "inference_request_id": request.inference_request_id,
            },
        )

    def get_by_transaction_id(self, transaction_id: str) -> InferenceRequest | None:
        with self._lock:
            request_id = self._by_transaction.get(transaction_id)
            return self._requests.get(request_id) if request_id else None

    def take(self) -> InferenceRequest | None:
        """Claim the oldest queued request for processing."""
        with self._lock:
            while self._queue:
                request = self._requests.get(self._queue.popleft())
                if request is not None and request.state == InferenceRequestState.QUEUED:
                    request.state = InferenceRequestState.IN_PROCESS
                    return request
        return None

    def update(
        self,
        request: InferenceRequest,
        status: InferenceRequestStatus,
        retryable: bool = True,
    ) -> None:
        """Record a job outcome; failed requests are re-queued until the retry limit."""
        record_outcome(request, status, self._max_retry_limit, retryable)
        with self._lock:
            if request.inference_request_id in self._requests:
                if request.state == InferenceRequestState.QUEUED:
                    self._queue.append(request.inference_request_id)
                elif request.state == InferenceRequestState.COMPLETED:
                    self._completed.append(request.inference_request_id)
                    self._evict_completed()
        logger.info(
            f"Inference request updated: {request.state.value}/{request.status.value}",
            extra={
                "transaction_id": request.transaction_id,
                "inference_request_id": request.inference_request_id,
                "try_count": request.try_count,
            },
        )

    def queued_count(self) -> int:
        with self._lock:
            return len(self._queue)

    def _evict_completed(self) -> None:
        while len(self._completed) > self._completed_retention:
            evicted = self._requests.pop(self._completed.popleft(), None)
            if evicted is not None:
                self._by_transaction.pop(evicted.transaction_id, None)


@lru_cache
def get_request_store() -> InMemoryInferenceRequestStore:
    settings = get_settings()
    return InMemoryInferenceRequestStore(
        settings.max_retry_limit, settings.completed_retention,
    )
