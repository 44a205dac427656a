"""Job Dispatch — hands queued requests to the job-scheduling platform.

Invariants:
    - Only requests claimed via store.take() are dispatched
    - A created job attaches job_id/payload_id and completes the request with SUCCESS
    - Any submitter failure → store.update(FAIL): re-queued until the retry limit;
      unexpected exceptions are wrapped in JobSubmissionError first
    - A request whose algorithm no longer resolves is completed as Fail at once,
      never submitted and never retried
    - No clinical data crosses this boundary: only the JobRequest metadata

Design Decisions:
    - Submitter injected via the JobSubmitter protocol; this module owns no client
"""

import logging

from inference_gateway.config import Settings
from inference_gateway.core.domain_types import InferenceRequestStatus
from inference_gateway.core.errors import AlgorithmNotResolvedError, JobSubmissionError
from inference_gateway.core.inference_request import InferenceRequest
from inference_gateway.core.job_request import JobHandle, JobRequest, build_job_request
from inference_gateway.core.repository_protocols import (
    InferenceRequestRepository,
    JobSubmitter,
)

logger = logging.getLogger(__name__)


class JobDispatcher:
    """Builds and submits one platform job per queued inference request."""

    def __init__(
        self,
        store: InferenceRequestRepository,
        submitter: JobSubmitter,
        settings: Settings,
    ):
        self.store = store
        self.submitter = submitter
        self.settings = settings

    async def dispatch_next(self) -> InferenceRequest | None:
        """Dispatch the oldest queued request. Returns it, or None when the queue is empty."""
        request = self.store.take()
        if request is None:
            return None

        log_extra = {
            "transaction_id": request.transaction_id,
            "inference_request_id": request.inference_request_id,
        }
        try:
            job_request = build_job_request(
                request, max_name_length=self.settings.job_name_max_length,
            )
        except AlgorithmNotResolvedError as e:
            logger.error(
                f"Cannot build job: {e.message}",
                extra={**log_extra, "error_code": e.code},
            )
            self.store.update(request, InferenceRequestStatus.FAIL, retryable=False)
            return request

        try:
            handle = await self._submit(job_request)
        except JobSubmissionError as e:
            logger.warning(
                e.message,
                extra={**log_extra, "error_code": e.code, "try_count": request.try_count},
            )
            self.store.update(request, InferenceRequestStatus.FAIL)
            return request

        request.job_id = handle.job_id
        request.payload_id = handle.payload_id
        logger.info(
            f"Job '{job_request.name}' created",
            extra={**log_extra, "job_id": handle.job_id, "payload_id": handle.payload_id},
        )
        self.store.update(request, InferenceRequestStatus.SUCCESS)
        return request

    async def drain(self) -> int:
        """Dispatch until no queued request remains. Returns the number of attempts made."""
        attempts = 0
        while await self.dispatch_next() is not None:
            attempts += 1
        return attempts

    async def _submit(self, job_request: JobRequest) -> JobHandle:
        try:
            return await self.submitter.create_job(job_request)
        except JobSubmissionError:
            raise
        except Exception as e:
            logger.error(
                f"Unexpected job submitter error: {e}",
                extra={"transaction_id": job_request.transaction_id},
                exc_info=True,
            )
            raise JobSubmissionError(str(e) or type(e).__name__) from e
