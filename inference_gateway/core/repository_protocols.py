"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell: dependency arrows point inward only
    - Request persistence and job submission are external collaborators,
      reached only through these Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - JobSubmitter is async because implementations do network IO; the
      repository is sync because the shipped implementation is in-memory
"""

from typing import Protocol

from inference_gateway.core.domain_types import InferenceRequestStatus
from inference_gateway.core.inference_request import InferenceRequest
from inference_gateway.core.job_request import JobHandle, JobRequest


class InferenceRequestRepository(Protocol):
    """Contract for inference request tracking, implemented by shell."""
    def add(self, request: InferenceRequest) -> None: ...
    def get_by_transaction_id(self, transaction_id: str) -> InferenceRequest | None: ...
    def take(self) -> InferenceRequest | None: ...
    def update(
        self,
        request: InferenceRequest,
        status: InferenceRequestStatus,
        retryable: bool = True,
    ) -> None: ...


class JobSubmitter(Protocol):
    """Contract for the job-scheduling platform client, implemented by shell."""
    async def create_job(self, job_request: JobRequest) -> JobHandle: ...
