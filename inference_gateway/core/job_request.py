"""Job Request — the read-only view the scheduling collaborator builds a job from.

Invariants:
    - Built only from pure derived values: resolve_algorithm, classify_priority, build_job_name
    - Raises AlgorithmNotResolvedError for requests that never passed validation
"""

from dataclasses import dataclass
from datetime import datetime

from inference_gateway.core.algorithm import resolve_algorithm
from inference_gateway.core.domain_types import JOB_NAME_MAX_LENGTH, JobPriority
from inference_gateway.core.inference_request import InferenceRequest
from inference_gateway.core.job_naming import build_job_name
from inference_gateway.core.priority import classify_priority


@dataclass(frozen=True)
class JobRequest:
    """Everything needed to create one pipeline job on the platform."""
    name: str
    pipeline_id: str | None
    priority: JobPriority
    transaction_id: str | None
    inference_request_id: str


@dataclass(frozen=True)
class JobHandle:
    """Identifiers returned by the platform after job creation."""
    job_id: str
    payload_id: str


def build_job_request(
    request: InferenceRequest,
    now: datetime | None = None,
    max_name_length: int = JOB_NAME_MAX_LENGTH,
) -> JobRequest:
    name = build_job_name(request, now=now, max_length=max_name_length)
    algorithm = resolve_algorithm(request)
    return JobRequest(
        name=name,
        pipeline_id=algorithm.id,
        priority=classify_priority(request.priority),
        transaction_id=request.transaction_id,
        inference_request_id=str(request.inference_request_id),
    )
