"""Inference Request — the aggregate every validation and scheduling step operates on.

Invariants:
    - inference_request_id is generated at construction and never reassigned
    - state starts QUEUED, status starts UNKNOWN, try_count starts 0
    - storage_path and try_count are mutated only while holding `lock`
      (see storage_location.configure_storage_location and
      request_lifecycle.increment_try_count)
    - Content is NOT validated here: enforce_request owns that

Design Decisions:
    - Plain dataclasses, no pydantic: the core stays free of boundary concerns;
      schemas/inference_request.py converts wire payloads into these types
    - `type` on InferenceRequestDetails is InferenceRequestType | str: an
      unrecognized wire tag survives so the validator can name it
    - One lock per aggregate: workers contend per request, not globally
"""

import threading
from dataclasses import dataclass, field
from uuid import uuid4

from inference_gateway.core.domain_types import (
    ConnectionAuthType,
    DEFAULT_PRIORITY,
    InferenceRequestId,
    InferenceRequestState,
    InferenceRequestStatus,
    InferenceRequestType,
    InterfaceType,
)


# ─── Connection & Resources ─────────────────────────────────────

@dataclass
class ConnectionDetails:
    """Endpoint descriptor. For Algorithm resources, name/id identify the pipeline."""
    name: str | None = None
    id: str | None = None
    uri: str | None = None
    auth_type: ConnectionAuthType = ConnectionAuthType.NONE
    auth_id: str | None = None


@dataclass
class RequestResource:
    """One input or output resource tagged by interface kind."""
    interface: InterfaceType
    connection_details: ConnectionDetails | None = None


# ─── Input Metadata ─────────────────────────────────────────────

@dataclass
class RequestedInstance:
    sop_instance_uid: list[str | None] | None = None


@dataclass
class RequestedSeries:
    series_instance_uid: str | None = None
    instances: list[RequestedInstance] | None = None


@dataclass
class RequestedStudy:
    study_instance_uid: str | None = None
    series: list[RequestedSeries] | None = None


@dataclass
class FhirResource:
    type: str | None = None
    id: str | None = None


@dataclass
class InferenceRequestDetails:
    """One addressing-scheme entry. Only the fields of its scheme are meaningful."""
    type: InferenceRequestType | str | None = None

    # DICOM_UID
    studies: list[RequestedStudy] | None = None

    # DICOM_PATIENT_ID
    patient_id: str | None = None

    # ACCESSION_NUMBER
    accession_number: list[str] | None = None

    # FHIR_RESOURCE
    resources: list[FhirResource] | None = None


@dataclass
class InferenceRequestMetadata:
    """Legacy singular `details` plus the `inputs` list it is merged into."""
    details: InferenceRequestDetails | None = None
    inputs: list[InferenceRequestDetails] | None = None


# ─── Aggregate Root ─────────────────────────────────────────────

@dataclass
class InferenceRequest:
    """Aggregate root for one platform-to-model inference request."""

    # Caller-supplied
    transaction_id: str | None = None
    priority: int = DEFAULT_PRIORITY
    input_metadata: InferenceRequestMetadata | None = None
    input_resources: list[RequestResource] = field(default_factory=list)
    output_resources: list[RequestResource] = field(default_factory=list)

    # Internal use only
    inference_request_id: InferenceRequestId = field(
        default_factory=lambda: InferenceRequestId(uuid4()),
    )
    job_id: str | None = None
    payload_id: str | None = None
    state: InferenceRequestState = InferenceRequestState.QUEUED
    status: InferenceRequestStatus = InferenceRequestStatus.UNKNOWN
    storage_path: str | None = None
    try_count: int = 0

    _lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False, compare=False,
    )

    @property
    def lock(self) -> threading.Lock:
        """Guards storage_path and try_count."""
        return self._lock
