"""Inference Request Schemas — wire format of the platform-model communication API.

Invariants:
    - Field aliases match the wire names (transactionID, inputMetadata, StudyInstanceUID, ...)
    - priority outside 0–255 and unknown interface kinds fail deserialization
    - Missing transactionID, empty resource lists, unknown detail types and null
      SOPInstanceUID entries do NOT fail deserialization; they reach enforce_request so its messages are returned
    - to_domain() builds a fresh InferenceRequest (new inference_request_id)

Design Decisions:
    - populate_by_name: tests and internal callers may use snake_case names
    - Detail `type` kept as str on the wire; coerced to InferenceRequestType when known
"""

from pydantic import BaseModel, ConfigDict, Field

from inference_gateway.core.domain_types import (
    ConnectionAuthType,
    DEFAULT_PRIORITY,
    InferenceRequestState,
    InferenceRequestStatus,
    InferenceRequestType,
    InterfaceType,
    JobPriority,
    MAX_PRIORITY,
)
from inference_gateway.core.inference_request import (
    ConnectionDetails,
    FhirResource,
    InferenceRequest,
    InferenceRequestDetails,
    InferenceRequestMetadata,
    RequestedInstance,
    RequestedSeries,
    RequestedStudy,
    RequestResource,
)


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


# --- Resources -----------------------------------------------------------------

class ConnectionDetailsSchema(_WireModel):
    name: str | None = None
    id: str | None = None
    uri: str | None = None
    auth_type: ConnectionAuthType = Field(ConnectionAuthType.NONE, alias="authType")
    auth_id: str | None = Field(None, alias="authId")

    def to_domain(self) -> ConnectionDetails:
        return ConnectionDetails(
            name=self.name, id=self.id, uri=self.uri,
            auth_type=self.auth_type, auth_id=self.auth_id,
        )


class RequestResourceSchema(_WireModel):
    interface: InterfaceType
    connection_details: ConnectionDetailsSchema | None = Field(
        None, alias="connectionDetails",
    )

    def to_domain(self) -> RequestResource:
        return RequestResource(
            interface=self.interface,
            connection_details=(
                self.connection_details.to_domain()
                if self.connection_details else None
            ),
        )


# --- Input metadata --------------------------------------------------------------

class RequestedInstanceSchema(_WireModel):
    sop_instance_uid: list[str | None] | None = Field(None, alias="SOPInstanceUID")


class RequestedSeriesSchema(_WireModel):
    series_instance_uid: str | None = Field(None, alias="SeriesInstanceUID")
    instances: list[RequestedInstanceSchema] | None = None


class RequestedStudySchema(_WireModel):
    study_instance_uid: str | None = Field(None, alias="StudyInstanceUID")
    series: list[RequestedSeriesSchema] | None = None


class FhirResourceSchema(_WireModel):
    type: str | None = Field(None, alias="resourceType")
    id: str | None = None


class InferenceRequestDetailsSchema(_WireModel):
    """One addressing-scheme entry; only the fields of `type` are meaningful."""
    type: str | None = None
    studies: list[RequestedStudySchema] | None = None
    patient_id: str | None = Field(None, alias="PatientID")
    accession_number: list[str] | None = Field(None, alias="accessionNumber")
    resources: list[FhirResourceSchema] | None = None

    def to_domain(self) -> InferenceRequestDetails:
        return InferenceRequestDetails(
            type=_coerce_request_type(self.type),
            studies=_studies_to_domain(self.studies),
            patient_id=self.patient_id,
            accession_number=(
                list(self.accession_number)
                if self.accession_number is not None else None
            ),
            resources=(
                [FhirResource(type=r.type, id=r.id) for r in self.resources]
                if self.resources is not None else None
            ),
        )


class InferenceRequestMetadataSchema(_WireModel):
    details: InferenceRequestDetailsSchema | None = None
    inputs: list[InferenceRequestDetailsSchema] | None = None

    def to_domain(self) -> InferenceRequestMetadata:
        return InferenceRequestMetadata(
            details=self.details.to_domain() if self.details else None,
            inputs=(
                [entry.to_domain() for entry in self.inputs]
                if self.inputs is not None else None
            ),
        )


# --- Request / response ------------------------------------------------------------

class InferenceRequestCreate(_WireModel):
    """Submission body for POST /api/v1/inference."""
    transaction_id: str | None = Field(None, alias="transactionID")
    priority: int = Field(DEFAULT_PRIORITY, ge=0, le=MAX_PRIORITY)
    input_metadata: InferenceRequestMetadataSchema | None = Field(
        None, alias="inputMetadata",
    )
    input_resources: list[RequestResourceSchema] = Field(
        default_factory=list, alias="inputResources",
    )
    output_resources: list[RequestResourceSchema] = Field(
        default_factory=list, alias="outputResources",
    )

    def to_domain(self) -> InferenceRequest:
        return InferenceRequest(
            transaction_id=self.transaction_id,
            priority=self.priority,
            input_metadata=(
                self.input_metadata.to_domain() if self.input_metadata else None
            ),
            input_resources=[r.to_domain() for r in self.input_resources],
            output_resources=[r.to_domain() for r in self.output_resources],
        )


class InferenceRequestAccepted(_WireModel):
    transaction_id: str = Field(alias="transactionID")
    inference_request_id: str = Field(alias="inferenceRequestId")


class InferenceRequestStatusResponse(_WireModel):
    """Status view including the internal-use fields."""
    transaction_id: str | None = Field(None, alias="transactionID")
    inference_request_id: str = Field(alias="inferenceRequestId")
    job_id: str | None = Field(None, alias="jobId")
    payload_id: str | None = Field(None, alias="payloadId")
    priority: JobPriority
    state: InferenceRequestState
    status: InferenceRequestStatus
    try_count: int = Field(0, alias="tryCount")

    @classmethod
    def from_domain(
        cls, request: InferenceRequest, priority: JobPriority,
    ) -> "InferenceRequestStatusResponse":
        return cls(
            transaction_id=request.transaction_id,
            inference_request_id=str(request.inference_request_id),
            job_id=request.job_id,
            payload_id=request.payload_id,
            priority=priority,
            state=request.state,
            status=request.status,
            try_count=request.try_count,
        )


# --- Conversion helpers ----------------------------------------------------------


def _coerce_request_type(raw: str | None) -> InferenceRequestType | str | None:
    """Known tags become enum members; unknown tags stay raw for the validator."""
    if raw is None:
        return None
    try:
        return InferenceRequestType(raw)
    except ValueError:
        return raw


def _instance_to_domain(instance: RequestedInstanceSchema) -> RequestedInstance:
    uids = instance.sop_instance_uid
    return RequestedInstance(sop_instance_uid=list(uids) if uids is not None else None)


def _series_to_domain(series: RequestedSeriesSchema) -> RequestedSeries:
    instances = None
    if series.instances is not None:
        instances = [_instance_to_domain(i) for i in series.instances]
    return RequestedSeries(
        series_instance_uid=series.series_instance_uid, instances=instances,
    )


def _studies_to_domain(
    studies: list[RequestedStudySchema] | None,
) -> list[RequestedStudy] | None:
    if studies is None:
        return None
    result = []
    for study in studies:
        series = None
        if study.series is not None:
            series = [_series_to_domain(s) for s in study.series]
        result.append(RequestedStudy(
            study_instance_uid=study.study_instance_uid, series=series,
        ))
    return result
