"""Inference Request Schemas — wire aliases, bounds and conversion to the domain.

Tests cover:
    - Wire names (transactionID, inputMetadata, StudyInstanceUID, ...) accepted
    - priority outside 0–255 rejected, default 128
    - Unknown detail types survive deserialization as raw strings
    - to_domain() builds a fresh aggregate
"""

import pytest
from pydantic import ValidationError

from inference_gateway.core.domain_types import (
    ConnectionAuthType,
    InferenceRequestState,
    InferenceRequestType,
    InterfaceType,
    JobPriority,
)
from inference_gateway.core.inference_request import InferenceRequest
from inference_gateway.schemas.inference_request import (
    InferenceRequestCreate,
    InferenceRequestStatusResponse,
)

WIRE_BODY = {
    "transactionID": "TX-42",
    "priority": 200,
    "inputMetadata": {
        "details": {
            "type": "DICOM_UID",
            "studies": [
                {
                    "StudyInstanceUID": "1.2.3",
                    "series": [
                        {
                            "SeriesInstanceUID": "1.2.3.4",
                            "instances": [{"SOPInstanceUID": ["1.2.3.4.5"]}],
                        },
                    ],
                },
            ],
        },
        "inputs": [
            {"type": "DICOM_PATIENT_ID", "PatientID": "PID-7"},
            {"type": "ACCESSION_NUMBER", "accessionNumber": ["ACC-1"]},
            {"type": "FHIR_RESOURCE", "resources": [{"resourceType": "Patient", "id": "p1"}]},
        ],
    },
    "inputResources": [
        {"interface": "Algorithm", "connectionDetails": {"name": "seg", "id": "pl-1"}},
        {
            "interface": "DICOMweb",
            "connectionDetails": {
                "uri": "http://pacs/dicomweb", "authType": "Basic", "authId": "cred-1",
            },
        },
    ],
    "outputResources": [
        {"interface": "FHIR", "connectionDetails": {"uri": "https://fhir/r4"}},
    ],
}


def test_wire_body_converts_to_domain():
    request = InferenceRequestCreate.model_validate(WIRE_BODY).to_domain()

    assert isinstance(request, InferenceRequest)
    assert request.transaction_id == "TX-42"
    assert request.priority == 200
    assert request.state == InferenceRequestState.QUEUED

    details = request.input_metadata.details
    assert details.type == InferenceRequestType.DICOM_UID
    study = details.studies[0]
    assert study.study_instance_uid == "1.2.3"
    assert study.series[0].series_instance_uid == "1.2.3.4"
    assert study.series[0].instances[0].sop_instance_uid == ["1.2.3.4.5"]

    patient, accession, fhir = request.input_metadata.inputs
    assert patient.patient_id == "PID-7"
    assert accession.accession_number == ["ACC-1"]
    assert fhir.resources[0].type == "Patient"

    algorithm, dicomweb = request.input_resources
    assert algorithm.interface == InterfaceType.ALGORITHM
    assert algorithm.connection_details.id == "pl-1"
    assert dicomweb.connection_details.auth_type == ConnectionAuthType.BASIC
    assert dicomweb.connection_details.auth_id == "cred-1"
    assert request.output_resources[0].interface == InterfaceType.FHIR


def test_each_conversion_gets_a_new_id():
    body = InferenceRequestCreate.model_validate(WIRE_BODY)
    assert body.to_domain().inference_request_id != body.to_domain().inference_request_id


def test_defaults_for_minimal_body():
    request = InferenceRequestCreate.model_validate({}).to_domain()
    assert request.transaction_id is None
    assert request.priority == 128
    assert request.input_metadata is None
    assert request.input_resources == []
    assert request.output_resources == []


def test_missing_connection_details_stay_none():
    body = InferenceRequestCreate.model_validate(
        {"inputResources": [{"interface": "DICOMweb"}]},
    )
    assert body.to_domain().input_resources[0].connection_details is None


@pytest.mark.parametrize("priority", [-1, 256])
def test_priority_out_of_range_rejected(priority):
    with pytest.raises(ValidationError):
        InferenceRequestCreate.model_validate({"priority": priority})


def test_unknown_interface_rejected():
    with pytest.raises(ValidationError):
        InferenceRequestCreate.model_validate({"inputResources": [{"interface": "SMB"}]})


def test_unknown_detail_type_kept_raw():
    body = InferenceRequestCreate.model_validate(
        {"inputMetadata": {"inputs": [{"type": "DICOM_SERIES"}]}},
    )
    assert body.to_domain().input_metadata.inputs[0].type == "DICOM_SERIES"


def test_snake_case_names_accepted():
    body = InferenceRequestCreate(transaction_id="TX-1", input_resources=[])
    assert body.transaction_id == "TX-1"


def test_status_response_serializes_with_wire_names():
    request = InferenceRequest(transaction_id="TX-1", job_id="job-1", try_count=2)
    response = InferenceRequestStatusResponse.from_domain(request, JobPriority.NORMAL)
    dumped = response.model_dump(by_alias=True, mode="json")
    assert dumped == {
        "transactionID": "TX-1",
        "inferenceRequestId": str(request.inference_request_id),
        "jobId": "job-1",
        "payloadId": None,
        "priority": "normal",
        "state": "Queued",
        "status": "Unknown",
        "tryCount": 2,
    }


def test_null_sop_instance_uid_reaches_the_domain():
    body = InferenceRequestCreate.model_validate({
        "inputMetadata": {
            "inputs": [{
                "type": "DICOM_UID",
                "studies": [{
                    "StudyInstanceUID": "1.2.3",
                    "series": [{
                        "SeriesInstanceUID": "1.2.3.4",
                        "instances": [{"SOPInstanceUID": [None, "1.2.3.4.5"]}],
                    }],
                }],
            }],
        },
    })
    instance = body.to_domain().input_metadata.inputs[0].studies[0].series[0].instances[0]
    assert instance.sop_instance_uid == [None, "1.2.3.4.5"]
