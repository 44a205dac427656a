"""Preprocessing — tests for folding legacy `details` into `inputs`.

Tests cover:
    - Missing inputs initialized to an empty list
    - Singular details appended last, then cleared
    - Second run changes nothing
    - Missing input metadata left untouched
"""

from inference_gateway.core.domain_types import InferenceRequestType
from inference_gateway.core.inference_request import (
    InferenceRequest,
    InferenceRequestDetails,
    InferenceRequestMetadata,
)
from inference_gateway.core.preprocess import preprocess

from tests.core.request_builders import patient_details


def test_missing_inputs_become_empty_list():
    request = InferenceRequest(input_metadata=InferenceRequestMetadata())
    preprocess(request)
    assert request.input_metadata.inputs == []
    assert request.input_metadata.details is None


def test_details_moved_into_inputs_after_existing_entries():
    first = patient_details("A")
    second = InferenceRequestDetails(
        type=InferenceRequestType.ACCESSION_NUMBER, accession_number=["ACC-1"],
    )
    legacy = patient_details("LEGACY")
    request = InferenceRequest(
        input_metadata=InferenceRequestMetadata(details=legacy, inputs=[first, second]),
    )
    preprocess(request)
    assert request.input_metadata.inputs == [first, second, legacy]
    assert request.input_metadata.inputs[-1] is legacy
    assert request.input_metadata.details is None


def test_second_run_is_noop():
    legacy = patient_details()
    request = InferenceRequest(input_metadata=InferenceRequestMetadata(details=legacy))
    preprocess(request)
    inputs_after_first = list(request.input_metadata.inputs)

    preprocess(request)

    assert request.input_metadata.inputs == inputs_after_first
    assert len(request.input_metadata.inputs) == 1
    assert request.input_metadata.details is None


def test_missing_input_metadata_is_left_alone():
    request = InferenceRequest()
    preprocess(request)
    assert request.input_metadata is None
