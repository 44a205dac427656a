"""Request Enforcement — decides whether an inference request can become a job.

Invariants:
    - preprocess() ALWAYS runs before any check
    - Every check runs; nothing short-circuits
    - Messages keep discovery order: transaction id, input resources, algorithm,
      input metadata (+ per-entry details), input connections, output connections
    - validate_request returns (is_valid, details) with details = messages joined by " "
    - Message literals are part of the public contract: including the
      'intputResources' spelling

Design Decisions:
    - Return messages (not exceptions): content errors are data, misuse errors are raised
"""

from inference_gateway.core.algorithm import resolve_algorithm
from inference_gateway.core.domain_types import InterfaceType
from inference_gateway.core.enforce_connections import (
    check_dicomweb_connection,
    check_fhir_connection,
)
from inference_gateway.core.enforce_details import check_input_metadata_details
from inference_gateway.core.inference_request import InferenceRequest, RequestResource
from inference_gateway.core.preprocess import preprocess

TRANSACTION_ID_REQUIRED = "'transactionId' is required."
NO_INPUT_RESOURCES = "No 'intputResources' specified."
ALGORITHM_NOT_UNIQUE = (
    "No algorithm defined or more than one algorithms defined in 'inputResources'.  "
    "'inputResources' must include one algorithm/pipeline for the inference request."
)
NO_INPUT_METADATA = (
    "Request has no `inputMetadata` defined. "
    "At least one `inputs` or `inputMetadata` required."
)


def check_transaction_id(request: InferenceRequest, errors: list[str]) -> None:
    if request.transaction_id is None or not request.transaction_id.strip():
        errors.append(TRANSACTION_ID_REQUIRED)


def check_input_resources(request: InferenceRequest, errors: list[str]) -> None:
    """At least one input resource that is not the algorithm."""
    data_sources = [
        resource for resource in request.input_resources or []
        if resource.interface != InterfaceType.ALGORITHM
    ]
    if not data_sources:
        errors.append(NO_INPUT_RESOURCES)


def check_algorithm(request: InferenceRequest, errors: list[str]) -> None:
    if resolve_algorithm(request) is None:
        errors.append(ALGORITHM_NOT_UNIQUE)


def check_input_metadata(request: InferenceRequest, errors: list[str]) -> None:
    metadata = request.input_metadata
    if metadata is None or (metadata.details is None and not metadata.inputs):
        errors.append(NO_INPUT_METADATA)
        return

    if metadata.details is not None:
        check_input_metadata_details(metadata.details, errors)
    for details in metadata.inputs or []:
        check_input_metadata_details(details, errors)


def check_connections(
    source: str, resources: list[RequestResource], errors: list[str],
) -> None:
    """Run the connection check matching each resource's interface kind."""
    for resource in resources or []:
        match resource.interface:
            case InterfaceType.DICOMWEB:
                check_dicomweb_connection(source, errors, resource.connection_details)
            case InterfaceType.FHIR:
                check_fhir_connection(source, errors, resource.connection_details)
            case _:
                pass


def collect_request_errors(request: InferenceRequest) -> list[str]:
    """Preprocess, then run every check. Returns messages in discovery order."""
    preprocess(request)

    errors: list[str] = []
    check_transaction_id(request, errors)
    check_input_resources(request, errors)
    check_algorithm(request, errors)
    check_input_metadata(request, errors)
    check_connections("inputResources", request.input_resources, errors)
    check_connections("outputResources", request.output_resources, errors)
    return errors


def validate_request(request: InferenceRequest) -> tuple[bool, str]:
    """Return (is_valid, details) for a submitted request."""
    errors = collect_request_errors(request)
    return not errors, " ".join(errors)
