"""Input Metadata Enforcement — validates one detail entry against its addressing scheme.

Invariants:
    - All functions are PURE: no IO, append messages to `errors`, never raise
    - Exactly one scheme branch runs per entry: no blending of checks
    - Unrecognized schemes always produce an error naming the tag
    - DICOM_UID granularity is optional below the study: absent `series` or
      `instances` is valid; present ones are checked element by element
    - One SOPInstanceUID message per instance, however many blank uids it holds
"""

from inference_gateway.core.domain_types import InferenceRequestType
from inference_gateway.core.inference_request import (
    InferenceRequestDetails,
    RequestedStudy,
)


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def _check_studies(studies: list[RequestedStudy], errors: list[str]) -> None:
    for study in studies:
        if _is_blank(study.study_instance_uid):
            errors.append("`StudyInstanceUID` cannot be empty.")

        if study.series is None:
            continue

        for series in study.series:
            if _is_blank(series.series_instance_uid):
                errors.append("`SeriesInstanceUID` cannot be empty.")

            if series.instances is None:
                continue

            for instance in series.instances:
                if any(_is_blank(uid) for uid in instance.sop_instance_uid or []):
                    errors.append("`SOPInstanceUID` cannot be empty.")


def check_input_metadata_details(
    details: InferenceRequestDetails, errors: list[str],
) -> None:
    """Dispatch on details.type and append every violation found."""
    match details.type:
        case InferenceRequestType.DICOM_UID:
            if not details.studies:
                errors.append(
                    "Request type is set to `DICOM_UID` but no `studies` defined.",
                )
            else:
                _check_studies(details.studies, errors)

        case InferenceRequestType.DICOM_PATIENT_ID:
            if _is_blank(details.patient_id):
                errors.append(
                    "Request type is set to `DICOM_PATIENT_ID` but `PatientID` is not defined.",
                )

        case InferenceRequestType.ACCESSION_NUMBER:
            if not details.accession_number:
                errors.append(
                    "Request type is set to `ACCESSION_NUMBER` but no `accessionNumber` defined.",
                )

        case InferenceRequestType.FHIR_RESOURCE:
            if not details.resources:
                errors.append(
                    "Request type is set to `FHIR_RESOURCE` but no FHIR `resources` defined.",
                )
            else:
                for resource in details.resources:
                    if _is_blank(resource.type):
                        errors.append("A FHIR resource type cannot be empty.")

        case _:
            errors.append(
                f"'inputMetadata' does not yet support type '{_tag(details.type)}'.",
            )


def _tag(value: InferenceRequestType | str | None) -> str:
    if isinstance(value, InferenceRequestType):
        return value.value
    return value or ""
