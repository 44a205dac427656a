"""Connection Enforcement — tests for DICOMweb and FHIR endpoint checks.

Tests cover:
    - URI well-formedness (absolute, no unescaped characters)
    - DICOMweb authId required when authType is not None
    - FHIR authId NOT enforced
    - Missing descriptor checked as empty
"""

import pytest

from inference_gateway.core.domain_types import ConnectionAuthType
from inference_gateway.core.enforce_connections import (
    check_dicomweb_connection,
    check_fhir_connection,
    is_well_formed_absolute_uri,
)
from inference_gateway.core.inference_request import ConnectionDetails


# ─── URI check ─────────────────────────────────────────────────────


@pytest.mark.parametrize(
    "uri",
    [
        "http://pacs.local:8080/dicomweb",
        "https://fhir.example.org/r4/",
        "http://10.0.0.5/wado-rs",
    ],
)
def test_absolute_uris_are_well_formed(uri):
    assert is_well_formed_absolute_uri(uri) is True


@pytest.mark.parametrize(
    "uri",
    [None, "", "relative/path", "/dicomweb", "http://host/with space", "http://host/<x>"],
)
def test_malformed_uris_are_rejected(uri):
    assert is_well_formed_absolute_uri(uri) is False


# ─── DICOMweb ──────────────────────────────────────────────────────


def test_dicomweb_no_auth_valid_uri_passes():
    errors: list[str] = []
    check_dicomweb_connection(
        "inputResources", errors, ConnectionDetails(uri="http://pacs.local/dicomweb"),
    )
    assert errors == []


@pytest.mark.parametrize("auth_id", [None, "", "  "])
def test_dicomweb_basic_auth_requires_auth_id(auth_id):
    errors: list[str] = []
    check_dicomweb_connection(
        "inputResources",
        errors,
        ConnectionDetails(
            uri="http://pacs.local/dicomweb",
            auth_type=ConnectionAuthType.BASIC,
            auth_id=auth_id,
        ),
    )
    assert errors == [
        "One of the 'inputResources' has authType of 'Basic' "
        "but does not include a valid value for 'authId'",
    ]


def test_dicomweb_auth_with_auth_id_passes():
    errors: list[str] = []
    check_dicomweb_connection(
        "outputResources",
        errors,
        ConnectionDetails(
            uri="http://pacs.local/dicomweb",
            auth_type=ConnectionAuthType.BEARER,
            auth_id="secret-ref",
        ),
    )
    assert errors == []


def test_dicomweb_reports_auth_then_uri():
    errors: list[str] = []
    check_dicomweb_connection(
        "outputResources",
        errors,
        ConnectionDetails(uri="bad uri", auth_type=ConnectionAuthType.BEARER),
    )
    assert errors == [
        "One of the 'outputResources' has authType of 'Bearer' "
        "but does not include a valid value for 'authId'",
        "The provided URI 'bad uri' is not well formed.",
    ]


def test_dicomweb_missing_descriptor_checked_as_empty():
    errors: list[str] = []
    check_dicomweb_connection("inputResources", errors, None)
    assert errors == ["The provided URI '' is not well formed."]


# ─── FHIR ──────────────────────────────────────────────────────────


def test_fhir_ignores_missing_auth_id():
    errors: list[str] = []
    check_fhir_connection(
        "inputResources",
        errors,
        ConnectionDetails(uri="https://fhir.local/r4", auth_type=ConnectionAuthType.BEARER),
    )
    assert errors == []


def test_fhir_checks_uri():
    errors: list[str] = []
    check_fhir_connection("inputResources", errors, ConnectionDetails(uri="fhir"))
    assert errors == ["The provided URI 'fhir' is not well formed."]


def test_errors_are_appended_not_replaced():
    errors = ["earlier"]
    check_fhir_connection("inputResources", errors, None)
    assert errors == ["earlier", "The provided URI '' is not well formed."]
