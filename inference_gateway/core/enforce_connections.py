"""Connection Enforcement — validates DICOMweb and FHIR endpoint descriptors.

Invariants:
    - All functions are PURE: no IO, append messages to `errors`, never raise
    - DICOMweb: authType other than None requires a non-blank authId;
      the URI must be absolute and well formed regardless of authType
    - FHIR: only the URI check applies: authId is NOT enforced
    - A missing descriptor is checked as an empty one

Design Decisions:
    - The DICOMweb/FHIR asymmetry is kept as-is pending product-owner confirmation
    - URI syntax delegated to pydantic's AnyUrl, after rejecting characters
      that must be percent-encoded (AnyUrl would silently encode them)
"""

import re

from pydantic import AnyUrl, TypeAdapter, ValidationError

from inference_gateway.core.domain_types import ConnectionAuthType
from inference_gateway.core.inference_request import ConnectionDetails

_URL_ADAPTER = TypeAdapter(AnyUrl)
_UNESCAPED_CHARS = re.compile(r"[\s<>\"{}|\\^`]")


def is_well_formed_absolute_uri(uri: str | None) -> bool:
    """True if `uri` is an absolute URI with no characters requiring escape."""
    if not uri or _UNESCAPED_CHARS.search(uri):
        return False
    try:
        _URL_ADAPTER.validate_python(uri)
    except ValidationError:
        return False
    return True


def _check_uri(errors: list[str], connection: ConnectionDetails) -> None:
    if not is_well_formed_absolute_uri(connection.uri):
        errors.append(
            f"The provided URI '{connection.uri or ''}' is not well formed.",
        )


def check_dicomweb_connection(
    source: str, errors: list[str], connection: ConnectionDetails | None,
) -> None:
    """Auth check plus URI check for a DICOMweb resource."""
    connection = connection or ConnectionDetails()
    if (
        connection.auth_type != ConnectionAuthType.NONE
        and not (connection.auth_id or "").strip()
    ):
        errors.append(
            f"One of the '{source}' has authType of "
            f"'{ConnectionAuthType(connection.auth_type).value}' "
            f"but does not include a valid value for 'authId'",
        )
    _check_uri(errors, connection)


def check_fhir_connection(
    source: str, errors: list[str], connection: ConnectionDetails | None,
) -> None:
    """URI check only for a FHIR resource."""
    _check_uri(errors, connection or ConnectionDetails())
