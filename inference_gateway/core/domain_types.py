"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - InferenceRequestId wraps a UUID: never use a bare UUID in domain logic
    - Priority is a byte (0–255); 128 is the default
    - All valid states encoded as Enums: no raw string matching
    - Enum values are the wire values of the platform-model communication API

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
    - State and Status are separate enums: processing stage and outcome move independently
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

InferenceRequestId = NewType("InferenceRequestId", UUID)


# ─── Value Types ─────────────────────────────────────────────────

Priority = NewType("Priority", int)  # 0–255

DEFAULT_PRIORITY = Priority(128)
MAX_PRIORITY = Priority(255)
JOB_NAME_MAX_LENGTH = 63
MAX_RETRY_LIMIT = 3
COMPLETED_RETENTION = 1000


# ─── Lifecycle Enums ─────────────────────────────────────────────

class InferenceRequestState(str, Enum):
    """Processing stage of a request. Queued is initial, Completed is terminal."""
    QUEUED = "Queued"
    IN_PROCESS = "InProcess"
    COMPLETED = "Completed"


class InferenceRequestStatus(str, Enum):
    """Outcome of a request. Unknown until the job pipeline reports back."""
    UNKNOWN = "Unknown"
    SUCCESS = "Success"
    FAIL = "Fail"


class JobPriority(str, Enum):
    """Scheduling priority class derived from the raw 0–255 priority."""
    LOWER = "lower"
    NORMAL = "normal"
    HIGHER = "higher"
    IMMEDIATE = "immediate"


# ─── Request Enums ───────────────────────────────────────────────

class InterfaceType(str, Enum):
    """Protocol family of an input/output resource descriptor."""
    ALGORITHM = "Algorithm"
    DICOMWEB = "DICOMweb"
    DIMSE = "DIMSE"
    FHIR = "FHIR"


class InferenceRequestType(str, Enum):
    """Addressing scheme of one input-metadata entry."""
    DICOM_UID = "DICOM_UID"
    DICOM_PATIENT_ID = "DICOM_PATIENT_ID"
    ACCESSION_NUMBER = "ACCESSION_NUMBER"
    FHIR_RESOURCE = "FHIR_RESOURCE"


class ConnectionAuthType(str, Enum):
    """Authentication scheme of a connection. Anything but NONE needs an authId."""
    NONE = "None"
    BASIC = "Basic"
    BEARER = "Bearer"
