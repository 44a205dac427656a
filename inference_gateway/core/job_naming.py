"""Job Naming — derives the platform job name from a resolved request.

Invariants:
    - Raw name is "<transaction_id>-<algorithm name>-<UTC yyyyMMddHHmmss>"
    - build_job_name raises AlgorithmNotResolvedError when resolve_algorithm yields None
    - fix_job_name output only contains [A-Za-z0-9_-], never starts or ends
      with "-", and is at most max_length characters
    - build_job_name always ends with "-<timestamp>"; when the name is too long
      the transaction part is shortened first, then the algorithm part

Design Decisions:
    - `now` is injectable so the name is deterministic under test
"""

import re
from datetime import datetime, timezone

from inference_gateway.core.algorithm import resolve_algorithm
from inference_gateway.core.domain_types import JOB_NAME_MAX_LENGTH
from inference_gateway.core.errors import (
    AlgorithmNotResolvedError,
    ErrorContext,
    PreconditionViolationError,
)
from inference_gateway.core.inference_request import InferenceRequest

JOB_NAME_TIMESTAMP_FORMAT = "%Y%m%d%H%M%S"

_INVALID_CHARS = re.compile(r"[^A-Za-z0-9_\-]")
_REPEATED_DASHES = re.compile(r"-{2,}")


def _sanitize(part: str | None) -> str:
    fixed = _INVALID_CHARS.sub("-", (part or "").strip())
    return _REPEATED_DASHES.sub("-", fixed).strip("-")


def _shorten(part: str, budget: int) -> str:
    if budget <= 0:
        return ""
    return part[:budget].rstrip("-")


def fix_job_name(name: str, max_length: int = JOB_NAME_MAX_LENGTH) -> str:
    """Apply the platform's job-name charset and length constraint."""
    if name is None or not name.strip():
        raise PreconditionViolationError(
            "Required input 'name' cannot be null, empty or whitespace.",
        )
    return _shorten(_sanitize(name), max_length)


def build_job_name(
    request: InferenceRequest,
    now: datetime | None = None,
    max_length: int = JOB_NAME_MAX_LENGTH,
) -> str:
    """Derive the job name. Callers must check resolve_algorithm first."""
    algorithm = resolve_algorithm(request)
    if algorithm is None:
        raise AlgorithmNotResolvedError(ErrorContext(
            transaction_id=request.transaction_id,
            inference_request_id=str(request.inference_request_id),
        ))
    timestamp = (now or datetime.now(timezone.utc)).astimezone(timezone.utc)
    stamp = timestamp.strftime(JOB_NAME_TIMESTAMP_FORMAT)

    # Each shortened part pays for its own "-" separator.
    algorithm_part = _shorten(
        _sanitize(algorithm.name), max_length - len(stamp) - 1,
    )
    suffix = f"{algorithm_part}-{stamp}" if algorithm_part else stamp
    transaction_part = _shorten(
        _sanitize(request.transaction_id), max_length - len(suffix) - 1,
    )
    name = f"{transaction_part}-{suffix}" if transaction_part else suffix
    return fix_job_name(name, max_length)
