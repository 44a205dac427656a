"""Priority Classification — maps the raw 0–255 request priority to a JobPriority.

Invariants:
    - Total over the byte range: every value maps to exactly one class
    - Rules evaluated in order: <128 lower, ==128 normal, ==255 immediate, else higher
"""

from inference_gateway.core.domain_types import JobPriority
from inference_gateway.core.inference_request import InferenceRequest


def classify_priority(priority: int) -> JobPriority:
    """Map a raw priority byte to its scheduling class."""
    match priority:
        case n if n < 128:
            return JobPriority.LOWER
        case 128:
            return JobPriority.NORMAL
        case 255:
            return JobPriority.IMMEDIATE
        case _:
            return JobPriority.HIGHER


def request_job_priority(request: InferenceRequest) -> JobPriority:
    return classify_priority(request.priority)
