"""Algorithm Resolution — finds the single pipeline reference among input resources.

Invariants:
    - Exactly one Algorithm-tagged input resource → its connection details
    - Zero or more than one → None (ambiguity is never resolved as "first match")
    - Absence is not an error here; enforce_request reports it
"""

from inference_gateway.core.domain_types import InterfaceType
from inference_gateway.core.inference_request import ConnectionDetails, InferenceRequest


def resolve_algorithm(request: InferenceRequest) -> ConnectionDetails | None:
    """Return the algorithm's connection details when exactly one is declared."""
    algorithms = [
        resource for resource in request.input_resources or []
        if resource.interface == InterfaceType.ALGORITHM
    ]
    if len(algorithms) != 1:
        return None
    return algorithms[0].connection_details
