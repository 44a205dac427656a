"""Input Metadata Preprocessing — folds the legacy singular `details` into `inputs`.

Invariants:
    - inputs is never None after preprocessing (when input_metadata exists)
    - A populated `details` is appended to `inputs` exactly once, then cleared
    - Existing `inputs` order is preserved; `details` goes last
    - A second run is a no-op
    - Missing input_metadata is left alone: enforce_request reports it
"""

from inference_gateway.core.inference_request import InferenceRequest


def preprocess(request: InferenceRequest) -> None:
    """Normalize input metadata in place."""
    metadata = request.input_metadata
    if metadata is None:
        return

    if metadata.inputs is None:
        metadata.inputs = []

    if metadata.details is not None:
        metadata.inputs.append(metadata.details)
        metadata.details = None
