"""Inference Routes — submission and status of platform-to-model inference requests.

Invariants:
    - Request bodies are shape-checked by Pydantic before reaching the handler
    - Content validation happens in InferenceIntake; rejections surface as 400
      INFERENCE_REQUEST_INVALID with the joined validation details as message
    - Status lookups are by caller-supplied transaction id
"""

import logging

from fastapi import APIRouter, Depends

from inference_gateway.config import Settings, get_settings
from inference_gateway.core.errors import ResourceNotFoundError
from inference_gateway.core.priority import classify_priority
from inference_gateway.schemas.inference_request import (
    InferenceRequestAccepted,
    InferenceRequestCreate,
    InferenceRequestStatusResponse,
)
from inference_gateway.services.inference_intake import InferenceIntake
from inference_gateway.services.request_store import (
    InMemoryInferenceRequestStore,
    get_request_store,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/inference", tags=["inference"])


def get_inference_intake(
    store: InMemoryInferenceRequestStore = Depends(get_request_store),
    settings: Settings = Depends(get_settings),
) -> InferenceIntake:
    return InferenceIntake(store, settings)


@router.post("", response_model=InferenceRequestAccepted)
async def submit_inference_request(
    body: InferenceRequestCreate,
    intake: InferenceIntake = Depends(get_inference_intake),
):
    """Validate and queue a new inference request."""
    request = intake.submit(body.to_domain())
    return InferenceRequestAccepted(
        transaction_id=request.transaction_id,
        inference_request_id=str(request.inference_request_id),
    )


@router.get(
    "/status/{transaction_id}", response_model=InferenceRequestStatusResponse,
)
async def get_inference_request_status(
    transaction_id: str,
    store: InMemoryInferenceRequestStore = Depends(get_request_store),
):
    """Current state, status and job identifiers of a request."""
    request = store.get_by_transaction_id(transaction_id)
    if request is None:
        raise ResourceNotFoundError("Inference request", transaction_id)
    return InferenceRequestStatusResponse.from_domain(
        request, classify_priority(request.priority),
    )
