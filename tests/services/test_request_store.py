"""Request Store — tests for the in-memory arena.

Tests cover:
    - add / get_by_transaction_id
    - Duplicate transaction ids rejected
    - take() hands out each queued request once, oldest first
    - update() requeues failures at the back and completes on success
    - Completed requests beyond the retention limit are evicted, oldest first
"""

import threading

import pytest

from inference_gateway.core.domain_types import InferenceRequestState, InferenceRequestStatus
from inference_gateway.core.errors import DuplicateTransactionError
from inference_gateway.services.request_store import InMemoryInferenceRequestStore

from tests.core.request_builders import valid_request


def test_added_request_can_be_found(store):
    request = valid_request()
    store.add(request)
    assert store.get_by_transaction_id("TX-0001") is request
    assert store.get_by_transaction_id("TX-9999") is None
    assert store.queued_count() == 1


def test_duplicate_transaction_rejected(store):
    store.add(valid_request())
    with pytest.raises(DuplicateTransactionError) as exc_info:
        store.add(valid_request())
    assert exc_info.value.http_status == 409
    assert store.queued_count() == 1


def test_take_is_fifo_and_marks_in_process(store):
    first, second = valid_request(transaction_id="A"), valid_request(transaction_id="B")
    store.add(first)
    store.add(second)

    assert store.take() is first
    assert first.state == InferenceRequestState.IN_PROCESS
    assert store.take() is second
    assert store.take() is None


def test_failure_requeues_at_the_back(store):
    first, second = valid_request(transaction_id="A"), valid_request(transaction_id="B")
    store.add(first)
    store.add(second)

    taken = store.take()
    store.update(taken, InferenceRequestStatus.FAIL)

    assert taken.state == InferenceRequestState.QUEUED
    assert taken.try_count == 1
    assert store.take() is second
    assert store.take() is first


def test_success_completes(store):
    request = valid_request()
    store.add(request)
    store.update(store.take(), InferenceRequestStatus.SUCCESS)
    assert request.state == InferenceRequestState.COMPLETED
    assert request.status == InferenceRequestStatus.SUCCESS
    assert store.take() is None


def test_retry_limit_comes_from_store():
    store = InMemoryInferenceRequestStore(max_retry_limit=1)
    request = valid_request()
    store.add(request)

    store.update(store.take(), InferenceRequestStatus.FAIL)
    assert request.state == InferenceRequestState.QUEUED

    store.update(store.take(), InferenceRequestStatus.FAIL)
    assert request.state == InferenceRequestState.COMPLETED
    assert request.status == InferenceRequestStatus.FAIL


def test_update_of_untracked_request_does_not_raise(store):
    request = valid_request()
    store.update(request, InferenceRequestStatus.FAIL)
    assert request.try_count == 1


def test_concurrent_take_never_hands_out_twice(store):
    for i in range(50):
        store.add(valid_request(transaction_id=f"TX-{i}"))

    taken = []
    record = threading.Lock()

    def worker() -> None:
        while (request := store.take()) is not None:
            with record:
                taken.append(request.transaction_id)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert sorted(taken) == sorted(f"TX-{i}" for i in range(50))


def test_non_retryable_failure_is_not_requeued(store):
    request = valid_request()
    store.add(request)
    store.update(store.take(), InferenceRequestStatus.FAIL, retryable=False)
    assert request.state == InferenceRequestState.COMPLETED
    assert request.status == InferenceRequestStatus.FAIL
    assert store.queued_count() == 0


def test_oldest_completed_requests_are_evicted():
    store = InMemoryInferenceRequestStore(completed_retention=2)
    requests = [valid_request(transaction_id=f"TX-{i}") for i in range(3)]
    for request in requests:
        store.add(request)
    for _ in requests:
        store.update(store.take(), InferenceRequestStatus.SUCCESS)

    assert store.get_by_transaction_id("TX-0") is None
    assert store.get_by_transaction_id("TX-1") is requests[1]
    assert store.get_by_transaction_id("TX-2") is requests[2]


def test_evicted_transaction_id_can_be_reused():
    store = InMemoryInferenceRequestStore(completed_retention=0)
    store.add(valid_request())
    store.update(store.take(), InferenceRequestStatus.SUCCESS)

    replacement = valid_request()
    store.add(replacement)
    assert store.get_by_transaction_id("TX-0001") is replacement


def test_queued_and_in_process_requests_are_never_evicted():
    store = InMemoryInferenceRequestStore(completed_retention=0)
    queued, running = valid_request(transaction_id="Q"), valid_request(transaction_id="R")
    store.add(running)
    store.add(queued)
    store.take()

    assert store.get_by_transaction_id("Q") is queued
    assert store.get_by_transaction_id("R") is running
    assert store.queued_count() == 1
