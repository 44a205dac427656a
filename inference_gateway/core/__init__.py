"""Core Layer — request validation and normalization, no IO, no async, no framework.

Invariants:
    - No module in core/ imports from services/, api/, schemas/, or infrastructure/
    - Validation and derived values are pure functions over the InferenceRequest aggregate
    - The only shared mutable state is the aggregate itself, guarded by its lock

Design Decisions:
    - Functional core separated from imperative shell
"""
