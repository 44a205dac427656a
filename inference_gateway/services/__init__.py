"""Services Layer — imperative shell around the core: intake, request arena, job dispatch.

Invariants:
    - Services orchestrate core functions; validation rules live only in core/
    - Collaborators (repository, job submitter) are injected, never imported

Design Decisions:
    - One service class per concern, constructed with its collaborators and Settings
"""
