"""Inference Gateway — validation and normalization of platform-to-model inference requests.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
"""
