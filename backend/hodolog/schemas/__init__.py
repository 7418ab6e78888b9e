"""Pydantic Schemas — request/response models for the post API and service.

Invariants:
    - Schemas are immutable value objects
    - Separate from models: schemas are API contracts, models are persistence
"""
