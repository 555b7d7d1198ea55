"""Pydantic Schemas — request validation for API endpoints.

Invariants:
    - Schemas validate at the system boundary; they repeat the store's scalar
      constraints so malformed values are rejected before a transaction opens
    - The store's CHECK constraints remain authoritative for non-HTTP callers

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
