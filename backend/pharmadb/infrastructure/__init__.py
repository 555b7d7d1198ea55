"""Infrastructure Layer — database plumbing and cross-cutting concerns.

Invariants:
    - Infrastructure never decides domain rules (those live in core/)
    - All database failures are mapped to PharmaError subclasses before leaving this layer

Design Decisions:
    - Resilient wrappers over raw engines/sessions: one place for rollback + error mapping
"""
