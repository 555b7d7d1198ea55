"""Services Layer — the imperative shell around core/ rules.

Invariants:
    - Every service method runs inside a caller-provided AsyncSession (one unit of work)
    - Services never commit; MutationAPI owns the transaction boundary

Design Decisions:
    - Handlers split by entity group (people, suppliers, catalog, prescriptions)
    - Mutation dispatch uses an explicit dict mapping (no auto-discovery)
"""
