"""Mutation Context — the collaborators one unit of work shares across handlers.

Invariants:
    - Every collaborator is bound to the same AsyncSession (same transaction)
    - Built fresh per mutation; never reused across transactions
"""

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from pharmadb.services.guard_invariants import InvariantGuard
from pharmadb.services.orchestrate_cascades import CascadeOrchestrator
from pharmadb.services.reconcile_upserts import UpsertReconciler
from pharmadb.services.validate_references import ReferenceValidator


@dataclass
class MutationContext:
    db: AsyncSession
    validator: ReferenceValidator
    guard: InvariantGuard
    reconciler: UpsertReconciler
    orchestrator: CascadeOrchestrator

    @classmethod
    def for_session(cls, db: AsyncSession) -> "MutationContext":
        validator = ReferenceValidator(db)
        guard = InvariantGuard(db)
        return cls(
            db=db,
            validator=validator,
            guard=guard,
            reconciler=UpsertReconciler(db, validator),
            orchestrator=CascadeOrchestrator(db, guard),
        )
