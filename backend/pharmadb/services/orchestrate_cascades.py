"""Cascade Orchestrator — ordered multi-table deletes inside one transaction.

Invariants:
    - Child rows named by core/cascade_plans.py are removed before their parent
    - Patient deletions pass the Invariant Guard first
    - A missing parent row raises NotFoundError AFTER the child steps ran; the
      surrounding unit of work rolls back, so nothing is removed
    - Store-side FK cascades (company -> drug -> inventory/details) are never re-issued here

Design Decisions:
    - One generic executor over per-entity delete functions: the plan is data,
      the order is enforced in exactly one loop
"""

import logging

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from pharmadb.core.cascade_plans import cascade_plan
from pharmadb.core.domain_types import EntityKind
from pharmadb.core.errors import NotFoundError
from pharmadb.models.registry import MODELS, key_filter
from pharmadb.services.guard_invariants import InvariantGuard

logger = logging.getLogger(__name__)


class CascadeOrchestrator:
    """delete(kind, key) -> affected rows, or NotFoundError."""

    def __init__(self, db: AsyncSession, guard: InvariantGuard):
        self.db = db
        self.guard = guard

    async def _delete_where(self, model: type, *criteria) -> int:
        result = await self.db.execute(
            delete(model).where(*criteria)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount

    async def delete(self, kind: EntityKind, key: object) -> int:
        """Delete one `kind` row and its orchestrated children, children first."""
        if kind is EntityKind.PATIENT:
            await self.guard.ensure_patient_deletable(key)

        removed_children = 0
        for step in cascade_plan(kind):
            child = MODELS[step.child]
            removed = await self._delete_where(
                child, getattr(child, step.parent_column) == key,
            )
            if removed:
                logger.debug(
                    f"Cascade removed {removed} {step.child.value} row(s)",
                    extra={"entity": kind.value, "key": str(key)},
                )
            removed_children += removed

        removed_parent = await self._delete_where(MODELS[kind], *key_filter(kind, key))
        if not removed_parent:
            raise NotFoundError(kind.value, key)
        return removed_children + removed_parent
