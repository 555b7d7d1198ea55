"""Row Writers — plain inserts and keyed updates shared by the entity handlers.

Invariants:
    - insert_row flushes so generated keys are available before commit
    - update_row raises NotFoundError when no row matched the key
"""

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from pharmadb.core.domain_types import EntityKind, MutationOutcome
from pharmadb.core.errors import NotFoundError
from pharmadb.core.mutation_result import MutationResult
from pharmadb.models.registry import MODELS, key_filter


async def insert_row(db: AsyncSession, row: object) -> object:
    db.add(row)
    await db.flush()
    return row


async def update_row(
    db: AsyncSession, kind: EntityKind, key: object, values: dict,
) -> MutationResult:
    """Overwrite `values` on the `kind` row identified by `key`."""
    result = await db.execute(
        update(MODELS[kind])
        .where(*key_filter(kind, key))
        .values(**values)
        .execution_options(synchronize_session=False)
    )
    if not result.rowcount:
        raise NotFoundError(kind.value, key)
    return MutationResult(MutationOutcome.UPDATED, key, affected_rows=result.rowcount)
