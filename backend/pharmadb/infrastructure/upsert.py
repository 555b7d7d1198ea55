"""Conditional Writes — insert-or-overwrite keyed rows without a read-then-branch race.

Invariants:
    - The outcome tag comes from the writes themselves, never from a prior SELECT
    - An existing row is fully overwritten on update_columns (no accumulation)
    - Only PostgreSQL and SQLite are supported (the two dialects with ON CONFLICT)

Design Decisions:
    - INSERT ... ON CONFLICT DO NOTHING, then UPDATE when nothing was inserted:
      both statements are single atomic conditional writes, the rowcount of the
      first tags the outcome, and the pattern is identical on both dialects
"""

from typing import Sequence

from sqlalchemy import update
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from pharmadb.core.domain_types import UpsertOutcome
from pharmadb.core.errors import ConcurrencyError, DatabaseError
from pharmadb.core.reconcile import upsert_outcome

_INSERT_CONSTRUCTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


async def upsert_row(
    db: AsyncSession,
    model: type,
    values: dict,
    key_columns: Sequence[str],
    update_columns: Sequence[str],
) -> UpsertOutcome:
    """Insert `values` or overwrite `update_columns` of the row keyed by `key_columns`."""
    dialect = db.get_bind().dialect.name
    insert_construct = _INSERT_CONSTRUCTS.get(dialect)
    if insert_construct is None:
        raise DatabaseError(f"upsert not supported on {dialect}", "upsert")

    table = model.__table__
    insert_stmt = (
        insert_construct(table)
        .values(**values)
        .on_conflict_do_nothing(index_elements=list(key_columns))
    )
    inserted = (await db.execute(insert_stmt)).rowcount
    if inserted:
        return upsert_outcome(existed=False)

    update_stmt = (
        update(table)
        .where(*[table.c[column] == values[column] for column in key_columns])
        .values({column: values[column] for column in update_columns})
    )
    updated = (await db.execute(update_stmt)).rowcount
    if not updated:
        # Row vanished between the conflicting insert and the overwrite
        raise ConcurrencyError(
            f"{table.name} row changed concurrently during upsert",
        )
    return upsert_outcome(existed=True)
