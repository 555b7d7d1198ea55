"""Validation Layer — confirms referenced entities exist before a dependent write.

Invariants:
    - Every reference of a mutation is checked before its first write
    - The first missing reference (declaration order) is the one reported
    - Read-only: never writes

Design Decisions:
    - One point query per reference: each check yields an attributable error,
      which a deferred FK violation cannot
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from pharmadb.core.domain_types import EntityKind
from pharmadb.core.enforce_references import ReferenceCheck, check_references
from pharmadb.models.registry import KEY_COLUMNS, key_filter

logger = logging.getLogger(__name__)


class ReferenceValidator:
    """exists()/require() over every entity kind."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def exists(self, kind: EntityKind, key: object) -> bool:
        """True when a `kind` row with `key` (tuple for composite keys) is present."""
        query = (
            select(KEY_COLUMNS[kind][0])
            .where(*key_filter(kind, key))
            .limit(1)
        )
        return (await self.db.execute(query)).first() is not None

    async def require(self, *checks: ReferenceCheck) -> None:
        """Raise ReferenceNotFoundError for the first reference that does not resolve."""
        found = [await self.exists(check.kind, check.key) for check in checks]
        error = check_references(checks, found)
        if error:
            logger.info(
                f"Rejected write: {error.message}",
                extra={"entity": error.entity, "key": str(error.key)},
            )
            raise error
