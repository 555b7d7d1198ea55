"""Mutation Result — the success envelope returned by every Mutation API call.

Invariants:
    - key is the generated id (create), the natural key, or a tuple for composite keys
    - affected_rows counts every row written or removed by the application,
      orchestrated cascade steps included (store-side FK cascades are not counted)
    - upsert is set only by insert-or-merge operations
"""

from dataclasses import dataclass, replace

from pharmadb.core.domain_types import MutationOutcome, UpsertOutcome


@dataclass(frozen=True)
class MutationResult:
    """Outcome of one committed mutation."""
    outcome: MutationOutcome
    key: object
    affected_rows: int = 1
    upsert: UpsertOutcome | None = None
    operation: str | None = None

    def for_operation(self, operation: str) -> "MutationResult":
        return replace(self, operation=operation)

    def to_dict(self) -> dict:
        key = list(self.key) if isinstance(self.key, tuple) else self.key
        return {
            "operation": self.operation,
            "outcome": self.outcome.value,
            "key": key,
            "affected_rows": self.affected_rows,
            "upsert": self.upsert.value if self.upsert else None,
        }
