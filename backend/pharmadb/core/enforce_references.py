"""Reference Enforcement — decides whether a write may embed its foreign references.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Checks are evaluated in declaration order; first missing reference wins
    - Return an error on violation, None on success

Design Decisions:
    - Existence lookups happen in the shell (services/validate_references.py);
      this module only turns lookup results into a verdict, so the attribution
      rule is testable without a database
    - Explicit per-reference error over deferred FK enforcement: the caller learns
      WHICH reference failed, not just that a constraint fired
"""

from dataclasses import dataclass
from typing import Sequence

from pharmadb.core.domain_types import EntityKind
from pharmadb.core.errors import ReferenceNotFoundError


@dataclass(frozen=True)
class ReferenceCheck:
    """One foreign reference embedded in a pending write."""
    kind: EntityKind
    key: object
    field: str


def find_missing_reference(
    checks: Sequence[ReferenceCheck], found: Sequence[bool],
) -> ReferenceCheck | None:
    """Return the first check whose lookup came back empty."""
    if len(checks) != len(found):
        raise ValueError("each reference check needs exactly one lookup result")
    for check, exists in zip(checks, found):
        if not exists:
            return check
    return None


def check_references(
    checks: Sequence[ReferenceCheck], found: Sequence[bool],
) -> ReferenceNotFoundError | None:
    """Build the ReferenceNotFoundError for the first missing reference, if any."""
    missing = find_missing_reference(checks, found)
    if missing is None:
        return None
    return ReferenceNotFoundError(missing.kind.value, missing.key, missing.field)
