"""Response helpers — HTTP status for insert-or-merge mutations.

Invariants:
    - 201 only when the upsert inserted a row; 200 when it updated or left it unchanged
"""

from fastapi import Response, status

from pharmadb.core.domain_types import UpsertOutcome
from pharmadb.core.mutation_result import MutationResult


def upsert_response(result: MutationResult, response: Response) -> dict:
    """Set the status code from the upsert tag and return the JSON body."""
    if result.upsert is UpsertOutcome.INSERTED:
        response.status_code = status.HTTP_201_CREATED
    else:
        response.status_code = status.HTTP_200_OK
    return result.to_dict()
