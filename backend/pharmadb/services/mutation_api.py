"""Mutation API — named add/update/delete operations, each one atomic unit of work.

Invariants:
    - Every operation->handler mapping is visible; no getattr magic or auto-discovery
    - One call = one transaction: the caller sees the full effect or none of it
    - Unknown operations raise UnknownOperationError before anything is written
    - Failures are typed PharmaError subclasses; nothing is retried automatically
    - Every terminal state (committed / rejected / failed) is logged

Design Decisions:
    - Explicit dict over getattr: every mapping visible in one place
    - Handlers split by entity group: max ~10 methods per class
    - MutationDispatch is rebuilt per transaction so handlers never outlive their session
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from pharmadb.core.domain_types import MutationState
from pharmadb.core.errors import (
    InvariantViolationError, PharmaError, ReferenceNotFoundError,
    UnknownOperationError,
)
from pharmadb.core.mutation_result import MutationResult
from pharmadb.infrastructure.database import DatabaseSessionManager
from pharmadb.services.handle_catalog import CatalogHandlers
from pharmadb.services.handle_people import PeopleHandlers
from pharmadb.services.handle_prescriptions import PrescriptionHandlers
from pharmadb.services.handle_suppliers import SupplierHandlers
from pharmadb.services.mutation_context import MutationContext

logger = logging.getLogger(__name__)

# Raised while checking preconditions, before any row changed
_REJECTIONS = (ReferenceNotFoundError, InvariantViolationError)


class MutationDispatch:
    """Routes operation name -> handler. Explicit registration, no auto-discovery."""

    def __init__(self, db: AsyncSession):
        ctx = MutationContext.for_session(db)
        people = PeopleHandlers(ctx)
        suppliers = SupplierHandlers(ctx)
        catalog = CatalogHandlers(ctx)
        prescriptions = PrescriptionHandlers(ctx)

        # Adding an operation requires editing this dict
        self._handlers = {
            # Create
            "add_patient": people.add_patient,
            "add_doctor": people.add_doctor,
            "add_pharmaceutical_company": suppliers.add_pharmaceutical_company,
            "add_pharmacy": suppliers.add_pharmacy,
            "add_drug": catalog.add_drug,
            "add_contract": suppliers.add_contract,
            "add_drug_to_pharmacy": catalog.add_drug_to_pharmacy,
            "add_prescription": prescriptions.add_prescription,
            "add_drug_to_prescription": prescriptions.add_drug_to_prescription,

            # Update
            "update_patient": people.update_patient,
            "update_doctor": people.update_doctor,
            "update_pharmaceutical_company": suppliers.update_pharmaceutical_company,
            "update_pharmacy": suppliers.update_pharmacy,
            "update_drug": catalog.update_drug,
            "update_contract": suppliers.update_contract,
            "update_contract_supervisor": suppliers.update_contract_supervisor,
            "update_pharmacy_drug": catalog.update_pharmacy_drug,
            "update_prescription": prescriptions.update_prescription,
            "update_prescription_detail": prescriptions.update_prescription_detail,

            # Delete
            "delete_patient": people.delete_patient,
            "delete_doctor": people.delete_doctor,
            "delete_pharmaceutical_company": suppliers.delete_pharmaceutical_company,
            "delete_pharmacy": suppliers.delete_pharmacy,
            "delete_drug": catalog.delete_drug,
            "delete_contract": suppliers.delete_contract,
            "delete_pharmacy_drug": catalog.delete_pharmacy_drug,
            "delete_prescription": prescriptions.delete_prescription,
            "delete_prescription_detail": prescriptions.delete_prescription_detail,
        }

    @property
    def operations(self) -> frozenset[str]:
        return frozenset(self._handlers)

    async def execute(self, operation: str, params: dict) -> MutationResult:
        handler = self._handlers.get(operation)
        if handler is None:
            raise UnknownOperationError(operation)
        return await handler(**params)


class MutationAPI:
    """Entry point for every write: opens the unit of work, dispatches, logs the outcome."""

    def __init__(self, db_manager: DatabaseSessionManager):
        self._db_manager = db_manager

    async def execute(self, operation: str, **params) -> MutationResult:
        """Run `operation` atomically; return its result or raise a PharmaError."""
        try:
            async with self._db_manager.unit_of_work() as db:
                result = await MutationDispatch(db).execute(operation, params)
        except PharmaError as e:
            state = _terminal_state(e)
            e.context.operation = operation
            logger.info(
                f"Mutation {operation} {state.value}: {e.message}",
                extra={
                    "operation": operation, "state": state.value,
                    "error_code": e.code,
                },
            )
            raise

        result = result.for_operation(operation)
        logger.info(
            f"Mutation {operation} committed",
            extra={
                "operation": operation, "state": MutationState.COMMITTED.value,
                "outcome": result.outcome.value, "key": str(result.key),
                "affected_rows": result.affected_rows,
            },
        )
        return result


def _terminal_state(error: PharmaError) -> MutationState:
    """Rejected = a precondition refused the write; failed = the write itself did not land."""
    if isinstance(error, _REJECTIONS):
        return MutationState.REJECTED
    return MutationState.FAILED
