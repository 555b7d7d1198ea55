"""Route Dependencies — builds the service objects routes delegate to.

Design Decisions:
    - MutationAPI receives the session manager, not a session: it opens its own
      unit of work per call
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from pharmadb.infrastructure.database import (
    DatabaseSessionManager, get_db, get_db_manager,
)
from pharmadb.services.mutation_api import MutationAPI
from pharmadb.services.reports import ReportService


def get_mutation_api(
    manager: DatabaseSessionManager = Depends(get_db_manager),
) -> MutationAPI:
    return MutationAPI(manager)


def get_report_service(db: AsyncSession = Depends(get_db)) -> ReportService:
    return ReportService(db)
