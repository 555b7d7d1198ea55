"""PharmaceuticalCompany ORM — drug manufacturer keyed by name.

Invariants:
    - name is the natural primary key
    - Owns drugs through drugs.company_name (ON DELETE CASCADE, performed by the store)
    - Contracts referencing the company are removed by the application before the company
"""

from datetime import datetime, timezone

from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from pharmadb.db.base import Base


class PharmaceuticalCompany(Base):
    """Pharmaceutical company entity."""
    __tablename__ = "pharmaceutical_companies"

    name: Mapped[str] = mapped_column(String(100), primary_key=True)
    phone: Mapped[str] = mapped_column(String(30), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
