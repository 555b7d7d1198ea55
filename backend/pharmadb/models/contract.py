"""Contract ORM — supply agreement between one pharmacy and one company.

Invariants:
    - pharmacy_id and company_name always resolve (FK, RESTRICT; removed by the
      application when either party is deleted)
    - end_date > start_date (CHECK)
"""

from datetime import date, datetime, timezone

from sqlalchemy import (
    String, Integer, Text, Date, DateTime, ForeignKey, CheckConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column

from pharmadb.db.base import Base


class Contract(Base):
    """Contract entity."""
    __tablename__ = "contracts"
    __table_args__ = (
        CheckConstraint("end_date > start_date", name="ck_contracts_dates_ordered"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    pharmacy_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("pharmacies.id", ondelete="RESTRICT"),
        nullable=False, index=True,
    )
    company_name: Mapped[str] = mapped_column(
        String(100),
        ForeignKey("pharmaceutical_companies.name", ondelete="RESTRICT"),
        nullable=False, index=True,
    )
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    supervisor: Mapped[str] = mapped_column(String(100), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
