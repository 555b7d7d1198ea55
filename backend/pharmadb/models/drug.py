"""Drug ORM — a trade-named formula owned by a pharmaceutical company.

Invariants:
    - (trade_name, company_name) is unique
    - company_name always resolves (FK ON DELETE CASCADE: deleting the company deletes its drugs)
    - Inventory and prescription detail rows follow the drug (ON DELETE CASCADE)

Design Decisions:
    - Drug-side cascades are declarative so a company deletion can remove stocked
      or prescribed drugs in one statement
"""

from datetime import datetime, timezone

from sqlalchemy import String, Integer, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from pharmadb.db.base import Base


class Drug(Base):
    """Drug entity."""
    __tablename__ = "drugs"
    __table_args__ = (
        UniqueConstraint(
            "trade_name", "company_name", name="uq_drugs_trade_name_company",
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    trade_name: Mapped[str] = mapped_column(String(100), nullable=False)
    formula: Mapped[str] = mapped_column(String(200), nullable=False)
    company_name: Mapped[str] = mapped_column(
        String(100),
        ForeignKey("pharmaceutical_companies.name", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
