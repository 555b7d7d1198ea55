"""Pharmacy ORM — a retail pharmacy with a generated id.

Invariants:
    - id is auto-generated
    - Inventory rows and contracts reference the pharmacy with RESTRICT;
      the application deletes them first (services/orchestrate_cascades.py)
"""

from datetime import datetime, timezone

from sqlalchemy import String, Integer, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from pharmadb.db.base import Base


class Pharmacy(Base):
    """Pharmacy entity."""
    __tablename__ = "pharmacies"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    address: Mapped[str] = mapped_column(String(200), nullable=False)
    phone: Mapped[str] = mapped_column(String(30), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
