"""Patient ORM — a person identified by national ID with one primary physician.

Invariants:
    - id is the patient's national ID (natural key)
    - age > 0 (CHECK)
    - doctor_id always resolves to a Doctor (FK, RESTRICT)

Design Decisions:
    - RESTRICT over CASCADE/SET NULL on doctor_id: deleting a doctor never silently
      removes or orphans patients
"""

from datetime import datetime, timezone

from sqlalchemy import String, Integer, DateTime, ForeignKey, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column

from pharmadb.db.base import Base


class Patient(Base):
    """Patient entity — always attached to a primary physician."""
    __tablename__ = "patients"
    __table_args__ = (
        CheckConstraint("age > 0", name="ck_patients_age_positive"),
    )

    id: Mapped[str] = mapped_column(String(20), primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    address: Mapped[str] = mapped_column(String(200), nullable=False)
    age: Mapped[int] = mapped_column(Integer, nullable=False)
    doctor_id: Mapped[str] = mapped_column(
        String(20),
        ForeignKey("doctors.id", ondelete="RESTRICT"),
        nullable=False, index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
