"""Doctor ORM — a physician identified by national ID.

Invariants:
    - id is the doctor's national ID (natural key, not generated)
    - years_of_experience >= 0 (CHECK)
    - Referenced by patients.doctor_id with RESTRICT: a doctor with patients cannot be deleted

Design Decisions:
    - No ORM relationship to patients: the guard counts them with an explicit query
      inside the deleting transaction
"""

from datetime import datetime, timezone

from sqlalchemy import String, Integer, DateTime, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column

from pharmadb.db.base import Base


class Doctor(Base):
    """Doctor entity — primary physician of one or more patients."""
    __tablename__ = "doctors"
    __table_args__ = (
        CheckConstraint(
            "years_of_experience >= 0", name="ck_doctors_experience_non_negative",
        ),
    )

    id: Mapped[str] = mapped_column(String(20), primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    specialty: Mapped[str] = mapped_column(String(100), nullable=False)
    years_of_experience: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
