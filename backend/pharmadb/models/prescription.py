"""Prescription ORM — header written by a doctor for a patient on a date.

Invariants:
    - patient_id and doctor_id always resolve (FK, RESTRICT)
    - (patient_id, doctor_id, date) is unique
    - Detail rows are removed by the application before the header

Design Decisions:
    - add_prescription keeps one live prescription per (patient, doctor) and re-dates it;
      the three-column unique key still guards rows written by update_prescription
"""

import datetime as dt

from sqlalchemy import String, Integer, Date, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from pharmadb.db.base import Base


class Prescription(Base):
    """Prescription header entity."""
    __tablename__ = "prescriptions"
    __table_args__ = (
        UniqueConstraint(
            "patient_id", "doctor_id", "date",
            name="uq_prescriptions_patient_doctor_date",
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    patient_id: Mapped[str] = mapped_column(
        String(20), ForeignKey("patients.id", ondelete="RESTRICT"),
        nullable=False, index=True,
    )
    doctor_id: Mapped[str] = mapped_column(
        String(20), ForeignKey("doctors.id", ondelete="RESTRICT"),
        nullable=False, index=True,
    )
    date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    created_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: dt.datetime.now(dt.timezone.utc),
    )
