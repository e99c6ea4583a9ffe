# sismed/models/prescription.py
from datetime import date as date_type

from sqlalchemy import Date, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from sismed.models.base import Base


class Prescription(Base):
    __tablename__ = "prescriptions"
    __uppercase_fields__ = ("notes",)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    patient_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("patients.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    date: Mapped[date_type] = mapped_column(Date, nullable=False)
    notes: Mapped[str | None] = mapped_column(String, nullable=True)


class PrescriptionMedicine(Base):
    """
    One line of a prescription: a catalog medicine plus its dosing
    instructions. Medicines in use cannot be deleted.
    """

    __tablename__ = "prescription_medicines"
    __uppercase_fields__ = ("instructions",)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    prescription_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("prescriptions.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    medicine_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("medicines.id"),
        nullable=False,
    )
    instructions: Mapped[str] = mapped_column(String, nullable=False)
