# sismed/models/patient.py
from datetime import date

from sqlalchemy import Date, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from sismed.models.base import Base


class Patient(Base):
    __tablename__ = "patients"
    __uppercase_fields__ = ("name", "national_id")

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(String, nullable=False)
    national_id: Mapped[str] = mapped_column(
        String,
        nullable=False,
        unique=True,
        doc="National identity document number (CPF).",
    )
    birth_date: Mapped[date] = mapped_column(Date, nullable=False)
