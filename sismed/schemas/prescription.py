# sismed/schemas/prescription.py
from __future__ import annotations

from datetime import date as date_type

from pydantic import BaseModel, ConfigDict


class PrescriptionCreate(BaseModel):
    id: int | None = None
    patient_id: int
    date: date_type
    notes: str | None = None


class PrescriptionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    patient_id: int
    date: date_type
    notes: str | None = None


class PrescriptionMedicineCreate(BaseModel):
    id: int | None = None
    prescription_id: int
    medicine_id: int
    instructions: str


class PrescriptionMedicineDetail(BaseModel):
    """A line item: the prescription row plus the medicine it points to."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    prescription_id: int
    medicine_id: int
    instructions: str
    name: str
    dosage: str
    form: str
    controlled: int


class PrescriptionWithMedicines(BaseModel):
    prescription: PrescriptionResponse
    medicines: list[PrescriptionMedicineDetail]
