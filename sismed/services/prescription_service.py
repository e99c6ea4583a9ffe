# sismed/services/prescription_service.py
from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from sismed.core.errors import NotFound
from sismed.models.medicine import Medicine
from sismed.models.prescription import Prescription, PrescriptionMedicine
from sismed.schemas.prescription import (
    PrescriptionCreate,
    PrescriptionMedicineCreate,
    PrescriptionMedicineDetail,
    PrescriptionResponse,
    PrescriptionWithMedicines,
)
from sismed.services.repository import insert_row

logger = logging.getLogger(__name__)


def list_prescriptions_by_patient(db: Session, patient_id: int) -> list[Prescription]:
    """
    A patient's prescriptions, most recent first.
    """
    stmt = (
        select(Prescription)
        .where(Prescription.patient_id == patient_id)
        .order_by(Prescription.date.desc(), Prescription.id.desc())
    )
    return list(db.scalars(stmt))


def create_prescription(db: Session, *, payload: PrescriptionCreate) -> int:
    """
    Create a prescription header. Lines are added separately with
    :func:`add_medicine_to_prescription`.
    Raises ConstraintViolation when the patient does not exist.
    """
    return insert_row(db, Prescription, payload.model_dump(exclude={"id"}))


def add_medicine_to_prescription(db: Session, *, payload: PrescriptionMedicineCreate) -> int:
    return insert_row(db, PrescriptionMedicine, payload.model_dump(exclude={"id"}))


def get_prescription_medicines(db: Session, prescription_id: int) -> list[PrescriptionMedicineDetail]:
    stmt = (
        select(
            PrescriptionMedicine.id,
            PrescriptionMedicine.prescription_id,
            PrescriptionMedicine.medicine_id,
            PrescriptionMedicine.instructions,
            Medicine.name,
            Medicine.dosage,
            Medicine.form,
            Medicine.controlled,
        )
        .join(Medicine, PrescriptionMedicine.medicine_id == Medicine.id)
        .where(PrescriptionMedicine.prescription_id == prescription_id)
        .order_by(PrescriptionMedicine.id)
    )
    return [PrescriptionMedicineDetail(**row._mapping) for row in db.execute(stmt)]


def get_prescription_with_medicines(db: Session, prescription_id: int) -> PrescriptionWithMedicines:
    """
    Header plus line items. Unlike update/delete, a missing id is an error
    here: raises NotFound.
    """
    prescription = db.get(Prescription, prescription_id)
    if prescription is None:
        raise NotFound(f"Prescription {prescription_id} not found")

    return PrescriptionWithMedicines(
        prescription=PrescriptionResponse.model_validate(prescription),
        medicines=get_prescription_medicines(db, prescription_id),
    )
