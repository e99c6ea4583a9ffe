# sismed/services/patient_service.py
from sqlalchemy import select
from sqlalchemy.orm import Session

from sismed.models.patient import Patient
from sismed.schemas.patient import PatientCreate, PatientUpdate
from sismed.services.repository import delete_row, insert_row, update_row


def list_patients(db: Session) -> list[Patient]:
    return list(db.scalars(select(Patient).order_by(Patient.name)))


def create_patient(db: Session, *, payload: PatientCreate) -> int:
    """
    Insert a patient and return its id.
    Raises ConstraintViolation when the national id is already registered.
    """
    return insert_row(db, Patient, payload.model_dump(exclude={"id"}))


def update_patient(db: Session, patient_id: int, *, payload: PatientUpdate) -> int:
    return update_row(db, Patient, patient_id, payload.model_dump(exclude={"id"}))


def delete_patient(db: Session, patient_id: int) -> int:
    # Prescriptions and their lines go with the patient (ON DELETE CASCADE).
    return delete_row(db, Patient, patient_id)
