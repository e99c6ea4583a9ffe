# sismed/api/v1/endpoints/prescriptions.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from sismed.core.database import get_db
from sismed.schemas.common import CreatedResponse
from sismed.schemas.prescription import (
    PrescriptionCreate,
    PrescriptionMedicineCreate,
    PrescriptionMedicineDetail,
    PrescriptionWithMedicines,
)
from sismed.services import prescription_service

router = APIRouter()


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_prescription(payload: PrescriptionCreate, db: Session = Depends(get_db)) -> CreatedResponse:
    return CreatedResponse(id=prescription_service.create_prescription(db, payload=payload))


@router.get("/{prescription_id}", response_model=PrescriptionWithMedicines)
def get_prescription(prescription_id: int, db: Session = Depends(get_db)) -> PrescriptionWithMedicines:
    """
    Prescription header plus its line items; 404 when the id is unknown.
    """
    return prescription_service.get_prescription_with_medicines(db, prescription_id)


@router.get("/{prescription_id}/medicines", response_model=list[PrescriptionMedicineDetail])
def list_prescription_medicines(
    prescription_id: int,
    db: Session = Depends(get_db),
) -> list[PrescriptionMedicineDetail]:
    return prescription_service.get_prescription_medicines(db, prescription_id)


@router.post(
    "/{prescription_id}/medicines",
    response_model=CreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
def add_prescription_medicine(
    prescription_id: int,
    payload: PrescriptionMedicineCreate,
    db: Session = Depends(get_db),
) -> CreatedResponse:
    # The path decides which prescription the line belongs to.
    payload = payload.model_copy(update={"prescription_id": prescription_id})
    return CreatedResponse(id=prescription_service.add_medicine_to_prescription(db, payload=payload))
