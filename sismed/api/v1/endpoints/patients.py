# sismed/api/v1/endpoints/patients.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from sismed.core.database import get_db
from sismed.schemas.common import CreatedResponse, RowsAffectedResponse
from sismed.schemas.patient import PatientCreate, PatientResponse, PatientUpdate
from sismed.schemas.prescription import PrescriptionResponse
from sismed.services import patient_service
from sismed.services.prescription_service import list_prescriptions_by_patient

router = APIRouter()


@router.get("", response_model=list[PatientResponse])
def list_patients(db: Session = Depends(get_db)) -> list[PatientResponse]:
    """
    All patients ordered by name.
    """
    return [PatientResponse.model_validate(p) for p in patient_service.list_patients(db)]


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_patient(payload: PatientCreate, db: Session = Depends(get_db)) -> CreatedResponse:
    return CreatedResponse(id=patient_service.create_patient(db, payload=payload))


@router.put("/{patient_id}", response_model=RowsAffectedResponse)
def update_patient(
    patient_id: int,
    payload: PatientUpdate,
    db: Session = Depends(get_db),
) -> RowsAffectedResponse:
    rows = patient_service.update_patient(db, patient_id, payload=payload)
    return RowsAffectedResponse(rows_affected=rows)


@router.delete("/{patient_id}", response_model=RowsAffectedResponse)
def delete_patient(patient_id: int, db: Session = Depends(get_db)) -> RowsAffectedResponse:
    """
    Delete a patient together with their prescriptions.
    """
    return RowsAffectedResponse(rows_affected=patient_service.delete_patient(db, patient_id))


@router.get("/{patient_id}/prescriptions", response_model=list[PrescriptionResponse])
def list_patient_prescriptions(patient_id: int, db: Session = Depends(get_db)) -> list[PrescriptionResponse]:
    return [PrescriptionResponse.model_validate(p) for p in list_prescriptions_by_patient(db, patient_id)]
