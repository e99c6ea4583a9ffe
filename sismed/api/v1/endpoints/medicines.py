# sismed/api/v1/endpoints/medicines.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from sismed.core.database import get_db
from sismed.schemas.common import CreatedResponse, RowsAffectedResponse
from sismed.schemas.medicine import MedicineCreate, MedicineResponse, MedicineUpdate
from sismed.services import medicine_service

router = APIRouter()


@router.get("", response_model=list[MedicineResponse])
def list_medicines(db: Session = Depends(get_db)) -> list[MedicineResponse]:
    return [MedicineResponse.model_validate(m) for m in medicine_service.list_medicines(db)]


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_medicine(payload: MedicineCreate, db: Session = Depends(get_db)) -> CreatedResponse:
    return CreatedResponse(id=medicine_service.create_medicine(db, payload=payload))


@router.put("/{medicine_id}", response_model=RowsAffectedResponse)
def update_medicine(
    medicine_id: int,
    payload: MedicineUpdate,
    db: Session = Depends(get_db),
) -> RowsAffectedResponse:
    rows = medicine_service.update_medicine(db, medicine_id, payload=payload)
    return RowsAffectedResponse(rows_affected=rows)


@router.delete("/{medicine_id}", response_model=RowsAffectedResponse)
def delete_medicine(medicine_id: int, db: Session = Depends(get_db)) -> RowsAffectedResponse:
    return RowsAffectedResponse(rows_affected=medicine_service.delete_medicine(db, medicine_id))
