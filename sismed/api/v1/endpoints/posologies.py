# sismed/api/v1/endpoints/posologies.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from sismed.core.database import get_db
from sismed.schemas.common import CreatedResponse, RowsAffectedResponse
from sismed.schemas.posology import PosologyCreate, PosologyResponse, PosologyUpdate
from sismed.services import posology_service

router = APIRouter()


@router.get("", response_model=list[PosologyResponse])
def list_posologies(db: Session = Depends(get_db)) -> list[PosologyResponse]:
    return [PosologyResponse.model_validate(p) for p in posology_service.list_posologies(db)]


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_posology(payload: PosologyCreate, db: Session = Depends(get_db)) -> CreatedResponse:
    return CreatedResponse(id=posology_service.create_posology(db, payload=payload))


@router.put("/{posology_id}", response_model=RowsAffectedResponse)
def update_posology(
    posology_id: int,
    payload: PosologyUpdate,
    db: Session = Depends(get_db),
) -> RowsAffectedResponse:
    rows = posology_service.update_posology(db, posology_id, payload=payload)
    return RowsAffectedResponse(rows_affected=rows)


@router.delete("/{posology_id}", response_model=RowsAffectedResponse)
def delete_posology(posology_id: int, db: Session = Depends(get_db)) -> RowsAffectedResponse:
    return RowsAffectedResponse(rows_affected=posology_service.delete_posology(db, posology_id))
