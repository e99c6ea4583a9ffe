# sismed/services/posology_service.py
from sqlalchemy import select
from sqlalchemy.orm import Session

from sismed.models.posology import Posology
from sismed.schemas.posology import PosologyCreate, PosologyUpdate
from sismed.services.repository import delete_row, insert_row, update_row


def list_posologies(db: Session) -> list[Posology]:
    return list(db.scalars(select(Posology).order_by(Posology.text)))


def create_posology(db: Session, *, payload: PosologyCreate) -> int:
    return insert_row(db, Posology, payload.model_dump(exclude={"id"}))


def update_posology(db: Session, posology_id: int, *, payload: PosologyUpdate) -> int:
    return update_row(db, Posology, posology_id, payload.model_dump(exclude={"id"}))


def delete_posology(db: Session, posology_id: int) -> int:
    return delete_row(db, Posology, posology_id)
