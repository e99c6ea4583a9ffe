# sismed/services/medicine_service.py
from sqlalchemy import select
from sqlalchemy.orm import Session

from sismed.models.medicine import Medicine
from sismed.schemas.medicine import MedicineCreate, MedicineUpdate
from sismed.services.repository import delete_row, insert_row, update_row


def list_medicines(db: Session) -> list[Medicine]:
    return list(db.scalars(select(Medicine).order_by(Medicine.name, Medicine.id)))


def create_medicine(db: Session, *, payload: MedicineCreate) -> int:
    return insert_row(db, Medicine, payload.model_dump(exclude={"id"}))


def update_medicine(db: Session, medicine_id: int, *, payload: MedicineUpdate) -> int:
    return update_row(db, Medicine, medicine_id, payload.model_dump(exclude={"id"}))


def delete_medicine(db: Session, medicine_id: int) -> int:
    """
    Remove a medicine from the catalog.
    Raises ConstraintViolation while any prescription line still uses it.
    """
    return delete_row(db, Medicine, medicine_id)
