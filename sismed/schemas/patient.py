# sismed/schemas/patient.py
from datetime import date

from pydantic import BaseModel, ConfigDict, field_validator


class PatientBase(BaseModel):
    name: str
    national_id: str
    birth_date: date

    @field_validator("name", "national_id")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Value must not be blank")
        return v


class PatientCreate(PatientBase):
    # Accepted so the UI can send back a row it listed; never written.
    id: int | None = None


class PatientUpdate(PatientCreate):
    pass


class PatientResponse(PatientBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
