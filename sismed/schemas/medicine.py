# sismed/schemas/medicine.py
from pydantic import BaseModel, ConfigDict, Field, field_validator


class MedicineBase(BaseModel):
    name: str
    dosage: str
    form: str
    controlled: int = Field(default=0, ge=0, le=1)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Medicine name is required")
        return v


class MedicineCreate(MedicineBase):
    id: int | None = None


class MedicineUpdate(MedicineCreate):
    pass


class MedicineResponse(MedicineBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
