# sismed/schemas/posology.py
from pydantic import BaseModel, ConfigDict, field_validator


class PosologyBase(BaseModel):
    text: str

    @field_validator("text")
    @classmethod
    def validate_text(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Posology text is required")
        return v


class PosologyCreate(PosologyBase):
    id: int | None = None


class PosologyUpdate(PosologyCreate):
    pass


class PosologyResponse(PosologyBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
