# sismed/schemas/common.py
from pydantic import BaseModel


class CreatedResponse(BaseModel):
    id: int


class RowsAffectedResponse(BaseModel):
    """Update/delete result. 0 means no row had that id; it is not an error."""

    rows_affected: int
