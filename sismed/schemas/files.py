# sismed/schemas/files.py
from pydantic import Base64Bytes, BaseModel


class SavePdfRequest(BaseModel):
    data: Base64Bytes
    filename: str
    # Path picked in the save dialog; null when the dialog was dismissed.
    target_path: str | None = None


class BackupRequest(BaseModel):
    target_path: str | None = None


class RestoreRequest(BaseModel):
    source_path: str | None = None


class PathResponse(BaseModel):
    path: str


class MessageResponse(BaseModel):
    message: str
