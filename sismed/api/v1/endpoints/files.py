# sismed/api/v1/endpoints/files.py
from fastapi import APIRouter, Depends

from sismed.core.config import Settings, get_app_settings
from sismed.core.database import Store, get_store, hold_store
from sismed.schemas.files import (
    BackupRequest,
    MessageResponse,
    PathResponse,
    RestoreRequest,
    SavePdfRequest,
)
from sismed.services import store_file_service

router = APIRouter()


@router.post("/pdf", response_model=PathResponse)
def save_pdf(payload: SavePdfRequest) -> PathResponse:
    path = store_file_service.save_pdf(payload.data, payload.filename, payload.target_path)
    return PathResponse(path=str(path))


@router.post("/backup", response_model=PathResponse)
def backup_database(
    payload: BackupRequest,
    store: Store = Depends(hold_store),
    settings: Settings = Depends(get_app_settings),
) -> PathResponse:
    path = store_file_service.backup_store(
        store,
        payload.target_path,
        backup_filename=settings.backup_filename,
    )
    return PathResponse(path=str(path))


@router.post("/restore", response_model=MessageResponse)
def restore_database(payload: RestoreRequest, store: Store = Depends(hold_store)) -> MessageResponse:
    """
    Overwrite the store with a backup file. The application should be
    restarted afterwards.
    """
    message = store_file_service.restore_store(store, payload.source_path)
    return MessageResponse(message=message)


@router.get("/database-path", response_model=PathResponse)
def get_database_path(store: Store = Depends(get_store)) -> PathResponse:
    return PathResponse(path=str(store_file_service.database_path(store)))
