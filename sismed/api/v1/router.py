# sismed/api/v1/router.py
from fastapi import APIRouter

from sismed.api.v1.endpoints import (
    files,
    medicines,
    patients,
    posologies,
    prescriptions,
)

api_router = APIRouter()

api_router.include_router(patients.router, prefix="/patients", tags=["patients"])
api_router.include_router(medicines.router, prefix="/medicines", tags=["medicines"])
api_router.include_router(posologies.router, prefix="/posologies", tags=["posologies"])
api_router.include_router(prescriptions.router, prefix="/prescriptions", tags=["prescriptions"])
api_router.include_router(files.router, prefix="/files", tags=["files"])
