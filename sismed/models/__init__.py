from sismed.models.base import Base
from sismed.models.medicine import Medicine
from sismed.models.patient import Patient
from sismed.models.posology import Posology
from sismed.models.prescription import Prescription, PrescriptionMedicine

__all__ = [
    "Base",
    "Medicine",
    "Patient",
    "Posology",
    "Prescription",
    "PrescriptionMedicine",
]
