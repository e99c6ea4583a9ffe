# sismed/services/seed_service.py
import logging

from sqlalchemy import func, select
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.orm import Session

from sismed.models import Medicine, Posology

logger = logging.getLogger(__name__)

# (name, dosage, form, controlled)
DEFAULT_MEDICINES = [
    ("AMITRIPTILINA", "25MG", "COMPRIMIDO", 0),
    ("ÁCIDO VALPROICO", "250MG", "COMPRIMIDO", 0),
    ("ÁCIDO VALPROICO", "500MG", "COMPRIMIDO", 0),
    ("ÁCIDO VALPROICO", "50MG/ML", "SUSPENSÃO ORAL", 0),
    ("BIPERIDENO CLORIDRATO", "2MG", "COMPRIMIDO", 1),
    ("CARBAMAZEPINA", "200MG", "COMPRIMIDO", 0),
    ("CARBAMAZEPINA", "20MG/ML", "SUSPENSÃO", 0),
    ("CARBONATO DE LÍTIO", "300MG", "COMPRIMIDO", 1),
    ("CLOMIPRAMINA CLORIDRATO", "25MG", "COMPRIMIDO", 0),
    ("CLONAZEPAM", "2MG", "COMPRIMIDO", 1),
    ("CLONAZEPAM", "2.5MG/ML", "SOLUÇÃO ORAL", 1),
    ("CLORPROMAZINA CLORIDRATO", "25MG", "COMPRIMIDO", 1),
    ("CLORPROMAZINA CLORIDRATO", "100MG", "COMPRIMIDO", 1),
    ("DESVENLAFAXINA SUCCINATO", "50MG", "COMPRIMIDO", 0),
    ("DIAZEPAM", "5MG", "COMPRIMIDO", 1),
    ("DIAZEPAM", "10MG", "COMPRIMIDO", 1),
    ("ESCITALOPRAM", "10MG", "COMPRIMIDO", 0),
    ("FENITOÍNA SÓDICA", "100MG", "COMPRIMIDO", 1),
    ("FENOBARBITAL", "100MG", "COMPRIMIDO", 1),
    ("FENOBARBITAL", "40MG/ML", "SOLUÇÃO ORAL", 1),
    ("FLUOXETINA", "20MG", "CÁPSULA/COMPRIMIDO", 0),
    ("HALOPERIDOL", "1MG", "COMPRIMIDO", 1),
    ("HALOPERIDOL", "5MG", "COMPRIMIDO", 1),
    ("HALOPERIDOL", "2MG/ML", "SOLUÇÃO ORAL", 1),
    ("HALOPERIDOL DECANOATO", "50MG/ML", "SOLUÇÃO INJETÁVEL", 1),
    ("IMIPRAMINA CLORIDRATO", "25MG", "COMPRIMIDO", 0),
    ("LEVOMEPROMAZINA", "25MG", "COMPRIMIDO", 1),
    ("LEVOMEPROMAZINA", "100MG", "COMPRIMIDO", 1),
    ("MIRTAZAPINA", "30MG", "COMPRIMIDO", 0),
    ("NORTRIPTILINA CLORIDRATO", "25MG", "COMPRIMIDO", 0),
    ("OXCARBAZEPINA", "600MG", "COMPRIMIDO", 0),
    ("OXCARBAZEPINA", "60MG/ML", "SOLUÇÃO ORAL", 0),
    ("PAROXETINA CLORIDRATO", "20MG", "COMPRIMIDO", 0),
    ("PREGABALINA", "75MG", "COMPRIMIDO", 1),
    ("SERTRALINA CLORIDRATO", "50MG", "COMPRIMIDO", 0),
    ("VENLAFAXINA CLORIDRATO", "75MG", "COMPRIMIDO", 0),
]

DEFAULT_POSOLOGIES = [
    "1 COMPRIMIDO DE 8 EM 8 HORAS",
    "1 COMPRIMIDO DE 12 EM 12 HORAS",
    "1 COMPRIMIDO PELA MANHÃ",
    "1 COMPRIMIDO À NOITE",
    "1 COMPRIMIDO 3 VEZES AO DIA",
    "1 COMPRIMIDO EM JEJUM",
    "1 COMPRIMIDO APÓS AS REFEIÇÕES",
    "CONFORME ORIENTAÇÃO MÉDICA",
    "APLICAR 1 AMPOLA INTRAMUSCULAR",
    "APLICAR CONFORME NECESSÁRIO",
]


def seed_reference_data(db: Session, *, force: bool = False) -> bool:
    """
    Load the default medicine catalog and posologies.

    Skipped when the medicines table already has rows, unless ``force`` is
    set. Each row is inserted with ON CONFLICT DO NOTHING, so a repeated or
    partial seed never duplicates or fails.

    Returns True when the seed was applied.
    """
    medicine_count = db.scalar(select(func.count()).select_from(Medicine))
    if medicine_count and not force:
        logger.debug("Seed skipped: %s medicines already present", medicine_count)
        return False

    for name, dosage, form, controlled in DEFAULT_MEDICINES:
        db.execute(
            sqlite_insert(Medicine)
            .values(name=name, dosage=dosage, form=form, controlled=controlled)
            .on_conflict_do_nothing()
        )

    for text in DEFAULT_POSOLOGIES:
        db.execute(sqlite_insert(Posology).values(text=text).on_conflict_do_nothing())

    db.commit()
    logger.info(
        "Seed applied: %s medicines, %s posologies",
        len(DEFAULT_MEDICINES),
        len(DEFAULT_POSOLOGIES),
    )
    return True
