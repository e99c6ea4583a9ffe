# sismed/models/medicine.py
from sqlalchemy import Integer, String, UniqueConstraint, text
from sqlalchemy.orm import Mapped, mapped_column

from sismed.models.base import Base


class Medicine(Base):
    """
    Catalog entry. A medicine is identified by the (name, dosage, form)
    triple; the same substance appears once per strength and presentation.
    """

    __tablename__ = "medicines"
    __table_args__ = (UniqueConstraint("name", "dosage", "form", name="uq_medicines_name_dosage_form"),)
    __uppercase_fields__ = ("name", "dosage", "form")

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(String, nullable=False)
    dosage: Mapped[str] = mapped_column(String, nullable=False)  # e.g. "5MG", "2.5MG/ML"
    form: Mapped[str] = mapped_column(String, nullable=False)  # e.g. "COMPRIMIDO"
    controlled: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        server_default=text("0"),
        doc="1 when the medicine requires a controlled-substance prescription.",
    )
