# sismed/models/posology.py
from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from sismed.models.base import Base


class Posology(Base):
    __tablename__ = "posologies"
    __uppercase_fields__ = ("text",)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    text: Mapped[str] = mapped_column(String, nullable=False, unique=True)
