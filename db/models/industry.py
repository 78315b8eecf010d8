"""
db/models/industry.py

Industry lookup table referenced by startups.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from db.base import Base

if TYPE_CHECKING:
    from db.models.startup import Startup


class Industry(Base):
    __tablename__ = "industries"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)

    startups: Mapped[list["Startup"]] = relationship("Startup", back_populates="industry")

    def __repr__(self) -> str:
        return f"<Industry id={self.id} name={self.name!r}>"
