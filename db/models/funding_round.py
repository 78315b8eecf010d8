"""
db/models/funding_round.py

One announced funding round for a startup.

``raised_amount_usd`` is nullable: undisclosed rounds are stored with no
amount and count as zero in top-N aggregation.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import BigInteger, Date, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from db.base import Base

if TYPE_CHECKING:
    from db.models.startup import Startup


class FundingRound(Base):
    __tablename__ = "funding_rounds"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    startup_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("startups.id", ondelete="CASCADE"),
        nullable=False,
    )
    round_type: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        comment="seed, series_a, series_b, ...",
    )
    raised_amount_usd: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    announced_date: Mapped[date] = mapped_column(Date, nullable=False)

    startup: Mapped["Startup"] = relationship("Startup", back_populates="funding_rounds")

    __table_args__ = (
        Index("ix_funding_rounds_startup_id", "startup_id"),
        Index(
            "ix_funding_rounds_startup_announced_date",
            "startup_id",
            "announced_date",
        ),
    )

    def __repr__(self) -> str:
        return (
            f"<FundingRound id={self.id} startup_id={self.startup_id} "
            f"round_type={self.round_type!r} amount={self.raised_amount_usd}>"
        )
