"""
db/models/startup.py

Startup model - the partition entity that funding rounds belong to.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from db.base import Base, TimestampMixin

if TYPE_CHECKING:
    from db.models.funding_round import FundingRound
    from db.models.industry import Industry


class StartupStatus:
    ACTIVE = "active"
    CLOSED = "closed"
    PUBLIC = "public"

    ALL = frozenset({ACTIVE, CLOSED, PUBLIC})


class Startup(Base, TimestampMixin):
    """
    A company tracked by the funding analytics store.

    ``current_status`` is constrained to :class:`StartupStatus` values.
    """

    __tablename__ = "startups"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    industry_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("industries.id", ondelete="RESTRICT"),
        nullable=False,
    )
    current_status: Mapped[str] = mapped_column(
        String(16),
        nullable=False,
        default=StartupStatus.ACTIVE,
        comment="active, closed, public",
    )

    # ── Relationships ──────────────────────────────────────────────────────────

    industry: Mapped["Industry"] = relationship("Industry", back_populates="startups")
    funding_rounds: Mapped[list["FundingRound"]] = relationship(
        "FundingRound",
        back_populates="startup",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (
        CheckConstraint(
            "current_status IN ('active', 'closed', 'public')",
            name="ck_startups_current_status",
        ),
        Index("ix_startups_industry_id", "industry_id"),
    )

    def __repr__(self) -> str:
        return f"<Startup id={self.id} name={self.name!r} status={self.current_status!r}>"
