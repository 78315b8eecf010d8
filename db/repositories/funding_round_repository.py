"""
db/repositories/funding_round_repository.py

Read/write access to ``funding_rounds``.

Each read issues exactly one SQL statement. Aggregates follow SQL
semantics: SUM and AVG over zero rows yield ``None``, COUNT yields 0.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from db.models.funding_round import FundingRound
from db.repositories.types import FundingDetail


class FundingRoundRepository:
    def __init__(self, session: Session) -> None:
        self._session = session

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    def add_round(
        self,
        *,
        startup_id: int,
        round_type: str,
        announced_date: date,
        raised_amount_usd: int | None = None,
    ) -> FundingRound:
        """Add a funding round to the session and flush. Never commits."""
        funding_round = FundingRound(
            startup_id=startup_id,
            round_type=round_type,
            announced_date=announced_date,
            raised_amount_usd=raised_amount_usd,
        )
        self._session.add(funding_round)
        self._session.flush()
        return funding_round

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def count_rounds(self, startup_id: int) -> int:
        stmt = select(func.count(FundingRound.id)).where(FundingRound.startup_id == startup_id)
        return int(self._session.scalar(stmt) or 0)

    def sum_raised(self, startup_id: int) -> int | None:
        stmt = select(func.sum(FundingRound.raised_amount_usd)).where(
            FundingRound.startup_id == startup_id
        )
        raw = self._session.scalar(stmt)
        return int(raw) if raw is not None else None

    def average_raised(self, startup_id: int) -> Decimal | None:
        """
        Mean ``raised_amount_usd`` over rounds with a disclosed amount.

        PostgreSQL returns ``Decimal``, SQLite returns ``float``; both are
        normalised to ``Decimal`` via ``str`` to avoid binary float noise.
        """
        stmt = select(func.avg(FundingRound.raised_amount_usd)).where(
            FundingRound.startup_id == startup_id
        )
        raw = self._session.scalar(stmt)
        return Decimal(str(raw)) if raw is not None else None

    def list_details(self, startup_id: int) -> list[FundingDetail]:
        stmt = (
            select(
                FundingRound.round_type,
                FundingRound.raised_amount_usd,
                FundingRound.announced_date,
            )
            .where(FundingRound.startup_id == startup_id)
            .order_by(FundingRound.announced_date.asc(), FundingRound.id.asc())
        )
        return [
            FundingDetail(
                round_type=row.round_type,
                raised_amount_usd=row.raised_amount_usd,
                announced_date=row.announced_date,
            )
            for row in self._session.execute(stmt)
        ]
