"""
db/repositories/funding_round_source.py

SQL-backed record source for top-N aggregation over ``funding_rounds``.

Each :meth:`FundingRoundSource.record_at` call issues one positional query::

    SELECT *
    FROM   funding_rounds
    WHERE  startup_id = :startup_id
    ORDER BY <order_by.field> [DESC] NULLS LAST, id ASC
    LIMIT 1 OFFSET :index

The partition is never materialised in Python. Sorting, filtering and
isolation are left entirely to the database.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from db.models.funding_round import FundingRound
from topn.base import BaseRecordSource, OrderBy
from topn.errors import InvalidArgumentError, SourceUnavailableError

logger = logging.getLogger(__name__)

_SORTABLE_COLUMNS = {
    "id": FundingRound.id,
    "announced_date": FundingRound.announced_date,
    "raised_amount_usd": FundingRound.raised_amount_usd,
    "round_type": FundingRound.round_type,
}


class FundingRoundSource(BaseRecordSource):
    """
    Serves funding rounds of one startup by position.

    Parameters
    ----------
    session:
        Active SQLAlchemy session. The caller controls its lifecycle; the
        source only reads.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def record_at(self, partition_key: Hashable, index: int, order_by: OrderBy) -> FundingRound | None:
        if index < 0:
            raise InvalidArgumentError(f"index must be >= 0, got {index}")

        primary = _column(order_by.field)
        tiebreak = _column(order_by.tiebreaker)
        # NULLs last in both directions and ties by ascending id, matching
        # the stable sort of InMemoryRecordSource.
        primary_order = primary.desc() if order_by.descending else primary.asc()
        ordering = (primary_order.nulls_last(), tiebreak.asc())
        stmt = (
            select(FundingRound)
            .where(FundingRound.startup_id == partition_key)
            .order_by(*ordering)
            .offset(index)
            .limit(1)
        )

        try:
            return self._session.scalars(stmt).first()
        except SQLAlchemyError as exc:
            logger.warning(
                "funding_rounds lookup failed startup_id=%r index=%d: %s",
                partition_key, index, exc,
            )
            raise SourceUnavailableError(
                f"funding_rounds could not be queried for startup_id={partition_key!r}"
            ) from exc


def _column(name: str):
    try:
        return _SORTABLE_COLUMNS[name]
    except KeyError:
        raise InvalidArgumentError(
            f"cannot order funding rounds by {name!r}; "
            f"expected one of {sorted(_SORTABLE_COLUMNS)}"
        ) from None
