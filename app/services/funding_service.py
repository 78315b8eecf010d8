"""
app/services/funding_service.py

Funding analytics over the startups / funding_rounds schema.

Each method is an explicit Python call replacing one routine that would
otherwise live inside the database as a stored procedure or function.
Inputs are passed as arguments; no session variables or other ambient
state are involved.

    add_startup           – validated insert + audit row
    get_total_rounds      – COUNT of rounds
    calculate_total_funding – SUM of raised amounts
    get_avg_raise         – AVG of raised amounts, two decimals
    get_funding_details   – per-round history
    sum_first_n_rounds    – ordered top-N aggregation (see :mod:`topn`)
    debug_round_count     – round count rendered as a message, errors reported inline

Transaction contract
--------------------
The service never commits. ``add_startup`` flushes; on a database error the
session is rolled back and :class:`FundingPersistenceError` is raised.
"""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Final

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from db.models.startup import StartupStatus
from db.repositories.errors import FundingPersistenceError
from db.repositories.funding_round_repository import FundingRoundRepository
from db.repositories.funding_round_source import FundingRoundSource
from db.repositories.startup_repository import StartupRepository
from db.repositories.types import AddStartupResult, FundingDetail
from topn import AggregationResult, OrderBy, OrderedTopNAggregator, field_measure

logger = logging.getLogger(__name__)

MISSING_STARTUP_FIELDS_MESSAGE: Final[str] = "Error: Missing startup name or industry"
ROUND_COUNT_ERROR_MESSAGE: Final[str] = "Error occurred while calculating rounds"

ROUNDS_BY_ANNOUNCED_DATE: Final[OrderBy] = OrderBy(field="announced_date")

_CENTS = Decimal("0.01")


class FundingService:
    """
    Read-mostly funding analytics bound to one SQLAlchemy session.

    Parameters
    ----------
    session:
        Active SQLAlchemy session. The caller controls its lifecycle.
    aggregator:
        Override the top-N aggregator, mainly for tests.
    """

    def __init__(
        self,
        session: Session,
        *,
        aggregator: OrderedTopNAggregator | None = None,
    ) -> None:
        self._session = session
        self._startups = StartupRepository(session)
        self._rounds = FundingRoundRepository(session)
        self._aggregator = aggregator or OrderedTopNAggregator()

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    def add_startup(
        self,
        name: str | None,
        industry_id: int | None,
        status: str = StartupStatus.ACTIVE,
    ) -> AddStartupResult:
        """
        Insert a startup unless its name or industry is missing.

        A missing field is reported through the result message rather than
        an exception. An unknown ``status`` raises
        :class:`~db.repositories.errors.StartupValidationError`.
        """
        if not name or industry_id is None:
            logger.info("add_startup rejected: name=%r industry_id=%r", name, industry_id)
            return AddStartupResult(created=False, message=MISSING_STARTUP_FIELDS_MESSAGE)

        try:
            startup = self._startups.add_startup(name=name, industry_id=industry_id, status=status)
        except SQLAlchemyError as exc:
            self._session.rollback()
            raise FundingPersistenceError(f"Could not add startup {name!r}: {exc}") from exc

        logger.info("add_startup id=%s name=%r industry_id=%d", startup.id, name, industry_id)
        return AddStartupResult(
            created=True,
            message=f'Startup "{name}" added successfully!',
            startup_id=startup.id,
        )

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def get_total_rounds(self, startup_id: int) -> int:
        total = self._rounds.count_rounds(startup_id)
        logger.debug("get_total_rounds startup_id=%d → %d", startup_id, total)
        return total

    def calculate_total_funding(self, startup_id: int) -> int | None:
        """
        Sum of ``raised_amount_usd`` across every round of *startup_id*.

        ``None`` when the startup has no disclosed amounts, mirroring SQL SUM.
        """
        total = self._rounds.sum_raised(startup_id)
        logger.debug("calculate_total_funding startup_id=%d → %r", startup_id, total)
        return total

    def get_avg_raise(self, startup_id: int) -> Decimal | None:
        """Mean raise rounded half-up to two decimals, or ``None`` without data."""
        average = self._rounds.average_raised(startup_id)
        if average is None:
            return None
        return average.quantize(_CENTS, rounding=ROUND_HALF_UP)

    def get_funding_details(self, startup_id: int) -> list[FundingDetail]:
        return self._rounds.list_details(startup_id)

    def sum_first_n_rounds(self, startup_id: int, n: int) -> AggregationResult:
        """
        Total raised over the first *n* rounds by ascending ``announced_date``.

        Rounds sharing a date are ordered by id. Undisclosed amounts and
        positions past the last round contribute 0.

        Raises
        ------
        InvalidArgumentError
            ``n`` is negative.
        SourceUnavailableError
            ``funding_rounds`` could not be queried.
        """
        return self._aggregator.aggregate(
            startup_id,
            n,
            ROUNDS_BY_ANNOUNCED_DATE,
            field_measure("raised_amount_usd"),
            FundingRoundSource(self._session),
        )

    def debug_round_count(self, startup_id: int) -> str:
        """
        Render the round count as a diagnostic message.

        Database errors are logged and reported in the returned message
        instead of being raised. The session is rolled back first so it
        stays usable for later calls.
        """
        try:
            total = self._rounds.count_rounds(startup_id)
        except SQLAlchemyError as exc:
            self._session.rollback()
            logger.warning("debug_round_count failed startup_id=%d: %s", startup_id, exc)
            return ROUND_COUNT_ERROR_MESSAGE
        return f"Total funding rounds = {total}"
