"""
app/api/routers/funding_router.py

Funding analytics endpoints.

Errors
------
- Missing name/industry or unknown status on create → HTTP 400
- Invalid ``n`` for top-N                            → HTTP 400
- Funding store unreachable                          → HTTP 503
- Write failure                                      → HTTP 500
"""

from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel
from sqlalchemy.orm import Session

from app.api.dependencies import get_top_n
from app.services.funding_service import FundingService
from db.repositories.errors import FundingPersistenceError, StartupValidationError
from db.session import get_db
from topn.errors import InvalidArgumentError, SourceUnavailableError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/startups", tags=["funding"])


# ---------------------------------------------------------------------------
# Request / Response schemas
# ---------------------------------------------------------------------------


class AddStartupRequest(BaseModel):
    name: str | None = None
    industry_id: int | None = None
    status: str = "active"


class AddStartupResponse(BaseModel):
    created: bool
    message: str
    startup_id: int | None = None


class FundingSummaryResponse(BaseModel):
    startup_id: int
    total_rounds: int
    total_funding: int | None = None
    average_raise: Decimal | None = None


class FundingDetailResponse(BaseModel):
    round_type: str
    raised_amount_usd: int | None = None
    announced_date: date


class TopRoundsResponse(BaseModel):
    startup_id: int
    n: int
    total: int
    count_consumed: int
    measures_present: int


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


@router.post("", response_model=AddStartupResponse, status_code=status.HTTP_201_CREATED)
def add_startup(body: AddStartupRequest, db: Session = Depends(get_db)) -> AddStartupResponse:
    service = FundingService(db)
    try:
        result = service.add_startup(body.name, body.industry_id, body.status)
    except StartupValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except FundingPersistenceError as exc:
        logger.warning("add_startup failed name=%r: %s", body.name, exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Startup could not be saved.",
        ) from exc

    if not result.created:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=result.message)

    db.commit()
    return AddStartupResponse(
        created=result.created,
        message=result.message,
        startup_id=result.startup_id,
    )


@router.get("/{startup_id}/funding", response_model=FundingSummaryResponse)
def get_funding_summary(startup_id: int, db: Session = Depends(get_db)) -> FundingSummaryResponse:
    service = FundingService(db)
    return FundingSummaryResponse(
        startup_id=startup_id,
        total_rounds=service.get_total_rounds(startup_id),
        total_funding=service.calculate_total_funding(startup_id),
        average_raise=service.get_avg_raise(startup_id),
    )


@router.get("/{startup_id}/rounds", response_model=list[FundingDetailResponse])
def list_rounds(startup_id: int, db: Session = Depends(get_db)) -> list[FundingDetailResponse]:
    details = FundingService(db).get_funding_details(startup_id)
    return [
        FundingDetailResponse(
            round_type=d.round_type,
            raised_amount_usd=d.raised_amount_usd,
            announced_date=d.announced_date,
        )
        for d in details
    ]


@router.get("/{startup_id}/rounds/top", response_model=TopRoundsResponse)
def sum_first_n_rounds(
    startup_id: int,
    n: int = Depends(get_top_n),
    db: Session = Depends(get_db),
) -> TopRoundsResponse:
    """
    Total raised over the first ``n`` rounds of a startup by announced date.
    """
    try:
        result = FundingService(db).sum_first_n_rounds(startup_id, n)
    except InvalidArgumentError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except SourceUnavailableError as exc:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Funding store unavailable.",
        ) from exc

    return TopRoundsResponse(
        startup_id=startup_id,
        n=n,
        total=int(result.total),
        count_consumed=result.count_consumed,
        measures_present=result.measures_present,
    )
