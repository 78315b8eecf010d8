"""
Shared fixtures: an in-memory SQLite funding store built from ORM metadata.
"""

from __future__ import annotations

from collections.abc import Iterator
from datetime import date

import pytest
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

import db.models  # noqa: F401 - registers all ORM models on Base.metadata
from db.base import Base
from db.models import FundingRound, Industry, Startup


@pytest.fixture()
def engine() -> Iterator[Engine]:
    # StaticPool keeps one connection so every session sees the same in-memory DB.
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(eng)
    yield eng
    eng.dispose()


@pytest.fixture()
def session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest.fixture()
def session(session_factory: sessionmaker) -> Iterator[Session]:
    with session_factory() as s:
        yield s


@pytest.fixture()
def seeded(session: Session) -> dict[str, int]:
    """
    One industry, two startups.

    Startup "Zeta" has rounds 100 → undisclosed → 50 in announced-date order,
    inserted out of order. Startup "Quiet" has no rounds.
    """
    industry = Industry(name="Fintech")
    session.add(industry)
    session.flush()

    zeta = Startup(name="Zeta", industry_id=industry.id, current_status="active")
    quiet = Startup(name="Quiet", industry_id=industry.id, current_status="closed")
    session.add_all([zeta, quiet])
    session.flush()

    session.add_all(
        [
            FundingRound(startup_id=zeta.id, round_type="series_a",
                         raised_amount_usd=50, announced_date=date(2021, 1, 1)),
            FundingRound(startup_id=zeta.id, round_type="seed",
                         raised_amount_usd=100, announced_date=date(2020, 1, 1)),
            FundingRound(startup_id=zeta.id, round_type="angel",
                         raised_amount_usd=None, announced_date=date(2020, 6, 1)),
        ]
    )
    session.commit()
    return {"industry_id": industry.id, "zeta": zeta.id, "quiet": quiet.id}


class _BrokenSession:
    """Session stand-in whose every query fails as if the server were down."""

    def _fail(self, *args, **kwargs):
        raise OperationalError("SELECT 1", {}, Exception("connection refused"))

    scalar = _fail
    scalars = _fail
    execute = _fail

    def __init__(self) -> None:
        self.rollbacks = 0

    def rollback(self) -> None:
        self.rollbacks += 1


@pytest.fixture()
def broken_session() -> _BrokenSession:
    return _BrokenSession()
