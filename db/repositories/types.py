"""
Typed DTOs returned by funding repositories and services.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class FundingDetail:
    """
    One row of a startup's funding history.
    """

    round_type: str
    raised_amount_usd: int | None
    announced_date: date


@dataclass(frozen=True)
class AddStartupResult:
    """
    Outcome of an add-startup request.

    ``startup_id`` is ``None`` when the request was rejected; ``message``
    always carries a human-readable explanation.
    """

    created: bool
    message: str
    startup_id: int | None = None
