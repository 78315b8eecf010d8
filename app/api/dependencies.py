"""
app/api/dependencies.py

Shared FastAPI dependencies for request validation.
"""

from __future__ import annotations

from fastapi import HTTPException, Query, status

from app.config import get_funding_settings


def get_top_n(n: int | None = Query(default=None, description="Number of rounds to aggregate")) -> int:
    """
    Resolve the ``n`` query parameter for top-N endpoints.

    Missing ``n`` falls back to ``FUNDING_TOP_N_DEFAULT``. Values above
    ``FUNDING_TOP_N_MAX`` are rejected; negative values are passed through
    so the aggregator reports them.
    """

    settings = get_funding_settings()
    if n is None:
        return settings.top_n_default
    if n > settings.top_n_max:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"n must not exceed {settings.top_n_max}.",
        )
    return n
