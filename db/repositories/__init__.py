"""
Repository layer exports.
"""

from db.repositories.errors import (
    FundingPersistenceError,
    FundingRepositoryError,
    StartupValidationError,
)
from db.repositories.funding_round_repository import FundingRoundRepository
from db.repositories.funding_round_source import FundingRoundSource
from db.repositories.startup_repository import StartupRepository
from db.repositories.types import AddStartupResult, FundingDetail

__all__ = [
    "FundingRoundRepository",
    "FundingRoundSource",
    "StartupRepository",
    "AddStartupResult",
    "FundingDetail",
    "FundingRepositoryError",
    "FundingPersistenceError",
    "StartupValidationError",
]
