"""
Repository-layer exceptions for the funding store.
"""

from __future__ import annotations


class FundingRepositoryError(Exception):
    """Base exception for funding repository failures."""


class StartupValidationError(FundingRepositoryError, ValueError):
    """Raised when a startup payload is rejected before reaching the database."""


class FundingPersistenceError(FundingRepositoryError, RuntimeError):
    """Raised when a funding write fails. The session has been rolled back."""
