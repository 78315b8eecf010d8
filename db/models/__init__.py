"""
Model package exports.

Import all SQLAlchemy models here so metadata registration and Alembic
autogeneration work without extra imports.
"""

from db.models.funding_round import FundingRound
from db.models.industry import Industry
from db.models.startup import Startup, StartupStatus
from db.models.startup_audit import StartupAudit, StartupAuditAction

__all__ = [
    "Industry",
    "Startup",
    "StartupStatus",
    "FundingRound",
    "StartupAudit",
    "StartupAuditAction",
]
