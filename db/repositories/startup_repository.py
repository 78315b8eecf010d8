"""
db/repositories/startup_repository.py

Persistence for startups and their audit trail.

Every insert writes a matching ``startup_audit`` row in the same session,
so the audit entry commits or rolls back together with the startup.
The caller controls commit/rollback; this repository only flushes.
"""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from db.models.startup import Startup, StartupStatus
from db.models.startup_audit import StartupAudit, StartupAuditAction
from db.repositories.errors import StartupValidationError

_DEFAULT_AUDIT_LIMIT = 50


class StartupRepository:
    def __init__(self, session: Session) -> None:
        self._session = session

    def add_startup(
        self,
        *,
        name: str,
        industry_id: int,
        status: str = StartupStatus.ACTIVE,
    ) -> Startup:
        """
        Insert a startup and its audit row, then flush to obtain the id.

        Raises
        ------
        StartupValidationError
            ``status`` is not one of :attr:`StartupStatus.ALL`.
        """
        if status not in StartupStatus.ALL:
            raise StartupValidationError(
                f"Unknown startup status {status!r}; expected one of {sorted(StartupStatus.ALL)}."
            )

        startup = Startup(name=name, industry_id=industry_id, current_status=status)
        self._session.add(startup)
        self._session.add(
            StartupAudit(startup_name=name, action_type=StartupAuditAction.INSERT)
        )
        self._session.flush()
        return startup

    def get(self, startup_id: int) -> Startup | None:
        return self._session.get(Startup, startup_id)

    def list_audit_entries(self, *, limit: int = _DEFAULT_AUDIT_LIMIT) -> list[StartupAudit]:
        """Most recent audit rows first."""
        stmt = (
            select(StartupAudit)
            .order_by(StartupAudit.action_time.desc(), StartupAudit.audit_id.desc())
            .limit(max(1, limit))
        )
        return list(self._session.scalars(stmt).all())
