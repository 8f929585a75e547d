"""DB-backed audit repository. Append-only writes to the audit_logs table."""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.audit.exceptions import AuditStorageError
from app.audit.models import AuditLogPage, AuditRecord
from app.infrastructure.database.models import AuditLog


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    # SQLite hands back naive CURRENT_TIMESTAMP values, which are UTC.
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _to_record(orm: AuditLog) -> AuditRecord:
    return AuditRecord(
        id=orm.id,
        actor_id=orm.user_id,
        action=orm.action,
        description=orm.description,
        source_address=orm.ip_address,
        created_at=_as_utc(orm.created_at),
    )


class DbAuditRepository:
    """
    Implements AuditRepository protocol. Each write opens its own session so a failed
    audit insert never touches the caller's transaction.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def create(self, record: AuditRecord) -> AuditRecord:
        """Insert, commit and return the record with id and created_at from the database."""
        orm = AuditLog(
            user_id=record.actor_id,
            action=record.action,
            description=record.description,
            ip_address=record.source_address,
        )
        async with self._session_factory() as session:
            try:
                session.add(orm)
                await session.commit()
                await session.refresh(orm)
            except SQLAlchemyError as e:
                await session.rollback()
                raise AuditStorageError(f"Audit write failed: {e}") from e
        return record.with_storage_fields(orm.id, _as_utc(orm.created_at))

    async def list_page(
        self,
        *,
        action: Optional[str] = None,
        actor_id: Optional[int] = None,
        page: int = 1,
        per_page: int = 50,
    ) -> AuditLogPage:
        """Newest first; id breaks ties between rows written in the same second."""
        filters = []
        if action:
            filters.append(AuditLog.action.contains(action, autoescape=True))
        if actor_id is not None:
            filters.append(AuditLog.user_id == actor_id)

        count_stmt = select(func.count()).select_from(AuditLog)
        stmt = select(AuditLog)
        for criterion in filters:
            count_stmt = count_stmt.where(criterion)
            stmt = stmt.where(criterion)
        stmt = (
            stmt.order_by(AuditLog.created_at.desc(), AuditLog.id.desc())
            .offset((page - 1) * per_page)
            .limit(per_page)
        )
        async with self._session_factory() as session:
            try:
                total = (await session.execute(count_stmt)).scalar_one()
                rows = (await session.execute(stmt)).scalars().all()
            except SQLAlchemyError as e:
                raise AuditStorageError(f"Audit read failed: {e}") from e
        return AuditLogPage(
            items=[_to_record(r) for r in rows],
            total=total,
            page=page,
            per_page=per_page,
        )
