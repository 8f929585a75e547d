"""Audit repository protocol. Audit layer depends on this; infrastructure implements it."""

from typing import Optional, Protocol

from app.audit.models import AuditLogPage, AuditRecord


class AuditRepository(Protocol):
    """Protocol for the append-only audit store. No update or delete."""

    async def create(self, record: AuditRecord) -> AuditRecord:
        """Persist record; return it with id and created_at populated. Raises on any failure."""
        ...

    async def list_page(
        self,
        *,
        action: Optional[str] = None,
        actor_id: Optional[int] = None,
        page: int = 1,
        per_page: int = 50,
    ) -> AuditLogPage:
        """Newest first. action is a substring filter, actor_id an exact one."""
        ...
