"""API schemas for audit logs. Pydantic models at the HTTP boundary."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from app.audit.models import AuditLogPage, AuditRecord


class AuditLogCreateRequest(BaseModel):
    """Body for POST /api/audit-logs. actor_id overrides the authenticated principal."""

    action: str = Field(..., min_length=1, max_length=255)
    description: str
    actor_id: Optional[int] = None


class AuditLogResponse(BaseModel):
    """Audit log entry as returned by the API. id/created_at are null when not persisted."""

    id: Optional[int] = None
    user_id: Optional[int] = None
    action: str
    description: str
    ip_address: Optional[str] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_record(cls, record: AuditRecord) -> "AuditLogResponse":
        return cls(
            id=record.id,
            user_id=record.actor_id,
            action=record.action,
            description=record.description,
            ip_address=record.source_address,
            created_at=record.created_at,
        )


class PaginationMeta(BaseModel):
    current_page: int
    last_page: int
    per_page: int
    total: int


class AuditLogListResponse(BaseModel):
    data: List[AuditLogResponse]
    meta: PaginationMeta

    @classmethod
    def from_page(cls, page: AuditLogPage) -> "AuditLogListResponse":
        return cls(
            data=[AuditLogResponse.from_record(r) for r in page.items],
            meta=PaginationMeta(
                current_page=page.page,
                last_page=page.last_page,
                per_page=page.per_page,
                total=page.total,
            ),
        )
