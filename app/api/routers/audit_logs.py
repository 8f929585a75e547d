"""Audit logs API router: POST /api/audit-logs (best-effort), GET /api/audit-logs (super admins)."""

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query

from app.api.dependencies import (
    get_audit_recorder,
    get_audit_repository,
    get_principal,
    get_request_context,
)
from app.audit.context import HttpRequestContext, coerce_actor_id
from app.audit.recorder import AuditRecorder
from app.audit.repository import AuditRepository
from app.audit.schemas import (
    AuditLogCreateRequest,
    AuditLogListResponse,
    AuditLogResponse,
)
from app.config.settings import get_settings
from app.security.principal import Principal
from app.security.rbac import RECORD_AUDIT_LOG, VIEW_AUDIT_LOGS, RBACService

router = APIRouter()

_rbac = RBACService()


@router.post("", response_model=AuditLogResponse, status_code=201)
async def create_audit_log(
    body: AuditLogCreateRequest,
    principal: Annotated[Principal, Depends(get_principal)],
    request_context: Annotated[HttpRequestContext, Depends(get_request_context)],
    recorder: Annotated[AuditRecorder, Depends(get_audit_recorder)],
):
    """Record an audit entry. Storage failure still returns 201 with id and created_at null."""
    _rbac.check_permission(principal.role, RECORD_AUDIT_LOG)
    record = await recorder.record(
        request_context,
        action=body.action,
        description=body.description,
        actor_id=body.actor_id,
    )
    return AuditLogResponse.from_record(record)


@router.get("", response_model=AuditLogListResponse)
async def list_audit_logs(
    principal: Annotated[Principal, Depends(get_principal)],
    repository: Annotated[AuditRepository, Depends(get_audit_repository)],
    action: Optional[str] = None,
    user_id: Optional[str] = None,
    page: Annotated[int, Query(ge=1)] = 1,
    per_page: Annotated[Optional[int], Query(ge=1)] = None,
):
    """Paginated audit logs, newest first. action is a substring match; empty filters are ignored."""
    _rbac.check_permission(
        principal.role,
        VIEW_AUDIT_LOGS,
        message="Only super admins can view audit logs.",
    )
    settings = get_settings()
    per_page = min(per_page or settings.audit_logs_default_per_page, settings.audit_logs_max_per_page)
    result = await repository.list_page(
        action=action.strip() if action and action.strip() else None,
        actor_id=coerce_actor_id(user_id),
        page=page,
        per_page=per_page,
    )
    return AuditLogListResponse.from_page(result)
