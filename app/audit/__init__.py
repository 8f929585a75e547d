"""Audit: immutable records, best-effort recorder, storage protocol. No FastAPI."""

from app.audit.context import HttpRequestContext, RequestContext, StaticRequestContext
from app.audit.models import AuditLogPage, AuditRecord
from app.audit.recorder import AuditRecorder
from app.audit.repository import AuditRepository

__all__ = [
    "AuditLogPage",
    "AuditRecord",
    "AuditRecorder",
    "AuditRepository",
    "HttpRequestContext",
    "RequestContext",
    "StaticRequestContext",
]
