"""FastAPI dependency injection: audit repository, recorder, request context, principal."""

from typing import Annotated

from fastapi import Depends, Request

from app.audit.context import HttpRequestContext
from app.audit.recorder import AuditRecorder
from app.audit.repository import AuditRepository
from app.config.settings import get_settings
from app.infrastructure.database.audit_repository_db import DbAuditRepository
from app.infrastructure.database.session import get_session_factory
from app.security.principal import Principal, resolve_principal

_audit_repository: DbAuditRepository | None = None


def get_audit_repository() -> AuditRepository:
    """Return singleton DB audit repository."""
    global _audit_repository
    if _audit_repository is None:
        _audit_repository = DbAuditRepository(get_session_factory())
    return _audit_repository


def get_audit_recorder(
    repository: Annotated[AuditRepository, Depends(get_audit_repository)],
) -> AuditRecorder:
    """Recorder is stateless; one per request over the shared repository."""
    return AuditRecorder(repository=repository)


def get_request_context(request: Request) -> HttpRequestContext:
    """Source address and authenticated actor of the current request."""
    return HttpRequestContext(request, trust_proxies=get_settings().trust_proxies)


def get_principal(request: Request) -> Principal:
    """Authenticated principal from request.state (set by middleware). Raises AuthenticationError."""
    return resolve_principal(request.state)


def get_correlation_id(request: Request) -> str:
    """Extract correlation_id from request.state (set by middleware)."""
    return getattr(request.state, "correlation_id", "") or ""
