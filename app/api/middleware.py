"""API middleware: correlation ID, principal context, request audit log, HTTPS enforcement."""

import json
import logging
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.types import ASGIApp

from app.audit.context import coerce_actor_id
from app.core.context import actor_id_ctx, correlation_id_ctx

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"
USER_ID_HEADER = "X-User-ID"
USER_ROLE_HEADER = "X-User-Role"
FORWARDED_PROTO_HEADER = "X-Forwarded-Proto"


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Generate or preserve correlation ID; attach to request.state, response header, and logging context."""

    async def dispatch(self, request: Request, call_next) -> Response:
        correlation_id = request.headers.get(CORRELATION_HEADER) or str(uuid.uuid4())
        request.state.correlation_id = correlation_id
        correlation_id_ctx.set(correlation_id)

        response = await call_next(request)
        response.headers[CORRELATION_HEADER] = correlation_id
        return response


class PrincipalContextMiddleware(BaseHTTPMiddleware):
    """
    Read the identity asserted by the upstream gateway (X-User-ID, X-User-Role).
    Optional: anonymous requests pass through with user_id None. A malformed id is anonymous.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        user_id = coerce_actor_id(request.headers.get(USER_ID_HEADER))
        role = request.headers.get(USER_ROLE_HEADER) if user_id is not None else None
        request.state.user_id = user_id
        request.state.user_role = role.strip() if role else None
        actor_id_ctx.set(user_id)
        return await call_next(request)


class RequestAuditMiddleware(BaseHTTPMiddleware):
    """After response: log structured request audit line (correlation_id, actor, path, method, status_code)."""

    async def dispatch(self, request: Request, call_next) -> Response:
        response = await call_next(request)
        audit_event = {
            "event": "request_audit",
            "correlation_id": getattr(request.state, "correlation_id", None),
            "user_id": getattr(request.state, "user_id", None),
            "path": request.url.path,
            "method": request.method,
            "status_code": response.status_code,
        }
        logger.info(json.dumps(audit_event))
        return response


class HttpsEnforcementMiddleware(BaseHTTPMiddleware):
    """Reject plain-HTTP requests with 403 when enforcement is on. Honours X-Forwarded-Proto behind trusted proxies."""

    def __init__(self, app: ASGIApp, enforce: bool = False, trust_proxies: bool = True) -> None:
        super().__init__(app)
        self._enforce = enforce
        self._trust_proxies = trust_proxies

    def _is_secure(self, request: Request) -> bool:
        if self._trust_proxies:
            forwarded = request.headers.get(FORWARDED_PROTO_HEADER)
            if forwarded:
                return forwarded.split(",")[0].strip().lower() == "https"
        return request.url.scheme == "https"

    async def dispatch(self, request: Request, call_next) -> Response:
        if self._enforce and not self._is_secure(request):
            return JSONResponse(
                status_code=403,
                content={"detail": "HTTPS is required for this endpoint."},
            )
        return await call_next(request)
