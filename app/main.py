# app/main.py

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.middleware import (
    CorrelationIdMiddleware,
    HttpsEnforcementMiddleware,
    PrincipalContextMiddleware,
    RequestAuditMiddleware,
)
from app.api.routers import audit_logs, health
from app.audit.exceptions import AuditError
from app.config.logging import configure_logging
from app.config.settings import get_settings
from app.infrastructure.database.session import init_models
from app.security.exceptions import AuthenticationError, AuthorizationError

logger = logging.getLogger(__name__)

settings = get_settings()
configure_logging(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_models()
    yield


app = FastAPI(
    title=settings.app_name,
    version=settings.version,
    debug=settings.debug,
    lifespan=lifespan,
)

# Middleware order: last added runs first (outermost).
# Request flow: CORS -> CorrelationId -> HttpsEnforcement -> PrincipalContext -> RequestAudit.
app.add_middleware(RequestAuditMiddleware)
app.add_middleware(PrincipalContextMiddleware)
app.add_middleware(
    HttpsEnforcementMiddleware,
    enforce=settings.https_required,
    trust_proxies=settings.trust_proxies,
)
app.add_middleware(CorrelationIdMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_origin_regex=settings.cors_allowed_origin_regex or None,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(AuthenticationError)
async def authentication_error_handler(request, exc: AuthenticationError):
    return JSONResponse(status_code=401, content={"detail": exc.message})


@app.exception_handler(AuthorizationError)
async def authorization_error_handler(request, exc: AuthorizationError):
    return JSONResponse(status_code=403, content={"detail": exc.message})


@app.exception_handler(AuditError)
async def audit_error_handler(request, exc: AuditError):
    logger.error("audit_error", extra={"error": exc.message})
    return JSONResponse(status_code=500, content={"detail": "Audit storage unavailable"})


@app.exception_handler(Exception)
async def unexpected_error_handler(request, exc: Exception):
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error"},
    )


# Routers: /health, /api/audit-logs
app.include_router(health.router)
app.include_router(audit_logs.router, prefix="/api/audit-logs", tags=["audit"])
