"""Security: roles, RBAC, principal resolution. No FastAPI."""

from app.security.principal import Principal, resolve_principal
from app.security.rbac import RBACService, Role

__all__ = [
    "Principal",
    "RBACService",
    "Role",
    "resolve_principal",
]
