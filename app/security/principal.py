"""Authenticated principal asserted by the upstream gateway. No FastAPI."""

from dataclasses import dataclass
from typing import Any, Optional

from app.audit.context import coerce_actor_id
from app.security.exceptions import AuthenticationError
from app.security.rbac import Role


@dataclass(frozen=True)
class Principal:
    user_id: int
    role: Optional[Role]


def resolve_principal(state: Any) -> Principal:
    """Principal from request state (set by PrincipalContextMiddleware). Raises AuthenticationError if absent."""
    user_id = coerce_actor_id(getattr(state, "user_id", None))
    if user_id is None:
        raise AuthenticationError("Unauthenticated.")
    return Principal(user_id=user_id, role=Role.parse(getattr(state, "user_role", None)))
