"""Request context seen by the audit recorder: source address and authenticated actor. No FastAPI."""

from dataclasses import dataclass
from typing import Any, Optional, Protocol

FORWARDED_FOR_HEADER = "X-Forwarded-For"


class RequestContext(Protocol):
    """Capability the recorder needs from the current request."""

    @property
    def source_address(self) -> Optional[str]:
        ...

    def authenticated_actor_id(self) -> Optional[int]:
        """Resolved principal id, or None when nobody is authenticated."""
        ...


@dataclass(frozen=True)
class StaticRequestContext:
    """Fixed context for callers outside an HTTP request (jobs, scripts)."""

    source_address: Optional[str] = None
    actor_id: Optional[int] = None

    def authenticated_actor_id(self) -> Optional[int]:
        return self.actor_id


def coerce_actor_id(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


class HttpRequestContext:
    """
    Adapts a Starlette request. Actor comes from request.state.user_id (set by
    PrincipalContextMiddleware); address from the socket peer, or the left-most
    X-Forwarded-For entry when proxies are trusted.
    """

    def __init__(self, request: Any, trust_proxies: bool = True) -> None:
        self._request = request
        self._trust_proxies = trust_proxies

    @property
    def source_address(self) -> Optional[str]:
        if self._trust_proxies:
            forwarded = self._request.headers.get(FORWARDED_FOR_HEADER)
            if forwarded:
                first = forwarded.split(",")[0].strip()
                if first:
                    return first
        client = self._request.client
        return client.host if client else None

    def authenticated_actor_id(self) -> Optional[int]:
        return coerce_actor_id(getattr(self._request.state, "user_id", None))
