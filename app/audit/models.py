"""Immutable audit record model. Domain-level immutability."""

from dataclasses import dataclass, replace
from datetime import datetime
from math import ceil
from typing import Any, Dict, Optional, Sequence


@dataclass(frozen=True)
class AuditRecord:
    """
    Immutable audit record: who (actor_id), what (action, description), where from (source_address).
    id and created_at are assigned by storage; both are None on a record that was never persisted.
    """

    actor_id: Optional[int]
    action: str
    description: str
    source_address: Optional[str]
    id: Optional[int] = None
    created_at: Optional[datetime] = None

    def with_storage_fields(self, id: int, created_at: Optional[datetime]) -> "AuditRecord":
        """Copy carrying storage-assigned fields. The original is left untouched."""
        return replace(self, id=id, created_at=created_at)

    def to_dict(self) -> Dict[str, Any]:
        """Structured representation for JSON logging."""
        return {
            "id": self.id,
            "actor_id": self.actor_id,
            "action": self.action,
            "description": self.description,
            "source_address": self.source_address,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }


@dataclass(frozen=True)
class AuditLogPage:
    """One page of audit records, newest first."""

    items: Sequence[AuditRecord]
    total: int
    page: int
    per_page: int

    @property
    def last_page(self) -> int:
        return max(1, ceil(self.total / self.per_page))
