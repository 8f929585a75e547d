"""Shared unit-test fixtures: in-memory audit repository."""

from datetime import datetime, timezone
from typing import Optional

import pytest

from app.audit.models import AuditLogPage, AuditRecord


class FakeAuditRepository:
    """In-memory append-only audit store. Set fail_with to make create() raise."""

    def __init__(self):
        self.records: list[AuditRecord] = []
        self.create_calls: list[AuditRecord] = []
        self.fail_with: Optional[Exception] = None

    async def create(self, record: AuditRecord) -> AuditRecord:
        self.create_calls.append(record)
        if self.fail_with is not None:
            raise self.fail_with
        stored = record.with_storage_fields(len(self.records) + 1, datetime.now(timezone.utc))
        self.records.append(stored)
        return stored

    async def list_page(
        self,
        *,
        action: Optional[str] = None,
        actor_id: Optional[int] = None,
        page: int = 1,
        per_page: int = 50,
    ) -> AuditLogPage:
        matching = [
            r
            for r in reversed(self.records)
            if (not action or action in r.action) and (actor_id is None or r.actor_id == actor_id)
        ]
        start = (page - 1) * per_page
        return AuditLogPage(
            items=matching[start : start + per_page],
            total=len(matching),
            page=page,
            per_page=per_page,
        )


@pytest.fixture
def audit_repository():
    return FakeAuditRepository()
