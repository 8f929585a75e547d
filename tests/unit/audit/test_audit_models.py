"""Audit model tests: storage fields copy, structured dict, pagination maths."""

from datetime import datetime, timezone

from app.audit.models import AuditLogPage, AuditRecord


def test_with_storage_fields_returns_new_record():
    record = AuditRecord(actor_id=1, action="election.create", description="Election #1 created.", source_address="10.0.0.1")
    created_at = datetime(2026, 2, 24, 6, 32, tzinfo=timezone.utc)

    stored = record.with_storage_fields(12, created_at)

    assert stored.id == 12
    assert stored.created_at == created_at
    assert stored.action == record.action
    assert record.id is None
    assert record.created_at is None


def test_to_dict():
    created_at = datetime(2026, 2, 24, 6, 32, tzinfo=timezone.utc)
    record = AuditRecord(
        actor_id=None,
        action="login_failed",
        description="bad password",
        source_address="203.0.113.7",
        id=3,
        created_at=created_at,
    )
    d = record.to_dict()
    assert d["actor_id"] is None
    assert d["source_address"] == "203.0.113.7"
    assert d["created_at"] == created_at.isoformat()
    assert AuditRecord(actor_id=None, action="a", description="", source_address=None).to_dict()["created_at"] is None


def test_last_page():
    assert AuditLogPage(items=[], total=0, page=1, per_page=50).last_page == 1
    assert AuditLogPage(items=[], total=50, page=1, per_page=50).last_page == 1
    assert AuditLogPage(items=[], total=51, page=1, per_page=50).last_page == 2
