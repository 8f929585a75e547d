"""Audit-layer exceptions. Typed, no HTTP."""


class AuditError(Exception):
    """Base for all audit-layer errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class AuditStorageError(AuditError):
    """Raised by storage when an audit record cannot be written or read (validation, connectivity, constraint)."""
