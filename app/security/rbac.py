"""Role-based access control. No FastAPI."""

from enum import Enum
from typing import Optional

from app.security.exceptions import AuthorizationError


class Role(Enum):
    SUPER_ADMIN = "super_admin"
    ELECTION_ADMIN = "election_admin"
    VOTER = "voter"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["Role"]:
        """Role for value, or None when missing or unknown."""
        if not value:
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


RECORD_AUDIT_LOG = "record_audit_log"
VIEW_AUDIT_LOGS = "view_audit_logs"

# Permission matrix:
# Role            Record  View
# SUPER_ADMIN     ✓       ✓
# ELECTION_ADMIN  ✓       ✗
# VOTER           ✗       ✗

_ACTION_PERMISSIONS: dict[tuple[Role, str], bool] = {
    (Role.SUPER_ADMIN, RECORD_AUDIT_LOG): True,
    (Role.SUPER_ADMIN, VIEW_AUDIT_LOGS): True,
    (Role.ELECTION_ADMIN, RECORD_AUDIT_LOG): True,
    (Role.ELECTION_ADMIN, VIEW_AUDIT_LOGS): False,
    (Role.VOTER, RECORD_AUDIT_LOG): False,
    (Role.VOTER, VIEW_AUDIT_LOGS): False,
}


class RBACService:
    """Check permission for role and action. Raise AuthorizationError if invalid."""

    def check_permission(self, role: Optional[Role], action: str, message: Optional[str] = None) -> None:
        """Raises AuthorizationError if role does not have permission for action. No role has none."""
        if role is None or not _ACTION_PERMISSIONS.get((role, action), False):
            raise AuthorizationError(
                message
                or f"Role {role.value if role else 'unknown'} does not have permission for action '{action}'"
            )
