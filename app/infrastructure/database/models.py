# app/infrastructure/database/models.py

from sqlalchemy import Column, DateTime, Integer, String, Text
from sqlalchemy.sql import func

from app.infrastructure.database.session import Base


class AuditLog(Base):
    """Append-only audit log row. Rows are inserted, never updated or deleted."""

    __tablename__ = "audit_logs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, nullable=True, index=True)
    action = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=False)
    ip_address = Column(String(45), nullable=True)

    created_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
        index=True,
    )
