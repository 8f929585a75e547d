"""Best-effort audit recorder. Audit persistence never blocks the audited action. No FastAPI."""

import logging
from typing import Optional

from app.audit.context import RequestContext
from app.audit.models import AuditRecord
from app.audit.repository import AuditRepository


class AuditRecorder:
    """
    Writes one audit record per call via repository. Single attempt, no retry, no queueing.
    Every storage failure is absorbed: one ERROR diagnostic is logged and the
    assembled, unpersisted record is returned in place of the stored one.
    """

    def __init__(
        self,
        repository: AuditRepository,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._repository = repository
        self._logger = logger or logging.getLogger(__name__)

    def _resolve_actor(
        self,
        request_context: RequestContext,
        actor_id: Optional[int],
    ) -> Optional[int]:
        if actor_id is not None:
            return actor_id
        try:
            return request_context.authenticated_actor_id()
        except Exception as e:
            self._logger.debug("audit_actor_unresolved", extra={"error": str(e)})
            return None

    def _resolve_source_address(self, request_context: RequestContext) -> Optional[str]:
        try:
            return request_context.source_address
        except Exception as e:
            self._logger.debug("audit_source_unresolved", extra={"error": str(e)})
            return None

    async def record(
        self,
        request_context: RequestContext,
        action: str,
        description: str,
        actor_id: Optional[int] = None,
    ) -> AuditRecord:
        """Record action. Always returns a record; never raises on context or storage failure."""
        # Step 1: Resolve actor (explicit > authenticated principal > None) and source address
        resolved_actor = self._resolve_actor(request_context, actor_id)

        # Step 2: Assemble pre-persistence record
        record = AuditRecord(
            actor_id=resolved_actor,
            action=action,
            description=description,
            source_address=self._resolve_source_address(request_context),
        )

        # Step 3: Single persistence attempt
        try:
            persisted = await self._repository.create(record)
        except Exception as e:
            # Any failure: log once, return the unpersisted record
            self._logger.error(
                "audit_write_failed: %s",
                e,
                extra={
                    "action": action,
                    "audit_actor_id": resolved_actor,
                    "error": str(e),
                    "error_type": type(e).__name__,
                },
            )
            return record

        # Step 4: Persisted record carries storage-assigned fields
        self._logger.info(
            "audit_recorded",
            extra={"audit": persisted.to_dict()},
        )
        return persisted
