"""Access-denied audit recording."""

import logging
from collections.abc import Iterable

from projectguard.application.dto.audit_entry import ACCESS_DENIED, AuditEntry
from projectguard.application.ports import AuditSink
from projectguard.domain.entities import Viewer

logger = logging.getLogger(__name__)


class AccessDeniedRecorder:
    """Writes one audit entry per denial. Sink failures are logged, never raised."""

    def __init__(self, audit_sink: AuditSink) -> None:
        self._sink = audit_sink

    async def record(
        self, viewer: Viewer, resource: str, required_roles: Iterable[str]
    ) -> None:
        """Record a denied access attempt by ``viewer`` on ``resource``."""
        entry = AuditEntry(
            user_id=viewer.id,
            user_role=str(viewer.role),
            action=ACCESS_DENIED,
            resource=resource,
            changes={"requiredRoles": [str(r) for r in required_roles]},
            ip_address=viewer.ip_address,
            user_agent=viewer.user_agent,
        )
        logger.info(
            "Access denied: user=%s role=%s resource=%s",
            viewer.id,
            viewer.role,
            resource,
        )
        try:
            await self._sink.create_audit_log(entry)
        except Exception:
            logger.exception("Failed to record access-denied audit entry for %s", resource)
