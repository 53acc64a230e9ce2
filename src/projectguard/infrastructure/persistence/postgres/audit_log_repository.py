"""PostgreSQL audit log repository."""

from psycopg import AsyncConnection
from psycopg.types.json import Jsonb

from projectguard.application.dto.audit_entry import AuditEntry


class PostgresAuditLogRepository:
    """Appends rows to audit_log."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def create(self, entry: AuditEntry) -> None:
        """Insert audit entry."""
        await self._conn.execute(
            "INSERT INTO audit_log (user_id, user_role, action, resource, changes, ip_address, user_agent) "
            "VALUES (%s, %s, %s, %s, %s, %s, %s)",
            (
                entry.user_id,
                entry.user_role,
                entry.action,
                entry.resource,
                Jsonb(entry.changes),
                entry.ip_address,
                entry.user_agent,
            ),
        )
